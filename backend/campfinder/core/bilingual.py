"""Bilingual Fields: grouping, flattening and localization of ja/en column pairs.

Invariants:
    - Storage form is flat snake_case: name_ja, name_en, address_ja, ...
    - Grouped form nests each pair: {"name": {"ja": ..., "en": ...}}
    - localize() never returns an empty English value when Japanese exists
    - Pure functions over dicts; inputs are never mutated
"""

import re

from campfinder.core.domain_types import BILINGUAL_FIELDS, DEFAULT_LOCALE, Locale

_CAMEL_BOUNDARY = re.compile(r"_([a-z0-9])")


def snake_to_camel(name: str) -> str:
    """nearest_station_ja -> nearestStationJa"""
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


def group_bilingual(flat: dict) -> dict:
    """Nest every {stem}_ja/{stem}_en pair under {stem}."""
    grouped = dict(flat)
    for stem in BILINGUAL_FIELDS:
        ja_key, en_key = f"{stem}_ja", f"{stem}_en"
        if ja_key not in grouped and en_key not in grouped:
            continue
        grouped[stem] = {
            "ja": grouped.pop(ja_key, None),
            "en": grouped.pop(en_key, None),
        }
    return grouped


def flatten_bilingual(data: dict) -> dict:
    """Inverse of group_bilingual. Accepts snake_case or camelCase stems."""
    flat = dict(data)
    for stem in BILINGUAL_FIELDS:
        for key in (stem, snake_to_camel(stem)):
            nested = flat.get(key)
            if not isinstance(nested, dict):
                continue
            del flat[key]
            if "ja" in nested:
                flat[f"{stem}_ja"] = nested["ja"]
            if "en" in nested:
                flat[f"{stem}_en"] = nested["en"]
    return flat


def pick_locale(ja: str | None, en: str | None, locale: Locale) -> str:
    """Select the value for locale; English falls back to Japanese."""
    if locale == Locale.EN and en:
        return en
    return ja or ""


def localize(flat: dict, locale: Locale = DEFAULT_LOCALE) -> dict:
    """Collapse each bilingual pair to the value for one locale."""
    view = {
        key: value for key, value in flat.items()
        if not any(key in (f"{s}_ja", f"{s}_en") for s in BILINGUAL_FIELDS)
    }
    for stem in BILINGUAL_FIELDS:
        view[stem] = pick_locale(
            flat.get(f"{stem}_ja"), flat.get(f"{stem}_en"), locale,
        )
    view["locale"] = locale.value
    return view

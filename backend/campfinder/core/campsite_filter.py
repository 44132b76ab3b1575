"""Campsite Filter: keyword/price/facility/activity predicate over localized views.

Invariants:
    - A view matches iff ALL four predicates hold (keyword, price, facilities, activities)
    - An empty keyword / empty tag list is a pass-through for that predicate
    - Tag predicates are set intersection (any selected tag present), not subset
    - Unparseable prices extract to 0 and therefore pass any ceiling
    - filter_campsites() is a single pass that preserves input order
"""

import re
from dataclasses import dataclass, field

DEFAULT_MAX_PRICE = 10_000

_DIGITS = re.compile(r"\d+")
_KEYWORD_FIELDS = ("name", "address", "nearest_station")


@dataclass(frozen=True)
class SearchFilters:
    """Search criteria from the public search form."""
    keyword: str = ""
    max_price: int = DEFAULT_MAX_PRICE
    min_price: int | None = None
    facilities: list[str] = field(default_factory=list)
    activities: list[str] = field(default_factory=list)


def extract_price(price: str | None) -> int:
    """First integer in a display price ("¥2,000-¥4,000/泊" -> 2000)."""
    if not price or not isinstance(price, str):
        return 0
    match = _DIGITS.search(price.replace(",", ""))
    return int(match.group(0)) if match else 0


def _matches_keyword(view: dict, keyword: str) -> bool:
    needle = keyword.strip().casefold()
    if not needle:
        return True
    return any(
        needle in (view.get(key) or "").casefold() for key in _KEYWORD_FIELDS
    )


def _matches_price(view: dict, filters: SearchFilters) -> bool:
    value = extract_price(view.get("price"))
    if value > filters.max_price:
        return False
    return filters.min_price is None or value >= filters.min_price


def _intersects(selected: list[str], available: list[str] | None) -> bool:
    if not selected:
        return True
    return bool(set(selected) & set(available or []))


def matches(view: dict, filters: SearchFilters) -> bool:
    return (
        _matches_keyword(view, filters.keyword)
        and _matches_price(view, filters)
        and _intersects(filters.facilities, view.get("facilities"))
        and _intersects(filters.activities, view.get("activities"))
    )


def filter_campsites(views: list[dict], filters: SearchFilters) -> list[dict]:
    """Return the views matching filters, in their original order."""
    return [view for view in views if matches(view, filters)]

"""Label Mapping: free-text facility/activity labels to canonical translation keys.

Invariants:
    - Canonical keys map to themselves (idempotent: map(map(x)) == map(x))
    - Unknown labels are returned unchanged, empty string included
    - Lookup order: exact, case-folded, then with a trailing parenthetical
      qualifier removed ("プール(夏季)" -> "プール")
    - Pure data + pure functions (no IO)

Design Decisions:
    - Static dicts over a DB table: the vocabulary is owned by the UI translation files
"""

import re

# ─── Facilities ──────────────────────────────────────────────────

FACILITY_MAPPING: dict[str, str] = {
    # canonical keys
    "toilet": "toilet",
    "restroom": "restroom",
    "shower": "shower",
    "parking": "parking",
    "wifi": "wifi",
    "kitchen": "kitchen",
    "bbq": "bbq",
    "rental": "rental",
    "shop": "shop",
    "store": "store",
    "laundry": "laundry",
    "campsite": "campsite",
    "pool": "pool",
    "glamping": "glamping",
    "hammocksite": "hammocksite",
    "riverside": "riverside",
    "logcabin": "logcabin",
    "hot_spring": "hot_spring",
    # English synonyms
    "wi-fi": "wifi",
    "bbq area": "bbq",
    "log cabin": "logcabin",
    "hot spring": "hot_spring",
    # Japanese labels
    "トイレ": "toilet",
    "水洗トイレ": "toilet",
    "シャワー": "shower",
    "コインシャワー": "shower",
    "温水シャワー": "shower",
    "駐車場": "parking",
    "無料駐車場": "parking",
    "キッチン": "kitchen",
    "炊事場": "kitchen",
    "炊事棟": "kitchen",
    "BBQ場": "bbq",
    "バーベキュー場": "bbq",
    "レンタル": "rental",
    "レンタル用品": "rental",
    "売店": "shop",
    "ショップ": "shop",
    "ランドリー": "laundry",
    "コインランドリー": "laundry",
    "オートサイト": "campsite",
    "フリーサイト": "campsite",
    "区画サイト": "campsite",
    "プール": "pool",
    "グランピング": "glamping",
    "ハンモックサイト": "hammocksite",
    "河原サイト": "riverside",
    "川沿いサイト": "riverside",
    "ログキャビン": "logcabin",
    "温泉": "hot_spring",
    "天然温泉": "hot_spring",
}

# ─── Activities ──────────────────────────────────────────────────

ACTIVITY_MAPPING: dict[str, str] = {
    # canonical keys
    "hiking": "hiking",
    "bbq": "bbq",
    "fishing": "fishing",
    "canoe": "canoe",
    "boat": "boat",
    "boating": "boating",
    "river": "river",
    "stargazing": "stargazing",
    "swimming": "swimming",
    "cycling": "cycling",
    "photography": "photography",
    "birdwatching": "birdwatching",
    "pool": "pool",
    "nagashisomen": "nagashisomen",
    "shellfishing": "shellfishing",
    "animals": "animals",
    "train": "train",
    "hotspring": "hotspring",
    "forestbath": "forestbath",
    "valley": "valley",
    # English synonyms
    "bird watching": "birdwatching",
    "kayak": "canoe",
    "hot spring": "hotspring",
    # Japanese labels
    "ハイキング": "hiking",
    "登山": "hiking",
    "トレッキング": "hiking",
    "バーベキュー": "bbq",
    "釣り": "fishing",
    "カヌー": "canoe",
    "カヤック": "canoe",
    "ボート": "boat",
    "ボート遊び": "boating",
    "川遊び": "river",
    "星空観察": "stargazing",
    "天体観測": "stargazing",
    "水泳": "swimming",
    "海水浴": "swimming",
    "サイクリング": "cycling",
    "写真撮影": "photography",
    "バードウォッチング": "birdwatching",
    "野鳥観察": "birdwatching",
    "プール": "pool",
    "流しそうめん": "nagashisomen",
    "潮干狩り": "shellfishing",
    "動物ふれあい": "animals",
    "電車見学": "train",
    "温泉": "hotspring",
    "森林浴": "forestbath",
    "渓谷散策": "valley",
}

# ─── Filter options offered by the search UI ─────────────────────

FACILITY_OPTIONS: tuple[dict[str, str], ...] = (
    {"key": "toilet", "ja": "トイレ", "en": "Toilet"},
    {"key": "shower", "ja": "シャワー", "en": "Shower"},
    {"key": "kitchen", "ja": "炊事場", "en": "Kitchen"},
    {"key": "rental", "ja": "レンタル", "en": "Rental"},
    {"key": "shop", "ja": "売店", "en": "Shop"},
    {"key": "parking", "ja": "駐車場", "en": "Parking"},
    {"key": "wifi", "ja": "Wi-Fi", "en": "Wi-Fi"},
)

ACTIVITY_OPTIONS: tuple[dict[str, str], ...] = (
    {"key": "hiking", "ja": "ハイキング", "en": "Hiking"},
    {"key": "bbq", "ja": "バーベキュー", "en": "BBQ"},
    {"key": "fishing", "ja": "釣り", "en": "Fishing"},
    {"key": "canoe", "ja": "カヌー", "en": "Canoe"},
    {"key": "boat", "ja": "ボート", "en": "Boat"},
    {"key": "river", "ja": "川遊び", "en": "River play"},
    {"key": "stargazing", "ja": "星空観察", "en": "Stargazing"},
)

# "(夏季)" / "（夏季）" at the end of a label
_TRAILING_QUALIFIER = re.compile(r"\s*[（(][^（()）]*[)）]\s*$")


def _lookup(table: dict[str, str], label: str) -> str:
    candidate = label.strip()
    if not candidate:
        return label
    while True:
        if candidate in table:
            return table[candidate]
        folded = candidate.casefold()
        if folded in table:
            return table[folded]
        stripped = _TRAILING_QUALIFIER.sub("", candidate)
        if stripped == candidate or not stripped:
            return label
        candidate = stripped


def map_facility(label: str) -> str:
    """Map one facility label to its translation key (unknown -> unchanged)."""
    return _lookup(FACILITY_MAPPING, label)


def map_activity(label: str) -> str:
    """Map one activity label to its translation key (unknown -> unchanged)."""
    return _lookup(ACTIVITY_MAPPING, label)


def map_facilities(labels: list[str]) -> list[str]:
    return [map_facility(label) for label in labels]


def map_activities(labels: list[str]) -> list[str]:
    return [map_activity(label) for label in labels]

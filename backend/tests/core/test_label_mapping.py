"""Label Mapping: free-text facility/activity labels to translation keys.

Tests:
    - Japanese labels and English synonyms map to canonical keys
    - Trailing parenthetical qualifiers are stripped (half- and full-width)
    - Unknown and empty labels pass through unchanged
    - Mapping is idempotent
"""

import pytest

from campfinder.core.label_mapping import (
    ACTIVITY_MAPPING, FACILITY_MAPPING,
    map_activities, map_activity, map_facilities, map_facility,
)


@pytest.mark.parametrize("label, key", [
    ("オートサイト", "campsite"),
    ("水洗トイレ", "toilet"),
    ("売店", "shop"),
    ("炊事場", "kitchen"),
    ("グランピング", "glamping"),
    ("河原サイト", "riverside"),
    ("温泉", "hot_spring"),
    ("Wi-Fi", "wifi"),
])
def test_facility_labels(label, key):
    assert map_facility(label) == key


@pytest.mark.parametrize("label, key", [
    ("川遊び", "river"),
    ("流しそうめん", "nagashisomen"),
    ("潮干狩り", "shellfishing"),
    ("温泉", "hotspring"),
    ("バードウォッチング", "birdwatching"),
])
def test_activity_labels(label, key):
    assert map_activity(label) == key


def test_parenthetical_qualifier_is_stripped():
    assert map_facility("プール(夏季)") == "pool"
    assert map_facility("プール（夏季）") == "pool"
    assert map_activity("釣り (要予約)") == "fishing"


def test_surrounding_whitespace_is_ignored():
    assert map_facility("  シャワー ") == "shower"


def test_unknown_labels_pass_through():
    assert map_facility("ドッグラン") == "ドッグラン"
    assert map_activity("謎の(何か)") == "謎の(何か)"
    assert map_facility("") == ""


def test_mapping_is_idempotent():
    for table, mapper in ((FACILITY_MAPPING, map_facility), (ACTIVITY_MAPPING, map_activity)):
        for key in set(table.values()):
            assert mapper(key) == key


def test_list_mapping_preserves_order_and_duplicates():
    assert map_facilities(["トイレ", "謎", "トイレ"]) == ["toilet", "謎", "toilet"]
    assert map_activities([]) == []

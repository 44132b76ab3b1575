"""Bilingual Fields: grouping, flattening and localization of ja/en pairs."""

from campfinder.core.bilingual import (
    flatten_bilingual, group_bilingual, localize, pick_locale, snake_to_camel,
)
from campfinder.core.domain_types import Locale


def test_snake_to_camel():
    assert snake_to_camel("nearest_station_ja") == "nearestStationJa"
    assert snake_to_camel("price") == "price"


def test_group_nests_pairs_and_keeps_other_fields():
    grouped = group_bilingual({"name_ja": "森", "name_en": None, "price": "¥1"})
    assert grouped == {"name": {"ja": "森", "en": None}, "price": "¥1"}


def test_flatten_accepts_snake_and_camel_stems():
    flat = flatten_bilingual({
        "name": {"ja": "森", "en": "Forest"},
        "nearestStation": {"ja": "駅"},
        "price": "¥1",
    })
    assert flat == {
        "name_ja": "森", "name_en": "Forest",
        "nearest_station_ja": "駅", "price": "¥1",
    }


def test_flatten_leaves_flat_input_untouched():
    data = {"name_ja": "森", "name_en": "Forest"}
    assert flatten_bilingual(data) == data


def test_pick_locale_falls_back_to_japanese():
    assert pick_locale("森", "Forest", Locale.EN) == "Forest"
    assert pick_locale("森", "", Locale.EN) == "森"
    assert pick_locale("森", "Forest", Locale.JA) == "森"
    assert pick_locale(None, None, Locale.JA) == ""


def test_localize_collapses_every_pair():
    view = localize(
        {"name_ja": "森", "name_en": "Forest", "address_ja": "東京", "price": "¥1"},
        Locale.EN,
    )
    assert view["name"] == "Forest"
    assert view["address"] == "東京"
    assert view["cancellation_policy"] == ""
    assert view["locale"] == "en"
    assert "name_ja" not in view

"""Campsite Filter: keyword/price/tag predicate over localized views.

Tests:
    - extract_price reads the first integer, ignoring thousands separators
    - Each predicate passes through when its filter is empty
    - Tag filters match on intersection
    - filter_campsites preserves order
"""

from campfinder.core.campsite_filter import (
    SearchFilters, extract_price, filter_campsites, matches,
)


def _view(**overrides) -> dict:
    view = {
        "name": "高尾の森",
        "address": "東京都八王子市",
        "nearest_station": "高尾駅",
        "price": "¥3,000/泊",
        "facilities": ["toilet", "shower"],
        "activities": ["hiking"],
    }
    view.update(overrides)
    return view


def test_extract_price():
    assert extract_price("¥2,000-¥4,000/泊") == 2000
    assert extract_price("12000") == 12000
    assert extract_price("無料") == 0
    assert extract_price("") == 0
    assert extract_price(None) == 0


def test_default_filters_match_everything_under_ceiling():
    assert matches(_view(), SearchFilters())
    assert not matches(_view(price="¥12,000/泊"), SearchFilters())


def test_keyword_is_case_insensitive_over_name_address_station():
    assert matches(_view(name="Takao Forest"), SearchFilters(keyword="forest"))
    assert matches(_view(), SearchFilters(keyword="八王子"))
    assert matches(_view(), SearchFilters(keyword="高尾駅"))
    assert not matches(_view(), SearchFilters(keyword="奥多摩"))


def test_price_bounds_are_inclusive():
    assert matches(_view(), SearchFilters(max_price=3000))
    assert matches(_view(), SearchFilters(min_price=3000))
    assert not matches(_view(), SearchFilters(min_price=3001))


def test_unparseable_price_passes_ceiling():
    assert matches(_view(price="要問合せ"), SearchFilters(max_price=0))


def test_tag_filters_use_intersection():
    assert matches(_view(), SearchFilters(facilities=["wifi", "toilet"]))
    assert not matches(_view(), SearchFilters(facilities=["wifi"]))
    assert not matches(_view(activities=None), SearchFilters(activities=["hiking"]))


def test_filter_preserves_order():
    views = [_view(name="C"), _view(name="A", price="¥20,000"), _view(name="B")]
    assert [v["name"] for v in filter_campsites(views, SearchFilters())] == ["C", "B"]

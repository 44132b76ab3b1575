"""Campsite Routes: public list/search/detail and admin create/update/delete.

Invariants:
    - Responses are camelCase with bilingual pairs nested under their stem
    - Writes require an ADMIN cookie (401 without, 403 for other roles)
    - Unknown ids return 404 with the structured error envelope
    - Invalid locale query parameters return 400
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select

from campfinder.models.campsite import Campsite
from tests.services.fakes import PUBLIC_PREFIX, campsite_fields


# --- list / detail -------------------------------------------------------------

async def test_list_empty_directory(client):
    res = await client.get("/api/v1/campsites")
    assert res.status_code == 200
    assert res.json() == {"campsites": []}


async def test_list_returns_nested_bilingual_camel_case(client, make_campsite):
    await make_campsite()
    res = await client.get("/api/v1/campsites")

    site = res.json()["campsites"][0]
    assert site["name"] == {"ja": "テストキャンプ場", "en": "Test Campsite"}
    assert site["nearestStation"]["ja"] == "高尾駅"
    assert site["priceMin"] == 3000
    assert "name_ja" not in site


async def test_list_is_newest_first(client, make_campsite):
    await make_campsite(name_ja="古いキャンプ場", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    await make_campsite(name_ja="新しいキャンプ場", created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))

    res = await client.get("/api/v1/campsites")
    names = [c["name"]["ja"] for c in res.json()["campsites"]]
    assert names == ["新しいキャンプ場", "古いキャンプ場"]


async def test_list_query_is_case_insensitive(client, make_campsite):
    await make_campsite(name_en="Lake Okutama Campsite", name_ja="奥多摩キャンプ場")
    await make_campsite(name_en="Takao Forest", name_ja="高尾の森")

    res = await client.get("/api/v1/campsites", params={"q": "okutama"})
    names = [c["name"]["en"] for c in res.json()["campsites"]]
    assert names == ["Lake Okutama Campsite"]


async def test_list_query_wildcards_are_literal(client, make_campsite):
    """'%' in q must not match every row."""
    await make_campsite()
    res = await client.get("/api/v1/campsites", params={"q": "%"})
    assert res.json()["campsites"] == []


async def test_detail_returns_success_envelope(client, make_campsite):
    campsite = await make_campsite()
    res = await client.get(f"/api/v1/campsites/{campsite.id}")

    body = res.json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["data"]["id"] == str(campsite.id)
    assert body["localized"] is None


async def test_detail_with_locale_adds_localized_view(client, make_campsite):
    campsite = await make_campsite()
    res = await client.get(
        f"/api/v1/campsites/{campsite.id}", params={"locale": "en"},
    )

    localized = res.json()["localized"]
    assert localized["locale"] == "en"
    assert localized["name"] == "Test Campsite"
    assert localized["nearestStation"] == "Takao Station"


async def test_english_view_falls_back_to_japanese(client, make_campsite):
    campsite = await make_campsite(name_en=None, description_en="")
    res = await client.get(
        f"/api/v1/campsites/{campsite.id}", params={"locale": "en"},
    )

    localized = res.json()["localized"]
    assert localized["name"] == "テストキャンプ場"
    assert localized["description"] == "川沿いの静かなキャンプ場"


async def test_detail_invalid_locale_returns_400(client, make_campsite):
    campsite = await make_campsite()
    res = await client.get(
        f"/api/v1/campsites/{campsite.id}", params={"locale": "fr"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_detail_missing_returns_404(client):
    res = await client.get(f"/api/v1/campsites/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_options_lists_facility_and_activity_keys(client):
    res = await client.get("/api/v1/campsites/options")
    body = res.json()
    assert {"key": "toilet", "ja": "トイレ", "en": "Toilet"} in body["facilities"]
    assert "stargazing" in [o["key"] for o in body["activities"]]


async def test_api_responses_carry_security_headers(client):
    res = await client.get("/api/v1/campsites")
    assert res.headers["X-Frame-Options"] == "DENY"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


# --- search ---------------------------------------------------------------------

async def test_search_by_keyword_and_price(client, make_campsite):
    await make_campsite(name_ja="高尾の森", price="¥2,000/泊")
    await make_campsite(name_ja="高尾グランピング", price="¥15,000/泊")
    await make_campsite(
        name_ja="奥多摩キャンプ場", nearest_station_ja="奥多摩駅", price="¥1,500/泊",
    )

    res = await client.get(
        "/api/v1/campsites/search", params={"keyword": "高尾", "max_price": 5000},
    )

    body = res.json()
    assert body["count"] == 1
    assert body["campsites"][0]["name"] == "高尾の森"


async def test_search_facilities_match_any_selected(client, make_campsite):
    await make_campsite(name_ja="A", facilities=["toilet"])
    await make_campsite(name_ja="B", facilities=["wifi", "parking"])
    await make_campsite(name_ja="C", facilities=["shower"])

    res = await client.get(
        "/api/v1/campsites/search", params={"facilities": ["toilet", "wifi"]},
    )
    names = sorted(c["name"] for c in res.json()["campsites"])
    assert names == ["A", "B"]


async def test_search_english_keyword_uses_english_fields(client, make_campsite):
    await make_campsite(name_ja="高尾の森", name_en="Takao Forest")

    ja = await client.get("/api/v1/campsites/search", params={"keyword": "forest"})
    en = await client.get(
        "/api/v1/campsites/search", params={"keyword": "forest", "locale": "en"},
    )
    assert ja.json()["count"] == 0
    assert en.json()["campsites"][0]["name"] == "Takao Forest"


async def test_search_invalid_locale_returns_400(client):
    res = await client.get("/api/v1/campsites/search", params={"locale": "de"})
    assert res.status_code == 400


# --- admin writes -----------------------------------------------------------------

def _create_payload(**overrides) -> dict:
    payload = {
        "name": {"ja": "新規キャンプ場", "en": "New Campsite"},
        "address": {"ja": "山梨県富士河口湖町1", "en": "1 Fujikawaguchiko"},
        "nearestStation": {"ja": "河口湖駅", "en": "Kawaguchiko Station"},
        "accessTime": {"ja": "車で10分", "en": "10 min by car"},
        "description": {"ja": "富士山が見える", "en": "Mt. Fuji views"},
        "lat": 35.5,
        "lng": 138.7,
        "price": "¥4,000/泊",
        "priceMin": 4000,
        "priceMax": 6000,
        "facilities": ["トイレ", "温泉"],
        "activities": ["川遊び"],
    }
    payload.update(overrides)
    return payload


async def test_create_requires_authentication(client):
    res = await client.post("/api/v1/campsites", json=_create_payload())
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_create_rejects_non_admin(client, user_headers):
    res = await client.post(
        "/api/v1/campsites", json=_create_payload(), headers=user_headers,
    )
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "管理者権限が必要です"


async def test_create_as_admin_maps_labels(client, admin_headers, test_db):
    res = await client.post(
        "/api/v1/campsites", json=_create_payload(), headers=admin_headers,
    )

    assert res.status_code == 201
    body = res.json()
    assert body["message"]
    assert body["campsite"]["name"]["en"] == "New Campsite"
    assert body["campsite"]["facilities"] == ["toilet", "hot_spring"]
    assert body["campsite"]["activities"] == ["river"]

    stored = (await test_db.execute(select(Campsite))).scalars().all()
    assert [c.name_ja for c in stored] == ["新規キャンプ場"]


async def test_create_rejects_inverted_price_range(client, admin_headers):
    res = await client.post(
        "/api/v1/campsites",
        json=_create_payload(priceMin=5000, priceMax=1000),
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_replaces_fields(client, admin_headers, make_campsite):
    campsite = await make_campsite()
    res = await client.put(
        f"/api/v1/campsites/{campsite.id}",
        json=_create_payload(price="¥9,000/泊", priceMin=9000, priceMax=9000),
        headers=admin_headers,
    )

    body = res.json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["data"]["name"]["ja"] == "新規キャンプ場"
    assert body["data"]["price"] == "¥9,000/泊"


async def test_update_missing_returns_404(client, admin_headers):
    res = await client.put(
        f"/api/v1/campsites/{uuid4()}", json=_create_payload(), headers=admin_headers,
    )
    assert res.status_code == 404


async def test_delete_removes_record_and_stored_images(
    client, admin_headers, make_campsite, fake_storage, test_db,
):
    campsite = await make_campsite(images=[
        f"{PUBLIC_PREFIX}/campsite-images/abc/1700000000000.jpg",
        "https://images.unsplash.com/photo-1?w=800",
    ])
    res = await client.delete(
        f"/api/v1/campsites/{campsite.id}", headers=admin_headers,
    )

    assert res.status_code == 200
    assert res.json()["success"] is True
    assert fake_storage.removed == ["abc/1700000000000.jpg"]
    result = await test_db.execute(select(Campsite).where(Campsite.id == campsite.id))
    assert result.scalar_one_or_none() is None


async def test_delete_ignores_storage_failures(
    client, admin_headers, make_campsite, fake_storage,
):
    fake_storage.fail_remove = True
    campsite = await make_campsite(
        images=[f"{PUBLIC_PREFIX}/campsite-images/abc/1.jpg"],
    )
    res = await client.delete(
        f"/api/v1/campsites/{campsite.id}", headers=admin_headers,
    )
    assert res.status_code == 200


async def test_delete_missing_returns_404(client, admin_headers):
    res = await client.delete(f"/api/v1/campsites/{uuid4()}", headers=admin_headers)
    assert res.status_code == 404


async def test_camel_case_and_snake_case_payloads_are_equivalent(client, admin_headers):
    flat = campsite_fields(name_ja="スネークケース")
    res = await client.post("/api/v1/campsites", json=flat, headers=admin_headers)
    assert res.status_code == 201
    assert res.json()["campsite"]["name"]["ja"] == "スネークケース"

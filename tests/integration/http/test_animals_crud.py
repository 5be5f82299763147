from __future__ import annotations

import pytest

from senda.utils.datetime_tz import local_today


@pytest.mark.asyncio
async def test_create_then_list_returns_single_row(client, auth_headers, animal_payload):
    created = await client.post("/api/v1/animals", json=animal_payload(), headers=auth_headers)
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["tag"] == "SND-001"
    assert body["status_label"] == "Saludable"
    assert body["ear_tag_label"] == "Verde"

    listed = await client.get("/api/v1/animals", headers=auth_headers)
    assert listed.status_code == 200, listed.text
    rows = [r for r in listed.json()["items"] if r["tag"] == "SND-001" and r["status"] == "healthy"]
    assert len(rows) == 1


@pytest.mark.asyncio
async def test_duplicate_tag_conflicts(client, auth_headers, animal_payload):
    first = await client.post("/api/v1/animals", json=animal_payload(), headers=auth_headers)
    assert first.status_code == 201
    second = await client.post(
        "/api/v1/animals", json=animal_payload(name="Otra"), headers=auth_headers
    )
    assert second.status_code == 409
    assert second.json()["code"] == "conflict"


@pytest.mark.asyncio
async def test_create_validates_fields(client, auth_headers, animal_payload):
    resp = await client.post(
        "/api/v1/animals",
        json=animal_payload(tag="AB", gender="other", birth_date="10/03/2021"),
        headers=auth_headers,
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    fields = {d["field"] for d in body["details"]}
    assert {"tag", "gender", "birth_date"} <= fields


@pytest.mark.asyncio
async def test_length_limits_apply_after_stripping(client, auth_headers, animal_payload):
    resp = await client.post(
        "/api/v1/animals", json=animal_payload(tag="  ab  ", name=" x "), headers=auth_headers
    )
    assert resp.status_code == 422
    fields = {d["field"] for d in resp.json()["details"]}
    assert fields == {"tag", "name"}

    resp = await client.post(
        "/api/v1/animals", json=animal_payload(tag="  SND-001 "), headers=auth_headers
    )
    assert resp.status_code == 201
    assert resp.json()["tag"] == "SND-001"


@pytest.mark.asyncio
async def test_search_and_gender_filter(client, auth_headers, animal_payload):
    await client.post("/api/v1/animals", json=animal_payload(), headers=auth_headers)
    await client.post(
        "/api/v1/animals",
        json=animal_payload(tag="SND-002", name="Tormenta", gender="male", category="toro"),
        headers=auth_headers,
    )

    males = await client.get(
        "/api/v1/animals",
        params={"filter_column": "gender", "filter_value": "macho"},
        headers=auth_headers,
    )
    assert males.status_code == 200
    items = males.json()["items"]
    assert [i["tag"] for i in items] == ["SND-002"]
    assert all(i["gender"] == "male" for i in items)

    none = await client.get("/api/v1/animals", params={"q": "zzz"}, headers=auth_headers)
    assert none.json()["items"] == []
    assert none.json()["empty_message"] == "No se encontraron animales"
    assert none.json()["total"] == 2


@pytest.mark.asyncio
async def test_unknown_filter_column_rejected(client, auth_headers):
    resp = await client.get(
        "/api/v1/animals",
        params={"filter_column": "weight", "filter_value": "1"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_health_and_delete(client, auth_headers, animal_payload):
    created = (await client.post("/api/v1/animals", json=animal_payload(), headers=auth_headers)).json()
    animal_id = created["id"]

    edit = await client.patch(
        f"/api/v1/animals/{animal_id}",
        json={"name": "Lucerita", "ear_tag": "sky"},
        headers=auth_headers,
    )
    assert edit.status_code == 200, edit.text
    assert edit.json()["name"] == "Lucerita"
    assert edit.json()["ear_tag_label"] == "Celeste"
    assert edit.json()["tag"] == "SND-001"

    health = await client.put(
        f"/api/v1/animals/{animal_id}/health",
        json={"status": "pregnant", "professional": "Dra. Paz"},
        headers=auth_headers,
    )
    assert health.status_code == 200, health.text
    assert health.json()["status"] == "pregnant"
    assert health.json()["status_label"] == "Preñada"

    vaccine = await client.post(
        "/api/v1/vaccines",
        json={"animal_id": animal_id, "vaccine_type": "Aftosa", "date": local_today().isoformat()},
        headers=auth_headers,
    )
    assert vaccine.status_code == 201, vaccine.text

    deleted = await client.delete(f"/api/v1/animals/{animal_id}", headers=auth_headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/api/v1/animals/{animal_id}", headers=auth_headers)
    assert missing.status_code == 404
    vaccines = await client.get("/api/v1/vaccines", headers=auth_headers)
    assert vaccines.json() == []


@pytest.mark.asyncio
async def test_animals_are_scoped_per_user(client, register_user, animal_payload):
    owner = await register_user("a@example.com")
    other = await register_user("b@example.com")
    created = await client.post(
        "/api/v1/animals",
        json=animal_payload(),
        headers={"Authorization": owner["Authorization"]},
    )
    animal_id = created.json()["id"]

    other_headers = {"Authorization": other["Authorization"]}
    assert (await client.get("/api/v1/animals", headers=other_headers)).json()["items"] == []
    assert (await client.get(f"/api/v1/animals/{animal_id}", headers=other_headers)).status_code == 404
    # Same tag is free for another user
    again = await client.post("/api/v1/animals", json=animal_payload(), headers=other_headers)
    assert again.status_code == 201


@pytest.mark.asyncio
async def test_carnet_lists_vaccines_newest_first(client, auth_headers, animal_payload):
    animal = (await client.post("/api/v1/animals", json=animal_payload(), headers=auth_headers)).json()
    for applied in ("2024-01-10", "2024-06-01"):
        resp = await client.post(
            "/api/v1/vaccines",
            json={"animal_id": animal["id"], "vaccine_type": "Brucelosis", "date": applied},
            headers=auth_headers,
        )
        assert resp.status_code == 201

    carnet = await client.get(f"/api/v1/animals/{animal['id']}/carnet", headers=auth_headers)
    assert carnet.status_code == 200, carnet.text
    body = carnet.json()
    assert [v["date"] for v in body["vaccines"]] == ["2024-06-01", "2024-01-10"]
    assert body["vaccines"][0]["date_label"] == "01 de junio de 2024"
    assert body["birth_date_label"] == "10 de marzo de 2021"
    assert body["age_label"].endswith("años")
    assert body["empty_message"] is None

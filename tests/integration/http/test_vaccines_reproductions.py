from __future__ import annotations

from datetime import date, timedelta

import pytest

from senda.utils.datetime_tz import local_today


async def _create(client, headers, payload):
    resp = await client.post("/api/v1/animals", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_vaccine_embeds_animal(client, auth_headers, animal_payload):
    animal = await _create(client, auth_headers, animal_payload())
    resp = await client.post(
        "/api/v1/vaccines",
        json={
            "animal_id": animal["id"],
            "vaccine_type": "Aftosa",
            "date": "2024-10-01",
            "next_date": "2025-04-01",
            "notes": "Dosis anual",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["animal_name"] == "Lucera"
    assert body["animal_tag"] == "SND-001"

    listed = await client.get(
        "/api/v1/vaccines", params={"animal_id": animal["id"]}, headers=auth_headers
    )
    assert [v["vaccine_type"] for v in listed.json()] == ["Aftosa"]


@pytest.mark.asyncio
async def test_vaccine_for_unknown_animal_is_not_found(client, auth_headers):
    resp = await client.post(
        "/api/v1/vaccines",
        json={
            "animal_id": "00000000-0000-0000-0000-000000000001",
            "vaccine_type": "Aftosa",
            "date": "2024-10-01",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_vaccine_type_too_short(client, auth_headers, animal_payload):
    animal = await _create(client, auth_headers, animal_payload())
    resp = await client.post(
        "/api/v1/vaccines",
        json={"animal_id": animal["id"], "vaccine_type": "A", "date": "2024-10-01"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_reproduction_expected_birth_is_recomputed(client, auth_headers, animal_payload):
    mother = await _create(client, auth_headers, animal_payload())
    father = await _create(
        client,
        auth_headers,
        animal_payload(tag="SND-900", name="Toro", gender="male", category="toro"),
    )
    resp = await client.post(
        "/api/v1/reproductions",
        json={
            "mother_id": mother["id"],
            "father_id": father["id"],
            "service_method": "natural",
            "service_date": "2024-01-01",
            "expected_birth_date": "2030-01-01",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["expected_birth_date"] == (date(2024, 1, 1) + timedelta(days=278)).isoformat()
    assert body["status"] == "pending"

    listed = await client.get(
        "/api/v1/reproductions", params={"mother_id": mother["id"]}, headers=auth_headers
    )
    assert len(listed.json()) == 1


@pytest.mark.asyncio
async def test_reproduction_rejects_swapped_parents(client, auth_headers, animal_payload):
    mother = await _create(client, auth_headers, animal_payload())
    father = await _create(
        client, auth_headers, animal_payload(tag="SND-900", name="Toro", gender="male")
    )
    resp = await client.post(
        "/api/v1/reproductions",
        json={
            "mother_id": father["id"],
            "father_id": mother["id"],
            "service_method": "artificial",
            "service_date": local_today().isoformat(),
        },
        headers=auth_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["message"] == "Mother must be a female animal"

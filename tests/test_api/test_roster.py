"""Tests for trainer and client endpoints."""

import pytest
from httpx import AsyncClient

HEADERS = {"X-Trainer-Id": "1"}


@pytest.mark.asyncio
async def test_create_and_get_trainer(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/trainers", json={"name": "Sam Coach", "email": "sam@example.com"}
    )
    assert resp.status_code == 201
    trainer_id = resp.json()["id"]

    resp2 = await client.get(f"/api/trainers/{trainer_id}")
    assert resp2.status_code == 200
    assert resp2.json()["email"] == "sam@example.com"


@pytest.mark.asyncio
async def test_create_trainer_duplicate_email(client: AsyncClient) -> None:
    body = {"name": "Sam Coach", "email": "sam@example.com"}
    await client.post("/api/trainers", json=body)
    resp = await client.post("/api/trainers", json=body)
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_get_trainer_not_found(client: AsyncClient) -> None:
    resp = await client.get("/api/trainers/999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_clients_are_scoped_to_trainer(client: AsyncClient) -> None:
    await client.post("/api/trainers", json={"name": "A", "email": "a@example.com"})
    await client.post("/api/trainers", json={"name": "B", "email": "b@example.com"})

    for first, last in (("Zoe", "Young"), ("Ada", "Lovelace")):
        resp = await client.post(
            "/api/clients",
            headers=HEADERS,
            json={"first_name": first, "last_name": last, "experience_level": "intermediate"},
        )
        assert resp.status_code == 201
        assert resp.json()["trainer_id"] == 1

    resp = await client.get("/api/clients", headers=HEADERS)
    assert [c["last_name"] for c in resp.json()] == ["Lovelace", "Young"]

    other = await client.get("/api/clients", headers={"X-Trainer-Id": "2"})
    assert other.json() == []

    client_id = resp.json()[0]["id"]
    assert (await client.get(f"/api/clients/{client_id}", headers=HEADERS)).status_code == 200
    assert (
        await client.get(f"/api/clients/{client_id}", headers={"X-Trainer-Id": "2"})
    ).status_code == 404


@pytest.mark.asyncio
async def test_create_client_requires_trainer_header(client: AsyncClient) -> None:
    resp = await client.post("/api/clients", json={"first_name": "Ada", "last_name": "Lovelace"})
    assert resp.status_code == 401

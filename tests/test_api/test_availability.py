"""Tests for availability API endpoints."""

from datetime import date, datetime

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import test_session
from trainertracker.models.client import Client
from trainertracker.models.session import TrainingSession
from trainertracker.models.trainer import Trainer

HEADERS = {"X-Trainer-Id": "1"}
MONDAY = date(2024, 6, 10)


async def _create_trainer(session: AsyncSession) -> Trainer:
    trainer = Trainer(id=1, name="Test Trainer", email="trainer@example.com")
    session.add(trainer)
    await session.commit()
    return trainer


async def _create_booking(session: AsyncSession, start: datetime, end: datetime | None) -> None:
    session.add(Client(id=1, trainer_id=1, first_name="Ada", last_name="Client"))
    session.add(TrainingSession(trainer_id=1, client_id=1, start_time=start, end_time=end))
    await session.commit()


def _monday_rule(start: str = "09:00", end: str = "12:00") -> dict:
    return {"day_of_week": 1, "start_time": start, "end_time": end}


@pytest.mark.asyncio
async def test_set_availability(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={
            "availabilities": [
                _monday_rule(),
                {"day_of_week": 3, "start_time": "14:00", "end_time": "18:00", "virtual": False},
            ],
        },
    )
    assert resp.status_code == 201
    data = resp.json()
    assert len(data["availabilities"]) == 2
    assert data["availabilities"][0]["day_of_week"] == 1
    assert data["availabilities"][0]["max_sessions_per_day"] == 8
    assert data["availabilities"][1]["virtual"] is False
    assert data["exceptions"] == []


@pytest.mark.asyncio
async def test_set_availability_replaces_existing(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    await client.post(
        "/api/availability",
        headers=HEADERS,
        json={
            "availabilities": [_monday_rule()],
            "exceptions": [{"date": "2024-06-17", "reason": "Holiday"}],
        },
    )
    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [{"day_of_week": 5, "start_time": "07:00", "end_time": "10:00"}]},
    )
    assert resp.status_code == 201

    resp2 = await client.get(
        "/api/availability", headers=HEADERS, params={"include_exceptions": "true"}
    )
    data = resp2.json()
    assert [r["day_of_week"] for r in data["availabilities"]] == [5]
    # Exceptions are untouched when omitted from the payload
    assert len(data["exceptions"]) == 1
    assert data["exceptions"][0]["is_available"] is False


@pytest.mark.asyncio
async def test_get_availability_without_exceptions(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    await client.post(
        "/api/availability",
        headers=HEADERS,
        json={
            "availabilities": [_monday_rule()],
            "exceptions": [{"date": "2024-06-17"}],
        },
    )
    resp = await client.get("/api/availability", headers=HEADERS)
    assert resp.status_code == 200
    assert len(resp.json()["availabilities"]) == 1
    assert resp.json()["exceptions"] == []


@pytest.mark.asyncio
async def test_set_availability_rejects_malformed_time(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [_monday_rule(start="9am")]},
    )
    assert resp.status_code == 422
    assert "HH:MM" in resp.text


@pytest.mark.asyncio
async def test_set_availability_rejects_inverted_window(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [_monday_rule(start="12:00", end="09:00")]},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_set_availability_rejects_bad_weekday(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [{"day_of_week": 7, "start_time": "09:00", "end_time": "10:00"}]},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_availability_requires_trainer(client: AsyncClient) -> None:
    resp = await client.get("/api/availability")
    assert resp.status_code == 401


# ── Slots ──


@pytest.mark.asyncio
async def test_slots_skip_existing_session(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)
        await _create_booking(session, datetime(2024, 6, 10, 10), datetime(2024, 6, 10, 11))

    await client.post("/api/availability", headers=HEADERS, json={"availabilities": [_monday_rule()]})

    resp = await client.get(
        "/api/availability/slots",
        params={"trainer_id": 1, "date": MONDAY.isoformat(), "duration": 60},
    )
    assert resp.status_code == 200
    assert resp.json()["slots"] == [
        {"start_time": "2024-06-10T09:00:00", "end_time": "2024-06-10T10:00:00", "duration": 60},
        {"start_time": "2024-06-10T11:00:00", "end_time": "2024-06-10T12:00:00", "duration": 60},
    ]


@pytest.mark.asyncio
async def test_slots_default_duration(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [_monday_rule(start="09:00", end="10:30")]},
    )
    resp = await client.get(
        "/api/availability/slots", params={"trainer_id": 1, "date": MONDAY.isoformat()}
    )
    starts = [s["start_time"][11:16] for s in resp.json()["slots"]]
    assert starts == ["09:00", "09:30"]
    assert all(s["duration"] == 60 for s in resp.json()["slots"])


@pytest.mark.asyncio
async def test_slots_empty_for_unavailable_exception(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    await client.post(
        "/api/availability",
        headers=HEADERS,
        json={
            "availabilities": [_monday_rule()],
            "exceptions": [{"date": MONDAY.isoformat(), "is_available": False, "reason": "Sick"}],
        },
    )
    resp = await client.get(
        "/api/availability/slots", params={"trainer_id": 1, "date": MONDAY.isoformat()}
    )
    assert resp.status_code == 200
    assert resp.json() == {"slots": []}


@pytest.mark.asyncio
async def test_slots_exception_overrides_hours(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    await client.post(
        "/api/availability",
        headers=HEADERS,
        json={
            "availabilities": [_monday_rule()],
            "exceptions": [
                {"date": MONDAY.isoformat(), "is_available": True, "start_time": "11:00"}
            ],
        },
    )
    resp = await client.get(
        "/api/availability/slots",
        params={"trainer_id": 1, "date": MONDAY.isoformat(), "duration": 30},
    )
    starts = [s["start_time"][11:16] for s in resp.json()["slots"]]
    assert starts == ["11:00", "11:30"]


@pytest.mark.asyncio
async def test_slots_empty_without_weekly_rule(client: AsyncClient) -> None:
    resp = await client.get(
        "/api/availability/slots", params={"trainer_id": 1, "date": "2024-06-11"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"slots": []}


@pytest.mark.asyncio
async def test_slots_require_trainer_and_date(client: AsyncClient) -> None:
    resp = await client.get("/api/availability/slots", params={"trainer_id": 1})
    assert resp.status_code == 422
    resp = await client.get("/api/availability/slots", params={"date": "2024-06-10"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_slots_reject_non_positive_duration(client: AsyncClient) -> None:
    resp = await client.get(
        "/api/availability/slots",
        params={"trainer_id": 1, "date": "2024-06-10", "duration": 0},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_set_availability_rejects_two_windows_on_one_day(client: AsyncClient) -> None:
    async with test_session() as session:
        await _create_trainer(session)

    resp = await client.post(
        "/api/availability",
        headers=HEADERS,
        json={"availabilities": [_monday_rule("09:00", "12:00"), _monday_rule("14:00", "17:00")]},
    )
    assert resp.status_code == 422
    assert "day_of_week" in resp.text

"""
Integration tests for the scheduler API with the in-memory repository.
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from dayplan.api.deps import get_plan_repository
from dayplan.infrastructure.local.plan_repository import InMemoryPlanRepository
from main import create_app

USER_ID = "test_user"
HEADERS = {"X-User-Id": USER_ID}


@pytest.fixture
def plan_repo():
    return InMemoryPlanRepository()


@pytest.fixture
async def client(plan_repo):
    app = create_app()
    app.dependency_overrides[get_plan_repository] = lambda: plan_repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_interrupt_then_adopt_flow(client, plan_repo):
    """Interrupt leaves a block unplaced, then adopting tomorrow morning moves it."""
    plan = await plan_repo.create(USER_ID, date(2026, 2, 8), "UTC")
    day_start = 1770508800000  # 2026-02-08T00:00:00Z
    hour = 60 * 60 * 1000
    await plan_repo.add_window(USER_ID, plan.id, day_start + 9 * hour, day_start + 12 * hour)
    first = await plan_repo.add_block(USER_ID, plan.id, day_start + 9 * hour, day_start + 10 * hour)
    second = await plan_repo.add_block(USER_ID, plan.id, day_start + 10 * hour, day_start + 12 * hour)

    response = await client.post(
        "/api/scheduler/interrupt",
        json={"plan_id": plan.id, "start": day_start + 9 * hour, "duration": hour},
        headers=HEADERS,
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["ok"] is True
    assert data["moved"] == [
        {
            "id": first.id,
            "from": {"start": day_start + 9 * hour, "end": day_start + 10 * hour},
            "to": {"start": day_start + 10 * hour, "end": day_start + 11 * hour},
        }
    ]
    assert data["unplaced"] == [{"id": second.id, "duration": 2 * hour}]
    assert [c["label"] for c in data["candidates"]] == [
        "today_end",
        "tomorrow_morning",
        "tomorrow_evening",
    ]
    morning = data["candidates"][1]
    assert morning["start"] == day_start + 30 * hour
    assert morning["end"] == day_start + 32 * hour

    response = await client.post(
        "/api/scheduler/adopt",
        json={"plan_id": plan.id, "label": "tomorrow_morning", "block_ids": [second.id]},
        headers=HEADERS,
    )

    assert response.status_code == 200, response.text
    data = response.json()
    next_plan = await plan_repo.get_by_date(USER_ID, date(2026, 2, 9))
    assert data["target_plan_id"] == next_plan.id
    assert data["adopted"][0]["to"] == {
        "start": day_start + 30 * hour,
        "end": day_start + 32 * hour,
    }


@pytest.mark.asyncio
async def test_interrupt_requires_duration_or_end(client, plan_repo):
    plan = await plan_repo.create(USER_ID, date(2026, 2, 8), "UTC")

    response = await client.post(
        "/api/scheduler/interrupt",
        json={"plan_id": plan.id, "start": 1000},
        headers=HEADERS,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_plan_of_another_user_is_not_found(client, plan_repo):
    plan = await plan_repo.create("someone-else", date(2026, 2, 8), "UTC")

    response = await client.post(
        "/api/scheduler/interrupt",
        json={"plan_id": plan.id, "start": 1000, "duration": 60},
        headers=HEADERS,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_adopt_rejects_unknown_label(client, plan_repo):
    plan = await plan_repo.create(USER_ID, date(2026, 2, 8), "UTC")

    response = await client.post(
        "/api/scheduler/adopt",
        json={"plan_id": plan.id, "label": "next_week"},
        headers=HEADERS,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_adopt_rejects_block_listed_twice(client, plan_repo):
    plan = await plan_repo.create(USER_ID, date(2026, 2, 8), "UTC")
    day_start = 1770508800000  # 2026-02-08T00:00:00Z
    hour = 60 * 60 * 1000
    block = await plan_repo.add_block(USER_ID, plan.id, day_start + 14 * hour, day_start + 15 * hour)

    response = await client.post(
        "/api/scheduler/adopt",
        json={"plan_id": plan.id, "label": "tomorrow_morning", "block_ids": [block.id, block.id]},
        headers=HEADERS,
    )

    assert response.status_code == 422, response.text
    assert response.json()["detail"]["block_ids"] == [block.id]
    assert await plan_repo.get_by_date(USER_ID, date(2026, 2, 9)) is None
    stored = await plan_repo.list_blocks(USER_ID, plan.id)
    assert [(b.id, b.start) for b in stored] == [(block.id, day_start + 14 * hour)]


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

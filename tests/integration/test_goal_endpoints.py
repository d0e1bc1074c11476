"""Integration tests for goal endpoints."""
import logging
import sqlite3
import pytest
from unittest.mock import AsyncMock


async def register(app_client, email="goals@example.com"):
    """Register a user and return its id."""
    response = await app_client.post(
        "/user",
        json={
            "firstName": "Goal",
            "lastName": "Setter",
            "email": email,
            "password": "password123",
        },
    )
    return response.json()["userId"]


async def create_goal(app_client, user_id, timespan="week", content="Run 20km"):
    response = await app_client.post(
        "/goal",
        json={"userId": user_id, "timespan": timespan, "goalContent": content},
    )
    return response.json()


@pytest.mark.asyncio
class TestGoalList:
    """Tests for GET /goal."""

    async def test_list_goals_empty(self, app_client):
        """Test listing goals on an empty table returns an empty array."""
        response = await app_client.get("/goal")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_goals_with_data(self, app_client):
        """Test listing goals with data."""
        user_id = await register(app_client)
        await create_goal(app_client, user_id, "week", "Goal 1")
        await create_goal(app_client, user_id, "year", "Goal 2")

        response = await app_client.get("/goal")

        assert response.status_code == 200
        data = response.json()
        assert [goal["goalContent"] for goal in data] == ["Goal 1", "Goal 2"]

    async def test_list_goals_store_failure(self, app_client, monkeypatch):
        """Test that a store failure while listing is a bare 500."""
        from kansas.stores.goal_store import GoalStore

        monkeypatch.setattr(
            GoalStore, "list_all",
            AsyncMock(side_effect=sqlite3.OperationalError("disk I/O error")),
        )

        response = await app_client.get("/goal")

        assert response.status_code == 500
        assert response.content == b""


@pytest.mark.asyncio
class TestGoalGet:
    """Tests for GET /goal/{goalId}."""

    async def test_get_goal_success(self, app_client):
        """Test getting an existing goal returns it with its id."""
        user_id = await register(app_client)
        created = await create_goal(app_client, user_id)

        response = await app_client.get(f"/goal/{created['goalId']}")

        assert response.status_code == 200
        assert response.json() == {
            "goalId": created["goalId"],
            "userId": user_id,
            "timespan": "week",
            "goalContent": "Run 20km",
        }

    async def test_get_goal_not_found(self, app_client):
        """Test that an unknown goal is 404 with no body."""
        response = await app_client.get("/goal/4242")

        assert response.status_code == 404
        assert response.content == b""

    async def test_get_goal_non_numeric_id(self, app_client):
        """Test that a non-numeric id is rejected as a client error."""
        response = await app_client.get("/goal/not-a-number")

        assert response.status_code == 422

    async def test_get_goal_store_failure(self, app_client, monkeypatch, caplog):
        """Test that a store failure is logged and answered with a bare 500."""
        from kansas.stores.goal_store import GoalStore

        monkeypatch.setattr(
            GoalStore, "find_by_id",
            AsyncMock(side_effect=sqlite3.OperationalError("disk I/O error")),
        )

        with caplog.at_level(logging.ERROR):
            response = await app_client.get("/goal/1")

        assert response.status_code == 500
        assert response.content == b""
        assert "Exception getting goal: disk I/O error" in caplog.text

    async def test_get_goal_connection_drop(self, app_client, tmp_path):
        """Test that an unreachable database file is a 500, not a crash."""
        from kansas.database import database

        database.path = str(tmp_path / "missing" / "kansas.db")

        response = await app_client.get("/goal/1")

        assert response.status_code == 500
        assert response.content == b""


@pytest.mark.asyncio
class TestGoalWrite:
    """Tests for creating, updating and deleting goals."""

    async def test_create_goal(self, app_client):
        """Test creating a goal returns 201 and the generated id."""
        user_id = await register(app_client)

        response = await app_client.post(
            "/goal",
            json={"userId": user_id, "timespan": "month", "goalContent": "Read"},
        )

        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["goalId"], int)
        assert data["userId"] == user_id
        assert data["goalContent"] == "Read"

    async def test_create_goal_unknown_user(self, app_client):
        """Test that a goal for a missing user fails in the store."""
        response = await app_client.post(
            "/goal",
            json={"userId": 999, "timespan": "month", "goalContent": "Orphan"},
        )

        assert response.status_code == 500
        assert response.content == b""

    async def test_create_goal_missing_fields(self, app_client):
        """Test that an incomplete body is rejected."""
        response = await app_client.post("/goal", json={"timespan": "month"})

        assert response.status_code == 422

    async def test_update_goal(self, app_client):
        """Test replacing a goal's fields."""
        user_id = await register(app_client)
        created = await create_goal(app_client, user_id)

        response = await app_client.put(
            f"/goal/{created['goalId']}",
            json={"userId": user_id, "timespan": "year", "goalContent": "Run a marathon"},
        )

        assert response.status_code == 200
        assert response.json()["timespan"] == "year"
        assert response.json()["goalContent"] == "Run a marathon"

    async def test_update_goal_not_found(self, app_client):
        """Test updating an unknown goal is 404."""
        user_id = await register(app_client)

        response = await app_client.put(
            "/goal/4242",
            json={"userId": user_id, "timespan": "year", "goalContent": "x"},
        )

        assert response.status_code == 404

    async def test_delete_goal(self, app_client):
        """Test deleting a goal, then it is gone."""
        user_id = await register(app_client)
        created = await create_goal(app_client, user_id)

        response = await app_client.delete(f"/goal/{created['goalId']}")
        assert response.status_code == 204

        response = await app_client.get(f"/goal/{created['goalId']}")
        assert response.status_code == 404

    async def test_delete_goal_not_found(self, app_client):
        """Test deleting an unknown goal is 404."""
        response = await app_client.delete("/goal/4242")

        assert response.status_code == 404

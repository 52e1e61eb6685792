"""Tests for workout plan endpoints."""

from fastapi.testclient import TestClient

from levelup_ai.api.app import create_app
from tests.conftest import InMemoryWorkoutPlanRepository, make_workout_plan


def test_generate_workout(
    container, workout_repository: InMemoryWorkoutPlanRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/ai/workout",
        json={
            "userId": "u1",
            "goal": "strength",
            "difficulty": "advanced",
            "daysPerWeek": 5,
            "duration": 60,
            "equipment": ["barbell"],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Workout plan generated successfully"
    assert body["data"]["estimatedDuration"] == 60
    assert body["data"]["difficulty"] == "advanced"
    assert body["data"]["exercises"][0]["restSeconds"] == 150
    assert body["data"]["id"] in workout_repository.plans


def test_generate_workout_rejects_invalid_difficulty(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/ai/workout",
        json={
            "userId": "u1",
            "goal": "strength",
            "difficulty": "legendary",
            "daysPerWeek": 5,
            "duration": 60,
        },
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_get_and_regenerate_workout(
    container, workout_repository: InMemoryWorkoutPlanRepository
) -> None:
    stored = make_workout_plan()
    workout_repository.plans[stored.id] = stored
    client = TestClient(create_app(container))

    fetched = client.get("/api/ai/workout/workout-1")
    regenerated = client.post(
        "/api/ai/workout/workout-1/regenerate", json={"daysPerWeek": 4}
    )
    missing = client.post("/api/ai/workout/unknown/regenerate", json={})

    assert fetched.status_code == 200
    assert fetched.json()["data"]["estimatedDuration"] == 45
    assert regenerated.status_code == 200
    assert regenerated.json()["data"]["daysPerWeek"] == 4
    assert regenerated.json()["data"]["goal"] == "strength"
    assert missing.status_code == 404
    assert missing.json()["message"] == "Cannot regenerate non-existent plan"

"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from fittrack.core.config import Settings
from fittrack.core.errors import ExternalServiceError
from fittrack.main import create_app


class FakeEstimator:
    """Stands in for the LLM: returns ``reply`` or raises ``error``."""

    def __init__(self, reply="350", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        OPENAI_API_KEY=None,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def estimator():
    return FakeEstimator()


@pytest.fixture
def failing_estimator():
    return FakeEstimator(error=ExternalServiceError("timed out"))


@pytest.fixture
def app(settings, estimator):
    return create_app(settings, estimator=estimator)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def leg_day():
    return {
        "userId": "u1",
        "name": "Leg Day",
        "description": "Squats and lunges",
        "date": "2024-01-01",
        "exercises": [
            {"exercise": "Squat", "sets": 3, "reps": 10, "weight": 100},
            {"exercise": "Lunge", "sets": 2, "reps": 8, "weight": 50},
        ],
    }


@pytest.fixture
def breakfast():
    return {
        "userId": "u1",
        "name": "Breakfast",
        "description": "Oatmeal with fruits",
        "date": "2024-03-20",
        "foods": [
            {"food": "Oatmeal", "quantity": 1, "calories": 250},
            {"food": "Blueberries", "quantity": 0.5, "calories": 100},
        ],
    }

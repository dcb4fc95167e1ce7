"""Tests for the record access layer."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session

from fittrack.core.db import init_db, make_engine
from fittrack.models import User, Workout
from fittrack.records import MealRecords, UserRecords, WorkoutRecords
from fittrack.schemas import UserPublic


@pytest.fixture
def session():
    engine = make_engine("sqlite://")
    init_db(engine)
    with Session(engine) as s:
        yield s


class TestUserRecords:
    def test_create_returns_redacted_view(self, session):
        users = UserRecords(session)
        view = users.create(username="john", email="john@example.com", password_hash="$2b$hash")
        assert isinstance(view, UserPublic)
        dumped = view.model_dump(by_alias=True)
        assert set(dumped) == {"_id", "username", "email"}
        assert isinstance(dumped["_id"], str)

    def test_create_stamps_created_at(self, session):
        view = UserRecords(session).create(username="john", email="john@example.com", password_hash="x")
        assert session.get(User, view.id).created_at is not None

    def test_find_by_email_returns_internal_record(self, session):
        users = UserRecords(session)
        users.create(username="john", email="john@example.com", password_hash="$2b$hash")
        found = users.find_by_email("john@example.com")
        assert isinstance(found, User)
        assert found.password_hash == "$2b$hash"
        assert users.find_by_email("nobody@example.com") is None

    def test_email_unique_at_store(self, session):
        users = UserRecords(session)
        users.create(username="a", email="same@example.com", password_hash="x")
        with pytest.raises(IntegrityError):
            users.create(username="b", email="same@example.com", password_hash="y")


class TestWorkoutRecords:
    def _data(self, **overrides):
        data = {"user_id": "u1", "name": "Leg Day", "date": "2024-01-01", "exercises": []}
        data.update(overrides)
        return data

    def test_find_by_user_empty(self, session):
        assert WorkoutRecords(session).find_by_user("u1") == []

    def test_update_bumps_revision_but_hides_it(self, session):
        records = WorkoutRecords(session)
        w = records.create(self._data())
        updated = records.update(w.id, {"description": "heavy"})
        assert updated.description == "heavy"
        assert "revision" not in updated.model_dump(by_alias=True)
        assert session.get(Workout, w.id).revision == 1

    def test_update_missing_returns_none(self, session):
        assert WorkoutRecords(session).update("missing", {"name": "x"}) is None

    def test_delete_is_idempotent(self, session):
        records = WorkoutRecords(session)
        w = records.create(self._data(exercises=[{"exercise": "Squat", "sets": 1, "reps": 1, "weight": 1}]))
        assert records.delete(w.id) is True
        assert records.delete(w.id) is False
        assert records.get(w.id) is None

    def test_failed_delete_rolls_back(self, session, monkeypatch):
        records = WorkoutRecords(session)
        w = records.create(self._data(exercises=[{"exercise": "Squat", "sets": 1, "reps": 1, "weight": 1}]))

        def boom():
            raise OperationalError("DELETE", {}, Exception("disk I/O error"))

        monkeypatch.setattr(session, "commit", boom)
        with pytest.raises(OperationalError):
            records.delete(w.id)
        monkeypatch.undo()

        kept = records.get(w.id)
        assert kept is not None
        assert [e.exercise for e in kept.exercises] == ["Squat"]


class TestMealRecords:
    def test_round_trip_keeps_food_order(self, session):
        records = MealRecords(session)
        foods = [
            {"food": "Eggs", "quantity": 2, "calories": 140},
            {"food": "Toast", "quantity": 1, "calories": 80},
            {"food": "Coffee", "quantity": 1, "calories": 5},
        ]
        m = records.create({"user_id": "u1", "name": "Breakfast", "date": "2024-03-20", "foods": foods})
        assert [f.food for f in records.get(m.id).foods] == ["Eggs", "Toast", "Coffee"]

    def test_delete_missing(self, session):
        assert MealRecords(session).delete("missing") is False

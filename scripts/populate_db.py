#!/usr/bin/env python3
"""
Seed the database with sample users, workouts and meals.

Usage:
  python scripts/populate_db.py
  python scripts/populate_db.py sqlite:///./fittrack.db

The optional argument overrides DATABASE_URL. Users get the password
"password123".
"""
from __future__ import annotations
import sys

from sqlmodel import Session

from fittrack.core.config import Settings
from fittrack.core.db import init_db, make_engine
from fittrack.core.security import PasswordHasher
from fittrack.records import MealRecords, UserRecords, WorkoutRecords


def log(msg: str) -> None:
    print(f"[populate-db] {msg}")


def populate(session: Session, hasher: PasswordHasher) -> None:
    users = UserRecords(session)
    workouts = WorkoutRecords(session)
    meals = MealRecords(session)

    john = users.create(username="john_doe", email="john@example.com", password_hash=hasher.hash("password123"))
    jane = users.create(username="jane_smith", email="jane@example.com", password_hash=hasher.hash("password123"))

    workouts.create({
        "user_id": john.id,
        "name": "Morning Run",
        "description": "5km run in the park",
        "date": "2024-03-20",
        "exercises": [{"exercise": "Running", "sets": 1, "reps": 1, "weight": 0}],
    })
    workouts.create({
        "user_id": jane.id,
        "name": "Upper Body",
        "description": "Focus on chest and arms",
        "date": "2024-03-19",
        "exercises": [
            {"exercise": "Bench Press", "sets": 3, "reps": 10, "weight": 135},
            {"exercise": "Bicep Curls", "sets": 3, "reps": 12, "weight": 30},
        ],
    })

    meals.create({
        "user_id": john.id,
        "name": "Breakfast",
        "description": "Oatmeal with fruits",
        "date": "2024-03-20",
        "foods": [
            {"food": "Oatmeal", "quantity": 1, "calories": 250},
            {"food": "Blueberries", "quantity": 0.5, "calories": 100},
        ],
    })
    meals.create({
        "user_id": jane.id,
        "name": "Lunch",
        "description": "Grilled chicken salad",
        "date": "2024-03-19",
        "foods": [
            {"food": "Chicken breast", "quantity": 1, "calories": 300},
            {"food": "Mixed greens", "quantity": 2, "calories": 150},
        ],
    })


def main(argv: list[str]) -> int:
    settings = Settings()
    db_url = argv[0] if argv else settings.DATABASE_URL
    log(f"Using DATABASE_URL={db_url}")
    try:
        engine = make_engine(db_url)
    except RuntimeError as exc:
        log(str(exc))
        return 2
    init_db(engine)
    with Session(engine) as session:
        populate(session, PasswordHasher(rounds=settings.BCRYPT_ROUNDS))
    log("Database populated successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

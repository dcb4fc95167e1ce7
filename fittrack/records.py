"""
Record access: thin wrappers over SQLModel queries for users, workouts and meals.

Everything returned from here (except ``UserRecords.find_by_email``, which the
auth service needs for the hash) is an explicit view from ``fittrack.schemas``:
string ids, no revision counter, no password hash. Store errors such as
``IntegrityError`` propagate unchanged.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from .models import Meal, MealFood, User, Workout, WorkoutExercise
from .schemas import ExerciseOut, FoodOut, MealOut, UserPublic, WorkoutOut


def _as_date_str(value: Any) -> str:
    return value.isoformat() if hasattr(value, "isoformat") else str(value)


# ------------------------------------------------------------------------------
# Users
# ------------------------------------------------------------------------------
def user_view(u: User) -> UserPublic:
    return UserPublic(id=str(u.id), username=u.username, email=u.email)


class UserRecords:
    def __init__(self, session: Session):
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def get(self, user_id: str) -> Optional[UserPublic]:
        u = self.session.get(User, user_id)
        return user_view(u) if u else None

    def create(self, *, username: str, email: str, password_hash: str) -> UserPublic:
        u = User(username=username, email=email, password_hash=password_hash)
        self.session.add(u)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(u)
        return user_view(u)


# ------------------------------------------------------------------------------
# Workouts
# ------------------------------------------------------------------------------
class WorkoutRecords:
    def __init__(self, session: Session):
        self.session = session

    def _exercises(self, workout_id: str) -> List[WorkoutExercise]:
        stmt = (
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.order_index)
        )
        return list(self.session.exec(stmt).all())

    def _view(self, w: Workout) -> WorkoutOut:
        return WorkoutOut(
            id=str(w.id),
            user_id=w.user_id,
            name=w.name,
            description=w.description,
            date=w.date,
            exercises=[
                ExerciseOut(exercise=e.exercise, sets=e.sets, reps=e.reps, weight=e.weight)
                for e in self._exercises(w.id)
            ],
        )

    def _replace_exercises(self, workout_id: str, exercises: List[Dict[str, Any]]) -> None:
        for old in self._exercises(workout_id):
            self.session.delete(old)
        for i, ex in enumerate(exercises):
            self.session.add(WorkoutExercise(
                workout_id=workout_id,
                order_index=i,
                exercise=ex["exercise"],
                sets=ex.get("sets") or 0,
                reps=ex.get("reps") or 0,
                weight=ex.get("weight") or 0.0,
            ))

    def find_by_user(self, user_id: str) -> List[WorkoutOut]:
        rows = self.session.exec(
            select(Workout).where(Workout.user_id == user_id).order_by(Workout.created_at)
        ).all()
        return [self._view(w) for w in rows]

    def get(self, workout_id: str) -> Optional[WorkoutOut]:
        w = self.session.get(Workout, workout_id)
        return self._view(w) if w else None

    def create(self, data: Dict[str, Any]) -> WorkoutOut:
        w = Workout(
            user_id=data["user_id"],
            name=data["name"],
            description=data.get("description"),
            date=_as_date_str(data["date"]),
        )
        self.session.add(w)
        try:
            self.session.flush()
            self._replace_exercises(w.id, data.get("exercises") or [])
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(w)
        return self._view(w)

    def update(self, workout_id: str, changes: Dict[str, Any]) -> Optional[WorkoutOut]:
        w = self.session.get(Workout, workout_id)
        if not w:
            return None
        exercises = changes.pop("exercises", None)
        for field, value in changes.items():
            if field == "date":
                value = _as_date_str(value)
            setattr(w, field, value)
        w.revision += 1
        self.session.add(w)
        try:
            if exercises is not None:
                self._replace_exercises(w.id, exercises)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(w)
        return self._view(w)

    def delete(self, workout_id: str) -> bool:
        w = self.session.get(Workout, workout_id)
        if not w:
            return False
        for old in self._exercises(workout_id):
            self.session.delete(old)
        self.session.delete(w)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True


# ------------------------------------------------------------------------------
# Meals
# ------------------------------------------------------------------------------
class MealRecords:
    def __init__(self, session: Session):
        self.session = session

    def _foods(self, meal_id: str) -> List[MealFood]:
        stmt = select(MealFood).where(MealFood.meal_id == meal_id).order_by(MealFood.order_index)
        return list(self.session.exec(stmt).all())

    def _view(self, m: Meal) -> MealOut:
        return MealOut(
            id=str(m.id),
            user_id=m.user_id,
            name=m.name,
            description=m.description,
            date=m.date,
            foods=[FoodOut(food=f.food, quantity=f.quantity, calories=f.calories) for f in self._foods(m.id)],
        )

    def _replace_foods(self, meal_id: str, foods: List[Dict[str, Any]]) -> None:
        for old in self._foods(meal_id):
            self.session.delete(old)
        for i, f in enumerate(foods):
            self.session.add(MealFood(
                meal_id=meal_id,
                order_index=i,
                food=f["food"],
                quantity=f.get("quantity") or 0.0,
                calories=f.get("calories") or 0.0,
            ))

    def find_by_user(self, user_id: str) -> List[MealOut]:
        rows = self.session.exec(
            select(Meal).where(Meal.user_id == user_id).order_by(Meal.created_at)
        ).all()
        return [self._view(m) for m in rows]

    def get(self, meal_id: str) -> Optional[MealOut]:
        m = self.session.get(Meal, meal_id)
        return self._view(m) if m else None

    def create(self, data: Dict[str, Any]) -> MealOut:
        m = Meal(
            user_id=data["user_id"],
            name=data["name"],
            description=data.get("description"),
            date=_as_date_str(data["date"]),
        )
        self.session.add(m)
        try:
            self.session.flush()
            self._replace_foods(m.id, data.get("foods") or [])
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(m)
        return self._view(m)

    def update(self, meal_id: str, changes: Dict[str, Any]) -> Optional[MealOut]:
        m = self.session.get(Meal, meal_id)
        if not m:
            return None
        foods = changes.pop("foods", None)
        for field, value in changes.items():
            if field == "date":
                value = _as_date_str(value)
            setattr(m, field, value)
        m.revision += 1
        self.session.add(m)
        try:
            if foods is not None:
                self._replace_foods(m.id, foods)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(m)
        return self._view(m)

    def delete(self, meal_id: str) -> bool:
        m = self.session.get(Meal, meal_id)
        if not m:
            return False
        for old in self._foods(meal_id):
            self.session.delete(old)
        self.session.delete(m)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True

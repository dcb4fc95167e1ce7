from datetime import datetime
from typing import Optional
from uuid import uuid4

import sqlalchemy as sa
from sqlmodel import SQLModel, Field


def new_id() -> str:
    return uuid4().hex


class User(SQLModel, table=True):
    __tablename__ = "users"
    id: str = Field(default_factory=new_id, sa_column=sa.Column(sa.String(32), primary_key=True))
    username: str = Field(sa_column=sa.Column(sa.String(120), nullable=False))
    email: str = Field(sa_column=sa.Column(sa.String(254), unique=True, index=True, nullable=False))
    password_hash: str = Field(sa_column=sa.Column(sa.String(255), nullable=False))
    # Internal revision counter; never serialized
    revision: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=sa.Column(sa.DateTime, nullable=False))


# --- Workouts ---
class Workout(SQLModel, table=True):
    __tablename__ = "workouts"
    id: str = Field(default_factory=new_id, sa_column=sa.Column(sa.String(32), primary_key=True))
    # Plain reference to users.id, not a foreign key
    user_id: str = Field(sa_column=sa.Column(sa.String(64), index=True, nullable=False))
    name: str = Field(sa_column=sa.Column(sa.String(160), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text))
    date: str = Field(sa_column=sa.Column(sa.String(10), index=True, nullable=False))
    revision: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=sa.Column(sa.DateTime, nullable=False))


class WorkoutExercise(SQLModel, table=True):
    __tablename__ = "workout_exercises"
    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: str = Field(sa_column=sa.Column(sa.String(32), sa.ForeignKey("workouts.id", ondelete="CASCADE"), index=True, nullable=False))
    order_index: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    exercise: str = Field(sa_column=sa.Column(sa.String(160), nullable=False))
    sets: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    reps: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    weight: float = Field(default=0.0, sa_column=sa.Column(sa.Float, nullable=False))


# --- Meals ---
class Meal(SQLModel, table=True):
    __tablename__ = "meals"
    id: str = Field(default_factory=new_id, sa_column=sa.Column(sa.String(32), primary_key=True))
    user_id: str = Field(sa_column=sa.Column(sa.String(64), index=True, nullable=False))
    name: str = Field(sa_column=sa.Column(sa.String(120), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text))
    date: str = Field(sa_column=sa.Column(sa.String(10), index=True, nullable=False))
    revision: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_column=sa.Column(sa.DateTime, nullable=False))


class MealFood(SQLModel, table=True):
    __tablename__ = "meal_foods"
    id: Optional[int] = Field(default=None, primary_key=True)
    meal_id: str = Field(sa_column=sa.Column(sa.String(32), sa.ForeignKey("meals.id", ondelete="CASCADE"), index=True, nullable=False))
    order_index: int = Field(default=0, sa_column=sa.Column(sa.Integer, nullable=False))
    food: str = Field(sa_column=sa.Column(sa.String(120), nullable=False))
    quantity: float = Field(default=0.0, sa_column=sa.Column(sa.Float, nullable=False))
    calories: float = Field(default=0.0, sa_column=sa.Column(sa.Float, nullable=False))

"""
Request/response DTOs.

One set of pydantic models drives both directions: FastAPI validates request
bodies against the ``*In``/``*Update`` models and every response against the
``*Out`` views. JSON keys are camelCase, identifiers go out as ``_id``.
"""
from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from .core.security import BCRYPT_MAX_BYTES


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------------------------------------------------------------------
# Users
# ------------------------------------------------------------------------------
class SignupIn(CamelModel):
    username: str = Field(..., min_length=3, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class LoginIn(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserPublic(CamelModel):
    """Externally visible user. There is no password field to leak."""
    id: str = Field(..., alias="_id")
    username: str
    email: str


class AuthOut(CamelModel):
    user: UserPublic
    token: str


# ------------------------------------------------------------------------------
# Workouts
# ------------------------------------------------------------------------------
class ExerciseIn(CamelModel):
    exercise: str = Field(..., min_length=1, max_length=160)
    sets: int = Field(0, ge=0)
    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)


class WorkoutIn(CamelModel):
    user_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=160)
    description: Optional[str] = None
    date: dt.date
    exercises: List[ExerciseIn] = Field(default_factory=list)


class WorkoutUpdate(CamelModel):
    user_id: Optional[str] = Field(None, min_length=1, max_length=64)
    name: Optional[str] = Field(None, min_length=1, max_length=160)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    exercises: Optional[List[ExerciseIn]] = None

    @field_validator("user_id", "name", "date", "exercises")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class ExerciseOut(CamelModel):
    exercise: str
    sets: int
    reps: int
    weight: float


class WorkoutOut(CamelModel):
    id: str = Field(..., alias="_id")
    user_id: str
    name: str
    description: Optional[str] = None
    date: str
    exercises: List[ExerciseOut]


class WorkoutStats(CamelModel):
    workout_id: str
    date: str
    total_exercises: int
    total_sets: int
    total_reps: int
    total_weight: float
    calories_burned: int
    intensity: str
    average_weight_per_exercise: int


# ------------------------------------------------------------------------------
# Meals
# ------------------------------------------------------------------------------
class FoodIn(CamelModel):
    food: str = Field(..., min_length=1, max_length=120)
    quantity: float = Field(0.0, ge=0)
    calories: float = Field(0.0, ge=0)


class MealIn(CamelModel):
    user_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=120)
    description: Optional[str] = None
    date: dt.date
    foods: List[FoodIn] = Field(default_factory=list)


class MealUpdate(CamelModel):
    user_id: Optional[str] = Field(None, min_length=1, max_length=64)
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    foods: Optional[List[FoodIn]] = None

    @field_validator("user_id", "name", "date", "foods")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class FoodOut(CamelModel):
    food: str
    quantity: float
    calories: float


class MealOut(CamelModel):
    id: str = Field(..., alias="_id")
    user_id: str
    name: str
    description: Optional[str] = None
    date: str
    foods: List[FoodOut]


class MealStats(CamelModel):
    meal_id: str
    date: str
    total_calories: float
    calories: int


# ------------------------------------------------------------------------------
# Shared
# ------------------------------------------------------------------------------
class DeleteOut(BaseModel):
    success: bool = True


class FieldViolation(CamelModel):
    path: str
    message: str
    error_code: str


class ErrorResponse(BaseModel):
    message: str
    errors: List[FieldViolation] = Field(default_factory=list)

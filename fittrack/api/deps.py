from fastapi import Depends, Request
from sqlmodel import Session

from ..core.db import get_session
from ..core.llm import CalorieEstimator
from ..core.security import PasswordHasher, TokenIssuer
from ..records import MealRecords, UserRecords, WorkoutRecords


def user_records(session: Session = Depends(get_session)) -> UserRecords:
    return UserRecords(session)


def workout_records(session: Session = Depends(get_session)) -> WorkoutRecords:
    return WorkoutRecords(session)


def meal_records(session: Session = Depends(get_session)) -> MealRecords:
    return MealRecords(session)


def password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.tokens


def calorie_estimator(request: Request) -> CalorieEstimator:
    return request.app.state.estimator

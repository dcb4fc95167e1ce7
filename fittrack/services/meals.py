"""Meal CRUD orchestration and meal statistics."""
from __future__ import annotations

import logging
import math
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..core.errors import NotFound, ValidationError
from ..core.llm import CalorieEstimator, estimate_calories
from ..records import MealRecords
from ..schemas import FoodOut, MealIn, MealOut, MealStats, MealUpdate

logger = logging.getLogger(__name__)


def list_meals(records: MealRecords, user_id: str) -> List[MealOut]:
    return records.find_by_user(user_id)


def get_meal(records: MealRecords, meal_id: str) -> MealOut:
    m = records.get(meal_id)
    if not m:
        raise NotFound("Meal not found")
    return m


def create_meal(records: MealRecords, data: MealIn) -> MealOut:
    try:
        return records.create(data.model_dump())
    except IntegrityError as exc:
        raise ValidationError("Invalid meal data") from exc


def update_meal(records: MealRecords, meal_id: str, data: MealUpdate) -> MealOut:
    try:
        m = records.update(meal_id, data.model_dump(exclude_unset=True))
    except IntegrityError as exc:
        raise ValidationError("Invalid meal data") from exc
    if not m:
        raise NotFound("Meal not found")
    return m


def delete_meal(records: MealRecords, meal_id: str) -> None:
    if not records.delete(meal_id):
        raise NotFound("Meal not found")


def _fmt_qty(q: float) -> str:
    return str(int(q)) if float(q).is_integer() else str(q)


def meal_prompt(foods: List[FoodOut]) -> str:
    described = ", ".join(f"{f.food}: {_fmt_qty(f.quantity)}" for f in foods)
    return (
        "You are a nutritionist AI. Calculate estimated calories for this meal:\n"
        f"Foods: {described}\n"
        "User stats: Average adult\n\n"
        "Please provide only a numeric estimate of total calories."
    )


def compute_meal_stats(records: MealRecords, meal_id: str, estimator: CalorieEstimator) -> Optional[MealStats]:
    """
    Sum a meal's calories and attach an LLM estimate. When the estimate is
    unavailable the summed total stands in. Returns None if the meal does not exist.
    """
    m = records.get(meal_id)
    if not m:
        return None

    total_calories = sum(f.calories or 0 for f in m.foods)
    fallback = int(math.floor(total_calories + 0.5))
    calories = estimate_calories(estimator, meal_prompt(m.foods), fallback=fallback)

    stats = MealStats(meal_id=m.id, date=m.date, total_calories=total_calories, calories=calories)
    logger.debug("Meal stats for %s: %s", meal_id, stats)
    return stats

"""Workout CRUD orchestration and workout statistics."""
from __future__ import annotations

import logging
import math
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..core.errors import NotFound, ValidationError
from ..core.llm import CalorieEstimator, estimate_calories
from ..records import WorkoutRecords
from ..schemas import ExerciseOut, WorkoutIn, WorkoutOut, WorkoutStats, WorkoutUpdate

logger = logging.getLogger(__name__)

HIGH_INTENSITY_VOLUME = 5000
MEDIUM_INTENSITY_VOLUME = 2000


def list_workouts(records: WorkoutRecords, user_id: str) -> List[WorkoutOut]:
    return records.find_by_user(user_id)


def get_workout(records: WorkoutRecords, workout_id: str) -> WorkoutOut:
    w = records.get(workout_id)
    if not w:
        raise NotFound("Workout not found")
    return w


def create_workout(records: WorkoutRecords, data: WorkoutIn) -> WorkoutOut:
    try:
        return records.create(data.model_dump())
    except IntegrityError as exc:
        raise ValidationError("Invalid workout data") from exc


def update_workout(records: WorkoutRecords, workout_id: str, data: WorkoutUpdate) -> WorkoutOut:
    try:
        w = records.update(workout_id, data.model_dump(exclude_unset=True))
    except IntegrityError as exc:
        raise ValidationError("Invalid workout data") from exc
    if not w:
        raise NotFound("Workout not found")
    return w


def delete_workout(records: WorkoutRecords, workout_id: str) -> None:
    if not records.delete(workout_id):
        raise NotFound("Workout not found")


# ------------------------------------------------------------------------------
# Statistics
# ------------------------------------------------------------------------------
def classify_intensity(total_weight: float) -> str:
    if total_weight > HIGH_INTENSITY_VOLUME:
        return "High"
    if total_weight > MEDIUM_INTENSITY_VOLUME:
        return "Medium"
    return "Low"


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _fmt_weight(w: float) -> str:
    return str(int(w)) if float(w).is_integer() else str(w)


def workout_prompt(exercises: List[ExerciseOut]) -> str:
    described = ", ".join(
        f"{e.exercise}: {e.sets} sets of {e.reps} reps at {_fmt_weight(e.weight or 0)}kg" for e in exercises
    )
    return (
        "You are a fitness expert AI. Calculate estimated calories burned for this workout:\n"
        f"Exercises: {described}\n"
        "User stats: Average adult\n\n"
        "Please provide only a numeric estimate of total calories burned."
    )


def compute_workout_stats(
    records: WorkoutRecords, workout_id: str, estimator: CalorieEstimator
) -> Optional[WorkoutStats]:
    """
    Aggregate a workout's exercises and attach an LLM estimate of calories
    burned (0 when the estimate is unavailable). Returns None if the workout
    does not exist.
    """
    w = records.get(workout_id)
    if not w:
        return None

    exercises = w.exercises
    total_sets = sum(e.sets for e in exercises)
    total_reps = sum(e.sets * e.reps for e in exercises)
    total_weight = sum((e.weight or 0) * e.sets * e.reps for e in exercises)
    average = _round_half_up(total_weight / len(exercises)) if exercises else 0

    calories_burned = estimate_calories(estimator, workout_prompt(exercises), fallback=0)

    stats = WorkoutStats(
        workout_id=w.id,
        date=w.date,
        total_exercises=len(exercises),
        total_sets=total_sets,
        total_reps=total_reps,
        total_weight=total_weight,
        calories_burned=calories_burned,
        intensity=classify_intensity(total_weight),
        average_weight_per_exercise=average,
    )
    logger.debug("Workout stats for %s: %s", workout_id, stats)
    return stats

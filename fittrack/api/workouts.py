from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..core.errors import NotFound
from ..core.llm import CalorieEstimator
from ..records import WorkoutRecords
from ..schemas import DeleteOut, ErrorResponse, WorkoutIn, WorkoutOut, WorkoutStats, WorkoutUpdate
from ..services import workouts as workout_service
from .deps import calorie_estimator, workout_records

router = APIRouter(prefix="/workouts", tags=["Workouts"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=List[WorkoutOut], responses={400: {"model": ErrorResponse}}, summary="Get all workouts for a user")
def list_workouts(
    user_id: str = Query(..., alias="userId", min_length=1),
    records: WorkoutRecords = Depends(workout_records),
):
    return workout_service.list_workouts(records, user_id)


@router.post("", response_model=WorkoutOut, status_code=status.HTTP_201_CREATED,
             responses={400: {"model": ErrorResponse}}, summary="Create a workout")
def create_workout(payload: WorkoutIn, records: WorkoutRecords = Depends(workout_records)):
    return workout_service.create_workout(records, payload)


@router.get("/{workout_id}", response_model=WorkoutOut, responses=_NOT_FOUND, summary="Get a workout")
def get_workout(workout_id: str, records: WorkoutRecords = Depends(workout_records)):
    return workout_service.get_workout(records, workout_id)


@router.put("/{workout_id}", response_model=WorkoutOut, responses=_NOT_FOUND, summary="Update a workout")
def update_workout(workout_id: str, payload: WorkoutUpdate, records: WorkoutRecords = Depends(workout_records)):
    return workout_service.update_workout(records, workout_id, payload)


@router.delete("/{workout_id}", response_model=DeleteOut, responses=_NOT_FOUND, summary="Delete a workout")
def delete_workout(workout_id: str, records: WorkoutRecords = Depends(workout_records)):
    workout_service.delete_workout(records, workout_id)
    return DeleteOut(success=True)


@router.get("/{workout_id}/stats", response_model=WorkoutStats, responses=_NOT_FOUND, summary="Workout statistics")
def workout_stats(
    workout_id: str,
    records: WorkoutRecords = Depends(workout_records),
    estimator: CalorieEstimator = Depends(calorie_estimator),
):
    stats = workout_service.compute_workout_stats(records, workout_id, estimator)
    if stats is None:
        raise NotFound("Workout not found")
    return stats

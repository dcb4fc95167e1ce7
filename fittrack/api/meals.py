from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..core.errors import NotFound
from ..core.llm import CalorieEstimator
from ..records import MealRecords
from ..schemas import DeleteOut, ErrorResponse, MealIn, MealOut, MealStats, MealUpdate
from ..services import meals as meal_service
from .deps import calorie_estimator, meal_records

router = APIRouter(prefix="/meals", tags=["Meals"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=List[MealOut], responses={400: {"model": ErrorResponse}}, summary="Get all meals for a user")
def list_meals(
    user_id: str = Query(..., alias="userId", min_length=1),
    records: MealRecords = Depends(meal_records),
):
    return meal_service.list_meals(records, user_id)


@router.post("", response_model=MealOut, status_code=status.HTTP_201_CREATED,
             responses={400: {"model": ErrorResponse}}, summary="Create a meal")
def create_meal(payload: MealIn, records: MealRecords = Depends(meal_records)):
    return meal_service.create_meal(records, payload)


@router.get("/{meal_id}", response_model=MealOut, responses=_NOT_FOUND, summary="Get a meal")
def get_meal(meal_id: str, records: MealRecords = Depends(meal_records)):
    return meal_service.get_meal(records, meal_id)


@router.put("/{meal_id}", response_model=MealOut, responses=_NOT_FOUND, summary="Update a meal")
def update_meal(meal_id: str, payload: MealUpdate, records: MealRecords = Depends(meal_records)):
    return meal_service.update_meal(records, meal_id, payload)


@router.delete("/{meal_id}", response_model=DeleteOut, responses=_NOT_FOUND, summary="Delete a meal")
def delete_meal(meal_id: str, records: MealRecords = Depends(meal_records)):
    meal_service.delete_meal(records, meal_id)
    return DeleteOut(success=True)


@router.get("/{meal_id}/stats", response_model=MealStats, responses=_NOT_FOUND, summary="Meal statistics")
def meal_stats(
    meal_id: str,
    records: MealRecords = Depends(meal_records),
    estimator: CalorieEstimator = Depends(calorie_estimator),
):
    stats = meal_service.compute_meal_stats(records, meal_id, estimator)
    if stats is None:
        raise NotFound("Meal not found")
    return stats

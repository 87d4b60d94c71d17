"""
Workout endpoints.

CRUD for workouts plus statistics and per-exercise progress.  Metrics
are computed server-side on every create/update.
"""

from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from liftlog.api.dependencies import get_current_user
from liftlog.core.config import settings
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.workout import (ExerciseProgressPoint, WorkoutCreate, WorkoutListResponse, WorkoutResponse,
                                     WorkoutStatsOverview, WorkoutUpdate, )
from liftlog.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", summary="List workouts (paginated).", response_model=WorkoutListResponse, )
def list_workouts(page: int = Query(1, ge=1, description="Page number (1-based)"),
                  limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Page size"),
                  sort_by: Literal["date", "name", "created_at"] = Query("date"),
                  sort_order: Literal["asc", "desc"] = Query("desc"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.get_page(user.id, page, limit, sort_by, sort_order)


@router.post("", summary="Log a workout.", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.create(user.id, data)


@router.get("/stats/overview", summary="Aggregate statistics over a period.", response_model=WorkoutStatsOverview, )
def get_stats_overview(period: str = Query("30d", description="7d, 30d or 90d (anything else means 90 days)"),
                       db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.stats_overview(user.id, period)


@router.get("/progress/{exercise_name}", summary="Progress history of an exercise.",
            response_model=list[ExerciseProgressPoint], )
def get_exercise_progress(exercise_name: str,
                          period: str = Query("30d", description="7d, 30d or 90d (anything else means 90 days)"),
                          db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.exercise_progress(user.id, exercise_name, period)


@router.get("/{workout_id}", summary="Get a workout.", response_model=WorkoutResponse, )
def get_workout(workout_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.get_by_id(user.id, workout_id)


@router.put("/{workout_id}", summary="Update a workout.", response_model=WorkoutResponse, )
def update_workout(workout_id: int, data: WorkoutUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    return service.update(user.id, workout_id, data)


@router.delete("/{workout_id}", summary="Delete a workout.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_workout(workout_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutService(db)
    service.delete(user.id, workout_id)

"""
Workout service.

Runs the workout metrics calculator before every write that touches
exercises, so stored metrics always match stored exercises.  Also
serves the statistics overview and per-exercise progress history.
"""

import datetime
import logging
import math

from fastapi import HTTPException, status
from sqlmodel import Session

from liftlog.core.timeutils import as_utc, utc_now
from liftlog.db.repositories.recovery import RecoveryRepository
from liftlog.db.repositories.workout import WorkoutRepository
from liftlog.engine.workout_metrics import (
    compute_exercise_metrics,
    compute_workout_metrics,
    with_exercise_metrics,
)
from liftlog.models.workout import Workout
from liftlog.schemas.workout import (
    ExerciseCreate,
    ExerciseProgressPoint,
    ExerciseResponse,
    Pagination,
    WorkoutCreate,
    WorkoutListResponse,
    WorkoutMetrics,
    WorkoutResponse,
    WorkoutStatsOverview,
    WorkoutUpdate,
)

logger = logging.getLogger(__name__)

# Period query values → number of days.  Anything else means 90 days.
PERIOD_DAYS = {"7d": 7, "30d": 30, "90d": 90}


def period_to_days(period: str) -> int:
    return PERIOD_DAYS.get(period, 90)


class WorkoutService:
    """Service for workout business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutRepository(session)
        self.recovery_repository = RecoveryRepository(session)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, user_id: int, data: WorkoutCreate) -> WorkoutResponse:
        entry = Workout(user_id=user_id, name=data.name, duration=data.duration, notes=data.notes,
                        tags=list(data.tags), )
        if data.date is not None:
            entry.date = data.date
        self._set_exercises(entry, data.exercises)

        entry = self.repository.create(entry)
        logger.info("Created workout %s for user %s (%d sets)", entry.id, user_id, entry.metric_total_sets)
        return self.to_response(entry)

    def get_by_id(self, user_id: int, entry_id: int) -> WorkoutResponse:
        return self.to_response(self._get_owned_entry(user_id, entry_id))

    def get_page(self, user_id: int, page: int, limit: int, sort_by: str = "date",
                 sort_order: str = "desc", ) -> WorkoutListResponse:
        skip = (page - 1) * limit
        entries = self.repository.get_page_by_user(user_id, skip, limit, sort_by=sort_by,
                                                   descending=sort_order == "desc", )
        total = self.repository.count_by_user(user_id)
        return WorkoutListResponse(workouts=[self.to_response(e) for e in entries],
                                   pagination=build_pagination(page, limit, total), )

    def update(self, user_id: int, entry_id: int, data: WorkoutUpdate) -> WorkoutResponse:
        entry = self._get_owned_entry(user_id, entry_id)

        if data.name is not None:
            entry.name = data.name
        if data.date is not None:
            entry.date = data.date
        # Nullable fields: an explicit null clears them, an omitted field keeps them.
        if "duration" in data.model_fields_set:
            entry.duration = data.duration
        if "notes" in data.model_fields_set:
            entry.notes = data.notes
        if data.tags is not None:
            entry.tags = list(data.tags)
        if data.exercises is not None:
            self._set_exercises(entry, data.exercises)

        entry.updated_at = utc_now()
        entry = self.repository.update(entry)
        logger.info("Updated workout %s for user %s", entry.id, user_id)
        return self.to_response(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        entry = self._get_owned_entry(user_id, entry_id)
        removed = self.recovery_repository.delete_by_workout(entry.id)
        self.repository.delete(entry)
        logger.info("Deleted workout %s for user %s (%d recovery records)", entry_id, user_id, removed)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def stats_overview(self, user_id: int, period: str, now: datetime.datetime | None = None) -> WorkoutStatsOverview:
        days = period_to_days(period)
        start = as_utc(now or utc_now()) - datetime.timedelta(days=days)
        return WorkoutStatsOverview(period_days=days, **self.repository.aggregate_since(user_id, start))

    def exercise_progress(self, user_id: int, exercise_name: str, period: str,
                          now: datetime.datetime | None = None, ) -> list[ExerciseProgressPoint]:
        """Chronological history of exercises whose name contains ``exercise_name`` (case-insensitive)."""
        start = as_utc(now or utc_now()) - datetime.timedelta(days=period_to_days(period))
        needle = exercise_name.lower()

        points: list[ExerciseProgressPoint] = []
        for entry in self.repository.get_by_user_since(user_id, start):
            for exercise in self._exercises_of(entry):
                if needle not in exercise.name.lower():
                    continue
                metrics = compute_exercise_metrics(exercise.sets)
                points.append(ExerciseProgressPoint(date=entry.date, workout_id=entry.id, exercise=exercise,
                                                    volume=metrics.total_volume, max_weight=metrics.max_weight, ))
        return points

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, user_id: int, entry_id: int) -> Workout:
        entry = self.repository.get_by_user_and_id(user_id, entry_id)
        if not entry:
            logger.warning("Workout %s not found for user %s", entry_id, user_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found", )
        return entry

    @staticmethod
    def _set_exercises(entry: Workout, exercises: list[ExerciseCreate]) -> None:
        """Store exercises with their derived metrics and refresh workout metrics."""
        enriched = with_exercise_metrics(exercises)
        metrics = compute_workout_metrics(exercises)

        entry.exercises = [e.model_dump(mode="json") for e in enriched]
        entry.metric_total_volume = metrics.total_volume
        entry.metric_total_sets = metrics.total_sets
        entry.metric_total_reps = metrics.total_reps
        entry.metric_average_rpe = metrics.average_rpe
        entry.metric_max_weight = metrics.max_weight

    @staticmethod
    def _exercises_of(entry: Workout) -> list[ExerciseResponse]:
        return [ExerciseResponse.model_validate(e) for e in entry.exercises or []]

    @classmethod
    def to_response(cls, entry: Workout) -> WorkoutResponse:
        metrics = WorkoutMetrics(total_volume=entry.metric_total_volume, total_sets=entry.metric_total_sets,
                                 total_reps=entry.metric_total_reps, average_rpe=entry.metric_average_rpe,
                                 max_weight=entry.metric_max_weight, )
        return WorkoutResponse(id=entry.id, user_id=entry.user_id, date=entry.date, name=entry.name,
                               exercises=cls._exercises_of(entry), duration=entry.duration, notes=entry.notes,
                               tags=list(entry.tags or []), metrics=metrics, created_at=entry.created_at,
                               updated_at=entry.updated_at, )


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    return Pagination(current_page=page, total_pages=math.ceil(total / limit) if limit else 0, total=total,
                      has_next=page * limit < total, has_prev=page > 1, )

"""
Recovery service.

Business logic for recovery records.  Handles mapping between the
nested factor schemas and the flat database model, runs the recovery
score calculator whenever factors are written, and serves on-the-fly
recommendations from recent history.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from liftlog.core.config import settings
from liftlog.core.timeutils import as_utc_or_none, utc_now
from liftlog.db.repositories.recovery import RecoveryRepository
from liftlog.db.repositories.workout import WorkoutRepository
from liftlog.engine.recommendations import compute_recommendations
from liftlog.engine.recovery_score import compute_recovery_score
from liftlog.models.recovery import RecoveryRecord
from liftlog.schemas.recommendation import Recommendation, RecommendationResponse
from liftlog.schemas.recovery import (
    ActivityFactors,
    FeedbackResponse,
    NutritionFactors,
    RecoveryCreate,
    RecoveryFactors,
    RecoveryFeedback,
    RecoveryListResponse,
    RecoveryResponse,
    RecoveryUpdate,
    SleepFactors,
    StressFactors,
)
from liftlog.services.workout_service import build_pagination

logger = logging.getLogger(__name__)


class RecoveryService:
    """Service for recovery record business logic."""

    def __init__(self, session: Session):
        self.repository = RecoveryRepository(session)
        self.workout_repository = WorkoutRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, user_id: int, data: RecoveryCreate) -> RecoveryResponse:
        """Create a record for one of the user's workouts.

        Raises:
            HTTPException 404: If the workout does not belong to the user.
        """
        if not self.workout_repository.get_by_user_and_id(user_id, data.workout_id):
            logger.warning("Workout %s not found for user %s", data.workout_id, user_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found", )

        entry = RecoveryRecord(user_id=user_id, workout_id=data.workout_id)
        if data.date is not None:
            entry.date = data.date
        if data.recommendations is not None:
            entry.recommendations = data.recommendations.model_dump(mode="json")
        self._set_factors(entry, data.factors)

        entry = self.repository.create(entry)
        logger.info("Created recovery record %s for user %s (score %d)", entry.id, user_id, entry.recovery_score)
        return self._to_response(entry)

    def get_page(self, user_id: int, page: int, limit: int, start: Optional[datetime.datetime] = None,
                 end: Optional[datetime.datetime] = None, ) -> RecoveryListResponse:
        skip = (page - 1) * limit
        start, end = as_utc_or_none(start), as_utc_or_none(end)
        entries = self.repository.get_page_by_user(user_id, skip, limit, start, end)
        total = self.repository.count_by_user(user_id, start, end)
        return RecoveryListResponse(recoveries=[self._to_response(e) for e in entries],
                                    pagination=build_pagination(page, limit, total), )

    def update(self, user_id: int, entry_id: int, data: RecoveryUpdate) -> RecoveryResponse:
        """Update a record.  Scores are always recomputed from the stored factors."""
        entry = self._get_owned_entry(user_id, entry_id)

        if data.date is not None:
            entry.date = data.date
        if "recommendations" in data.model_fields_set:
            entry.recommendations = (data.recommendations.model_dump(mode="json")
                                     if data.recommendations is not None else None)

        factors = data.factors if data.factors is not None else self._factors_of(entry)
        self._set_factors(entry, factors)

        entry.updated_at = utc_now()
        entry = self.repository.update(entry)
        logger.info("Updated recovery record %s for user %s (score %d)", entry.id, user_id, entry.recovery_score)
        return self._to_response(entry)

    def submit_feedback(self, user_id: int, entry_id: int, feedback: RecoveryFeedback) -> FeedbackResponse:
        """Store feedback.  Only the feedback fields change."""
        entry = self._get_owned_entry(user_id, entry_id)
        entry.feedback_accuracy = feedback.accuracy
        entry.feedback_helpfulness = feedback.helpfulness
        entry.feedback_comments = feedback.comments
        entry = self.repository.update(entry)
        logger.info("Feedback submitted for recovery record %s", entry.id)
        return FeedbackResponse(message="Feedback submitted successfully", recovery=self._to_response(entry))

    def recommendations(self, user_id: int) -> RecommendationResponse:
        """Recompute recommendations from the latest records and workouts."""
        limit = settings.RECENT_HISTORY_LIMIT
        recoveries = [self._to_response(e) for e in self.repository.get_latest_by_user(user_id, limit)]
        workouts = self.workout_repository.get_latest_by_user(user_id, limit)
        return compute_recommendations(recoveries, workouts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, user_id: int, entry_id: int) -> RecoveryRecord:
        entry = self.repository.get_by_user_and_id(user_id, entry_id)
        if not entry:
            logger.warning("Recovery record %s not found for user %s", entry_id, user_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recovery entry not found", )
        return entry

    @staticmethod
    def _set_factors(entry: RecoveryRecord, factors: RecoveryFactors) -> None:
        """Copy factors into the flat columns and recompute the scores."""
        entry.sleep_hours = factors.sleep.hours
        entry.sleep_quality = factors.sleep.quality
        entry.nutrition_quality = factors.nutrition.quality
        entry.hydration = factors.nutrition.hydration
        entry.stress_level = factors.stress.level
        entry.work_stress = factors.stress.work_stress
        entry.step_count = factors.activity.step_count
        entry.cardio_minutes = factors.activity.cardio_minutes
        entry.active_minutes = factors.activity.active_minutes

        scores = compute_recovery_score(factors)
        entry.recovery_score = scores.recovery_score
        entry.readiness_score = scores.readiness_score

    @staticmethod
    def _factors_of(entry: RecoveryRecord) -> RecoveryFactors:
        return RecoveryFactors(
            sleep=SleepFactors(hours=entry.sleep_hours, quality=entry.sleep_quality),
            nutrition=NutritionFactors(quality=entry.nutrition_quality, hydration=entry.hydration),
            stress=StressFactors(level=entry.stress_level, work_stress=entry.work_stress),
            activity=ActivityFactors(
                step_count=entry.step_count,
                cardio_minutes=entry.cardio_minutes,
                active_minutes=entry.active_minutes,
            ),
        )

    @classmethod
    def _to_response(cls, entry: RecoveryRecord) -> RecoveryResponse:
        """Convert flat database model to nested response schema."""
        feedback = None
        if entry.feedback_accuracy is not None and entry.feedback_helpfulness is not None:
            feedback = RecoveryFeedback(
                accuracy=entry.feedback_accuracy,
                helpfulness=entry.feedback_helpfulness,
                comments=entry.feedback_comments,
            )

        recommendations = None
        if entry.recommendations:
            recommendations = Recommendation.model_validate(entry.recommendations)

        return RecoveryResponse(
            id=entry.id,
            user_id=entry.user_id,
            workout_id=entry.workout_id,
            date=entry.date,
            factors=cls._factors_of(entry),
            recovery_score=entry.recovery_score,
            readiness_score=entry.readiness_score,
            recommendations=recommendations,
            feedback=feedback,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )

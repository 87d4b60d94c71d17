"""
Recovery record database model.

Factor groups and feedback are flattened into nullable columns; the
optional recommendations snapshot is kept as JSON.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from liftlog.core.timeutils import utc_now


class RecoveryRecord(SQLModel, table=True):
    """Recovery factors reported by a user after a workout.

    ``recovery_score`` and ``readiness_score`` are computed from the
    factor columns whenever the record is created or its factors change.
    """

    __tablename__ = "recoveries"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    workout_id: int = Field(foreign_key="workouts.id", nullable=False, index=True)
    date: datetime.datetime = Field(default_factory=utc_now,
                                    sa_column=Column(DateTime(timezone=True), nullable=False, index=True))

    # Sleep
    sleep_hours: Optional[float] = Field(default=None)
    sleep_quality: Optional[int] = Field(default=None)

    # Nutrition
    nutrition_quality: Optional[int] = Field(default=None)
    hydration: Optional[int] = Field(default=None)

    # Stress
    stress_level: Optional[int] = Field(default=None)
    work_stress: Optional[int] = Field(default=None)

    # Activity
    step_count: Optional[int] = Field(default=None)
    cardio_minutes: Optional[int] = Field(default=None)
    active_minutes: Optional[int] = Field(default=None)

    # Scores
    recovery_score: int = Field(default=50, nullable=False)
    readiness_score: int = Field(default=50, nullable=False)

    recommendations: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Feedback
    feedback_accuracy: Optional[int] = Field(default=None)
    feedback_helpfulness: Optional[int] = Field(default=None)
    feedback_comments: Optional[str] = Field(default=None, max_length=500)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))

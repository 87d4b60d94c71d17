"""
Workout database model.

Exercises (with their sets and derived per-exercise metrics) are stored
as JSON; the workout-level metrics are stored as individual columns so
statistics can be aggregated in SQL.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from liftlog.core.timeutils import utc_now


class Workout(SQLModel, table=True):
    """A logged workout.

    ``metric_*`` columns always hold the aggregation of ``exercises`` as of
    the last save; :class:`~liftlog.services.workout_service.WorkoutService`
    recomputes them before every write that touches exercises.
    """

    __tablename__ = "workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.datetime = Field(default_factory=utc_now,
                                    sa_column=Column(DateTime(timezone=True), nullable=False, index=True))
    name: str = Field(default="Workout", max_length=100)

    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    duration: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)
    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Derived metrics
    metric_total_volume: float = Field(default=0.0, nullable=False)
    metric_total_sets: int = Field(default=0, nullable=False)
    metric_total_reps: int = Field(default=0, nullable=False)
    metric_average_rpe: Optional[float] = Field(default=None)
    metric_max_weight: float = Field(default=0.0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))

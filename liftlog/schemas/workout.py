"""
Workout API schemas.

A workout owns an ordered list of exercises, each owning an ordered list
of sets.  Per-exercise and per-workout metrics are derived by
:mod:`liftlog.engine.workout_metrics` and are never accepted from the
client.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from liftlog.core.timeutils import UTCDateTime


class ExerciseCategory(str, Enum):
    """Muscle-group category of an exercise."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    CARDIO = "cardio"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Nested value objects
# ---------------------------------------------------------------------------

class SetEntry(BaseModel):
    """A single set of an exercise."""

    reps: int = Field(..., ge=1, description="Repetitions performed")
    weight: float = Field(..., ge=0.0, description="Load used for the set")
    duration: Optional[float] = Field(
        None, ge=0.0,
        description="Duration for time-based exercises (seconds)",
    )
    rest_time: Optional[float] = Field(
        None, ge=0.0,
        description="Rest taken after this set (seconds)",
    )
    rpe: Optional[int] = Field(
        None, ge=1, le=10,
        description="Rate of Perceived Exertion (1-10)",
    )
    notes: Optional[str] = Field(None, max_length=500)


class ExerciseBase(BaseModel):
    """Exercise fields supplied by the client."""

    name: str = Field(..., min_length=1, max_length=100)
    category: ExerciseCategory
    sets: list[SetEntry] = Field(default_factory=list)


class ExerciseCreate(ExerciseBase):
    """Exercise as submitted in a create/update request."""
    pass


class ExerciseMetrics(BaseModel):
    """Derived per-exercise metrics."""

    total_volume: float = Field(0.0, description="Σ reps × weight")
    max_weight: float = Field(0.0, description="Heaviest set (0 when no sets)")
    average_rpe: Optional[float] = Field(
        None, description="Mean RPE of sets that recorded one",
    )


class ExerciseResponse(ExerciseBase, ExerciseMetrics):
    """Exercise with its derived metrics."""
    pass


class WorkoutMetrics(BaseModel):
    """Derived per-workout metrics."""

    total_volume: float = 0.0
    total_sets: int = 0
    total_reps: int = 0
    average_rpe: Optional[float] = None
    max_weight: float = 0.0


# ---------------------------------------------------------------------------
# Entity schemas (Create / Update / Response)
# ---------------------------------------------------------------------------

class WorkoutCreate(BaseModel):
    """Schema for logging a workout."""

    name: str = Field("Workout", max_length=100)
    date: Optional[UTCDateTime] = Field(
        None, description="When the workout took place (defaults to now)",
    )
    exercises: list[ExerciseCreate] = Field(default_factory=list)
    duration: Optional[float] = Field(
        None, ge=0.0, description="Total workout duration (minutes)",
    )
    notes: Optional[str] = Field(None, max_length=1000)
    tags: list[str] = Field(default_factory=list)


class WorkoutUpdate(BaseModel):
    """Schema for updating a workout (all fields optional)."""

    name: Optional[str] = Field(None, max_length=100)
    date: Optional[UTCDateTime] = None
    exercises: Optional[list[ExerciseCreate]] = None
    duration: Optional[float] = Field(None, ge=0.0)
    notes: Optional[str] = Field(None, max_length=1000)
    tags: Optional[list[str]] = None


class WorkoutResponse(BaseModel):
    """Schema for a workout in API responses."""

    id: int
    user_id: int
    date: UTCDateTime
    name: str
    exercises: list[ExerciseResponse]
    duration: Optional[float]
    notes: Optional[str]
    tags: list[str]
    metrics: WorkoutMetrics
    created_at: UTCDateTime
    updated_at: UTCDateTime


class Pagination(BaseModel):
    """Page metadata shared by list endpoints."""

    current_page: int
    total_pages: int
    total: int
    has_next: bool
    has_prev: bool


class WorkoutListResponse(BaseModel):
    workouts: list[WorkoutResponse]
    pagination: Pagination


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

class WorkoutStatsOverview(BaseModel):
    """Aggregate statistics over a period."""

    period_days: int
    total_workouts: int = 0
    total_volume: float = 0.0
    total_sets: int = 0
    total_reps: int = 0
    avg_duration: float = 0.0
    avg_rpe: float = 0.0
    max_weight: float = 0.0


class ExerciseProgressPoint(BaseModel):
    """One occurrence of an exercise in the progress history."""

    date: UTCDateTime
    workout_id: int
    exercise: ExerciseResponse
    volume: float
    max_weight: float

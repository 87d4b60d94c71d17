"""
Recovery record API schemas.

Recovery factors are grouped by domain (sleep, nutrition, stress,
activity).  Every factor is optional: absent values are left out of the
recovery score rather than counted as zero.
"""

from typing import Optional

from pydantic import BaseModel, Field

from liftlog.core.timeutils import UTCDateTime
from liftlog.schemas.recommendation import Recommendation
from liftlog.schemas.workout import Pagination


# ---------------------------------------------------------------------------
# Nested value-object schemas (factor groups)
# ---------------------------------------------------------------------------

class SleepFactors(BaseModel):
    hours: Optional[float] = Field(
        None, ge=0.0, le=24.0,
        description="Hours slept",
    )
    quality: Optional[int] = Field(
        None, ge=1, le=10,
        description="Subjective sleep quality (1-10)",
    )


class NutritionFactors(BaseModel):
    quality: Optional[int] = Field(
        None, ge=1, le=10,
        description="Subjective nutrition quality (1-10)",
    )
    hydration: Optional[int] = Field(
        None, ge=1, le=10,
        description="Subjective hydration (1-10)",
    )


class StressFactors(BaseModel):
    level: Optional[int] = Field(
        None, ge=1, le=10,
        description="Overall stress (1 = relaxed, 10 = very stressed)",
    )
    work_stress: Optional[int] = Field(
        None, ge=1, le=10,
        description="Work-related stress (1-10)",
    )


class ActivityFactors(BaseModel):
    step_count: Optional[int] = Field(None, ge=0)
    cardio_minutes: Optional[int] = Field(None, ge=0)
    active_minutes: Optional[int] = Field(None, ge=0)


class RecoveryFactors(BaseModel):
    """All recovery factors reported for one day."""

    sleep: SleepFactors = Field(default_factory=SleepFactors)
    nutrition: NutritionFactors = Field(default_factory=NutritionFactors)
    stress: StressFactors = Field(default_factory=StressFactors)
    activity: ActivityFactors = Field(default_factory=ActivityFactors)


class RecoveryScores(BaseModel):
    """Scores derived from a :class:`RecoveryFactors` object."""

    recovery_score: int = Field(..., ge=0, le=100)
    readiness_score: int = Field(..., ge=0, le=100)


class RecoveryFeedback(BaseModel):
    """User feedback on the recommendations."""

    accuracy: int = Field(..., ge=1, le=5)
    helpfulness: int = Field(..., ge=1, le=5)
    comments: Optional[str] = Field(None, max_length=500)


# ---------------------------------------------------------------------------
# Entity schemas
# ---------------------------------------------------------------------------

class RecoveryCreate(BaseModel):
    """Schema for submitting recovery factors tied to a workout."""

    workout_id: int
    date: Optional[UTCDateTime] = Field(
        None, description="Day the factors refer to (defaults to now)",
    )
    factors: RecoveryFactors = Field(default_factory=RecoveryFactors)
    recommendations: Optional[Recommendation] = None


class RecoveryUpdate(BaseModel):
    """Schema for updating a recovery record (all fields optional)."""

    date: Optional[UTCDateTime] = None
    factors: Optional[RecoveryFactors] = None
    recommendations: Optional[Recommendation] = None


class RecoveryResponse(BaseModel):
    """Schema for a recovery record in API responses."""

    id: int
    user_id: int
    workout_id: int
    date: UTCDateTime
    factors: RecoveryFactors
    recovery_score: int
    readiness_score: int
    recommendations: Optional[Recommendation] = None
    feedback: Optional[RecoveryFeedback] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class RecoveryListResponse(BaseModel):
    recoveries: list[RecoveryResponse]
    pagination: Pagination


class FeedbackResponse(BaseModel):
    message: str
    recovery: RecoveryResponse

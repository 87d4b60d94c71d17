"""
Recovery recommendation schemas.

The recommendation engine averages the most recent recovery factors and
turns them into an actionable suggestion: how long to recover, how hard
to train next, and which factors need attention.
"""

from pydantic import BaseModel, Field


class Recommendation(BaseModel):
    """Recovery guidance for the next session."""

    suggested_recovery_time: float = Field(
        ..., ge=0.0,
        description="Suggested rest before the next hard session (hours)",
    )
    intensity_modifier: float = Field(
        ..., ge=0.5, le=1.5,
        description="Multiplier: 1.0 = normal, 0.8 = reduce intensity by 20%",
    )
    focus_areas: list[str] = Field(
        default_factory=list,
        description="Factors needing attention, e.g. sleep, nutrition, stress",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Human-readable warnings in rule order",
    )


class AverageSleep(BaseModel):
    hours: float = 0.0
    quality: float = 0.0


class AverageNutrition(BaseModel):
    quality: float = 0.0
    hydration: float = 0.0


class AverageStress(BaseModel):
    level: float = 0.0


class AverageActivity(BaseModel):
    step_count: float = 0.0
    cardio_minutes: float = 0.0


class AverageFactors(BaseModel):
    """Recovery factors averaged over recent records (missing values count as 0)."""

    sleep: AverageSleep = Field(default_factory=AverageSleep)
    nutrition: AverageNutrition = Field(default_factory=AverageNutrition)
    stress: AverageStress = Field(default_factory=AverageStress)
    activity: AverageActivity = Field(default_factory=AverageActivity)


class RecommendationResponse(BaseModel):
    """Complete recommendation output."""

    recommendations: Recommendation
    average_factors: AverageFactors
    recent_workouts: int = Field(
        ..., ge=0, description="Number of recent workouts considered",
    )
    recent_recoveries: int = Field(
        ..., ge=0, description="Number of recent recovery records averaged",
    )

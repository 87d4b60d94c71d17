"""Pydantic schemas for request/response validation."""

from liftlog.schemas.user import Token, UserCreate, UserLogin, UserResponse, UserUpdate
from liftlog.schemas.workout import (
    ExerciseCategory,
    ExerciseCreate,
    ExerciseResponse,
    SetEntry,
    WorkoutCreate,
    WorkoutMetrics,
    WorkoutResponse,
    WorkoutUpdate,
)
from liftlog.schemas.recovery import (
    RecoveryCreate,
    RecoveryFactors,
    RecoveryFeedback,
    RecoveryResponse,
    RecoveryScores,
    RecoveryUpdate,
)
from liftlog.schemas.recommendation import AverageFactors, Recommendation, RecommendationResponse

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserUpdate",
    "ExerciseCategory",
    "ExerciseCreate",
    "ExerciseResponse",
    "SetEntry",
    "WorkoutCreate",
    "WorkoutMetrics",
    "WorkoutResponse",
    "WorkoutUpdate",
    "RecoveryCreate",
    "RecoveryFactors",
    "RecoveryFeedback",
    "RecoveryResponse",
    "RecoveryScores",
    "RecoveryUpdate",
    "AverageFactors",
    "Recommendation",
    "RecommendationResponse",
]

"""Business logic services."""

from liftlog.services.user_service import UserService
from liftlog.services.workout_service import WorkoutService
from liftlog.services.recovery_service import RecoveryService

__all__ = [
    "UserService",
    "WorkoutService",
    "RecoveryService",
]

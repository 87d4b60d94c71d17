"""SQLModel database models."""

from liftlog.models.user import User
from liftlog.models.workout import Workout
from liftlog.models.recovery import RecoveryRecord

__all__ = [
    "User",
    "Workout",
    "RecoveryRecord",
]

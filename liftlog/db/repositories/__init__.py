"""Database repositories."""

from liftlog.db.repositories.user import UserRepository
from liftlog.db.repositories.workout import WorkoutRepository
from liftlog.db.repositories.recovery import RecoveryRepository

__all__ = [
    "UserRepository",
    "WorkoutRepository",
    "RecoveryRepository",
]

"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from liftlog.models.user import User  # noqa: F401
from liftlog.models.workout import Workout  # noqa: F401
from liftlog.models.recovery import RecoveryRecord  # noqa: F401

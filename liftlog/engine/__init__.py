"""LiftLog core computations (workout metrics, recovery score and recommendations)."""

from liftlog.engine.recommendations import compute_recommendations
from liftlog.engine.recovery_score import compute_recovery_score
from liftlog.engine.workout_metrics import compute_exercise_metrics, compute_workout_metrics

__all__ = [
    "compute_exercise_metrics",
    "compute_recommendations",
    "compute_recovery_score",
    "compute_workout_metrics",
]

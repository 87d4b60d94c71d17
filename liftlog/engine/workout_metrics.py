"""
Workout metrics: volume, set/rep counts, max weight and RPE roll-ups.

Metrics are derived, never user supplied.  They are recomputed from the
sets every time a workout is created or its exercises change, so the
stored values are always the aggregation of the stored exercises.

    volume      = Σ reps × weight
    max_weight  = max(weight), 0 when there are no sets
    average_rpe = mean of the RPE values that were recorded, None otherwise

The same definitions apply at exercise level (scoped to that exercise's
sets) and at workout level (across every set of every exercise).
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from liftlog.schemas.workout import (
    ExerciseBase,
    ExerciseMetrics,
    ExerciseResponse,
    SetEntry,
    WorkoutMetrics,
)


# ======================================================================
# Primitive reductions
# ======================================================================


def _volume(sets: Iterable[SetEntry]) -> float:
    return float(sum(s.reps * s.weight for s in sets))


def _max_weight(sets: Sequence[SetEntry]) -> float:
    """Heaviest set, with an explicit 0 for an empty sequence."""
    if not sets:
        return 0.0
    return float(max(s.weight for s in sets))


def _average_rpe(sets: Iterable[SetEntry]) -> Optional[float]:
    rpes = [s.rpe for s in sets if s.rpe is not None]
    if not rpes:
        return None
    return sum(rpes) / len(rpes)


# ======================================================================
# Public API
# ======================================================================


def compute_exercise_metrics(sets: Sequence[SetEntry]) -> ExerciseMetrics:
    """Compute the derived metrics of a single exercise."""
    return ExerciseMetrics(
        total_volume=_volume(sets),
        max_weight=_max_weight(sets),
        average_rpe=_average_rpe(sets),
    )


def compute_workout_metrics(exercises: Sequence[ExerciseBase]) -> WorkoutMetrics:
    """Aggregate metrics across every set of every exercise.

    Args:
        exercises: The workout's exercises.  May be empty, and exercises
            may have no sets.

    Returns:
        :class:`WorkoutMetrics`.  ``max_weight`` is 0 and ``average_rpe``
        is None when no set exists.
    """
    all_sets = [s for exercise in exercises for s in exercise.sets]

    return WorkoutMetrics(
        total_volume=_volume(all_sets),
        total_sets=len(all_sets),
        total_reps=sum(s.reps for s in all_sets),
        average_rpe=_average_rpe(all_sets),
        max_weight=_max_weight(all_sets),
    )


def with_exercise_metrics(exercises: Sequence[ExerciseBase]) -> list[ExerciseResponse]:
    """Attach freshly computed metrics to each exercise, preserving order."""
    return [
        ExerciseResponse(
            name=exercise.name,
            category=exercise.category,
            sets=list(exercise.sets),
            **compute_exercise_metrics(exercise.sets).model_dump(),
        )
        for exercise in exercises
    ]

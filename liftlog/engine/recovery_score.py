"""
Recovery score: a 0-100 summary of one day's recovery factors.

The score is a *normalised* weighted average: only factors that were
actually reported contribute, both to the numerator and to the weight
denominator.  A user who only logs sleep quality is scored on sleep
quality alone rather than penalised for the missing factors.

    Factor                Weight   Transform
    sleep.quality           30     identity (1-10)
    sleep.hours             20     clamp(0, 10, (hours - 4) × 2)
    nutrition.quality       20     identity (1-10)
    nutrition.hydration     10     identity (1-10)
    stress.level            20     11 - level (lower stress scores higher)

    score = round(Σ value × weight / Σ weight)

With no factor reported the score falls back to a neutral 50.

Transformed values are on a 0-10 scale, so computed scores fall within
0-10 of the declared 0-100 range.
"""

from __future__ import annotations

from typing import Callable, Optional

from liftlog.schemas.recovery import RecoveryFactors, RecoveryScores

# ======================================================================
# Configuration
# ======================================================================

NEUTRAL_SCORE = 50


def _sleep_hours_value(hours: float) -> float:
    return min(10.0, max(0.0, (hours - 4.0) * 2.0))


def _inverted_scale(level: float) -> float:
    return 11.0 - level


def _identity(value: float) -> float:
    return float(value)


# (factor getter, weight, transform) in the order they are summed.
_SCORE_COMPONENTS: list[tuple[Callable[[RecoveryFactors], Optional[float]], float, Callable[[float], float]]] = [
    (lambda f: f.sleep.quality, 30.0, _identity),
    (lambda f: f.sleep.hours, 20.0, _sleep_hours_value),
    (lambda f: f.nutrition.quality, 20.0, _identity),
    (lambda f: f.nutrition.hydration, 10.0, _identity),
    (lambda f: f.stress.level, 20.0, _inverted_scale),
]


# ======================================================================
# Core computation
# ======================================================================


def _weighted_score(factors: RecoveryFactors) -> int:
    weighted_sum = 0.0
    total_weight = 0.0

    for getter, weight, transform in _SCORE_COMPONENTS:
        value = getter(factors)
        if value is None:
            continue
        weighted_sum += transform(value) * weight
        total_weight += weight

    if total_weight == 0:
        return NEUTRAL_SCORE

    # Half-up rounding; the built-in round() rounds halves to even.
    return int(weighted_sum / total_weight + 0.5)


def compute_readiness_score(factors: RecoveryFactors, recovery_score: int) -> int:
    """Readiness to train.

    Not yet differentiated from the recovery score: it returns
    ``recovery_score`` unchanged.  Kept as its own function so a distinct
    readiness model can replace it without touching callers.
    """
    return recovery_score


def compute_recovery_score(factors: RecoveryFactors) -> RecoveryScores:
    """Compute recovery and readiness scores for one set of factors.

    Args:
        factors: Recovery factors; any field may be missing.

    Returns:
        :class:`RecoveryScores`.  Both scores are 50 when no factor is
        present.
    """
    recovery = _weighted_score(factors)
    return RecoveryScores(
        recovery_score=recovery,
        readiness_score=compute_readiness_score(factors, recovery),
    )

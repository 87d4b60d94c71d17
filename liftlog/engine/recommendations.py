"""
Recovery recommendations: turns recent recovery history into guidance.

The engine answers:
    - How long should I rest before the next hard session?  (hours)
    - How hard should that session be?  (intensity modifier)
    - Which recovery factors need attention?  (focus areas + warnings)

Model
-----
1. Average each leaf factor over the most recent records.  A factor that
   a record did not report counts as 0 for that record, and an empty
   history averages to 0 everywhere.
2. Start from 48h of recovery and an intensity modifier of 1.0.
3. Apply :data:`RECOMMENDATION_RULES` in order.  Rules are independent
   and non-exclusive: every rule whose predicate holds adds its focus
   area and warning and applies its numeric effect.

Recommendations are recomputed on every call and never cached, so they
always reflect the latest submitted record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from liftlog.schemas.recommendation import (
    AverageActivity,
    AverageFactors,
    AverageNutrition,
    AverageSleep,
    AverageStress,
    Recommendation,
    RecommendationResponse,
)
from liftlog.schemas.recovery import RecoveryFactors

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

BASE_RECOVERY_HOURS = 48.0
BASE_INTENSITY_MODIFIER = 1.0


class _HasFactors(Protocol):
    factors: RecoveryFactors


@dataclass(frozen=True)
class RecommendationRule:
    """A guarded effect on the recommendation accumulator."""

    focus_area: str
    warning: str
    applies: Callable[[AverageFactors], bool]
    extra_recovery_hours: float = 0.0
    intensity_factor: float = 1.0


# Order determines the order of focus areas and warnings.
RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        focus_area="sleep",
        warning="Insufficient sleep detected",
        applies=lambda avg: avg.sleep.hours < 7,
        extra_recovery_hours=12.0,
    ),
    RecommendationRule(
        focus_area="sleep_quality",
        warning="Poor sleep quality detected",
        applies=lambda avg: avg.sleep.quality < 6,
    ),
    RecommendationRule(
        focus_area="stress",
        warning="High stress levels detected",
        applies=lambda avg: avg.stress.level > 7,
        intensity_factor=0.8,
    ),
    RecommendationRule(
        focus_area="nutrition",
        warning="Poor nutrition quality detected",
        applies=lambda avg: avg.nutrition.quality < 6,
    ),
    RecommendationRule(
        focus_area="hydration",
        warning="Poor hydration detected",
        applies=lambda avg: avg.nutrition.hydration < 6,
    ),
    RecommendationRule(
        focus_area="activity",
        warning="Low daily activity detected",
        applies=lambda avg: avg.activity.step_count < 5000,
    ),
)


# ======================================================================
# Averaging
# ======================================================================


def average_factors(records: Sequence[_HasFactors]) -> AverageFactors:
    """Average each leaf factor across ``records`` (missing values count as 0)."""
    if not records:
        return AverageFactors()

    count = len(records)

    def mean(getter: Callable[[RecoveryFactors], float | int | None]) -> float:
        return sum(getter(r.factors) or 0 for r in records) / count

    return AverageFactors(
        sleep=AverageSleep(
            hours=mean(lambda f: f.sleep.hours),
            quality=mean(lambda f: f.sleep.quality),
        ),
        nutrition=AverageNutrition(
            quality=mean(lambda f: f.nutrition.quality),
            hydration=mean(lambda f: f.nutrition.hydration),
        ),
        stress=AverageStress(level=mean(lambda f: f.stress.level)),
        activity=AverageActivity(
            step_count=mean(lambda f: f.activity.step_count),
            cardio_minutes=mean(lambda f: f.activity.cardio_minutes),
        ),
    )


# ======================================================================
# Rule application
# ======================================================================


def apply_rules(
    averages: AverageFactors,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> Recommendation:
    """Fold ``rules`` over the default recommendation, in order."""
    recovery_hours = BASE_RECOVERY_HOURS
    intensity = BASE_INTENSITY_MODIFIER
    focus_areas: list[str] = []
    warnings: list[str] = []

    for rule in rules:
        if not rule.applies(averages):
            continue
        focus_areas.append(rule.focus_area)
        warnings.append(rule.warning)
        recovery_hours += rule.extra_recovery_hours
        intensity *= rule.intensity_factor

    return Recommendation(
        suggested_recovery_time=recovery_hours,
        intensity_modifier=intensity,
        focus_areas=focus_areas,
        warnings=warnings,
    )


# ======================================================================
# Main entry point
# ======================================================================


def compute_recommendations(
    recent_recoveries: Sequence[_HasFactors],
    recent_workouts: Sequence[object],
) -> RecommendationResponse:
    """Compute recovery recommendations from recent history.

    Args:
        recent_recoveries: Most recent recovery records (newest first),
            already limited by the caller.
        recent_workouts: Most recent workouts, already limited by the
            caller.  Only their count is reported.

    Returns:
        :class:`RecommendationResponse` with the recommendation and the
        averaged factors it was derived from.
    """
    averages = average_factors(recent_recoveries)
    recommendation = apply_rules(averages)

    logger.debug(
        "Computed recommendations from %d recoveries: focus=%s",
        len(recent_recoveries), recommendation.focus_areas,
    )

    return RecommendationResponse(
        recommendations=recommendation,
        average_factors=averages,
        recent_workouts=len(recent_workouts),
        recent_recoveries=len(recent_recoveries),
    )

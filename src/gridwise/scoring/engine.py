# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation scoring engine.

Filters the action catalog for a household profile and ranks the
survivors by a weighted sum of three components:

    score = 100 * (w_peak * peak + w_energy * energy + w_equity * equity)

peak:
    Peak-relief rating mapped through ``PEAK_RELIEF_VALUES``.
energy:
    Mean annual savings min-max scaled against the whole catalog
    (0.5 when every action shares the same bounds).
equity:
    0.7 for renter-friendly actions, 0.3 otherwise, plus 0.3 when the
    mean upfront cost is at most EUR 100; clamped to [0, 1].

In a grid-constrained PC4 area the peak weight is boosted and the three
weights are renormalised to sum to 1.0.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, NamedTuple, Optional

from gridwise.config import AdvisorConfig
from gridwise.data.catalog import load_catalog, load_grid_constrained
from gridwise.data.models import (
    ActionDefinition,
    AdvisoryResult,
    Recommendation,
    UserProfile,
)
from gridwise.scoring.eligibility import GATES, Gate, is_affordable, is_eligible
from gridwise.scoring.thresholds import score_to_grade
from gridwise.scoring.weights import (
    DEGENERATE_ENERGY_NORM,
    ENERGY_WEIGHT,
    EQUITY_LOW_COST_BONUS,
    EQUITY_LOW_COST_MAX_EUR,
    EQUITY_NOT_RENTER_FRIENDLY,
    EQUITY_RENTER_FRIENDLY,
    EQUITY_WEIGHT,
    GRID_PEAK_BOOST,
    GRID_PEAK_CAP,
    PEAK_RELIEF_VALUES,
    PEAK_WEIGHT,
)

logger = logging.getLogger(__name__)


class SavingsBounds(NamedTuple):
    """Catalog-wide annual savings bounds used for normalisation."""

    low: float
    high: float


class ScoreWeights(NamedTuple):
    peak: float
    energy: float
    equity: float


class ScoreComponents(NamedTuple):
    """Per-action component values, each in [0, 1]."""

    peak: float
    energy: float
    equity: float


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def normalize(value: float, low: float, high: float) -> float:
    """Min-max scale *value* into [0, 1]; degenerate bounds give 0.5."""
    if high == low:
        return DEGENERATE_ENERGY_NORM
    return (value - low) / (high - low)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def savings_bounds(catalog: Iterable[ActionDefinition]) -> SavingsBounds:
    """Return the lowest low and highest high annual savings in *catalog*."""
    actions = list(catalog)
    return SavingsBounds(
        low=min(a.annual_savings_eur[0] for a in actions),
        high=max(a.annual_savings_eur[1] for a in actions),
    )


def compute_weights(in_grid_constrained_area: bool) -> ScoreWeights:
    """Return the component weights, boosted toward peak relief when constrained."""
    peak, energy, equity = PEAK_WEIGHT, ENERGY_WEIGHT, EQUITY_WEIGHT
    if in_grid_constrained_area:
        peak = min(PEAK_WEIGHT * GRID_PEAK_BOOST, GRID_PEAK_CAP)
        total = peak + energy + equity
        peak, energy, equity = peak / total, energy / total, equity / total
    return ScoreWeights(peak, energy, equity)


def score_components(
    action: ActionDefinition, bounds: SavingsBounds
) -> ScoreComponents:
    """Compute the peak, energy and equity values for one action."""
    peak = PEAK_RELIEF_VALUES[action.peak_relief]
    energy = normalize(action.mean_annual_savings_eur, bounds.low, bounds.high)

    equity = (
        EQUITY_RENTER_FRIENDLY if action.renter_friendly
        else EQUITY_NOT_RENTER_FRIENDLY
    )
    if action.mean_cost_eur <= EQUITY_LOW_COST_MAX_EUR:
        equity += EQUITY_LOW_COST_BONUS

    return ScoreComponents(peak, energy, clamp01(equity))


def score_action(
    action: ActionDefinition,
    bounds: SavingsBounds,
    weights: ScoreWeights,
) -> Recommendation:
    """Score a single action and wrap it as a :class:`Recommendation`."""
    parts = score_components(action, bounds)
    raw = 100 * (
        weights.peak * parts.peak
        + weights.energy * parts.energy
        + weights.equity * parts.equity
    )
    score = round_half_up(raw)
    return Recommendation.model_validate(
        {**action.model_dump(), "score": score, "grade": score_to_grade(score)}
    )


# ---------------------------------------------------------------------------
# Ranking pipeline
# ---------------------------------------------------------------------------

def score_actions(
    profile: UserProfile,
    catalog: Iterable[ActionDefinition],
    grid_constrained: Iterable[str] = (),
    gates: Iterable[Gate] = GATES,
) -> list[Recommendation]:
    """Rank the eligible, affordable actions of *catalog* for *profile*.

    Savings bounds are taken over the whole catalog, not just the
    actions that survive filtering.  Actions with equal scores keep
    their catalog order.

    Returns
    -------
    list[Recommendation]
        Sorted by ``score`` descending; empty when nothing qualifies.
    """
    actions = tuple(catalog)
    if not actions:
        return []
    gates = tuple(gates)

    bounds = savings_bounds(actions)
    in_area = profile.pc4 in frozenset(grid_constrained)
    weights = compute_weights(in_area)

    eligible = [a for a in actions if is_eligible(a, profile, gates)]
    affordable = [
        a for a in eligible
        if is_affordable(a, profile.investment_capacity_eur)
    ]
    logger.debug(
        "PC4 %s: %d actions, %d eligible, %d affordable (grid constrained: %s)",
        profile.pc4, len(actions), len(eligible), len(affordable), in_area,
    )

    recommendations = [score_action(a, bounds, weights) for a in affordable]
    return sorted(recommendations, key=lambda r: r.score, reverse=True)


class ScoringEngine:
    """Holds the load-once catalog and reference data and scores profiles.

    Usage::

        engine = ScoringEngine.from_config()
        recommendations = engine.score(profile)
    """

    def __init__(
        self,
        catalog: Iterable[ActionDefinition],
        grid_constrained: Iterable[str] = (),
        gates: Iterable[Gate] = GATES,
    ) -> None:
        self.catalog: tuple[ActionDefinition, ...] = tuple(catalog)
        self.grid_constrained: frozenset[str] = frozenset(grid_constrained)
        self.gates: tuple[Gate, ...] = tuple(gates)

    @classmethod
    def from_config(cls, config: Optional[AdvisorConfig] = None) -> ScoringEngine:
        """Build an engine from the catalog and grid list named in *config*."""
        config = config or AdvisorConfig()
        return cls(
            load_catalog(config.catalog_path),
            load_grid_constrained(config.grid_constrained_path),
        )

    def is_grid_constrained(self, pc4: str) -> bool:
        return pc4 in self.grid_constrained

    def score(self, profile: UserProfile) -> list[Recommendation]:
        """Return the ranked recommendations for *profile*."""
        return score_actions(
            profile, self.catalog, self.grid_constrained, self.gates
        )

    def advise(self, profile: UserProfile) -> AdvisoryResult:
        """Score *profile* and wrap the ranking in an :class:`AdvisoryResult`."""
        return AdvisoryResult(
            profile=profile,
            recommendations=self.score(profile),
            in_grid_constrained_area=self.is_grid_constrained(profile.pc4),
        )

"""Scoring weight constants for the gridwise advisor.

The three base weights must sum to 1.0.  In a grid-constrained area the
peak weight is boosted and all three are renormalised back to 1.0.
"""

from gridwise.data.models import PeakRelief

# ---------------------------------------------------------------------------
# Base weights (must sum to 1.0)
# ---------------------------------------------------------------------------
PEAK_WEIGHT = 0.5
ENERGY_WEIGHT = 0.3
EQUITY_WEIGHT = 0.2

# ---------------------------------------------------------------------------
# Grid-constrained adjustment
# ---------------------------------------------------------------------------
GRID_PEAK_BOOST = 1.3
GRID_PEAK_CAP = 0.65

# ---------------------------------------------------------------------------
# Peak relief -> numeric contribution
# ---------------------------------------------------------------------------
PEAK_RELIEF_VALUES: dict[PeakRelief, float] = {
    PeakRelief.low: 0.25,
    PeakRelief.medium: 0.60,
    PeakRelief.high: 1.00,
}

# ---------------------------------------------------------------------------
# Equity term
# ---------------------------------------------------------------------------
EQUITY_RENTER_FRIENDLY = 0.7
EQUITY_NOT_RENTER_FRIENDLY = 0.3
EQUITY_LOW_COST_BONUS = 0.3
EQUITY_LOW_COST_MAX_EUR = 100  # mean upfront cost at or below this gets the bonus

# Normalised savings when every action shares the same savings bounds
DEGENERATE_ENERGY_NORM = 0.5

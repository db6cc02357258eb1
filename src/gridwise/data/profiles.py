"""Household profile presets for demos and quick runs.

Each preset is a complete :class:`~gridwise.data.models.UserProfile`
describing a typical Dutch household, from a renter in a grid-constrained
city centre to an owner with room to invest.
"""

from __future__ import annotations

from gridwise.data.models import (
    BuildYearBand,
    ComfortPriority,
    Habits,
    HeatingType,
    HomeType,
    MonthlyBillBand,
    Tenure,
    UserProfile,
)


# ---------------------------------------------------------------------------
# Profile definitions
# ---------------------------------------------------------------------------

RENTER_APARTMENT = UserProfile(
    pc4="1102",
    tenure=Tenure.renter,
    heating=HeatingType.gas_boiler,
    investment_capacity_eur=0,
    home_type=HomeType.apartment,
    build_year_band=BuildYearBand.pre_1992,
    monthly_bill_band=MonthlyBillBand.from_100_to_200,
    comfort_priority=ComfortPriority.save_money,
    habits=Habits(laundry_per_week=4, dishwasher=False, night_setback=False),
)

OWNER_ROW_HOUSE = UserProfile(
    pc4="3815",
    tenure=Tenure.owner,
    heating=HeatingType.gas_boiler,
    investment_capacity_eur=7500,
    home_type=HomeType.row,
    build_year_band=BuildYearBand.from_1992_to_2005,
    monthly_bill_band=MonthlyBillBand.from_200_to_300,
    comfort_priority=ComfortPriority.climate_impact,
    habits=Habits(laundry_per_week=5, dishwasher=True, night_setback=True),
)

VVE_APARTMENT = UserProfile(
    pc4="1012",
    tenure=Tenure.vve,
    heating=HeatingType.district,
    investment_capacity_eur=1500,
    home_type=HomeType.apartment,
    build_year_band=BuildYearBand.post_2005,
    monthly_bill_band=MonthlyBillBand.under_100,
    comfort_priority=ComfortPriority.warmer_home,
    habits=Habits(laundry_per_week=2, dishwasher=True, night_setback=False),
)

STARTER_OWNER = UserProfile(
    pc4="9722",
    tenure=Tenure.owner,
    heating=HeatingType.gas_boiler,
    investment_capacity_eur=0,
    home_type=HomeType.semi_detached,
    build_year_band=BuildYearBand.pre_1992,
    monthly_bill_band=MonthlyBillBand.over_300,
    comfort_priority=ComfortPriority.save_money,
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

PROFILES: dict[str, UserProfile] = {
    "renter_apartment": RENTER_APARTMENT,
    "owner_row_house": OWNER_ROW_HOUSE,
    "vve_apartment": VVE_APARTMENT,
    "starter_owner": STARTER_OWNER,
}


def get_profile(name: str) -> UserProfile:
    """Return a copy of the preset profile for the given name.

    Parameters
    ----------
    name:
        One of ``renter_apartment``, ``owner_row_house``,
        ``vve_apartment``, or ``starter_owner``.

    Returns
    -------
    UserProfile
        A deep copy, so callers may mutate it freely.

    Raises
    ------
    KeyError
        If *name* does not match any registered profile.
    """
    try:
        return PROFILES[name].model_copy(deep=True)
    except KeyError:
        available = ", ".join(sorted(PROFILES.keys()))
        raise KeyError(
            f"Unknown profile '{name}'. Available profiles: {available}"
        ) from None

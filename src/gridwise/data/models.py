# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the gridwise advisor.

This module defines the data contract shared by the catalog loader, the
scoring engine, the reporting layer and the CLI.  JSON field names follow
the camelCase schema of the catalog resource; Python code may use the
snake_case attribute names.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Category(str, Enum):
    """Investment class of an action; drives the affordability bypass."""

    low_cost = "low-cost"
    medium = "medium"
    major_investment = "major-investment"


class PeakRelief(str, Enum):
    """Impact of an action on grid demand in the 17:00-20:00 peak window."""

    low = "low"
    medium = "medium"
    high = "high"


class Feasibility(str, Enum):
    """How hard an action is to carry out."""

    easy = "easy"
    moderate = "moderate"
    pro = "pro"


class Tenure(str, Enum):
    """Ownership situation of the household."""

    renter = "renter"
    owner = "owner"
    vve = "vve"


class HeatingType(str, Enum):
    """Primary space-heating system of the home."""

    district = "district"
    gas_boiler = "gas-boiler"
    electric = "electric"
    hybrid_heat_pump = "hybrid-heat-pump"
    unknown = "unknown"


class HomeType(str, Enum):
    apartment = "apartment"
    row = "row"
    detached = "detached"
    semi_detached = "semi-detached"
    maisonette = "maisonette"
    unknown = "unknown"


class BuildYearBand(str, Enum):
    pre_1992 = "pre-1992"
    from_1992_to_2005 = "1992-2005"
    post_2005 = "post-2005"
    unknown = "unknown"


class MonthlyBillBand(str, Enum):
    under_100 = "under-100"
    from_100_to_200 = "100-200"
    from_200_to_300 = "200-300"
    over_300 = "300-plus"
    unknown = "unknown"


class ComfortPriority(str, Enum):
    save_money = "save-money"
    warmer_home = "warmer-home"
    climate_impact = "climate-impact"


class Language(str, Enum):
    en = "en"
    nl = "nl"


class SubsidyCode(str, Enum):
    isde = "ISDE"
    municipal = "Municipal"
    warmtefonds = "Warmtefonds"


class Grade(str, Enum):
    """Letter grade attached to every scored recommendation."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def color(self) -> str:
        """Terminal / report color associated with this grade."""
        if self in (Grade.A, Grade.B):
            return "green"
        if self is Grade.C:
            return "yellow"
        return "red"


# ---------------------------------------------------------------------------
# Catalog models
# ---------------------------------------------------------------------------

class SubsidyHint(BaseModel):
    """Label pointing the user at a subsidy scheme.  Informational only."""

    model_config = {"frozen": True}

    code: SubsidyCode = Field(..., description="Subsidy scheme identifier")
    note: str = Field(default="", description="Short explanatory note")


Range = tuple[float, float]


class ActionDefinition(BaseModel):
    """A single catalog action such as insulation, a heat pump or a pledge.

    Catalog entries are loaded once and never mutated, hence ``frozen``.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    id: str = Field(..., min_length=1, description="Unique action identifier")
    category: Category = Field(..., description="Investment class")
    title: str = Field(default="", description="Short display title")
    summary: str = Field(default="", description="One-paragraph description")

    # Gates
    audience: list[Tenure] = Field(
        default_factory=list,
        description="Eligible tenures; empty means no tenure restriction",
    )
    requires: dict[str, str] = Field(
        default_factory=dict,
        description="Profile field -> required value, e.g. {'heating': 'gas-boiler'}",
    )

    # Economics ([low, high] intervals)
    cost_range_eur: Range = Field(
        ..., alias="costRangeEUR", description="Upfront cost range in EUR"
    )
    annual_savings_eur: Range = Field(
        ..., alias="annualSavingsEUR", description="Annual bill savings in EUR"
    )
    annual_co2_kg: Range = Field(
        ..., alias="annualCO2kg", description="Annual CO2 reduction in kg"
    )

    # Qualitative ratings
    peak_relief: PeakRelief = Field(
        ..., alias="peakRelief", description="Peak-hour demand relief"
    )
    feasibility: Feasibility = Field(
        default=Feasibility.moderate, description="Implementation difficulty"
    )
    renter_friendly: bool = Field(
        default=False, alias="renterFriendly",
        description="Whether a renter can carry this out without landlord work",
    )

    # Pass-through information
    subsidies: list[SubsidyHint] = Field(default_factory=list)
    how_to: list[str] = Field(default_factory=list, alias="howTo")
    evidence: list[str] = Field(default_factory=list)

    @field_validator("cost_range_eur", "annual_savings_eur", "annual_co2_kg")
    @classmethod
    def _check_range(cls, value: Range) -> Range:
        low, high = value
        if low < 0 or high < 0:
            raise ValueError(f"range {list(value)} must not be negative")
        if low > high:
            raise ValueError(f"range {list(value)} has low > high")
        return value

    @field_validator("requires", mode="before")
    @classmethod
    def _drop_null_requires(cls, value):
        # A null expected value places no gate on that field.
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mean_cost_eur(self) -> float:
        """Midpoint of the upfront cost range."""
        return (self.cost_range_eur[0] + self.cost_range_eur[1]) / 2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mean_annual_savings_eur(self) -> float:
        """Midpoint of the annual savings range."""
        return (self.annual_savings_eur[0] + self.annual_savings_eur[1]) / 2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mean_annual_co2_kg(self) -> float:
        """Midpoint of the annual CO2 reduction range."""
        return (self.annual_co2_kg[0] + self.annual_co2_kg[1]) / 2


# ---------------------------------------------------------------------------
# Profile models
# ---------------------------------------------------------------------------

class Habits(BaseModel):
    """Basic behavioural hooks collected by the questionnaire."""

    model_config = {"frozen": False, "populate_by_name": True}

    laundry_per_week: int = Field(default=3, ge=0, alias="laundryPerWeek")
    dishwasher: bool = Field(default=False)
    night_setback: bool = Field(default=False, alias="nightSetback")


class UserProfile(BaseModel):
    """Questionnaire answers for one household.

    Only ``pc4``, ``tenure``, ``heating`` and ``investment_capacity_eur``
    feed the scoring engine.  ``tenure`` and ``heating`` may be left unset
    for a partial profile; gates that depend on them then fail closed.
    """

    model_config = {"frozen": False, "populate_by_name": True}

    pc4: str = Field(
        ..., pattern=r"^[0-9]{4}$",
        description="First four digits of the postal code",
    )
    tenure: Optional[Tenure] = Field(default=None)
    heating: Optional[HeatingType] = Field(default=None)
    investment_capacity_eur: float = Field(
        default=0.0, ge=0, alias="investmentCapacityEUR",
        description="Upfront budget ceiling in EUR",
    )

    # Carried for presentation layers; not weighted by the engine.
    lang: Language = Field(default=Language.en)
    home_type: HomeType = Field(default=HomeType.unknown, alias="homeType")
    build_year_band: BuildYearBand = Field(
        default=BuildYearBand.unknown, alias="buildYearBand"
    )
    monthly_bill_band: MonthlyBillBand = Field(
        default=MonthlyBillBand.unknown, alias="monthlyBillBand"
    )
    comfort_priority: Optional[ComfortPriority] = Field(
        default=None, alias="comfortPriority"
    )
    priority_ratings: dict[str, int] = Field(
        default_factory=dict, alias="priorityRatings"
    )
    habits: Habits = Field(default_factory=Habits)

    @field_validator("investment_capacity_eur", mode="before")
    @classmethod
    def _null_capacity(cls, value):
        return 0.0 if value is None else value


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class Recommendation(ActionDefinition):
    """An eligible action extended with its score and grade."""

    score: int = Field(..., ge=0, le=100, description="Composite score (0-100)")
    grade: Grade = Field(..., description="Letter grade for the score")


class AdvisoryResult(BaseModel):
    """Complete output of one advisory run.

    Consumed by the terminal renderer and the JSON exporter.
    """

    model_config = {"frozen": False, "populate_by_name": True}

    profile: UserProfile
    recommendations: list[Recommendation] = Field(default_factory=list)
    in_grid_constrained_area: bool = Field(
        default=False, alias="inGridConstrainedArea"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp when the advice was generated",
    )

    def top(self, n: int) -> list[Recommendation]:
        """Return the *n* highest ranked recommendations."""
        return self.recommendations[:n]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_annual_savings_eur(self) -> float:
        """Sum of mean annual savings across all recommendations."""
        return round(
            sum(r.mean_annual_savings_eur for r in self.recommendations), 2
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_annual_co2_kg(self) -> float:
        """Sum of mean annual CO2 reduction across all recommendations."""
        return round(
            sum(r.mean_annual_co2_kg for r in self.recommendations), 2
        )

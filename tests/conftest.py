# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the gridwise test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from gridwise.data.catalog import load_catalog, load_grid_constrained
from gridwise.data.models import ActionDefinition, AdvisoryResult, UserProfile
from gridwise.data.profiles import get_profile
from gridwise.scoring.engine import ScoringEngine


def _action(**overrides: Any) -> ActionDefinition:
    defaults: dict[str, Any] = {
        "id": "test-action",
        "category": "low-cost",
        "title": "Test action",
        "audience": [],
        "requires": {},
        "costRangeEUR": [0, 20],
        "annualSavingsEUR": [50, 50],
        "annualCO2kg": [10, 20],
        "peakRelief": "high",
        "renterFriendly": True,
    }
    defaults.update(overrides)
    return ActionDefinition.model_validate(defaults)


@pytest.fixture()
def make_action() -> Callable[..., ActionDefinition]:
    """Factory for catalog actions; keyword overrides use the JSON field names."""
    return _action


@pytest.fixture()
def renter() -> UserProfile:
    """A renter with a gas boiler, no budget, outside any constrained area."""
    return UserProfile(
        pc4="9999",
        tenure="renter",
        heating="gas-boiler",
        investment_capacity_eur=0,
    )


@pytest.fixture(scope="session")
def bundled_catalog() -> tuple[ActionDefinition, ...]:
    return load_catalog()


@pytest.fixture(scope="session")
def bundled_grid() -> frozenset[str]:
    return load_grid_constrained()


@pytest.fixture()
def engine(bundled_catalog, bundled_grid) -> ScoringEngine:
    return ScoringEngine(bundled_catalog, bundled_grid)


@pytest.fixture()
def renter_result(engine: ScoringEngine) -> AdvisoryResult:
    """Advice for the renter_apartment preset against the bundled catalog."""
    return engine.advise(get_profile("renter_apartment"))

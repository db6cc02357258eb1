"""Tests for household profile presets."""

from __future__ import annotations

import pytest

from gridwise.data.models import UserProfile
from gridwise.data.profiles import PROFILES, get_profile


class TestProfiles:
    """Tests for profile registration and retrieval."""

    @pytest.mark.parametrize("name", [
        "renter_apartment",
        "owner_row_house",
        "vve_apartment",
        "starter_owner",
    ])
    def test_get_profile_returns_correct_type(self, name: str):
        assert isinstance(get_profile(name), UserProfile)

    def test_get_profile_unknown_raises(self):
        with pytest.raises(KeyError):
            get_profile("nonexistent_profile")

    def test_all_profiles_registered(self):
        expected = {"renter_apartment", "owner_row_house", "vve_apartment", "starter_owner"}
        assert set(PROFILES.keys()) == expected

    def test_get_profile_returns_copy(self):
        profile = get_profile("renter_apartment")
        profile.investment_capacity_eur = 99_999
        assert PROFILES["renter_apartment"].investment_capacity_eur == 0

    @pytest.mark.parametrize("name", list(PROFILES.keys()))
    def test_profile_constraints(self, name: str):
        profile = get_profile(name)
        assert profile.tenure is not None
        assert profile.heating is not None
        assert profile.investment_capacity_eur >= 0

    @pytest.mark.parametrize("name", list(PROFILES.keys()))
    def test_every_preset_gets_advice(self, engine, name: str):
        assert engine.score(get_profile(name))

    def test_starter_owner_only_low_cost(self, engine):
        recs = engine.score(get_profile("starter_owner"))
        assert all(r.category.value == "low-cost" for r in recs)

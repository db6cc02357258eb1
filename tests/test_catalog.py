# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for catalog and grid-constrained list loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gridwise.data.catalog import (
    CatalogError,
    load_catalog,
    load_grid_constrained,
    parse_catalog,
    parse_grid_constrained,
)
from gridwise.data.models import ActionDefinition, Category


def _raw_action(**overrides) -> dict:
    raw = {
        "id": "pledge",
        "category": "low-cost",
        "costRangeEUR": [0, 0],
        "annualSavingsEUR": [10, 20],
        "annualCO2kg": [5, 10],
        "peakRelief": "medium",
    }
    raw.update(overrides)
    return raw


class TestBundledCatalog:
    """Tests for the catalog shipped with the package."""

    def test_non_empty(self, bundled_catalog):
        assert len(bundled_catalog) > 0
        assert all(isinstance(a, ActionDefinition) for a in bundled_catalog)

    def test_unique_ids(self, bundled_catalog):
        ids = [a.id for a in bundled_catalog]
        assert len(ids) == len(set(ids))

    def test_has_every_category(self, bundled_catalog):
        assert {a.category for a in bundled_catalog} == set(Category)

    def test_savings_bounds_computable(self, bundled_catalog):
        low = min(a.annual_savings_eur[0] for a in bundled_catalog)
        high = max(a.annual_savings_eur[1] for a in bundled_catalog)
        assert 0 <= low < high

    def test_is_immutable_tuple(self, bundled_catalog):
        assert isinstance(bundled_catalog, tuple)

    def test_grid_constrained(self, bundled_grid):
        assert isinstance(bundled_grid, frozenset)
        assert "1102" in bundled_grid
        assert all(len(pc4) == 4 and pc4.isdigit() for pc4 in bundled_grid)


class TestParseCatalog:

    def test_preserves_order(self):
        actions = parse_catalog([_raw_action(id="b"), _raw_action(id="a")])
        assert [a.id for a in actions] == ["b", "a"]

    def test_empty_rejected(self):
        with pytest.raises(CatalogError, match="at least one"):
            parse_catalog([])

    def test_not_a_list(self):
        with pytest.raises(CatalogError, match="array"):
            parse_catalog({"id": "pledge"})

    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate action id 'pledge'"):
            parse_catalog([_raw_action(), _raw_action()])

    def test_invalid_range_names_action(self):
        with pytest.raises(CatalogError, match="broken"):
            parse_catalog([_raw_action(id="broken", costRangeEUR=[300, 100])])

    def test_missing_field(self):
        raw = _raw_action()
        del raw["peakRelief"]
        with pytest.raises(CatalogError):
            parse_catalog([raw])

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestParseGridConstrained:

    def test_valid(self):
        assert parse_grid_constrained(["1011", "1102"]) == frozenset({"1011", "1102"})

    def test_empty_is_allowed(self):
        assert parse_grid_constrained([]) == frozenset()

    @pytest.mark.parametrize("entry", [1102, "110", "11a2"])
    def test_bad_entry(self, entry):
        with pytest.raises(CatalogError, match="PC4"):
            parse_grid_constrained([entry])


class TestLoadFromPath:

    def test_load_catalog_file(self, tmp_path: Path):
        path = tmp_path / "actions.json"
        path.write_text(json.dumps([_raw_action()]))
        actions = load_catalog(path)
        assert [a.id for a in actions] == ["pledge"]

    def test_load_grid_file(self, tmp_path: Path):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps(["3511"]))
        assert load_grid_constrained(str(path)) == frozenset({"3511"})

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "actions.json"
        path.write_text("[{not json")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

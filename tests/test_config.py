# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the YAML advisor configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from gridwise.config import AdvisorConfig, load_config
from gridwise.scoring.engine import ScoringEngine


class TestAdvisorConfig:

    def test_defaults(self):
        config = AdvisorConfig()
        assert config.catalog_path is None
        assert config.grid_constrained_path is None
        assert config.top_n == 3
        assert config.log_level == "WARNING"

    def test_lowercase_log_level(self):
        assert AdvisorConfig(log_level="debug").log_level == "DEBUG"

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            AdvisorConfig(log_level="chatty")

    def test_top_n_positive(self):
        with pytest.raises(ValidationError):
            AdvisorConfig(top_n=0)


class TestLoadConfig:

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_yaml_syntax_error(self, tmp_path: Path):
        path = tmp_path / "gridwise.yaml"
        path.write_text("top_n: [1\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(path)

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "gridwise.yaml"
        path.write_text("")
        assert load_config(path) == AdvisorConfig()

    def test_relative_paths_resolved(self, tmp_path: Path):
        path = tmp_path / "gridwise.yaml"
        path.write_text("catalog_path: data/actions.json\ntop_n: 5\n")
        config = load_config(path)
        assert config.top_n == 5
        assert config.catalog_path == str(tmp_path / "data" / "actions.json")
        assert config.grid_constrained_path is None

    def test_absolute_path_kept(self, tmp_path: Path):
        target = tmp_path / "grid.json"
        path = tmp_path / "gridwise.yaml"
        path.write_text(f"grid_constrained_path: {target}\n")
        assert load_config(path).grid_constrained_path == str(target)

    def test_engine_from_config(self, tmp_path: Path):
        (tmp_path / "grid.json").write_text(json.dumps(["4321"]))
        path = tmp_path / "gridwise.yaml"
        path.write_text("grid_constrained_path: grid.json\n")
        engine = ScoringEngine.from_config(load_config(path))
        assert engine.grid_constrained == frozenset({"4321"})
        assert len(engine.catalog) > 0

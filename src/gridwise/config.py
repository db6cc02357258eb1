# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Advisor configuration model and YAML loader.

Example ``gridwise.yaml``::

    catalog_path: data/actions.json
    grid_constrained_path: data/grid_constrained_pc4.json
    top_n: 5
    log_level: INFO

Every key is optional.  Relative paths are resolved against the directory
holding the YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class AdvisorConfig(BaseModel):
    """Top-level advisor configuration."""

    catalog_path: Optional[str] = Field(
        default=None,
        description="Action catalog JSON; the bundled catalog when unset",
    )
    grid_constrained_path: Optional[str] = Field(
        default=None,
        description="Grid-constrained PC4 JSON list; the bundled list when unset",
    )
    top_n: int = Field(
        default=3, ge=1, description="Number of recommendations highlighted"
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


def load_config(path: str | Path) -> AdvisorConfig:
    """Load an AdvisorConfig from a YAML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid config {config_path}: {exc}") from exc

    config = AdvisorConfig.model_validate(raw)

    base_dir = config_path.parent
    for key in ("catalog_path", "grid_constrained_path"):
        value = getattr(config, key)
        if value and not Path(value).is_absolute():
            setattr(config, key, str(base_dir / value))
    return config

# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""gridwise - household energy-transition advisor."""

__version__ = "0.1.0"

from gridwise.config import AdvisorConfig, load_config
from gridwise.data.catalog import CatalogError, load_catalog, load_grid_constrained
from gridwise.data.models import (
    ActionDefinition,
    AdvisoryResult,
    Grade,
    Recommendation,
    UserProfile,
)
from gridwise.data.profiles import PROFILES, get_profile
from gridwise.scoring.engine import ScoringEngine, score_actions

__all__ = [
    "ActionDefinition",
    "AdvisorConfig",
    "AdvisoryResult",
    "CatalogError",
    "Grade",
    "PROFILES",
    "Recommendation",
    "ScoringEngine",
    "UserProfile",
    "get_profile",
    "load_catalog",
    "load_config",
    "load_grid_constrained",
    "score_actions",
]

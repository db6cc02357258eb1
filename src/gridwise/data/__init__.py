# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models, catalog loaders, and household profile presets."""

from gridwise.data.models import (
    ActionDefinition,
    AdvisoryResult,
    Category,
    Grade,
    HeatingType,
    PeakRelief,
    Recommendation,
    Tenure,
    UserProfile,
)
from gridwise.data.catalog import (
    CatalogError,
    load_catalog,
    load_grid_constrained,
)
from gridwise.data.profiles import PROFILES, get_profile

__all__ = [
    "ActionDefinition",
    "AdvisoryResult",
    "CatalogError",
    "Category",
    "Grade",
    "HeatingType",
    "PeakRelief",
    "PROFILES",
    "Recommendation",
    "Tenure",
    "UserProfile",
    "get_profile",
    "load_catalog",
    "load_grid_constrained",
]

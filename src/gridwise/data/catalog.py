# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Loaders for the action catalog and the grid-constrained PC4 list.

Both resources are JSON documents bundled with the package.  They are
read once at start-up, validated eagerly, and handed to the scoring
engine as immutable collections.  Integrity defects surface here as
:class:`CatalogError` so the engine never sees a nonsensical catalog.
"""

from __future__ import annotations

import json
import logging
import re
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gridwise.data.models import ActionDefinition

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "actions.json"
GRID_CONSTRAINED_RESOURCE = "grid_constrained_pc4.json"

_PC4_RE = re.compile(r"^[0-9]{4}$")


class CatalogError(ValueError):
    """Raised when catalog or reference data fails validation."""


def _read_json(path: str | Path | None, resource: str) -> Any:
    """Read a JSON document from *path*, or from the bundled *resource*."""
    if path is None:
        source = resources.files("gridwise.data").joinpath(resource)
        label = f"<bundled {resource}>"
    else:
        source = Path(path)
        label = str(source)
        if not source.exists():
            raise FileNotFoundError(f"Data file not found: {source}")

    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{label} is not valid JSON: {exc}") from exc


def parse_catalog(raw: Any) -> tuple[ActionDefinition, ...]:
    """Validate a decoded catalog document.

    Parameters
    ----------
    raw:
        The decoded JSON value; must be a non-empty list of action objects.

    Returns
    -------
    tuple[ActionDefinition, ...]
        The actions in document order.

    Raises
    ------
    CatalogError
        If the document is not a list, is empty, contains an invalid
        action (bad range, unknown enum value, missing field) or repeats
        an action id.
    """
    if not isinstance(raw, list):
        raise CatalogError("Catalog must be a JSON array of actions")
    if not raw:
        raise CatalogError("Catalog must contain at least one action")

    actions: list[ActionDefinition] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        label = item.get("id", f"#{index}") if isinstance(item, dict) else f"#{index}"
        try:
            action = ActionDefinition.model_validate(item)
        except ValidationError as exc:
            raise CatalogError(f"Invalid action '{label}': {exc}") from exc
        if action.id in seen:
            raise CatalogError(f"Duplicate action id '{action.id}'")
        seen.add(action.id)
        actions.append(action)

    return tuple(actions)


def parse_grid_constrained(raw: Any) -> frozenset[str]:
    """Validate a decoded grid-constrained list of PC4 strings."""
    if not isinstance(raw, list):
        raise CatalogError("Grid-constrained list must be a JSON array")
    for entry in raw:
        if not isinstance(entry, str) or not _PC4_RE.match(entry):
            raise CatalogError(
                f"Grid-constrained entry {entry!r} is not a 4-digit PC4 string"
            )
    return frozenset(raw)


def load_catalog(path: str | Path | None = None) -> tuple[ActionDefinition, ...]:
    """Load the action catalog from *path* or the bundled default."""
    actions = parse_catalog(_read_json(path, CATALOG_RESOURCE))
    logger.debug("Loaded %d catalog actions", len(actions))
    return actions


def load_grid_constrained(path: str | Path | None = None) -> frozenset[str]:
    """Load the grid-constrained PC4 set from *path* or the bundled default."""
    areas = parse_grid_constrained(_read_json(path, GRID_CONSTRAINED_RESOURCE))
    logger.debug("Loaded %d grid-constrained PC4 areas", len(areas))
    return areas

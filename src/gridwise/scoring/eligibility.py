# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Eligibility and affordability filters.

Eligibility is a rule set: each gate is a plain predicate
``(action, profile) -> bool`` and an action is eligible only when every
gate passes.  Gates fail closed, so a profile that leaves ``tenure`` or
``heating`` unset never passes a gate that depends on that field.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional

from gridwise.data.models import ActionDefinition, Category, UserProfile

Gate = Callable[[ActionDefinition, UserProfile], bool]

# Accept both snake_case field names and camelCase aliases in ``requires``.
_PROFILE_FIELDS: dict[str, str] = {name: name for name in UserProfile.model_fields}
_PROFILE_FIELDS.update(
    {
        info.alias: name
        for name, info in UserProfile.model_fields.items()
        if info.alias
    }
)


def tenure_gate(action: ActionDefinition, profile: UserProfile) -> bool:
    """Reject when the action has an audience that excludes the profile's tenure."""
    if not action.audience:
        return True
    return profile.tenure is not None and profile.tenure in action.audience


def requires_gate(action: ActionDefinition, profile: UserProfile) -> bool:
    """Check every ``requires`` entry against the matching profile field.

    Unknown field names and unset profile values both reject the action.
    """
    for key, expected in action.requires.items():
        field = _PROFILE_FIELDS.get(key)
        if field is None:
            return False
        actual = getattr(profile, field)
        if actual is None:
            return False
        if isinstance(actual, Enum):
            actual = actual.value
        if str(actual) != expected:
            return False
    return True


GATES: tuple[Gate, ...] = (tenure_gate, requires_gate)


def is_eligible(
    action: ActionDefinition,
    profile: UserProfile,
    gates: Iterable[Gate] = GATES,
) -> bool:
    """Return True if *action* passes every gate for *profile*."""
    return all(gate(action, profile) for gate in gates)


def is_affordable(
    action: ActionDefinition, investment_capacity_eur: Optional[float] = None
) -> bool:
    """Return True if the user can fund *action* upfront.

    Low-cost actions are always kept; anything else must have a lower
    cost bound within the investment capacity (0 when not given).
    """
    if action.category is Category.low_cost:
        return True
    return action.cost_range_eur[0] <= (investment_capacity_eur or 0)

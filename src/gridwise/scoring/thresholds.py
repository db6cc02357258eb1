# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Grade thresholds and color mappings for recommendation scores."""

from gridwise.data.models import Grade

# ---------------------------------------------------------------------------
# Grade thresholds (score -> letter grade), inclusive lower bounds
# ---------------------------------------------------------------------------
GRADE_A_MIN = 80
GRADE_B_MIN = 65
GRADE_C_MIN = 50
# Below 50 = D


def score_to_grade(score: float) -> Grade:
    """Convert a 0-100 score to a letter grade."""
    if score >= GRADE_A_MIN:
        return Grade.A
    if score >= GRADE_B_MIN:
        return Grade.B
    if score >= GRADE_C_MIN:
        return Grade.C
    return Grade.D


def score_to_color(score: float) -> str:
    """Convert a 0-100 score to the color of its grade.

    Returns 'green', 'yellow', or 'red'.
    """
    return score_to_grade(score).color

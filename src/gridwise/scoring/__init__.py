# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Eligibility filtering, weighted scoring and ranking."""

from gridwise.scoring.engine import ScoringEngine, score_actions

__all__ = ["ScoringEngine", "score_actions"]

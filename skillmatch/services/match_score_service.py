from __future__ import annotations

import math

from skillmatch.services.skill_matcher import REQUIRED_SKILLS


# Constants of the scoring heuristic.
BASELINE_OFFSET = 3
SCALE = 100
MATCH_BONUS = 20
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards.
    return int(math.floor(value + 0.5))


def compute_match_score(*, skill_count: int, matched_count: int, required_count: int = len(REQUIRED_SKILLS)) -> int:
    """Score a candidate from 0 to 100.

    The skill-count ratio against ``required_count + 3`` is scaled to a
    percentage and rounded, then every matched skill adds a flat bonus.
    The sum is capped at 100. It cannot go negative for non-negative counts.
    """

    ratio = skill_count / (required_count + BASELINE_OFFSET)
    return min(MAX_SCORE, round_half_up(ratio * SCALE) + matched_count * MATCH_BONUS)

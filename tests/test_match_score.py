from __future__ import annotations

import pytest

from skillmatch.services.match_score_service import compute_match_score, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(0.4, 0), (0.5, 1), (2.5, 3), (66.666, 67), (33.333, 33)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_score_without_matches() -> None:
    assert compute_match_score(skill_count=4, matched_count=0) == 67


def test_score_with_match_bonus() -> None:
    assert compute_match_score(skill_count=2, matched_count=2) == 73


def test_score_is_capped_at_100() -> None:
    assert compute_match_score(skill_count=3, matched_count=3) == 100
    assert compute_match_score(skill_count=50, matched_count=10) == 100


def test_score_for_empty_skill_list_is_zero() -> None:
    assert compute_match_score(skill_count=0, matched_count=0) == 0


def test_score_uses_required_count_in_denominator() -> None:
    # 1 / (1 + 3) * 100 = 25
    assert compute_match_score(skill_count=1, matched_count=0, required_count=1) == 25
    # 1 / (5 + 3) * 100 = 12.5 rounds up
    assert compute_match_score(skill_count=1, matched_count=0, required_count=5) == 13

# skill_matcher.py
from typing import Sequence


REQUIRED_SKILLS: tuple[str, ...] = ("React", "TypeScript", "Tailwind")


def normalize_skill_name(value: str) -> str:
    return value.lower()


def is_skill_match(candidate: str, required: str) -> bool:
    """Case-insensitive substring containment in either direction."""
    cand = normalize_skill_name(candidate)
    req = normalize_skill_name(required)
    return req in cand or cand in req


def match_core_skills(user_skills: Sequence[str], required_skills: Sequence[str] = REQUIRED_SKILLS) -> list[str]:
    # Keeps the candidate's spelling, order and duplicates.
    return [skill for skill in user_skills if any(is_skill_match(skill, req) for req in required_skills)]

# gap_service.py
from typing import Sequence

from skillmatch.services.skill_matcher import REQUIRED_SKILLS, normalize_skill_name


SUGGESTION_TEMPLATE = "Consider learning {skill} to improve your chances for {target_role}"


def find_missing_skills(user_skills: Sequence[str], required_skills: Sequence[str] = REQUIRED_SKILLS) -> list[str]:
    # Only checks that the required skill appears inside a candidate skill.
    # match_core_skills also accepts the reverse direction, so a short entry like
    # "type" counts as matched while "TypeScript" is still reported missing.
    # TODO: switch to is_skill_match once clients stop relying on the one-way check.
    normalized = [normalize_skill_name(skill) for skill in user_skills]
    return [
        req
        for req in required_skills
        if not any(normalize_skill_name(req) in skill for skill in normalized)
    ]


def build_suggestions(missing_skills: Sequence[str], target_role: object) -> list[str]:
    return [SUGGESTION_TEMPLATE.format(skill=skill, target_role=target_role) for skill in missing_skills]

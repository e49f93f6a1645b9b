from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Sequence

from skillmatch.services.gap_service import build_suggestions, find_missing_skills
from skillmatch.services.match_score_service import compute_match_score
from skillmatch.services.skill_matcher import REQUIRED_SKILLS, match_core_skills


INVALID_BODY_MESSAGE = "Invalid request body. 'skills' (array) and 'targetRole' (string) are required."
INVALID_SKILL_ENTRY_MESSAGE = "Invalid request body. 'skills' entries must be strings."
MAX_DEPTH_MESSAGE = "Maximum nesting depth exceeded"


class SkillMatchError(ValueError):
    pass


class ParseError(SkillMatchError):
    """Request text is not well-formed JSON."""


class ValidationError(SkillMatchError):
    """Request JSON is well-formed but misses 'skills' or 'targetRole'."""


@dataclass(frozen=True)
class MatchRequest:
    skills: list[str]
    target_role: Any


@dataclass(frozen=True)
class MatchResult:
    score: int
    core_skills_matched: list[str]
    missing_skills: list[str]
    suggestions: list[str]

    def to_payload(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "coreSkillsMatched": list(self.core_skills_matched),
            "missingSkills": list(self.missing_skills),
            "suggestions": list(self.suggestions),
        }


def _reject_constant(name: str) -> Any:
    # json accepts NaN and Infinity; strict JSON does not.
    raise ValueError(f"Unexpected token {name}")


def _is_truthy(value: Any) -> bool:
    # Only null, false, 0 and "" are falsy; empty arrays and objects count as present.
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def decode_body(body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Request body is not valid UTF-8: {exc.reason}") from exc


def parse_request(raw: str) -> Any:
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ParseError(MAX_DEPTH_MESSAGE) from exc
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def validate_request(payload: Any) -> MatchRequest:
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)

    skills = payload.get("skills")
    target_role = payload.get("targetRole")
    # An empty skills list is valid; only its type is checked.
    if not isinstance(skills, list) or not _is_truthy(target_role):
        raise ValidationError(INVALID_BODY_MESSAGE)
    if not all(isinstance(skill, str) for skill in skills):
        raise ValidationError(INVALID_SKILL_ENTRY_MESSAGE)

    return MatchRequest(skills=list(skills), target_role=target_role)


def analyze_skills(request: MatchRequest, *, required_skills: Sequence[str] = REQUIRED_SKILLS) -> MatchResult:
    matched = match_core_skills(request.skills, required_skills)
    missing = find_missing_skills(request.skills, required_skills)
    score = compute_match_score(
        skill_count=len(request.skills),
        matched_count=len(matched),
        required_count=len(required_skills),
    )
    return MatchResult(
        score=score,
        core_skills_matched=matched,
        missing_skills=missing,
        suggestions=build_suggestions(missing, request.target_role),
    )


def evaluate(raw: str, *, required_skills: Sequence[str] = REQUIRED_SKILLS) -> MatchResult:
    """Parse, validate and score one request.

    Raises ParseError for malformed JSON (carrying the parser message) and
    ValidationError for a well-formed body without a 'skills' list or a
    truthy 'targetRole'.
    """

    request = validate_request(parse_request(raw))
    return analyze_skills(request, required_skills=required_skills)


def render_result(result: MatchResult) -> str:
    return json.dumps(result.to_payload(), indent=2, ensure_ascii=False)


def evaluate_to_text(raw: str, *, required_skills: Sequence[str] = REQUIRED_SKILLS) -> str:
    return render_result(evaluate(raw, required_skills=required_skills))

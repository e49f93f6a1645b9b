from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from skillmatch.config import Settings, get_settings
from skillmatch.schemas.analysis import (
    EXAMPLE_REQUEST,
    AnalyzeError,
    AnalyzeRequest,
    AnalyzeResponse,
    RequiredSkillsResponse,
)
from skillmatch.services.analysis_service import ParseError, ValidationError, decode_body, evaluate


router = APIRouter(prefix="/analyze", tags=["analyze"])

logger = logging.getLogger(__name__)


async def simulate_network_delay(latency_ms: int) -> None:
    if latency_ms > 0:
        await asyncio.sleep(latency_ms / 1000)


@router.post(
    "",
    response_model=AnalyzeResponse,
    summary="Match candidate skills against the target-role skill set",
    responses={400: {"model": AnalyzeError}, 422: {"model": AnalyzeError}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": AnalyzeRequest.model_json_schema(by_alias=True)}},
        }
    },
)
async def analyze(request: Request, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    # The body is read as text so malformed JSON surfaces as a ParseError
    # rather than FastAPI's own request validation.
    body = await request.body()

    await simulate_network_delay(settings.simulated_latency_ms)

    try:
        result = evaluate(decode_body(body), required_skills=settings.required_skills)
    except ParseError as exc:
        logger.info("analyze.parse_error detail=%s", exc)
        raise
    except ValidationError as exc:
        logger.info("analyze.validation_error detail=%s", exc)
        raise

    logger.info(
        "analyze.ok score=%s matched=%s missing=%s",
        result.score,
        len(result.core_skills_matched),
        len(result.missing_skills),
    )
    return AnalyzeResponse.model_validate(result.to_payload())


@router.get("/example", response_model=AnalyzeRequest, summary="Sample request body")
def analyze_example() -> AnalyzeRequest:
    return EXAMPLE_REQUEST


@router.get("/required-skills", response_model=RequiredSkillsResponse, summary="Active Required-Skill Set")
def required_skills(settings: Settings = Depends(get_settings)) -> RequiredSkillsResponse:
    return RequiredSkillsResponse(required_skills=list(settings.required_skills))

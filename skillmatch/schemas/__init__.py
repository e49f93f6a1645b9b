# __init__.py
from skillmatch.schemas.analysis import (
    EXAMPLE_REQUEST,
    AnalyzeError,
    AnalyzeRequest,
    AnalyzeResponse,
    RequiredSkillsResponse,
)

__all__ = [
	"EXAMPLE_REQUEST",
	"AnalyzeError",
	"AnalyzeRequest",
	"AnalyzeResponse",
	"RequiredSkillsResponse",
]

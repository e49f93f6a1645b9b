# analysis.py
from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    # Documents the expected body. The analyze route validates raw text itself.
    model_config = ConfigDict(populate_by_name=True)

    skills: list[str]
    target_role: str = Field(alias="targetRole")


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    core_skills_matched: list[str] = Field(default_factory=list, alias="coreSkillsMatched")
    missing_skills: list[str] = Field(default_factory=list, alias="missingSkills")
    suggestions: list[str] = Field(default_factory=list)


class AnalyzeError(BaseModel):
    detail: str
    error: str


class RequiredSkillsResponse(BaseModel):
    required_skills: list[str] = Field(alias="requiredSkills")

    model_config = ConfigDict(populate_by_name=True)


# Body the demo page pre-fills.
EXAMPLE_REQUEST = AnalyzeRequest(
    skills=["JavaScript", "HTML", "CSS", "Git"],
    target_role="Frontend Developer",
)

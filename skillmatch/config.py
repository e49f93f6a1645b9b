from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from skillmatch import __version__
from skillmatch.services.skill_matcher import REQUIRED_SKILLS


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _parse_str_list(raw: Any) -> list[str]:
    """Accept a list, a JSON array string or a comma-separated string."""
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except json.JSONDecodeError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    values: list[str] = []
    for item in items:
        if item is None:
            continue
        value = str(item).strip()
        if value:
            values.append(value)
    return values


class Settings(BaseSettings):
    app_name: str = Field(default="Skill Matcher API")
    api_prefix: str = Field(default="/api/v1")
    version: str = Field(default=__version__)
    environment: str = Field(default="development")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        validation_alias="CORS_ORIGINS",
    )

    # Required-Skill Set for the target-role archetype. Read once at startup.
    # - JSON array string: REQUIRED_SKILLS=["React","TypeScript","Tailwind"]
    # - Comma-separated:   REQUIRED_SKILLS=React,TypeScript,Tailwind
    required_skills: Annotated[tuple[str, ...], NoDecode] = Field(
        default=REQUIRED_SKILLS,
        validation_alias="REQUIRED_SKILLS",
    )

    # Artificial latency before the analyze endpoint answers. 0 disables it.
    simulated_latency_ms: int = Field(default=0, ge=0, validation_alias="SIMULATED_LATENCY_MS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_str_list(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _validate_required_skills(cls, v: Any) -> tuple[str, ...]:
        skills = tuple(_parse_str_list(v))
        if not skills:
            raise ValueError("REQUIRED_SKILLS must name at least one skill")
        return skills

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True, populate_by_name=True
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

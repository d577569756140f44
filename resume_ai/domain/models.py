"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.

Wire keys are camelCase (the browser editor's format); attributes are snake_case.
"""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from resume_ai.domain.enums import FitBand

SCORE_MIN = 0
SCORE_MAX = 100
STRONG_FIT_THRESHOLD = 80
MODERATE_FIT_THRESHOLD = 60


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _ResumeSection(CamelModel):
    """Treats explicit JSON nulls as absent so field defaults apply."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ── Résumé ────────────────────────────────────────────────────


class ContactInfo(_ResumeSection):
    """Contact block. Email is expected but not enforced."""

    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    website: str | None = None
    photo: str | None = Field(None, description="Data-URI encoded image")


class ExperienceEntry(_ResumeSection):
    company: str = ""
    role: str = ""
    start: str = ""
    end: str = ""
    description: list[str] = Field(default_factory=list, description="One bullet per line")


class EducationEntry(_ResumeSection):
    school: str = ""
    degree: str = ""
    year: str = ""


class ResumeDocument(_ResumeSection):
    """The structured résumé edited in the browser and produced by extraction."""

    full_name: str = ""
    title: str = ""
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills")
    @classmethod
    def unique_skills(cls, value: list[str]) -> list[str]:
        # set semantics, first occurrence wins
        return list(dict.fromkeys(value))

    def to_json(self, indent: int | None = None) -> str:
        """Canonical JSON form: camelCase keys, unset optional fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> ResumeDocument:
        return cls.model_validate_json(text)


# ── Fit analysis ──────────────────────────────────────────────


class FitAnalysis(CamelModel):
    """Job-fit score and feedback. Every field is required in a backend response."""

    score: int = Field(..., ge=SCORE_MIN, le=SCORE_MAX)
    summary: str
    strengths: list[str]
    improvements: list[str]
    missing_keywords: list[str]

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int:
        """
        Integral numbers are clamped into [0, 100].
        Booleans, strings, fractional and non-finite numbers are rejected.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("score must be an integer")
        if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
            raise ValueError("score must be an integer")
        return max(SCORE_MIN, min(SCORE_MAX, int(value)))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def band(self) -> FitBand:
        if self.score >= STRONG_FIT_THRESHOLD:
            return FitBand.STRONG
        if self.score >= MODERATE_FIT_THRESHOLD:
            return FitBand.MODERATE
        return FitBand.WEAK


# ── Requests / responses ──────────────────────────────────────


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_require_text)]


class ParseRequest(CamelModel):
    """Request body for POST /resume/parse."""

    text: NonBlankStr


class AnalyzeRequest(CamelModel):
    """Request body for POST /resume/analyze."""

    resume: ResumeDocument
    job_description: NonBlankStr


class SuggestRequest(CamelModel):
    """Request body for POST /resume/suggestions."""

    role: NonBlankStr


class SuggestionsResponse(CamelModel):
    role: str
    suggestions: list[str]


class AppendBulletsRequest(CamelModel):
    """Request body for POST /resume/experience/{index}/bullets."""

    resume: ResumeDocument
    bullets: list[str] = Field(..., min_length=1)

"""Resume profile schema and upstream advisory signals."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SignalBlock(BaseModel):
    """Base for optional pre-computed sub-scores supplied by the extractor."""

    # field name -> inclusive upper bound
    BOUNDS: ClassVar[dict[str, float]] = {}

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def is_present(self) -> bool:
        return any(getattr(self, name) is not None for name in self.BOUNDS)


class ExperienceSignals(_SignalBlock):
    """Role relevancy and industry match judged by the extractor."""

    BOUNDS: ClassVar[dict[str, float]] = {
        "role_relevancy": 10.0,
        "industry_match": 5.0,
    }

    role_relevancy: float | None = None
    industry_match: float | None = None


class QualificationSignals(_SignalBlock):
    """Education, certification and domain expertise match."""

    BOUNDS: ClassVar[dict[str, float]] = {
        "education_match": 10.0,
        "certification_match": 5.0,
        "domain_expertise": 5.0,
    }

    education_match: float | None = None
    certification_match: float | None = None
    domain_expertise: float | None = None


class CultureSignals(_SignalBlock):
    """Soft-skill indicators."""

    BOUNDS: ClassVar[dict[str, float]] = {
        "leadership": 4.0,
        "collaboration": 3.0,
        "communication": 3.0,
    }

    leadership: float | None = None
    collaboration: float | None = None
    communication: float | None = None


class ResumeProfile(BaseModel):
    """Structured view of a candidate resume produced by the extraction step."""

    category: str | None = None
    skills: list[str] | None = None
    experience_years: float = 0.0
    relevant_experience: list[str] = Field(default_factory=list)
    qualifications: list[str] = Field(default_factory=list)
    transferable_skill_hints: list[str] = Field(default_factory=list)
    experience_signals: ExperienceSignals | None = None
    qualification_signals: QualificationSignals | None = None
    culture_signals: CultureSignals | None = None

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

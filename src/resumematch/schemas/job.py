"""Job profile schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobProfile(BaseModel):
    """Structured view of a job posting produced by the extraction step."""

    category: str | None = None
    required_skills: list[str] | None = None
    experience_level: str = ""
    required_years: float | None = None
    key_requirements: list[str] = Field(default_factory=list)
    preferred_qualifications: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

"""Pydantic schema definitions for job and resume profiles."""

from __future__ import annotations

from .job import JobProfile
from .resume import (
    CultureSignals,
    ExperienceSignals,
    QualificationSignals,
    ResumeProfile,
)

__all__ = [
    "JobProfile",
    "ResumeProfile",
    "ExperienceSignals",
    "QualificationSignals",
    "CultureSignals",
]

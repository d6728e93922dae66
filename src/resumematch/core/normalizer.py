"""Profile normalization ahead of scoring."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

import structlog
from pydantic import BaseModel, ValidationError

from ..schemas import (
    CultureSignals,
    ExperienceSignals,
    JobProfile,
    QualificationSignals,
    ResumeProfile,
)

_JOB_LIST_FIELDS = ("required_skills", "key_requirements", "preferred_qualifications")
_RESUME_LIST_FIELDS = (
    "skills",
    "relevant_experience",
    "qualifications",
    "transferable_skill_hints",
)
_SIGNAL_FIELDS: dict[str, type[BaseModel]] = {
    "experience_signals": ExperienceSignals,
    "qualification_signals": QualificationSignals,
    "culture_signals": CultureSignals,
}
_JOB_MARKERS = frozenset(
    {
        "requiredSkills",
        "required_skills",
        "experienceLevel",
        "experience_level",
        "requiredYears",
        "required_years",
        "keyRequirements",
        "key_requirements",
        "preferredQualifications",
        "preferred_qualifications",
    }
)


class ProfileNormalizer:
    """Canonicalize raw or parsed profiles; never raises on bad field values."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def normalize(
        self,
        profile: JobProfile | ResumeProfile | Mapping[str, Any],
    ) -> JobProfile | ResumeProfile:
        if isinstance(profile, JobProfile):
            return self.normalize_job(profile)
        if isinstance(profile, ResumeProfile):
            return self.normalize_resume(profile)
        if isinstance(profile, Mapping):
            if _JOB_MARKERS & set(profile):
                return self.normalize_job(profile)
            return self.normalize_resume(profile)
        raise TypeError(f"Cannot normalize profile of type {type(profile).__name__}")

    def normalize_job(self, raw: JobProfile | Mapping[str, Any]) -> JobProfile:
        job = raw if isinstance(raw, JobProfile) else _lenient_validate(JobProfile, raw, _JOB_LIST_FIELDS)
        clamped: list[str] = []

        required_years = _finite_or_none(job.required_years)
        if required_years is not None and required_years < 0:
            required_years = None
        if required_years is None and job.required_years is not None:
            clamped.append("required_years")

        normalized = job.model_copy(
            update={
                "category": _clean_text(job.category),
                "experience_level": (job.experience_level or "").strip(),
                "required_years": required_years,
                "required_skills": _dedupe(job.required_skills) if job.required_skills is not None else None,
                "key_requirements": _dedupe(job.key_requirements),
                "preferred_qualifications": _dedupe(job.preferred_qualifications),
            }
        )
        self._logger.debug("profile.normalized", kind="job", clamped=clamped)
        return normalized

    def normalize_resume(self, raw: ResumeProfile | Mapping[str, Any]) -> ResumeProfile:
        resume = raw if isinstance(raw, ResumeProfile) else _lenient_validate(ResumeProfile, raw, _RESUME_LIST_FIELDS)
        clamped: list[str] = []

        years = _finite_or_none(resume.experience_years)
        if years is None or years < 0:
            if resume.experience_years != 0:
                clamped.append("experience_years")
            years = 0.0

        update: dict[str, Any] = {
            "category": _clean_text(resume.category),
            "experience_years": years,
            "skills": _dedupe(resume.skills) if resume.skills is not None else None,
            "relevant_experience": _dedupe(resume.relevant_experience),
            "qualifications": _dedupe(resume.qualifications),
            "transferable_skill_hints": _dedupe(resume.transferable_skill_hints),
        }
        for name in _SIGNAL_FIELDS:
            block = getattr(resume, name)
            if block is None:
                continue
            update[name], block_clamped = _clamp_signals(block)
            clamped.extend(f"{name}.{field}" for field in block_clamped)

        normalized = resume.model_copy(update=update)
        self._logger.debug("profile.normalized", kind="resume", clamped=clamped)
        return normalized


def normalize(profile: JobProfile | ResumeProfile | Mapping[str, Any]) -> JobProfile | ResumeProfile:
    """Normalize a single profile with a shared normalizer."""
    return _DEFAULT_NORMALIZER.normalize(profile)


def _lenient_validate(
    model_cls: type[BaseModel],
    raw: Mapping[str, Any],
    list_fields: Iterable[str] = (),
) -> Any:
    """Validate ``raw`` into ``model_cls``, dropping fields that fail validation."""

    lookup: dict[str, str] = {}
    data: dict[str, Any] = {}
    for name, info in model_cls.model_fields.items():
        lookup[name] = name
        keys = [name]
        if info.alias:
            lookup[info.alias] = name
            keys.insert(0, info.alias)
        for key in keys:
            if key in raw:
                data[name] = raw[key]
                break

    for name in list_fields:
        if name in data and data[name] is not None:
            data[name] = _coerce_string_list(data[name])

    for name, signal_cls in _SIGNAL_FIELDS.items():
        if name not in data or data[name] is None:
            continue
        value = data[name]
        if isinstance(value, Mapping):
            data[name] = _lenient_validate(signal_cls, value)
        elif not isinstance(value, signal_cls):
            data.pop(name)

    while True:
        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            rejected = {
                lookup.get(str(error["loc"][0]))
                for error in exc.errors()
                if error.get("loc")
            }
            rejected = {name for name in rejected if name in data}
            if not rejected:
                return model_cls()
            for name in rejected:
                data.pop(name)


def _clamp_signals(block: Any) -> tuple[Any, list[str]]:
    update: dict[str, float | None] = {}
    clamped: list[str] = []
    for name, cap in block.BOUNDS.items():
        value = getattr(block, name)
        if value is None:
            continue
        finite = _finite_or_none(value)
        if finite is None:
            update[name] = None
            clamped.append(name)
            continue
        bounded = min(max(finite, 0.0), cap)
        if bounded != finite:
            clamped.append(name)
        update[name] = bounded
    return block.model_copy(update=update), clamped


def _finite_or_none(value: float | None) -> float | None:
    if value is None:
        return None
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


def _coerce_string_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return [
            str(item)
            for item in items
            if isinstance(item, (str, int, float)) and not isinstance(item, bool)
        ]
    return value


def _dedupe(values: Iterable[str]) -> list[str]:
    """Strip entries and drop case-insensitive duplicates, keeping first casing."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        text = value.strip()
        if not text:
            continue
        key = text.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(text)
    return result


_DEFAULT_NORMALIZER = ProfileNormalizer()

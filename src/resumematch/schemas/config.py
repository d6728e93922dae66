"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class DecisionSettings(_Section):
    strong_match: int | None = None
    potential_match: int | None = None


class ConfidenceSettings(_Section):
    base: int | None = None
    increment: int | None = None
    ceiling: int | None = None


class TechnicalSettings(_Section):
    max_score: int | None = None
    matched_points: float | None = None
    transferable_points: float | None = None
    perfect_match_bonus: float | None = None


class ExperienceSettings(_Section):
    max_score: int | None = None
    exceeds_points: float | None = None
    meets_points: float | None = None
    shortfall_tiers: list[tuple[float, float]] | None = None
    role_relevancy_max: float | None = None
    industry_match_max: float | None = None
    default_role_relevancy: float | None = None
    default_industry_match: float | None = None


class QualificationsSettings(_Section):
    max_score: int | None = None
    education_match_max: float | None = None
    certification_match_max: float | None = None
    domain_expertise_max: float | None = None


class CultureSettings(_Section):
    max_score: int | None = None
    leadership_max: float | None = None
    collaboration_max: float | None = None
    communication_max: float | None = None


class CoreConfig(_Section):
    decision: DecisionSettings | None = None
    confidence: ConfidenceSettings | None = None


class EvaluatorConfig(_Section):
    technical: TechnicalSettings | None = None
    experience: ExperienceSettings | None = None
    qualifications: QualificationsSettings | None = None
    culture: CultureSettings | None = None


class AppConfig(_Section):
    core: CoreConfig = Field(default_factory=CoreConfig)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        core_settings = _drop_empty(self.core.model_dump(exclude_none=True))
        if core_settings:
            settings["core"] = core_settings
        evaluator_settings = _drop_empty(self.evaluators.model_dump(exclude_none=True))
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        return settings


def _drop_empty(sections: dict[str, Any]) -> dict[str, Any]:
    return {name: values for name, values in sections.items() if values}


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)

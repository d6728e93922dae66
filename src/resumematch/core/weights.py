"""Immutable weighting table injected into the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .evaluators import (
    CultureConfig,
    ExperienceConfig,
    QualificationsConfig,
    TechnicalConfig,
)


@dataclass(frozen=True)
class DecisionThresholds:
    """Lower (inclusive) edges of the recommendation bands."""

    strong_match: int = 80
    potential_match: int = 60


@dataclass(frozen=True)
class ConfidenceConfig:
    """Completeness-driven confidence increments."""

    base: int = 70
    increment: int = 5
    ceiling: int = 100


@dataclass(frozen=True)
class ScoringWeights:
    """Every weight, bonus, tier, cap and band used by the engine."""

    technical: TechnicalConfig = field(default_factory=TechnicalConfig)
    experience: ExperienceConfig = field(default_factory=ExperienceConfig)
    qualifications: QualificationsConfig = field(default_factory=QualificationsConfig)
    culture: CultureConfig = field(default_factory=CultureConfig)
    decision: DecisionThresholds = field(default_factory=DecisionThresholds)
    confidence: ConfidenceConfig = field(default_factory=ConfidenceConfig)

    @property
    def max_overall(self) -> int:
        return (
            self.technical.max_score
            + self.experience.max_score
            + self.qualifications.max_score
            + self.culture.max_score
        )

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None = None) -> "ScoringWeights":
        """Build weights from the flattened ``AppConfig.to_settings()`` mapping."""

        settings = settings or {}
        core = settings.get("core") or {}
        evaluators = settings.get("evaluators") or {}

        experience = dict(evaluators.get("experience") or {})
        if "shortfall_tiers" in experience:
            experience["shortfall_tiers"] = tuple(
                (float(limit), float(points)) for limit, points in experience["shortfall_tiers"]
            )

        return cls(
            technical=_build(TechnicalConfig, evaluators.get("technical")),
            experience=_build(ExperienceConfig, experience),
            qualifications=_build(QualificationsConfig, evaluators.get("qualifications")),
            culture=_build(CultureConfig, evaluators.get("culture")),
            decision=_build(DecisionThresholds, core.get("decision")),
            confidence=_build(ConfidenceConfig, core.get("confidence")),
        )


def _build(config_cls: type, values: Mapping[str, Any] | None) -> Any:
    if not values:
        return config_cls()
    known = {item.name for item in fields(config_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown {config_cls.__name__} settings: {unknown}")
    return config_cls(**values)


DEFAULT_WEIGHTS = ScoringWeights()

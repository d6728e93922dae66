"""Core scoring engine components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..schemas import JobProfile, ResumeProfile

from .engine import CATEGORIES, MatchScoringEngine, round_half_up, score
from .errors import InvalidProfile
from .evaluators import (
    CultureEvaluator,
    ExperienceEvaluator,
    QualificationsEvaluator,
    TechnicalSkillsEvaluator,
)
from .normalizer import ProfileNormalizer, normalize
from .result import CategoryScore, Decision, MatchResult
from .weights import ConfidenceConfig, DecisionThresholds, ScoringWeights


@runtime_checkable
class CategoryEvaluator(Protocol):
    """Evaluator contract for one scoring category."""

    category: str

    def evaluate(self, job: JobProfile, resume: ResumeProfile) -> dict[str, Any]:
        """Return the unrounded category value, its cap and its breakdown."""


__all__ = [
    "CATEGORIES",
    "CategoryEvaluator",
    "CategoryScore",
    "ConfidenceConfig",
    "CultureEvaluator",
    "Decision",
    "DecisionThresholds",
    "ExperienceEvaluator",
    "InvalidProfile",
    "MatchResult",
    "MatchScoringEngine",
    "ProfileNormalizer",
    "QualificationsEvaluator",
    "ScoringWeights",
    "TechnicalSkillsEvaluator",
    "normalize",
    "round_half_up",
    "score",
]

"""Match scoring engine orchestration."""

from __future__ import annotations

import math
from typing import Any, Iterable

from ..schemas import JobProfile, ResumeProfile
from . import insights
from .errors import InvalidProfile
from .evaluators import (
    CultureEvaluator,
    ExperienceEvaluator,
    QualificationsEvaluator,
    TechnicalSkillsEvaluator,
)
from .result import CategoryScore, Decision, MatchResult
from .weights import DEFAULT_WEIGHTS, ScoringWeights

CATEGORIES: tuple[str, ...] = ("technical", "experience", "qualifications", "culture")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


class MatchScoringEngine:
    """Runs the category evaluators and derives decision and confidence.

    The engine holds only immutable configuration, so a single instance can
    score any number of pairs concurrently.
    """

    def __init__(
        self,
        *,
        weights: ScoringWeights | None = None,
        evaluators: Iterable[Any] | None = None,
    ) -> None:
        self._weights = weights or DEFAULT_WEIGHTS
        if evaluators is None:
            evaluators = self._default_evaluators(self._weights)
        self._evaluators = tuple(evaluators)

        provided = {evaluator.category for evaluator in self._evaluators}
        missing = [name for name in CATEGORIES if name not in provided]
        if missing:
            raise ValueError(f"Evaluators missing for categories: {missing}")

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    @staticmethod
    def _default_evaluators(weights: ScoringWeights) -> list[Any]:
        return [
            TechnicalSkillsEvaluator(config=weights.technical),
            ExperienceEvaluator(config=weights.experience),
            QualificationsEvaluator(config=weights.qualifications),
            CultureEvaluator(config=weights.culture),
        ]

    def score(self, job: JobProfile, resume: ResumeProfile) -> MatchResult:
        self._require_fields(job, resume)

        categories: dict[str, CategoryScore] = {}
        for evaluator in self._evaluators:
            normalized = self._normalize_category_result(evaluator.evaluate(job, resume))
            categories[normalized.name] = normalized

        technical = categories["technical"]
        overall = sum(categories[name].score for name in CATEGORIES)
        decision = self._decide(overall)

        matched = tuple(technical.metadata.get("matched", ()))
        missing = tuple(technical.metadata.get("missing", ()))
        transferable = tuple(technical.metadata.get("transferable", ()))
        required_count = technical.metadata.get("required_count", 0)
        similarity = (
            round_half_up(100 * len(matched) / required_count) if required_count else 100
        )

        thresholds = self._weights.decision
        return MatchResult(
            technical_score=technical.score,
            experience_score=categories["experience"].score,
            qualifications_score=categories["qualifications"].score,
            culture_score=categories["culture"].score,
            overall_score=overall,
            matched_skills=matched,
            missing_critical_skills=missing,
            transferable_skills=transferable,
            decision=decision,
            confidence=self._confidence(job, resume),
            tech_similarity_percent=similarity,
            categories=tuple(categories[name] for name in CATEGORIES),
            strong_points=tuple(insights.build_strong_points(categories, matched, transferable)),
            weak_points=tuple(insights.build_weak_points(categories, missing, transferable)),
            fit_insight=insights.build_fit_insight(
                categories,
                overall,
                self._weights.max_overall,
                job.category or "",
                resume.category or "",
            ),
            reasoning=insights.build_reasoning(
                decision,
                overall,
                thresholds.strong_match,
                thresholds.potential_match,
            ),
            job_category=job.category or "",
            resume_category=resume.category or "",
            experience_level=job.experience_level,
            key_requirements=tuple(job.key_requirements),
            preferred_qualifications=tuple(job.preferred_qualifications),
            relevant_experience=tuple(resume.relevant_experience),
            qualifications=tuple(resume.qualifications),
        )

    @staticmethod
    def _require_fields(job: JobProfile, resume: ResumeProfile) -> None:
        missing: list[str] = []
        if not job.category:
            missing.append("job.category")
        if job.required_skills is None:
            missing.append("job.required_skills")
        if not resume.category:
            missing.append("resume.category")
        if resume.skills is None:
            missing.append("resume.skills")
        if missing:
            raise InvalidProfile(missing)

    @staticmethod
    def _normalize_category_result(payload: dict[str, Any]) -> CategoryScore:
        name = payload.get("category")
        if name is None:
            raise ValueError("Evaluator result must include 'category'.")
        max_score = int(payload["max_score"])
        value = float(payload.get("value", 0.0))
        if math.isnan(value):
            value = 0.0
        score = min(max(round_half_up(value), 0), max_score)
        return CategoryScore(
            name=str(name),
            score=score,
            max_score=max_score,
            components={k: float(v) for k, v in (payload.get("components") or {}).items()},
            metadata=dict(payload.get("metadata") or {}),
        )

    def _decide(self, overall: int) -> Decision:
        thresholds = self._weights.decision
        if overall >= thresholds.strong_match:
            return Decision.STRONG_MATCH
        if overall >= thresholds.potential_match:
            return Decision.POTENTIAL_MATCH
        return Decision.NOT_RECOMMENDED

    def _confidence(self, job: JobProfile, resume: ResumeProfile) -> int:
        config = self._weights.confidence
        present = [
            job.required_years is not None,
            resume.experience_signals is not None and resume.experience_signals.is_present(),
            resume.qualification_signals is not None
            and resume.qualification_signals.is_present(),
            resume.culture_signals is not None and resume.culture_signals.is_present(),
        ]
        confidence = config.base + config.increment * sum(present)
        return min(max(confidence, config.base), config.ceiling)


def score(job: JobProfile, resume: ResumeProfile) -> MatchResult:
    """Score a normalized pair with the default weighting table."""
    return _DEFAULT_ENGINE.score(job, resume)


_DEFAULT_ENGINE = MatchScoringEngine()

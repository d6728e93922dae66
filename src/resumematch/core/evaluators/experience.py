"""Experience category evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import JobProfile, ResumeProfile


@dataclass(frozen=True)
class ExperienceConfig:
    """Years tiers and advisory signal defaults for experience scoring."""

    max_score: int = 30
    exceeds_points: float = 15.0
    meets_points: float = 12.0
    # (maximum shortfall in years, points), checked in order.
    shortfall_tiers: tuple[tuple[float, float], ...] = ((1.0, 8.0), (2.0, 4.0))
    role_relevancy_max: float = 10.0
    industry_match_max: float = 5.0
    default_role_relevancy: float = 5.0
    default_industry_match: float = 2.0


class ExperienceEvaluator:
    """Compare candidate years to the requirement and add relevancy signals."""

    category = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    @property
    def max_score(self) -> int:
        return self._config.max_score

    def evaluate(self, job: JobProfile, resume: ResumeProfile) -> dict[str, Any]:
        config = self._config
        years_points, tier = self._years_points(resume.experience_years, job.required_years)

        signals = resume.experience_signals
        relevancy = signals.role_relevancy if signals else None
        industry = signals.industry_match if signals else None
        relevancy_points = _bounded(
            relevancy, config.default_role_relevancy, config.role_relevancy_max
        )
        industry_points = _bounded(
            industry, config.default_industry_match, config.industry_match_max
        )

        return {
            "category": self.category,
            "value": years_points + relevancy_points + industry_points,
            "max_score": config.max_score,
            "components": {
                "years": years_points,
                "role_relevancy": relevancy_points,
                "industry_match": industry_points,
            },
            "metadata": {
                "years_tier": tier,
                "candidate_years": resume.experience_years,
                "required_years": job.required_years,
                "experience_level": job.experience_level,
                "defaulted": [
                    name
                    for name, value in (("role_relevancy", relevancy), ("industry_match", industry))
                    if value is None
                ],
            },
        }

    def _years_points(
        self,
        candidate_years: float,
        required_years: float | None,
    ) -> tuple[float, str]:
        config = self._config
        if required_years is None:
            return config.meets_points, "unspecified"
        if candidate_years > required_years:
            return config.exceeds_points, "exceeds"
        if candidate_years == required_years:
            return config.meets_points, "meets"

        shortfall = required_years - candidate_years
        for max_shortfall, points in config.shortfall_tiers:
            if shortfall <= max_shortfall:
                return points, f"short_{max_shortfall:g}"
        return 0.0, "insufficient"


def _bounded(value: float | None, default: float, cap: float) -> float:
    if value is None:
        return default
    return min(max(float(value), 0.0), cap)

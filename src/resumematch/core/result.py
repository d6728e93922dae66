"""Engine output types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Decision(str, Enum):
    """Recommendation band derived from the overall score."""

    STRONG_MATCH = "STRONG_MATCH"
    POTENTIAL_MATCH = "POTENTIAL_MATCH"
    NOT_RECOMMENDED = "NOT_RECOMMENDED"


@dataclass(frozen=True, slots=True)
class CategoryScore:
    """Rounded, clamped score of one category with its raw components."""

    name: str
    score: int
    max_score: int
    components: Mapping[str, float] = field(default_factory=dict, hash=False)
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _freeze(self.components))
        object.__setattr__(self, "metadata", _freeze(self.metadata))

    @property
    def ratio(self) -> float:
        return self.score / self.max_score if self.max_score else 0.0


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Complete, immutable assessment of one job/resume pair."""

    technical_score: int
    experience_score: int
    qualifications_score: int
    culture_score: int
    overall_score: int
    matched_skills: tuple[str, ...]
    missing_critical_skills: tuple[str, ...]
    transferable_skills: tuple[str, ...]
    decision: Decision
    confidence: int
    tech_similarity_percent: int
    categories: tuple[CategoryScore, ...] = ()
    strong_points: tuple[str, ...] = ()
    weak_points: tuple[str, ...] = ()
    fit_insight: str = ""
    reasoning: str = ""
    job_category: str = ""
    resume_category: str = ""
    experience_level: str = ""
    key_requirements: tuple[str, ...] = ()
    preferred_qualifications: tuple[str, ...] = ()
    relevant_experience: tuple[str, ...] = ()
    qualifications: tuple[str, ...] = ()

    @property
    def final_recommendation(self) -> str:
        return "No" if self.decision is Decision.NOT_RECOMMENDED else "Yes"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with camelCase keys."""

        return {
            "job": {
                "category": self.job_category,
                "experienceLevel": self.experience_level,
                "keyRequirements": list(self.key_requirements),
                "preferredQualifications": list(self.preferred_qualifications),
            },
            "resume": {
                "category": self.resume_category,
                "relevantExperience": list(self.relevant_experience),
                "qualifications": list(self.qualifications),
            },
            "match": {
                "technicalScore": self.technical_score,
                "experienceScore": self.experience_score,
                "qualificationsScore": self.qualifications_score,
                "cultureScore": self.culture_score,
                "overallScore": self.overall_score,
                "matchedSkills": list(self.matched_skills),
                "missingCriticalSkills": list(self.missing_critical_skills),
                "transferableSkills": list(self.transferable_skills),
                "decision": self.decision.value,
                "confidence": self.confidence,
                "techSimilarityPercent": self.tech_similarity_percent,
                "strongPoints": list(self.strong_points),
                "weakPoints": list(self.weak_points),
                "fitInsight": self.fit_insight,
                "finalRecommendation": self.final_recommendation,
                "reasoning": self.reasoning,
                "categories": [
                    {
                        "name": category.name,
                        "score": category.score,
                        "maxScore": category.max_score,
                        "components": dict(category.components),
                    }
                    for category in self.categories
                ],
            },
        }


def _freeze(value: Any) -> Any:
    """Read-only copy: mappings become proxies, sequences become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze(item) for item in value)
    return value

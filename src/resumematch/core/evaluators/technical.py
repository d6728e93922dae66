"""Technical skills category evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ...schemas import JobProfile, ResumeProfile


@dataclass(frozen=True)
class TechnicalConfig:
    """Point table for exact and transferable skill matches."""

    max_score: int = 40
    matched_points: float = 5.0
    transferable_points: float = 2.0
    perfect_match_bonus: float = 10.0


class TechnicalSkillsEvaluator:
    """Score required-skill coverage by case-insensitive exact matching."""

    category = "technical"

    def __init__(self, *, config: TechnicalConfig | None = None) -> None:
        self._config = config or TechnicalConfig()

    @property
    def max_score(self) -> int:
        return self._config.max_score

    def evaluate(self, job: JobProfile, resume: ResumeProfile) -> dict[str, Any]:
        required = list(job.required_skills or [])
        resume_skills = _casefold_set(resume.skills or [])
        hints = _casefold_set(resume.transferable_skill_hints)

        matched: list[str] = []
        transferable: list[str] = []
        missing: list[str] = []
        for skill in required:
            key = skill.casefold()
            if key in resume_skills:
                matched.append(skill)
                continue
            missing.append(skill)
            if key in hints:
                transferable.append(skill)

        config = self._config
        bonus = config.perfect_match_bonus if required and not missing else 0.0
        raw_points = (
            config.matched_points * len(matched)
            + config.transferable_points * len(transferable)
            + bonus
        )
        max_possible = config.matched_points * len(required) + config.perfect_match_bonus

        if not required or max_possible <= 0:
            value = float(config.max_score)
        else:
            value = config.max_score * raw_points / max_possible

        return {
            "category": self.category,
            "value": value,
            "max_score": config.max_score,
            "components": {
                "matched_points": config.matched_points * len(matched),
                "transferable_points": config.transferable_points * len(transferable),
                "perfect_match_bonus": bonus,
                "raw_points": raw_points,
                "max_possible": max_possible,
            },
            "metadata": {
                "required_count": len(required),
                "matched": matched,
                "transferable": transferable,
                "missing": missing,
            },
        }


def _casefold_set(values: Iterable[str]) -> set[str]:
    return {value.casefold() for value in values if value}

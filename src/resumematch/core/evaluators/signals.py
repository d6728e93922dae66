"""Qualification and culture evaluators built from upstream signal blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import JobProfile, ResumeProfile


@dataclass(frozen=True)
class QualificationsConfig:
    """Caps for the qualification signal components."""

    max_score: int = 20
    education_match_max: float = 10.0
    certification_match_max: float = 5.0
    domain_expertise_max: float = 5.0


@dataclass(frozen=True)
class CultureConfig:
    """Caps for the soft-skill signal components."""

    max_score: int = 10
    leadership_max: float = 4.0
    collaboration_max: float = 3.0
    communication_max: float = 3.0


class SignalSumEvaluator:
    """Sum capped signal components; absent components count as zero.

    Subclasses name the resume attribute holding the signal block and map each
    component to its configured cap.
    """

    category = ""
    signals_attr = ""

    def __init__(self, config: Any) -> None:
        self._config = config

    @property
    def max_score(self) -> int:
        return self._config.max_score

    def component_caps(self) -> dict[str, float]:
        raise NotImplementedError

    def evaluate(self, job: JobProfile, resume: ResumeProfile) -> dict[str, Any]:
        block = getattr(resume, self.signals_attr)
        components: dict[str, float] = {}
        defaulted: list[str] = []
        for name, cap in self.component_caps().items():
            value = getattr(block, name) if block is not None else None
            if value is None:
                defaulted.append(name)
                components[name] = 0.0
                continue
            components[name] = min(max(float(value), 0.0), cap)

        return {
            "category": self.category,
            "value": sum(components.values()),
            "max_score": self._config.max_score,
            "components": components,
            "metadata": {
                "signals_present": block is not None and block.is_present(),
                "defaulted": defaulted,
            },
        }


class QualificationsEvaluator(SignalSumEvaluator):
    """Education, certification and domain expertise (0-20 by default)."""

    category = "qualifications"
    signals_attr = "qualification_signals"

    def __init__(self, *, config: QualificationsConfig | None = None) -> None:
        super().__init__(config or QualificationsConfig())

    def component_caps(self) -> dict[str, float]:
        return {
            "education_match": self._config.education_match_max,
            "certification_match": self._config.certification_match_max,
            "domain_expertise": self._config.domain_expertise_max,
        }


class CultureEvaluator(SignalSumEvaluator):
    """Leadership, collaboration and communication (0-10 by default)."""

    category = "culture"
    signals_attr = "culture_signals"

    def __init__(self, *, config: CultureConfig | None = None) -> None:
        super().__init__(config or CultureConfig())

    def component_caps(self) -> dict[str, float]:
        return {
            "leadership": self._config.leadership_max,
            "collaboration": self._config.collaboration_max,
            "communication": self._config.communication_max,
        }

"""Category evaluators for the match scoring engine."""

from .technical import TechnicalConfig, TechnicalSkillsEvaluator
from .experience import ExperienceConfig, ExperienceEvaluator
from .signals import (
    CultureConfig,
    CultureEvaluator,
    QualificationsConfig,
    QualificationsEvaluator,
)

__all__ = [
    "TechnicalSkillsEvaluator",
    "TechnicalConfig",
    "ExperienceEvaluator",
    "ExperienceConfig",
    "QualificationsEvaluator",
    "QualificationsConfig",
    "CultureEvaluator",
    "CultureConfig",
]

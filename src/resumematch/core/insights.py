"""Template-based fit report text built from scored categories.

Everything here is a pure function of the engine's category results, so the
report text is as reproducible as the scores themselves.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from .result import CategoryScore, Decision

_STRONG_RATIO = 0.75
_WEAK_RATIO = 0.4

_CATEGORY_LABELS: dict[str, str] = {
    "technical": "Technical skills",
    "experience": "Experience",
    "qualifications": "Qualifications",
    "culture": "Culture and soft skills",
}

_DECISION_PHRASES: dict[Decision, str] = {
    Decision.STRONG_MATCH: "a strong match",
    Decision.POTENTIAL_MATCH: "a potential match",
    Decision.NOT_RECOMMENDED: "not recommended",
}


def build_strong_points(
    categories: Mapping[str, CategoryScore],
    matched: Sequence[str],
    transferable: Sequence[str],
) -> list[str]:
    """Strengths from matched skills and high-ratio categories."""
    points: list[str] = []

    if matched:
        points.append(f"Direct skill matches: {', '.join(matched[:5])}")
    if transferable:
        points.append(f"Transferable skills: {', '.join(transferable[:3])}")

    experience = categories.get("experience")
    if experience is not None:
        tier = experience.metadata.get("years_tier")
        if tier == "exceeds":
            points.append("Experience exceeds the stated requirement")
        elif tier == "meets":
            points.append("Experience meets the stated requirement")

    for name, category in categories.items():
        if name == "technical" or category.ratio < _STRONG_RATIO:
            continue
        points.append(f"{_label(name)} rated {category.score}/{category.max_score}")

    return points


def build_weak_points(
    categories: Mapping[str, CategoryScore],
    missing: Sequence[str],
    transferable: Sequence[str],
) -> list[str]:
    """Gaps from missing skills and low-ratio categories."""
    points: list[str] = []

    hard_missing = [skill for skill in missing if skill not in transferable]
    if hard_missing:
        points.append(f"Missing required skills: {', '.join(hard_missing[:5])}")
    if transferable:
        points.append(
            f"Only related experience for: {', '.join(transferable[:3])}"
        )

    experience = categories.get("experience")
    if experience is not None:
        tier = experience.metadata.get("years_tier", "")
        if tier == "insufficient":
            points.append("Experience is well below the stated requirement")
        elif tier.startswith("short_"):
            points.append("Experience is slightly below the stated requirement")

    for name, category in categories.items():
        if name == "technical" or category.ratio >= _WEAK_RATIO:
            continue
        if category.metadata.get("defaulted") and not category.metadata.get(
            "signals_present", True
        ):
            points.append(f"{_label(name)} could not be assessed from the documents")
            continue
        points.append(f"{_label(name)} rated {category.score}/{category.max_score}")

    return points


def build_fit_insight(
    categories: Mapping[str, CategoryScore],
    overall_score: int,
    max_overall: int,
    job_category: str,
    resume_category: str,
) -> str:
    parts = [
        f"The {resume_category} profile scores {overall_score}/{max_overall} "
        f"against the {job_category} role."
    ]
    breakdown = ", ".join(
        f"{_label(name).lower()} {category.score}/{category.max_score}"
        for name, category in categories.items()
    )
    if breakdown:
        parts.append(f"Breakdown: {breakdown}.")
    return " ".join(parts)


def build_reasoning(
    decision: Decision,
    overall_score: int,
    strong_threshold: int,
    potential_threshold: int,
) -> str:
    if decision is Decision.STRONG_MATCH:
        band = f"at or above {strong_threshold}"
    elif decision is Decision.POTENTIAL_MATCH:
        band = f"between {potential_threshold} and {strong_threshold - 1}"
    else:
        band = f"below {potential_threshold}"
    return (
        f"Overall score {overall_score} is {band}, so the candidate is "
        f"{_DECISION_PHRASES[decision]}."
    )


def _label(name: str) -> str:
    return _CATEGORY_LABELS.get(name, name.replace("_", " ").capitalize())

from __future__ import annotations

import pytest

from resumematch.core.evaluators import TechnicalConfig, TechnicalSkillsEvaluator
from resumematch.schemas import JobProfile, ResumeProfile


def build_job(skills: list[str]) -> JobProfile:
    return JobProfile(category="Backend Engineer", required_skills=skills)


def build_resume(skills: list[str], hints: list[str] | None = None) -> ResumeProfile:
    return ResumeProfile(
        category="Software Engineer",
        skills=skills,
        transferable_skill_hints=hints or [],
    )


def test_transferable_skill_scores_partial_credit_without_bonus():
    evaluator = TechnicalSkillsEvaluator()

    result = evaluator.evaluate(
        build_job(["Python", "SQL", "Docker"]),
        build_resume(["python", "sql"], hints=["Docker"]),
    )

    assert result["metadata"]["matched"] == ["Python", "SQL"]
    assert result["metadata"]["transferable"] == ["Docker"]
    assert result["metadata"]["missing"] == ["Docker"]
    assert result["components"]["perfect_match_bonus"] == 0.0
    assert result["components"]["raw_points"] == pytest.approx(12.0)
    assert result["components"]["max_possible"] == pytest.approx(25.0)
    assert result["value"] == pytest.approx(40 * 12 / 25)


def test_perfect_match_earns_bonus_and_full_score():
    evaluator = TechnicalSkillsEvaluator()

    result = evaluator.evaluate(
        build_job(["Go", "Kubernetes"]),
        build_resume(["kubernetes", "GO", "Terraform"]),
    )

    assert result["components"]["perfect_match_bonus"] == pytest.approx(10.0)
    assert result["value"] == pytest.approx(40.0)
    assert result["metadata"]["missing"] == []


def test_no_requirements_gives_full_credit():
    evaluator = TechnicalSkillsEvaluator()

    result = evaluator.evaluate(build_job([]), build_resume([]))

    assert result["value"] == pytest.approx(40.0)
    assert result["metadata"]["required_count"] == 0


def test_exact_match_takes_precedence_over_hint():
    evaluator = TechnicalSkillsEvaluator()

    result = evaluator.evaluate(
        build_job(["AWS"]),
        build_resume(["aws"], hints=["AWS"]),
    )

    assert result["metadata"]["matched"] == ["AWS"]
    assert result["metadata"]["transferable"] == []


def test_custom_point_table():
    evaluator = TechnicalSkillsEvaluator(
        config=TechnicalConfig(matched_points=10.0, transferable_points=5.0, perfect_match_bonus=0.0)
    )

    result = evaluator.evaluate(
        build_job(["Rust", "C"]),
        build_resume(["rust"], hints=["c"]),
    )

    assert result["value"] == pytest.approx(40 * 15 / 20)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from resumematch.core import (
    CategoryEvaluator,
    Decision,
    DecisionThresholds,
    InvalidProfile,
    MatchScoringEngine,
    ScoringWeights,
    round_half_up,
    score,
)
from resumematch.schemas import (
    CultureSignals,
    ExperienceSignals,
    JobProfile,
    QualificationSignals,
    ResumeProfile,
)


@dataclass
class StubEvaluator:
    category: str
    value: float
    max_score: int

    def evaluate(self, job: JobProfile, resume: ResumeProfile) -> dict[str, Any]:
        return {
            "category": self.category,
            "value": self.value,
            "max_score": self.max_score,
            "metadata": {"matched": [], "missing": [], "transferable": [], "required_count": 0}
            if self.category == "technical"
            else {},
        }


def build_job(**kwargs: Any) -> JobProfile:
    defaults: dict[str, Any] = {
        "category": "Backend Engineer",
        "required_skills": ["Python", "SQL", "Docker"],
        "experience_level": "3+ years",
    }
    defaults.update(kwargs)
    return JobProfile(**defaults)


def build_resume(**kwargs: Any) -> ResumeProfile:
    defaults: dict[str, Any] = {
        "category": "Software Engineer",
        "skills": ["python", "sql"],
        "experience_years": 3,
    }
    defaults.update(kwargs)
    return ResumeProfile(**defaults)


def stub_engine(technical: float, experience: float, qualifications: float, culture: float) -> MatchScoringEngine:
    return MatchScoringEngine(
        evaluators=[
            StubEvaluator("technical", technical, 40),
            StubEvaluator("experience", experience, 30),
            StubEvaluator("qualifications", qualifications, 20),
            StubEvaluator("culture", culture, 10),
        ]
    )


def test_reference_scenario():
    job = build_job()
    resume = build_resume(transferable_skill_hints=["Docker"])

    result = MatchScoringEngine().score(job, resume)

    assert result.technical_score == 19
    assert result.experience_score == 19
    assert result.qualifications_score == 0
    assert result.culture_score == 0
    assert result.overall_score == 38
    assert result.matched_skills == ("Python", "SQL")
    assert result.transferable_skills == ("Docker",)
    assert result.missing_critical_skills == ("Docker",)
    assert result.decision is Decision.NOT_RECOMMENDED
    assert result.final_recommendation == "No"
    assert result.confidence == 70
    assert result.tech_similarity_percent == 67


def test_score_is_deterministic():
    job = build_job(required_years=4)
    resume = build_resume(
        experience_signals=ExperienceSignals(role_relevancy=7.5),
        culture_signals=CultureSignals(leadership=3),
    )
    engine = MatchScoringEngine()

    first = engine.score(job, resume)
    second = engine.score(job, resume)

    assert first == second
    assert first.to_dict() == second.to_dict()
    assert score(job, resume) == first


def test_perfect_match_and_no_requirements_give_full_technical_score():
    engine = MatchScoringEngine()

    perfect = engine.score(build_job(), build_resume(skills=["DOCKER", "python", "Sql", "Go"]))
    empty = engine.score(build_job(required_skills=[]), build_resume(skills=[]))

    assert perfect.technical_score == 40
    assert empty.technical_score == 40
    assert empty.tech_similarity_percent == 100


def test_adding_matching_skill_never_lowers_technical_score():
    engine = MatchScoringEngine()
    job = build_job(required_skills=["Python", "SQL", "Docker", "Kafka"])
    skills: list[str] = []
    previous = engine.score(job, build_resume(skills=skills, transferable_skill_hints=["Kafka"]))

    for skill in ["kafka", "python", "docker", "sql"]:
        skills = skills + [skill]
        current = engine.score(job, build_resume(skills=skills, transferable_skill_hints=["Kafka"]))
        assert current.technical_score >= previous.technical_score
        previous = current

    assert previous.technical_score == 40


def test_bounds_and_exact_sum_with_extreme_signals():
    engine = MatchScoringEngine()
    resume = build_resume(
        skills=["python", "sql", "docker"],
        experience_years=50,
        experience_signals=ExperienceSignals(role_relevancy=100, industry_match=100),
        qualification_signals=QualificationSignals(
            education_match=100, certification_match=100, domain_expertise=100
        ),
        culture_signals=CultureSignals(leadership=100, collaboration=100, communication=100),
    )

    result = engine.score(build_job(required_years=1), resume)

    assert result.technical_score == 40
    assert result.experience_score == 30
    assert result.qualifications_score == 20
    assert result.culture_score == 10
    assert result.overall_score == 100
    assert result.overall_score == sum(category.score for category in result.categories)
    assert result.decision is Decision.STRONG_MATCH


@pytest.mark.parametrize(
    ("values", "overall", "decision"),
    [
        ((40, 30, 10, 0), 80, Decision.STRONG_MATCH),
        ((40, 30, 9, 0), 79, Decision.POTENTIAL_MATCH),
        ((40, 20, 0, 0), 60, Decision.POTENTIAL_MATCH),
        ((40, 19, 0, 0), 59, Decision.NOT_RECOMMENDED),
    ],
)
def test_decision_boundaries(values, overall, decision):
    engine = stub_engine(*values)

    result = engine.score(build_job(), build_resume())

    assert result.overall_score == overall
    assert result.decision is decision


def test_category_values_are_rounded_half_up_and_clamped():
    engine = stub_engine(20.5, 45.0, -3.0, 9.49)

    result = engine.score(build_job(), build_resume())

    assert result.technical_score == 21
    assert result.experience_score == 30
    assert result.qualifications_score == 0
    assert result.culture_score == 9


def test_round_half_up():
    assert round_half_up(19.2) == 19
    assert round_half_up(20.5) == 21
    assert round_half_up(0.5) == 1
    assert round_half_up(0.49) == 0


@pytest.mark.parametrize(
    ("job_kwargs", "resume_kwargs", "expected"),
    [
        ({}, {}, 70),
        ({"required_years": 3}, {}, 75),
        ({"required_years": 3}, {"experience_signals": ExperienceSignals(industry_match=1)}, 80),
        (
            {"required_years": 3},
            {
                "experience_signals": ExperienceSignals(role_relevancy=4),
                "qualification_signals": QualificationSignals(education_match=5),
                "culture_signals": CultureSignals(collaboration=2),
            },
            90,
        ),
        ({}, {"culture_signals": CultureSignals()}, 70),
    ],
)
def test_confidence_rewards_completeness(job_kwargs, resume_kwargs, expected):
    result = MatchScoringEngine().score(build_job(**job_kwargs), build_resume(**resume_kwargs))

    assert result.confidence == expected
    assert 70 <= result.confidence <= 100


def test_confidence_never_exceeds_ceiling():
    weights = ScoringWeights.from_settings({"core": {"confidence": {"increment": 20}}})
    resume = build_resume(
        experience_signals=ExperienceSignals(role_relevancy=4),
        qualification_signals=QualificationSignals(education_match=5),
        culture_signals=CultureSignals(collaboration=2),
    )

    result = MatchScoringEngine(weights=weights).score(build_job(required_years=2), resume)

    assert result.confidence == 100


def test_missing_required_fields_raise_invalid_profile():
    engine = MatchScoringEngine()
    job = build_job(category=None, required_skills=None)
    resume = build_resume(skills=None)

    with pytest.raises(InvalidProfile) as exc:
        engine.score(job, resume)

    assert exc.value.missing_fields == ["job.category", "job.required_skills", "resume.skills"]
    assert "job.category" in str(exc.value)


def test_alternate_weights_are_honoured():
    weights = ScoringWeights(decision=DecisionThresholds(strong_match=35, potential_match=20))
    job = build_job()
    resume = build_resume(transferable_skill_hints=["Docker"])

    result = MatchScoringEngine(weights=weights).score(job, resume)

    assert result.overall_score == 38
    assert result.decision is Decision.STRONG_MATCH
    assert "at or above 35" in result.reasoning


def test_engine_requires_all_categories():
    with pytest.raises(ValueError):
        MatchScoringEngine(evaluators=[StubEvaluator("technical", 10, 40)])


def test_default_evaluators_satisfy_protocol():
    engine = MatchScoringEngine()

    assert all(isinstance(evaluator, CategoryEvaluator) for evaluator in engine._evaluators)


def test_report_fields_and_serialization():
    job = build_job(
        required_years=2,
        key_requirements=["Own the billing service"],
        preferred_qualifications=["BSc Computer Science"],
    )
    resume = build_resume(
        skills=["python", "sql", "docker"],
        relevant_experience=["Payments platform at Acme"],
        experience_signals=ExperienceSignals(role_relevancy=9, industry_match=4),
        qualification_signals=QualificationSignals(education_match=9, certification_match=2, domain_expertise=4),
        culture_signals=CultureSignals(leadership=1),
    )

    result = MatchScoringEngine().score(job, resume)
    payload = result.to_dict()

    assert result.experience_score == 28
    assert result.decision is Decision.STRONG_MATCH
    assert payload["match"]["finalRecommendation"] == "Yes"
    assert payload["match"]["decision"] == "STRONG_MATCH"
    assert payload["match"]["matchedSkills"] == ["Python", "SQL", "Docker"]
    assert payload["job"]["keyRequirements"] == ["Own the billing service"]
    assert payload["resume"]["relevantExperience"] == ["Payments platform at Acme"]
    assert [item["name"] for item in payload["match"]["categories"]] == [
        "technical",
        "experience",
        "qualifications",
        "culture",
    ]
    assert "Direct skill matches: Python, SQL, Docker" in result.strong_points
    assert "Experience exceeds the stated requirement" in result.strong_points
    assert "Culture and soft skills rated 1/10" in result.weak_points
    assert result.fit_insight.startswith("The Software Engineer profile scores")


def test_result_is_hashable_and_category_breakdown_is_read_only():
    result = MatchScoringEngine().score(build_job(), build_resume())
    technical = result.categories[0]

    assert hash(result) == hash(MatchScoringEngine().score(build_job(), build_resume()))
    with pytest.raises(TypeError):
        technical.components["matched"] = 99.0  # type: ignore[index]
    with pytest.raises(TypeError):
        technical.metadata["matched"] = ()  # type: ignore[index]
    assert technical.metadata["matched"] == ("Python", "SQL")
    assert isinstance(technical.metadata["missing"], tuple)

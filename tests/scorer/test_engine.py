"""Unit tests for relevance signals and the scoring engine."""

from datetime import date

import pytest

from experience_relevance import ExperienceAnalyzer
from experience_relevance.config import Config, ScoringWeights
from experience_relevance.models import Experience, JobPosting


@pytest.mark.unit
def test_reference_scenario(analyzer, experience_record, job_record):
    result = analyzer.analyze_experience_relevance(experience_record, job_record)

    # keywords 5/16*30 + skills 2/6*25 + industry 10 + recency 8
    assert result.score == 36
    assert result.priority == "low"
    assert result.matched_keywords == ["developer", "react", "node", "applications", "team"]
    assert result.matched_skills == ["react", "node.js"]
    assert result.reasons == [
        "Matched 5 job keywords",
        "Matched 2 required skills",
        "Same industry experience",
        "Recent experience",
    ]


@pytest.mark.unit
def test_current_role_gets_full_recency(analyzer, experience_record, job_record):
    experience_record["endDate"] = None
    result = analyzer.analyze_experience_relevance(experience_record, job_record)

    assert result.score == 38
    assert "Recent experience" in result.reasons


@pytest.mark.unit
def test_old_role_gets_no_recency_reason(analyzer, experience_record, job_record):
    experience_record["endDate"] = "2015-03-01"
    result = analyzer.analyze_experience_relevance(experience_record, job_record)

    assert "Recent experience" not in result.reasons
    assert result.score == 28


@pytest.mark.unit
def test_future_end_date_counts_as_current(analyzer, experience_record, job_record):
    experience_record["endDate"] = "2030-01-01"
    result = analyzer.analyze_experience_relevance(experience_record, job_record)
    assert result.score == 38


@pytest.mark.unit
def test_perfect_match_is_capped_and_high(analyzer, job_record):
    mirror = {
        "title": job_record["title"],
        "company": "Elsewhere",
        "description": job_record["description"],
        "achievements": list(job_record["requirements"]),
        "industry": job_record["industry"],
        "endDate": None,
    }
    result = analyzer.analyze_experience_relevance(mirror, job_record)

    assert result.score == 100
    assert result.priority == "high"
    assert result.reasons[0] == "Job title similarity: 100%"
    assert len(result.matched_keywords) == 10
    assert len(result.matched_skills) <= 10


@pytest.mark.unit
def test_title_similarity_reason(analyzer):
    result = analyzer.analyze_experience_relevance(
        {"title": "Senior Backend Developer", "endDate": "2000-01-01"},
        {"title": "Backend Developer"},
    )
    # title 2/3 * 25 + both job keywords 30 + the one job skill 25
    assert result.reasons == [
        "Job title similarity: 67%",
        "Matched 2 job keywords",
        "Matched 1 required skills",
    ]
    assert result.score == 72
    assert result.priority == "high"


@pytest.mark.unit
def test_industry_match_is_case_sensitive(analyzer, experience_record, job_record):
    job_record["industry"] = "technology"
    result = analyzer.analyze_experience_relevance(experience_record, job_record)
    assert "Same industry experience" not in result.reasons


@pytest.mark.unit
def test_missing_industries_never_match(analyzer, experience_record, job_record):
    experience_record.pop("industry")
    job_record.pop("industry")
    result = analyzer.analyze_experience_relevance(experience_record, job_record)
    assert "Same industry experience" not in result.reasons


@pytest.mark.unit
@pytest.mark.parametrize("experience,job", [
    ({}, {}),
    ({}, None),
    (None, {"title": "Developer"}),
    ("not a record", 42),
    ({"title": None, "achievements": None, "endDate": "someday"}, {"requirements": "Python"}),
])
def test_degenerate_inputs_do_not_raise(analyzer, experience, job):
    result = analyzer.analyze_experience_relevance(experience, job)
    assert 0 <= result.score <= 100
    assert result.priority in ("high", "medium", "low")


@pytest.mark.unit
def test_empty_records_score_recency_only(analyzer):
    result = analyzer.analyze_experience_relevance({}, {})
    assert result.score == 10
    assert result.reasons == ["Recent experience"]


@pytest.mark.unit
@pytest.mark.parametrize("score,priority", [
    (100, "high"), (70, "high"), (69, "medium"), (40, "medium"), (39, "low"), (0, "low"),
])
def test_priority_thresholds(analyzer, score, priority):
    assert analyzer.scorer._determine_priority(score) == priority


@pytest.mark.unit
def test_user_skills_do_not_change_score(analyzer, experience_record, job_record):
    without = analyzer.analyze_experience_relevance(experience_record, job_record)
    with_skills = analyzer.analyze_experience_relevance(
        experience_record, job_record, ["React", "Node.js", "JavaScript", "Testing"]
    )
    assert without == with_skills


@pytest.mark.unit
def test_repeated_calls_are_identical(analyzer, experience_record, job_record):
    first = analyzer.analyze_experience_relevance(experience_record, job_record)
    second = analyzer.analyze_experience_relevance(experience_record, job_record)
    assert first == second


@pytest.mark.unit
def test_configured_weights_are_used(job_record):
    config = Config(scoring_weights=ScoringWeights(recency=0, industry=50))
    analyzer = ExperienceAnalyzer(config, today=lambda: date(2025, 6, 1))
    experience = Experience(title="Chef", industry="Technology")
    job = JobPosting.from_dict(job_record)

    result = analyzer.scorer.score(experience, job)
    assert result.score == 50
    assert result.reasons == ["Same industry experience"]
    assert result.priority == "medium"


@pytest.mark.unit
def test_long_and_unicode_text(analyzer, experience_record, job_record):
    experience_record["company"] = "Tech Corp™"
    experience_record["description"] = "Développé résumé builder " + "word " * 1000
    result = analyzer.analyze_experience_relevance(experience_record, job_record)
    assert 0 <= result.score <= 100


@pytest.mark.unit
def test_matched_skills_capped_at_ten_in_vocabulary_order(analyzer):
    stack = "Docker Flask Django Svelte Vue Angular React Rust Kotlin Swift PHP Ruby Java Python"
    result = analyzer.analyze_experience_relevance(
        {"title": "Engineer", "description": f"Shipped services with {stack}", "endDate": None},
        {"title": "Engineer", "description": f"Stack: {stack}"},
    )

    assert result.matched_skills == [
        "python", "java", "ruby", "php", "swift", "kotlin", "rust", "react", "angular", "vue",
    ]
    assert "Matched 14 required skills" in result.reasons

"""Unit tests for connecting experiences to job requirements."""

import pytest

from experience_relevance import connect_to_job_requirements


@pytest.fixture
def scored_experience(experience_record):
    return dict(
        experience_record,
        relevance={"score": 85, "matchedSkills": ["React", "Node.js"], "matchedKeywords": ["web", "application"]},
    )


@pytest.mark.unit
def test_each_requirement_connected(analyzer, scored_experience, job_record):
    result = analyzer.connect_to_job_requirements([scored_experience], job_record)

    assert [c.requirement for c in result] == job_record["requirements"]
    assert all(c.strength == "moderate" for c in result)
    assert result[0].experiences[0].relevance_score == 85
    assert result[0].experiences[0].matched_skills == ["React", "Node.js"]


@pytest.mark.unit
def test_relevant_achievements_match_requirement_keywords(analyzer, scored_experience, job_record):
    result = analyzer.connect_to_job_requirements([scored_experience], job_record)

    leadership = next(c for c in result if c.requirement == "Team leadership experience")
    assert [a.achievement for a in leadership.relevant_achievements] == ["Led team of 5 developers"]
    assert leadership.relevant_achievements[0].experience == "Senior Software Engineer"
    assert leadership.relevant_achievements[0].company == "Tech Corp"


@pytest.mark.unit
def test_relevant_achievements_capped(analyzer, job_record):
    experience = {
        "title": "Lead",
        "achievements": ["Grew the team", "Hired for the team", "Coached the team"],
    }
    job_record["requirements"] = ["Team building"]
    result = analyzer.connect_to_job_requirements([experience, experience], job_record)

    assert len(result[0].relevant_achievements) == 2
    assert result[0].strength == "strong"


@pytest.mark.unit
def test_strong_connections_first(analyzer, scored_experience, job_record):
    mentor = {"id": "m", "title": "Team Lead", "description": "Mentored the team"}
    result = analyzer.connect_to_job_requirements([scored_experience, mentor], job_record)

    assert result[0].requirement == "Team leadership experience"
    assert result[0].strength == "strong"
    assert [e.title for e in result[0].experiences] == ["Senior Software Engineer", "Team Lead"]
    assert [c.strength for c in result[1:]] == ["moderate", "moderate"]
    assert [c.requirement for c in result[1:]] == job_record["requirements"][:2]


@pytest.mark.unit
def test_matched_skill_named_in_requirement(analyzer, job_record):
    # No keyword overlap; only the attached skill links the two
    experience = {"title": "Engineer", "relevance": {"score": 50, "matchedSkills": ["GraphQL"]}}
    job_record["requirements"] = ["Strong graphql knowledge"]
    result = analyzer.connect_to_job_requirements([experience], job_record)

    assert len(result) == 1
    assert result[0].experiences[0].relevance_score == 50


@pytest.mark.unit
def test_company_name_is_not_evidence(analyzer, job_record):
    experience = {"title": "Clerk", "company": "Leadership Partners"}
    job_record["requirements"] = ["Leadership"]
    assert analyzer.connect_to_job_requirements([experience], job_record) == []


@pytest.mark.unit
def test_no_requirements(scored_experience, job_record):
    job_record["requirements"] = []
    assert connect_to_job_requirements([scored_experience], job_record) == []


@pytest.mark.unit
def test_experiences_without_relevance(analyzer, experience_record, job_record):
    result = analyzer.connect_to_job_requirements([experience_record], job_record)
    assert len(result) == 3
    assert all(c.experiences[0].relevance_score == 0 for c in result)
    assert all(c.experiences[0].matched_skills == [] for c in result)


@pytest.mark.unit
def test_serialized_shape(analyzer, scored_experience, job_record):
    connection = analyzer.connect_to_job_requirements([scored_experience], job_record)[0].to_dict()
    assert set(connection) == {"requirement", "experiences", "relevantAchievements", "strength"}
    assert set(connection["experiences"][0]) == {"title", "company", "relevanceScore", "matchedSkills"}

"""Unit tests for achievement quantification and narrative generation."""

import pytest

from experience_relevance import generate_experience_narrative, quantify_achievements
from experience_relevance.composer import has_quantification

ACHIEVEMENTS = [
    "Improved application performance by 40%",
    "Led team of 5 developers",
    "Implemented automated testing framework",
    "Reduced bugs by 30%",
    "Increased user engagement",
]


@pytest.fixture
def relevance():
    return {
        "score": 85,
        "matchedSkills": ["React", "Node.js", "JavaScript"],
        "matchedKeywords": ["web", "application", "development"],
        "reasons": ["Job title similarity", "Matched skills"],
    }


@pytest.mark.unit
def test_quantify_filters_and_lowercases_action_verbs(analyzer):
    result = analyzer.quantify_achievements(
        ACHIEVEMENTS, {"matchedKeywords": ["performance", "testing", "automated"]}
    )
    assert result == [
        "improved application performance by 40%",
        "led team of 5 developers",
        "implemented automated testing framework",
    ]


@pytest.mark.unit
def test_quantify_keeps_numbers_without_keywords(analyzer):
    result = analyzer.quantify_achievements(ACHIEVEMENTS, {"matchedKeywords": []})
    assert result == [
        "improved application performance by 40%",
        "led team of 5 developers",
        "reduced bugs by 30%",
    ]


@pytest.mark.unit
def test_quantify_prefixes_missing_action_verb():
    assert quantify_achievements(["Performance boost by 50%"], {"matchedKeywords": []}) == [
        "achieved Performance boost by 50%"
    ]


@pytest.mark.unit
def test_quantify_caps_results(analyzer):
    result = analyzer.quantify_achievements(ACHIEVEMENTS * 2, {"matchedKeywords": ["team"]})
    assert len(result) == 3


@pytest.mark.unit
@pytest.mark.parametrize("achievements", [[], None, ["Attended meetings"]])
def test_quantify_nothing_to_keep(analyzer, achievements):
    assert analyzer.quantify_achievements(achievements, {"matchedKeywords": ["python"]}) == []


@pytest.mark.unit
@pytest.mark.parametrize("text,expected", [
    ("Grew revenue 20 percent", True),
    ("Cut costs by a third (%)", True),
    ("Saved 3 hours", True),
    ("Mentored juniors", False),
])
def test_has_quantification(text, expected):
    assert has_quantification(text) is expected


@pytest.mark.unit
def test_narratives_in_fixed_order(analyzer, experience_record, job_record, relevance):
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)
    assert [n.style for n in result] == [
        "achievement-focused",
        "skills-focused",
        "problem-solution",
        "impact-focused",
        "requirement-aligned",
    ]
    assert [n.strength for n in result] == ["high", "high", "medium", "high", "high"]


@pytest.mark.unit
def test_achievement_focused_text(analyzer, experience_record, job_record, relevance):
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)
    assert result[0].text == (
        "In my role as Senior Software Engineer at Tech Corp, I improved application "
        "performance by 40% and led team of 5 developers, demonstrating expertise in "
        "React, Node.js, JavaScript that directly matches your requirements."
    )


@pytest.mark.unit
def test_skills_focused_mentions_first_requirement(analyzer, experience_record, job_record, relevance):
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)
    skills = next(n for n in result if n.style == "skills-focused")
    assert "React, Node.js, JavaScript" in skills.text
    assert skills.text.endswith("including experience with react and modern javascript.")


@pytest.mark.unit
def test_skills_focused_without_requirements(analyzer, experience_record, job_record, relevance):
    job_record["requirements"] = []
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)

    skills = next(n for n in result if n.style == "skills-focused")
    assert "immediate contributions" in skills.text
    assert "requirement-aligned" not in [n.style for n in result]


@pytest.mark.unit
def test_impact_focused_uses_first_measured_achievement(analyzer, experience_record, job_record, relevance):
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)
    impact = next(n for n in result if n.style == "impact-focused")
    assert impact.text == (
        "At Tech Corp, Improved application performance by 40% through my proficiency in React. "
        "This experience has prepared me to deliver similar results in your Full Stack Developer position."
    )


@pytest.mark.unit
def test_problem_solution_without_skills(analyzer, experience_record, job_record, relevance):
    relevance["matchedSkills"] = []
    result = analyzer.generate_experience_narrative(experience_record, job_record, relevance)

    styles = [n.style for n in result]
    assert "skills-focused" not in styles
    assert "requirement-aligned" not in styles
    problem = next(n for n in result if n.style == "problem-solution")
    assert "applying proven methodologies" in problem.text
    assert "Full Stack Developer role at Startup Inc" in problem.text


@pytest.mark.unit
def test_only_problem_solution_when_nothing_matches(job_record):
    result = generate_experience_narrative({"title": "Chef", "company": "Bistro"}, job_record, None)
    assert [n.style for n in result] == ["problem-solution"]

"""Shared records and analyzer fixtures."""

from datetime import date

import pytest

from experience_relevance import ExperienceAnalyzer

REFERENCE_DATE = date(2025, 6, 1)


@pytest.fixture
def analyzer():
    """Analyzer with a fixed clock so recency is deterministic."""
    return ExperienceAnalyzer(today=lambda: REFERENCE_DATE)


@pytest.fixture
def experience_record():
    return {
        "_id": "1",
        "title": "Senior Software Engineer",
        "company": "Tech Corp",
        "description": "Developed web applications using React and Node.js",
        "startDate": "2020-01-01",
        "endDate": "2023-01-01",
        "industry": "Technology",
        "achievements": [
            "Improved application performance by 40%",
            "Led team of 5 developers",
            "Implemented automated testing framework",
        ],
    }


@pytest.fixture
def job_record():
    return {
        "title": "Full Stack Developer",
        "company": "Startup Inc",
        "description": (
            "Looking for a developer with React and Node.js experience "
            "to build scalable web applications"
        ),
        "requirements": [
            "Experience with React and modern JavaScript",
            "Backend development with Node.js",
            "Team leadership experience",
        ],
        "industry": "Technology",
    }


@pytest.fixture
def other_experiences():
    return [
        {
            "_id": "2",
            "title": "Backend Developer",
            "company": "Tech Startup",
            "description": "Built APIs with Node.js and Express",
            "startDate": "2019-01-01",
            "endDate": "2020-01-01",
            "achievements": [],
        },
        {
            "_id": "3",
            "title": "Data Analyst",
            "company": "Analytics Corp",
            "description": "Analyzed data using Python",
            "startDate": "2017-01-01",
            "endDate": "2019-01-01",
            "achievements": [],
        },
    ]

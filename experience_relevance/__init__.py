"""
Experience-to-job relevance engine.

Deterministic, heuristic matching of work experiences against a job posting:
relevance scoring, selection, narratives, requirement connections, package
scoring and alternative presentations.

Usage:
    from experience_relevance import ExperienceAnalyzer

    analyzer = ExperienceAnalyzer()
    report = analyzer.analyze_for_job(experiences, job)
    print(report.package_score.overall_score)
"""

from .analyzer import (
    ExperienceAnalyzer,
    analyze_experience_relevance,
    connect_to_job_requirements,
    default_analyzer,
    generate_alternative_presentations,
    generate_experience_narrative,
    quantify_achievements,
    score_experience_package,
    select_relevant_experiences,
    suggest_additional_experiences,
)
from .config import Config, load_config
from .models import (
    Experience,
    ExperienceReport,
    JobPosting,
    Narrative,
    PackageScore,
    Presentation,
    RelevanceAnalysis,
    RequirementConnection,
    ScoredExperience,
    Suggestion,
)

__all__ = [
    'ExperienceAnalyzer',
    'default_analyzer',
    'analyze_experience_relevance',
    'select_relevant_experiences',
    'generate_experience_narrative',
    'quantify_achievements',
    'connect_to_job_requirements',
    'suggest_additional_experiences',
    'score_experience_package',
    'generate_alternative_presentations',
    'Config',
    'load_config',
    'Experience',
    'ExperienceReport',
    'JobPosting',
    'Narrative',
    'PackageScore',
    'Presentation',
    'RelevanceAnalysis',
    'RequirementConnection',
    'ScoredExperience',
    'Suggestion',
]
__version__ = "1.0.0"

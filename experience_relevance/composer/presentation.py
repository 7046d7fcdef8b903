"""
Alternative presentations of a single experience.
"""

from datetime import date
from typing import List, Optional

from ..models import Experience, JobPosting, Presentation
from ..scorer import RelevanceScorer

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_month(value: Optional[date]) -> str:
    """Render a date as 'Mon YYYY'."""
    return f"{_MONTHS[value.month - 1]} {value.year}" if value else ""


def format_date_range(start: Optional[date], end: Optional[date]) -> str:
    """Render a role's dates; a missing end date is 'Present'."""
    return f"{format_month(start)} - {format_month(end) if end else 'Present'}"


class PresentationFormatter:
    """Renders an experience in four fixed presentation styles."""

    def __init__(self, scorer: RelevanceScorer):
        self.scorer = scorer

    def generate(self, experience: Experience, job: JobPosting) -> List[Presentation]:
        achievements = experience.achievements
        relevance = self.scorer.score(experience, job)
        first_clause = experience.description.split(".")[0] or "contribute to the team"
        highlight = achievements[0] if achievements else "Delivered exceptional results"

        return [
            Presentation(
                format="chronological",
                title=f"{experience.title} at {experience.company}",
                content=f"{format_date_range(experience.start_date, experience.end_date)}\n{experience.description}",
                best_for="Traditional applications"
            ),
            Presentation(
                format="skills-first",
                title=" • ".join(relevance.matched_skills[:3]),
                content=f"{experience.title}, {experience.company}\n" + "\n".join(achievements[:2]),
                best_for="Technical roles"
            ),
            Presentation(
                format="achievement-focused",
                title=f"Key Achievements - {experience.company}",
                content="\n• ".join(achievements[:3]),
                best_for="Results-driven roles"
            ),
            Presentation(
                format="story",
                title=f"{experience.title} Journey",
                content=f"Joined {experience.company} to {first_clause}. {highlight}.",
                best_for="Creative/narrative applications"
            ),
        ]

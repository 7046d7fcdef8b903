"""
Experience selection and suggestion.
Ranks a user's experiences for a job and surfaces relevant ones left out of a selection.
"""

import logging
from typing import Hashable, List, Optional

from ..config import Config
from ..models import Experience, JobPosting, ScoredExperience, Suggestion
from ..scorer import RelevanceScorer

logger = logging.getLogger(__name__)


def experience_key(experience: Experience) -> Hashable:
    """
    Identity used to recognize an already-selected experience.
    Records without an id are compared by title, company and dates.
    """
    if experience.id is not None:
        return ("id", experience.id)
    return (
        "record",
        experience.title,
        experience.company,
        experience.start_date,
        experience.end_date,
    )


class ExperienceSelector:
    """Ranks experiences by relevance to a job."""

    def __init__(self, config: Config, scorer: RelevanceScorer):
        """
        Initialize experience selector.

        Args:
            config: Configuration object with selection limits
            scorer: RelevanceScorer used to score every experience
        """
        self.config = config
        self.scorer = scorer

    def select(
        self,
        experiences: List[Experience],
        job: JobPosting,
        user_skills: Optional[List[str]] = None,
        max_experiences: Optional[int] = None
    ) -> List[ScoredExperience]:
        """
        Score, rank and truncate experiences.
        Ties keep their input order.

        Args:
            experiences: Normalized experiences
            job: Normalized job posting
            user_skills: Profile skills passed through to the scorer
            max_experiences: Maximum to return (default: configured limit)

        Returns:
            Highest-scoring experiences with relevance attached, best first
        """
        if not experiences:
            return []

        if max_experiences is None:
            max_experiences = self.config.limits.max_experiences

        scored = [
            ScoredExperience.from_experience(exp, self.scorer.score(exp, job, user_skills))
            for exp in experiences
        ]
        scored.sort(key=lambda exp: exp.relevance.score, reverse=True)

        selected = scored[:max(0, max_experiences)]
        logger.debug(
            f"Selected {len(selected)} of {len(experiences)} experiences for '{job.title}': "
            f"{[exp.relevance.score for exp in selected]}"
        )
        return selected

    def suggest(
        self,
        all_experiences: List[Experience],
        selected_experiences: List[Experience],
        job: JobPosting
    ) -> List[Suggestion]:
        """
        Suggest relevant experiences that are not yet selected.

        Args:
            all_experiences: Every experience in the profile
            selected_experiences: Experiences already chosen
            job: Normalized job posting

        Returns:
            Up to the configured number of suggestions, best first
        """
        limits = self.config.limits
        selected_keys = {experience_key(exp) for exp in selected_experiences}

        suggestions = []
        for exp in all_experiences:
            if experience_key(exp) in selected_keys:
                continue
            relevance = self.scorer.score(exp, job)
            if relevance.score < limits.suggestion_min_score:
                continue
            reason = relevance.reasons[0] if relevance.reasons else "General experience relevance"
            suggestions.append(Suggestion(experience=exp, relevance=relevance, reason=reason))

        suggestions.sort(key=lambda s: s.relevance.score, reverse=True)
        return suggestions[:limits.max_suggestions]

"""
Requirement connection.
Maps each job requirement to the experiences and achievements that evidence it.
"""

import logging
from typing import List

from ..config import Config
from ..models import (
    ConnectedExperience,
    Experience,
    JobPosting,
    RelevantAchievement,
    RequirementConnection,
    relevance_of,
)
from ..scorer import KeywordExtractor

logger = logging.getLogger(__name__)


class RequirementConnector:
    """Connects experiences to job requirements."""

    def __init__(self, config: Config, keywords: KeywordExtractor):
        """
        Initialize requirement connector.

        Args:
            config: Configuration object with limits
            keywords: Keyword extractor applied to each requirement
        """
        self.config = config
        self.keywords = keywords

    def _supports(self, experience: Experience, requirement: str, keywords: List[str]) -> bool:
        """
        Whether an experience evidences a requirement.

        Args:
            experience: Experience, optionally with relevance attached
            requirement: Lowercased requirement text
            keywords: Keywords of the requirement

        Returns:
            True on a keyword hit in the experience or a matched skill named in the requirement
        """
        text = experience.searchable_text(include_company=False)
        if any(kw in text for kw in keywords):
            return True
        relevance = relevance_of(experience)
        skills = relevance.matched_skills if relevance else []
        return any(skill and skill.lower() in requirement for skill in skills)

    def connect(self, experiences: List[Experience], job: JobPosting) -> List[RequirementConnection]:
        """
        Build requirement connections.
        Strong connections (more than one supporting experience) come first,
        then connections with more supporting experiences.

        Args:
            experiences: Selected experiences
            job: Normalized job posting

        Returns:
            One connection per requirement that has supporting experiences
        """
        limit = self.config.limits.requirement_achievements
        connections = []

        for requirement in job.requirements:
            requirement_lower = requirement.lower()
            keywords = self.keywords.extract(requirement_lower)
            matching = [exp for exp in experiences if self._supports(exp, requirement_lower, keywords)]
            if not matching:
                continue

            achievements = [
                RelevantAchievement(achievement=a, experience=exp.title, company=exp.company)
                for exp in matching
                for a in exp.achievements
                if any(kw in a.lower() for kw in keywords)
            ]

            connected = []
            for exp in matching:
                relevance = relevance_of(exp)
                connected.append(ConnectedExperience(
                    title=exp.title,
                    company=exp.company,
                    relevance_score=relevance.score if relevance else 0,
                    matched_skills=list(relevance.matched_skills) if relevance else []
                ))

            connections.append(RequirementConnection(
                requirement=requirement,
                experiences=connected,
                relevant_achievements=achievements[:limit],
                strength="strong" if len(matching) > 1 else "moderate"
            ))

        connections.sort(key=lambda c: (c.strength != "strong", -len(c.experiences)))
        logger.debug(f"Connected {len(connections)} of {len(job.requirements)} requirements")
        return connections

"""
Scoring engine for experience relevance.
Combines the per-dimension signals into a 0-100 score with reasons and a priority tier.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from ..config import Config
from ..models import Experience, JobPosting, RelevanceAnalysis
from .extractor import SignalExtractor, round_half_up

logger = logging.getLogger(__name__)


class RelevanceScorer:
    """Calculates how well one experience fits one job posting."""

    def __init__(
        self,
        config: Config,
        extractor: SignalExtractor,
        today: Optional[Callable[[], date]] = None
    ):
        """
        Initialize relevance scorer.

        Args:
            config: Configuration object with weights, thresholds and limits
            extractor: SignalExtractor instance for extracting signals
            today: Clock returning the reference date for recency (default: date.today)
        """
        self.config = config
        self.extractor = extractor
        self.today = today or date.today

    def score(
        self,
        experience: Experience,
        job: JobPosting,
        user_skills: Optional[List[str]] = None
    ) -> RelevanceAnalysis:
        """
        Calculate the relevance of an experience to a job.

        Args:
            experience: Normalized experience record
            job: Normalized job posting
            user_skills: Profile skills; accepted but not part of the score

        Returns:
            RelevanceAnalysis with score, matches, reasons and priority
        """
        job_text = job.searchable_text()
        experience_text = experience.searchable_text()

        # Extract all signals
        title = self.extractor.extract_title_signal(experience.title, job.title)
        keywords = self.extractor.extract_keyword_signal(job_text, experience_text)
        skills = self.extractor.extract_skill_signal(job_text, experience_text)
        industry = self.extractor.extract_industry_signal(experience.industry, job.industry)
        recency = self.extractor.extract_recency_signal(experience.end_date, self.today())

        total = title.score + keywords.score + skills.score + industry.score + recency.score

        # Clamp to 0-100 range
        score = max(0, min(100, round_half_up(total)))

        reasons = [
            signal.reason
            for signal in (title, keywords, skills, industry, recency)
            if signal.reason
        ]

        limits = self.config.limits
        logger.debug(
            f"[{experience.title} @ {experience.company}] score={score} "
            f"title={title.score:.1f} keywords={keywords.score:.1f} "
            f"skills={skills.score:.1f} industry={industry.score} recency={recency.score}"
        )
        if user_skills:
            logger.debug(f"{len(user_skills)} user skills supplied; not used in scoring")

        return RelevanceAnalysis(
            score=score,
            matched_keywords=keywords.matched[:limits.matched_keywords],
            matched_skills=skills.matched[:limits.matched_skills],
            reasons=reasons,
            priority=self._determine_priority(score)
        )

    def _determine_priority(self, score: int) -> str:
        """
        Determine priority tier based on relevance score.

        Args:
            score: Relevance score (0-100)

        Returns:
            Priority tier: 'high', 'medium', or 'low'
        """
        thresholds = self.config.priority
        if score >= thresholds.high:
            return "high"
        elif score >= thresholds.medium:
            return "medium"
        return "low"

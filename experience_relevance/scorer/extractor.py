"""
Signal extraction module for experience relevance scoring.
Extracts per-dimension signals by comparing an experience with a job posting.
"""

from datetime import date
from typing import Optional

from ..config import Config
from .signals import (
    TitleSignal,
    KeywordSignal,
    SkillSignal,
    IndustrySignal,
    RecencySignal
)
from .text import KeywordExtractor, SkillMatcher


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


class SignalExtractor:
    """Extracts relevance signals from an experience/job pair."""

    def __init__(
        self,
        config: Config,
        keywords: KeywordExtractor,
        skills: SkillMatcher
    ):
        """
        Initialize signal extractor.

        Args:
            config: Configuration object with scoring weights
            keywords: Keyword extractor built from the configured stopwords
            skills: Skill matcher built from the configured skill table
        """
        self.config = config
        self.keywords = keywords
        self.skills = skills

    def extract_title_signal(self, experience_title: str, job_title: str) -> TitleSignal:
        """
        Compare titles as word sets.

        Args:
            experience_title: Title held in the experience
            job_title: Title of the job posting

        Returns:
            TitleSignal with Jaccard similarity and points
        """
        if not experience_title or not job_title:
            return TitleSignal(similarity=0.0, score=0.0)

        words1 = set(experience_title.lower().split())
        words2 = set(job_title.lower().split())
        union = words1 | words2
        if not union:
            return TitleSignal(similarity=0.0, score=0.0)

        similarity = len(words1 & words2) / len(union)
        reason = None
        if similarity > 0.3:
            reason = f"Job title similarity: {round_half_up(similarity * 100)}%"

        return TitleSignal(
            similarity=similarity,
            score=similarity * self.config.scoring_weights.title,
            reason=reason
        )

    def extract_keyword_signal(self, job_text: str, experience_text: str) -> KeywordSignal:
        """
        Count job keywords that appear verbatim in the experience text.

        Args:
            job_text: Lowercased job title, description and requirements
            experience_text: Lowercased experience text

        Returns:
            KeywordSignal with matched keywords and points
        """
        job_keywords = self.keywords.extract(job_text)
        if not job_keywords:
            return KeywordSignal(score=0.0)

        per_keyword = self.config.scoring_weights.keywords / len(job_keywords)
        matched = [kw for kw in job_keywords if kw in experience_text]
        reason = f"Matched {len(matched)} job keywords" if matched else None

        return KeywordSignal(
            score=per_keyword * len(matched),
            matched=matched,
            total=len(job_keywords),
            reason=reason
        )

    def extract_skill_signal(self, job_text: str, experience_text: str) -> SkillSignal:
        """
        Intersect skills detected independently in job and experience text.

        Args:
            job_text: Lowercased job text
            experience_text: Lowercased experience text

        Returns:
            SkillSignal with shared skills in vocabulary order
        """
        job_skills = set(self.skills.extract(job_text))
        experience_skills = self.skills.extract(experience_text)

        matched = [skill for skill in experience_skills if skill in job_skills]
        per_skill = self.config.scoring_weights.skills / max(len(job_skills), 1)
        reason = f"Matched {len(matched)} required skills" if matched else None

        return SkillSignal(
            score=per_skill * len(matched),
            matched=matched,
            job_skill_count=len(job_skills),
            reason=reason
        )

    def extract_industry_signal(
        self,
        experience_industry: Optional[str],
        job_industry: Optional[str]
    ) -> IndustrySignal:
        """
        Exact, case-sensitive industry comparison.
        A job without an industry never matches.

        Args:
            experience_industry: Industry of the experience
            job_industry: Industry of the job posting

        Returns:
            IndustrySignal with flat points on a match
        """
        if job_industry and experience_industry == job_industry:
            return IndustrySignal(
                score=self.config.scoring_weights.industry,
                reason="Same industry experience"
            )
        return IndustrySignal(score=0)

    def extract_recency_signal(self, end_date: Optional[date], today: date) -> RecencySignal:
        """
        Score how recently the experience ended.
        A missing end date is a current role; future end dates count as current.

        Args:
            end_date: Last day in the role, None if current
            today: Reference date for the comparison

        Returns:
            RecencySignal with points
        """
        years_since_end = max(0, today.year - end_date.year) if end_date else 0
        score = max(0, self.config.scoring_weights.recency - years_since_end)
        reason = "Recent experience" if score > 5 else None

        return RecencySignal(years_since_end=years_since_end, score=score, reason=reason)

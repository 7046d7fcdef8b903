"""
Experience package scoring.
Aggregates a selection of experiences into an overall score, coverage and gap report,
and derives recommendations for the cover letter.
"""

import logging
import re
from typing import List

from ..config import Config
from ..models import Experience, JobPosting, PackageScore, Recommendation, relevance_of
from ..scorer import SkillMatcher, round_half_up
from .requirements import RequirementConnector

logger = logging.getLogger(__name__)

_DIGIT_RE = re.compile(r"\d")


class PackageScorer:
    """Scores a set of selected experiences against a job."""

    def __init__(self, config: Config, connector: RequirementConnector, skills: SkillMatcher):
        """
        Initialize package scorer.

        Args:
            config: Configuration object with thresholds and limits
            connector: RequirementConnector used for coverage
            skills: SkillMatcher used to find skill gaps
        """
        self.config = config
        self.connector = connector
        self.skills = skills

    def score(self, experiences: List[Experience], job: JobPosting) -> PackageScore:
        """
        Score an experience package.

        Args:
            experiences: Selected experiences, normally with relevance attached
            job: Normalized job posting

        Returns:
            PackageScore; a zero result when there are no experiences
        """
        if not experiences:
            return PackageScore()

        limits = self.config.limits
        relevances = [relevance_of(exp) for exp in experiences]

        average = sum(r.score if r else 0 for r in relevances) / len(experiences)

        requirements = job.requirements
        if requirements:
            covered = self.connector.connect(experiences, job)
            coverage = round_half_up(len(covered) / len(requirements) * 100)
        else:
            coverage = 0

        strengths = [
            f"Strong {exp.title} experience at {exp.company}"
            for exp, relevance in zip(experiences, relevances)
            if relevance and relevance.score >= self.config.priority.high
        ]

        matched = {skill.lower() for r in relevances if r for skill in r.matched_skills}
        job_skills = self.skills.extract(f"{job.description} {' '.join(requirements)}")
        gaps = [skill for skill in job_skills if skill not in matched]

        overall = round_half_up(average)
        logger.debug(f"Package for '{job.title}': overall={overall} coverage={coverage} gaps={len(gaps)}")

        return PackageScore(
            overall_score=overall,
            coverage=coverage,
            strengths=strengths[:limits.strengths],
            gaps=gaps[:limits.gaps],
            recommendation=self._determine_recommendation(average)
        )

    def _determine_recommendation(self, average: float) -> str:
        """
        Recommendation text for an average relevance.

        Args:
            average: Mean relevance score of the package

        Returns:
            Recommendation sentence
        """
        if average >= 70:
            return "Excellent experience match - emphasize in cover letter"
        elif average >= 50:
            return "Good experience match - highlight transferable skills"
        return "Consider emphasizing transferable skills and growth potential"

    def recommend(self, package: PackageScore, experiences: List[Experience]) -> List[Recommendation]:
        """
        Derive actionable recommendations from a package score.

        Args:
            package: Score of the selected experiences
            experiences: The selected experiences

        Returns:
            Recommendations, emphasis tier first
        """
        recommendations = []

        if package.overall_score >= 70:
            recommendations.append(Recommendation(
                type="emphasis",
                message="Your experience is highly relevant - emphasize specific achievements",
                action="Use achievement-focused narratives in your cover letter"
            ))
        elif package.overall_score >= 50:
            recommendations.append(Recommendation(
                type="transferable",
                message="Good match - highlight transferable skills",
                action="Connect your experiences to job requirements explicitly"
            ))
        else:
            recommendations.append(Recommendation(
                type="growth",
                message="Emphasize learning ability and growth potential",
                action="Focus on how past experiences prepared you for this role"
            ))

        if package.gaps:
            recommendations.append(Recommendation(
                type="skill-gaps",
                message=f"Address skill gaps: {', '.join(package.gaps[:3])}",
                action="Mention relevant coursework, projects, or self-study"
            ))

        if len(experiences) < 3:
            recommendations.append(Recommendation(
                type="expand",
                message="Consider adding more relevant experiences",
                action="Include internships, projects, or volunteer work"
            ))

        if not any(_DIGIT_RE.search(a) for exp in experiences for a in exp.achievements):
            recommendations.append(Recommendation(
                type="quantify",
                message="Add metrics to your achievements",
                action='Quantify impact where possible (e.g., "increased by 25%")'
            ))

        return recommendations

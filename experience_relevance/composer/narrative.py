"""
Narrative generation.
Produces pitch sentences for one experience in several rhetorical styles.
"""

from typing import List

from ..models import Experience, JobPosting, Narrative, RelevanceAnalysis
from .achievements import AchievementQuantifier, has_quantification


class NarrativeGenerator:
    """Generates templated narratives for an experience."""

    def __init__(self, quantifier: AchievementQuantifier):
        self.quantifier = quantifier

    def generate(
        self,
        experience: Experience,
        job: JobPosting,
        relevance: RelevanceAnalysis
    ) -> List[Narrative]:
        """
        Generate narratives whose preconditions hold, in a fixed style order.
        The problem-solution narrative is always produced.

        Args:
            experience: Normalized experience
            job: Normalized job posting
            relevance: Relevance of the experience to the job

        Returns:
            List of narratives
        """
        narratives = []
        skills = relevance.matched_skills
        top_skills = ", ".join(skills[:3])
        role = f"{experience.title} at {experience.company}"

        # Achievement-focused
        if experience.achievements:
            top_achievements = self.quantifier.quantify(experience.achievements, relevance)
            if top_achievements:
                achievement_text = " and ".join(top_achievements[:2])
                skills_text = (
                    f", demonstrating expertise in {top_skills} that directly matches your requirements"
                    if skills else ""
                )
                narratives.append(Narrative(
                    style="achievement-focused",
                    text=f"In my role as {role}, I {achievement_text}{skills_text}.",
                    strength="high"
                ))

        # Skills-focused
        if skills:
            if job.requirements:
                focus = job.requirements[0].lower() or "delivering exceptional results"
                closing = (
                    " These capabilities are essential for the key responsibilities "
                    f"you've outlined, including {focus}."
                )
            else:
                closing = " These skills position me to make immediate contributions to your team."
            narratives.append(Narrative(
                style="skills-focused",
                text=f"During my tenure as {role}, I honed my abilities in {top_skills}.{closing}",
                strength="high"
            ))

        # Problem-solution
        approach = f"utilizing {top_skills}" if skills else "applying proven methodologies"
        narratives.append(Narrative(
            style="problem-solution",
            text=(
                f"As {role}, I tackled complex challenges {approach}, gaining experience "
                f"highly relevant to the {job.title} role at {job.company}."
            ),
            strength="medium"
        ))

        # Impact-focused
        measured = [a for a in experience.achievements if has_quantification(a)]
        if measured:
            highlight = f" through my proficiency in {skills[0]}" if skills else ""
            narratives.append(Narrative(
                style="impact-focused",
                text=(
                    f"At {experience.company}, {measured[0]}{highlight}. This experience has "
                    f"prepared me to deliver similar results in your {job.title} position."
                ),
                strength="high"
            ))

        # Requirement-aligned
        if job.requirements and skills:
            narratives.append(Narrative(
                style="requirement-aligned",
                text=(
                    f"My experience as {experience.title} has equipped me with the {top_skills} "
                    f"skills explicitly mentioned in your job requirements. At {experience.company}, "
                    "I applied these capabilities daily, making me well-prepared to meet your expectations."
                ),
                strength="high"
            ))

        return narratives

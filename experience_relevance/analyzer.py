"""
Experience analyzer facade.

Wires the scorer and composer components to one Config and exposes the public
operations. Every operation accepts model instances or plain mappings; mappings
are normalized through the ingestion boundary in ``models``.
"""

import logging
from datetime import date
from functools import lru_cache
from typing import Any, Callable, List, Optional

from .config import Config
from .models import (
    ExperienceReport,
    Narrative,
    PackageScore,
    Presentation,
    RelevanceAnalysis,
    RequirementConnection,
    ScoredExperience,
    SelectedExperience,
    Suggestion,
    as_text_list,
    coerce_experience,
    coerce_experiences,
    coerce_job,
    coerce_relevance,
)
from .scorer import RelevanceScorer, SignalExtractor, build_extractors
from .composer import (
    AchievementQuantifier,
    ExperienceSelector,
    NarrativeGenerator,
    PackageScorer,
    PresentationFormatter,
    RequirementConnector,
)

logger = logging.getLogger(__name__)


def _as_limit(value: Any) -> Optional[int]:
    """Integer selection limit, or None to use the configured default."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring invalid max_experiences: {value!r}")
        return None


class ExperienceAnalyzer:
    """Relevance engine for matching work experiences to a job posting."""

    def __init__(self, config: Optional[Config] = None, today: Optional[Callable[[], date]] = None):
        """
        Build all components from one configuration.

        Args:
            config: Configuration object (default: built-in defaults)
            today: Clock for recency scoring (default: date.today)
        """
        self.config = config or Config()
        self.keywords, self.skills = build_extractors(self.config.vocabulary)
        extractor = SignalExtractor(self.config, self.keywords, self.skills)
        self.scorer = RelevanceScorer(self.config, extractor, today=today)
        self.selector = ExperienceSelector(self.config, self.scorer)
        self.quantifier = AchievementQuantifier(self.config)
        self.narratives = NarrativeGenerator(self.quantifier)
        self.connector = RequirementConnector(self.config, self.keywords)
        self.package_scorer = PackageScorer(self.config, self.connector, self.skills)
        self.formatter = PresentationFormatter(self.scorer)

    @property
    def _strip_html(self) -> bool:
        return self.config.text.strip_html

    def analyze_experience_relevance(
        self,
        experience: Any,
        job: Any,
        user_skills: Optional[List[str]] = None
    ) -> RelevanceAnalysis:
        """Score one experience against one job."""
        return self.scorer.score(
            coerce_experience(experience, self._strip_html),
            coerce_job(job, self._strip_html),
            as_text_list(user_skills)
        )

    def select_relevant_experiences(
        self,
        experiences: Any,
        job: Any,
        user_skills: Optional[List[str]] = None,
        max_experiences: Optional[int] = None
    ) -> List[ScoredExperience]:
        """Rank experiences for a job and keep the best ``max_experiences``."""
        return self.selector.select(
            coerce_experiences(experiences, self._strip_html),
            coerce_job(job, self._strip_html),
            as_text_list(user_skills),
            _as_limit(max_experiences)
        )

    def generate_experience_narrative(self, experience: Any, job: Any, relevance: Any) -> List[Narrative]:
        """Pitch sentences for one experience in several styles."""
        return self.narratives.generate(
            coerce_experience(experience, self._strip_html),
            coerce_job(job, self._strip_html),
            coerce_relevance(relevance)
        )

    def quantify_achievements(self, achievements: Any, relevance: Any) -> List[str]:
        """Measurable or on-topic achievements phrased as actions."""
        return self.quantifier.quantify(as_text_list(achievements), coerce_relevance(relevance))

    def connect_to_job_requirements(self, experiences: Any, job: Any) -> List[RequirementConnection]:
        """Map job requirements to the experiences that evidence them."""
        return self.connector.connect(
            coerce_experiences(experiences, self._strip_html),
            coerce_job(job, self._strip_html)
        )

    def suggest_additional_experiences(
        self,
        all_experiences: Any,
        selected_experiences: Any,
        job: Any
    ) -> List[Suggestion]:
        """Relevant experiences not yet in the selection."""
        return self.selector.suggest(
            coerce_experiences(all_experiences, self._strip_html),
            coerce_experiences(selected_experiences, self._strip_html),
            coerce_job(job, self._strip_html)
        )

    def score_experience_package(self, experiences: Any, job: Any) -> PackageScore:
        """Overall score, coverage and gaps for a selection."""
        return self.package_scorer.score(
            coerce_experiences(experiences, self._strip_html),
            coerce_job(job, self._strip_html)
        )

    def generate_alternative_presentations(self, experience: Any, job: Any) -> List[Presentation]:
        """Four fixed presentation styles for one experience."""
        return self.formatter.generate(
            coerce_experience(experience, self._strip_html),
            coerce_job(job, self._strip_html)
        )

    def analyze_for_job(
        self,
        experiences: Any,
        job: Any,
        user_skills: Optional[List[str]] = None,
        max_experiences: Optional[int] = None
    ) -> ExperienceReport:
        """
        Run the complete experience analysis for a job.

        Selects the most relevant experiences, generates narratives,
        quantified achievements and presentations for each, connects the
        selection to the job requirements, suggests further experiences,
        scores the package and derives recommendations.

        Args:
            experiences: Every experience in the user's profile
            job: Job posting
            user_skills: Profile skills
            max_experiences: Maximum experiences to select

        Returns:
            ExperienceReport
        """
        all_experiences = coerce_experiences(experiences, self._strip_html)
        job = coerce_job(job, self._strip_html)

        selected = self.selector.select(all_experiences, job, as_text_list(user_skills), _as_limit(max_experiences))
        details = [
            SelectedExperience(
                experience=exp,
                narratives=self.narratives.generate(exp, job, exp.relevance),
                quantified_achievements=self.quantifier.quantify(exp.achievements, exp.relevance),
                alternative_presentations=self.formatter.generate(exp, job)
            )
            for exp in selected
        ]

        package = self.package_scorer.score(selected, job)
        report = ExperienceReport(
            selected_experiences=details,
            requirement_connections=self.connector.connect(selected, job),
            additional_suggestions=self.selector.suggest(all_experiences, selected, job),
            package_score=package,
            recommendations=self.package_scorer.recommend(package, selected)
        )
        logger.info(
            f"Analyzed {len(all_experiences)} experiences for '{job.title}' at '{job.company}': "
            f"selected={len(selected)} overall={package.overall_score} coverage={package.coverage}"
        )
        return report


@lru_cache(maxsize=1)
def default_analyzer() -> ExperienceAnalyzer:
    """Shared analyzer with the built-in configuration."""
    return ExperienceAnalyzer()


def analyze_experience_relevance(experience, job, user_skills=None) -> RelevanceAnalysis:
    return default_analyzer().analyze_experience_relevance(experience, job, user_skills)


def select_relevant_experiences(experiences, job, user_skills=None, max_experiences=3) -> List[ScoredExperience]:
    return default_analyzer().select_relevant_experiences(experiences, job, user_skills, max_experiences)


def generate_experience_narrative(experience, job, relevance) -> List[Narrative]:
    return default_analyzer().generate_experience_narrative(experience, job, relevance)


def quantify_achievements(achievements, relevance) -> List[str]:
    return default_analyzer().quantify_achievements(achievements, relevance)


def connect_to_job_requirements(experiences, job) -> List[RequirementConnection]:
    return default_analyzer().connect_to_job_requirements(experiences, job)


def suggest_additional_experiences(all_experiences, selected_experiences, job) -> List[Suggestion]:
    return default_analyzer().suggest_additional_experiences(all_experiences, selected_experiences, job)


def score_experience_package(experiences, job) -> PackageScore:
    return default_analyzer().score_experience_package(experiences, job)


def generate_alternative_presentations(experience, job) -> List[Presentation]:
    return default_analyzer().generate_alternative_presentations(experience, job)

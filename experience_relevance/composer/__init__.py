"""
Composer package for cover-letter experience material.
Builds selections, narratives, requirement connections and package scores on top of the scorer.
"""

from .achievements import AchievementQuantifier, has_quantification
from .narrative import NarrativeGenerator
from .package import PackageScorer
from .presentation import PresentationFormatter, format_date_range
from .requirements import RequirementConnector
from .selection import ExperienceSelector, experience_key

__all__ = [
    'AchievementQuantifier',
    'has_quantification',
    'NarrativeGenerator',
    'PackageScorer',
    'PresentationFormatter',
    'format_date_range',
    'RequirementConnector',
    'ExperienceSelector',
    'experience_key',
]

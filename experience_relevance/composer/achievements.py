"""
Achievement quantification.
Keeps achievements that are measurable or on-topic and phrases them as actions.
"""

import re
from typing import List

from ..config import Config
from ..models import RelevanceAnalysis

_DIGIT_RE = re.compile(r"\d")
_PERCENT_RE = re.compile(r"percent|%")


def has_quantification(text: str) -> bool:
    """True if the text contains a number or a percentage."""
    return bool(_DIGIT_RE.search(text) or _PERCENT_RE.search(text.lower()))


class AchievementQuantifier:
    """Filters and normalizes achievement statements."""

    def __init__(self, config: Config):
        self.config = config
        self.action_verbs = frozenset(v.lower() for v in config.vocabulary.action_verbs)

    def starts_with_action_verb(self, text: str) -> bool:
        words = text.lower().split()
        return bool(words) and words[0] in self.action_verbs

    def quantify(self, achievements: List[str], relevance: RelevanceAnalysis) -> List[str]:
        """
        Select and rephrase achievements.

        An achievement is kept if it mentions a matched keyword or contains a
        digit. Kept entries that open with an action verb are lowercased;
        the rest are prefixed with "achieved ".

        Args:
            achievements: Achievement statements in profile order
            relevance: Relevance analysis supplying matched keywords

        Returns:
            At most the configured number of statements, in input order
        """
        keywords = [kw.lower() for kw in relevance.matched_keywords if kw]
        limit = self.config.limits.quantified_achievements

        quantified = []
        for achievement in achievements:
            if len(quantified) >= limit:
                break
            lowered = achievement.lower()
            if not (any(kw in lowered for kw in keywords) or _DIGIT_RE.search(achievement)):
                continue
            if self.starts_with_action_verb(achievement):
                quantified.append(lowered)
            else:
                quantified.append(f"achieved {achievement}")
        return quantified

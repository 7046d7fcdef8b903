"""
Keyword and skill extraction from free text.
Both extractors are built once from a Vocabulary and are read-only afterwards.
"""

import re
from typing import FrozenSet, List, Optional, Tuple

from ..config import SkillPattern, Vocabulary

_NON_WORD_RE = re.compile(r"[^\w\s]")


class KeywordExtractor:
    """Tokenizes text into de-duplicated keywords, dropping short words and stopwords."""

    def __init__(self, stopwords: List[str], min_length: int = 4):
        """
        Initialize keyword extractor.

        Args:
            stopwords: Words never reported as keywords
            min_length: Shortest token kept (default: 4)
        """
        self.stopwords: FrozenSet[str] = frozenset(w.lower() for w in stopwords)
        self.min_length = min_length

    def extract(self, text: Optional[str]) -> List[str]:
        """
        Extract keywords in order of first appearance.

        Args:
            text: Free text (None or empty yields [])

        Returns:
            Unique lowercase keywords
        """
        if not text:
            return []

        words = _NON_WORD_RE.sub(" ", text.lower()).split()
        # dict preserves first-seen order
        return list(dict.fromkeys(
            word for word in words
            if len(word) >= self.min_length and word not in self.stopwords
        ))


class SkillMatcher:
    """Detects canonical skill names using a fixed table of compiled patterns."""

    def __init__(self, skills: List[SkillPattern]):
        """
        Compile the skill table.

        Args:
            skills: Canonical names with optional regex overrides
        """
        self._table: List[Tuple[str, re.Pattern]] = []
        seen = set()
        for skill in skills:
            name = skill.name.lower()
            if name in seen:
                continue
            seen.add(name)
            body = skill.pattern or re.escape(name)
            # Word-character lookarounds so names ending in symbols (c++, c#) still match
            self._table.append((name, re.compile(rf"(?<!\w)(?:{body})(?!\w)", re.IGNORECASE)))

    @property
    def skill_names(self) -> List[str]:
        return [name for name, _ in self._table]

    def extract(self, text: Optional[str]) -> List[str]:
        """
        Find skills mentioned in text.

        Args:
            text: Free text (None or empty yields [])

        Returns:
            Canonical skill names in vocabulary order
        """
        if not text:
            return []
        return [name for name, pattern in self._table if pattern.search(text)]


def build_extractors(vocabulary: Vocabulary) -> Tuple[KeywordExtractor, SkillMatcher]:
    """Build both extractors from one vocabulary."""
    return KeywordExtractor(vocabulary.stopwords), SkillMatcher(vocabulary.skills)

"""
Scorer package for experience relevance.
Provides keyword/skill extraction, signal extraction and scoring.
"""

from .engine import RelevanceScorer
from .extractor import SignalExtractor, round_half_up
from .text import KeywordExtractor, SkillMatcher, build_extractors
from .signals import (
    TitleSignal,
    KeywordSignal,
    SkillSignal,
    IndustrySignal,
    RecencySignal
)

__all__ = [
    'RelevanceScorer',
    'SignalExtractor',
    'KeywordExtractor',
    'SkillMatcher',
    'build_extractors',
    'round_half_up',
    'TitleSignal',
    'KeywordSignal',
    'SkillSignal',
    'IndustrySignal',
    'RecencySignal',
]

"""
Signal dataclasses for experience relevance scoring.
Each signal represents one dimension of fit with its points and an optional reason.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TitleSignal:
    """Signal for job title similarity."""
    similarity: float  # Jaccard index 0.0-1.0
    score: float  # 0-25 points
    reason: Optional[str] = None  # Set when similarity > 0.3


@dataclass
class KeywordSignal:
    """Signal for job keyword overlap."""
    score: float  # 0-30 points
    matched: List[str] = field(default_factory=list)  # In job keyword order
    total: int = 0  # Number of job keywords
    reason: Optional[str] = None


@dataclass
class SkillSignal:
    """Signal for shared skills."""
    score: float  # 0-25 points
    matched: List[str] = field(default_factory=list)  # In vocabulary order
    job_skill_count: int = 0
    reason: Optional[str] = None


@dataclass
class IndustrySignal:
    """Signal for industry match."""
    score: int  # 0 or 10 points
    reason: Optional[str] = None


@dataclass
class RecencySignal:
    """Signal for how recently the experience ended."""
    years_since_end: int  # 0 for a current role
    score: int  # 0-10 points
    reason: Optional[str] = None  # Set when score > 5

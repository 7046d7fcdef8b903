"""
Record types for the experience relevance engine.

Input records (Experience, JobPosting) are normalized here, at the ingestion
boundary: camelCase or snake_case keys, ``id``/``_id`` identifiers, ISO date
strings and markup in descriptions are all resolved before any scoring code
sees them. Output records serialize back to the camelCase shape consumed by
the cover-letter composition service via ``to_dict()``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import logging
import re

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_MARKUP_RE = re.compile(r"<[a-zA-Z/!][^>]*>")
_BLOCK_TAGS = frozenset({
    "p", "br", "div", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "tr", "section", "blockquote",
})
_INLINE_TAGS = frozenset({"span", "strong", "em", "b", "i", "u", "a", "code", "small"})
_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y", "%m/%d/%Y", "%b %Y", "%B %Y")


def strip_markup(text: str) -> str:
    """
    Strip HTML tags and preserve paragraph breaks.
    Text is only rewritten when it contains known HTML tags, so plain text
    such as ``vector<int>`` or ``List<T>`` is returned unchanged.

    Args:
        text: Text that may contain HTML tags

    Returns:
        Plain text with preserved paragraph breaks
    """
    if not text or not _MARKUP_RE.search(text):
        return text
    soup = BeautifulSoup(text, 'html.parser')
    if soup.find(list(_BLOCK_TAGS | _INLINE_TAGS)) is None:
        return text

    # Only block-level tags break lines; inline tags join with their neighbours
    for tag in soup.find_all(list(_BLOCK_TAGS)):
        tag.insert_before("\n")
        tag.insert_after("\n")
    lines = [" ".join(line.split()) for line in soup.get_text().splitlines()]
    return "\n".join([l for l in lines if l])


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date from a date, datetime or string value.

    Args:
        value: Raw date value (ISO string, date, datetime or None)

    Returns:
        Parsed date, or None if absent or unparseable
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.warning(f"Ignoring non-string date value: {value!r}")
        return None

    raw = value.strip()
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue

    logger.warning(f"Unparseable date: {value!r}")
    return None


def _pick(data: Mapping, *keys: str) -> Any:
    """Return the first non-None value among keys."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def as_text_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


# Input records

@dataclass
class Experience:
    """
    A single work experience from the user's profile.

    Attributes:
        id: Normalized identifier (from ``id`` or ``_id``), None if unknown
        title: Position title
        company: Employer name
        description: Free-text description of the role
        start_date: First day in the role
        end_date: Last day in the role, None for a current role
        industry: Industry label (optional)
        achievements: Ordered list of achievement statements
        location: Work location (optional)
    """
    id: Optional[str] = None
    title: str = ""
    company: str = ""
    description: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    industry: Optional[str] = None
    achievements: List[str] = field(default_factory=list)
    location: Optional[str] = None

    def searchable_text(self, include_company: bool = True) -> str:
        """Lowercased title, company, description and achievements."""
        parts = [self.title]
        if include_company:
            parts.append(self.company)
        parts.extend([self.description, " ".join(self.achievements)])
        return " ".join(parts).lower()

    @classmethod
    def from_dict(cls, data: Mapping, strip_html: bool = True) -> "Experience":
        """
        Build an Experience from a stored record.

        Args:
            data: Mapping with camelCase or snake_case keys
            strip_html: Reduce markup in the description to plain text

        Returns:
            Normalized Experience
        """
        identifier = _pick(data, "id", "_id")
        description = _as_text(data.get("description"))
        if strip_html:
            description = strip_markup(description)
        industry = data.get("industry")
        location = data.get("location")
        return cls(
            id=str(identifier) if identifier is not None else None,
            title=_as_text(data.get("title")),
            company=_as_text(data.get("company")),
            description=description,
            start_date=parse_date(_pick(data, "startDate", "start_date")),
            end_date=parse_date(_pick(data, "endDate", "end_date")),
            industry=industry if isinstance(industry, str) else None,
            achievements=as_text_list(data.get("achievements")),
            location=location if isinstance(location, str) else None,
        )

    @classmethod
    def from_employment(cls, record: Mapping, strip_html: bool = True) -> "Experience":
        """
        Build an Experience from a profile employment entry.

        Achievements are derived from the non-blank lines of the description.

        Args:
            record: Employment mapping with position/jobTitle, company, dates,
                description, location and isCurrentPosition
            strip_html: Reduce markup in the description to plain text

        Returns:
            Normalized Experience
        """
        description = _as_text(record.get("description"))
        if strip_html:
            description = strip_markup(description)
        identifier = _pick(record, "id", "_id")
        current = bool(_pick(record, "isCurrentPosition", "is_current_position"))
        location = record.get("location")
        return cls(
            id=str(identifier) if identifier is not None else None,
            title=_as_text(_pick(record, "position", "jobTitle", "title")),
            company=_as_text(record.get("company")),
            description=description,
            start_date=parse_date(_pick(record, "startDate", "start_date")),
            end_date=None if current else parse_date(_pick(record, "endDate", "end_date")),
            industry=record.get("industry") if isinstance(record.get("industry"), str) else None,
            achievements=[line for line in description.split("\n") if line.strip()],
            location=location if isinstance(location, str) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "description": self.description,
            "startDate": _iso(self.start_date),
            "endDate": _iso(self.end_date),
            "industry": self.industry,
            "achievements": list(self.achievements),
            "location": self.location,
        }


@dataclass
class JobPosting:
    """A job the user is applying for."""
    title: str = ""
    company: str = ""
    description: str = ""
    requirements: List[str] = field(default_factory=list)
    industry: Optional[str] = None

    def searchable_text(self) -> str:
        """Lowercased title, description and requirements."""
        return f"{self.title} {self.description} {' '.join(self.requirements)}".lower()

    @classmethod
    def from_dict(cls, data: Mapping, strip_html: bool = True) -> "JobPosting":
        description = _as_text(data.get("description"))
        if strip_html:
            description = strip_markup(description)
        industry = data.get("industry")
        return cls(
            title=_as_text(data.get("title")),
            company=_as_text(data.get("company")),
            description=description,
            requirements=as_text_list(data.get("requirements")),
            industry=industry if isinstance(industry, str) else None,
        )


# Scoring results

@dataclass
class RelevanceAnalysis:
    """Relevance of one experience to one job."""
    score: int = 0  # 0-100
    matched_keywords: List[str] = field(default_factory=list)
    matched_skills: List[str] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)
    priority: str = "low"  # high, medium, low

    @classmethod
    def from_dict(cls, data: Mapping) -> "RelevanceAnalysis":
        score = data.get("score")
        return cls(
            score=int(score) if isinstance(score, (int, float)) and not isinstance(score, bool) else 0,
            matched_keywords=as_text_list(_pick(data, "matchedKeywords", "matched_keywords")),
            matched_skills=as_text_list(_pick(data, "matchedSkills", "matched_skills")),
            reasons=as_text_list(data.get("reasons")),
            priority=_as_text(data.get("priority")) or "low",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "matchedKeywords": list(self.matched_keywords),
            "matchedSkills": list(self.matched_skills),
            "reasons": list(self.reasons),
            "priority": self.priority,
        }


@dataclass
class ScoredExperience(Experience):
    """An Experience with its relevance analysis attached."""
    relevance: Optional[RelevanceAnalysis] = None

    @classmethod
    def from_experience(
        cls,
        experience: Experience,
        relevance: Optional[RelevanceAnalysis]
    ) -> "ScoredExperience":
        values = {f.name: getattr(experience, f.name) for f in fields(Experience)}
        values["achievements"] = list(experience.achievements)
        return cls(relevance=relevance, **values)

    @classmethod
    def from_dict(cls, data: Mapping, strip_html: bool = True) -> "ScoredExperience":
        relevance = data.get("relevance")
        return cls.from_experience(
            Experience.from_dict(data, strip_html=strip_html),
            RelevanceAnalysis.from_dict(relevance) if isinstance(relevance, Mapping) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["relevance"] = self.relevance.to_dict() if self.relevance else None
        return result


def relevance_of(experience: Experience) -> Optional[RelevanceAnalysis]:
    """Relevance attached to an experience, if any."""
    return getattr(experience, "relevance", None)


# Composition results

@dataclass
class Narrative:
    """A templated pitch sentence for one experience."""
    style: str  # achievement-focused, skills-focused, problem-solution, impact-focused, requirement-aligned
    text: str
    strength: str  # high, medium

    def to_dict(self) -> Dict[str, Any]:
        return {"style": self.style, "text": self.text, "strength": self.strength}


@dataclass
class RelevantAchievement:
    """An achievement that evidences a job requirement."""
    achievement: str
    experience: str  # Experience title
    company: str

    def to_dict(self) -> Dict[str, Any]:
        return {"achievement": self.achievement, "experience": self.experience, "company": self.company}


@dataclass
class ConnectedExperience:
    """Summary of an experience that supports a requirement."""
    title: str
    company: str
    relevance_score: int
    matched_skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "relevanceScore": self.relevance_score,
            "matchedSkills": list(self.matched_skills),
        }


@dataclass
class RequirementConnection:
    """Mapping from one job requirement to the experiences evidencing it."""
    requirement: str
    experiences: List[ConnectedExperience]
    relevant_achievements: List[RelevantAchievement]
    strength: str  # strong, moderate

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requirement": self.requirement,
            "experiences": [e.to_dict() for e in self.experiences],
            "relevantAchievements": [a.to_dict() for a in self.relevant_achievements],
            "strength": self.strength,
        }


@dataclass
class Suggestion:
    """An unselected experience worth adding for a job."""
    experience: Experience
    relevance: RelevanceAnalysis
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "experience": {"title": self.experience.title, "company": self.experience.company},
            "relevanceScore": self.relevance.score,
            "reason": self.reason,
        }


@dataclass
class PackageScore:
    """Aggregate assessment of a set of selected experiences."""
    overall_score: int = 0  # 0-100
    coverage: int = 0  # 0-100 percent of requirements covered
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    recommendation: str = "Add relevant work experiences"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "coverage": self.coverage,
            "strengths": list(self.strengths),
            "gaps": list(self.gaps),
            "recommendation": self.recommendation,
        }


@dataclass
class Presentation:
    """One experience rendered in a structured presentation style."""
    format: str  # chronological, skills-first, achievement-focused, story
    title: str
    content: str
    best_for: str

    def to_dict(self) -> Dict[str, Any]:
        return {"format": self.format, "title": self.title, "content": self.content, "bestFor": self.best_for}


@dataclass
class Recommendation:
    """Actionable advice derived from a package score."""
    type: str  # emphasis, transferable, growth, skill-gaps, expand, quantify
    message: str
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "message": self.message, "action": self.action}


@dataclass
class SelectedExperience:
    """A selected experience with everything generated for it."""
    experience: ScoredExperience
    narratives: List[Narrative]
    quantified_achievements: List[str]
    alternative_presentations: List[Presentation]

    def to_dict(self) -> Dict[str, Any]:
        exp = self.experience
        return {
            "experience": {
                "title": exp.title,
                "company": exp.company,
                "startDate": _iso(exp.start_date),
                "endDate": _iso(exp.end_date),
                "description": exp.description,
                "achievements": list(exp.achievements),
            },
            "relevance": exp.relevance.to_dict() if exp.relevance else None,
            "narratives": [n.to_dict() for n in self.narratives],
            "quantifiedAchievements": list(self.quantified_achievements),
            "alternativePresentations": [p.to_dict() for p in self.alternative_presentations],
        }


@dataclass
class ExperienceReport:
    """Complete experience analysis for one job."""
    selected_experiences: List[SelectedExperience]
    requirement_connections: List[RequirementConnection]
    additional_suggestions: List[Suggestion]
    package_score: PackageScore
    recommendations: List[Recommendation]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selectedExperiences": [s.to_dict() for s in self.selected_experiences],
            "requirementConnections": [c.to_dict() for c in self.requirement_connections],
            "additionalSuggestions": [s.to_dict() for s in self.additional_suggestions],
            "packageScore": self.package_score.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
        }


# Coercion at the public API

def coerce_experience(value: Any, strip_html: bool = True) -> Experience:
    """
    Normalize a caller-supplied experience record.

    Experience instances pass through; mappings go through ``from_dict``
    (as a ScoredExperience when they carry a ``relevance`` key); anything
    else becomes an empty Experience.
    """
    if isinstance(value, Experience):
        return value
    if isinstance(value, Mapping):
        if "relevance" in value:
            return ScoredExperience.from_dict(value, strip_html=strip_html)
        return Experience.from_dict(value, strip_html=strip_html)
    logger.warning(f"Treating non-mapping experience record as empty: {type(value).__name__}")
    return Experience()


def coerce_experiences(values: Any, strip_html: bool = True) -> List[Experience]:
    """Normalize a collection of experience records; None yields []."""
    if values is None:
        return []
    if isinstance(values, (str, bytes, Mapping)) or not hasattr(values, "__iter__"):
        logger.warning(f"Treating non-list experience collection as empty: {type(values).__name__}")
        return []
    return [coerce_experience(v, strip_html=strip_html) for v in values]


def coerce_job(value: Any, strip_html: bool = True) -> JobPosting:
    """Normalize a caller-supplied job record; None yields an empty JobPosting."""
    if isinstance(value, JobPosting):
        return value
    if isinstance(value, Mapping):
        return JobPosting.from_dict(value, strip_html=strip_html)
    if value is not None:
        logger.warning(f"Treating non-mapping job record as empty: {type(value).__name__}")
    return JobPosting()


def coerce_relevance(value: Any) -> RelevanceAnalysis:
    """Normalize a caller-supplied relevance analysis; None yields an empty one."""
    if isinstance(value, RelevanceAnalysis):
        return value
    if isinstance(value, Mapping):
        return RelevanceAnalysis.from_dict(value)
    return RelevanceAnalysis()

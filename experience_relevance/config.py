"""
Configuration module for the experience relevance engine.
Loads and validates configuration from YAML file using Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
import yaml
import os


DEFAULT_STOPWORDS = [
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "as", "is", "was", "are", "were", "be", "been",
    "being", "have", "has", "had", "do", "does", "did", "will", "would",
    "should", "could", "may", "might", "can", "this", "that", "these", "those",
]

DEFAULT_ACTION_VERBS = [
    "achieved", "led", "managed", "developed", "created", "implemented",
    "improved", "increased", "decreased", "launched", "designed", "built",
    "delivered", "coordinated", "optimized", "reduced", "generated",
    "established", "drove", "executed",
]

DEFAULT_SKILLS = [
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php",
    "swift", "kotlin", "go", "rust",
    # Frontend frameworks/libraries
    "react", "angular", "vue", "svelte", "jquery", "next.js", "gatsby", "nuxt",
    # Backend frameworks
    "node.js", "express", "django", "flask", "spring", "laravel", "rails",
    "asp.net",
    # Databases
    "sql", "mysql", "postgresql", "mongodb", "redis", "oracle", "dynamodb",
    "cassandra", "elasticsearch",
    # Cloud & DevOps
    "aws", "azure", "gcp", "google cloud", "docker", "kubernetes", "jenkins",
    "ci/cd", "terraform", "ansible",
    # Testing
    "jest", "mocha", "junit", "selenium", "cypress", "testing", "unit test",
    "integration test", "test automation",
    # Methodologies
    "agile", "scrum", "kanban", "waterfall", "devops",
    # Data & Analytics
    "data analysis", "machine learning", "deep learning", "ai",
    "artificial intelligence", "data science", "analytics", "big data",
    "hadoop", "spark", "tableau", "power bi",
    # Soft skills
    "leadership", "management", "communication", "teamwork", "collaboration",
    "problem solving", "project management", "time management",
    "critical thinking", "adaptability", "creativity",
    # Web technologies
    "html", "css", "sass", "less", "tailwind", "bootstrap", "rest api",
    "graphql", "websocket",
    # Mobile
    "ios", "android", "react native", "flutter", "mobile development",
    # Other
    "git", "github", "gitlab", "jira", "confluence", "microservices", "api",
    "rest", "security", "oauth", "authentication", "frontend", "backend",
    "full stack", "debugging", "optimization",
]


class SkillPattern(BaseModel):
    """A canonical skill name and the regex that detects it."""
    name: str
    pattern: Optional[str] = None  # Defaults to the escaped name


class Vocabulary(BaseModel):
    """Fixed word tables used by the extractors."""
    stopwords: List[str] = Field(default_factory=lambda: list(DEFAULT_STOPWORDS))
    action_verbs: List[str] = Field(default_factory=lambda: list(DEFAULT_ACTION_VERBS))
    skills: List[SkillPattern] = Field(
        default_factory=lambda: [SkillPattern(name=s) for s in DEFAULT_SKILLS]
    )


class ScoringWeights(BaseModel):
    """Maximum points for each relevance dimension."""
    title: int = 25
    keywords: int = 30
    skills: int = 25
    industry: int = 10
    recency: int = 10


class PriorityThresholds(BaseModel):
    """Score boundaries for the priority tiers."""
    high: int = 70
    medium: int = 40


class Limits(BaseModel):
    """Caps applied to lists and selections."""
    matched_keywords: int = 10
    matched_skills: int = 10
    quantified_achievements: int = 3
    requirement_achievements: int = 2
    strengths: int = 3
    gaps: int = 5
    max_experiences: int = 3
    suggestion_min_score: int = 30
    max_suggestions: int = 3


class TextConfig(BaseModel):
    """Text normalization applied to incoming records."""
    strip_html: bool = True


class Config(BaseModel):
    """Main configuration model."""
    vocabulary: Vocabulary = Field(default_factory=Vocabulary)
    scoring_weights: ScoringWeights = Field(default_factory=ScoringWeights)
    priority: PriorityThresholds = Field(default_factory=PriorityThresholds)
    limits: Limits = Field(default_factory=Limits)
    text: TextConfig = Field(default_factory=TextConfig)


def load_config(path: str = "config.yaml") -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file (default: config.yaml)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If the file is empty or its structure is invalid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Configuration file not found: {path}\n"
            f"Please copy config.example.yaml to {path} and customize it."
        )

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(
            f"Invalid YAML syntax in {path}: {e}"
        )

    if data is None:
        raise ValueError(f"Configuration file {path} is empty")

    try:
        config = Config(**data)
    except Exception as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check config.example.yaml for the correct format."
        )

    return config

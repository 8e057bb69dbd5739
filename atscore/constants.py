"""Heuristic thresholds shared by the scoring modules.

These values are part of the scoring contract: changing any of them changes
every score the engine produces, so they are kept out of runtime configuration.
"""

from typing import Final


class ScoringConstants:
    """Constants for resume analysis and candidate ranking."""

    # Keyword extraction
    MAX_TARGET_KEYWORDS: Final[int] = 40
    MIN_PLAIN_TOKEN_LENGTH: Final[int] = 3

    # Recommended resume length (inclusive)
    MIN_WORD_COUNT: Final[int] = 200
    MAX_WORD_COUNT: Final[int] = 800

    # Readability thresholds
    HARD_TO_READ_BELOW: Final[float] = 30.0
    READABLE_FROM: Final[float] = 50.0

    # Keyword coverage thresholds (percent)
    MAX_MISSING_KEYWORD_PCT: Final[float] = 60.0
    STRONG_KEYWORD_MATCH_PCT: Final[float] = 50.0

    # Weight tuples must sum to 1 within this tolerance
    WEIGHT_EPSILON: Final[float] = 1e-3

    # Skills sub-score
    TECH_SKILL_POINTS: Final[int] = 5
    SOFT_SKILL_POINTS: Final[int] = 2

    MIN_SCORE: Final[int] = 0
    MAX_SCORE: Final[int] = 100


class FleschConstants:
    """Flesch Reading Ease formula and label bands."""

    BASE: Final[float] = 206.835
    SENTENCE_WEIGHT: Final[float] = 1.015
    SYLLABLE_WEIGHT: Final[float] = 84.6

    # (inclusive lower bound, label), highest first
    LABELS: Final[tuple] = (
        (90.0, "Very Easy"),
        (80.0, "Easy"),
        (70.0, "Fairly Easy"),
        (60.0, "Standard"),
        (50.0, "Fairly Difficult"),
        (30.0, "Difficult"),
    )
    FLOOR_LABEL: Final[str] = "Very Difficult"


class RankingPoints:
    """Additive points awarded by the candidate ranker."""

    KEYWORD: Final[int] = 10
    SKILL: Final[int] = 15
    LOCATION: Final[int] = 20
    JOB_TYPE: Final[int] = 15
    ROLE: Final[int] = 25
    MAX_SCORE: Final[int] = 100

    DEFAULT_PAGE: Final[int] = 1
    DEFAULT_LIMIT: Final[int] = 10


class GradeBands:
    """Letter grade bands for the ATS check response."""

    BANDS: Final[tuple] = (
        (80, "A"),
        (70, "B"),
        (60, "C"),
        (50, "D"),
    )
    FLOOR_GRADE: Final[str] = "F"

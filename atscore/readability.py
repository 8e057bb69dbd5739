"""Flesch Reading Ease approximation.

Syllables are estimated by counting vowel letters in each word (minimum one).
"""
import logging

import regex as re

from .constants import FleschConstants
from .schemas import Readability

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r'[.!?]+')
NON_VOWELS = re.compile(r'[^aeiouy]')


def count_syllables(word: str) -> int:
    return max(1, len(NON_VOWELS.sub('', word.lower())))


def label_for(score: float) -> str:
    for lower_bound, label in FleschConstants.LABELS:
        if score >= lower_bound:
            return label
    return FleschConstants.FLOOR_LABEL


def flesch_score(text: str) -> float:
    """Unclamped Flesch Reading Ease; 0 when there are no words or sentences."""
    sentences = [s for s in SENTENCE_SPLIT.split(text or "") if s.strip()]
    words = (text or "").split()
    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(word) for word in words)
    return (
        FleschConstants.BASE
        - FleschConstants.SENTENCE_WEIGHT * (len(words) / len(sentences))
        - FleschConstants.SYLLABLE_WEIGHT * (syllables / len(words))
    )


def estimate(text: str) -> Readability:
    # Label and downstream thresholds all read the reported (rounded) score
    score = round(min(100.0, max(0.0, flesch_score(text))), 1)
    readability = Readability(score=score, label=label_for(score))
    logger.debug(f"Readability {readability.score} ({readability.label})")
    return readability

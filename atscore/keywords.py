from collections import Counter
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple
import logging

import regex as re

from .constants import ScoringConstants
from .exceptions import EmptyInputError
from .normalizer import normalize
from .schemas import KeywordMatch, KeywordSet
from .vocabulary import STOP_WORDS, TECH_SKILLS

logger = logging.getLogger(__name__)

Span = Tuple[int, int, str]


@lru_cache(maxsize=1024)
def term_pattern(term: str) -> re.Pattern:
    """Word-boundary pattern for a term.

    Lookarounds instead of \\b so terms ending in punctuation ("c++", "node.js")
    still match, while "java" never matches inside "javascript".
    """
    escaped = r'\s+'.join(re.escape(part) for part in term.split())
    return re.compile(rf'(?<!\w){escaped}(?!\w)', re.IGNORECASE)


def contains_term(text: str, term: str) -> bool:
    term = term.strip()
    return bool(term) and term_pattern(term).search(text) is not None


def unique_terms(terms: Iterable[str]) -> List[str]:
    """Lowercase, collapse whitespace and drop duplicates, keeping first-seen order."""
    unique = []
    for term in terms:
        term = normalize(term or "")
        if term and term not in unique:
            unique.append(term)
    return unique


def find_terms(text: str, vocabulary: Iterable[str]) -> List[str]:
    """Return the vocabulary terms present in text, in vocabulary order."""
    return [term for term in vocabulary if contains_term(text, term)]


class KeywordExtractor:
    """Derives target keywords from free text and matches them against documents."""

    def __init__(
        self,
        vocabulary: Optional[Iterable[str]] = None,
        stop_words: Optional[Iterable[str]] = None,
        max_keywords: int = ScoringConstants.MAX_TARGET_KEYWORDS
    ):
        self.vocabulary = list(vocabulary) if vocabulary is not None else list(TECH_SKILLS)
        self.stop_words = frozenset(stop_words) if stop_words is not None else STOP_WORDS
        self.max_keywords = max_keywords
        self.compile_patterns()

    def compile_patterns(self):
        """Compile the technical-token pattern classes, most specific first."""
        terms = sorted(self.vocabulary, key=len, reverse=True)
        vocabulary_pattern = '|'.join(
            r'\s+'.join(re.escape(part) for part in term.split()) for term in terms
        )
        self.vocabulary_pattern = None
        self.technical_patterns = []
        if vocabulary_pattern:
            self.vocabulary_pattern = re.compile(
                rf'(?<!\w)(?:{vocabulary_pattern})(?!\w)', re.IGNORECASE
            )
            self.technical_patterns.append(self.vocabulary_pattern)
        self.technical_patterns.extend([
            # dotted identifiers: node.js, asp.net
            re.compile(r'(?<![\w.])\p{L}\w+(?:\.[\p{L}\d]+)+(?!\w|\.\w)'),
            # hyphen/underscore compounds: scikit-learn, ci_cd
            re.compile(r'(?<![\w-])[\p{L}\d]+(?:[-_][\p{L}\d]+)+(?![\w-])'),
            # CamelCase: JavaScript, PostgreSQL
            re.compile(r'\b\p{Lu}\p{Ll}+(?:\p{Lu}[\p{Ll}\d]*)+\b'),
            # acronyms: AWS, SQL, CI
            re.compile(r'\b\p{Lu}{2,5}\d*\b'),
        ])
        self.plain_token = re.compile(r'[\p{L}\d][\p{L}\d+#]*')

    def _find_technical_spans(self, text: str) -> List[Span]:
        spans = []
        for pattern in self.technical_patterns:
            for match in pattern.finditer(text):
                token = match.group()
                if any(ch.isalpha() for ch in token):
                    spans.append((match.start(), match.end(), token))
        return self._deduplicate_spans(spans)

    def _deduplicate_spans(self, spans: List[Span]) -> List[Span]:
        """Remove overlapping spans, keeping the longest one at each position."""
        unique = []
        last_end = -1
        for start, end, token in sorted(spans, key=lambda s: (s[0], -(s[1] - s[0]))):
            if start >= last_end:
                unique.append((start, end, token))
                last_end = end
        return unique

    def _plain_tokens(self, text: str) -> List[str]:
        tokens = []
        for token in self.plain_token.findall(text.lower()):
            if token.isdigit() or len(token) < ScoringConstants.MIN_PLAIN_TOKEN_LENGTH:
                continue
            if token in self.stop_words:
                continue
            tokens.append(token)
        return tokens

    def extract_target_keywords(self, text: str) -> KeywordSet:
        """Extract up to max_keywords target terms from free text.

        Technical tokens (vocabulary terms, dotted identifiers, compounds,
        CamelCase words and acronyms) rank above plain words; within each
        group more frequent terms come first and ties keep first-seen order.
        """
        if not text or not text.strip():
            raise EmptyInputError("job_description")

        spans = self._find_technical_spans(text)
        technical = Counter(normalize(token) for _, _, token in spans)

        # Blank out technical spans so their parts are not counted again
        remaining = list(text)
        for start, end, _ in spans:
            remaining[start:end] = ' ' * (end - start)

        plain: Dict[str, int] = Counter()
        for token in self._plain_tokens(''.join(remaining)):
            if token in technical:
                technical[token] += 1
            else:
                plain[token] += 1

        ranked = [(term, 0, count) for term, count in technical.items()]
        ranked += [(term, 1, count) for term, count in plain.items()]
        ranked.sort(key=lambda item: (item[1], -item[2]))

        keywords = KeywordSet(terms=[term for term, _, _ in ranked[:self.max_keywords]])
        logger.debug(
            f"Extracted {len(keywords)} keywords "
            f"({len(technical)} technical, {len(plain)} plain candidates)"
        )
        return keywords

    def match_keywords(self, normalized_document: str, target: Iterable[str]) -> KeywordMatch:
        """Split target terms into found/missing using word-boundary matching."""
        terms = unique_terms(target)
        found, missing = [], []
        for term in terms:
            if contains_term(normalized_document, term):
                found.append(term)
            else:
                missing.append(term)
        logger.debug(f"Keyword match: {len(found)}/{len(terms)} found")
        return KeywordMatch(found=found, missing=missing)

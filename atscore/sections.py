from typing import Dict, List, Optional
import logging

import regex as re

from .keywords import KeywordExtractor
from .schemas import FormatChecks, SectionFlags
from .vocabulary import TECH_SKILLS

logger = logging.getLogger(__name__)

# Heading words per section; a heading is either alone on its line or followed by a colon
SECTION_HEADINGS: Dict[str, List[str]] = {
    'contact': [
        r'contact', r'contact\s+(?:information|info|details)', r'personal\s+(?:information|details)',
    ],
    'experience': [
        r'experience', r'work\s+experience', r'professional\s+experience', r'work\s+history',
        r'employment(?:\s+history)?', r'career\s+history',
    ],
    'education': [
        r'education', r'academic\s+background', r'qualifications', r'academics',
    ],
    'skills': [
        r'skills', r'technical\s+skills', r'core\s+competencies', r'technologies', r'tech\s+stack',
    ],
    'summary': [
        r'summary', r'professional\s+summary', r'objective', r'career\s+objective',
        r'profile', r'about\s+me',
    ],
}

EMAIL = re.compile(r'[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}')
PHONE = re.compile(r'(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b')
LINKEDIN = re.compile(r'linkedin\.com/in/[\w-]+', re.IGNORECASE)
YEAR = re.compile(r'\b(?:19|20)\d{2}\b')
ROLE_TITLE = re.compile(
    r'\b(?:developer|engineer|manager|analyst|designer|consultant|architect|intern'
    r'|administrator|specialist|scientist|director|lead)s?\b',
    re.IGNORECASE
)
DEGREE = re.compile(
    r'\b(?:bachelor(?:\'s)?|master(?:\'s)?|ph\.?d|mba|b\.?sc|m\.?sc|b\.?tech|m\.?tech'
    r'|degree|diploma|university|college|institute)\b',
    re.IGNORECASE
)
SUMMARY_WORDS = re.compile(r'\b(?:summary|objective|profile)\b', re.IGNORECASE)

BULLET = re.compile(r'(?m)^\s*[-*]\s|[•▪●◦‣]\s')
TABLE = re.compile(r'\|.*\||\t.*\t')


def heading_pattern(headings: List[str]) -> re.Pattern:
    words = '|'.join(headings)
    return re.compile(
        rf'(?im)^[ \t]*(?:{words})[ \t]*:?[ \t]*$|\b(?:{words})[ \t]*:',
    )


class SectionDetector:
    """Flags the standard resume sections from headings or content signatures."""

    def __init__(self, skill_vocabulary: Optional[List[str]] = None):
        self.skill_matcher = KeywordExtractor(vocabulary=skill_vocabulary or TECH_SKILLS)
        self.compile_patterns()

    def compile_patterns(self):
        """Compile one heading regex per section."""
        self.heading_patterns = {
            section: heading_pattern(headings)
            for section, headings in SECTION_HEADINGS.items()
        }
        self.any_heading = heading_pattern(
            [h for headings in SECTION_HEADINGS.values() for h in headings]
        )

    def has_heading(self, text: str, section: str) -> bool:
        return self.heading_patterns[section].search(text) is not None

    def _has_contact_details(self, text: str) -> bool:
        return bool(EMAIL.search(text) or PHONE.search(text) or LINKEDIN.search(text))

    def _has_dated_roles(self, text: str) -> bool:
        return bool(YEAR.search(text) and ROLE_TITLE.search(text))

    def _has_skill_terms(self, text: str) -> bool:
        pattern = self.skill_matcher.vocabulary_pattern
        return pattern is not None and pattern.search(text) is not None

    def detect_sections(self, text: str) -> SectionFlags:
        """Evaluate each section independently: heading OR content signature."""
        text = text or ""
        flags = SectionFlags(
            contact=self.has_heading(text, 'contact') or self._has_contact_details(text),
            experience=self.has_heading(text, 'experience') or self._has_dated_roles(text),
            education=self.has_heading(text, 'education') or bool(DEGREE.search(text)),
            skills=self.has_heading(text, 'skills') or self._has_skill_terms(text),
            summary=self.has_heading(text, 'summary') or bool(SUMMARY_WORDS.search(text)),
        )
        logger.debug(f"Detected sections: {flags.model_dump()}")
        return flags

    def detect_format(self, text: str) -> FormatChecks:
        text = text or ""
        return FormatChecks(
            has_bullet_points=bool(BULLET.search(text)),
            has_tables=bool(TABLE.search(text)),
            has_headings=bool(self.any_heading.search(text)),
        )

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
import logging

from .constants import ScoringConstants
from .keywords import KeywordExtractor, find_terms, unique_terms
from .normalizer import build_document
from .readability import estimate
from .schemas import (
    AnalysisResult, Document, FormatChecks, FormatScore, Issue, KeywordMatch,
    Readability, RoleProfile, ScoreBreakdown, SectionFlags, Severity
)
from .sections import SectionDetector
from .vocabulary import SOFT_SKILLS, TECH_SKILLS

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = RoleProfile(id='general', title='General')

BOILERPLATE_RECOMMENDATIONS = [
    "Tailor your resume to each job description you apply for",
    "Start bullet points with action verbs like 'developed', 'implemented', 'optimized', 'led'",
    "Quantify your impact with numbers and metrics (e.g., 'improved performance by 30%')",
]


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Signals:
    """Everything the issue and strength rules look at."""
    document: Document
    target: List[str]
    match: KeywordMatch
    sections: SectionFlags
    format_checks: FormatChecks
    readability: Readability
    profile: RoleProfile
    keyword_pct: float

    @property
    def missing_pct(self) -> float:
        if not self.target:
            return 0.0
        return 100.0 * len(self.match.missing) / len(self.target)

    @property
    def length_in_range(self) -> bool:
        return ScoringConstants.MIN_WORD_COUNT <= self.document.word_count <= ScoringConstants.MAX_WORD_COUNT


@dataclass(frozen=True)
class IssueRule:
    check: Callable[[Signals], bool]
    severity: Severity
    title: str
    description: str
    fix: str
    priority: int

    def build(self, signals: Signals) -> Issue:
        return Issue(
            severity=self.severity,
            title=self.title,
            description=self.description.format(
                word_count=signals.document.word_count,
                missing_pct=signals.missing_pct,
                readability=signals.readability.score,
            ),
            fix=self.fix,
            priority=self.priority,
        )


# Ordered rule table; lower priority number means more severe
ISSUE_RULES = [
    IssueRule(
        check=lambda s: not s.sections.contact,
        severity=Severity.CRITICAL,
        title="Missing Contact Information",
        description="No email address, phone number or LinkedIn profile was found",
        fix="Add your email and phone number at the top of your resume",
        priority=1,
    ),
    IssueRule(
        check=lambda s: not s.sections.experience,
        severity=Severity.CRITICAL,
        title="Missing Experience Section",
        description="No work experience section or dated job titles were found",
        fix="Add a 'Work Experience' section listing your roles with dates",
        priority=1,
    ),
    IssueRule(
        check=lambda s: s.document.word_count < ScoringConstants.MIN_WORD_COUNT,
        severity=Severity.CRITICAL,
        title="Resume Too Short",
        description="Your resume has only {word_count} words",
        fix="Expand your resume to 200-800 words with details about your experience",
        priority=2,
    ),
    IssueRule(
        check=lambda s: s.missing_pct > ScoringConstants.MAX_MISSING_KEYWORD_PCT,
        severity=Severity.WARNING,
        title="Low Keyword Match",
        description="{missing_pct:.0f}% of the target keywords are missing",
        fix="Include relevant keywords from the job description where they apply to you",
        priority=3,
    ),
    IssueRule(
        check=lambda s: not s.sections.skills,
        severity=Severity.WARNING,
        title="Missing Skills Section",
        description="No skills section or recognizable technical skills were found",
        fix="Add a 'Skills' section listing your technical skills",
        priority=4,
    ),
    IssueRule(
        check=lambda s: s.readability.score < ScoringConstants.HARD_TO_READ_BELOW,
        severity=Severity.WARNING,
        title="Hard to Read",
        description="Readability score is {readability:.0f}, which is very difficult to read",
        fix="Use shorter sentences and simpler words",
        priority=5,
    ),
    IssueRule(
        check=lambda s: not s.sections.summary,
        severity=Severity.SUGGESTION,
        title="Missing Professional Summary",
        description="No summary or objective was found",
        fix="Add a short professional summary at the top of your resume",
        priority=6,
    ),
    IssueRule(
        check=lambda s: 'education' in s.profile.required_sections and not s.sections.education,
        severity=Severity.SUGGESTION,
        title="Missing Education Section",
        description="This role expects an education section",
        fix="Add an 'Education' section with your degrees and institutions",
        priority=7,
    ),
]


class ResumeAnalyzer:
    """Combines keyword, section and readability signals into an AnalysisResult."""

    def __init__(
        self,
        keyword_extractor: Optional[KeywordExtractor] = None,
        section_detector: Optional[SectionDetector] = None,
        issue_rules: Optional[List[IssueRule]] = None
    ):
        self.keyword_extractor = keyword_extractor or KeywordExtractor()
        self.section_detector = section_detector or SectionDetector()
        self.issue_rules = issue_rules if issue_rules is not None else ISSUE_RULES

    def target_keywords(
        self,
        profile: RoleProfile,
        job_description: Optional[str] = None,
        extra_keywords: Optional[Iterable[str]] = None
    ) -> List[str]:
        """Role keywords, then extra keywords, then job-description keywords, deduplicated."""
        terms = list(profile.keywords) + list(extra_keywords or [])
        if job_description and job_description.strip():
            terms += list(self.keyword_extractor.extract_target_keywords(job_description))
        return unique_terms(terms)

    def analyze(
        self,
        resume_text: str,
        job_description: Optional[str] = None,
        role_profile: Optional[RoleProfile] = None,
        extra_keywords: Optional[Iterable[str]] = None
    ) -> AnalysisResult:
        """Main analysis pipeline for resume evaluation."""
        try:
            document = build_document(resume_text)
        except Exception as e:
            logger.warning(f"Resume analysis rejected: {str(e)}")
            raise

        profile = role_profile or DEFAULT_PROFILE
        target = self.target_keywords(profile, job_description, extra_keywords)
        match = self.keyword_extractor.match_keywords(document.normalized_text, target)
        sections = self.section_detector.detect_sections(document.raw_text)
        format_checks = self.section_detector.detect_format(document.raw_text)
        readability = estimate(document.raw_text)

        keyword_pct = 100.0 * len(match.found) / len(target) if target else 0.0
        section_pct = self._section_completeness(sections, profile)
        overall = round_half_up(clamp(
            keyword_pct * profile.weights.keywords + section_pct * profile.weights.sections
        ))

        signals = Signals(
            document=document,
            target=target,
            match=match,
            sections=sections,
            format_checks=format_checks,
            readability=readability,
            profile=profile,
            keyword_pct=keyword_pct,
        )

        result = AnalysisResult(
            overall_score=overall,
            breakdown=ScoreBreakdown(
                keywords=round(keyword_pct, 1),
                sections=round(section_pct, 1),
                experience=100.0 if sections.experience else 0.0,
                education=100.0 if sections.education else 0.0,
                skills=self._skills_score(document.raw_text),
                format=self._format_score(document.word_count, readability.score),
            ),
            found_keywords=match.found,
            missing_keywords=match.missing,
            sections=sections,
            format_checks=format_checks,
            issues=self._issues(signals),
            strengths=self._strengths(signals),
            recommendations=self._recommendations(signals),
            readability=readability,
            word_count=document.word_count,
            role_id=profile.id,
        )

        logger.info(
            f"Analyzed resume for role '{profile.id}': score={result.overall_score}, "
            f"keywords {len(match.found)}/{len(target)}, issues={len(result.issues)}"
        )
        return result

    def _section_completeness(self, sections: SectionFlags, profile: RoleProfile) -> float:
        required = profile.required_sections
        if not required:
            return 100.0
        present = sum(1 for section in required if sections.present(section))
        return 100.0 * present / len(required)

    def _skills_score(self, text: str) -> float:
        tech = find_terms(text, TECH_SKILLS)
        soft = find_terms(text, SOFT_SKILLS)
        return float(min(
            100,
            len(tech) * ScoringConstants.TECH_SKILL_POINTS + len(soft) * ScoringConstants.SOFT_SKILL_POINTS
        ))

    def _format_score(self, word_count: int, readability: float) -> FormatScore:
        """Length and readability penalties, each a clamped percentage, never combined."""
        low, high = ScoringConstants.MIN_WORD_COUNT, ScoringConstants.MAX_WORD_COUNT
        if word_count < low:
            length_penalty = 100.0 * (low - word_count) / low
        elif word_count > high:
            length_penalty = 100.0 * (word_count - high) / high
        else:
            length_penalty = 0.0

        floor = ScoringConstants.HARD_TO_READ_BELOW
        readability_penalty = 100.0 * (floor - readability) / floor if readability < floor else 0.0

        return FormatScore(
            length_penalty=round(clamp(length_penalty), 1),
            readability_penalty=round(clamp(readability_penalty), 1),
        )

    def _issues(self, signals: Signals) -> List[Issue]:
        issues = [rule.build(signals) for rule in self.issue_rules if rule.check(signals)]
        return sorted(issues, key=lambda issue: issue.priority)

    def _strengths(self, signals: Signals) -> List[str]:
        strengths = []
        if signals.sections.contact:
            strengths.append("Contact information is easy to find")
        if signals.sections.experience:
            strengths.append("Work experience is clearly presented")
        if signals.sections.skills:
            strengths.append("Skills are listed for keyword scanners")
        if signals.target and signals.keyword_pct >= ScoringConstants.STRONG_KEYWORD_MATCH_PCT:
            strengths.append(f"Strong keyword match ({signals.keyword_pct:.0f}% of target keywords)")
        if signals.length_in_range:
            strengths.append(f"Good length ({signals.document.word_count} words)")
        if signals.readability.score >= ScoringConstants.READABLE_FROM:
            strengths.append(f"Readable writing style ({signals.readability.label})")
        if signals.format_checks.has_bullet_points:
            strengths.append("Uses bullet points for achievements")
        return strengths

    def _recommendations(self, signals: Signals) -> List[str]:
        recommendations = list(BOILERPLATE_RECOMMENDATIONS)
        if signals.match.missing:
            top_missing = ', '.join(signals.match.missing[:3])
            recommendations.append(f"Consider adding missing relevant keywords: {top_missing}")
        if not signals.format_checks.has_bullet_points:
            recommendations.append("Use bullet points to list achievements and responsibilities")
        if signals.format_checks.has_tables:
            recommendations.append("Replace tables with simple text format - ATS systems struggle with tables")
        return recommendations

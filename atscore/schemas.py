from enum import Enum
from typing import List, Optional, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import RankingPoints, ScoringConstants
from .exceptions import InvalidWeightsError

SECTION_NAMES = ('contact', 'experience', 'education', 'skills', 'summary')


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    normalized_text: str
    word_count: int = Field(..., ge=0)


class KeywordSet(BaseModel):
    """Deduplicated lowercase target terms; order is for display only."""
    terms: List[str] = Field(default_factory=list, max_length=ScoringConstants.MAX_TARGET_KEYWORDS)

    @field_validator('terms')
    @classmethod
    def _lowercase_unique(cls, terms: List[str]) -> List[str]:
        seen = []
        for term in terms:
            term = ' '.join(term.lower().split())
            if term and term not in seen:
                seen.append(term)
        return seen

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.lower() in self.terms


class KeywordMatch(BaseModel):
    found: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)


class SectionFlags(BaseModel):
    contact: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False
    summary: bool = False

    def present(self, section: str) -> bool:
        return bool(getattr(self, section))


class FormatChecks(BaseModel):
    has_bullet_points: bool = False
    has_tables: bool = False
    has_headings: bool = False


class Readability(BaseModel):
    score: float = Field(..., ge=0, le=100)
    label: str


class RoleWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: float = Field(0.4, ge=0, le=1)
    experience: float = Field(0.3, ge=0, le=1)
    education: float = Field(0.15, ge=0, le=1)
    skills: float = Field(0.15, ge=0, le=1)

    @property
    def total(self) -> float:
        return self.keywords + self.experience + self.education + self.skills

    @property
    def sections(self) -> float:
        """Weight applied to section completeness."""
        return self.experience + self.education + self.skills

    def validate_total(self, role_id: Optional[str] = None) -> 'RoleWeights':
        if abs(self.total - 1.0) > ScoringConstants.WEIGHT_EPSILON:
            raise InvalidWeightsError(self.model_dump(), self.total, role_id)
        return self


class RoleProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    keywords: List[str] = Field(default_factory=list)
    required_sections: List[str] = Field(
        default_factory=lambda: ['contact', 'experience', 'skills']
    )
    weights: RoleWeights = Field(default_factory=RoleWeights)

    @field_validator('required_sections')
    @classmethod
    def _known_sections(cls, sections: List[str]) -> List[str]:
        unknown = [s for s in sections if s not in SECTION_NAMES]
        if unknown:
            raise ValueError(f"Unknown sections: {unknown}")
        return list(dict.fromkeys(sections))

    @model_validator(mode='after')
    def _check_weights(self) -> 'RoleProfile':
        self.weights.validate_total(self.id)
        return self


class FormatScore(BaseModel):
    length_penalty: float = Field(0.0, ge=0, le=100)
    readability_penalty: float = Field(0.0, ge=0, le=100)


class ScoreBreakdown(BaseModel):
    keywords: float = Field(..., ge=0, le=100)
    sections: float = Field(..., ge=0, le=100)
    experience: float = Field(..., ge=0, le=100)
    education: float = Field(..., ge=0, le=100)
    skills: float = Field(..., ge=0, le=100)
    format: FormatScore


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Issue(BaseModel):
    severity: Severity
    title: str
    description: str
    fix: str
    priority: int = Field(..., ge=1)


class AnalysisResult(BaseModel):
    overall_score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    found_keywords: List[str]
    missing_keywords: List[str]
    sections: SectionFlags
    format_checks: FormatChecks
    issues: List[Issue]
    strengths: List[str]
    recommendations: List[str]
    readability: Readability
    word_count: int = Field(..., ge=0)
    role_id: str

    @field_validator('issues')
    @classmethod
    def _sorted_by_priority(cls, issues: List[Issue]) -> List[Issue]:
        return sorted(issues, key=lambda issue: issue.priority)


class SearchQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    keywords: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    role: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = Field(None, alias='jobType')
    page: int = Field(RankingPoints.DEFAULT_PAGE, ge=1)
    limit: int = Field(RankingPoints.DEFAULT_LIMIT, ge=1)

    @field_validator('skills', mode='before')
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class CandidateRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    role: Optional[str] = None
    custom_role: Optional[str] = Field(None, alias='customRole')
    preferred_locations: List[str] = Field(default_factory=list, alias='preferredLocations')
    job_preference: Optional[str] = Field(None, alias='jobPreference')

    @field_validator('skills', 'preferred_locations', mode='before')
    @classmethod
    def _none_as_empty(cls, value):
        # database rows carry null for unset lists
        return [] if value is None else value


class RankExplanation(BaseModel):
    keywords_matched: int = 0
    skills_matched: int = 0
    location_match: bool = False
    job_type_match: bool = False
    role_match: bool = False


class RankedResult(BaseModel):
    candidate: CandidateRecord
    score: int = Field(..., ge=0, le=100)
    explanation: RankExplanation


class SearchPage(BaseModel):
    results: List[RankedResult]
    total: int
    page: int
    limit: int


class AtsCheckRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(..., alias='resumeText')
    job_description: Optional[str] = Field(None, alias='jobDescription')
    target_role: Optional[str] = Field(None, alias='targetRole')
    required_skills: List[str] = Field(default_factory=list, alias='requiredSkills')

    @field_validator('required_skills', mode='before')
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

from .analyzer import ResumeAnalyzer
from .ats_check import AtsChecker, grade_for, summarize_history
from .exceptions import AtsScoreError, EmptyInputError, InvalidWeightsError
from .keywords import KeywordExtractor
from .logging_config import setup_logging
from .normalizer import normalize
from .ranker import CandidateRanker
from .readability import estimate
from .report_generator import ReportGenerator
from .roles import RoleRegistry
from .schemas import (
    AnalysisResult, CandidateRecord, Issue, RankedResult, RoleProfile, RoleWeights,
    SearchPage, SearchQuery, SectionFlags
)
from .sections import SectionDetector
from .settings import Settings

__all__ = [
    'ResumeAnalyzer',
    'AtsChecker',
    'grade_for',
    'summarize_history',
    'AtsScoreError',
    'EmptyInputError',
    'InvalidWeightsError',
    'KeywordExtractor',
    'normalize',
    'CandidateRanker',
    'estimate',
    'ReportGenerator',
    'RoleRegistry',
    'SectionDetector',
    'Settings',
    'setup_logging',
    'AnalysisResult',
    'CandidateRecord',
    'Issue',
    'RankedResult',
    'RoleProfile',
    'RoleWeights',
    'SearchPage',
    'SearchQuery',
    'SectionFlags'
]

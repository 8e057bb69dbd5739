"""Response shaping for the network ATS-check endpoint.

The endpoint owns transport, auth and persistence; this module turns a request
payload into the JSON body it returns.
"""
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from .analyzer import ResumeAnalyzer, round_half_up
from .constants import GradeBands, ScoringConstants
from .keywords import find_terms
from .roles import RoleRegistry
from .schemas import AtsCheckRequest
from .vocabulary import ATS_KEYWORDS, SOFT_SKILLS, TECH_SKILLS

logger = logging.getLogger(__name__)

RECOMMENDED_RANGE = f"{ScoringConstants.MIN_WORD_COUNT}-{ScoringConstants.MAX_WORD_COUNT} words"

GENERAL_TIPS = [
    {
        "category": "Keywords",
        "tip": "Use action verbs like 'developed', 'implemented', 'optimized', 'led'",
        "impact": "High"
    },
    {
        "category": "Skills",
        "tip": "Include both technical and soft skills relevant to your role",
        "impact": "High"
    },
    {
        "category": "Quantify",
        "tip": "Add numbers and metrics (e.g., 'improved performance by 30%')",
        "impact": "Medium"
    },
    {
        "category": "Format",
        "tip": "Use standard section headers: Experience, Education, Skills",
        "impact": "Medium"
    },
    {
        "category": "Length",
        "tip": f"Keep resume between {RECOMMENDED_RANGE} for optimal ATS parsing",
        "impact": "Medium"
    },
    {
        "category": "File Format",
        "tip": "Use PDF or DOCX format, avoid images and complex formatting",
        "impact": "High"
    }
]


def grade_for(score: float) -> str:
    for lower_bound, grade in GradeBands.BANDS:
        if score >= lower_bound:
            return grade
    return GradeBands.FLOOR_GRADE


def message_for(score: float) -> str:
    if score >= 70:
        return "Great! Your resume is well-optimized for ATS systems."
    if score >= 50:
        return "Good start! A few improvements could boost your ATS score."
    return "Your resume needs improvement to pass ATS filters effectively."


def summarize_history(scores: Sequence[int]) -> Optional[Dict[str, Any]]:
    """Summarize past ATS scores, newest first. Returns None for an empty history."""
    if not scores:
        return None

    if len(scores) < 2:
        trend = 'insufficient_data'
    elif scores[0] > scores[1]:
        trend = 'improving'
    elif scores[0] < scores[1]:
        trend = 'declining'
    else:
        trend = 'stable'

    return {
        "averageScore": round_half_up(sum(scores) / len(scores)),
        "bestScore": max(scores),
        "totalChecks": len(scores),
        "improvementTrend": trend
    }


class AtsChecker:
    def __init__(self, registry: RoleRegistry, analyzer: Optional[ResumeAnalyzer] = None):
        self.registry = registry
        self.analyzer = analyzer or ResumeAnalyzer()

    def check(self, request: Union[AtsCheckRequest, Dict[str, Any]]) -> Dict[str, Any]:
        """Run the engine for one ATS-check request and build the response body."""
        if not isinstance(request, AtsCheckRequest):
            request = AtsCheckRequest.model_validate(request)

        profile = self.registry.resolve(request.target_role)
        analysis = self.analyzer.analyze(
            request.resume_text,
            job_description=request.job_description,
            role_profile=profile,
            extra_keywords=request.required_skills,
        )

        technical = find_terms(request.resume_text, TECH_SKILLS)
        soft = find_terms(request.resume_text, SOFT_SKILLS)

        suggestions = list(analysis.recommendations)
        suggestions += [issue.fix for issue in analysis.issues if issue.fix not in suggestions]

        logger.info(f"ATS check for role '{profile.id}' scored {analysis.overall_score}")

        return {
            "score": analysis.overall_score,
            "grade": grade_for(analysis.overall_score),
            "breakdown": analysis.breakdown.model_dump(mode="json"),
            "skillsFound": {
                "technical": technical,
                "soft": soft,
                "total": len(technical) + len(soft)
            },
            "keywordsFound": find_terms(request.resume_text, ATS_KEYWORDS),
            "matchedRequirements": analysis.found_keywords,
            "missingRequirements": analysis.missing_keywords,
            "suggestions": suggestions,
            "stats": {
                "wordCount": analysis.word_count,
                "recommendedRange": RECOMMENDED_RANGE,
                "readability": analysis.readability.model_dump(mode="json")
            },
            "message": message_for(analysis.overall_score)
        }

    def tips(self, role: Optional[str] = None, profile_skills: Optional[List[str]] = None) -> Dict[str, Any]:
        """General ATS tips plus role-specific skills missing from a candidate profile."""
        profile = self.registry.resolve(role)
        owned = [skill.lower() for skill in profile_skills or []]
        suggested = list(profile.keywords)
        missing = [
            skill for skill in suggested
            if not any(skill.lower() in owned_skill for owned_skill in owned)
        ]

        if missing:
            message = f"Consider adding these {profile.title} skills if you have experience with them"
        else:
            message = f"Your profile has good coverage of {profile.title} skills"

        return {
            "generalTips": GENERAL_TIPS,
            "roleSpecific": {
                "role": profile.title,
                "suggestedSkills": suggested,
                "missingFromProfile": missing,
                "message": message
            },
            "atsKeywords": {
                "technical": TECH_SKILLS[:20],
                "soft": SOFT_SKILLS[:10],
                "action": ATS_KEYWORDS[:15]
            }
        }

import json

import pytest

from atscore.analyzer import BOILERPLATE_RECOMMENDATIONS, clamp, round_half_up
from atscore.exceptions import EmptyInputError, InvalidWeightsError
from atscore.schemas import RoleProfile, RoleWeights, Severity


def titles(result):
    return [issue.title for issue in result.issues]


class TestAnalyzeScenarios:
    def test_short_resume_against_target(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, extra_keywords=["React", "Node.js", "Python"])

        assert result.found_keywords == ['react', 'node.js']
        assert result.missing_keywords == ['python']
        assert result.sections.contact
        assert result.sections.experience
        assert result.format_checks.has_bullet_points
        # 66.7% keywords * 0.4 + 100% sections * 0.6
        assert result.overall_score == 87
        assert result.role_id == 'general'

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  "])
    def test_empty_resume_rejected(self, analyzer, text):
        with pytest.raises(EmptyInputError):
            analyzer.analyze(text)

    def test_fifty_word_resume_is_too_short(self, analyzer):
        resume = "Experience: Developer 2021. " + ' '.join(["worked"] * 47)
        result = analyzer.analyze(resume)

        assert result.word_count == 50
        too_short = [issue for issue in result.issues if issue.title == "Resume Too Short"]
        assert len(too_short) == 1
        assert too_short[0].severity == Severity.CRITICAL
        assert too_short[0].priority == 2
        assert result.breakdown.format.length_penalty == 75.0

    def test_full_resume_for_backend_role(self, analyzer, registry, full_resume):
        result = analyzer.analyze(full_resume, role_profile=registry.get('backend_developer'))

        # 6 of 8 role keywords found, every required section present
        assert result.found_keywords == ['python', 'java', 'postgresql', 'redis', 'docker', 'rest api']
        assert result.missing_keywords == ['node.js', 'microservices']
        assert result.overall_score == 90
        assert result.breakdown.format.length_penalty == 0.0
        assert "Missing Contact Information" not in titles(result)
        assert "Resume Too Short" not in titles(result)


class TestScoring:
    def test_empty_target_scores_sections_only(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume)
        assert result.found_keywords == [] and result.missing_keywords == []
        assert result.breakdown.keywords == 0.0
        assert result.overall_score == 60

    def test_job_description_keywords_added(self, analyzer, short_resume):
        result = analyzer.analyze(
            short_resume,
            job_description="We need a React developer with AWS and Docker experience",
        )
        assert 'react' in result.found_keywords
        assert {'aws', 'docker'} <= set(result.missing_keywords)

    def test_blank_job_description_is_ignored(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, job_description="   ")
        assert result.found_keywords == [] and result.missing_keywords == []

    def test_custom_weights(self, analyzer, short_resume):
        profile = RoleProfile(
            id='keywords_only',
            title='Keywords Only',
            keywords=['React', 'Python'],
            weights=RoleWeights(keywords=1.0, experience=0.0, education=0.0, skills=0.0),
        )
        result = analyzer.analyze(short_resume, role_profile=profile)
        assert result.overall_score == 50

    def test_invalid_weights_rejected(self):
        with pytest.raises(InvalidWeightsError) as exc_info:
            RoleProfile(
                id='broken',
                title='Broken',
                weights=RoleWeights(keywords=0.5, experience=0.5, education=0.5, skills=0.5),
            )
        assert exc_info.value.details['total'] == pytest.approx(2.0)
        assert exc_info.value.details['role_id'] == 'broken'

    @pytest.mark.parametrize("text,keywords", [
        ("hello", []),
        ("hello", ["python"]),
        ("Python Python Python", ["python"]),
        ("x " * 1000, ["a", "b", "c"]),
    ])
    def test_score_always_in_range(self, analyzer, text, keywords):
        result = analyzer.analyze(text, extra_keywords=keywords)
        assert 0 <= result.overall_score <= 100
        assert set(result.found_keywords) | set(result.missing_keywords) == set(keywords)
        assert not set(result.found_keywords) & set(result.missing_keywords)

    def test_skills_subscore(self, analyzer):
        result = analyzer.analyze("Python, Docker and AWS. Leadership and Communication.")
        assert result.breakdown.skills == 3 * 5 + 2 * 2

    def test_long_resume_length_penalty(self, analyzer):
        result = analyzer.analyze(' '.join(["word"] * 1200))
        assert result.breakdown.format.length_penalty == 50.0

    def test_rounding_and_clamp_helpers(self):
        assert round_half_up(86.5) == 87
        assert round_half_up(86.49) == 86
        assert clamp(120) == 100
        assert clamp(-5) == 0


class TestIssues:
    def test_issues_sorted_by_priority(self, analyzer):
        result = analyzer.analyze("hello world", extra_keywords=["python", "docker"])
        priorities = [issue.priority for issue in result.issues]
        assert priorities == sorted(priorities)
        assert titles(result)[:3] == [
            "Missing Contact Information",
            "Missing Experience Section",
            "Resume Too Short",
        ]

    def test_low_keyword_match_warning(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, extra_keywords=["Go Lang", "Rust", "Elixir"])
        issue = next(issue for issue in result.issues if issue.title == "Low Keyword Match")
        assert issue.severity == Severity.WARNING
        assert issue.priority == 3

    def test_no_keyword_warning_without_target(self, analyzer, short_resume):
        assert "Low Keyword Match" not in titles(analyzer.analyze(short_resume))

    def test_hard_to_read_warning(self, analyzer):
        result = analyzer.analyze(' '.join(["internationalization"] * 40))
        assert "Hard to Read" in titles(result)
        assert result.breakdown.format.readability_penalty == 100.0

    def test_readability_rule_uses_reported_score(self, analyzer):
        # raw Flesch 29.965, reported as 30.0
        result = analyzer.analyze(' '.join(["Banana banana."] * 8 + ["Cat sat."] * 7))
        assert result.readability.score == 30.0
        assert result.readability.label == "Difficult"
        assert "Hard to Read" not in titles(result)
        assert result.breakdown.format.readability_penalty == 0.0

    def test_education_suggestion_only_when_required(self, analyzer, short_resume):
        assert "Missing Education Section" not in titles(analyzer.analyze(short_resume))

        profile = RoleProfile(
            id='needs_degree',
            title='Needs Degree',
            required_sections=['contact', 'experience', 'education', 'skills'],
        )
        result = analyzer.analyze(short_resume, role_profile=profile)
        issue = next(issue for issue in result.issues if issue.title == "Missing Education Section")
        assert issue.severity == Severity.SUGGESTION
        assert issue.priority == 7
        # 3 of 4 required sections present
        assert result.breakdown.sections == 75.0

    def test_summary_suggestion(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume)
        issue = next(issue for issue in result.issues if issue.title == "Missing Professional Summary")
        assert issue.priority == 6


class TestStrengthsAndRecommendations:
    def test_strengths(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, extra_keywords=["React"])
        assert "Contact information is easy to find" in result.strengths
        assert any(s.startswith("Strong keyword match") for s in result.strengths)
        assert "Uses bullet points for achievements" in result.strengths

    def test_recommendations(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, extra_keywords=["Python", "Rust", "Scala", "Elixir"])
        assert result.recommendations[:3] == BOILERPLATE_RECOMMENDATIONS
        assert "Consider adding missing relevant keywords: python, rust, scala" in result.recommendations

    def test_no_keyword_recommendation_when_nothing_missing(self, analyzer, short_resume):
        result = analyzer.analyze(short_resume, extra_keywords=["React"])
        assert not any("missing relevant keywords" in r for r in result.recommendations)

    def test_result_is_json_serializable(self, analyzer, short_resume):
        payload = json.dumps(analyzer.analyze(short_resume).model_dump(mode="json"))
        assert '"severity": "critical"' in payload or '"severity": "suggestion"' in payload

import pytest

from atscore.sections import SectionDetector


@pytest.fixture
def detector():
    return SectionDetector()


class TestDetectSections:
    def test_short_resume(self, detector, short_resume):
        flags = detector.detect_sections(short_resume)
        assert flags.contact
        assert flags.experience
        assert flags.skills
        assert not flags.education
        assert not flags.summary

    def test_full_resume_has_every_section(self, detector, full_resume):
        flags = detector.detect_sections(full_resume)
        assert flags.model_dump() == {
            'contact': True,
            'experience': True,
            'education': True,
            'skills': True,
            'summary': True,
        }

    @pytest.mark.parametrize("text", [
        "Reach me: jane@example.com",
        "Call 555-123-4567 any time",
        "See linkedin.com/in/jane-doe",
        "CONTACT\nJane Doe",
        "Contact Information:\nJane Doe",
    ])
    def test_contact(self, detector, text):
        assert detector.detect_sections(text).contact

    def test_contact_absent(self, detector):
        assert not detector.detect_sections("Jane Doe, Springfield").contact

    def test_experience_needs_year_and_title(self, detector):
        assert detector.detect_sections("Senior Engineer at Acme, 2020").experience
        assert not detector.detect_sections("Senior Engineer at Acme").experience
        assert not detector.detect_sections("Graduated in 2020").experience

    @pytest.mark.parametrize("text", [
        "WORK EXPERIENCE\nAcme",
        "Professional Experience:",
        "Employment History\nAcme",
    ])
    def test_experience_headings(self, detector, text):
        assert detector.detect_sections(text).experience

    @pytest.mark.parametrize("text", [
        "B.Tech in Computer Science",
        "Master's degree in Statistics",
        "State University",
        "Education\nSelf taught",
    ])
    def test_education(self, detector, text):
        assert detector.detect_sections(text).education

    def test_skills_from_vocabulary(self, detector):
        assert detector.detect_sections("Proficient in Kubernetes").skills
        assert not detector.detect_sections("Proficient in knitting").skills

    def test_skills_heading(self, detector):
        assert detector.detect_sections("Technical Skills\nknitting, baking").skills

    @pytest.mark.parametrize("text", [
        "Career objective: ship great software",
        "PROFILE\nCalm under pressure",
        "A short summary of my career",
    ])
    def test_summary(self, detector, text):
        assert detector.detect_sections(text).summary

    def test_sections_are_independent(self, detector):
        flags = detector.detect_sections("jane@example.com")
        assert flags.contact
        assert not any([flags.experience, flags.education, flags.skills, flags.summary])

    def test_empty_text(self, detector):
        assert not any(detector.detect_sections("").model_dump().values())


class TestDetectFormat:
    def test_unicode_bullets_inline(self, detector, short_resume):
        assert detector.detect_format(short_resume).has_bullet_points

    def test_ascii_bullets_at_line_start(self, detector):
        assert detector.detect_format("Duties\n- wrote code\n- fixed bugs").has_bullet_points
        assert not detector.detect_format("well-known fast-paced team").has_bullet_points

    def test_tables(self, detector):
        assert detector.detect_format("| Skill | Years |").has_tables
        assert not detector.detect_format("plain text").has_tables

    def test_headings(self, detector):
        assert detector.detect_format("Education\nState University").has_headings
        assert not detector.detect_format("just some words").has_headings

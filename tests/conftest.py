import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atscore.analyzer import ResumeAnalyzer
from atscore.roles import RoleRegistry
from atscore.schemas import CandidateRecord


SHORT_RESUME = (
    "John Doe john@x.com (555) 123-4567. Experience: Software Engineer 2019-2023. "
    "• Built APIs. Skills: React, Node.js"
)

FULL_RESUME = """Jane Smith
jane.smith@example.com | +1 415-555-0134 | linkedin.com/in/jane-smith

Professional Summary
Backend developer with six years of experience building reliable services for online stores.

Work Experience
Senior Software Engineer, Acme Corp, 2020 - Present
• Led a team of four engineers to move the order system to Python and Django.
• Cut page load time by 40% by adding Redis caching and query tuning.
• Built REST API endpoints used by two mobile apps and three partner shops.
• Set up Docker images and Kubernetes deployments for every service we own.

Software Developer, Beta Labs, 2017 - 2020
• Developed a billing service in Java that handled ten thousand invoices a day.
• Wrote unit and load tests that caught bugs before each weekly release.
• Worked with product managers to plan features and estimate the work.
• Improved the build so new engineers could run the stack in one step.

Education
Bachelor of Science in Computer Science, State University, 2017

Skills
Python, Django, Java, PostgreSQL, Redis, Docker, Kubernetes, AWS, Git, Linux
Leadership, Communication, Agile, Scrum

Projects
Open source contributor to a small task queue library. Wrote docs and fixed bugs.
Mentor at a local coding club. I teach kids to build simple games each week.
I like to keep code simple, tested and easy to read. I write clear notes for the team.
We ship small changes often. We watch the metrics after each deploy and fix issues fast.
I enjoy hiking, cooking and reading on weekends with my family and friends.
"""


@pytest.fixture
def registry():
    return RoleRegistry.load_default()


@pytest.fixture
def analyzer():
    return ResumeAnalyzer()


@pytest.fixture
def short_resume():
    return SHORT_RESUME


@pytest.fixture
def full_resume():
    return FULL_RESUME


@pytest.fixture
def make_candidate():
    """Build candidate records with sensible empty defaults."""
    def _make(**fields):
        return CandidateRecord(**fields)
    return _make

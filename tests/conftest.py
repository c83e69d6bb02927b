from __future__ import annotations

from pathlib import Path

import pytest

from cvgen.dataset import ResumeDataset
from cvgen.models import Education, Experience, JobTitle, Profile, Project, RawResumeData


@pytest.fixture
def profile() -> Profile:
    return Profile(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        url="https://github.com/janedoe",
        location="Kelowna, BC",
        citizenship="Canadian",
    )


@pytest.fixture
def raw_data(profile: Profile) -> RawResumeData:
    """A fully populated set of records."""
    return RawResumeData(
        profile=profile,
        job_titles=[JobTitle(title="Engineer"), JobTitle(title="Manager")],
        education=[
            Education(school="UBC", degree="B.Sc. Computer Science", status="Graduated"),
            Education(school="Okanagan College", degree="Diploma", status="Completed"),
        ],
        experience=[
            Experience(
                role="Developer",
                company="Acme",
                location="Remote",
                date="2022 - 2024",
                summary="Built internal tools.",
                bullets=["Shipped the billing service", "Cut build times in half"],
            ),
            Experience(
                role="Intern",
                company="Initech",
                location="Vancouver",
                date="2021",
                summary="",
            ),
        ],
        projects=[
            Project(title="cvgen", description="Resume wizard", tech_stack=["Python", "LaTeX"]),
            Project(title="tracker", description="Habit tracker", tech_stack=["Go"]),
            Project(title="site", description="Personal site", tech_stack=[]),
        ],
    )


@pytest.fixture
def dataset(raw_data: RawResumeData) -> ResumeDataset:
    return ResumeDataset.from_raw(raw_data)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory holding one valid file per source."""
    (tmp_path / "profile.yaml").write_text(
        "name: Jane Doe\n"
        "email: jane@example.com\n"
        "phone: 555-0100\n"
        "url: https://github.com/janedoe\n"
        "location: Kelowna, BC\n"
        "citizenship: Canadian\n",
        encoding="utf-8",
    )
    (tmp_path / "jobtitles.yaml").write_text(
        "- title: Engineer\n- title: Manager\n",
        encoding="utf-8",
    )
    (tmp_path / "education.yaml").write_text(
        "- education:\n"
        "    - school: UBC\n"
        "      degree: B.Sc.\n"
        "      status: Graduated\n"
        "- education:\n"
        "    - school: Okanagan College\n"
        "      degree: Diploma\n"
        "      status: Completed\n",
        encoding="utf-8",
    )
    (tmp_path / "experience.yaml").write_text(
        "- role: Developer\n"
        "  company: Acme\n"
        "  location: Remote\n"
        "  date: 2022 - 2024\n"
        "  summary: Built internal tools.\n"
        "  bullets:\n"
        "    - Shipped the billing service\n",
        encoding="utf-8",
    )
    (tmp_path / "projects.yaml").write_text(
        "- projects:\n"
        "    - title: cvgen\n"
        "      description: Resume wizard\n"
        "      tech_stack: [Python, LaTeX]\n",
        encoding="utf-8",
    )
    return tmp_path

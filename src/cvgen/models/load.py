"""Containers produced by the data loader."""

from __future__ import annotations

from dataclasses import dataclass, field

from cvgen.models.resume import Education, Experience, JobTitle, Profile, Project


@dataclass(slots=True)
class LoadWarning:
    """A recoverable problem with one data source.

    Attributes:
        source: File name of the source that could not be used.
        message: Human-readable description of the problem.
    """

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


@dataclass(slots=True)
class RawResumeData:
    """Everything read from the data directory, before any user choices.

    Attributes:
        profile: Contact details, or ``None`` when ``profile.yaml`` was unusable.
        job_titles: Candidate job titles in file order.
        education: Education records, flattened from their wrappers.
        experience: Work-experience records.
        projects: Project records, flattened from their wrappers.
    """

    profile: Profile | None = None
    job_titles: list[JobTitle] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)

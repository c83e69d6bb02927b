"""Template-agnostic data contracts for resume generation.

These TypedDicts define the shape of the payload handed to every resume
template.  Templates depend ONLY on these contracts (not on the pydantic
models or the selection lists) so the wizard state can evolve
independently.  :func:`project` is the single place that turns a
:class:`~cvgen.dataset.ResumeDataset` into a payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from cvgen.dataset import ResumeDataset

__all__ = [
    "FilteredPayload",
    "PLACEHOLDER_JOB_TITLE",
    "PLACEHOLDER_PROFILE",
    "PayloadEducationEntry",
    "PayloadExperienceEntry",
    "PayloadProfile",
    "PayloadProjectEntry",
    "project",
]


class PayloadProfile(TypedDict):
    """Name and contact details shown in the resume header."""

    name: str
    email: str
    phone: str
    url: str
    location: str
    citizenship: str
    website: str


class PayloadEducationEntry(TypedDict):
    """A single education record."""

    school: str
    degree: str
    status: str


class PayloadExperienceEntry(TypedDict):
    """A single work-experience record."""

    role: str
    company: str
    location: str
    date: str
    summary: str
    bullets: list[str]


class PayloadProjectEntry(TypedDict):
    """A single project record."""

    title: str
    description: str
    tech_stack: list[str]


class FilteredPayload(TypedDict):
    """Top-level bundle passed to every template's ``build()`` method."""

    profile: PayloadProfile
    education: list[PayloadEducationEntry]
    experience: list[PayloadExperienceEntry]
    projects: list[PayloadProjectEntry]
    job_title: str


PLACEHOLDER_PROFILE: PayloadProfile = {
    "name": "Unknown",
    "email": "unknown@example.com",
    "phone": "N/A",
    "url": "N/A",
    "location": "N/A",
    "citizenship": "N/A",
    "website": "",
}

PLACEHOLDER_JOB_TITLE = "N/A"


def project(dataset: ResumeDataset) -> FilteredPayload:
    """Build the payload for *dataset*.

    Excluded items are dropped and the remaining ones keep their order.
    A missing profile or job title is replaced with a placeholder, so
    this never fails.  A fresh payload is returned on every call.
    """
    profile: PayloadProfile
    if dataset.profile is None:
        profile = {**PLACEHOLDER_PROFILE}
    else:
        profile = dataset.profile.model_dump()

    return {
        "profile": profile,
        "education": [e.model_dump() for e in dataset.education.included_values()],
        "experience": [e.model_dump() for e in dataset.experience.included_values()],
        "projects": [p.model_dump() for p in dataset.projects.included_values()],
        "job_title": (
            dataset.chosen_title if dataset.chosen_title is not None else PLACEHOLDER_JOB_TITLE
        ),
    }

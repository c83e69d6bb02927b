"""Pydantic models for the records read from the YAML data directory."""

from __future__ import annotations

from pydantic import BaseModel, Field

__all__ = [
    "Education",
    "Experience",
    "JobTitle",
    "Profile",
    "Project",
]


class Profile(BaseModel):
    """Contact details shown in the resume header."""

    name: str
    email: str
    phone: str
    url: str
    location: str
    citizenship: str
    website: str = ""


class JobTitle(BaseModel):
    """A role the resume can be targeted at."""

    title: str


class Education(BaseModel):
    """A single education record."""

    school: str
    degree: str
    status: str


class Experience(BaseModel):
    """A single work-experience record."""

    role: str
    company: str
    location: str
    date: str
    summary: str
    bullets: list[str] = Field(default_factory=list)


class Project(BaseModel):
    """A single project record."""

    title: str
    description: str
    tech_stack: list[str] = Field(default_factory=list)

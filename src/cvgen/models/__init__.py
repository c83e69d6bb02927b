"""Data models and type definitions"""

from cvgen.models.load import LoadWarning, RawResumeData
from cvgen.models.resume import Education, Experience, JobTitle, Profile, Project

__all__ = [
    "Education",
    "Experience",
    "JobTitle",
    "LoadWarning",
    "Profile",
    "Project",
    "RawResumeData",
]

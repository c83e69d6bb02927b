"""Load resume records from a directory of YAML files.

Every source is optional.  A missing, unreadable or malformed file
leaves its collection empty (or the profile absent) and is reported as a
:class:`~cvgen.models.LoadWarning`; loading itself never raises.

Expected files::

    profile.yaml      mapping with the Profile fields
    jobtitles.yaml    list of {title: ...}
    education.yaml    list of {education: [...]} wrappers
    experience.yaml   list of Experience records
    projects.yaml     list of {projects: [...]} wrappers
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from cvgen.models import (
    Education,
    Experience,
    JobTitle,
    LoadWarning,
    Profile,
    Project,
    RawResumeData,
)

logger = logging.getLogger(__name__)

__all__ = [
    "EDUCATION_FILE",
    "EXPERIENCE_FILE",
    "JOB_TITLES_FILE",
    "PROFILE_FILE",
    "PROJECTS_FILE",
    "load_resume_data",
]

PROFILE_FILE = "profile.yaml"
JOB_TITLES_FILE = "jobtitles.yaml"
EDUCATION_FILE = "education.yaml"
EXPERIENCE_FILE = "experience.yaml"
PROJECTS_FILE = "projects.yaml"

M = TypeVar("M", bound=BaseModel)


class _SourceError(Exception):
    """Raised internally when one source cannot be used."""


class _TextLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as written.

    Only nulls and merge keys are resolved implicitly, so dates, booleans
    (``Yes``, ``on``) and numbers with leading zeros reach the models as text.
    """


_KEPT_RESOLVERS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}
_TextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_RESOLVERS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_resume_data(data_dir: Path) -> tuple[RawResumeData, list[LoadWarning]]:
    """Read every known source under *data_dir*.

    Args:
        data_dir: Directory holding the YAML files.

    Returns:
        The loaded data and a list of warnings, one per unusable source.
    """
    data = RawResumeData()
    warnings: list[LoadWarning] = []

    def attempt(filename: str, parse: Callable[[Any], Any]) -> Any:
        try:
            raw = _read_yaml(data_dir / filename)
            return parse(raw) if raw is not None else None
        except _SourceError as exc:
            warning = LoadWarning(filename, str(exc))
            logger.warning("Could not load %s", warning)
            warnings.append(warning)
            return None

    data.profile = attempt(PROFILE_FILE, lambda raw: _parse_model(Profile, raw))
    data.job_titles = attempt(JOB_TITLES_FILE, lambda raw: _parse_list(JobTitle, raw)) or []
    data.education = (
        attempt(EDUCATION_FILE, lambda raw: _parse_wrapped(Education, raw, "education")) or []
    )
    data.experience = attempt(EXPERIENCE_FILE, lambda raw: _parse_list(Experience, raw)) or []
    data.projects = (
        attempt(PROJECTS_FILE, lambda raw: _parse_wrapped(Project, raw, "projects")) or []
    )

    logger.info(
        "Loaded %d job titles, %d education, %d experience, %d projects from %s",
        len(data.job_titles),
        len(data.education),
        len(data.experience),
        len(data.projects),
        data_dir,
    )
    return data, warnings


# -----------------------------------------------------------------------
# Internal helpers


def _read_yaml(path: Path) -> Any:
    """Return the parsed document at *path*, or ``None`` for an empty file."""
    if not path.is_file():
        raise _SourceError(f"File not found at {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _SourceError(f"Could not read {path}: {exc}") from exc
    if not text.strip():
        return None
    try:
        return yaml.load(text, Loader=_TextLoader)
    except yaml.YAMLError as exc:
        raise _SourceError(f"YAML parsing error: {exc}") from exc


def _parse_model(model: type[M], raw: Any) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise _SourceError(f"Invalid {model.__name__}: {exc}") from exc


def _parse_list(model: type[M], raw: Any) -> list[M]:
    if not isinstance(raw, list):
        raise _SourceError(f"Expected a list of {model.__name__} entries")
    return [_parse_model(model, item) for item in raw]


def _parse_wrapped(model: type[M], raw: Any, key: str) -> list[M]:
    """Flatten ``[{key: [...]}, {key: [...]}]`` into one list."""
    if not isinstance(raw, list):
        raise _SourceError(f"Expected a list of '{key}' groups")
    result: list[M] = []
    for group in raw:
        if not isinstance(group, dict) or not isinstance(group.get(key), list):
            raise _SourceError(f"Each group must contain a '{key}' list")
        result.extend(_parse_model(model, item) for item in group[key])
    return result

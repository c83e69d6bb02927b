"""Wizard screens and the key-driven transition function.

The wizard is a value, :class:`WizardState`, holding the active screen
and the :class:`~cvgen.dataset.ResumeDataset`.  :func:`dispatch` applies
one key to a state and returns the next state.  Cursor moves, toggles
and the job-title choice mutate the dataset's selection lists in place;
the returned state carries the same dataset.

Screens are frozen dataclasses.  ``Success`` and ``Error`` carry the
output path and the failure message respectively; the other screens have
no payload.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from cvgen.keys import WizardKey
from cvgen.services.resume_data import project

if TYPE_CHECKING:
    from cvgen.dataset import ResumeDataset
    from cvgen.selection import InclusionList
    from cvgen.services.resume_data import FilteredPayload

logger = logging.getLogger(__name__)

__all__ = [
    "EducationSelection",
    "Error",
    "ExperienceSelection",
    "Exiting",
    "Generating",
    "JobTitleSelection",
    "ProfileView",
    "ProjectsSelection",
    "Renderer",
    "Success",
    "Welcome",
    "WizardScreen",
    "WizardState",
    "dispatch",
    "generate",
    "starts_generation",
]

Renderer = Callable[["FilteredPayload"], "str | os.PathLike[str]"]


# ---------------------------------------------------------------------------
# Screens


@dataclass(frozen=True, slots=True)
class Welcome:
    """Intro screen shown at startup."""


@dataclass(frozen=True, slots=True)
class JobTitleSelection:
    """Single-choice list of target roles."""


@dataclass(frozen=True, slots=True)
class ProfileView:
    """Read-only view of the loaded contact details."""


@dataclass(frozen=True, slots=True)
class EducationSelection:
    """Toggle which education records are exported."""


@dataclass(frozen=True, slots=True)
class ExperienceSelection:
    """Toggle which work-experience records are exported."""


@dataclass(frozen=True, slots=True)
class ProjectsSelection:
    """Toggle which projects are exported; confirming generates the PDF."""


@dataclass(frozen=True, slots=True)
class Generating:
    """Shown while the document compiler runs."""


@dataclass(frozen=True, slots=True)
class Success:
    """The resume was written to *path*."""

    path: str


@dataclass(frozen=True, slots=True)
class Error:
    """Document generation failed with *message*."""

    message: str


@dataclass(frozen=True, slots=True)
class Exiting:
    """Terminal screen; the event loop stops."""


WizardScreen = Union[
    Welcome,
    JobTitleSelection,
    ProfileView,
    EducationSelection,
    ExperienceSelection,
    ProjectsSelection,
    Generating,
    Success,
    Error,
    Exiting,
]


@dataclass(frozen=True, slots=True)
class WizardState:
    """Active screen plus the dataset it operates on."""

    screen: WizardScreen
    dataset: ResumeDataset

    @property
    def finished(self) -> bool:
        return isinstance(self.screen, Exiting)


# ---------------------------------------------------------------------------
# Outcome handling


def generate(dataset: ResumeDataset, render: Renderer) -> Success | Error:
    """Project *dataset*, hand it to *render* and map the outcome to a screen.

    Any exception from the renderer becomes an :class:`Error` screen; the
    wizard never retries.
    """
    payload = project(dataset)
    try:
        path = render(payload)
    except Exception as exc:
        logger.exception("Resume generation failed")
        return Error(str(exc) or type(exc).__name__)
    logger.info("Resume written to %s", path)
    return Success(os.fspath(path))


# ---------------------------------------------------------------------------
# Per-screen handlers


def _navigate(items: InclusionList, key: WizardKey) -> None:
    if key is WizardKey.DOWN:
        items.next()
    elif key is WizardKey.UP:
        items.previous()
    elif key is WizardKey.TOGGLE:
        items.toggle_current()


def _welcome(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.CONFIRM:
        # The job-title step is skipped when there is nothing to choose from.
        if state.dataset.job_titles.is_empty():
            return ProfileView()
        state.dataset.job_titles.select_initial()
        return JobTitleSelection()
    return state.screen


def _job_titles(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    job_titles = state.dataset.job_titles
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.DOWN:
        job_titles.next()
    elif key is WizardKey.UP:
        job_titles.previous()
    elif key is WizardKey.CONFIRM and state.dataset.choose_job_title():
        return ProfileView()
    return state.screen


def _profile(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.CONFIRM:
        state.dataset.education.select_initial()
        return EducationSelection()
    return state.screen


def _education(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.CONFIRM:
        state.dataset.experience.select_initial()
        return ExperienceSelection()
    # BACK is a no-op on the first toggle screen.
    _navigate(state.dataset.education, key)
    return state.screen


def _experience(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.CONFIRM:
        state.dataset.projects.select_initial()
        return ProjectsSelection()
    if key is WizardKey.BACK:
        return EducationSelection()
    _navigate(state.dataset.experience, key)
    return state.screen


def _projects(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key is WizardKey.QUIT:
        return Exiting()
    if key is WizardKey.CONFIRM:
        return generate(state.dataset, render)
    if key is WizardKey.BACK:
        return ExperienceSelection()
    _navigate(state.dataset.projects, key)
    return state.screen


def _outcome(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    if key in (WizardKey.QUIT, WizardKey.CONFIRM, WizardKey.CANCEL):
        return Exiting()
    return state.screen


def _ignore(state: WizardState, key: WizardKey, render: Renderer) -> WizardScreen:
    return state.screen


_Handler = Callable[[WizardState, WizardKey, Renderer], WizardScreen]

_HANDLERS: dict[type, _Handler] = {
    Welcome: _welcome,
    JobTitleSelection: _job_titles,
    ProfileView: _profile,
    EducationSelection: _education,
    ExperienceSelection: _experience,
    ProjectsSelection: _projects,
    Generating: _ignore,
    Success: _outcome,
    Error: _outcome,
    Exiting: _ignore,
}


def dispatch(state: WizardState, key: WizardKey, render: Renderer) -> WizardState:
    """Apply *key* to *state* and return the resulting state.

    Args:
        state: Current screen and dataset.
        key: Abstract key pressed by the operator.
        render: Called with the projected payload when the projects
            screen is confirmed; returns the output path or raises.

    Returns:
        The next state.  Unbound keys return a state equal to *state*.
    """
    handler = _HANDLERS[type(state.screen)]
    return WizardState(handler(state, key, render), state.dataset)


def starts_generation(state: WizardState, key: WizardKey) -> bool:
    """Return ``True`` if dispatching *key* will invoke the renderer."""
    return isinstance(state.screen, ProjectsSelection) and key is WizardKey.CONFIRM

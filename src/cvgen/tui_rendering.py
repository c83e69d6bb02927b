from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from cvgen.dataset import ResumeDataset
from cvgen.models import LoadWarning
from cvgen.selection import SelectableItem, SelectionList
from cvgen.wizard import (
    EducationSelection,
    Error,
    ExperienceSelection,
    Generating,
    JobTitleSelection,
    ProfileView,
    ProjectsSelection,
    Success,
    Welcome,
    WizardScreen,
    WizardState,
)

T = TypeVar("T")

_MD_SPECIAL = re.compile(r"([\\`*_\[\]<>#|])")

CURSOR_MARKER = "**>>**"
INCLUDED_MARKER = "`[x]`"
EXCLUDED_MARKER = "`[ ]`"


def render_screen(state: WizardState, warnings: Sequence[LoadWarning] = ()) -> str:
    """Render the markdown body for the active screen."""
    screen = state.screen
    dataset = state.dataset

    if isinstance(screen, Welcome):
        return render_welcome(warnings)
    if isinstance(screen, JobTitleSelection):
        return render_job_titles(dataset)
    if isinstance(screen, ProfileView):
        return render_profile(dataset)
    if isinstance(screen, EducationSelection):
        return _render_toggle_list(
            "Step 2: Select Education",
            dataset.education,
            lambda e: f"{e.degree} - {e.school} ({e.status})",
            "No education data found",
        )
    if isinstance(screen, ExperienceSelection):
        return _render_toggle_list(
            "Step 3: Select Experience",
            dataset.experience,
            lambda e: f"{e.role} @ {e.company} ({e.date})",
            "No experience data found",
        )
    if isinstance(screen, ProjectsSelection):
        return _render_toggle_list(
            "Step 4: Select Projects",
            dataset.projects,
            lambda p: f"{p.title} | {', '.join(p.tech_stack)}" if p.tech_stack else p.title,
            "No projects found",
        )
    if isinstance(screen, Generating):
        return "# Generating PDF...\n\nCompiling your resume, please wait."
    if isinstance(screen, Success):
        return render_success(screen.path)
    if isinstance(screen, Error):
        return render_error(screen.message)
    return ""


def render_hints(screen: WizardScreen) -> str:
    """Key hints for the status bar of *screen*."""
    if isinstance(screen, Welcome):
        return "<Enter> Start builder   <q> Quit"
    if isinstance(screen, JobTitleSelection):
        return "<j/k> Navigate   <Enter> Select & continue   <q> Quit"
    if isinstance(screen, ProfileView):
        return "<Enter> Continue   <q> Quit"
    if isinstance(screen, EducationSelection):
        return "<j/k> Navigate   <Space> Toggle   <Enter> Continue   <q> Quit"
    if isinstance(screen, ExperienceSelection):
        return "<j/k> Navigate   <Space> Toggle   <Enter> Continue   <Backspace> Back   <q> Quit"
    if isinstance(screen, ProjectsSelection):
        return (
            "<j/k> Navigate   <Space> Toggle   <Enter> Generate PDF   <Backspace> Back   <q> Quit"
        )
    if isinstance(screen, Generating):
        return "Generating..."
    if isinstance(screen, (Success, Error)):
        return "<Enter> Done   <Esc> Close   <q> Quit"
    return ""


def render_welcome(warnings: Sequence[LoadWarning] = ()) -> str:
    parts: list[str] = ["# CV GEN", ""]
    parts.append("Welcome, **User**")
    parts.append("")
    parts.append("This tool will help you generate targeted resumes from your YAML data.")

    if warnings:
        parts.append("")
        parts.append("## Load warnings")
        parts.extend(f"- {escape_markdown(str(w))}" for w in warnings)

    return "\n".join(parts)


def render_job_titles(dataset: ResumeDataset) -> str:
    parts: list[str] = ["# Step 1: Select Job Title", ""]
    job_titles = dataset.job_titles
    if job_titles.is_empty():
        parts.append("(No job titles found)")
        return "\n".join(parts)

    # The highlighted row is the one that will be chosen, so it gets the tick.
    for index, item in enumerate(job_titles):
        selected = job_titles.cursor == index
        marker = INCLUDED_MARKER if selected else EXCLUDED_MARKER
        prefix = f"{CURSOR_MARKER} " if selected else ""
        parts.append(f"- {prefix}{marker} {escape_markdown(item.value.title)}")

    return "\n".join(parts)


def render_profile(dataset: ResumeDataset) -> str:
    parts: list[str] = ["# Profile", ""]

    if dataset.chosen_title is not None:
        parts.append(f"**Target role:** {escape_markdown(dataset.chosen_title)}")
        parts.append("")

    profile = dataset.profile
    if profile is None:
        parts.append("(No profile loaded; placeholder contact details will be used)")
        return "\n".join(parts)

    fields = [
        ("Name", profile.name),
        ("Email", profile.email),
        ("Phone", profile.phone),
        ("URL", profile.url),
        ("Website", profile.website),
        ("Location", profile.location),
        ("Citizenship", profile.citizenship),
    ]
    for label, value in fields:
        shown = escape_markdown(value) if value else "-"
        parts.append(f"- **{label}:** {shown}")

    return "\n".join(parts)


def render_success(path: str) -> str:
    return "\n".join(
        [
            "# PDF Generated Successfully!",
            "",
            f"**Output:** `{path}`",
        ]
    )


def render_error(message: str) -> str:
    return "\n".join(
        [
            "# Error Generating PDF",
            "",
            "```",
            message,
            "```",
            "",
            "Press <Enter> or <q> to exit.",
        ]
    )


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that would otherwise be read as markdown."""
    return _MD_SPECIAL.sub(r"\\\1", text)


def _render_toggle_list(
    title: str,
    items: SelectionList[T],
    describe: Callable[[T], str],
    empty_text: str,
) -> str:
    parts: list[str] = [f"# {title}", ""]
    if items.is_empty():
        parts.append(f"({empty_text})")
        return "\n".join(parts)

    for index, item in enumerate(items):
        parts.append(_toggle_row(item, describe, highlighted=items.cursor == index))

    included = sum(1 for item in items if item.included)
    parts.append("")
    parts.append(f"_{included} of {len(items)} included_")
    return "\n".join(parts)


def _toggle_row(
    item: SelectableItem[T],
    describe: Callable[[T], str],
    *,
    highlighted: bool,
) -> str:
    marker = INCLUDED_MARKER if item.included else EXCLUDED_MARKER
    prefix = f"{CURSOR_MARKER} " if highlighted else ""
    return f"- {prefix}{marker} {escape_markdown(describe(item.value))}"

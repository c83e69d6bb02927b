"""Modern resume template.

Helvetica sans-serif, no decorative rules on section headers, compact
10pt body.  Experience comes first, and the page closes with a
technology summary collected from the included projects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from cvgen.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from cvgen.services.resume_data import (
        FilteredPayload,
        PayloadEducationEntry,
        PayloadExperienceEntry,
        PayloadProfile,
        PayloadProjectEntry,
    )

__all__ = ["ModernResumeTemplate"]

_STYLE = r"""
\renewcommand{\familydefault}{\sfdefault}
\setlength{\parindent}{0pt}
\titleformat{\section}{\large\bfseries}{}{0em}{}
\titlespacing{\section}{0pt}{8pt}{4pt}
\newcommand{\modernEntry}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
"""

_ENTRIES_START = r"\begin{itemize}[leftmargin=0.15in, label={}]"
_BULLETS_START = r"\begin{itemize}[leftmargin=0.15in]"
_END = r"\end{itemize}"


class ModernResumeTemplate(ResumeTemplate):
    """Modern sans-serif resume with compact layout."""

    font_size = "10pt"
    packages = (Package("helvet"),)
    preamble = _STYLE

    @property
    def name(self) -> str:  # pragma: no cover
        return "Modern Resume"

    def build(self, data: FilteredPayload) -> Document:
        doc = self.new_document()
        doc.append(NoEscape(self._heading(data["profile"], data["job_title"])))

        if data["experience"]:
            self.append_section(doc, "Experience", self._experience(data["experience"]))
        if data["projects"]:
            self.append_section(doc, "Projects", self._projects(data["projects"]))
        if data["education"]:
            self.append_section(doc, "Education", self._education(data["education"]))

        technologies = self._collect_technologies(data["projects"])
        if technologies:
            joined = self.escape_latex(", ".join(technologies))
            body = [_ENTRIES_START, rf"\item\small{{{joined}}}", _END]
            self.append_section(doc, "Technologies", body)

        return doc

    @staticmethod
    def _collect_technologies(entries: list[PayloadProjectEntry]) -> list[str]:
        """Return every distinct tech-stack item, first occurrence first."""
        seen: dict[str, None] = {}
        for entry in entries:
            for tech in entry["tech_stack"]:
                seen.setdefault(tech.strip(), None)
        return [tech for tech in seen if tech]

    def _heading(self, profile: PayloadProfile, job_title: str) -> str:
        esc = self.escape_latex
        heading = rf"\begin{{center}}{{\Large\bfseries {esc(profile['name'])}}}"
        if self._has_value(job_title):
            heading += rf" \\ {{\normalsize {esc(job_title)}}}"
        heading += r" \\ \vspace{1pt}"
        parts = self.contact_parts(profile)
        if parts:
            heading += r"\small " + r" \textbar\ ".join(parts)
        return heading + r"\end{center}"

    def _experience(self, entries: list[PayloadExperienceEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_ENTRIES_START]
        for entry in entries:
            lines.append(
                rf"\modernEntry{{{esc(entry['company'])}}}{{{esc(entry['location'])}}}"
                rf"{{{esc(entry['role'])}}}{{{esc(entry['date'])}}}"
            )
            summary = entry["summary"].strip()
            if summary:
                lines.append(rf"\small{{{esc(summary)}}}")
            if entry["bullets"]:
                lines.append(_BULLETS_START)
                lines.extend(rf"\item\small{{{esc(bullet)}}}" for bullet in entry["bullets"])
                lines.append(_END)
        lines.append(_END)
        return lines

    def _projects(self, entries: list[PayloadProjectEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_BULLETS_START]
        for entry in entries:
            item = rf"\textbf{{{esc(entry['title'])}}}"
            description = entry["description"].strip()
            if description:
                item += f": {esc(description)}"
            lines.append(rf"\item\small{{{item}}}")
        lines.append(_END)
        return lines

    def _education(self, entries: list[PayloadEducationEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_ENTRIES_START]
        for entry in entries:
            lines.append(
                rf"\modernEntry{{{esc(entry['degree'])}}}{{{esc(entry['status'])}}}"
                rf"{{{esc(entry['school'])}}}{{}}"
            )
        lines.append(_END)
        return lines

"""Jake Gutierrez resume template.

Reproduces the popular ATS-friendly single-page resume layout from
``github.com/jakegut/resume`` using PyLaTeX.  The targeted job title is
printed under the name.
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

__all__ = ["JakeResumeTemplate"]

_HEADING_RULE = r"""
\titleformat{\section}{
  \vspace{-4pt}\scshape\raggedright\large
}{}{0em}{}[\color{black}\titlerule \vspace{-5pt}]
"""

_MACROS = r"""
\newcommand{\resumeItem}[1]{\item\small{{#1 \vspace{-2pt}}}}
\newcommand{\resumeSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\resumeProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\renewcommand\labelitemii{$\vcenter{\hbox{\tiny$\bullet$}}$}
\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}
"""

_LIST_START = r"\resumeSubHeadingListStart"
_LIST_END = r"\resumeSubHeadingListEnd"


class JakeResumeTemplate(ResumeTemplate):
    """Jake Gutierrez's ATS-friendly single-page resume."""

    packages = (
        Package("marvosym"),
        Package("color", options=NoEscape("usenames,dvipsnames")),
        Package("verbatim"),
        Package("babel", options=NoEscape("english")),
    )
    preamble = _HEADING_RULE + _MACROS

    @property
    def name(self) -> str:  # pragma: no cover
        return "Jake's Resume"

    def build(self, data: FilteredPayload) -> Document:
        doc = self.new_document()
        doc.append(NoEscape(self._heading(data["profile"], data["job_title"])))

        if data["education"]:
            self.append_section(doc, "Education", self._education(data["education"]))
        if data["experience"]:
            self.append_section(doc, "Experience", self._experience(data["experience"]))
        if data["projects"]:
            self.append_section(doc, "Projects", self._projects(data["projects"]))

        return doc

    def _heading(self, profile: PayloadProfile, job_title: str) -> str:
        esc = self.escape_latex
        lines = [
            r"\begin{center}",
            rf"\textbf{{\Huge \scshape {esc(profile['name'])}}} \\ \vspace{{1pt}}",
        ]
        if self._has_value(job_title):
            lines.append(rf"\large {esc(job_title)} \\ \vspace{{1pt}}")
        parts = self.contact_parts(profile, underline=True)
        if parts:
            lines.append(r"\small " + r" $|$ ".join(parts))
        lines.append(r"\end{center}")
        return "\n".join(lines)

    def _education(self, entries: list[PayloadEducationEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_LIST_START]
        for entry in entries:
            school, degree, status = (esc(entry[k]) for k in ("school", "degree", "status"))
            lines.append(rf"\resumeSubheading{{{school}}}{{}}{{{degree}}}{{{status}}}")
        lines.append(_LIST_END)
        return lines

    def _experience(self, entries: list[PayloadExperienceEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_LIST_START]
        for entry in entries:
            lines.append(
                rf"\resumeSubheading{{{esc(entry['role'])}}}{{{esc(entry['date'])}}}"
                rf"{{{esc(entry['company'])}}}{{{esc(entry['location'])}}}"
            )
            summary = entry["summary"].strip()
            items = [rf"\textit{{{esc(summary)}}}"] if summary else []
            items.extend(esc(bullet) for bullet in entry["bullets"])
            lines.extend(self._item_list(items))
        lines.append(_LIST_END)
        return lines

    def _projects(self, entries: list[PayloadProjectEntry]) -> list[str]:
        esc = self.escape_latex
        lines = [_LIST_START]
        for entry in entries:
            heading = rf"\textbf{{{esc(entry['title'])}}}"
            if entry["tech_stack"]:
                heading += rf" $|$ \emph{{{esc(', '.join(entry['tech_stack']))}}}"
            lines.append(rf"\resumeProjectHeading{{{heading}}}{{}}")
            description = entry["description"].strip()
            lines.extend(self._item_list([esc(description)] if description else []))
        lines.append(_LIST_END)
        return lines

    @staticmethod
    def _item_list(items: list[str]) -> list[str]:
        if not items:
            return []
        return [
            r"\resumeItemListStart",
            *(rf"\resumeItem{{{item}}}" for item in items),
            r"\resumeItemListEnd",
        ]

"""Abstract base class for pluggable resume templates.

A template describes its look through class attributes (font size, extra
packages, preamble and list macros) and implements :meth:`build`.  The
shared page geometry and the document scaffolding live here.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from pylatex import Document, NoEscape, Package

if TYPE_CHECKING:
    from cvgen.services.resume_data import FilteredPayload, PayloadProfile

__all__ = ["ResumeTemplate"]

# Characters that have special meaning in LaTeX.
_LATEX_REPLACEMENTS = {
    "\\": r"\textbackslash{}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    **{char: "\\" + char for char in "&%$#_{}"},
}
_LATEX_SPECIAL = re.compile("|".join(re.escape(char) for char in _LATEX_REPLACEMENTS))
_PROTOCOL = re.compile(r"^https?://")
# Characters that break an \href target when it sits inside another macro.
_URL_SPECIAL = re.compile(r"([%#])")

# Values the projection uses for unknown contact fields.
_EMPTY_MARKERS = frozenset({"", "N/A"})

_BASE_PACKAGES = ("latexsym", "titlesec", "enumitem", "fancyhdr", "tabularx")

# One letter page with half-inch margins, no header or footer.
_PAGE_LAYOUT = r"""
\pagestyle{fancy}
\fancyhf{}
\fancyfoot{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}
\urlstyle{same}
\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}
\pdfgentounicode=1
"""


class ResumeTemplate(ABC):
    """Interface that every resume template must implement."""

    font_size: ClassVar[str] = "11pt"
    packages: ClassVar[tuple[Package, ...]] = ()
    preamble: ClassVar[str] = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name."""

    @abstractmethod
    def build(self, data: FilteredPayload) -> Document:
        """Construct a PyLaTeX ``Document`` from *data*."""

    # ------------------------------------------------------------------
    # Document scaffolding
    # ------------------------------------------------------------------

    def new_document(self) -> Document:
        """Return an empty letter-size document with this template's preamble."""
        doc = Document(
            documentclass="article",
            document_options=["letterpaper", self.font_size],
            page_numbers=False,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages.append(Package("fullpage", options=NoEscape("empty")))
        doc.packages.append(Package("hyperref", options=NoEscape("hidelinks")))
        doc.packages.append(Package("fontenc", options=NoEscape("T1")))
        for name in _BASE_PACKAGES:
            doc.packages.append(Package(name))
        for package in self.packages:
            doc.packages.append(package)
        doc.preamble.append(NoEscape(_PAGE_LAYOUT))
        doc.preamble.append(NoEscape(self.preamble))
        return doc

    @staticmethod
    def append_section(doc: Document, title: str, body: Iterable[str]) -> None:
        """Append ``\\section{title}`` followed by the raw LaTeX *body* lines."""
        doc.append(NoEscape("\n".join([rf"\section{{{title}}}", *body])))

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape LaTeX special characters in *text*.

        Handles: ``& % $ # _ { } ~ ^ \``
        """
        # Single pass, so replacements are never escaped again.
        return _LATEX_SPECIAL.sub(lambda match: _LATEX_REPLACEMENTS[match.group()], text)

    @staticmethod
    def _strip_protocol(url: str) -> str:
        """Drop a leading ``http://`` or ``https://`` for display."""
        return _PROTOCOL.sub("", url)

    @staticmethod
    def _has_value(value: str | None) -> bool:
        return value is not None and value.strip() not in _EMPTY_MARKERS

    def contact_parts(self, profile: PayloadProfile, *, underline: bool = False) -> list[str]:
        """Return the escaped LaTeX fragments for the header contact line.

        Placeholder values (``N/A`` or blank) are skipped.
        """
        esc = self.escape_latex

        def link(target: str, label: str) -> str:
            shown = rf"\underline{{{esc(label)}}}" if underline else esc(label)
            target = _URL_SPECIAL.sub(r"\\\1", target)
            return rf"\href{{{target}}}{{{shown}}}"

        parts: list[str] = []
        phone = profile.get("phone")
        if self._has_value(phone):
            parts.append(esc(phone))
        email = profile.get("email")
        if self._has_value(email):
            parts.append(link(f"mailto:{email}", email))
        for key in ("url", "website"):
            url = profile.get(key)
            if self._has_value(url):
                parts.append(link(url, self._strip_protocol(url)))
        for key in ("location", "citizenship"):
            value = profile.get(key)
            if self._has_value(value):
                parts.append(esc(value))
        return parts

"""Resume generation service.

Takes a projected :class:`~cvgen.services.resume_data.FilteredPayload`
and renders it with a pluggable LaTeX template.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pylatex.errors import CompilerError

from cvgen.templates import DEFAULT_TEMPLATE, get_template

if TYPE_CHECKING:
    from pylatex import Document

    from cvgen.services.resume_data import FilteredPayload

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_COMPILER",
    "LatexRenderer",
    "OUTPUT_STEM",
    "RenderError",
    "generate_resume_files",
    "generate_resume_pdf",
    "generate_resume_tex",
]

DEFAULT_COMPILER = "pdflatex"
OUTPUT_STEM = "resume"


class RenderError(RuntimeError):
    """Raised when a resume cannot be turned into a document."""


def _build_document(payload: FilteredPayload, template_name: str) -> Document:
    try:
        template = get_template(template_name)
    except ValueError as exc:
        raise RenderError(str(exc)) from exc
    return template.build(payload)


# -----------------------------------------------------------------------
# Public API


def generate_resume_tex(
    payload: FilteredPayload,
    template_name: str = DEFAULT_TEMPLATE,
) -> str:
    """Generate the LaTeX source for a resume.

    Args:
        payload: Projected resume data.
        template_name: Registered template identifier.

    Returns:
        The full ``.tex`` source as a string.

    Raises:
        RenderError: If the template is unknown.
    """
    return _build_document(payload, template_name).dumps()


def generate_resume_pdf(
    payload: FilteredPayload,
    output_path: Path,
    template_name: str = DEFAULT_TEMPLATE,
    *,
    compiler: str = DEFAULT_COMPILER,
) -> Path:
    """Generate a PDF resume via LaTeX compilation.

    Requires *compiler* (``pdflatex`` or ``latexmk``) to be installed
    on the system.  The ``.tex`` source is kept next to the PDF.

    Args:
        payload: Projected resume data.
        output_path: Desired output file path **without** extension.
        template_name: Registered template identifier.
        compiler: LaTeX compiler to invoke.

    Returns:
        The ``Path`` of the generated ``.pdf``.

    Raises:
        RenderError: If the template is unknown, the compiler is missing
            or fails, or the output cannot be written.
    """
    doc = _build_document(payload, template_name)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Compiling %s.pdf with %s", output_path, compiler)
        # PyLaTeX appends .pdf/.tex automatically
        doc.generate_pdf(
            str(output_path),
            clean_tex=False,
            compiler=compiler,
        )
    except CompilerError as exc:
        raise RenderError(f"LaTeX compiler {compiler!r} is not available: {exc}") from exc
    except subprocess.CalledProcessError as exc:
        raise RenderError(
            f"LaTeX compilation failed with exit code {exc.returncode}"
        ) from exc
    except OSError as exc:
        raise RenderError(f"Could not write resume to {output_path}: {exc}") from exc

    return Path(f"{output_path}.pdf")


def generate_resume_files(
    payload: FilteredPayload,
    output_dir: Path,
    template_name: str = DEFAULT_TEMPLATE,
    *,
    compiler: str = DEFAULT_COMPILER,
) -> dict[str, Path]:
    """Generate both ``.tex`` and ``.pdf`` files.

    Args:
        payload: Projected resume data.
        output_dir: Directory to write files into.
        template_name: Registered template identifier.
        compiler: LaTeX compiler to invoke.

    Returns:
        ``{"tex": Path, "pdf": Path}``.
    """
    stem = Path(output_dir) / OUTPUT_STEM
    pdf_path = generate_resume_pdf(payload, stem, template_name, compiler=compiler)
    return {
        "tex": Path(f"{stem}.tex"),
        "pdf": pdf_path,
    }


@dataclass(frozen=True, slots=True)
class LatexRenderer:
    """Renderer used by the wizard: payload in, PDF path out.

    Attributes:
        output_dir: Directory that receives ``resume.tex``/``resume.pdf``.
        template_name: Registered template identifier.
        compiler: LaTeX compiler to invoke.
    """

    output_dir: Path
    template_name: str = DEFAULT_TEMPLATE
    compiler: str = DEFAULT_COMPILER

    def __call__(self, payload: FilteredPayload) -> Path:
        files = generate_resume_files(
            payload,
            self.output_dir,
            self.template_name,
            compiler=self.compiler,
        )
        return files["pdf"]

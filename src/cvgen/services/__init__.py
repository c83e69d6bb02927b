"""Services"""

from cvgen.services.loader import load_resume_data
from cvgen.services.resume_data import FilteredPayload, project
from cvgen.services.resume_generator import (
    LatexRenderer,
    RenderError,
    generate_resume_files,
    generate_resume_pdf,
    generate_resume_tex,
)

__all__ = [
    "FilteredPayload",
    "LatexRenderer",
    "RenderError",
    "generate_resume_files",
    "generate_resume_pdf",
    "generate_resume_tex",
    "load_resume_data",
    "project",
]

"""Runtime settings resolved from the environment.

A local ``.env`` file is read first, so any of these can be set there:

- ``CVGEN_DATA_DIR``: directory holding the YAML sources (``./data``).
- ``CVGEN_OUTPUT_DIR``: where ``resume.tex``/``resume.pdf`` are written
  (``<data dir>/output``).
- ``CVGEN_TEMPLATE``: registered template name (``jake``).
- ``CVGEN_LATEX_COMPILER``: LaTeX compiler executable (``pdflatex``).
- ``CVGEN_LOG_LEVEL``: logging level name (``WARNING``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from cvgen.services.resume_generator import DEFAULT_COMPILER
from cvgen.templates import DEFAULT_TEMPLATE

__all__ = ["Settings", "load_settings"]

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one run."""

    data_dir: Path
    output_dir: Path
    template: str = DEFAULT_TEMPLATE
    compiler: str = DEFAULT_COMPILER
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(*, dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from environment variables.

    Args:
        dotenv: Read a ``.env`` file from the working directory first.
            Existing environment variables are never overridden.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    data_dir = Path(os.getenv("CVGEN_DATA_DIR") or DEFAULT_DATA_DIR).expanduser()

    env_output = os.getenv("CVGEN_OUTPUT_DIR")
    output_dir = Path(env_output).expanduser() if env_output else data_dir / "output"

    return Settings(
        data_dir=data_dir,
        output_dir=output_dir,
        template=os.getenv("CVGEN_TEMPLATE") or DEFAULT_TEMPLATE,
        compiler=os.getenv("CVGEN_LATEX_COMPILER") or DEFAULT_COMPILER,
        log_level=(os.getenv("CVGEN_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from cvgen.config import Settings, load_settings
from cvgen.dataset import ResumeDataset
from cvgen.services import LatexRenderer, load_resume_data
from cvgen.templates import list_templates
from cvgen.wizard import Error, Success

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvgen",
        description="Build a targeted resume PDF from YAML records.",
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding the YAML sources")
    parser.add_argument("--output-dir", type=Path, help="Directory for resume.tex/resume.pdf")
    parser.add_argument("--template", help="Resume template to render with")
    parser.add_argument("--compiler", help="LaTeX compiler executable (pdflatex, latexmk)")
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="Print the available templates and exit",
    )
    return parser


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command-line overrides on top of environment settings.

    An explicit ``--data-dir`` also moves the default output directory
    unless ``--output-dir`` or ``CVGEN_OUTPUT_DIR`` pins it.
    """
    changes: dict[str, object] = {}
    if args.data_dir is not None:
        changes["data_dir"] = args.data_dir
        if args.output_dir is None and settings.output_dir == settings.data_dir / "output":
            changes["output_dir"] = args.data_dir / "output"
    if args.output_dir is not None:
        changes["output_dir"] = args.output_dir
    if args.template:
        changes["template"] = args.template
    if args.compiler:
        changes["compiler"] = args.compiler
    return replace(settings, **changes)


def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Load the data directory and run the wizard.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args, load_settings())
    configure_logging(settings.log_level)

    templates = list_templates()
    if args.list_templates:
        for name in templates:
            print(name)
        return 0

    if settings.template not in templates:
        print(
            f"Unknown template {settings.template!r}. "
            f"Available: {', '.join(templates)}",
            file=sys.stderr,
        )
        return 1

    logger.info("Loading resume data from %s", settings.data_dir)
    raw, warnings = load_resume_data(settings.data_dir)
    dataset = ResumeDataset.from_raw(raw)

    renderer = LatexRenderer(
        output_dir=settings.output_dir,
        template_name=settings.template,
        compiler=settings.compiler,
    )

    # Imported here so --help and --list-templates never pay for textual.
    from cvgen.tui import ResumeWizardTUI

    app = ResumeWizardTUI(dataset, renderer, warnings)
    app.run()

    # Mirror the outcome on the terminal once the TUI has closed.
    outcome = app.outcome
    if isinstance(outcome, Success):
        print(f"Resume written to {outcome.path}")
    elif isinstance(outcome, Error):
        print(f"Resume generation failed: {outcome.message}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting.", file=sys.stderr)
        return 130
    except Exception as exc:
        logger.exception("Unexpected error")
        print(f"\nUnexpected error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

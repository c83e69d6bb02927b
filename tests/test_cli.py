"""Tests for the command-line entry point."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cvgen import cli
from cvgen.config import Settings
from cvgen.services import LatexRenderer
from cvgen.wizard import Error, Success


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("CVGEN_DATA_DIR", "CVGEN_OUTPUT_DIR", "CVGEN_TEMPLATE", "CVGEN_LATEX_COMPILER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_app():
    """Replace the Textual app with a mock that records its arguments."""
    with patch("cvgen.tui.ResumeWizardTUI") as app_cls:
        app_cls.return_value.outcome = None
        yield app_cls


def _settings(**overrides) -> Settings:
    return replace(Settings(data_dir=Path("data"), output_dir=Path("data/output")), **overrides)


class TestResolveSettings:
    def test_no_flags_keeps_environment(self):
        args = cli.build_parser().parse_args([])
        settings = _settings(template="modern")
        assert cli.resolve_settings(args, settings) == settings

    def test_data_dir_moves_default_output(self):
        args = cli.build_parser().parse_args(["--data-dir", "/srv/cv"])
        settings = cli.resolve_settings(args, _settings())
        assert settings.data_dir == Path("/srv/cv")
        assert settings.output_dir == Path("/srv/cv/output")

    def test_data_dir_keeps_pinned_output(self):
        args = cli.build_parser().parse_args(["--data-dir", "/srv/cv"])
        settings = cli.resolve_settings(args, _settings(output_dir=Path("/tmp/out")))
        assert settings.output_dir == Path("/tmp/out")

    def test_all_flags(self):
        args = cli.build_parser().parse_args(
            ["--output-dir", "out", "--template", "modern", "--compiler", "latexmk"]
        )
        settings = cli.resolve_settings(args, _settings())
        assert settings.output_dir == Path("out")
        assert settings.template == "modern"
        assert settings.compiler == "latexmk"

    def test_parser_defaults(self):
        args = cli.build_parser().parse_args([])
        assert isinstance(args, argparse.Namespace)
        assert args.list_templates is False


class TestRunCli:
    def test_list_templates(self, capsys, fake_app):
        assert cli.main(["--list-templates"]) == 0
        assert capsys.readouterr().out.split() == ["jake", "modern"]
        fake_app.assert_not_called()

    def test_unknown_template(self, capsys, fake_app):
        assert cli.main(["--template", "fancy"]) == 1
        assert "Unknown template 'fancy'" in capsys.readouterr().err
        fake_app.assert_not_called()

    def test_runs_wizard_with_loaded_data(self, data_dir, fake_app):
        assert cli.main(["--data-dir", str(data_dir), "--template", "modern"]) == 0

        dataset, renderer, warnings = fake_app.call_args.args
        assert [item.value.title for item in dataset.job_titles] == ["Engineer", "Manager"]
        assert renderer == LatexRenderer(
            output_dir=data_dir / "output", template_name="modern", compiler="pdflatex"
        )
        assert warnings == []
        fake_app.return_value.run.assert_called_once()

    def test_missing_data_is_passed_as_warnings(self, tmp_path, fake_app):
        assert cli.main(["--data-dir", str(tmp_path / "missing")]) == 0

        _, _, warnings = fake_app.call_args.args
        assert len(warnings) == 5

    def test_success_outcome_is_printed(self, data_dir, capsys, fake_app):
        fake_app.return_value.outcome = Success("out/resume.pdf")

        assert cli.main(["--data-dir", str(data_dir)]) == 0
        assert "Resume written to out/resume.pdf" in capsys.readouterr().out

    def test_error_outcome_exits_nonzero(self, data_dir, capsys, fake_app):
        fake_app.return_value.outcome = Error("pdflatex not found")

        assert cli.main(["--data-dir", str(data_dir)]) == 1
        assert "pdflatex not found" in capsys.readouterr().err


class TestMain:
    def test_keyboard_interrupt(self, capsys):
        with patch.object(cli, "run_cli", side_effect=KeyboardInterrupt):
            assert cli.main([]) == 130
        assert "Interrupted" in capsys.readouterr().err

    def test_unexpected_error(self, capsys):
        with patch.object(cli, "run_cli", side_effect=RuntimeError("boom")):
            assert cli.main([]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_package_entry_point_delegates(self):
        import cvgen

        with patch("cvgen.cli.main", MagicMock(return_value=0)) as cli_main:
            assert cvgen.main() == 0
        cli_main.assert_called_once_with()

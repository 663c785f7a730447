"""Tests for CLI argument parsing and top-level error reporting."""

import logging
from pathlib import Path

import pytest

import helpdoc.cli as cli_module
from helpdoc.errors import ModuleNotFoundHelpError
from helpdoc.models import ModuleHelp
from helpdoc.service import GenerationResult


def write_metadata(path: Path, module_help: ModuleHelp) -> Path:
    path.write_text(module_help.model_dump_json(by_alias=True), encoding="utf-8")
    return path


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli_module.main(["--help"])
    assert exc_info.value.code == 0
    assert "--module" in capsys.readouterr().out


def test_missing_required_arguments_exit_with_usage(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli_module.main(["--module", "Sample"])
    assert exc_info.value.code == 2
    assert "--output" in capsys.readouterr().err


def test_generates_document_end_to_end(
    tmp_path: Path,
    assets_dir: Path,
    sample_help: ModuleHelp,
    capsys: pytest.CaptureFixture[str],
) -> None:
    metadata = write_metadata(tmp_path / "sample.json", sample_help)
    output = tmp_path / "Sample.html"

    code = cli_module.main(
        [
            "--module",
            "Sample",
            "--output",
            str(output),
            "--metadata",
            str(metadata),
            "--assets",
            str(assets_dir),
        ]
    )

    assert code == 0
    assert output.exists()
    assert f"Wrote help for Sample (1 commands) to {output.resolve()}" in capsys.readouterr().out


def test_relative_paths_resolve_against_working_directory(
    tmp_path: Path,
    assets_dir: Path,
    sample_help: ModuleHelp,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_metadata(assets_dir / "sample.json", sample_help)
    monkeypatch.chdir(assets_dir)

    code = cli_module.main(
        ["--module", "Sample", "--output", "out/Sample.html", "--metadata", "sample.json"]
    )

    assert code == 0
    assert (assets_dir / "out" / "Sample.html").exists()


def test_missing_assets_print_one_warning_each_and_write_nothing(
    tmp_path: Path,
    sample_help: ModuleHelp,
    capsys: pytest.CaptureFixture[str],
) -> None:
    empty_assets = tmp_path / "assets"
    empty_assets.mkdir()
    metadata = write_metadata(tmp_path / "sample.json", sample_help)
    output = tmp_path / "Sample.html"

    code = cli_module.main(
        [
            "--module",
            "Sample",
            "--output",
            str(output),
            "--metadata",
            str(metadata),
            "--assets",
            str(empty_assets),
        ]
    )

    assert code == 1
    assert not output.exists()
    err = capsys.readouterr().err
    assert "WARNING: Missing presentation asset: helpdoc.js" in err
    assert "WARNING: Missing presentation asset: bootstrap.min.css" in err
    assert "WARNING: Missing presentation assets: bootstrap.min.css" in err


def test_helpdoc_error_is_reported_as_single_warning(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fake_generate(*_args: object, **_kwargs: object) -> GenerationResult:
        raise ModuleNotFoundHelpError("Nope", "no such module")

    monkeypatch.setattr(cli_module, "generate_help_document", fake_generate)

    code = cli_module.main(["--module", "Nope", "--output", str(tmp_path / "x.html")])

    assert code == 1
    err = capsys.readouterr().err
    assert err.strip() == "WARNING: Module 'Nope' not found: no such module"


def test_unexpected_error_is_caught(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fake_generate(*_args: object, **_kwargs: object) -> GenerationResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "generate_help_document", fake_generate)

    code = cli_module.main(["--module", "Sample", "--output", str(tmp_path / "x.html")])

    assert code == 1
    assert "WARNING: Unexpected: boom" in capsys.readouterr().err


def test_invalid_output_path_is_reported_as_single_warning(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = cli_module.main(["--module", "Sample", "--output", "bad\0path"])

    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("WARNING: --output path is invalid")
    assert len(err.strip().splitlines()) == 1


def test_verbose_enables_debug_logging() -> None:
    app_logger = logging.getLogger("helpdoc")
    cli_module.setup_logging(True)
    assert app_logger.level == logging.DEBUG
    assert len(app_logger.handlers) == 1
    cli_module.setup_logging(False)
    assert app_logger.level == logging.WARNING
    assert len(app_logger.handlers) == 1

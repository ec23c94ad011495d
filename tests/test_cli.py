from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

import texsolve
from texsolve.adapters.compiler import explain_compilation_error
from texsolve.api.service import SolutionService
from texsolve.core.exceptions import CompilationError
from texsolve.core.prompts import subject_prompt
from texsolve.core.templates import DOCUMENT_CLASS
from texsolve.ui.cli import app


SCENARIO = "```latex\n# Problem\nSolve **x+1=2**\n```"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def raw_file(tmp_path: Path) -> Path:
    path = tmp_path / "answer.txt"
    path.write_text(SCENARIO, encoding="utf-8")
    return path


def _stub_compile(monkeypatch: pytest.MonkeyPatch, result: bytes | Exception) -> list[str]:
    sources: list[str] = []

    class _Compiler:
        def compile(self, source: str) -> bytes:
            sources.append(source)
            if isinstance(result, Exception):
                raise result
            return result

    monkeypatch.setattr(SolutionService, "compiler", property(lambda self: _Compiler()))
    return sources


def test_version_flag(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == texsolve.get_version()


def test_build_tex_writes_document(runner: CliRunner, raw_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    result = runner.invoke(
        app,
        ["build", str(raw_file), "--subject", "mathematics", "--format", "tex", "-o", str(out_dir)],
    )

    assert result.exit_code == 0, result.output
    written = sorted(out_dir.glob("*_Problem.tex"))
    assert len(written) == 1
    content = written[0].read_text(encoding="utf-8")
    assert content.startswith(DOCUMENT_CLASS)
    assert "\\usepackage{amsmath, amssymb, amsthm}" in content
    assert str(written[0]) in result.stdout


def test_build_reads_stdin(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["build", "-", "--format", "tex", "-o", str(tmp_path)],
        input="## Stdin heading\nbody",
    )

    assert result.exit_code == 0, result.output
    assert len(list(tmp_path.glob("*_Stdin_heading.tex"))) == 1


def test_build_pdf_uses_compiler(
    runner: CliRunner, raw_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    sources = _stub_compile(monkeypatch, b"%PDF-1.7")

    result = runner.invoke(app, ["build", str(raw_file), "-o", str(tmp_path)])

    assert result.exit_code == 0, result.output
    written = list(tmp_path.glob("*_Problem.pdf"))
    assert len(written) == 1
    assert written[0].read_bytes() == b"%PDF-1.7"
    assert len(sources) == 1
    assert sources[0].startswith(DOCUMENT_CLASS)


def test_build_reports_compilation_failure(
    runner: CliRunner, raw_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log = "! Undefined control sequence."
    error = CompilationError("failed", log=log, hint=explain_compilation_error(log))
    _stub_compile(monkeypatch, error)

    result = runner.invoke(app, ["build", str(raw_file), "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "syntax error" in result.output
    assert not list(tmp_path.glob("*.pdf"))


def test_build_missing_input(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["build", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_build_invalid_config(runner: CliRunner, raw_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "bad.yml"
    config.write_text("unknown: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["build", str(raw_file), "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_title_command(runner: CliRunner, raw_file: Path) -> None:
    result = runner.invoke(app, ["title", str(raw_file)])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Problem"


def test_compile_command(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    sources = _stub_compile(monkeypatch, b"%PDF")
    tex = tmp_path / "notes.tex"
    tex.write_text("\\documentclass{article}\\begin{document}x\\end{document}", encoding="utf-8")

    result = runner.invoke(app, ["compile", str(tex), "-o", str(tmp_path / "out")])

    assert result.exit_code == 0, result.output
    assert sources == [tex.read_text(encoding="utf-8")]
    assert len(list((tmp_path / "out").glob("*_notes.pdf"))) == 1


def test_compile_rejects_non_tex(runner: CliRunner, tmp_path: Path) -> None:
    other = tmp_path / "notes.md"
    other.write_text("# hi", encoding="utf-8")

    result = runner.invoke(app, ["compile", str(other)])

    assert result.exit_code == 1
    assert ".tex" in result.output


def test_compile_rejects_empty_file(runner: CliRunner, tmp_path: Path) -> None:
    tex = tmp_path / "empty.tex"
    tex.write_text("  \n", encoding="utf-8")

    result = runner.invoke(app, ["compile", str(tex)])

    assert result.exit_code == 1
    assert "empty" in result.output


def test_subjects_command_lists_profiles(runner: CliRunner) -> None:
    result = runner.invoke(app, ["subjects"])

    assert result.exit_code == 0, result.output
    for name in ("general", "mathematics", "chemistry", "mhchem", "circuitikz"):
        assert name in result.stdout


def test_prompt_command(runner: CliRunner) -> None:
    result = runner.invoke(app, ["prompt", "--subject", "physics"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == subject_prompt("physics").strip()


def test_verbose_flag_attaches_rich_handler(runner: CliRunner, raw_file: Path) -> None:
    import logging

    from texsolve.ui.cli.state import CLIState, configure_logging

    result = runner.invoke(app, ["-vv", "title", str(raw_file)])

    assert result.exit_code == 0, result.output
    package_logger = logging.getLogger("texsolve")
    handlers = [h for h in package_logger.handlers if getattr(h, "_texsolve_cli", False)]
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG

    configure_logging(CLIState())
    assert not [h for h in package_logger.handlers if getattr(h, "_texsolve_cli", False)]


def test_build_warns_on_unknown_subject(
    runner: CliRunner, raw_file: Path, tmp_path: Path
) -> None:
    result = runner.invoke(
        app,
        ["build", str(raw_file), "--subject", "astrology", "--format", "tex", "-o", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Unknown subject 'astrology', using 'general'." in result.output
    written = list(tmp_path.glob("*_Problem.tex"))
    assert len(written) == 1
    assert "amsthm" not in written[0].read_text(encoding="utf-8")


def test_known_subject_is_not_reported(runner: CliRunner) -> None:
    result = runner.invoke(app, ["prompt", "--subject", " Physics "])

    assert result.exit_code == 0, result.output
    assert "Unknown subject" not in result.output


def test_build_writes_to_working_directory_by_default(
    runner: CliRunner, raw_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["build", str(raw_file), "--format", "tex"])

    assert result.exit_code == 0, result.output
    assert len(list(tmp_path.glob("*_Problem.tex"))) == 1


def test_very_verbose_failure_lists_causes(
    runner: CliRunner, raw_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from texsolve.core.exceptions import CompilerUnavailableError
    from texsolve.ui.cli.state import CLIState, configure_logging

    failure = CompilerUnavailableError("service unreachable")
    failure.__cause__ = ConnectionError("connection refused")
    _stub_compile(monkeypatch, failure)

    result = runner.invoke(app, ["-vv", "build", str(raw_file), "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "service unreachable" in result.output
    assert "caused by:" in result.output
    assert "connection refused" in result.output

    configure_logging(CLIState())

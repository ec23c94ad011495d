"""Implementation of the ``texsolve build`` command."""

from __future__ import annotations

import typer

from texsolve.api.service import SolutionService
from texsolve.core.exceptions import CompilationError, TexsolveError

from .._options import (
    CompilerUrlOption,
    ConfigOption,
    FormatOption,
    OutputDirOption,
    RawInputArgument,
    SubjectOption,
    TimeoutOption,
)
from ..state import emit_error, emit_info, get_cli_state
from ..utils import choose_subject, output_directory, read_raw_input, resolve_config


def report_failure(exc: TexsolveError) -> None:
    """Print a service failure and abort the command."""
    if isinstance(exc, CompilationError) and exc.hint is not None:
        emit_error(exc.hint.format(), exception=exc)
    else:
        emit_error(str(exc), exception=exc)
    raise typer.Exit(code=1) from exc


def build(
    input_source: RawInputArgument,
    subject: SubjectOption = None,
    output_format: FormatOption = None,
    output_dir: OutputDirOption = None,
    compiler_url: CompilerUrlOption = None,
    timeout: TimeoutOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Turn generated solution text into a LaTeX source or a compiled PDF."""
    config = resolve_config(
        config_path,
        compiler_url=compiler_url,
        timeout=timeout,
        output_format=output_format,
        output_dir=output_dir,
    )
    raw = read_raw_input(input_source)
    service = SolutionService(config)

    try:
        artifact = service.render(raw, choose_subject(subject))
    except TexsolveError as exc:
        if get_cli_state().show_tracebacks:
            raise
        report_failure(exc)

    target = artifact.write(output_directory(config))
    if artifact.solution is not None:
        emit_info(
            f"Built '{artifact.solution.title}' with the "
            f"{artifact.solution.subject.value} profile."
        )
    typer.echo(str(target))


__all__ = ["build", "report_failure"]

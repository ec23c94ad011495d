"""Implementation of the ``texsolve compile`` command."""

from __future__ import annotations

import typer

from texsolve.api.service import SolutionService
from texsolve.core.exceptions import TexsolveError

from .._options import (
    CompilerUrlOption,
    ConfigOption,
    OutputDirOption,
    TexFileArgument,
    TimeoutOption,
)
from ..state import emit_error, get_cli_state
from ..utils import output_directory, resolve_config
from .build import report_failure


def compile_file(
    tex_file: TexFileArgument,
    output_dir: OutputDirOption = None,
    compiler_url: CompilerUrlOption = None,
    timeout: TimeoutOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Send an existing LaTeX file to the compiling service unchanged."""
    if tex_file.suffix.lower() != ".tex":
        emit_error(f"Only .tex files can be compiled (got '{tex_file.name}').")
        raise typer.Exit(code=1)

    try:
        source = tex_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        emit_error(f"Unable to read '{tex_file}'.", exception=exc)
        raise typer.Exit(code=1) from exc

    if not source.strip():
        emit_error(f"'{tex_file.name}' is empty.")
        raise typer.Exit(code=1)

    config = resolve_config(
        config_path,
        compiler_url=compiler_url,
        timeout=timeout,
        output_dir=output_dir,
    )
    service = SolutionService(config)
    try:
        artifact = service.compile_source(source, tex_file.stem)
    except TexsolveError as exc:
        if get_cli_state().show_tracebacks:
            raise
        report_failure(exc)

    target = artifact.write(output_directory(config))
    typer.echo(str(target))


__all__ = ["compile_file"]

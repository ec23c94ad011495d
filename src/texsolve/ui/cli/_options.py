"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from texsolve.core.config import OutputFormat


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
SERVICE_PANEL = "Compiling Service"

RawInputArgument = Annotated[
    str,
    typer.Argument(
        metavar="INPUT",
        help="File holding the generated solution text, or '-' to read stdin.",
    ),
]

TexFileArgument = Annotated[
    Path,
    typer.Argument(
        metavar="FILE",
        help="LaTeX (.tex) file sent to the compiling service unchanged.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

SubjectOption = Annotated[
    str | None,
    typer.Option(
        "--subject",
        "-s",
        help="Subject profile (general, mathematics, physics, chemistry, biology, "
        "engineering, statistics). Unknown values fall back to 'general'.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

FormatOption = Annotated[
    OutputFormat | None,
    typer.Option(
        "--format",
        "-f",
        case_sensitive=False,
        help="Deliver a compiled PDF or the LaTeX source.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output-dir",
        "-o",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        help="Directory receiving the artifact (defaults to the working directory).",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CompilerUrlOption = Annotated[
    str | None,
    typer.Option(
        "--compiler-url",
        help="Endpoint of the compiling service.",
        rich_help_panel=SERVICE_PANEL,
    ),
]

TimeoutOption = Annotated[
    float | None,
    typer.Option(
        "--timeout",
        min=0.1,
        help="Seconds allowed for the compile request.",
        rich_help_panel=SERVICE_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="YAML configuration file.",
    ),
]

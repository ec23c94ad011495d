"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import typer

from texsolve.core.config import SolverConfig, load_config
from texsolve.core.exceptions import ConfigError
from texsolve.core.subjects import Subject, resolve_subject

from .state import emit_error, emit_warning


STDIN_SENTINEL = "-"


def read_raw_input(source: str) -> str:
    """Return the text of ``source``, reading stdin for ``-``."""
    if source == STDIN_SENTINEL:
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        emit_error(f"Input file '{source}' does not exist.")
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        emit_error(f"Unable to read '{source}'.", exception=exc)
        raise typer.Exit(code=1) from exc


def resolve_config(config_path: Path | None, **overrides: Any) -> SolverConfig:
    """Load configuration, reporting failures as CLI errors."""
    try:
        return load_config(config_path, **overrides)
    except ConfigError as exc:
        emit_error(str(exc).splitlines()[0], exception=exc)
        raise typer.Exit(code=1) from exc


def output_directory(config: SolverConfig) -> Path:
    """Return the directory receiving artifacts."""
    return config.output_dir or Path.cwd()


def choose_subject(value: str | None) -> Subject | None:
    """Resolve a ``--subject`` value, warning when it falls back to ``general``."""
    if value is None:
        return None
    subject = resolve_subject(value)
    if subject.value != value.strip().lower():
        emit_warning(f"Unknown subject '{value}', using '{subject.value}'.")
    return subject


__all__ = [
    "STDIN_SENTINEL",
    "choose_subject",
    "output_directory",
    "read_raw_input",
    "resolve_config",
]

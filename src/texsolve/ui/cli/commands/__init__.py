"""CLI command implementations exposed via `texsolve.ui.cli`."""

from __future__ import annotations

from .build import build
from .compile import compile_file
from .info import prompt, subjects, title


__all__ = ["build", "compile_file", "prompt", "subjects", "title"]

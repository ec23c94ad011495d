"""Adapters to services outside the synthesis pipeline."""

from __future__ import annotations

from .compiler import CompilationHint, CompilerClient, explain_compilation_error


__all__ = ["CompilationHint", "CompilerClient", "explain_compilation_error"]

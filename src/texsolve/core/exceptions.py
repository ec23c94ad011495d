"""Exception hierarchy for the collaborators surrounding the synthesis pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:  # pragma: no cover - typing only
    from texsolve.adapters.compiler import CompilationHint


class TexsolveError(RuntimeError):
    """Base exception for failures outside the pure synthesis pipeline."""


class ConfigError(TexsolveError):
    """Raised when a configuration file cannot be read or validated."""


class CompilationError(TexsolveError):
    """Raised when the compiling service rejects a document."""

    def __init__(
        self,
        message: str,
        *,
        log: str = "",
        status_code: int | None = None,
        hint: CompilationHint | None = None,
    ) -> None:
        super().__init__(message)
        self.log = log
        self.status_code = status_code
        self.hint = hint


class CompilerUnavailableError(TexsolveError):
    """Raised when the compiling service cannot be reached."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "CompilationError",
    "CompilerUnavailableError",
    "ConfigError",
    "TexsolveError",
    "exception_messages",
]

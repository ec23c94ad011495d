"""HTTP client for the remote LaTeX compiling service.

The service accepts ``POST`` requests carrying ``{"latex_code": "..."}`` and
answers either with the rendered PDF or with a JSON object holding an
``error`` string (usually the engine log). One request is made per call; the
caller owns any retry policy.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import Lock
from typing import TYPE_CHECKING, Any

import requests

from texsolve.core.config import DEFAULT_COMPILER_URL
from texsolve.core.exceptions import CompilationError, CompilerUnavailableError


if TYPE_CHECKING:  # pragma: no cover - typing only
    from requests import Session as RequestsSession
else:
    RequestsSession = Any


logger = logging.getLogger(__name__)

MAX_DETAIL_LENGTH = 500


@dataclass(frozen=True, slots=True)
class CompilationHint:
    """User-facing interpretation of a compiler failure log."""

    category: str
    summary: str
    detail: str

    def format(self) -> str:
        """Return the summary followed by the truncated log excerpt."""
        if not self.detail:
            return self.summary
        return f"{self.summary}\nDetails: {self.detail}"


_HINT_TABLE: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (
        ("Missing", "Undefined"),
        "syntax",
        "The LaTeX source has a syntax error. Check the math markup.",
    ),
    (
        ("Emergency stop", "Fatal error"),
        "fatal",
        "A fatal compilation error occurred.",
    ),
    (
        ("Package",),
        "package",
        "A required LaTeX package may be missing.",
    ),
    (
        ("documentclass",),
        "document-class",
        "The document class is not defined correctly.",
    ),
)


def _truncate(text: str, limit: int = MAX_DETAIL_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def explain_compilation_error(message: str) -> CompilationHint:
    """Classify a compiler error log into a short hint."""
    text = message or ""
    for needles, category, summary in _HINT_TABLE:
        if any(needle in text for needle in needles):
            return CompilationHint(category, summary, _truncate(text.strip()))
    return CompilationHint(
        "unknown",
        "A problem occurred while processing the LaTeX source.",
        _truncate(text.strip()),
    )


class CompilerClient:
    """Submit LaTeX sources to the compiling service and return the PDF bytes."""

    _DEFAULT_USER_AGENT = "texsolve-compiler-client"

    def __init__(
        self,
        url: str = DEFAULT_COMPILER_URL,
        *,
        timeout: float = 120.0,
        session: RequestsSession | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session_lock = Lock()
        self._session: RequestsSession | None = session
        self._user_agent = user_agent or self._DEFAULT_USER_AGENT

    def _ensure_session(self) -> RequestsSession:
        with self._session_lock:
            if self._session is None:
                session = requests.Session()
                session.headers.update({"User-Agent": self._user_agent})
                self._session = session
            return self._session

    @staticmethod
    def payload(source: str) -> dict[str, str]:
        """Return the JSON body expected by the service."""
        return {"latex_code": source}

    def compile(self, source: str) -> bytes:
        """Compile ``source`` remotely and return the rendered artifact."""
        client = self._ensure_session()
        logger.info("Sending %d characters to %s.", len(source), self.url)
        try:
            response = client.post(self.url, json=self.payload(source), timeout=self.timeout)
        except requests.Timeout as exc:
            raise CompilerUnavailableError(
                f"Compiling service at '{self.url}' timed out after {self.timeout}s."
            ) from exc
        except requests.RequestException as exc:
            raise CompilerUnavailableError(
                f"Unable to reach compiling service at '{self.url}'."
            ) from exc

        if response.status_code >= 400:
            log = self._error_message(response)
            hint = explain_compilation_error(log)
            logger.warning(
                "Compilation rejected with HTTP %s (%s).", response.status_code, hint.category
            )
            raise CompilationError(
                f"LaTeX compilation failed: {hint.summary}",
                log=log,
                status_code=response.status_code,
                hint=hint,
            )

        content = response.content
        logger.info("Received %d bytes from the compiling service.", len(content))
        return content

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            data = response.json()
        except ValueError:
            return (response.text or "").strip() or f"HTTP {response.status_code}"
        if isinstance(data, dict) and isinstance(data.get("error"), str):
            return data["error"]
        return f"HTTP {response.status_code}"


__all__ = [
    "MAX_DETAIL_LENGTH",
    "CompilationHint",
    "CompilerClient",
    "explain_compilation_error",
]

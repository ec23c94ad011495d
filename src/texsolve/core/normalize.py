"""Normalise generated text into LaTeX-shaped body content.

Language models asked for LaTeX frequently answer with a mixture of
markdown and LaTeX: the whole reply wrapped in a code fence, markdown
headings instead of sectioning commands, ``**bold**`` spans and ``---``
separators. :func:`normalize` rewrites those idioms so the result can be
scrubbed and embedded into a template. It never raises.
"""

from __future__ import annotations

import logging
import re


logger = logging.getLogger(__name__)

FENCE = "```"

_TAGGED_FENCE_OPEN = re.compile(r"\A```[A-Za-z][\w+-]*(?=\s|\Z)")

_HEADINGS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^### (.*)$", re.MULTILINE), "subsubsection*"),
    (re.compile(r"^## (.*)$", re.MULTILINE), "subsection*"),
    (re.compile(r"^# (.*)$", re.MULTILINE), "section*"),
)

_LINE_ENDINGS = re.compile(r"\r\n?")
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_HORIZONTAL_RULE = re.compile(r"^---$", re.MULTILINE)


def strip_fences(text: str) -> str:
    """Remove a code fence wrapping the entire payload.

    A tagged opening fence (```` ```latex ````) is checked first, then a bare
    one. Fences that do not enclose the whole text are left in place.
    """
    if not text.endswith(FENCE):
        return text

    tagged = _TAGGED_FENCE_OPEN.match(text)
    if tagged is not None:
        inner = text[tagged.end() : len(text) - len(FENCE)]
        if tagged.end() <= len(text) - len(FENCE):
            logger.debug("Stripped tagged code fence %r.", tagged.group(0))
            return inner.strip()

    if text.startswith(FENCE) and len(text) >= 2 * len(FENCE):
        logger.debug("Stripped bare code fence.")
        return text[len(FENCE) : len(text) - len(FENCE)].strip()

    return text


def convert_headings(text: str) -> str:
    """Turn ``#``/``##``/``###`` lines into un-numbered sectioning commands."""
    for pattern, command in _HEADINGS:
        text = pattern.sub(lambda match, cmd=command: f"\\{cmd}{{{match.group(1)}}}", text)
    return text


def convert_bold(text: str) -> str:
    """Turn ``**text**`` spans into ``\\textbf{text}``."""
    return _BOLD.sub(lambda match: f"\\textbf{{{match.group(1)}}}", text)


def convert_rules(text: str) -> str:
    """Turn standalone ``---`` lines into ``\\hrulefill``."""
    return _HORIZONTAL_RULE.sub(lambda _match: "\\hrulefill", text)


def normalize(raw: str) -> str:
    """Return ``raw`` as LF-terminated text with markdown idioms converted."""
    content = _LINE_ENDINGS.sub("\n", raw or "").strip()
    content = strip_fences(content)
    content = convert_headings(content)
    content = convert_bold(content)
    content = convert_rules(content)
    return content


__all__ = [
    "FENCE",
    "convert_bold",
    "convert_headings",
    "convert_rules",
    "normalize",
    "strip_fences",
]

"""Derive a short, filename-safe title from generated content.

Titles come from an ordered table of probes. Authorial markers (``\\title``,
sectioning commands) outrank markdown headings, which outrank a scrape of a
"Problem" line. The first probe yielding a non-empty sanitised capture wins;
otherwise :data:`~texsolve.core.naming.DEFAULT_TITLE` is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from .naming import DEFAULT_TITLE, sanitize_filename


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TitleRule:
    """Probe capturing a title candidate in its first group."""

    name: str
    pattern: re.Pattern[str]

    def match(self, text: str) -> str | None:
        """Return the sanitised capture for ``text`` or ``None``."""
        found = self.pattern.search(text)
        if found is None:
            return None
        candidate = sanitize_filename(found.group(1).strip())
        return candidate or None


TITLE_RULES: tuple[TitleRule, ...] = (
    TitleRule("title", re.compile(r"\\title\{([^}]+)\}")),
    TitleRule("section", re.compile(r"\\section\*?\{([^}]+)\}")),
    TitleRule("subsection", re.compile(r"\\subsection\*?\{([^}]+)\}")),
    TitleRule("markdown-h1", re.compile(r"^# ([^\r\n]+)\r?$", re.MULTILINE)),
    TitleRule("markdown-h2", re.compile(r"^## ([^\r\n]+)\r?$", re.MULTILINE)),
    TitleRule(
        "problem",
        re.compile(
            r"^[ \t]*(?:問題|problem\b)[:：]?[ \t]*(\S[^\r\n]*)\r?$",
            re.MULTILINE | re.IGNORECASE,
        ),
    ),
)


def extract_title(raw: str, rules: tuple[TitleRule, ...] = TITLE_RULES) -> str:
    """Return the title for ``raw`` using the first matching rule."""
    text = raw or ""
    for rule in rules:
        candidate = rule.match(text)
        if candidate is not None:
            logger.debug("Title %r taken from the %s rule.", candidate, rule.name)
            return candidate
    return DEFAULT_TITLE


__all__ = ["TITLE_RULES", "TitleRule", "extract_title"]

"""Remove preamble fragments that would clash with the document template.

The generator is asked for body-only LaTeX, yet it regularly emits a full
document or re-declares packages that the template already loads. Duplicate
declarations break compilation, so they are deleted before assembly.

This is a bounded allowlist of textual shapes, not a LaTeX parser: spellings
other than the ones below pass through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from .subjects import Subject, resolve_subject


logger = logging.getLogger(__name__)

# Braced argument allowing a single level of nested groups.
_BRACED = r"\{(?:[^{}]|\{[^{}]*\})*\}"


@dataclass(frozen=True, slots=True)
class ScrubRule:
    """Named removal pattern applied to every occurrence in the content."""

    name: str
    pattern: re.Pattern[str]

    def apply(self, content: str) -> tuple[str, int]:
        """Return ``content`` without matches and the number of removals."""
        return self.pattern.subn("", content)


SCRUB_RULES: tuple[ScrubRule, ...] = (
    ScrubRule(
        "preamble",
        re.compile(r"\\documentclass.*?\\begin\{document\}", re.DOTALL),
    ),
    ScrubRule("document-end", re.compile(r"\\end\{document\}.*\Z", re.DOTALL)),
    ScrubRule(
        "page-style",
        re.compile(r"\\fancypagestyle\{[^{}]*\}\s*" + _BRACED),
    ),
    ScrubRule("tikz-library", re.compile(r"\\usetikzlibrary\{[^{}]*\}")),
    ScrubRule(
        "package",
        re.compile(r"\\usepackage(?:\[[^\]]*\])?\{[^{}]*\}[ \t]*(?:%[^\n]*)?"),
    ),
    ScrubRule("pgfplots-config", re.compile(r"\\pgfplotsset\s*" + _BRACED)),
    ScrubRule("pgfplots-library", re.compile(r"\\usepgfplotslibrary\{[^{}]*\}")),
)


def scrub(content: str, subject: Subject | str | None = None) -> str:
    """Strip structural declarations so only body content remains."""
    scrubbed = content or ""
    removed: dict[str, int] = {}
    for rule in SCRUB_RULES:
        scrubbed, count = rule.apply(scrubbed)
        if count:
            removed[rule.name] = count
    if removed:
        logger.debug(
            "Scrubbed %s from %s content.",
            ", ".join(f"{name} x{count}" for name, count in removed.items()),
            resolve_subject(subject).value,
        )
    return scrubbed.strip()


__all__ = ["SCRUB_RULES", "ScrubRule", "scrub"]

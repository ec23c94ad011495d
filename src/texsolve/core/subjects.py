"""Subject domains recognised by the document templates and prompts."""

from __future__ import annotations

from enum import Enum


class Subject(str, Enum):
    """Academic domain selecting a package profile and a prompt profile."""

    GENERAL = "general"
    MATHEMATICS = "mathematics"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"
    ENGINEERING = "engineering"
    STATISTICS = "statistics"

    def __str__(self) -> str:
        return self.value


def resolve_subject(value: Subject | str | None) -> Subject:
    """Return the subject matching ``value``, falling back to ``general``."""
    if isinstance(value, Subject):
        return value
    if not isinstance(value, str):
        return Subject.GENERAL
    candidate = value.strip().lower()
    try:
        return Subject(candidate)
    except ValueError:
        return Subject.GENERAL


def iter_subjects() -> tuple[Subject, ...]:
    """Return every subject in declaration order."""
    return tuple(Subject)


__all__ = ["Subject", "iter_subjects", "resolve_subject"]

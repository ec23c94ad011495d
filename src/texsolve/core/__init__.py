"""Pure document-synthesis pipeline: normalise, scrub, assemble, name."""

from __future__ import annotations

from .config import OutputFormat, SolverConfig, load_config
from .exceptions import (
    CompilationError,
    CompilerUnavailableError,
    ConfigError,
    TexsolveError,
    exception_messages,
)
from .naming import DEFAULT_TITLE, artifact_name, sanitize_filename, timestamp
from .normalize import normalize
from .prompts import subject_prompt
from .scrub import scrub
from .subjects import Subject, iter_subjects, resolve_subject
from .templates import PACKAGE_PROFILES, PackageProfile, assemble, get_profile
from .titles import TITLE_RULES, TitleRule, extract_title


__all__ = [
    "DEFAULT_TITLE",
    "PACKAGE_PROFILES",
    "TITLE_RULES",
    "CompilationError",
    "CompilerUnavailableError",
    "ConfigError",
    "OutputFormat",
    "PackageProfile",
    "SolverConfig",
    "Subject",
    "TexsolveError",
    "TitleRule",
    "artifact_name",
    "assemble",
    "exception_messages",
    "extract_title",
    "get_profile",
    "iter_subjects",
    "load_config",
    "normalize",
    "resolve_subject",
    "sanitize_filename",
    "scrub",
    "subject_prompt",
    "timestamp",
]

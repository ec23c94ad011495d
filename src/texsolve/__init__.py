"""Turn generated worked solutions into subject-aware LaTeX documents."""

from __future__ import annotations

from texsolve.adapters import CompilationHint, CompilerClient, explain_compilation_error
from texsolve.api import RenderedArtifact, SolutionService, SynthesizedSolution, synthesize
from texsolve.core import (
    DEFAULT_TITLE,
    PACKAGE_PROFILES,
    TITLE_RULES,
    CompilationError,
    CompilerUnavailableError,
    ConfigError,
    OutputFormat,
    PackageProfile,
    SolverConfig,
    Subject,
    TexsolveError,
    TitleRule,
    artifact_name,
    assemble,
    extract_title,
    get_profile,
    load_config,
    normalize,
    resolve_subject,
    sanitize_filename,
    scrub,
    subject_prompt,
    timestamp,
)
from texsolve.version import get_version


__version__ = get_version()

__all__ = [
    "DEFAULT_TITLE",
    "PACKAGE_PROFILES",
    "TITLE_RULES",
    "CompilationError",
    "CompilationHint",
    "CompilerClient",
    "CompilerUnavailableError",
    "ConfigError",
    "OutputFormat",
    "PackageProfile",
    "RenderedArtifact",
    "SolutionService",
    "SolverConfig",
    "Subject",
    "SynthesizedSolution",
    "TexsolveError",
    "TitleRule",
    "__version__",
    "artifact_name",
    "assemble",
    "explain_compilation_error",
    "extract_title",
    "get_profile",
    "get_version",
    "load_config",
    "normalize",
    "resolve_subject",
    "sanitize_filename",
    "scrub",
    "subject_prompt",
    "synthesize",
    "timestamp",
]

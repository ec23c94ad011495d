"""Configuration model for the service facade and the CLI.

SolverConfig

`compiler_url` (`str`)
: Endpoint of the compiling service. Documents are posted as
  ``{"latex_code": ...}``.

`timeout` (`float`)
: Seconds allowed for a single compile round trip. No retries are made.

`default_subject` (`Subject`)
: Subject used when a request does not name one. Unknown values fall back
  to ``general``.

`output_format` (`OutputFormat`)
: ``pdf`` compiles through the service; ``tex`` keeps the LaTeX source.

`output_dir` (`Path | None`)
: Directory receiving artifacts written by the CLI. Defaults to the
  current working directory.

Values are layered: YAML file, then the ``TEXSOLVE_COMPILER_URL`` and
``TEXSOLVE_TIMEOUT`` environment variables, then explicit overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigError
from .subjects import Subject, resolve_subject


DEFAULT_COMPILER_URL = "http://latex-compiler:8080/compile"

ENV_COMPILER_URL = "TEXSOLVE_COMPILER_URL"
ENV_TIMEOUT = "TEXSOLVE_TIMEOUT"


class OutputFormat(str, Enum):
    """Artifact kinds a solution can be delivered as."""

    PDF = "pdf"
    TEX = "tex"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def media_type(self) -> str:
        return "application/pdf" if self is OutputFormat.PDF else "application/x-tex"


class SolverConfig(BaseModel):
    """Settings shared by the service facade and the CLI."""

    model_config = ConfigDict(extra="forbid")

    compiler_url: str = DEFAULT_COMPILER_URL
    timeout: float = Field(default=120.0, gt=0)
    default_subject: Subject = Subject.GENERAL
    output_format: OutputFormat = OutputFormat.PDF
    output_dir: Path | None = None

    @field_validator("default_subject", mode="before")
    @classmethod
    def _coerce_subject(cls, value: Any) -> Subject:
        return resolve_subject(value)

    @field_validator("compiler_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate.startswith(("http://", "https://")):
            raise ValueError("compiler_url must be an http(s) URL")
        return candidate


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file '{path}'.") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file '{path}'.") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Configuration file '{path}' must contain a mapping.")
    return dict(payload)


def _environment_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if url := environ.get(ENV_COMPILER_URL, "").strip():
        overrides["compiler_url"] = url
    if timeout := environ.get(ENV_TIMEOUT, "").strip():
        overrides["timeout"] = timeout
    return overrides


def load_config(
    path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> SolverConfig:
    """Build a :class:`SolverConfig` from a YAML file, the environment and overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_read_yaml(Path(path)))
    data.update(_environment_overrides(os.environ if environ is None else environ))
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return SolverConfig.model_validate(data)
    except ValidationError as exc:
        source = f" '{path}'" if path is not None else ""
        raise ConfigError(f"Invalid configuration{source}: {exc}") from exc


__all__ = [
    "DEFAULT_COMPILER_URL",
    "ENV_COMPILER_URL",
    "ENV_TIMEOUT",
    "OutputFormat",
    "SolverConfig",
    "load_config",
]

"""Orchestration of the synthesis pipeline and the compiling service."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from texsolve.adapters.compiler import CompilerClient
from texsolve.core.config import OutputFormat, SolverConfig
from texsolve.core.naming import artifact_name
from texsolve.core.normalize import normalize
from texsolve.core.scrub import scrub
from texsolve.core.subjects import Subject, resolve_subject
from texsolve.core.templates import assemble
from texsolve.core.titles import extract_title


logger = logging.getLogger(__name__)

__all__ = [
    "RenderedArtifact",
    "SolutionService",
    "SynthesizedSolution",
    "synthesize",
]


@dataclass(slots=True)
class SynthesizedSolution:
    """Document and title produced from one generator response."""

    subject: Subject
    title: str
    body: str
    document: str

    def artifact_name(self, extension: str, stamp: str | None = None) -> str:
        """Return ``<stamp>_<title>.<extension>`` for this solution."""
        return artifact_name(self.title, extension, stamp)


@dataclass(slots=True)
class RenderedArtifact:
    """Deliverable file contents and their suggested name."""

    filename: str
    payload: bytes
    media_type: str
    solution: SynthesizedSolution | None = None

    def write(self, directory: Path) -> Path:
        """Write the payload under ``directory`` and return the file path."""
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / self.filename
        target.write_bytes(self.payload)
        return target


def synthesize(raw: str, subject: Subject | str | None = None) -> SynthesizedSolution:
    """Turn raw generator output into a complete document and a title."""
    resolved = resolve_subject(subject)
    body = scrub(normalize(raw), resolved)
    return SynthesizedSolution(
        subject=resolved,
        title=extract_title(raw),
        body=body,
        document=assemble(resolved, body),
    )


class SolutionService:
    """Synthesize documents and deliver them as LaTeX sources or PDFs."""

    def __init__(
        self,
        config: SolverConfig | None = None,
        *,
        compiler: CompilerClient | None = None,
    ) -> None:
        self.config = config or SolverConfig()
        self._compiler = compiler

    @property
    def compiler(self) -> CompilerClient:
        if self._compiler is None:
            self._compiler = CompilerClient(self.config.compiler_url, timeout=self.config.timeout)
        return self._compiler

    def synthesize(self, raw: str, subject: Subject | str | None = None) -> SynthesizedSolution:
        """Run the pipeline, using the configured default subject when omitted."""
        chosen = self.config.default_subject if subject is None else subject
        return synthesize(raw, chosen)

    def render(
        self,
        raw: str,
        subject: Subject | str | None = None,
        *,
        output_format: OutputFormat | None = None,
        stamp: str | None = None,
    ) -> RenderedArtifact:
        """Synthesize ``raw`` and return the requested artifact."""
        fmt = OutputFormat(output_format or self.config.output_format)
        solution = self.synthesize(raw, subject)
        if fmt is OutputFormat.TEX:
            payload = solution.document.encode("utf-8")
        else:
            payload = self.compiler.compile(solution.document)
        filename = solution.artifact_name(fmt.extension, stamp)
        logger.info("Rendered %s as %s.", solution.subject.value, filename)
        return RenderedArtifact(filename, payload, fmt.media_type, solution)

    def compile_source(
        self, source: str, name: str, *, stamp: str | None = None
    ) -> RenderedArtifact:
        """Compile an existing LaTeX source unchanged, naming it after ``name``."""
        payload = self.compiler.compile(source)
        filename = artifact_name(name, OutputFormat.PDF.extension, stamp)
        return RenderedArtifact(filename, payload, OutputFormat.PDF.media_type)

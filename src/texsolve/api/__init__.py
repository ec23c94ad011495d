"""Public orchestration API for embedding texsolve."""

from __future__ import annotations

from .service import RenderedArtifact, SolutionService, SynthesizedSolution, synthesize


__all__ = ["RenderedArtifact", "SolutionService", "SynthesizedSolution", "synthesize"]

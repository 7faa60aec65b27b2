"""Orchestrator module for planning, running and reviewing agent jobs."""

from .engine import OrchestratorEngine, Generator

__all__ = [
    "OrchestratorEngine",
    "Generator",
]

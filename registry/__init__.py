"""Capability registry and workflow ordering for the ten brand agents."""

from .catalog import AGENT_CATALOG
from .registry import CapabilityRegistry, RegistryIntegrityError, get_registry
from .workflow import (
    validate_dependencies,
    get_phase_map,
    get_workflow_order,
    phase_of,
    next_ready_agents,
)

__all__ = [
    "AGENT_CATALOG",
    "CapabilityRegistry",
    "RegistryIntegrityError",
    "get_registry",
    "validate_dependencies",
    "get_phase_map",
    "get_workflow_order",
    "phase_of",
    "next_ready_agents",
]

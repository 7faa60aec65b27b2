"""Dependency gating and phase ordering over the capability registry."""

import logging
from typing import Iterable, List, Optional

from contracts import DependencyStatus, WorkflowPhaseMap
from registry.registry import CapabilityRegistry, get_registry

logger = logging.getLogger(__name__)

PHASE_COUNT = 4


def validate_dependencies(
    agent_id: str,
    completed_agents: Iterable[str],
    registry: Optional[CapabilityRegistry] = None,
) -> DependencyStatus:
    """Check whether an agent's prerequisite agents have all completed.

    An unknown agent is reported as missing itself, so callers can treat
    "unknown" and "blocked" the same way.

    Args:
        agent_id: Agent about to run
        completed_agents: Agents whose output already exists in the session
        registry: Registry to consult, defaults to the shared one

    Returns:
        DependencyStatus with the missing dependencies in declaration order
    """
    registry = registry or get_registry()
    descriptor = registry.get(agent_id)
    if descriptor is None:
        logger.warning("Dependency check for unknown agent %s", agent_id)
        return DependencyStatus(agent_id=agent_id, is_ready=False, missing_dependencies=[agent_id])

    completed = set(completed_agents)
    missing = [dep_id for dep_id in descriptor.dependency_ids() if dep_id not in completed]
    return DependencyStatus(agent_id=agent_id, is_ready=not missing, missing_dependencies=missing)


def get_phase_map(registry: Optional[CapabilityRegistry] = None) -> WorkflowPhaseMap:
    """Map each phase number to its agents, in declaration order."""
    registry = registry or get_registry()
    phases = {
        phase: [d.agent_id for d in registry.by_phase(phase)]
        for phase in range(1, PHASE_COUNT + 1)
    }
    return WorkflowPhaseMap(phases=phases)


def get_workflow_order(registry: Optional[CapabilityRegistry] = None) -> List[List[str]]:
    """Return four lists of agent ids, one per phase. Empty phases yield []."""
    return get_phase_map(registry).ordered()


def phase_of(agent_id: str, registry: Optional[CapabilityRegistry] = None) -> int:
    """Phase number of an agent, or 0 when the agent is unknown."""
    descriptor = (registry or get_registry()).get(agent_id)
    return descriptor.execution_phase if descriptor else 0


def next_ready_agents(
    completed_agents: Iterable[str],
    registry: Optional[CapabilityRegistry] = None,
) -> List[str]:
    """Agents not yet completed whose dependencies are all satisfied.

    Returned in workflow order, so the first entry is what a full run
    should execute next.
    """
    registry = registry or get_registry()
    completed = set(completed_agents)
    ready = []
    for phase_agents in get_workflow_order(registry):
        for agent_id in phase_agents:
            if agent_id in completed:
                continue
            if validate_dependencies(agent_id, completed, registry).is_ready:
                ready.append(agent_id)
    return ready

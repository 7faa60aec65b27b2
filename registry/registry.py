"""Capability registry: read-only lookups over the agent catalog.

The registry checks the catalog once, when it is built. A corrupt catalog
raises RegistryIntegrityError so the process never starts with a broken
dependency graph; every lookup after that returns an empty result for an
unknown agent instead of raising.
"""

import logging
from typing import Dict, Iterable, List, Optional

from contracts import AgentDescriptor, Cluster
from registry.catalog import AGENT_CATALOG

logger = logging.getLogger(__name__)


class RegistryIntegrityError(RuntimeError):
    """The agent catalog violates a structural invariant."""


class CapabilityRegistry:
    """In-memory catalog of agent descriptors keyed by agent id."""

    def __init__(self, descriptors: Iterable[AgentDescriptor] = AGENT_CATALOG):
        """Build and check the registry.

        Args:
            descriptors: Agent descriptors in declaration order

        Raises:
            RegistryIntegrityError: If the catalog is structurally invalid
        """
        self._agents: Dict[str, AgentDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.agent_id in self._agents:
                raise RegistryIntegrityError(f"Duplicate agent id: {descriptor.agent_id}")
            self._agents[descriptor.agent_id] = descriptor

        self._check_references()
        self._check_bidirectional()
        self._check_phases()
        self._check_acyclic()
        logger.debug("Capability registry built with %d agents", len(self._agents))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, agent_id: str) -> Optional[AgentDescriptor]:
        """Return the descriptor for an agent, or None when unknown."""
        return self._agents.get(agent_id)

    def has(self, agent_id: str) -> bool:
        return agent_id in self._agents

    def all_agents(self) -> List[AgentDescriptor]:
        """Return every descriptor in declaration order."""
        return list(self._agents.values())

    def agent_ids(self) -> List[str]:
        return list(self._agents.keys())

    def by_cluster(self, cluster: Cluster) -> List[AgentDescriptor]:
        """Return the agents of one cluster in declaration order."""
        return [d for d in self._agents.values() if d.cluster == cluster]

    def by_phase(self, phase: int) -> List[AgentDescriptor]:
        return [d for d in self._agents.values() if d.execution_phase == phase]

    def dependencies_of(self, agent_id: str) -> List[str]:
        """Agent ids whose output must exist before this agent runs."""
        descriptor = self.get(agent_id)
        return descriptor.dependency_ids() if descriptor else []

    def conflicts_of(self, agent_id: str) -> List[str]:
        descriptor = self.get(agent_id)
        return descriptor.conflict_ids() if descriptor else []

    def required_by_of(self, agent_id: str) -> List[str]:
        """Agent ids that declare they consume this agent's output."""
        descriptor = self.get(agent_id)
        return descriptor.required_by_ids() if descriptor else []

    def dependants_of(self, agent_id: str) -> List[str]:
        """Agent ids that list this agent in their own dependencies.

        Computed from the graph rather than read from the descriptor, so it
        agrees with ``required_by_of`` only on a consistent catalog.
        """
        return [
            d.agent_id for d in self._agents.values()
            if agent_id in d.dependency_ids()
        ]

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    # ------------------------------------------------------------------
    # Integrity checks
    # ------------------------------------------------------------------

    def _check_references(self) -> None:
        for descriptor in self._agents.values():
            links = descriptor.depends_on + descriptor.required_by + descriptor.conflicts_with
            for link in links:
                if link.agent_id not in self._agents:
                    raise RegistryIntegrityError(
                        f"{descriptor.agent_id} references unknown agent {link.agent_id}"
                    )
                if link.agent_id == descriptor.agent_id:
                    raise RegistryIntegrityError(f"{descriptor.agent_id} references itself")

    def _check_bidirectional(self) -> None:
        for descriptor in self._agents.values():
            for dep_id in descriptor.dependency_ids():
                if descriptor.agent_id not in self._agents[dep_id].required_by_ids():
                    raise RegistryIntegrityError(
                        f"{descriptor.agent_id} depends on {dep_id}, "
                        f"but {dep_id} does not list it in required_by"
                    )
            for consumer_id in descriptor.required_by_ids():
                if descriptor.agent_id not in self._agents[consumer_id].dependency_ids():
                    raise RegistryIntegrityError(
                        f"{descriptor.agent_id} is required by {consumer_id}, "
                        f"but {consumer_id} does not depend on it"
                    )

    def _check_phases(self) -> None:
        for descriptor in self._agents.values():
            if not 1 <= descriptor.execution_phase <= 4:
                raise RegistryIntegrityError(
                    f"{descriptor.agent_id} has phase {descriptor.execution_phase}, expected 1-4"
                )
            for dep_id in descriptor.dependency_ids():
                dep_phase = self._agents[dep_id].execution_phase
                if dep_phase > descriptor.execution_phase:
                    raise RegistryIntegrityError(
                        f"{descriptor.agent_id} (phase {descriptor.execution_phase}) "
                        f"depends on {dep_id} from later phase {dep_phase}"
                    )

    def _check_acyclic(self) -> None:
        # Iterative DFS; grey nodes are on the current path
        white, grey, black = 0, 1, 2
        colour = {agent_id: white for agent_id in self._agents}

        for root in self._agents:
            if colour[root] != white:
                continue
            stack = [(root, iter(self._agents[root].dependency_ids()))]
            colour[root] = grey
            while stack:
                node, children = stack[-1]
                child = next(children, None)
                if child is None:
                    colour[node] = black
                    stack.pop()
                elif colour[child] == grey:
                    raise RegistryIntegrityError(f"Dependency cycle through {node} -> {child}")
                elif colour[child] == white:
                    colour[child] = grey
                    stack.append((child, iter(self._agents[child].dependency_ids())))


_default_registry: Optional[CapabilityRegistry] = None


def get_registry() -> CapabilityRegistry:
    """Return the shared registry built from the default catalog."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CapabilityRegistry()
    return _default_registry

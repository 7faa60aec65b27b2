"""Agent contracts for the capability registry and workflow phases."""

from pydantic import BaseModel, Field
from typing import Dict, List, Tuple
from enum import Enum


class Cluster(str, Enum):
    """High-level grouping of agents."""
    STRATEGY = "strategy"
    CREATIVE = "creative"
    GROWTH = "growth"


class AgentLink(BaseModel):
    """A directed edge to another agent, with the reason it exists."""
    agent_id: str = Field(..., description="Identity of the linked agent")
    reason: str = Field(..., min_length=1, description="Why the link exists")

    model_config = {"frozen": True}


class AgentDescriptor(BaseModel):
    """Static profile of one agent. Defined once at startup, never mutated."""
    agent_id: str = Field(..., min_length=1, description="Primary key used by every component")
    name: str = Field(..., description="Display name")
    cluster: Cluster = Field(..., description="Cluster the agent belongs to")
    keywords: Tuple[str, ...] = Field(default=(), description="Ordered routing keywords")
    capabilities: Tuple[str, ...] = Field(default=(), description="What the agent is responsible for")
    forbidden_tasks: Tuple[str, ...] = Field(default=(), description="Tasks the agent must not take on")
    collaborators: Tuple[str, ...] = Field(default=(), description="Agents it may hand work to or share work with")
    depends_on: Tuple[AgentLink, ...] = Field(default=(), description="Agents whose output must exist first")
    required_by: Tuple[AgentLink, ...] = Field(default=(), description="Agents that consume this agent's output")
    conflicts_with: Tuple[AgentLink, ...] = Field(default=(), description="Agents whose work must not overlap")
    execution_phase: int = Field(..., ge=1, le=4, description="Workflow phase (1-4)")
    required_inputs: Tuple[str, ...] = Field(default=())
    expected_outputs: Tuple[str, ...] = Field(default=())
    success_criteria: Tuple[str, ...] = Field(default=())

    model_config = {"frozen": True}

    def dependency_ids(self) -> List[str]:
        return [link.agent_id for link in self.depends_on]

    def required_by_ids(self) -> List[str]:
        return [link.agent_id for link in self.required_by]

    def conflict_ids(self) -> List[str]:
        return [link.agent_id for link in self.conflicts_with]


class DependencyStatus(BaseModel):
    """Whether an agent's prerequisite agents have all completed."""
    agent_id: str
    is_ready: bool = Field(..., description="True when nothing is missing")
    missing_dependencies: List[str] = Field(default_factory=list)


class WorkflowPhaseMap(BaseModel):
    """Phase number (1-4) mapped to the agents assigned to it."""
    phases: Dict[int, List[str]] = Field(default_factory=dict)

    def ordered(self) -> List[List[str]]:
        """Return the four phase lists in phase order."""
        return [list(self.phases.get(phase, [])) for phase in range(1, 5)]

    def phase_of(self, agent_id: str) -> int:
        """Phase number for an agent, or 0 when it is not mapped."""
        for phase, agent_ids in self.phases.items():
            if agent_id in agent_ids:
                return phase
        return 0

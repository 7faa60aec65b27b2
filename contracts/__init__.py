"""Pydantic contracts for the Brand Orchestrator engine.

All component-to-component handoffs are typed through these contracts.
"""

from .agent_contracts import (
    Cluster,
    AgentLink,
    AgentDescriptor,
    DependencyStatus,
    WorkflowPhaseMap,
)

from .router_contracts import (
    PriorOutputRecord,
    JobRequest,
    AntiOverlap,
    RoutingDecision,
    DuplicateWorkReport,
)

from .validation_contracts import (
    Severity,
    IssueCategory,
    RuleKind,
    ValidationCheckResult,
    ValidationIssue,
    ValidationResult,
)

from .brand_contracts import (
    ToneOfVoice,
    BrandContext,
    IsolationDecision,
    BlocklistResult,
    RephraseCheck,
    GuardStatus,
    GuardCheck,
    DataGuardReport,
)

from .orchestrator_contracts import (
    JobPlan,
    ReviewOutcome,
    JobRun,
)

__all__ = [
    # Agents
    "Cluster",
    "AgentLink",
    "AgentDescriptor",
    "DependencyStatus",
    "WorkflowPhaseMap",
    # Router
    "PriorOutputRecord",
    "JobRequest",
    "AntiOverlap",
    "RoutingDecision",
    "DuplicateWorkReport",
    # Validation
    "Severity",
    "IssueCategory",
    "RuleKind",
    "ValidationCheckResult",
    "ValidationIssue",
    "ValidationResult",
    # Brand
    "ToneOfVoice",
    "BrandContext",
    "IsolationDecision",
    "BlocklistResult",
    "RephraseCheck",
    "GuardStatus",
    "GuardCheck",
    "DataGuardReport",
    # Orchestrator
    "JobPlan",
    "ReviewOutcome",
    "JobRun",
]

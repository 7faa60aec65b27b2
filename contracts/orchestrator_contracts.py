"""Orchestrator contracts for the plan → generate → review pipeline."""

from pydantic import BaseModel, Field
from typing import Any, List, Optional

from .agent_contracts import DependencyStatus
from .brand_contracts import BlocklistResult, IsolationDecision
from .router_contracts import DuplicateWorkReport, PriorOutputRecord, RoutingDecision
from .validation_contracts import ValidationResult


class JobPlan(BaseModel):
    """Everything decided about a request before any content is generated."""
    isolation: IsolationDecision
    routing: RoutingDecision
    dependencies: DependencyStatus
    duplicates: DuplicateWorkReport
    ready: bool = Field(..., description="True when the primary agent may run now")
    blockers: List[str] = Field(default_factory=list, description="Why the job is not ready")


class ReviewOutcome(BaseModel):
    """Quality-gate verdict plus the record to persist for later checks."""
    validation: ValidationResult
    blocklist: BlocklistResult
    record: PriorOutputRecord = Field(..., description="Append this to the session history")
    warnings: List[str] = Field(default_factory=list, description="Messages to show the end user")

    @property
    def accepted(self) -> bool:
        return self.validation.passed and self.blocklist.passed


class JobRun(BaseModel):
    """A planned job, and its generated output and review when it ran."""
    plan: JobPlan
    output: Any = None
    review: Optional[ReviewOutcome] = None

    @property
    def executed(self) -> bool:
        return self.review is not None

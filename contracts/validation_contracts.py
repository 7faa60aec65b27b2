"""Validation contracts for the agent-output quality gate."""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum
from datetime import datetime


class Severity(str, Enum):
    """Severity level of a check or issue."""
    CRITICAL = "critical"  # Output is unusable as-is
    WARNING = "warning"  # Output is usable but should be reworked
    INFO = "info"  # Logged only


class IssueCategory(str, Enum):
    """What kind of problem an issue describes."""
    FORMAT = "format"
    FACT = "fact"
    CONFLICT = "conflict"
    CONSISTENCY = "consistency"
    CONTENT = "content"


class RuleKind(str, Enum):
    """The five quality-gate rules, in evaluation order.

    Each member carries its own penalty, severity, issue category and remediation
    suggestion, so this table is the single source of truth for scoring.
    """

    def __new__(cls, value: str, penalty: int, severity: Severity, category: IssueCategory, suggestion: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.penalty = penalty
        obj.severity = severity
        obj.category = category
        obj.suggestion = suggestion
        return obj

    FORMAT_STRUCTURE = (
        "FORMAT_STRUCTURE", 30, Severity.CRITICAL, IssueCategory.FORMAT,
        "Return a JSON object with non-empty task, result and reasoning fields",
    )
    FACT_GROUNDING = (
        "FACT_GROUNDING", 20, Severity.CRITICAL, IssueCategory.FACT,
        "Remove hedging language and cite sources in the result or a sources field",
    )
    ANTI_COPYCAT = (
        "ANTI_COPYCAT", 15, Severity.WARNING, IssueCategory.CONFLICT,
        "Add new information or a distinct perspective instead of repeating earlier output",
    )
    CONSISTENCY = (
        "CONSISTENCY", 15, Severity.WARNING, IssueCategory.CONSISTENCY,
        "Align pricing, audience and goal with the brand context and earlier outputs",
    )
    AGENT_SPECIFIC_CONSTRAINTS = (
        "AGENT_SPECIFIC_CONSTRAINTS", 20, Severity.WARNING, IssueCategory.CONTENT,
        "Add the fields this agent is required to deliver",
    )


class ValidationCheckResult(BaseModel):
    """Outcome of a single quality-gate rule."""
    rule: RuleKind = Field(..., description="Which rule produced this result")
    label: str = Field(..., description="Rule label, agent-qualified for agent-specific checks")
    passed: bool
    severity: Severity
    message: str

    model_config = {"frozen": True}


class ValidationIssue(BaseModel):
    """A failing rule with a remediation suggestion."""
    rule: RuleKind
    category: IssueCategory
    severity: Severity
    message: str
    suggestion: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Quality-gate verdict for one agent output."""
    agent_id: str = Field(..., description="Agent whose output was validated")
    passed: bool = Field(..., description="Whether the output may be shown as-is")
    score: int = Field(..., ge=0, le=100, description="Score from 0 to 100")
    checklist: List[ValidationCheckResult] = Field(default_factory=list)
    issues: List[ValidationIssue] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}

    def get_check(self, rule: RuleKind) -> Optional[ValidationCheckResult]:
        """Return the checklist entry for a rule."""
        for check in self.checklist:
            if check.rule == rule:
                return check
        return None

    def failed_rules(self) -> List[RuleKind]:
        return [check.rule for check in self.checklist if not check.passed]

    def has_critical_issues(self) -> bool:
        """Check if any failing rule is critical."""
        return any(issue.severity == Severity.CRITICAL for issue in self.issues)

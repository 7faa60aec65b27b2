"""Router contracts for job requests, routing decisions and session history."""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, List, Optional
from datetime import datetime, timezone


class PriorOutputRecord(BaseModel):
    """One agent output already produced in the session. Append-only."""
    agent_id: str = Field(..., description="Agent that produced the output")
    output: Any = Field(default=None, description="Opaque output payload")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def _timestamp_aware(cls, value: datetime) -> datetime:
        # Naive times are taken as local time so all records stay comparable
        if value.tzinfo is None:
            return value.astimezone()
        return value

    def _field(self, name: str) -> Any:
        if isinstance(self.output, dict):
            return self.output.get(name)
        return getattr(self.output, name, None)

    def intent_echo(self) -> Optional[str]:
        """The request intent recorded alongside the output, if any."""
        value = self._field("intent")
        return value if isinstance(value, str) else None

    def result(self) -> Any:
        return self._field("result")

    def goal(self) -> Any:
        return self._field("goal")


class JobRequest(BaseModel):
    """A user request to be routed to an agent."""
    intent: str = Field(default="", description="Free-text intent of the request")
    keywords: List[str] = Field(default_factory=list, description="Keywords extracted from the intent")
    brand_id: Optional[str] = Field(None, description="Brand the request is made for")
    prior_outputs: List[PriorOutputRecord] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, brand_id: Optional[str] = None, **kwargs: Any) -> "JobRequest":
        """Build a request from raw user text, deriving its keywords."""
        from router.keywords import extract_keywords

        return cls(intent=text, keywords=extract_keywords(text), brand_id=brand_id, **kwargs)


class AntiOverlap(BaseModel):
    """Agents that must not also work on a routed job."""
    needs_dedup: bool = Field(default=False)
    skip_agents: List[str] = Field(default_factory=list)


class RoutingDecision(BaseModel):
    """Which agent(s) should handle a job request."""
    primary_agent: str = Field(..., description="Agent that owns the job")
    secondary_agents: List[str] = Field(default_factory=list, description="Ranked supporting agents")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence in the routing")
    reasoning: str = Field(..., description="Human-readable justification")
    validation_rules: List[str] = Field(default_factory=list, description="Rules to apply downstream")
    anti_overlap: AntiOverlap = Field(default_factory=AntiOverlap)
    job_type: Optional[str] = Field(None, description="Winning job bucket, None on escalation")
    matched_keywords: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_secondary_agents(self) -> "RoutingDecision":
        if self.primary_agent in self.secondary_agents:
            raise ValueError("secondary_agents must not contain primary_agent")
        if len(set(self.secondary_agents)) != len(self.secondary_agents):
            raise ValueError("secondary_agents must not contain duplicates")
        return self

    @property
    def is_escalation(self) -> bool:
        return self.job_type is None


class DuplicateWorkReport(BaseModel):
    """Agents that already did the work a request asks for."""
    is_duplicate: bool = Field(default=False)
    duplicate_agents: List[str] = Field(default_factory=list)

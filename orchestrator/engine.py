"""Orchestrator engine - wires routing, gating and review for one request.

The engine holds no session state. The brand context and the session's
prior outputs are passed in on every call, so one engine can serve many
brands concurrently.

Flow for a request:
1. Isolation check against the session brand
2. Route to a primary agent
3. Gate on the primary agent's dependencies
4. Flag duplicate work
5. (caller generates the output)
6. Quality gate and blocklist scan, producing the record to persist
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from contracts import (
    AgentDescriptor,
    BrandContext,
    Cluster,
    JobPlan,
    JobRequest,
    JobRun,
    PriorOutputRecord,
    ReviewOutcome,
)
from registry import CapabilityRegistry, get_registry, validate_dependencies
from router import IntentRouter, detect_duplicate_work
from quality import QualityGate, coerce_output, serialize_output
from guard import check_isolation, check_trademark_and_artist_blocklist
from config import CLUSTER_LABELS, SYSTEM_RULES

logger = logging.getLogger(__name__)

# generate(descriptor, brand_context, request) -> raw agent output
Generator = Callable[[AgentDescriptor, Optional[BrandContext], JobRequest], Any]


class OrchestratorEngine:
    """Stateless facade over the router, registry, quality gate and guard."""

    def __init__(
        self,
        registry: Optional[CapabilityRegistry] = None,
        router: Optional[IntentRouter] = None,
        gate: Optional[QualityGate] = None,
    ):
        """Initialize the engine.

        Args:
            registry: Capability registry, defaults to the shared one
            router: Intent router, defaults to one over the standard buckets
            gate: Quality gate, defaults to settings thresholds
        """
        self.registry = registry or get_registry()
        self.router = router or IntentRouter()
        self.gate = gate or QualityGate()

    def plan(
        self,
        request: JobRequest,
        brand_context: Optional[BrandContext],
        completed_agents: Iterable[str] = (),
    ) -> JobPlan:
        """Decide who should handle a request and whether it can run now.

        Args:
            request: The incoming job request
            brand_context: The session's brand
            completed_agents: Agents whose output already exists in the session

        Returns:
            JobPlan; ``ready`` is False with blockers when the job must wait
        """
        requested_brand = request.brand_id
        if requested_brand is None and brand_context is not None:
            requested_brand = brand_context.brand_id
        isolation = check_isolation(brand_context, requested_brand)

        routing = self.router.route(request)
        dependencies = validate_dependencies(routing.primary_agent, completed_agents, self.registry)
        duplicates = detect_duplicate_work(request)

        blockers: List[str] = []
        if not isolation.allowed:
            blockers.append(isolation.reason)
        if routing.is_escalation:
            blockers.append("Request needs clarification before it can be routed")
        elif not dependencies.is_ready:
            blockers.append(
                f"{routing.primary_agent} is waiting on: {', '.join(dependencies.missing_dependencies)}"
            )

        if blockers:
            logger.info("Job for %s not ready: %s", routing.primary_agent, blockers)
        return JobPlan(
            isolation=isolation,
            routing=routing,
            dependencies=dependencies,
            duplicates=duplicates,
            ready=not blockers,
            blockers=blockers,
        )

    def review(
        self,
        agent_id: str,
        output: Any,
        brand_context: Optional[BrandContext] = None,
        prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
        intent: Optional[str] = None,
    ) -> ReviewOutcome:
        """Review generated output before it is shown to the user.

        Args:
            agent_id: Agent that produced the output
            output: Raw agent output
            brand_context: The session's brand
            prior_outputs: Earlier outputs in the session
            intent: Request intent, echoed into the record for duplicate detection

        Returns:
            ReviewOutcome with the gate verdict and the record to persist
        """
        validation = self.gate.validate(agent_id, output, brand_context, prior_outputs)
        blocklist = check_trademark_and_artist_blocklist(serialize_output(output), brand_context)

        payload = coerce_output(output)
        if payload is None:
            payload = {"result": serialize_output(output)}
        if intent is not None:
            payload["intent"] = intent
        record = PriorOutputRecord(agent_id=agent_id, output=payload)

        warnings: List[str] = []
        if not validation.passed:
            warnings.append(
                f"Quality score {validation.score}/100 is below the pass mark of {self.gate.pass_score}"
            )
            warnings.extend(issue.message for issue in validation.issues)
        warnings.extend(blocklist.issues)

        return ReviewOutcome(validation=validation, blocklist=blocklist, record=record, warnings=warnings)

    def run(
        self,
        request: JobRequest,
        brand_context: Optional[BrandContext],
        generate: Generator,
        completed_agents: Iterable[str] = (),
    ) -> JobRun:
        """Plan a request, generate once when it is ready, and review the output.

        The engine never retries. When the review fails, the caller decides
        whether to invoke the agent again.
        """
        plan = self.plan(request, brand_context, completed_agents)
        if not plan.ready:
            return JobRun(plan=plan)

        descriptor = self.registry.get(plan.routing.primary_agent)
        output = generate(descriptor, brand_context, request)
        review = self.review(
            descriptor.agent_id,
            output,
            brand_context,
            request.prior_outputs,
            intent=request.intent or None,
        )
        return JobRun(plan=plan, output=output, review=review)

    def cross_agent_context(
        self,
        agent_id: str,
        brand_context: Optional[BrandContext],
        data_type: str,
    ) -> Optional[Dict[str, Any]]:
        """Brand data one agent may read from another cluster's domain.

        Args:
            agent_id: Agent asking for the data
            brand_context: The session's brand
            data_type: One of brand, tone or visuals

        Returns:
            The requested slice, or None for an unknown agent, type or missing brand
        """
        if brand_context is None or not self.registry.has(agent_id):
            return None
        if data_type == "brand":
            return {"brand_name": brand_context.brand_name, "core_usp": list(brand_context.core_usp)}
        if data_type == "tone":
            return {
                "tone_of_voice": brand_context.tone_of_voice.value,
                "mood_keywords": list(brand_context.mood_keywords),
            }
        if data_type == "visuals":
            return {
                "primary_color": brand_context.primary_color,
                "mood_keywords": list(brand_context.mood_keywords),
            }
        return None

    def system_summary(self, brand_context: Optional[BrandContext]) -> str:
        """Plain-text status summary of the engine for a brand."""
        if brand_context is None:
            return "No brand context found. Complete onboarding first."

        lines = [
            "Orchestrator Status: READY",
            f"Brand: {brand_context.brand_name or brand_context.brand_id}",
            f"USP: {brand_context.usp_text() or '-'}",
            f"Tone: {brand_context.tone_of_voice.value}",
            f"Target: {brand_context.target_audience or '-'}",
            "",
            "Agents Ready:",
        ]
        for cluster in Cluster:
            names = ", ".join(agent.name for agent in self.registry.by_cluster(cluster))
            lines.append(f"  {CLUSTER_LABELS[cluster.value]}: {names}")
        lines.append("")
        lines.append("System Rules Active:")
        lines.extend(f"  {rule}" for rule in SYSTEM_RULES)
        lines.append(f"  Quality Gate (pass mark {self.gate.pass_score})")
        return "\n".join(lines)

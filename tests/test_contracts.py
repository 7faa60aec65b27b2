"""Tests for the Pydantic contracts.

Verifies that contracts can be instantiated with valid data and that
validation works correctly.
"""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from contracts import (
    # Agents
    AgentDescriptor,
    AgentLink,
    Cluster,
    WorkflowPhaseMap,
    # Router
    AntiOverlap,
    JobRequest,
    PriorOutputRecord,
    RoutingDecision,
    # Validation
    IssueCategory,
    RuleKind,
    Severity,
    ValidationCheckResult,
    ValidationIssue,
    ValidationResult,
    # Brand
    BlocklistResult,
    BrandContext,
    DataGuardReport,
    GuardCheck,
    GuardStatus,
    IsolationDecision,
    ToneOfVoice,
    # Orchestrator
    ReviewOutcome,
)


class TestAgentContracts:
    """Test agent descriptor contracts."""

    def test_descriptor_link_ids(self):
        """Link helpers return ids in declaration order."""
        descriptor = AgentDescriptor(
            agent_id="content-creator",
            name="Content Creator",
            cluster=Cluster.CREATIVE,
            execution_phase=3,
            depends_on=(
                AgentLink(agent_id="brand-voice-architect", reason="Voice first"),
                AgentLink(agent_id="visual-strategist", reason="Visuals first"),
            ),
            conflicts_with=(AgentLink(agent_id="campaign-planner", reason="Scheduling"),),
        )
        assert descriptor.dependency_ids() == ["brand-voice-architect", "visual-strategist"]
        assert descriptor.required_by_ids() == []
        assert descriptor.conflict_ids() == ["campaign-planner"]

    def test_descriptor_is_frozen(self):
        """Descriptors cannot be mutated."""
        descriptor = AgentDescriptor(agent_id="a", name="A", cluster=Cluster.GROWTH, execution_phase=1)
        with pytest.raises(ValidationError):
            descriptor.execution_phase = 2

    @pytest.mark.parametrize("phase", [0, 5])
    def test_phase_out_of_range(self, phase):
        """Phases are limited to 1-4."""
        with pytest.raises(ValidationError):
            AgentDescriptor(agent_id="a", name="A", cluster=Cluster.GROWTH, execution_phase=phase)

    def test_link_needs_reason(self):
        """Links carry a non-empty reason."""
        with pytest.raises(ValidationError):
            AgentLink(agent_id="a", reason="")

    def test_phase_map(self):
        """Phase maps list all four phases and look up agents."""
        phase_map = WorkflowPhaseMap(phases={1: ["a", "b"], 3: ["c"]})
        assert phase_map.ordered() == [["a", "b"], [], ["c"], []]
        assert phase_map.phase_of("c") == 3
        assert phase_map.phase_of("zzz") == 0


class TestRouterContracts:
    """Test router contracts."""

    def test_prior_output_helpers(self):
        """Record helpers read intent, result and goal."""
        record = PriorOutputRecord(
            agent_id="market-analyzer",
            output={"intent": "SWOT", "result": "done", "goal": "grow"},
        )
        assert record.intent_echo() == "SWOT"
        assert record.result() == "done"
        assert record.goal() == "grow"

    def test_prior_output_non_string_intent(self):
        """A non-string intent is not an echo."""
        record = PriorOutputRecord(agent_id="a", output={"intent": 42})
        assert record.intent_echo() is None

    def test_prior_output_model_payload(self):
        """Helpers also read attributes of model payloads."""
        payload = AntiOverlap(needs_dedup=True)
        record = PriorOutputRecord(agent_id="a", output=payload)
        assert record.result() is None

    def test_job_request_defaults(self):
        """A bare request is empty."""
        request = JobRequest()
        assert request.intent == ""
        assert request.keywords == []
        assert request.brand_id is None
        assert request.prior_outputs == []

    def test_routing_decision_confidence_bounds(self):
        """Confidence is between 0 and 1."""
        with pytest.raises(ValidationError):
            RoutingDecision(primary_agent="a", confidence=1.5, reasoning="r")

    def test_escalation_flag(self):
        """Decisions without a job type are escalations."""
        decision = RoutingDecision(primary_agent="orchestrator", confidence=0, reasoning="none")
        assert decision.is_escalation
        matched = RoutingDecision(primary_agent="a", confidence=0.5, reasoning="r", job_type="T")
        assert not matched.is_escalation


class TestValidationContracts:
    """Test validation contracts."""

    def test_rule_table(self):
        """Each rule carries its penalty, severity and category."""
        assert [rule.penalty for rule in RuleKind] == [30, 20, 15, 15, 20]
        assert RuleKind.FORMAT_STRUCTURE.severity == Severity.CRITICAL
        assert RuleKind.FACT_GROUNDING.category == IssueCategory.FACT
        assert RuleKind.ANTI_COPYCAT.severity == Severity.WARNING
        assert RuleKind.AGENT_SPECIFIC_CONSTRAINTS.suggestion

    def test_rule_is_a_string(self):
        """Rules compare equal to their names."""
        assert RuleKind("CONSISTENCY") is RuleKind.CONSISTENCY
        assert RuleKind.CONSISTENCY == "CONSISTENCY"

    def test_result_helpers(self):
        """Results look up checks and failing rules."""
        checklist = [
            ValidationCheckResult(
                rule=RuleKind.FORMAT_STRUCTURE, label="Format", passed=False,
                severity=Severity.CRITICAL, message="missing task",
            ),
            ValidationCheckResult(
                rule=RuleKind.FACT_GROUNDING, label="Facts", passed=True,
                severity=Severity.INFO, message="ok",
            ),
        ]
        issues = [
            ValidationIssue(
                rule=RuleKind.FORMAT_STRUCTURE, category=IssueCategory.FORMAT,
                severity=Severity.CRITICAL, message="missing task", suggestion="add it",
            )
        ]
        result = ValidationResult(agent_id="a", passed=False, score=70, checklist=checklist, issues=issues)
        assert result.get_check(RuleKind.FACT_GROUNDING).passed is True
        assert result.get_check(RuleKind.CONSISTENCY) is None
        assert result.failed_rules() == [RuleKind.FORMAT_STRUCTURE]
        assert result.has_critical_issues() is True

    def test_score_bounds(self):
        """Scores stay within 0-100."""
        with pytest.raises(ValidationError):
            ValidationResult(agent_id="a", passed=False, score=-5)


class TestBrandContracts:
    """Test brand contracts."""

    def test_usp_string_becomes_list(self):
        """A single USP string is stored as a one-item list."""
        brand = BrandContext(brand_id="b1", core_usp="Cold brew in 24 hours")
        assert brand.core_usp == ["Cold brew in 24 hours"]
        assert brand.usp_text() == "Cold brew in 24 hours"

    def test_blank_usp_string(self):
        """A blank USP string means no USP."""
        assert BrandContext(brand_id="b1", core_usp="  ").core_usp == []

    def test_defaults(self):
        """Tone defaults to professional."""
        brand = BrandContext(brand_id="b1")
        assert brand.tone_of_voice == ToneOfVoice.PROFESSIONAL
        assert brand.mood_keywords == []
        assert brand.pricing_tier is None

    def test_brand_id_required(self):
        """Brand contexts need a non-empty id."""
        with pytest.raises(ValidationError):
            BrandContext(brand_id="")

    def test_brand_context_is_read_only(self):
        """The engine cannot change brand facts."""
        brand = BrandContext(brand_id="b1")
        with pytest.raises(ValidationError):
            brand.brand_name = "Other"

    def test_tone_from_string(self):
        """Tones load from their stored values."""
        assert BrandContext(brand_id="b1", tone_of_voice="playful").tone_of_voice == ToneOfVoice.PLAYFUL

    def test_guard_report_failed_checks(self):
        """Failed checks are listed in check order."""
        report = DataGuardReport(
            checks={
                "isolation": GuardCheck(
                    check_id="isolation", name="Isolation", passed=True,
                    severity=Severity.INFO, message="ok",
                ),
                "fact_check": GuardCheck(
                    check_id="fact_check", name="Facts", passed=False,
                    severity=Severity.WARNING, message="unsourced",
                ),
            },
            overall_status=GuardStatus.WARNING,
        )
        assert [check.check_id for check in report.failed_checks()] == ["fact_check"]


class TestOrchestratorContracts:
    """Test orchestrator contracts."""

    def _outcome(self, gate_passed, blocklist_passed):
        return ReviewOutcome(
            validation=ValidationResult(agent_id="a", passed=gate_passed, score=100 if gate_passed else 40),
            blocklist=BlocklistResult(passed=blocklist_passed),
            record=PriorOutputRecord(agent_id="a", output={"result": "x"}),
        )

    @pytest.mark.parametrize("gate_passed,blocklist_passed,accepted", [
        (True, True, True),
        (False, True, False),
        (True, False, False),
    ])
    def test_accepted(self, gate_passed, blocklist_passed, accepted):
        """Output is accepted only when both the gate and the blocklist pass."""
        assert self._outcome(gate_passed, blocklist_passed).accepted is accepted

    def test_record_timestamp(self):
        """Records are stamped at creation with an aware time."""
        record = self._outcome(True, True).record
        assert record.timestamp.tzinfo is not None
        assert datetime.now(timezone.utc) - record.timestamp < timedelta(minutes=1)

    def test_naive_timestamp_gets_timezone(self):
        """Naive timestamps are read as local time."""
        record = PriorOutputRecord(agent_id="a", timestamp=datetime(2026, 1, 1, 12, 0))
        assert record.timestamp.tzinfo is not None
        assert record.timestamp.replace(tzinfo=None) == datetime(2026, 1, 1, 12, 0)

    def test_isolation_decision(self):
        """Isolation decisions carry a reason."""
        decision = IsolationDecision(allowed=False, reason="other brand")
        assert decision.reason == "other brand"

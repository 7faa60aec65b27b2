"""The five quality-gate rules.

Each rule takes the coerced output record (None when the output is not a
structured record) and returns one ValidationCheckResult. Rules never raise.
"""

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from contracts import (
    BrandContext,
    PriorOutputRecord,
    RuleKind,
    Severity,
    ValidationCheckResult,
)
from quality.similarity import similarity
from quality.structured import coerce_output, serialize_output
from config import settings

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Tuple[str, ...] = ("task", "result", "reasoning")
OPTIONAL_FIELDS: Tuple[str, ...] = ("confidence", "sources", "next_steps", "timestamp")

# Hedging language that signals the model is guessing rather than citing
HALLUCINATION_MARKERS: Tuple[str, ...] = (
    "probably",
    "estimated",
    "seems like",
    "it seems",
    "i think",
    "i believe",
    "i guess",
    "i assume",
    "might be",
    "presumably",
    "supposedly",
    # Thai hedges the product has always shipped with
    "ฉันประมาณ",
    "น่าจะ",
    "อาจจะ",
    "สมมุติว่า",
    "ถ้าหาก",
    "เหมือนว่า",
    "อาจเป็นไปได้",
    "อนุมาน",
    "คิดว่า",
    "ประมาณการ",
)

CITATION_PATTERN = re.compile(r"\[.*?\]|\(source:.*?\)", re.IGNORECASE | re.DOTALL)

# Required deliverables per agent, in camelCase; snake_case keys are accepted too
AGENT_CONSTRAINTS: Dict[str, Tuple[str, ...]] = {
    "market-analyzer": ("swot", "competitors"),
    "positioning-strategist": ("positioningStatement", "valueProp", "messagingPillars"),
    "customer-insight-specialist": ("personas", "customerJourney", "kpis"),
    "visual-strategist": ("colorPalette", "typography", "designRationale"),
    "brand-voice-architect": ("toneOfVoice", "communicationRules", "voiceExamples"),
    "narrative-designer": ("brandStory", "heroJourney", "visualDirection"),
    "content-creator": ("styleGuide", "templates", "hookPatterns"),
    "campaign-planner": ("contentCalendar", "contentMix"),
    "automation-specialist": ("workflows", "triggers", "errorHandling"),
    "analytics-master": ("kpiHierarchy", "dashboard", "trackingTemplate"),
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def lookup(record: Optional[Mapping], name: str) -> Any:
    """Value of a field under its camelCase or snake_case key, else None."""
    if record is None:
        return None
    value = record.get(name)
    if value is None:
        value = record.get(to_snake_case(name))
    return value


def constraint_label(agent_id: str) -> str:
    """Checklist label for an agent's constraints, e.g. MARKET_ANALYZER_CONSTRAINTS."""
    return f"{agent_id.upper().replace('-', '_')}_CONSTRAINTS"


def _result_text(record: Optional[Mapping]) -> str:
    if record is None:
        return ""
    result = record.get("result")
    if result is None:
        return ""
    return result if isinstance(result, str) else serialize_output(result)


def _check(rule: RuleKind, issues: List[str], ok_message: str, label: Optional[str] = None) -> ValidationCheckResult:
    passed = not issues
    return ValidationCheckResult(
        rule=rule,
        label=label or rule.value,
        passed=passed,
        severity=Severity.INFO if passed else rule.severity,
        message=ok_message if passed else "; ".join(issues),
    )


# ----------------------------------------------------------------------
# Rule 1: format and structure
# ----------------------------------------------------------------------

def check_format(record: Optional[dict], raw_output: Any = None) -> ValidationCheckResult:
    """The output must be a record with non-empty task, result and reasoning."""
    issues: List[str] = []
    if record is None:
        issues.append(f"Output must be a JSON object, got {type(raw_output).__name__}")
    else:
        for field in REQUIRED_FIELDS:
            value = record.get(field)
            if value is None:
                issues.append(f'Missing required field "{field}"')
            elif isinstance(value, str) and not value.strip():
                issues.append(f'Required field "{field}" must not be empty')
    return _check(RuleKind.FORMAT_STRUCTURE, issues, "Format is valid")


# ----------------------------------------------------------------------
# Rule 2: fact grounding
# ----------------------------------------------------------------------

def find_hallucination_markers(text: str) -> List[str]:
    lowered = text.lower()
    return [marker for marker in HALLUCINATION_MARKERS if marker in lowered]


def has_sources(record: Optional[Mapping]) -> bool:
    sources = record.get("sources") if record is not None else None
    if sources is None:
        return False
    if isinstance(sources, str):
        return bool(sources.strip())
    try:
        return len(sources) > 0
    except TypeError:
        return bool(sources)


def check_fact_grounding(record: Optional[dict], raw_output: Any = None) -> ValidationCheckResult:
    """No hedging language, and a citation in the result or a sources field."""
    issues: List[str] = []
    serialized = serialize_output(record if record is not None else raw_output)
    markers = find_hallucination_markers(serialized)
    if markers:
        issues.append(f"Hallucination markers found: {', '.join(markers)}")

    if not CITATION_PATTERN.search(_result_text(record)) and not has_sources(record):
        issues.append("Result has no citations and no sources were given")

    return _check(RuleKind.FACT_GROUNDING, issues, "Output is grounded in cited facts")


# ----------------------------------------------------------------------
# Rule 3: anti-copycat
# ----------------------------------------------------------------------

def check_anti_copycat(
    record: Optional[dict],
    prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
    threshold: Optional[float] = None,
) -> ValidationCheckResult:
    """The result must not be near-identical to an earlier agent's result."""
    if not prior_outputs:
        return _check(RuleKind.ANTI_COPYCAT, [], "No prior outputs to compare against")

    threshold = settings.anti_copycat_threshold if threshold is None else threshold
    current = _result_text(record)
    if not current.strip():
        return _check(RuleKind.ANTI_COPYCAT, [], "No result text to compare")

    issues: List[str] = []
    for prior in prior_outputs:
        previous = _result_text(coerce_output(prior.output))
        if not previous.strip():
            continue
        score = similarity(current, previous)
        logger.debug("Similarity to %s output: %.3f", prior.agent_id, score)
        if score > threshold:
            issues.append(f"Result is too similar to earlier output from {prior.agent_id} (similarity {score:.2f})")

    return _check(RuleKind.ANTI_COPYCAT, issues, "No copied output found")


# ----------------------------------------------------------------------
# Rule 4: consistency
# ----------------------------------------------------------------------

def latest_prior(prior_outputs: Sequence[PriorOutputRecord]) -> Optional[PriorOutputRecord]:
    """Most recent record by timestamp; on equal timestamps the later entry wins."""
    latest: Optional[PriorOutputRecord] = None
    latest_at: Optional[datetime] = None
    for prior in prior_outputs:
        if latest_at is None or prior.timestamp >= latest_at:
            latest, latest_at = prior, prior.timestamp
    return latest


def _equals_ci(value: Any, expected: str) -> bool:
    return isinstance(value, str) and value.strip().lower() == expected


def check_consistency(
    record: Optional[dict],
    brand_context: Optional[BrandContext] = None,
    prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
) -> ValidationCheckResult:
    """Output must agree with the brand context and the latest prior goal."""
    issues: List[str] = []
    if record is None:
        return _check(RuleKind.CONSISTENCY, issues, "Nothing to compare")

    if brand_context is not None:
        if _equals_ci(record.get("pricing"), "premium") and _equals_ci(brand_context.pricing_tier, "free"):
            issues.append("Premium pricing contradicts the brand's free tier")

        audience = serialize_output(lookup(record, "targetAudience")).lower()
        if "premium" in audience and _equals_ci(brand_context.budget, "limited"):
            issues.append("Premium target audience does not fit the brand's limited budget")

    if prior_outputs:
        latest = latest_prior(prior_outputs)
        previous_record = coerce_output(latest.output) if latest else None
        previous_goal = previous_record.get("goal") if previous_record else None
        current_goal = record.get("goal")
        if previous_goal and current_goal and previous_goal != current_goal:
            issues.append(f'Goal changed from "{previous_goal}" to "{current_goal}"')

    return _check(RuleKind.CONSISTENCY, issues, "Consistent with brand context and prior outputs")


# ----------------------------------------------------------------------
# Rule 5: agent-specific constraints
# ----------------------------------------------------------------------

def _calendar_issues(calendar: Any) -> List[str]:
    if not isinstance(calendar, (list, tuple)):
        return ["contentCalendar must be a list of entries"]
    for entry in calendar:
        if not isinstance(entry, Mapping) or not entry.get("date") or not entry.get("content"):
            return ["Every contentCalendar entry needs a date and content"]
    return []


def check_agent_constraints(agent_id: str, record: Optional[dict]) -> ValidationCheckResult:
    """The agent's required deliverable fields must all be present."""
    required = AGENT_CONSTRAINTS.get(agent_id)
    if required is None:
        return _check(
            RuleKind.AGENT_SPECIFIC_CONSTRAINTS, [],
            f"No agent-specific constraints for {agent_id}",
        )

    issues = [f'Missing "{field}"' for field in required if lookup(record, field) is None]
    if agent_id == "campaign-planner" and lookup(record, "contentCalendar") is not None:
        issues.extend(_calendar_issues(lookup(record, "contentCalendar")))

    return _check(
        RuleKind.AGENT_SPECIFIC_CONSTRAINTS, issues,
        "All agent constraints are met",
        label=constraint_label(agent_id),
    )

"""Quality gate: scores an agent output before it is shown to the user.

Five rules run in a fixed order. The score starts at 100, each failing rule
subtracts its penalty (carried on RuleKind) and the result is floored at 0.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from contracts import (
    BrandContext,
    PriorOutputRecord,
    RuleKind,
    ValidationCheckResult,
    ValidationIssue,
    ValidationResult,
)
from quality.rules import (
    check_agent_constraints,
    check_anti_copycat,
    check_consistency,
    check_fact_grounding,
    check_format,
)
from quality.structured import coerce_output
from config import settings

logger = logging.getLogger(__name__)

MAX_SCORE = 100

VALIDATION_RULES_SUMMARY: Dict[str, Dict[str, Any]] = {
    rule.value: {
        "penalty": rule.penalty,
        "severity": rule.severity.value,
        "category": rule.category.value,
        "suggestion": rule.suggestion,
    }
    for rule in RuleKind
}


class QualityGate:
    """Runs the five-rule validation pipeline over agent output."""

    def __init__(self, pass_score: Optional[int] = None, anti_copycat_threshold: Optional[float] = None):
        """Initialize the gate.

        Args:
            pass_score: Minimum score to pass, defaults to settings.quality_pass_score
            anti_copycat_threshold: Similarity that counts as a copy
        """
        self.pass_score = settings.quality_pass_score if pass_score is None else pass_score
        self.anti_copycat_threshold = (
            settings.anti_copycat_threshold if anti_copycat_threshold is None
            else anti_copycat_threshold
        )

    def run_checks(
        self,
        agent_id: str,
        output: Any,
        brand_context: Optional[BrandContext] = None,
        prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
    ) -> List[ValidationCheckResult]:
        """Run every rule and return the checklist in rule order."""
        record = coerce_output(output)
        return [
            check_format(record, output),
            check_fact_grounding(record, output),
            check_anti_copycat(record, prior_outputs, self.anti_copycat_threshold),
            check_consistency(record, brand_context, prior_outputs),
            check_agent_constraints(agent_id, record),
        ]

    def validate(
        self,
        agent_id: str,
        output: Any,
        brand_context: Optional[BrandContext] = None,
        prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
    ) -> ValidationResult:
        """Validate one agent output.

        Never raises on malformed output: None, plain text, or a dict
        missing everything simply fails the format rule.

        Args:
            agent_id: Agent that produced the output
            output: Raw output (dict, pydantic model or JSON text)
            brand_context: Brand facts to check consistency against
            prior_outputs: Earlier outputs in the session

        Returns:
            ValidationResult with score, checklist, issues and recommendations
        """
        checklist = self.run_checks(agent_id, output, brand_context, prior_outputs)

        score = MAX_SCORE
        issues: List[ValidationIssue] = []
        for check in checklist:
            if check.passed:
                continue
            score -= check.rule.penalty
            issues.append(ValidationIssue(
                rule=check.rule,
                category=check.rule.category,
                severity=check.rule.severity,
                message=check.message,
                suggestion=check.rule.suggestion,
            ))
        score = max(0, score)

        passed = score >= self.pass_score
        result = ValidationResult(
            agent_id=agent_id,
            passed=passed,
            score=score,
            checklist=checklist,
            issues=issues,
            recommendations=[issue.suggestion for issue in issues],
        )

        if passed:
            logger.info("Output from %s passed the quality gate (score %d)", agent_id, score)
        else:
            logger.info(
                "Output from %s failed the quality gate (score %d): %s",
                agent_id, score, [rule.value for rule in result.failed_rules()],
            )
        return result


def validate_agent_output(
    agent_id: str,
    output: Any,
    brand_context: Optional[BrandContext] = None,
    prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
) -> ValidationResult:
    """Convenience function to validate output with the default gate.

    Args:
        agent_id: Agent that produced the output
        output: Raw output to validate
        brand_context: Optional brand facts
        prior_outputs: Optional session history

    Returns:
        ValidationResult for the output
    """
    return QualityGate().validate(agent_id, output, brand_context, prior_outputs)

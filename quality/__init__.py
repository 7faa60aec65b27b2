"""Quality gate for agent output: similarity, rules, scoring and rephrase checks."""

from .similarity import edit_distance, similarity
from .structured import coerce_output, serialize_output
from .rules import AGENT_CONSTRAINTS, HALLUCINATION_MARKERS, CITATION_PATTERN
from .gate import QualityGate, validate_agent_output, VALIDATION_RULES_SUMMARY
from .plagiarism import anti_copycat_check

__all__ = [
    "edit_distance",
    "similarity",
    "coerce_output",
    "serialize_output",
    "AGENT_CONSTRAINTS",
    "HALLUCINATION_MARKERS",
    "CITATION_PATTERN",
    "QualityGate",
    "validate_agent_output",
    "VALIDATION_RULES_SUMMARY",
    "anti_copycat_check",
]

"""Data Guardian: six content checks run before brand content is published.

Checks run in a fixed order (isolation, anti-copycat, fact check, USP
grounding, reference validation, consistency). A failing critical check
blocks the content; a failing warning check only flags it.
"""

import logging
import re
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from contracts import (
    BrandContext,
    DataGuardReport,
    GuardCheck,
    GuardStatus,
    Severity,
    ToneOfVoice,
)
from guard.isolation import find_artists, mood_suggestion
from quality.plagiarism import anti_copycat_check
from config import settings

logger = logging.getLogger(__name__)

CHECK_NAMES: Dict[str, str] = {
    "isolation": "Brand Data Isolation",
    "anti_copycat": "Anti-Copycat & IP Protection",
    "fact_check": "Fact Check & No Hallucination",
    "usp_grounding": "USP Grounding",
    "reference_validation": "Reference Validation",
    "consistency": "Consistency Check",
}

# Requests that reach into another brand's data
CROSS_BRAND_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"\b(clone|copy|duplicate|steal)\b[^.\n]*\b(brand|competitor)", re.IGNORECASE),
    re.compile(r"\bcompetitor'?s?\s+(internal\s+|private\s+|confidential\s+)?data\b", re.IGNORECASE),
    re.compile(r"\bother\s+brand'?s?\s+(info|information|data)\b", re.IGNORECASE),
)

# (pattern, risk) pairs for quantitative claims that usually need a source
UNSOURCED_CLAIM_PATTERNS: Tuple[Tuple[Pattern, str], ...] = (
    (re.compile(r"\d+%\s+(increase|decrease|growth)", re.IGNORECASE), "high"),
    (re.compile(r"\$\d+[KM]?\s+(revenue|sales|profit)", re.IGNORECASE), "high"),
    (re.compile(r"\b(study|research|report)\s+shows\b|\bfound that\b", re.IGNORECASE), "medium"),
    (re.compile(r"\b(according to|data reveals|statistics show)\b", re.IGNORECASE), "medium"),
)

# (usp words, contradicting words, label)
USP_CONTRADICTIONS: Tuple[Tuple[Pattern, Pattern, str], ...] = (
    (re.compile(r"sustainable|eco|green"), re.compile(r"plastic|disposable|waste"), "Environmental"),
    (re.compile(r"premium|luxury|high-end"), re.compile(r"cheap|budget|economy"), "Premium"),
    (re.compile(r"fast|quick|speed"), re.compile(r"slow|delay|waiting"), "Speed"),
    (re.compile(r"safe|secure|protect"), re.compile(r"risk|danger|unsafe"), "Safety"),
)

CITATION_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"\[source.*?\]", re.IGNORECASE),
    re.compile(r"according to.*?\(", re.IGNORECASE),
    re.compile(r"\(source:.*?\)", re.IGNORECASE),
    re.compile(r"ref\. \d+", re.IGNORECASE),
    re.compile(r"\b(via|from|per)\b", re.IGNORECASE),
)

DATA_CLAIM_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"trend|viral|trending|popular", re.IGNORECASE),
    re.compile(r"\d+%"),
    re.compile(r"research|study|survey", re.IGNORECASE),
)

# Language that clashes with a declared tone of voice
TONE_MISMATCH_PATTERNS: Dict[ToneOfVoice, Pattern] = {
    ToneOfVoice.FORMAL: re.compile(r"\b(lol|omg+|haha|lmao)\b", re.IGNORECASE),
    ToneOfVoice.PLAYFUL: re.compile(r"\b(however|thus|furthermore|nevertheless)\b", re.IGNORECASE),
    ToneOfVoice.PROFESSIONAL: re.compile(r"\b(yo|dude|bro|pal)\b", re.IGNORECASE),
}


class DataGuardian:
    """Runs the content checks for one brand's content."""

    def __init__(
        self,
        usp_grounding_min_length: Optional[int] = None,
        mood_check_min_length: Optional[int] = None,
    ):
        self.usp_grounding_min_length = (
            settings.usp_grounding_min_length if usp_grounding_min_length is None
            else usp_grounding_min_length
        )
        self.mood_check_min_length = (
            settings.mood_check_min_length if mood_check_min_length is None
            else mood_check_min_length
        )

    def validate_content(
        self,
        brand_context: Optional[BrandContext],
        content: str,
        original_content: Optional[str] = None,
        references: Optional[Sequence[str]] = None,
        content_id: Optional[str] = None,
    ) -> DataGuardReport:
        """Run all six checks over a piece of content.

        Args:
            brand_context: The session's brand, None when no brand is selected
            content: Text to check
            original_content: Source text when the content is a rephrase
            references: Sources the author supplied for the content
            content_id: Identifier echoed into the report

        Returns:
            DataGuardReport with every check and the overall status
        """
        content = content or ""
        checks = {
            "isolation": self.check_isolation(brand_context, content),
            "anti_copycat": self.check_anti_copycat(brand_context, content, original_content),
            "fact_check": self.check_facts(content),
            "usp_grounding": self.check_usp_grounding(brand_context, content),
            "reference_validation": self.check_references(content, references),
            "consistency": self.check_consistency(brand_context, content),
        }

        failed = [check for check in checks.values() if not check.passed]
        if any(check.severity == Severity.CRITICAL for check in failed):
            status = GuardStatus.BLOCKED
        elif failed:
            status = GuardStatus.WARNING
        else:
            status = GuardStatus.PASSED

        recommendations = [f"[{check.name}] {check.suggestion}" for check in failed if check.suggestion]

        if status == GuardStatus.BLOCKED:
            logger.warning("Content %s blocked: %s", content_id or "-", [c.check_id for c in failed])
        else:
            logger.info("Content %s guard status: %s", content_id or "-", status.value)

        return DataGuardReport(
            content_id=content_id,
            checks=checks,
            overall_status=status,
            recommendations=recommendations,
        )

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _result(
        self,
        check_id: str,
        passed: bool,
        message: str,
        severity: Severity = Severity.INFO,
        suggestion: Optional[str] = None,
        source: Optional[str] = None,
    ) -> GuardCheck:
        return GuardCheck(
            check_id=check_id,
            name=CHECK_NAMES[check_id],
            passed=passed,
            severity=Severity.INFO if passed else severity,
            message=message,
            suggestion=suggestion,
            source=source,
        )

    def check_isolation(self, brand_context: Optional[BrandContext], content: str) -> GuardCheck:
        if brand_context is None:
            return self._result(
                "isolation", False,
                "No brand context; data isolation cannot be verified",
                Severity.CRITICAL,
                suggestion="Sign in and select your brand",
            )
        for pattern in CROSS_BRAND_PATTERNS:
            if pattern.search(content):
                return self._result(
                    "isolation", False,
                    "Content tries to reach another brand's data",
                    Severity.CRITICAL,
                    suggestion="Access denied; use only your own brand's data",
                )
        return self._result(
            "isolation", True, "Brand data is isolated",
            source=f"Brand ID: {brand_context.brand_id}",
        )

    def check_anti_copycat(
        self,
        brand_context: Optional[BrandContext],
        content: str,
        original_content: Optional[str] = None,
    ) -> GuardCheck:
        rephrase = anti_copycat_check(original_content, content)
        if rephrase.severity != Severity.INFO:
            return self._result(
                "anti_copycat", False, rephrase.message, rephrase.severity,
                suggestion="; ".join(rephrase.recommendations) or None,
            )

        artists = find_artists(content)
        if artists:
            return self._result(
                "anti_copycat", False,
                f"Named artists must not be referenced: {', '.join(artists)}",
                Severity.WARNING,
                suggestion=mood_suggestion(brand_context),
            )
        return self._result("anti_copycat", True, rephrase.message)

    def check_facts(self, content: str) -> GuardCheck:
        details = []
        for pattern, risk in UNSOURCED_CLAIM_PATTERNS:
            match = pattern.search(content)
            if match:
                details.append(f'{risk.upper()}: "{match.group(0)}"')
        if details:
            return self._result(
                "fact_check", False,
                "Quantitative claims without a visible source",
                Severity.WARNING,
                suggestion=f"Mark figures as estimates or name the source: {', '.join(details)}",
                source=f"Potential hallucination: {len(details)} items detected",
            )
        return self._result("fact_check", True, "No unsupported figures found")

    def check_usp_grounding(self, brand_context: Optional[BrandContext], content: str) -> GuardCheck:
        usp = brand_context.usp_text() if brand_context is not None else ""
        if not usp.strip():
            return self._result("usp_grounding", True, "Skipped, no core USP on record")

        usp_lower = usp.lower()
        content_lower = content.lower()
        for usp_pattern, opposite_pattern, label in USP_CONTRADICTIONS:
            if usp_pattern.search(usp_lower) and opposite_pattern.search(content_lower):
                return self._result(
                    "usp_grounding", False,
                    f"Content contradicts the USP ({label})",
                    Severity.WARNING,
                    suggestion=f'Align the content with your USP: "{usp}"',
                    source=f"USP: {usp}",
                )

        usp_words = [word for word in usp.split() if len(word) > 3]
        mentioned = [word for word in usp_words if word.lower() in content_lower]
        if usp_words and not mentioned and len(content) > self.usp_grounding_min_length:
            return self._result(
                "usp_grounding", False,
                "Content does not highlight the brand's USP",
                Severity.WARNING,
                suggestion=f'Work in elements of: "{usp}"',
                source=f"Expected: {', '.join(usp_words)}",
            )
        return self._result("usp_grounding", True, "Content is consistent with the core USP", source=f"USP: {usp}")

    def check_references(self, content: str, references: Optional[Sequence[str]] = None) -> GuardCheck:
        references = list(references or [])
        has_citations = any(pattern.search(content) for pattern in CITATION_PATTERNS)
        has_data_claims = any(pattern.search(content) for pattern in DATA_CLAIM_PATTERNS)

        if has_data_claims and not has_citations and not references:
            return self._result(
                "reference_validation", False,
                "Data is referenced without a source",
                Severity.WARNING,
                suggestion='Add a source, e.g. "based on today\'s TikTok trends" or "estimated from our survey"',
                source="Data claims detected without citations",
            )
        if has_citations or references:
            return self._result(
                "reference_validation", True,
                f"Sources are cited ({len(references)} references)",
                source=f"References: {', '.join(references)}" if references else None,
            )
        return self._result("reference_validation", True, "No claims that need a source")

    def check_consistency(self, brand_context: Optional[BrandContext], content: str) -> GuardCheck:
        if brand_context is None:
            return self._result("consistency", True, "Skipped, no brand context")

        issues = []
        tone_pattern = TONE_MISMATCH_PATTERNS.get(brand_context.tone_of_voice)
        if tone_pattern is not None and tone_pattern.search(content):
            issues.append(
                f"Tone mismatch: {brand_context.tone_of_voice.value} tone doesn't fit the language used"
            )

        moods = brand_context.mood_keywords
        content_lower = content.lower()
        if moods and len(content) > self.mood_check_min_length:
            if not any(mood.lower() in content_lower for mood in moods):
                issues.append(f'Mood mismatch: expected mood keywords like "{", ".join(moods)}"')

        forbidden = [
            word for word in brand_context.forbidden_words
            if word.strip() and re.search(rf"\b{re.escape(word.lower())}\b", content_lower)
        ]
        if forbidden:
            issues.append(f"Forbidden words used: {', '.join(forbidden)}")

        if issues:
            return self._result(
                "consistency", False,
                "Content is inconsistent with the brand voice",
                Severity.WARNING,
                suggestion="; ".join(issues),
                source=f"Tone: {brand_context.tone_of_voice.value}, Mood: {', '.join(moods)}",
            )
        return self._result("consistency", True, "Content is consistent with the brand voice")

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @staticmethod
    def render_report(report: DataGuardReport) -> str:
        """Render a report as plain text."""
        lines = [
            "DATA GUARDIAN REPORT",
            f"Status: {report.overall_status.value.upper()}",
            f"Time: {report.timestamp.isoformat(timespec='seconds')}",
        ]
        if report.content_id:
            lines.append(f"Content: {report.content_id}")
        lines.append("")
        lines.append("Checks:")
        for check in report.checks.values():
            mark = "PASS" if check.passed else check.severity.value.upper()
            lines.append(f"  [{mark}] {check.name}: {check.message}")
            if check.suggestion and not check.passed:
                lines.append(f"      -> {check.suggestion}")
        if report.recommendations:
            lines.append("")
            lines.append("Recommendations:")
            lines.extend(f"  - {item}" for item in report.recommendations)
        return "\n".join(lines)

"""Pairwise rephrase check: is the new text a real rewrite of the original?"""

import logging
import re
from typing import Optional

from contracts import RephraseCheck, Severity
from quality.similarity import similarity
from config import settings

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def rephrase_similarity(original: Optional[str], candidate: Optional[str]) -> float:
    """Similarity with all whitespace removed, so re-spacing is not a rewrite."""
    return similarity(
        _WHITESPACE.sub("", original or ""),
        _WHITESPACE.sub("", candidate or ""),
    )


def anti_copycat_check(
    original: Optional[str],
    candidate: Optional[str],
    block_threshold: Optional[float] = None,
    warn_threshold: Optional[float] = None,
) -> RephraseCheck:
    """Compare a rephrased text against its original.

    Args:
        original: Source text the candidate was derived from
        candidate: New text
        block_threshold: Similarity above which the candidate is rejected
        warn_threshold: Similarity above which the candidate is flagged

    Returns:
        RephraseCheck; passed is False only above the block threshold
    """
    block = settings.plagiarism_block_threshold if block_threshold is None else block_threshold
    warn = settings.plagiarism_warn_threshold if warn_threshold is None else warn_threshold

    if not (original or "").strip():
        return RephraseCheck(
            passed=True,
            similarity=0.0,
            severity=Severity.INFO,
            message="New content, no original to compare against",
        )

    score = rephrase_similarity(original, candidate)
    percent = round(score * 100)
    logger.debug("Rephrase similarity %.3f", score)

    if score > block:
        logger.warning("Rephrase rejected, %d%% similar to the original", percent)
        return RephraseCheck(
            passed=False,
            similarity=score,
            severity=Severity.CRITICAL,
            message=f"{percent}% similar to the original; it must be genuinely rewritten",
            recommendations=["Rewrite it in the brand's own voice and tone"],
        )
    if score > warn:
        return RephraseCheck(
            passed=True,
            similarity=score,
            severity=Severity.WARNING,
            message=f"{percent}% similar to the original; consider reworking it",
            recommendations=["Change the sentence structure and vocabulary further"],
        )
    return RephraseCheck(
        passed=True,
        similarity=score,
        severity=Severity.INFO,
        message=f"{percent}% similar to the original (accepted up to {round(warn * 100)}%)",
    )

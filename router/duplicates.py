"""Duplicate-work detection against the session's prior outputs."""

import logging
from typing import List, Optional, Sequence

from contracts import DuplicateWorkReport, JobRequest, PriorOutputRecord

logger = logging.getLogger(__name__)


def detect_duplicate_work(
    current: JobRequest,
    prior_outputs: Optional[Sequence[PriorOutputRecord]] = None,
) -> DuplicateWorkReport:
    """Flag agents that already answered the same request.

    A prior record counts as duplicate work when the intent echoed in its
    output equals the current intent exactly. Near-identical wording is not
    caught here; the quality gate compares result text by similarity.

    Args:
        current: The incoming request
        prior_outputs: Session history, defaults to ``current.prior_outputs``

    Returns:
        DuplicateWorkReport listing each duplicate agent once, first seen first
    """
    records = current.prior_outputs if prior_outputs is None else prior_outputs
    if not records or not current.intent:
        return DuplicateWorkReport(is_duplicate=False, duplicate_agents=[])

    duplicates: List[str] = []
    for record in records:
        if record.intent_echo() == current.intent and record.agent_id not in duplicates:
            duplicates.append(record.agent_id)

    if duplicates:
        logger.info("Duplicate work detected for intent %r: %s", current.intent, duplicates)
    return DuplicateWorkReport(is_duplicate=bool(duplicates), duplicate_agents=duplicates)

"""Intent router: picks the agent(s) that should handle a job request.

Scoring is a keyword heuristic. A request keyword matches a bucket when
either string contains the other, ignoring case. The two-way containment
means short keywords can match unrelated words ("ui" inside "build");
tests pin that behaviour down.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from contracts import AntiOverlap, JobRequest, RoutingDecision, RuleKind
from router.buckets import JOB_CLASSIFICATION, JobBucket
from config import settings

logger = logging.getLogger(__name__)

ASK_FOR_CLARIFICATION = "ask_for_clarification"


def normalise_keywords(keywords: Sequence[str]) -> List[str]:
    """Strip, lower-case and de-duplicate request keywords, dropping empties."""
    normalised: List[str] = []
    for keyword in keywords:
        if not isinstance(keyword, str):
            continue
        keyword = keyword.strip().lower()
        if keyword and keyword not in normalised:
            normalised.append(keyword)
    return normalised


def match_bucket(keywords: Sequence[str], bucket: JobBucket) -> List[str]:
    """Request keywords that match at least one of the bucket's keywords."""
    bucket_keywords = [kw.lower() for kw in bucket.keywords]
    return [
        keyword for keyword in keywords
        if any(keyword in bucket_kw or bucket_kw in keyword for bucket_kw in bucket_keywords)
    ]


class IntentRouter:
    """Routes job requests to agents by keyword-bucket scoring."""

    def __init__(
        self,
        buckets: Optional[Sequence[JobBucket]] = None,
        escalation_agent_id: Optional[str] = None,
        max_secondary_buckets: Optional[int] = None,
    ):
        """Initialize the router.

        Args:
            buckets: Job buckets in declaration order, defaults to JOB_CLASSIFICATION
            escalation_agent_id: Agent returned when nothing matches
            max_secondary_buckets: Runner-up buckets that contribute secondary agents
        """
        self.buckets = list(buckets) if buckets is not None else list(JOB_CLASSIFICATION)
        self.escalation_agent_id = escalation_agent_id or settings.escalation_agent_id
        self.max_secondary_buckets = (
            max_secondary_buckets if max_secondary_buckets is not None
            else settings.max_secondary_buckets
        )

    def score(self, request: JobRequest) -> List[Tuple[JobBucket, float, List[str]]]:
        """Score every bucket and return the matches, best first.

        Python's sort is stable, so buckets with equal scores keep their
        declaration order.
        """
        keywords = normalise_keywords(request.keywords)
        matches = []
        for bucket in self.buckets:
            matched = match_bucket(keywords, bucket)
            if matched:
                matches.append((bucket, len(matched) / len(bucket.keywords), matched))
        matches.sort(key=lambda match: match[1], reverse=True)
        for bucket, score, matched in matches:
            logger.debug("Bucket %s scored %.3f on %s", bucket.job_type, score, matched)
        return matches

    def route(self, request: JobRequest) -> RoutingDecision:
        """Decide which agent(s) should handle a request.

        Args:
            request: The job request with its extracted keywords

        Returns:
            RoutingDecision; a zero-confidence escalation when no bucket matches
        """
        matches = self.score(request)
        if not matches:
            logger.warning("No job bucket matched keywords %s, escalating", request.keywords)
            return self._escalate()

        top_bucket, top_score, matched = matches[0]
        primary = top_bucket.primary_agent

        secondary: List[str] = []
        for bucket, _, _ in matches[1:1 + self.max_secondary_buckets]:
            for agent_id in bucket.agents:
                if agent_id != primary and agent_id not in secondary:
                    secondary.append(agent_id)

        skip_agents = list(top_bucket.must_not_overlap_with)
        confidence = min(1.0, top_score)
        decision = RoutingDecision(
            primary_agent=primary,
            secondary_agents=secondary,
            confidence=confidence,
            reasoning=(
                f"Matched {top_bucket.job_type} on {', '.join(matched)} "
                f"({len(matched)}/{len(top_bucket.keywords)} keywords)"
            ),
            validation_rules=[rule.value for rule in RuleKind],
            anti_overlap=AntiOverlap(needs_dedup=bool(skip_agents), skip_agents=skip_agents),
            job_type=top_bucket.job_type,
            matched_keywords=matched,
        )
        logger.info(
            "Routed to %s (%s, confidence %.2f)", primary, top_bucket.job_type, confidence
        )
        return decision

    def _escalate(self) -> RoutingDecision:
        return RoutingDecision(
            primary_agent=self.escalation_agent_id,
            secondary_agents=[],
            confidence=0.0,
            reasoning="No suitable agent found; more information is needed from the user",
            validation_rules=[ASK_FOR_CLARIFICATION],
            anti_overlap=AntiOverlap(needs_dedup=False, skip_agents=[]),
            job_type=None,
        )


def route_request(request: JobRequest) -> RoutingDecision:
    """Convenience function to route a request with the default buckets.

    Args:
        request: The job request to route

    Returns:
        RoutingDecision for the request
    """
    return IntentRouter().route(request)

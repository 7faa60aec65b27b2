"""Router module for keyword extraction, intent routing and duplicate detection."""

from .keywords import extract_keywords
from .buckets import JobBucket, JOB_CLASSIFICATION
from .intent_router import IntentRouter, route_request
from .duplicates import detect_duplicate_work

__all__ = [
    "extract_keywords",
    "JobBucket",
    "JOB_CLASSIFICATION",
    "IntentRouter",
    "route_request",
    "detect_duplicate_work",
]

"""Keyword extraction for free-text job requests."""

import re
from typing import List

from registry.catalog import AGENT_CATALOG

# Letters, digits and the punctuation that shows up inside tool names ("make.com")
_TOKEN_PATTERN = re.compile(r"[\w][\w.'\-]*", re.UNICODE)

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "then", "so", "of", "for", "to",
    "in", "on", "at", "by", "with", "from", "into", "about", "as", "is", "are",
    "was", "were", "be", "been", "it", "its", "this", "that", "these", "those",
    "i", "me", "my", "we", "our", "us", "you", "your", "they", "their", "them",
    "please", "can", "could", "would", "should", "will", "do", "does", "need",
    "want", "help", "some", "any", "all", "new", "make", "get", "give", "let",
    "what", "how", "which", "who", "why", "when", "there", "here", "also",
})

# Catalog phrases that lose their meaning when split into words
MULTI_WORD_PHRASES: List[str] = sorted(
    {kw for agent in AGENT_CATALOG for kw in agent.keywords if " " in kw},
    key=len,
    reverse=True,
)


def extract_keywords(text: str) -> List[str]:
    """Derive routing keywords from raw request text.

    Multi-word catalog phrases found in the text come first, then the
    remaining word tokens minus stop words. Duplicates are dropped,
    keeping first-seen order.
    """
    if not text:
        return []

    lowered = text.lower()
    keywords: List[str] = []
    seen = set()

    for phrase in MULTI_WORD_PHRASES:
        if phrase in lowered and phrase not in seen:
            keywords.append(phrase)
            seen.add(phrase)

    for token in _TOKEN_PATTERN.findall(lowered):
        token = token.strip(".'-")
        if not token or token in STOP_WORDS or token in seen:
            continue
        keywords.append(token)
        seen.add(token)

    return keywords

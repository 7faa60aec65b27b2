"""Brand isolation and the trademark / artist blocklist."""

import logging
import re
from typing import List, Optional, Tuple

from contracts import BlocklistResult, BrandContext, IsolationDecision

logger = logging.getLogger(__name__)

PROTECTED_SLOGANS: Tuple[str, ...] = (
    "just do it",
    "i'm lovin' it",
    "think different",
    "because you're worth it",
    "open happiness",
    "impossible is nothing",
    "the happiest place on earth",
    "have it your way",
    "finger lickin' good",
    "melts in your mouth, not in your hands",
    "the ultimate driving machine",
    "taste the rainbow",
    "red bull gives you wings",
    "connecting people",
)

PROTECTED_ARTISTS: Tuple[str, ...] = (
    "picasso",
    "warhol",
    "monet",
    "van gogh",
    "banksy",
    "kaws",
    "basquiat",
    "dali",
    "kusama",
    "haring",
    "hokusai",
    "frida kahlo",
)

GENERIC_MOOD_SUGGESTION = 'describe the mood instead, e.g. "bold, colourful and expressive"'

_APOSTROPHES = re.compile(r"[‘’ʼ`´]")
_WHITESPACE = re.compile(r"\s+")


def normalise_text(text: str) -> str:
    """Lower-case, straighten apostrophes and collapse whitespace."""
    text = _APOSTROPHES.sub("'", text or "")
    return _WHITESPACE.sub(" ", text).strip().lower()


def check_isolation(brand_context: Optional[BrandContext], requested_brand_id: Optional[str]) -> IsolationDecision:
    """Allow a request only inside the session's own brand.

    Args:
        brand_context: The session's brand, None when no brand is selected
        requested_brand_id: Brand the request wants to read or write

    Returns:
        IsolationDecision with a reason either way
    """
    if brand_context is None:
        logger.warning("Isolation denied: no brand context for request on %s", requested_brand_id)
        return IsolationDecision(allowed=False, reason="No brand context; select a brand first")
    if requested_brand_id != brand_context.brand_id:
        logger.warning(
            "Isolation denied: session brand %s, requested %s",
            brand_context.brand_id, requested_brand_id,
        )
        return IsolationDecision(
            allowed=False,
            reason=f"Brand {requested_brand_id!r} is outside this session's brand {brand_context.brand_id!r}",
        )
    return IsolationDecision(allowed=True, reason=f"Scoped to brand {brand_context.brand_id}")


def find_slogans(text: str) -> List[str]:
    normalised = normalise_text(text)
    return [slogan for slogan in PROTECTED_SLOGANS if slogan in normalised]


def find_artists(text: str) -> List[str]:
    """Artist names appearing as whole words ("monetize" is not Monet)."""
    normalised = normalise_text(text)
    return [
        artist for artist in PROTECTED_ARTISTS
        if re.search(rf"\b{re.escape(artist)}\b", normalised)
    ]


def mood_suggestion(brand_context: Optional[BrandContext]) -> str:
    if brand_context is not None and brand_context.mood_keywords:
        return f"use the brand's mood keywords instead: {', '.join(brand_context.mood_keywords)}"
    return GENERIC_MOOD_SUGGESTION


def check_trademark_and_artist_blocklist(
    text: str,
    brand_context: Optional[BrandContext] = None,
) -> BlocklistResult:
    """Scan text for protected slogans and named visual artists.

    Args:
        text: Generated text or prompt to scan
        brand_context: Used to suggest mood keywords in place of artist names

    Returns:
        BlocklistResult; passed is False on any match
    """
    slogans = find_slogans(text)
    artists = find_artists(text)

    issues: List[str] = []
    suggestions: List[str] = []
    for slogan in slogans:
        issues.append(f'Protected slogan "{slogan}" must not be used')
    if slogans:
        suggestions.append("Write an original line in the brand's own voice")
    for artist in artists:
        issues.append(f'Named artist "{artist}" must not be referenced; {mood_suggestion(brand_context)}')
    if artists:
        suggestions.append(f"Replace artist names: {mood_suggestion(brand_context)}")

    if issues:
        logger.warning("Blocklist hits: slogans=%s artists=%s", slogans, artists)
    return BlocklistResult(
        passed=not issues,
        issues=issues,
        suggestions=suggestions,
        matched_slogans=slogans,
        matched_artists=artists,
    )

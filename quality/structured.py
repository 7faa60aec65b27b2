"""Coercion of raw agent output into a structured record.

Agent output arrives as a dict, a pydantic model, or the raw LLM text that
should contain a JSON object (often wrapped in a markdown code block).
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _strip_code_fence(text: str) -> str:
    # Handle markdown code blocks
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    if "```" in text:
        start = text.find("```") + 3
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    return text


def parse_json_object(text: str) -> Optional[dict]:
    """Parse the first JSON object found in LLM text, or None."""
    text = _strip_code_fence(text.strip())
    if not text.startswith("{"):
        start, end = text.find("{"), text.rfind("}")
        if start == -1 or end <= start:
            return None
        text = text[start:end + 1]
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Output text is not valid JSON")
        return None
    return data if isinstance(data, dict) else None


def coerce_output(output: Any) -> Optional[dict]:
    """Return the output as a dict, or None when it is not a structured record.

    Args:
        output: Agent output as a mapping, pydantic model or JSON text

    Returns:
        A dict view of the output, or None
    """
    if isinstance(output, Mapping):
        return dict(output)
    if isinstance(output, BaseModel):
        try:
            return output.model_dump()
        except (ValueError, TypeError, RecursionError):
            logger.debug("Could not dump %s", type(output).__name__)
            return None
    if isinstance(output, (str, bytes)):
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        return parse_json_object(output)
    return None


def serialize_output(output: Any) -> str:
    """Render any output as text for phrase scanning. Never raises."""
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    try:
        if isinstance(output, BaseModel):
            return output.model_dump_json()
        return json.dumps(output, ensure_ascii=False, default=str)
    except (ValueError, TypeError, RecursionError):
        # Circular references end up here
        pass
    try:
        return repr(output)
    except RecursionError:
        # Nesting too deep to render at all
        return ""

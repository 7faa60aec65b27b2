"""Configuration settings for the Brand Orchestrator engine."""

import logging
from typing import Dict, List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the routing and quality-gate engine.

    Settings can be overridden via environment variables with BRAND_ORCHESTRATOR_ prefix.
    Example: BRAND_ORCHESTRATOR_QUALITY_PASS_SCORE=75
    """

    # Quality gate
    quality_pass_score: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Minimum score for an agent output to pass the quality gate"
    )
    anti_copycat_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Similarity above which an output counts as a copy of a prior output"
    )

    # Pairwise rephrase check
    plagiarism_block_threshold: float = Field(
        default=0.9,
        ge=0.0,
        le=1.0,
        description="Similarity above which a rephrase is rejected outright"
    )
    plagiarism_warn_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Similarity above which a rephrase is flagged for rework"
    )

    # Router
    escalation_agent_id: str = Field(
        default="orchestrator",
        description="Agent identity returned when no job bucket matches a request"
    )
    max_secondary_buckets: int = Field(
        default=2,
        ge=0,
        description="How many runner-up buckets contribute secondary agents"
    )

    # Data guardian
    usp_grounding_min_length: int = Field(
        default=100,
        description="Content longer than this must mention at least one USP word"
    )
    mood_check_min_length: int = Field(
        default=200,
        description="Content longer than this must mention at least one mood keyword"
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI"
    )

    model_config = {
        "env_prefix": "BRAND_ORCHESTRATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Cluster display names used in summaries and the CLI
CLUSTER_LABELS: Dict[str, str] = {
    "strategy": "The Strategist",
    "creative": "The Studio",
    "growth": "The Agency",
}

# Workflow phase labels, one per execution phase
PHASE_LABELS: Dict[int, str] = {
    1: "Strategy",
    2: "Creative",
    3: "Growth",
    4: "Measurement",
}

SYSTEM_RULES: List[str] = [
    "Brand Data Isolation",
    "Anti-Copycat Protection",
    "Fact Check Validation",
]


def configure_logging(level: Optional[str] = None) -> None:
    """Route library log records through rich. Only entry points call this."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# Create singleton instance
settings = Settings()

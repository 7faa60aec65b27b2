"""Job classification buckets used by the intent router.

Each bucket maps a job type to the agent that owns it, the keywords that
select it and the agents that must not also work on it. Keywords are read
from the owning agent's registry descriptor so there is one keyword source.
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field

from registry.catalog import AGENT_CATALOG


class JobBucket(BaseModel):
    """One job classification."""
    job_type: str = Field(..., description="Bucket name, e.g. MARKET_ANALYSIS")
    agents: Tuple[str, ...] = Field(..., min_length=1, description="Owning agent first")
    keywords: Tuple[str, ...] = Field(..., min_length=1)
    must_not_overlap_with: Tuple[str, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def primary_agent(self) -> str:
        return self.agents[0]


# job type -> (owning agent, agents that must not also run), in declaration order.
# Order matters: on equal scores the earlier bucket wins.
BUCKET_LAYOUT: List[Tuple[str, str, Tuple[str, ...]]] = [
    ("MARKET_ANALYSIS", "market-analyzer", ("positioning-strategist", "analytics-master")),
    ("POSITIONING_STRATEGY", "positioning-strategist", ("market-analyzer", "brand-voice-architect")),
    ("CUSTOMER_INSIGHTS", "customer-insight-specialist", ("analytics-master", "market-analyzer")),
    ("VISUAL_DESIGN", "visual-strategist", ("narrative-designer", "brand-voice-architect")),
    ("BRAND_VOICE", "brand-voice-architect", ("content-creator", "visual-strategist")),
    ("NARRATIVE_STORY", "narrative-designer", ("content-creator", "visual-strategist")),
    ("CONTENT_STRATEGY", "content-creator", ("brand-voice-architect", "campaign-planner")),
    ("CAMPAIGN_PLANNING", "campaign-planner", ("content-creator", "automation-specialist")),
    ("AUTOMATION_SETUP", "automation-specialist", ("campaign-planner",)),
    ("ANALYTICS_MEASUREMENT", "analytics-master", ("customer-insight-specialist", "market-analyzer")),
]


def build_buckets() -> List[JobBucket]:
    """Build the buckets from the catalog's keyword lists."""
    keywords_by_agent: Dict[str, Tuple[str, ...]] = {
        agent.agent_id: agent.keywords for agent in AGENT_CATALOG
    }
    return [
        JobBucket(
            job_type=job_type,
            agents=(agent_id,),
            keywords=keywords_by_agent[agent_id],
            must_not_overlap_with=skip,
        )
        for job_type, agent_id, skip in BUCKET_LAYOUT
    ]


JOB_CLASSIFICATION: List[JobBucket] = build_buckets()

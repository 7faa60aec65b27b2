"""Brand contracts: brand context, isolation and content-guard results."""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from enum import Enum
from datetime import datetime

from .validation_contracts import Severity


class ToneOfVoice(str, Enum):
    """Declared tone of voice for a brand."""
    FORMAL = "formal"
    CASUAL = "casual"
    PLAYFUL = "playful"
    PROFESSIONAL = "professional"
    LUXURY = "luxury"


class BrandContext(BaseModel):
    """Session-scoped brand facts supplied by onboarding. Read-only to the engine."""
    brand_id: str = Field(..., min_length=1, description="Scoping key for brand isolation")
    brand_name: str = Field(default="", description="Display name of the brand")
    industry: str = Field(default="")
    core_usp: List[str] = Field(default_factory=list, description="Core unique selling propositions")
    tone_of_voice: ToneOfVoice = Field(default=ToneOfVoice.PROFESSIONAL)
    target_audience: str = Field(default="")
    mood_keywords: List[str] = Field(default_factory=list, description="Visual mood keywords")
    forbidden_words: List[str] = Field(default_factory=list, description="Words the brand never uses")
    primary_color: Optional[str] = Field(None)
    pricing_tier: Optional[str] = Field(None, description="e.g. free, standard, premium")
    budget: Optional[str] = Field(None, description="e.g. limited, moderate, flexible")

    model_config = {"frozen": True}

    @field_validator("core_usp", mode="before")
    @classmethod
    def _usp_as_list(cls, value: Any) -> Any:
        # Onboarding used to store a single USP string
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value

    def usp_text(self) -> str:
        return " ".join(self.core_usp)


class IsolationDecision(BaseModel):
    """Whether a request may touch a brand's data."""
    allowed: bool
    reason: str


class BlocklistResult(BaseModel):
    """Outcome of the trademark slogan and artist-name scan."""
    passed: bool
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    matched_slogans: List[str] = Field(default_factory=list)
    matched_artists: List[str] = Field(default_factory=list)


class RephraseCheck(BaseModel):
    """Similarity verdict for a rephrased text against its original."""
    passed: bool
    similarity: float = Field(..., ge=0.0, le=1.0)
    severity: Severity
    message: str
    recommendations: List[str] = Field(default_factory=list)


class GuardStatus(str, Enum):
    """Overall data-guard verdict."""
    PASSED = "passed"
    WARNING = "warning"
    BLOCKED = "blocked"


class GuardCheck(BaseModel):
    """Result of one data-guard check."""
    check_id: str
    name: str
    passed: bool
    severity: Severity
    message: str
    suggestion: Optional[str] = None
    source: Optional[str] = None


class DataGuardReport(BaseModel):
    """All data-guard checks for one piece of content."""
    content_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)
    checks: Dict[str, GuardCheck] = Field(default_factory=dict)
    overall_status: GuardStatus = GuardStatus.PASSED
    recommendations: List[str] = Field(default_factory=list)

    def failed_checks(self) -> List[GuardCheck]:
        return [check for check in self.checks.values() if not check.passed]

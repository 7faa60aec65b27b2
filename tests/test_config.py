"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from config import Settings
from quality import QualityGate


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self, monkeypatch):
        """Thresholds default to the documented values."""
        monkeypatch.delenv("BRAND_ORCHESTRATOR_QUALITY_PASS_SCORE", raising=False)
        config = Settings(_env_file=None)
        assert config.quality_pass_score == 70
        assert config.anti_copycat_threshold == 0.8
        assert config.plagiarism_block_threshold == 0.9
        assert config.plagiarism_warn_threshold == 0.7
        assert config.escalation_agent_id == "orchestrator"

    def test_env_override(self, monkeypatch):
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("BRAND_ORCHESTRATOR_QUALITY_PASS_SCORE", "85")
        assert Settings(_env_file=None).quality_pass_score == 85

    def test_out_of_range(self, monkeypatch):
        """Pass scores above 100 are rejected."""
        monkeypatch.setenv("BRAND_ORCHESTRATOR_QUALITY_PASS_SCORE", "150")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_gate_uses_explicit_pass_score(self):
        """An explicit pass score overrides settings."""
        gate = QualityGate(pass_score=90)
        result = gate.validate("market-analyzer", {"task": "t", "result": "r", "reasoning": "x"})
        assert result.score < 90
        assert result.passed is False

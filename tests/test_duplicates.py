"""Tests for duplicate-work detection."""

from contracts import JobRequest, PriorOutputRecord
from router import detect_duplicate_work


def _record(agent_id, intent=None, **fields):
    output = dict(fields)
    if intent is not None:
        output["intent"] = intent
    return PriorOutputRecord(agent_id=agent_id, output=output)


class TestDetectDuplicateWork:
    """Test detect_duplicate_work."""

    def test_no_prior_outputs(self):
        """Without history nothing is a duplicate."""
        report = detect_duplicate_work(JobRequest(intent="SWOT for our coffee brand"))
        assert report.is_duplicate is False
        assert report.duplicate_agents == []

    def test_exact_intent_match(self):
        """A prior record with the same intent is flagged."""
        prior = [_record("market-analyzer", intent="SWOT for our coffee brand", result="...")]
        report = detect_duplicate_work(JobRequest(intent="SWOT for our coffee brand"), prior)
        assert report.is_duplicate is True
        assert report.duplicate_agents == ["market-analyzer"]

    def test_near_match_is_not_flagged(self):
        """Only exact intent equality counts."""
        prior = [_record("market-analyzer", intent="SWOT for our coffee brand.")]
        report = detect_duplicate_work(JobRequest(intent="SWOT for our coffee brand"), prior)
        assert report.is_duplicate is False

    def test_agents_reported_once_in_first_seen_order(self):
        """Repeated agents appear once, in history order."""
        intent = "Plan the launch campaign"
        prior = [
            _record("campaign-planner", intent=intent),
            _record("content-creator", intent=intent),
            _record("campaign-planner", intent=intent),
            _record("market-analyzer", intent="something else"),
        ]
        report = detect_duplicate_work(JobRequest(intent=intent), prior)
        assert report.duplicate_agents == ["campaign-planner", "content-creator"]

    def test_uses_request_history_by_default(self):
        """The request's own prior outputs are used when none are passed."""
        intent = "Design a logo"
        request = JobRequest(intent=intent, prior_outputs=[_record("visual-strategist", intent=intent)])
        assert detect_duplicate_work(request).duplicate_agents == ["visual-strategist"]

    def test_explicit_empty_history_overrides_request(self):
        """An explicit empty list means no history."""
        intent = "Design a logo"
        request = JobRequest(intent=intent, prior_outputs=[_record("visual-strategist", intent=intent)])
        assert detect_duplicate_work(request, []).is_duplicate is False

    def test_records_without_intent_are_ignored(self):
        """Outputs that never echoed an intent, or are not mappings, never match."""
        prior = [
            _record("market-analyzer", result="SWOT"),
            PriorOutputRecord(agent_id="content-creator", output="plain text output"),
            PriorOutputRecord(agent_id="campaign-planner", output=None),
        ]
        report = detect_duplicate_work(JobRequest(intent="SWOT"), prior)
        assert report.is_duplicate is False

    def test_empty_intent_never_duplicates(self):
        """A request without intent text is never a duplicate."""
        prior = [_record("market-analyzer", intent="")]
        assert detect_duplicate_work(JobRequest(intent=""), prior).is_duplicate is False

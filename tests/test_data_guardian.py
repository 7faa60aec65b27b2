"""Tests for the Data Guardian content checks and the rephrase check."""

import pytest

from contracts import BrandContext, GuardStatus, Severity, ToneOfVoice
from guard import DataGuardian
from quality import anti_copycat_check


def _brand(**extra):
    data = {
        "brand_id": "brand-1",
        "brand_name": "Leaf & Co",
        "core_usp": ["Sustainable refillable packaging"],
        "tone_of_voice": ToneOfVoice.PROFESSIONAL,
        "mood_keywords": ["fresh", "natural"],
        "forbidden_words": ["cheapest"],
    }
    data.update(extra)
    return BrandContext(**data)


@pytest.fixture
def guardian():
    return DataGuardian()


class TestAntiCopycatCheck:
    """Test the pairwise rephrase check."""

    def test_no_original(self):
        """New content with nothing to compare passes."""
        check = anti_copycat_check("", "Anything at all")
        assert check.passed is True
        assert check.severity == Severity.INFO

    def test_identical_is_blocked(self):
        """A copy is a critical violation."""
        check = anti_copycat_check("Fresh leaves, refilled forever", "Fresh leaves, refilled forever")
        assert check.passed is False
        assert check.severity == Severity.CRITICAL
        assert check.similarity == 1.0

    def test_whitespace_changes_are_not_a_rewrite(self):
        """Re-spacing the original is still a copy."""
        check = anti_copycat_check("Fresh leaves refilled", "Fresh  leaves\nrefilled")
        assert check.passed is False

    def test_close_rewrite_warns(self):
        """Between 0.7 and 0.9 the rewrite passes with a warning."""
        check = anti_copycat_check("abcdefghij", "abcdefghXY")
        assert check.similarity == pytest.approx(0.8)
        assert check.passed is True
        assert check.severity == Severity.WARNING
        assert check.recommendations

    def test_real_rewrite_is_clean(self):
        """A genuine rewrite passes cleanly."""
        check = anti_copycat_check("Fresh leaves, refilled forever", "Tea that comes back in the same tin")
        assert check.passed is True
        assert check.severity == Severity.INFO


class TestDataGuardian:
    """Test DataGuardian.validate_content."""

    def test_six_checks_in_order(self, guardian):
        """All six checks run in a fixed order."""
        report = guardian.validate_content(_brand(), "Sustainable tea, refilled.")
        assert list(report.checks) == [
            "isolation",
            "anti_copycat",
            "fact_check",
            "usp_grounding",
            "reference_validation",
            "consistency",
        ]

    def test_clean_content_passes(self, guardian):
        """On-brand content with no claims passes."""
        report = guardian.validate_content(_brand(), "Sustainable tea in a fresh refillable tin.")
        assert report.overall_status == GuardStatus.PASSED
        assert report.failed_checks() == []
        assert report.recommendations == []

    def test_missing_brand_blocks(self, guardian):
        """No brand context blocks the content."""
        report = guardian.validate_content(None, "Anything")
        assert report.overall_status == GuardStatus.BLOCKED
        assert report.checks["isolation"].severity == Severity.CRITICAL

    def test_cross_brand_request_blocks(self, guardian):
        """Asking to clone a competitor brand is blocked."""
        report = guardian.validate_content(_brand(), "Clone the competitor brand's launch post")
        assert report.overall_status == GuardStatus.BLOCKED
        assert not report.checks["isolation"].passed

    def test_copywriting_is_not_cross_brand(self, guardian):
        """Ordinary copy work does not trip isolation."""
        report = guardian.validate_content(_brand(), "Copy for our sustainable tea tin")
        assert report.checks["isolation"].passed

    def test_copied_original_blocks(self, guardian):
        """Publishing the original verbatim is blocked."""
        text = "Sustainable tea in a fresh refillable tin."
        report = guardian.validate_content(_brand(), text, original_content=text)
        assert report.overall_status == GuardStatus.BLOCKED
        assert not report.checks["anti_copycat"].passed

    def test_artist_reference_warns(self, guardian):
        """Artist names are flagged with the brand's moods as the alternative."""
        report = guardian.validate_content(_brand(), "Sustainable tea tin art inspired by Monet")
        check = report.checks["anti_copycat"]
        assert check.passed is False
        assert check.severity == Severity.WARNING
        assert "fresh" in check.suggestion
        assert report.overall_status == GuardStatus.WARNING

    def test_unsourced_figures(self, guardian):
        """Quantitative claims without sources are flagged."""
        report = guardian.validate_content(_brand(), "Sustainable tea drove 40% growth")
        assert not report.checks["fact_check"].passed
        assert not report.checks["reference_validation"].passed

    def test_references_satisfy_reference_check(self, guardian):
        """Supplied references clear the reference check."""
        report = guardian.validate_content(_brand(), "Sustainable tea is trending", references=["Google Trends"])
        assert report.checks["reference_validation"].passed

    def test_usp_contradiction(self, guardian):
        """Plastic contradicts a sustainability USP."""
        report = guardian.validate_content(_brand(), "Sustainable tea in single-use plastic pods")
        check = report.checks["usp_grounding"]
        assert check.passed is False
        assert "Environmental" in check.message

    def test_long_content_without_usp(self, guardian):
        """Long content that ignores the USP is flagged."""
        text = "Our new flavour lineup brings bright citrus notes to every cup you brew at home. " * 2
        report = guardian.validate_content(_brand(), text)
        assert not report.checks["usp_grounding"].passed

    def test_tone_mismatch(self, guardian):
        """Slang clashes with a professional tone."""
        report = guardian.validate_content(_brand(), "Yo, sustainable tea, dude")
        check = report.checks["consistency"]
        assert check.passed is False
        assert "Tone mismatch" in check.suggestion

    def test_your_is_not_slang(self, guardian):
        """'your' does not count as 'yo'."""
        report = guardian.validate_content(_brand(), "Your sustainable fresh tea")
        assert report.checks["consistency"].passed

    def test_forbidden_word(self, guardian):
        """Brand forbidden words are flagged."""
        report = guardian.validate_content(_brand(), "The cheapest sustainable tea")
        assert "cheapest" in report.checks["consistency"].suggestion

    def test_missing_mood_on_long_content(self, guardian):
        """Long content without any mood keyword is flagged."""
        text = "Sustainable refillable packaging for every tea lover. " * 5
        report = guardian.validate_content(_brand(), text)
        assert "Mood mismatch" in report.checks["consistency"].suggestion

    def test_recommendations_name_the_check(self, guardian):
        """Recommendations are prefixed with the check name."""
        report = guardian.validate_content(_brand(), "Yo, sustainable tea, dude")
        assert report.recommendations[0].startswith("[Consistency Check]")

    def test_render_report(self, guardian):
        """The text report shows the status and each check."""
        report = guardian.validate_content(_brand(), "Sustainable tea", content_id="post-7")
        text = guardian.render_report(report)
        assert "DATA GUARDIAN REPORT" in text
        assert "Status: PASSED" in text
        assert "post-7" in text
        assert "USP Grounding" in text

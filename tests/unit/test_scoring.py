"""
Unit tests for the SEOscan scoring system.

Tests:
- Weight table
- Pass/warn/fail credit
- Unweighted checks never affect the score
- Rounding
"""
import pytest

from seoscan.services.rule_engine import FAIL, PASS, WARN, CheckResult
from seoscan.services.scorer import (
    WARN_CREDIT,
    WEIGHTS,
    ScoreResult,
    calculate_score,
    round_half_up,
)


def make_check(check_id: str, status: str) -> CheckResult:
    return CheckResult(
        id=check_id,
        label=check_id,
        category="onpage",
        status=status,
        severity="medium",
    )


def all_scored(status: str) -> list[CheckResult]:
    return [make_check(check_id, status) for check_id in WEIGHTS]


class TestWeights:
    """Test the weight table."""

    def test_weights_total_125(self):
        assert sum(WEIGHTS.values()) == 125

    def test_content_checks_are_unweighted(self):
        for check_id in ["h1-exists", "h1-single", "heading-hierarchy", "images-alt", "internal-links"]:
            assert check_id not in WEIGHTS

    def test_warn_credit(self):
        assert WARN_CREDIT == 0.6


class TestCalculateScore:
    """Test calculate_score."""

    def test_all_pass(self):
        assert calculate_score(all_scored(PASS)) == ScoreResult(score=100, max=125, total=125)

    def test_all_warn(self):
        assert calculate_score(all_scored(WARN)) == ScoreResult(score=60, max=125, total=75)

    def test_all_fail(self):
        assert calculate_score(all_scored(FAIL)) == ScoreResult(score=0, max=125, total=0)

    def test_no_checks(self):
        assert calculate_score([]) == ScoreResult(score=0, max=0, total=0)

    def test_only_unweighted_checks(self):
        checks = [make_check("h1-exists", FAIL), make_check("internal-links", PASS)]

        assert calculate_score(checks) == ScoreResult(score=0, max=0, total=0)

    @pytest.mark.parametrize("status", [PASS, WARN, FAIL])
    def test_unweighted_check_does_not_change_max(self, status):
        base = all_scored(PASS)[:5]
        with_extra = base + [make_check("h1-exists", status)]

        assert calculate_score(with_extra) == calculate_score(base)

    def test_unknown_check_is_ignored(self):
        checks = [make_check("title-exists", PASS), make_check("made-up-check", FAIL)]

        assert calculate_score(checks) == ScoreResult(score=100, max=15, total=15)

    def test_missing_checks_shrink_max(self):
        """Checks that were not emitted are excluded from the maximum."""
        checks = [make_check("title-exists", PASS), make_check("og-image", FAIL)]

        assert calculate_score(checks) == ScoreResult(score=60, max=25, total=15)

    def test_mixed(self):
        checks = [
            make_check("title-exists", PASS),       # 15
            make_check("meta-desc-exists", WARN),   # 9
            make_check("twitter-card", WARN),       # 1.8
            make_check("robots-reachable", FAIL),   # 0
        ]
        result = calculate_score(checks)

        # 25.8 / 43 = 60.0%
        assert result.max == 43
        assert result.total == 26
        assert result.score == 60

    def test_to_dict(self):
        assert ScoreResult(score=80, max=100, total=80).to_dict() == {"score": 80, "max": 100, "total": 80}


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.49, 2),
        (99.5, 100),
        (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

"""
Tests for the Compliance Scoring Engine.

Covers score rounding, risk tiers, critical issues and summaries.
"""

import pytest

from contract_route_toolkit.compliance.scorer import ComplianceScorer
from contract_route_toolkit.config import ScoringConfig
from contract_route_toolkit.models import (
    CheckStatus,
    ComplianceCheckItem,
    ContractType,
    RiskLevel,
    determine_risk_level,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def scorer():
    """Create a scorer with default settings."""
    return ComplianceScorer()


def make_check(status, category="服务等级", recommendation="建议"):
    """Create a check item with the given status."""
    return ComplianceCheckItem(
        category=category,
        requirement=f"{category}条款",
        status=status,
        description="测试项",
        recommendation=None if status == CheckStatus.PASS else recommendation,
    )


# =============================================================================
# Score Calculation Tests
# =============================================================================

class TestScoreCalculation:
    """Tests for the aggregate score."""

    def test_all_pass(self, scorer):
        """All passing items score 100."""
        checks = [make_check(CheckStatus.PASS) for _ in range(4)]
        assert scorer.calculate_score(checks) == 100

    def test_all_fail(self, scorer):
        """All failing items score 0."""
        checks = [make_check(CheckStatus.FAIL) for _ in range(7)]
        assert scorer.calculate_score(checks) == 0

    def test_empty_checks(self, scorer):
        """No items scores 0."""
        assert scorer.calculate_score([]) == 0

    def test_warning_half_credit(self, scorer):
        """Warnings earn half credit."""
        checks = [make_check(CheckStatus.PASS)] * 4 + [make_check(CheckStatus.WARNING)]
        # (4 + 0.5) / 5 = 90%
        assert scorer.calculate_score(checks) == 90

    def test_round_half_up(self, scorer):
        """62.5 rounds up to 63."""
        checks = [make_check(CheckStatus.PASS)] * 5 + [make_check(CheckStatus.FAIL)] * 3
        assert scorer.calculate_score(checks) == 63

    def test_round_down(self, scorer):
        """57.14 rounds down to 57."""
        checks = [make_check(CheckStatus.PASS)] * 4 + [make_check(CheckStatus.FAIL)] * 3
        assert scorer.calculate_score(checks) == 57

    def test_score_bounds(self, scorer):
        """Scores stay within 0-100."""
        checks = [
            make_check(CheckStatus.PASS),
            make_check(CheckStatus.WARNING),
            make_check(CheckStatus.FAIL),
        ]
        assert 0 <= scorer.calculate_score(checks) <= 100


# =============================================================================
# Risk Level Tests
# =============================================================================

class TestRiskLevel:
    """Tests for risk tier derivation."""

    @pytest.mark.parametrize("score, fails, critical_fails, expected", [
        (100, 0, 0, RiskLevel.LOW),
        (85, 0, 0, RiskLevel.LOW),
        (84, 0, 0, RiskLevel.MEDIUM),
        (90, 1, 0, RiskLevel.MEDIUM),
        (70, 2, 0, RiskLevel.MEDIUM),
        (69, 0, 0, RiskLevel.HIGH),
        (90, 3, 0, RiskLevel.HIGH),
        (50, 0, 0, RiskLevel.HIGH),
        (49, 0, 0, RiskLevel.CRITICAL),
        (95, 1, 1, RiskLevel.CRITICAL),
    ])
    def test_determine_risk_level(self, score, fails, critical_fails, expected):
        """Tiers are checked from most to least severe."""
        assert determine_risk_level(score, fails, critical_fails) == expected

    def test_critical_category_failure_overrides_score(self, scorer):
        """A failed data-security check is critical at any score."""
        checks = [make_check(CheckStatus.PASS)] * 9 + [make_check(CheckStatus.FAIL, "数据安全")]
        score = scorer.calculate_score(checks)
        assert score == 90
        assert scorer.assess_risk(checks, score) == RiskLevel.CRITICAL

    def test_liability_failure_is_not_critical_risk(self, scorer):
        """Liability failures are critical issues but not critical risk."""
        checks = [make_check(CheckStatus.PASS)] * 3 + [make_check(CheckStatus.FAIL, "责任限制")]
        score = scorer.calculate_score(checks)
        assert score == 75
        assert scorer.assess_risk(checks, score) == RiskLevel.MEDIUM

    def test_custom_thresholds(self):
        """Thresholds come from configuration."""
        scorer = ComplianceScorer(ScoringConfig(medium_threshold=95))
        checks = [make_check(CheckStatus.PASS)] * 9 + [make_check(CheckStatus.WARNING)]
        score = scorer.calculate_score(checks)
        assert score == 95
        assert scorer.assess_risk(checks, score) == RiskLevel.LOW
        assert scorer.assess_risk(checks, 94) == RiskLevel.MEDIUM


# =============================================================================
# Issues and Summary Tests
# =============================================================================

class TestIssuesAndSummary:
    """Tests for critical issues, recommendations and summaries."""

    def test_critical_issues_format(self, scorer):
        """Critical issues read 'category: requirement'."""
        checks = [
            make_check(CheckStatus.FAIL, "数据安全"),
            make_check(CheckStatus.FAIL, "责任限制"),
            make_check(CheckStatus.FAIL, "服务等级"),
            make_check(CheckStatus.PASS, "知识产权"),
        ]
        assert scorer.identify_critical_issues(checks) == [
            "数据安全: 数据安全条款",
            "责任限制: 责任限制条款",
        ]

    def test_warnings_are_not_critical_issues(self, scorer):
        """Only failures become critical issues."""
        checks = [make_check(CheckStatus.WARNING, "知识产权")]
        assert scorer.identify_critical_issues(checks) == []

    def test_recommendations_from_failures_only(self):
        """Warnings do not contribute recommendations."""
        checks = [
            make_check(CheckStatus.FAIL, recommendation="甲"),
            make_check(CheckStatus.WARNING, recommendation="乙"),
            make_check(CheckStatus.FAIL, recommendation="丙"),
        ]
        recs = ComplianceScorer.collect_recommendations(checks, ["丁"])
        assert recs == ["甲", "丙", "丁"]

    @pytest.mark.parametrize("score, remark", [
        (100, "合同整体合规性良好。"),
        (85, "合同整体合规性良好。"),
        (70, "合同存在一些合规问题，建议优化。"),
        (69, "合同存在重要合规风险，需要重点关注和改进。"),
    ])
    def test_summary_remarks(self, score, remark):
        """Summary remark depends on the score band."""
        summary = ComplianceScorer.generate_summary(
            score, RiskLevel.LOW, ContractType.SERVICE_AGREEMENT
        )
        assert summary.endswith(remark)

    def test_summary_content(self):
        """Summary names type, score and risk."""
        summary = ComplianceScorer.generate_summary(
            0, RiskLevel.CRITICAL, ContractType.VISUALIZATION_DASHBOARD
        )
        assert summary.startswith("可视化大屏合同文件合规审核完成。")
        assert "合规得分：0分" in summary
        assert "风险等级：严重风险" in summary

"""
Compliance Scoring Engine.

Turns the check items produced by the rule battery into the aggregate
numbers of an audit: the 0-100 compliance score, the risk tier, the
critical issues, the recommendation list and the summary sentence.

Scoring Formula:
    score = round(100 × (pass + w × warning) / total)

where w is the warning weight (default 0.5) and rounding is half-up.
"""

import math
from typing import Optional

from contract_route_toolkit.config.settings import ScoringConfig
from contract_route_toolkit.models.schemas import (
    CheckStatus,
    ComplianceCheckItem,
    ContractType,
    RiskLevel,
    determine_risk_level,
)


# =============================================================================
# Labels
# =============================================================================

CONTRACT_TYPE_LABELS = {
    ContractType.VISUALIZATION_DASHBOARD: "可视化大屏",
    ContractType.SOFTWARE_LICENSE: "软件许可",
    ContractType.SERVICE_AGREEMENT: "服务协议",
    ContractType.MAINTENANCE: "维护服务",
    ContractType.DATA_PROCESSING: "数据处理",
}

RISK_LABELS = {
    RiskLevel.LOW: "低风险",
    RiskLevel.MEDIUM: "中等风险",
    RiskLevel.HIGH: "高风险",
    RiskLevel.CRITICAL: "严重风险",
}

# (minimum score, remark), checked top-down
SCORE_REMARKS = [
    (85, "合同整体合规性良好。"),
    (70, "合同存在一些合规问题，建议优化。"),
    (0, "合同存在重要合规风险，需要重点关注和改进。"),
]


# =============================================================================
# Compliance Scorer
# =============================================================================

class ComplianceScorer:
    """
    Calculates compliance scores and derived audit fields.

    The risk tier is never stored; it is recomputed from the score and
    the failure counts every time it is needed.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        Initialize the compliance scorer.

        Args:
            config: Scoring thresholds and category settings
        """
        self.config = config or ScoringConfig()

        self.thresholds = {
            "critical": self.config.critical_threshold,
            "high": self.config.high_threshold,
            "medium": self.config.medium_threshold,
            "max_failures": self.config.max_failures_before_high,
        }

    # -------------------------------------------------------------------------
    # Score and Risk
    # -------------------------------------------------------------------------

    def calculate_score(self, checks: list[ComplianceCheckItem]) -> int:
        """
        Calculate the aggregate compliance score.

        Passing items earn full credit, warnings partial credit and
        failures nothing.

        Args:
            checks: Check items of one audit

        Returns:
            Integer score between 0 and 100
        """
        if not checks:
            return 0

        passed = sum(1 for c in checks if c.status == CheckStatus.PASS)
        warnings = sum(1 for c in checks if c.status == CheckStatus.WARNING)

        raw = (passed + warnings * self.config.warning_weight) / len(checks) * 100
        return int(math.floor(raw + 0.5))

    def assess_risk(self, checks: list[ComplianceCheckItem], score: int) -> RiskLevel:
        """
        Derive the overall risk tier.

        Args:
            checks: Check items of one audit
            score: Score computed from the same items

        Returns:
            RiskLevel for the audit
        """
        failed = [c for c in checks if c.status == CheckStatus.FAIL]
        critical_failed = [
            c for c in failed if c.category in self.config.critical_categories
        ]

        return determine_risk_level(
            score,
            fail_count=len(failed),
            critical_fail_count=len(critical_failed),
            thresholds=self.thresholds,
        )

    # -------------------------------------------------------------------------
    # Issues and Recommendations
    # -------------------------------------------------------------------------

    def identify_critical_issues(self, checks: list[ComplianceCheckItem]) -> list[str]:
        """Format failed checks in critical-issue categories as ``category: requirement``."""
        return [
            f"{c.category}: {c.requirement}"
            for c in checks
            if c.status == CheckStatus.FAIL
            and c.category in self.config.critical_issue_categories
        ]

    @staticmethod
    def collect_recommendations(
        checks: list[ComplianceCheckItem],
        extra: Optional[list[str]] = None
    ) -> list[str]:
        """
        Collect recommendations of failed checks, in evaluation order.

        Args:
            checks: Check items of one audit
            extra: Fixed recommendations appended afterwards

        Returns:
            Recommendation strings
        """
        recommendations = [
            c.recommendation
            for c in checks
            if c.status == CheckStatus.FAIL and c.recommendation
        ]
        recommendations.extend(extra or [])
        return recommendations

    @staticmethod
    def generate_summary(
        score: int,
        risk_level: RiskLevel,
        contract_type: ContractType
    ) -> str:
        """
        Build the summary sentence of an audit.

        Args:
            score: Compliance score
            risk_level: Derived risk tier
            contract_type: Audited contract type

        Returns:
            Localized summary text
        """
        remark = next(text for minimum, text in SCORE_REMARKS if score >= minimum)

        return (
            f"{CONTRACT_TYPE_LABELS[ContractType(contract_type)]}合同文件合规审核完成。"
            f"合规得分：{score}分，风险等级：{RISK_LABELS[risk_level]}。{remark}"
        )

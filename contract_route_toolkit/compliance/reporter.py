"""
Report Generator for contract audits.

Generates formatted compliance reports in multiple formats
including terminal output, Markdown, and JSON.
"""

from typing import Optional

from contract_route_toolkit.models.schemas import (
    ActionItem,
    ActionPriority,
    AuditResult,
    CheckStatus,
    FileAuditResult,
    RiskLevel,
)


# =============================================================================
# Report Templates
# =============================================================================

REPORT_HEADER = """
═══════════════════════════════════════════════════════════════════════════════
                          合同合规审核报告
═══════════════════════════════════════════════════════════════════════════════
"""

EXECUTIVE_SUMMARY_TEMPLATE = """
合同编号: {contract_id}
合同类型: {contract_type}
审核时间: {timestamp}

合规评分: {score} / 100
风险等级: {risk_emoji} {risk_level}
检查项目: {checks_count} (通过 {passed} / 警告 {warnings} / 不合规 {failed})

{summary}
"""

SECTION_RULE = "─" * 79


# =============================================================================
# Formatting Maps
# =============================================================================

RISK_EMOJI = {
    RiskLevel.LOW: "🟢",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.HIGH: "🟠",
    RiskLevel.CRITICAL: "🔴",
}

RISK_TEXT = {
    RiskLevel.LOW: "LOW RISK",
    RiskLevel.MEDIUM: "MEDIUM RISK",
    RiskLevel.HIGH: "HIGH RISK",
    RiskLevel.CRITICAL: "CRITICAL RISK",
}

STATUS_EMOJI = {
    CheckStatus.PASS: "✅",
    CheckStatus.WARNING: "⚠️",
    CheckStatus.FAIL: "❌",
}

PRIORITY_MARKERS = {
    ActionPriority.HIGH: "[HIGH]",
    ActionPriority.MEDIUM: "[MEDIUM]",
    ActionPriority.LOW: "[LOW]",
}


# =============================================================================
# Report Generator
# =============================================================================

class ReportGenerator:
    """
    Generates formatted compliance reports from audit results.
    """

    def __init__(
        self,
        include_details: bool = True,
        include_recommendations: bool = True,
        max_recommendations: int = 10
    ):
        """
        Initialize the report generator.

        Args:
            include_details: Whether to list every check item
            include_recommendations: Whether to include recommendations
            max_recommendations: Maximum number of recommendations to show
        """
        self.include_details = include_details
        self.include_recommendations = include_recommendations
        self.max_recommendations = max_recommendations

    # -------------------------------------------------------------------------
    # Main Report Methods
    # -------------------------------------------------------------------------

    def generate_text_report(self, result: AuditResult) -> str:
        """
        Generate a formatted text report for terminal display.

        Args:
            result: Audit result

        Returns:
            Formatted text report
        """
        parts = [REPORT_HEADER, self._format_executive_summary(result)]

        if self.include_details:
            parts.append(SECTION_RULE)
            for check in result.compliance_checks:
                parts.append(
                    f"{STATUS_EMOJI[check.status]} {check.category:<10} {check.requirement}"
                )
                if check.recommendation:
                    parts.append(f"   建议: {check.recommendation}")

        if result.critical_issues:
            parts.extend([SECTION_RULE, "关键风险点:"])
            parts.extend(f"  - {issue}" for issue in result.critical_issues)

        if self.include_recommendations and result.recommendations:
            parts.extend([SECTION_RULE, "改进建议:"])
            for i, rec in enumerate(result.recommendations[:self.max_recommendations], 1):
                parts.append(f"{i}. {rec}")

        parts.append("\n" + "═" * 79 + "\n")

        return "\n".join(parts)

    def generate_markdown_report(
        self,
        result: AuditResult,
        action_items: Optional[list[ActionItem]] = None
    ) -> str:
        """
        Generate a Markdown-formatted report.

        Args:
            result: Audit result
            action_items: Optional follow-up actions to list

        Returns:
            Markdown report
        """
        lines = [
            "# 合同合规审核报告",
            "",
            "## 📋 基本信息",
            "",
            "| 项目 | 内容 |",
            "|------|------|",
            f"| 合同编号 | {result.contract_id} |",
            f"| 合同类型 | {result.contract_type.value} |",
            f"| 审核时间 | {result.audit_timestamp.isoformat()} |",
            f"| 合规评分 | {result.compliance_score}/100 |",
            f"| 风险等级 | {RISK_EMOJI[result.overall_risk_level]} {result.overall_risk_level.value} |",
            "",
        ]

        if isinstance(result, FileAuditResult):
            meta = result.file_metadata
            lines.extend([
                f"**文件:** {meta.file_name} ({meta.file_type}, {meta.file_size} bytes, "
                f"{meta.word_count} words)",
                "",
            ])

        lines.extend([
            "## 📊 审核概要",
            "",
            result.summary,
            "",
        ])

        if self.include_details:
            lines.extend(["## 🔍 详细检查结果", ""])
            sections = [
                ("### ✅ 合规项目", CheckStatus.PASS),
                ("### ⚠️ 风险提醒", CheckStatus.WARNING),
                ("### ❌ 不合规项目", CheckStatus.FAIL),
            ]
            for title, status in sections:
                lines.extend([title, ""])
                lines.extend(self._format_checks_markdown(result, status))
                lines.append("")

        lines.extend(["## 🚨 关键风险点", ""])
        if result.critical_issues:
            lines.extend(f"- {issue}" for issue in result.critical_issues)
        else:
            lines.append("无关键风险")
        lines.append("")

        if self.include_recommendations and result.recommendations:
            lines.extend(["## 💡 改进建议", ""])
            for i, rec in enumerate(result.recommendations[:self.max_recommendations], 1):
                lines.append(f"{i}. {rec}")
            lines.append("")

        if action_items:
            lines.extend([
                "## 🎯 后续行动",
                "",
                "| 优先级 | 类别 | 行动 | 期限 |",
                "|--------|------|------|------|",
            ])
            for item in action_items:
                lines.append(
                    f"| {PRIORITY_MARKERS[item.priority]} | {item.category} | "
                    f"{item.action} | {item.deadline or '-'} |"
                )
            lines.append("")

        # Disclaimer
        lines.extend([
            "---",
            "",
            "*本报告由规则引擎基于关键词检查自动生成，仅供参考，不构成法律意见。*",
        ])

        return "\n".join(lines)

    def generate_json_report(self, result: AuditResult) -> str:
        """
        Generate a JSON-formatted report with camelCase field names.

        Args:
            result: Audit result

        Returns:
            JSON string
        """
        return result.model_dump_json(by_alias=True, indent=2)

    # -------------------------------------------------------------------------
    # Formatting Helpers
    # -------------------------------------------------------------------------

    def _format_executive_summary(self, result: AuditResult) -> str:
        """Format the executive summary section."""
        statuses = [c.status for c in result.compliance_checks]

        return EXECUTIVE_SUMMARY_TEMPLATE.format(
            contract_id=result.contract_id,
            contract_type=result.contract_type.value,
            timestamp=result.audit_timestamp.strftime("%Y-%m-%d %H:%M"),
            score=result.compliance_score,
            risk_emoji=RISK_EMOJI[result.overall_risk_level],
            risk_level=RISK_TEXT[result.overall_risk_level],
            checks_count=len(statuses),
            passed=statuses.count(CheckStatus.PASS),
            warnings=statuses.count(CheckStatus.WARNING),
            failed=statuses.count(CheckStatus.FAIL),
            summary=result.summary,
        )

    @staticmethod
    def _format_checks_markdown(result: AuditResult, status: CheckStatus) -> list[str]:
        """List the checks of one status as Markdown bullets."""
        checks = [c for c in result.compliance_checks if c.status == status]
        if not checks:
            return ["无"]

        lines = []
        for check in checks:
            lines.append(f"- **{check.category}: {check.requirement}**：{check.description}")
            if check.recommendation:
                lines.append(f"  - 建议: {check.recommendation}")
        return lines


# =============================================================================
# Convenience Functions
# =============================================================================

def print_report(result: AuditResult, verbose: bool = False):
    """
    Print a formatted report to the terminal.

    Args:
        result: Audit result
        verbose: Whether to list every check item
    """
    generator = ReportGenerator(
        include_details=verbose,
        include_recommendations=True
    )
    print(generator.generate_text_report(result))


def save_report(
    result: AuditResult,
    filepath: str,
    format: str = "markdown",
    action_items: Optional[list[ActionItem]] = None
):
    """
    Save a report to file.

    Args:
        result: Audit result
        filepath: Output file path
        format: Report format (markdown, json, text)
        action_items: Optional follow-up actions (Markdown only)
    """
    generator = ReportGenerator()

    if format == "json":
        content = generator.generate_json_report(result)
    elif format == "text":
        content = generator.generate_text_report(result)
    else:
        content = generator.generate_markdown_report(result, action_items)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)

"""
Contract Compliance Auditor.

Main entry point of the compliance engine: runs the rule battery over
contract text and assembles the audit result. Also hosts the audit
workflow (preprocess, audit, report, action items).
"""

import logging
import re
import time
from pathlib import Path
from typing import Optional

from contract_route_toolkit.compliance.reporter import ReportGenerator
from contract_route_toolkit.compliance.rules import RuleSet
from contract_route_toolkit.compliance.scorer import ComplianceScorer
from contract_route_toolkit.config.settings import ToolkitConfig, get_config
from contract_route_toolkit.models.schemas import (
    ActionItem,
    ActionPriority,
    AuditReport,
    AuditResult,
    CheckStatus,
    ContractType,
    PreprocessedContract,
)

logger = logging.getLogger(__name__)


MIN_CONTRACT_LENGTH = 100

STANDARD_CLAUSE_TERMS = ["甲方", "乙方", "party", "agreement", "合同", "contract", "条款", "clause"]

_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")

# priority -> deadline
ACTION_DEADLINES = {
    ActionPriority.HIGH: "7天内",
    ActionPriority.MEDIUM: "30天内",
    ActionPriority.LOW: "90天内",
}


class ContractValidationError(ValueError):
    """Raised when contract text is unusable for an audit."""


def generate_contract_id() -> str:
    """Generate a contract id from the current epoch milliseconds."""
    return f"contract-{int(time.time() * 1000)}"


# =============================================================================
# Compliance Auditor
# =============================================================================

class ComplianceAuditor:
    """
    Audits contract text against the compliance rule battery.

    The auditor is stateless between calls; every audit builds a fresh
    result with a fresh timestamp.

    Example:
        >>> auditor = ComplianceAuditor()
        >>> result = auditor.audit(text, ContractType.SERVICE_AGREEMENT)
        >>> print(result.compliance_score, result.overall_risk_level)
    """

    def __init__(
        self,
        rules: Optional[RuleSet] = None,
        rules_path: Optional[Path] = None,
        config: Optional[ToolkitConfig] = None
    ):
        """
        Initialize the auditor.

        Args:
            rules: Pre-built rule set (takes precedence over rules_path)
            rules_path: Path to a custom rules YAML
            config: Optional full configuration object
        """
        self.config = config or get_config(rules_path=rules_path)
        self.rules = rules or RuleSet.from_config(self.config.rules_path)
        self.scorer = ComplianceScorer(self.config.scoring)

    def audit(
        self,
        content: str,
        contract_type: ContractType,
        contract_id: Optional[str] = None,
        company_name: Optional[str] = None
    ) -> AuditResult:
        """
        Run a compliance audit over contract text.

        No minimum length is enforced here; near-empty text simply fails
        every check.

        Args:
            content: Contract text
            contract_type: Type of contract
            contract_id: Identifier to stamp on the result (generated if absent)
            company_name: Company the contract belongs to (informational)

        Returns:
            AuditResult with score, risk tier, issues and recommendations

        Raises:
            ValueError: If contract_type is not a known contract type
        """
        contract_type = ContractType(contract_type)
        contract_id = contract_id or generate_contract_id()

        checks = self.rules.evaluate(content, contract_type)

        score = self.scorer.calculate_score(checks)
        risk_level = self.scorer.assess_risk(checks, score)

        result = AuditResult(
            contract_id=contract_id,
            contract_type=contract_type,
            overall_risk_level=risk_level,
            compliance_score=score,
            compliance_checks=checks,
            summary=self.scorer.generate_summary(score, risk_level, contract_type),
            critical_issues=self.scorer.identify_critical_issues(checks),
            recommendations=self.scorer.collect_recommendations(
                checks, self.rules.recommendations_for(contract_type)
            ),
        )

        logger.debug(
            "Audited %s (%s, company=%s): score=%d risk=%s checks=%d",
            contract_id, contract_type.value, company_name,
            score, risk_level.value, len(checks),
        )
        return result


# =============================================================================
# Audit Workflow
# =============================================================================

def preprocess_contract(
    content: str,
    contract_type: ContractType,
    contract_id: Optional[str] = None,
    company_name: Optional[str] = None
) -> PreprocessedContract:
    """
    Validate and annotate contract text before an audit.

    Args:
        content: Raw contract text
        contract_type: Type of contract
        contract_id: Optional identifier (generated if absent)
        company_name: Optional company name

    Returns:
        PreprocessedContract with trimmed text and detected properties

    Raises:
        ContractValidationError: If the trimmed text is shorter than 100 characters
    """
    processed = (content or "").strip()

    if len(processed) < MIN_CONTRACT_LENGTH:
        raise ContractValidationError("Contract content too short for meaningful analysis")

    lowered = processed.lower()

    return PreprocessedContract(
        processed_content=processed,
        contract_type=ContractType(contract_type),
        contract_id=contract_id or generate_contract_id(),
        company_name=company_name,
        content_length=len(processed),
        detected_language="chinese" if _CJK_PATTERN.search(processed) else "english",
        has_standard_clauses=any(term.lower() in lowered for term in STANDARD_CLAUSE_TERMS),
    )


def generate_action_items(result: AuditResult) -> list[ActionItem]:
    """
    Derive prioritized follow-up actions from an audit result.

    Critical issues become high priority actions. Other failed checks
    become medium priority unless a critical issue already names their
    category. Warnings become low priority.

    Args:
        result: Audit result

    Returns:
        Action items, high priority first
    """
    items = [
        ActionItem(
            priority=ActionPriority.HIGH,
            category=issue.split(":")[0],
            action=f"立即处理: {issue}",
            deadline=ACTION_DEADLINES[ActionPriority.HIGH],
        )
        for issue in result.critical_issues
    ]

    for check in result.compliance_checks:
        if check.status != CheckStatus.FAIL:
            continue
        if any(check.category in issue for issue in result.critical_issues):
            continue
        items.append(ActionItem(
            priority=ActionPriority.MEDIUM,
            category=check.category,
            action=check.recommendation or f"完善{check.requirement}",
            deadline=ACTION_DEADLINES[ActionPriority.MEDIUM],
        ))

    for check in result.compliance_checks:
        if check.status == CheckStatus.WARNING:
            items.append(ActionItem(
                priority=ActionPriority.LOW,
                category=check.category,
                action=check.recommendation or f"优化{check.requirement}",
                deadline=ACTION_DEADLINES[ActionPriority.LOW],
            ))

    return items


def run_audit_workflow(
    content: str,
    contract_type: ContractType,
    contract_id: Optional[str] = None,
    company_name: Optional[str] = None,
    auditor: Optional[ComplianceAuditor] = None
) -> AuditReport:
    """
    Run the full audit workflow over contract text.

    Steps: preprocess (length gate), audit, Markdown report, action items.

    Args:
        content: Raw contract text
        contract_type: Type of contract
        contract_id: Optional identifier
        company_name: Optional company name
        auditor: Auditor to use (a default one is created if absent)

    Returns:
        AuditReport bundling result, report and action items

    Raises:
        ContractValidationError: If the contract text is too short
    """
    contract = preprocess_contract(content, contract_type, contract_id, company_name)
    auditor = auditor or ComplianceAuditor()

    result = auditor.audit(
        contract.processed_content,
        contract.contract_type,
        contract_id=contract.contract_id,
        company_name=contract.company_name,
    )
    action_items = generate_action_items(result)

    return AuditReport(
        audit_result=result,
        detailed_report=ReportGenerator().generate_markdown_report(result, action_items),
        action_items=action_items,
    )


# =============================================================================
# Convenience Functions
# =============================================================================

def run_compliance_audit(
    content: str,
    contract_type: ContractType,
    contract_id: Optional[str] = None
) -> AuditResult:
    """
    Quick one-shot audit with the bundled rule battery.

    Args:
        content: Contract text
        contract_type: Type of contract
        contract_id: Optional identifier

    Returns:
        Audit result
    """
    return ComplianceAuditor().audit(content, contract_type, contract_id=contract_id)

"""
Compliance package for the Contract Route Toolkit.

Provides the keyword rule battery, scoring, the audit workflow and
report generation for contract text and contract files.
"""

from contract_route_toolkit.compliance.engine import (
    ComplianceAuditor,
    ContractValidationError,
    generate_action_items,
    preprocess_contract,
    run_audit_workflow,
    run_compliance_audit,
)
from contract_route_toolkit.compliance.file_audit import FileAuditor, audit_contract_file
from contract_route_toolkit.compliance.reporter import ReportGenerator, print_report, save_report
from contract_route_toolkit.compliance.rules import RuleSet, evaluate_rule, rule_matches
from contract_route_toolkit.compliance.scorer import ComplianceScorer

__all__ = [
    "ComplianceAuditor",
    "ContractValidationError",
    "generate_action_items",
    "preprocess_contract",
    "run_audit_workflow",
    "run_compliance_audit",
    "FileAuditor",
    "audit_contract_file",
    "ReportGenerator",
    "print_report",
    "save_report",
    "RuleSet",
    "evaluate_rule",
    "rule_matches",
    "ComplianceScorer",
]

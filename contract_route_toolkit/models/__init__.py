"""
Data models package for the Contract Route Toolkit.
"""

from contract_route_toolkit.models.schemas import (
    ContractType,
    RiskLevel,
    CheckStatus,
    ActionPriority,
    TravelStyle,
    ComplianceRule,
    ComplianceCheckItem,
    AuditResult,
    FileMetadata,
    FileAuditResult,
    PreprocessedContract,
    ActionItem,
    AuditReport,
    Location,
    PlaceStop,
    RoutePlan,
    RouteSummary,
    determine_risk_level,
)

__all__ = [
    "ContractType",
    "RiskLevel",
    "CheckStatus",
    "ActionPriority",
    "TravelStyle",
    "ComplianceRule",
    "ComplianceCheckItem",
    "AuditResult",
    "FileMetadata",
    "FileAuditResult",
    "PreprocessedContract",
    "ActionItem",
    "AuditReport",
    "Location",
    "PlaceStop",
    "RoutePlan",
    "RouteSummary",
    "determine_risk_level",
]

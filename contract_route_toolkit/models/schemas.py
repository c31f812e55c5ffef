"""
Data models and schemas for the Contract Route Toolkit.

Uses Pydantic for validation and serialization of all records produced
by the compliance engine and the route planner. Records serialize to
camelCase JSON (``model_dump(by_alias=True)``) and are immutable once built.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# Enums
# =============================================================================

class ContractType(str, Enum):
    """Contract types with their own rule sets."""
    VISUALIZATION_DASHBOARD = "visualization_dashboard"
    SOFTWARE_LICENSE = "software_license"
    SERVICE_AGREEMENT = "service_agreement"
    MAINTENANCE = "maintenance"
    DATA_PROCESSING = "data_processing"


class RiskLevel(str, Enum):
    """Overall risk tier of an audited contract, in increasing severity."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CheckStatus(str, Enum):
    """Outcome of a single compliance check."""
    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class ActionPriority(str, Enum):
    """Priority of a follow-up action."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TravelStyle(str, Enum):
    """Travel style driving transport choices and cost estimates."""
    BUDGET = "budget"
    COMFORT = "comfort"
    LUXURY = "luxury"


class RecordModel(BaseModel):
    """Base for immutable records serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Compliance Models
# =============================================================================

class ComplianceRule(RecordModel):
    """Declarative descriptor of one compliance check."""

    category: str = Field(..., description="Check category")
    requirement: str = Field(..., description="What the contract must contain")
    keywords: list[str] = Field(
        ...,
        min_length=1,
        description="Any keyword present satisfies the rule"
    )
    description: str = Field(..., description="What this check covers")
    recommendation: str = Field(
        ...,
        description="Advice attached when the rule flags the contract"
    )
    status: CheckStatus = Field(
        default=CheckStatus.PASS,
        description="Status produced when a keyword matches"
    )


class ComplianceCheckItem(RecordModel):
    """Result of evaluating one rule against contract text."""

    category: str
    requirement: str
    status: CheckStatus
    description: str
    recommendation: Optional[str] = None


class AuditResult(RecordModel):
    """Complete compliance audit of one contract."""

    contract_id: str = Field(..., description="Contract identifier")
    contract_type: ContractType = Field(..., description="Audited contract type")
    overall_risk_level: RiskLevel = Field(..., description="Derived risk tier")
    compliance_score: int = Field(
        ...,
        ge=0,
        le=100,
        description="Aggregate compliance score"
    )
    compliance_checks: list[ComplianceCheckItem] = Field(default_factory=list)
    summary: str = Field(..., description="One-paragraph audit summary")
    critical_issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    audit_timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the audit was performed"
    )


class FileMetadata(RecordModel):
    """Metadata about an uploaded contract file."""

    file_name: str = Field(..., description="Original filename")
    file_type: str = Field(..., description="Detected MIME type")
    file_size: int = Field(..., ge=0, description="File size in bytes")
    page_count: Optional[int] = Field(
        default=None,
        description="Number of pages (PDF only)"
    )
    word_count: int = Field(default=0, description="CJK characters plus Latin words")
    extracted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the text was extracted"
    )


class FileAuditResult(AuditResult):
    """Audit result of a contract file, with file metadata."""

    file_metadata: FileMetadata
    extracted_content: Optional[str] = None


class PreprocessedContract(RecordModel):
    """Validated contract text ready for auditing."""

    processed_content: str
    contract_type: ContractType
    contract_id: str
    company_name: Optional[str] = None
    content_length: int
    detected_language: str
    has_standard_clauses: bool


class ActionItem(RecordModel):
    """A follow-up action derived from an audit result."""

    priority: ActionPriority
    category: str
    action: str
    deadline: Optional[str] = None


class AuditReport(RecordModel):
    """Audit result bundled with its rendered report and action items."""

    audit_result: AuditResult
    detailed_report: str
    action_items: list[ActionItem] = Field(default_factory=list)


# =============================================================================
# Route Models
# =============================================================================

class Location(RecordModel):
    """A destination resolved to coordinates."""

    name: str
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    country: str = ""
    region: Optional[str] = None


class PlaceStop(RecordModel):
    """One ordered stop of a planned route."""

    name: str
    latitude: float
    longitude: float
    country: str
    region: Optional[str] = None
    attractions: list[str] = Field(default_factory=list)
    recommended_days: int = Field(..., ge=1)
    transportation: str
    estimated_cost: str
    description: str
    order: int = Field(..., ge=1)


class RoutePlan(RecordModel):
    """Ordered route with distance, budget and travel tips."""

    route: list[PlaceStop]
    total_distance: int = Field(..., ge=0, description="Kilometres, rounded")
    total_duration: int = Field(..., description="Days")
    estimated_budget: str
    best_travel_time: str
    tips: list[str] = Field(default_factory=list)


class RouteSummary(RecordModel):
    """Headline numbers of a route plan."""

    total_destinations: int
    total_distance: int
    total_duration: int
    estimated_budget: str


# =============================================================================
# Helper Functions
# =============================================================================

DEFAULT_RISK_THRESHOLDS = {
    "critical": 50,
    "high": 70,
    "medium": 85,
    "max_failures": 2,
}


def determine_risk_level(
    score: int,
    fail_count: int = 0,
    critical_fail_count: int = 0,
    thresholds: dict = None
) -> RiskLevel:
    """
    Determine the risk tier from a score and failure counts.

    Tiers overlap, so they are checked from most to least severe.

    Args:
        score: Compliance score (0-100)
        fail_count: Number of failed checks
        critical_fail_count: Failed checks in a critical category
        thresholds: Optional custom thresholds

    Returns:
        RiskLevel enum value
    """
    if thresholds is None:
        thresholds = DEFAULT_RISK_THRESHOLDS

    if critical_fail_count > 0 or score < thresholds["critical"]:
        return RiskLevel.CRITICAL
    elif fail_count > thresholds["max_failures"] or score < thresholds["high"]:
        return RiskLevel.HIGH
    elif fail_count > 0 or score < thresholds["medium"]:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW

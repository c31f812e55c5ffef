"""
Contract Route Toolkit.

Keyword-based contract compliance auditing and multi-destination travel
route planning.
"""

from contract_route_toolkit.compliance import (
    ComplianceAuditor,
    FileAuditor,
    ReportGenerator,
    audit_contract_file,
    run_audit_workflow,
    run_compliance_audit,
)
from contract_route_toolkit.routing import RoutePlanner, plan_route, render_itinerary

__all__ = [
    "ComplianceAuditor",
    "FileAuditor",
    "ReportGenerator",
    "audit_contract_file",
    "run_audit_workflow",
    "run_compliance_audit",
    "RoutePlanner",
    "plan_route",
    "render_itinerary",
]

__version__ = "0.1.0"

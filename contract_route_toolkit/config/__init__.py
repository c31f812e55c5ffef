"""
Configuration package for the Contract Route Toolkit.
"""

from contract_route_toolkit.config.settings import (
    ToolkitConfig,
    ScoringConfig,
    FileAuditConfig,
    GeocodingConfig,
    RouteConfig,
    get_config,
    load_catalog,
    load_rules,
    load_yaml_config,
    DEFAULT_RULES_PATH,
    DEFAULT_CATALOG_PATH,
)

__all__ = [
    "ToolkitConfig",
    "ScoringConfig",
    "FileAuditConfig",
    "GeocodingConfig",
    "RouteConfig",
    "get_config",
    "load_catalog",
    "load_rules",
    "load_yaml_config",
    "DEFAULT_RULES_PATH",
    "DEFAULT_CATALOG_PATH",
]

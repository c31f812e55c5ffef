"""
Configuration management for the Contract Route Toolkit.

Handles loading and validating configuration from environment variables,
YAML data files, and command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
import yaml


# =============================================================================
# Project Paths
# =============================================================================

# Directory holding the bundled YAML data files
CONFIG_DIR = Path(__file__).parent

DEFAULT_RULES_PATH = CONFIG_DIR / "default_rules.yaml"
DEFAULT_CATALOG_PATH = CONFIG_DIR / "city_catalog.yaml"


# =============================================================================
# Configuration Models
# =============================================================================

class ScoringConfig(BaseModel):
    """Configuration for compliance scoring and risk classification."""

    # Score below this = CRITICAL
    critical_threshold: int = Field(
        default=50,
        description="Score below this is critical risk"
    )

    # Score below this (but not critical) = HIGH
    high_threshold: int = Field(
        default=70,
        description="Score below this is high risk"
    )

    # Score below this (but not high) = MEDIUM
    medium_threshold: int = Field(
        default=85,
        description="Score below this is medium risk"
    )

    max_failures_before_high: int = Field(
        default=2,
        description="More failures than this is high risk"
    )

    # Warnings earn half credit
    warning_weight: float = Field(
        default=0.5,
        description="Credit given to warning items (0-1)"
    )

    critical_categories: list[str] = Field(
        default_factory=lambda: ["数据安全", "知识产权"],
        description="Categories whose failure forces critical risk"
    )

    critical_issue_categories: list[str] = Field(
        default_factory=lambda: ["数据安全", "知识产权", "责任限制"],
        description="Categories whose failures are reported as critical issues"
    )


class FileAuditConfig(BaseModel):
    """Configuration for contract file validation and text extraction."""

    max_file_size: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted file size in bytes"
    )

    min_content_chars: int = Field(
        default=50,
        description="Minimum characters of extracted text"
    )

    allow_docx: bool = Field(
        default=False,
        description="Accept DOCX files with degraded extraction fidelity"
    )


class GeocodingConfig(BaseModel):
    """Configuration for the Open-Meteo geocoding service."""

    base_url: str = Field(
        default="https://geocoding-api.open-meteo.com",
        description="Geocoding API base URL"
    )

    # Request timeout in seconds
    timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds"
    )

    result_count: int = Field(
        default=1,
        description="Number of candidates requested per lookup"
    )


class RouteConfig(BaseModel):
    """Constants used by the route planner."""

    earth_radius_km: float = Field(
        default=6371.0,
        description="Sphere radius for great-circle distances"
    )

    # Segments shorter than this use ground transport
    ground_transport_max_km: float = Field(
        default=300.0,
        description="Distance threshold between ground and air transport"
    )

    # style -> (daily cost, upper multiplier) for per-stop cost strings
    daily_costs: dict[str, tuple[int, float]] = Field(
        default_factory=lambda: {
            "budget": (200, 1.0),
            "comfort": (500, 1.5),
            "luxury": (1200, 2.5),
        },
        description="Per-style daily cost and range multiplier"
    )

    # style -> per-day rate for the overall budget
    daily_budget_rates: dict[str, int] = Field(
        default_factory=lambda: {
            "budget": 300,
            "comfort": 800,
            "luxury": 2000,
        },
        description="Per-style daily rate for the overall budget"
    )

    transport_surcharge: int = Field(
        default=1000,
        description="Transportation surcharge per destination"
    )

    budget_range_multiplier: float = Field(
        default=1.3,
        description="Upper bound multiplier for the budget range"
    )

    default_recommended_days: int = Field(
        default=2,
        description="Recommended days for cities missing from the catalog"
    )

    default_duration_days: int = Field(
        default=7,
        description="Trip duration used when none is given"
    )


class ToolkitConfig(BaseModel):
    """Main toolkit configuration."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    file_audit: FileAuditConfig = Field(default_factory=FileAuditConfig)

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)

    route: RouteConfig = Field(default_factory=RouteConfig)

    # Path to compliance rules file
    rules_path: Path = Field(
        default=DEFAULT_RULES_PATH,
        description="Path to compliance rules YAML"
    )

    # Path to the city lookup table
    catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="Path to city catalog YAML"
    )

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging"
    )


# =============================================================================
# Configuration Loading Functions
# =============================================================================

def load_yaml_config(path: Path) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Dictionary with configuration data

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_rules(path: Optional[Path] = None) -> dict:
    """
    Load the compliance rule battery from YAML.

    Args:
        path: Optional path to rules file. Uses default if not provided.

    Returns:
        Dictionary containing the rule battery
    """
    return load_yaml_config(path or DEFAULT_RULES_PATH)


def load_catalog(path: Optional[Path] = None) -> dict:
    """
    Load the city catalog (attractions, days, descriptions) from YAML.

    Args:
        path: Optional path to catalog file. Uses default if not provided.

    Returns:
        Dictionary containing the city catalog
    """
    return load_yaml_config(path or DEFAULT_CATALOG_PATH)


def get_config(
    rules_path: Optional[Path] = None,
    catalog_path: Optional[Path] = None,
    verbose: bool = False
) -> ToolkitConfig:
    """
    Get toolkit configuration with optional overrides.

    Args:
        rules_path: Override default rules path
        catalog_path: Override default city catalog path
        verbose: Enable verbose mode

    Returns:
        Configured ToolkitConfig instance
    """
    config = ToolkitConfig(verbose=verbose)

    # Apply environment variable overrides
    if env_url := os.getenv("GEOCODING_BASE_URL"):
        config.geocoding.base_url = env_url

    if env_timeout := os.getenv("GEOCODING_TIMEOUT"):
        config.geocoding.timeout = float(env_timeout)

    if env_rules := os.getenv("CONTRACT_RULES_PATH"):
        config.rules_path = Path(env_rules)

    if env_catalog := os.getenv("CITY_CATALOG_PATH"):
        config.catalog_path = Path(env_catalog)

    # Apply explicit overrides
    if rules_path:
        config.rules_path = Path(rules_path)

    if catalog_path:
        config.catalog_path = Path(catalog_path)

    return config


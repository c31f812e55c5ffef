"""
Tools package for the Contract Route Toolkit.

Provides document extraction for contract files and geocoding for
route planning.
"""

from contract_route_toolkit.tools.document_loader import (
    DocumentLoader,
    DocumentParseError,
    ParsedDocument,
    get_supported_file_types,
    validate_file_type,
)
from contract_route_toolkit.tools.geocoding import (
    Geocoder,
    OpenMeteoGeocoder,
    StaticGeocoder,
    create_geocoder,
)

__all__ = [
    "DocumentLoader",
    "DocumentParseError",
    "ParsedDocument",
    "get_supported_file_types",
    "validate_file_type",
    "Geocoder",
    "OpenMeteoGeocoder",
    "StaticGeocoder",
    "create_geocoder",
]

"""
Geocoding clients for the route planner.

Resolves free-form place names to coordinates. The live client talks to
the Open-Meteo geocoding API; the static one serves a fixed mapping for
offline use and tests.
"""

import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from contract_route_toolkit.config.settings import GeocodingConfig
from contract_route_toolkit.models.schemas import Location

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    """Anything that can resolve a place name to a location."""

    def resolve(self, name: str) -> Optional[Location]:
        ...


# =============================================================================
# Open-Meteo Client
# =============================================================================

class OpenMeteoGeocoder:
    """
    Client for the Open-Meteo geocoding API.

    Lookups are sequential and never retried; a failed or empty lookup
    resolves to None so the caller can drop the destination.
    """

    def __init__(
        self,
        base_url: str = "https://geocoding-api.open-meteo.com",
        timeout: float = 10.0,
        result_count: int = 1,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the geocoding client.

        Args:
            base_url: Geocoding API base URL
            timeout: Request timeout in seconds
            result_count: Number of candidates requested per lookup
            transport: Optional httpx transport (used to mock the API)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.result_count = result_count

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[GeocodingConfig] = None,
        transport: Optional[httpx.BaseTransport] = None
    ) -> "OpenMeteoGeocoder":
        """Create a client from geocoding settings."""
        config = config or GeocodingConfig()
        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            result_count=config.result_count,
            transport=transport,
        )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()

    def close(self):
        """Close the HTTP client and release resources."""
        self._client.close()

    def resolve(self, name: str) -> Optional[Location]:
        """
        Resolve a place name to its best-matching location.

        Args:
            name: Free-form place name

        Returns:
            Location of the first result, or None if nothing was found
            or the request failed
        """
        try:
            response = self._client.get(
                "/v1/search",
                params={"name": name, "count": self.result_count},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning("Geocoding request for %r failed: %s", name, e)
            return None
        except ValueError as e:
            logger.warning("Geocoding response for %r is not JSON: %s", name, e)
            return None

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            logger.info("No geocoding result for %r", name)
            return None
        if not isinstance(results, list) or not isinstance(results[0], dict):
            logger.warning("Malformed geocoding payload for %r: %r", name, results)
            return None

        first = results[0]
        try:
            return Location(
                name=first["name"],
                latitude=first["latitude"],
                longitude=first["longitude"],
                country=first.get("country", ""),
                region=first.get("admin1"),
            )
        except (KeyError, TypeError, ValidationError) as e:
            logger.warning("Malformed geocoding result for %r: %s", name, e)
            return None


# =============================================================================
# Static Geocoder
# =============================================================================

class StaticGeocoder:
    """
    Resolves names from a fixed mapping (case-insensitive).

    Example:
        >>> geocoder = StaticGeocoder({"Paris": Location(name="Paris", ...)})
        >>> geocoder.resolve("paris")
    """

    def __init__(self, locations: dict[str, Location]):
        self._locations = {key.lower(): loc for key, loc in locations.items()}

    def resolve(self, name: str) -> Optional[Location]:
        return self._locations.get(name.strip().lower())


# =============================================================================
# Convenience Functions
# =============================================================================

def create_geocoder(config: Optional[GeocodingConfig] = None) -> OpenMeteoGeocoder:
    """
    Create the live geocoder from settings.

    Args:
        config: Geocoding settings (defaults if omitted)

    Returns:
        Configured OpenMeteoGeocoder
    """
    return OpenMeteoGeocoder.from_config(config)

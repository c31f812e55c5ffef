"""
City catalog lookups.

Enriches geocoded stops with attractions, recommended stay and a short
description. Unknown cities get generic fallbacks.
"""

from pathlib import Path
from typing import Optional

from contract_route_toolkit.config.settings import load_catalog


DEFAULT_RECOMMENDED_DAYS = 2


class CityCatalog:
    """
    Case-insensitive lookup table keyed by city name.

    Attractions match in both directions (the name contains the key or the
    key contains the name); recommended days and descriptions only match
    when the name contains the key.

    Example:
        >>> catalog = CityCatalog.from_config()
        >>> catalog.attractions_for("Paris")
        ['埃菲尔铁塔', '卢浮宫', '圣母院', '香榭丽舍大街', '凯旋门']
    """

    def __init__(
        self,
        cities: Optional[dict[str, dict]] = None,
        default_recommended_days: int = DEFAULT_RECOMMENDED_DAYS
    ):
        """
        Initialize the catalog.

        Args:
            cities: Mapping of city key to attractions, recommended_days
                and description
            default_recommended_days: Stay for cities without an entry
        """
        self.cities = dict(cities or {})
        self.default_recommended_days = default_recommended_days

    @classmethod
    def from_config(
        cls,
        path: Optional[Path] = None,
        default_recommended_days: int = DEFAULT_RECOMMENDED_DAYS
    ) -> "CityCatalog":
        """Load the catalog from YAML (bundled catalog by default)."""
        data = load_catalog(path)
        return cls(data.get("cities") or {}, default_recommended_days)

    def _lookup(self, name: str, field: str, bidirectional: bool = False):
        lowered = name.lower()
        for key, entry in self.cities.items():
            key_lower = key.lower()
            if key_lower in lowered or (bidirectional and lowered in key_lower):
                if field in entry:
                    return entry[field]
        return None

    def attractions_for(self, name: str) -> list[str]:
        """Attractions of a city, or three generic placeholders."""
        attractions = self._lookup(name, "attractions", bidirectional=True)
        if attractions is not None:
            return list(attractions)
        return [f"{name}主要景点", f"{name}历史文化区", f"{name}自然风光"]

    def recommended_days_for(self, name: str) -> int:
        """Recommended stay in days."""
        days = self._lookup(name, "recommended_days")
        return int(days) if days is not None else self.default_recommended_days

    def description_for(self, name: str) -> str:
        """One-line description of a city."""
        description = self._lookup(name, "description")
        return description if description is not None else f"探索{name}的独特魅力和文化风情"

    def __contains__(self, name: str) -> bool:
        return self._lookup(name, "attractions", bidirectional=True) is not None

    def __len__(self) -> int:
        return len(self.cities)

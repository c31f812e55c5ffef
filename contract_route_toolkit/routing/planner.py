"""
Multi-destination Route Planner.

Resolves destination names, orders the stops by nearest neighbor and
annotates each stop with stay, transport, cost and attractions. Trip
level budget, best travel time and tips are attached to the plan.
"""

import logging
from typing import Optional, Sequence

from contract_route_toolkit.config.settings import RouteConfig, get_config
from contract_route_toolkit.models.schemas import Location, PlaceStop, RoutePlan, TravelStyle
from contract_route_toolkit.routing.catalog import CityCatalog
from contract_route_toolkit.routing.geo import (
    haversine_distance,
    nearest_neighbor_order,
    path_distance,
)
from contract_route_toolkit.tools.geocoding import Geocoder

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

STYLE_TRANSPORTATION = {
    TravelStyle.BUDGET: "公共交通/经济航班",
    TravelStyle.COMFORT: "高铁/商务航班",
    TravelStyle.LUXURY: "头等舱/私人交通",
}
DEFAULT_TRANSPORTATION = "公共交通"

ARRIVAL_TRANSPORTATION = "到达目的地"

# style -> (ground, air)
SEGMENT_TRANSPORTATION = {
    TravelStyle.BUDGET: ("长途巴士", "经济舱航班"),
    TravelStyle.COMFORT: ("高铁/快车", "商务舱航班"),
    TravelStyle.LUXURY: ("私人包车", "头等舱航班"),
}

BEST_TRAVEL_TIME = "春季和秋季是大多数目的地的最佳旅行时间，天气宜人，游客相对较少"

BASE_TIPS = [
    "提前预订住宿和交通，可以获得更好的价格",
    "建议购买旅行保险，确保旅途安全",
    "准备好各国的签证和护照，检查有效期",
    "下载离线地图和翻译APP，方便出行",
]

STYLE_TIPS = {
    TravelStyle.BUDGET: [
        "寻找当地美食街和市场，体验地道文化的同时节省费用",
        "选择青年旅社或民宿，既经济又能结识新朋友",
    ],
    TravelStyle.LUXURY: [
        "预订米其林星级餐厅，享受顶级美食体验",
        "考虑私人导游服务，获得更深入的文化体验",
    ],
}

LONG_TRIP_TIP = "长途旅行建议适当安排休息日，避免过度疲劳"
MULTI_CITY_TIP = "多城市旅行建议轻装出行，可以在当地购买纪念品"

LONG_TRIP_DAYS = 10
MULTI_CITY_COUNT = 3


class NoValidDestinationsError(ValueError):
    """Raised when none of the requested destinations could be resolved."""


# =============================================================================
# Pure Helpers
# =============================================================================

def _format_amount(value: float) -> str:
    """Format a number without a trailing .0 when it is integral."""
    return str(int(value)) if float(value).is_integer() else str(value)


def style_transportation(style: TravelStyle) -> str:
    """
    General transport label for a travel style.

    Advisory only: plan_route labels each stop per leg with
    segment_transportation.
    """
    try:
        return STYLE_TRANSPORTATION[TravelStyle(style)]
    except ValueError:
        return DEFAULT_TRANSPORTATION


def segment_transportation(
    previous: Optional[Location],
    current: Location,
    style: TravelStyle,
    ground_max_km: float = 300.0
) -> str:
    """
    Transport label for the leg arriving at a stop.

    Args:
        previous: Stop before this one (None for the first stop)
        current: Stop being arrived at
        style: Travel style
        ground_max_km: Legs shorter than this use ground transport

    Returns:
        Transport label
    """
    if previous is None:
        return ARRIVAL_TRANSPORTATION

    distance = haversine_distance(
        previous.latitude, previous.longitude,
        current.latitude, current.longitude,
    )
    ground, air = SEGMENT_TRANSPORTATION[TravelStyle(style)]

    return ground if distance < ground_max_km else air


def estimate_daily_cost(style: TravelStyle, config: Optional[RouteConfig] = None) -> str:
    """
    Daily cost range of a stop, e.g. ``¥500-750/天``.

    Args:
        style: Travel style
        config: Route settings holding the per-style daily costs

    Returns:
        Cost range string
    """
    config = config or RouteConfig()
    daily, multiplier = config.daily_costs[TravelStyle(style).value]
    return f"¥{daily}-{_format_amount(daily * multiplier)}/天"


def estimate_overall_budget(
    destination_count: int,
    duration_days: int,
    style: TravelStyle,
    config: Optional[RouteConfig] = None
) -> str:
    """
    Overall budget range of a trip.

    total = daily rate × days + surcharge × destinations; the range runs
    from total to total × 1.3.

    Args:
        destination_count: Number of resolved destinations
        duration_days: Trip length in days
        style: Travel style
        config: Route settings

    Returns:
        Budget range with thousands separators, e.g. ``¥4,400 - ¥5,720``
    """
    config = config or RouteConfig()
    rate = config.daily_budget_rates[TravelStyle(style).value]

    total = rate * duration_days + config.transport_surcharge * destination_count
    upper = round(total * config.budget_range_multiplier)

    return f"¥{total:,} - ¥{upper:,}"


def best_travel_time(stops: Sequence[Location] = ()) -> str:
    """Recommended travel season; the same for every route."""
    return BEST_TRAVEL_TIME


def generate_travel_tips(
    stops: Sequence[Location],
    style: TravelStyle,
    duration_days: int
) -> list[str]:
    """
    Travel tips for a route.

    Args:
        stops: Ordered stops
        style: Travel style
        duration_days: Trip length in days

    Returns:
        Base tips followed by style, long-trip and multi-city tips
    """
    tips = list(BASE_TIPS)
    tips.extend(STYLE_TIPS.get(TravelStyle(style), []))

    if duration_days > LONG_TRIP_DAYS:
        tips.append(LONG_TRIP_TIP)

    if len(stops) > MULTI_CITY_COUNT:
        tips.append(MULTI_CITY_TIP)

    return tips


# =============================================================================
# Route Planner
# =============================================================================

class RoutePlanner:
    """
    Plans an ordered route through a list of destinations.

    Example:
        >>> with OpenMeteoGeocoder() as geocoder:
        ...     planner = RoutePlanner(geocoder)
        ...     plan = planner.plan_route(["Paris", "Rome"], TravelStyle.BUDGET, 6)
    """

    def __init__(
        self,
        geocoder: Geocoder,
        catalog: Optional[CityCatalog] = None,
        config: Optional[RouteConfig] = None
    ):
        """
        Initialize the route planner.

        Args:
            geocoder: Resolves destination names to locations
            catalog: City lookup table (configured catalog by default)
            config: Route settings
        """
        toolkit_config = get_config()
        self.geocoder = geocoder
        self.config = config or toolkit_config.route
        if catalog is None:
            catalog = CityCatalog.from_config(
                toolkit_config.catalog_path, self.config.default_recommended_days
            )
        self.catalog = catalog

    def resolve_destinations(self, destinations: Sequence[str]) -> list[Location]:
        """
        Geocode destinations in input order, dropping those not found.

        Args:
            destinations: Destination names

        Returns:
            Resolved locations (duplicates kept)
        """
        locations = []
        for name in destinations:
            location = self.geocoder.resolve(name)
            if location is None:
                logger.warning("Dropping destination %r: not found", name)
                continue
            locations.append(location)
        return locations

    def plan_route(
        self,
        destinations: Sequence[str],
        style: TravelStyle = TravelStyle.COMFORT,
        duration_days: Optional[int] = None,
        start_location: Optional[str] = None
    ) -> RoutePlan:
        """
        Plan a route through the given destinations.

        Args:
            destinations: Destination names, first one is the starting stop
            style: Travel style
            duration_days: Trip length in days (7 if omitted)
            start_location: Accepted for compatibility; has no effect

        Returns:
            RoutePlan with ordered stops, distance, budget and tips

        Raises:
            NoValidDestinationsError: If no destination could be resolved
            ValueError: If style is not a known travel style
        """
        style = TravelStyle(style)
        if not duration_days:
            duration_days = self.config.default_duration_days

        locations = self.resolve_destinations(destinations)
        if not locations:
            raise NoValidDestinationsError("No valid destinations found")

        def distance(a: Location, b: Location) -> float:
            return haversine_distance(
                a.latitude, a.longitude, b.latitude, b.longitude,
                radius=self.config.earth_radius_km,
            )

        ordered = nearest_neighbor_order(locations, distance)
        total_distance = path_distance(ordered, distance)

        days_per_stop = max(1, duration_days // len(locations))
        daily_cost = estimate_daily_cost(style, self.config)

        route = []
        for index, location in enumerate(ordered):
            previous = ordered[index - 1] if index > 0 else None
            route.append(PlaceStop(
                name=location.name,
                latitude=location.latitude,
                longitude=location.longitude,
                country=location.country,
                region=location.region,
                attractions=self.catalog.attractions_for(location.name),
                recommended_days=days_per_stop,
                transportation=segment_transportation(
                    previous, location, style, self.config.ground_transport_max_km
                ),
                estimated_cost=daily_cost,
                description=self.catalog.description_for(location.name),
                order=index + 1,
            ))

        logger.debug(
            "Planned route through %d of %d destinations (%.0f km)",
            len(route), len(destinations), total_distance,
        )

        return RoutePlan(
            route=route,
            total_distance=round(total_distance),
            total_duration=duration_days,
            estimated_budget=estimate_overall_budget(
                len(locations), duration_days, style, self.config
            ),
            best_travel_time=best_travel_time(ordered),
            tips=generate_travel_tips(ordered, style, duration_days),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def plan_route(
    destinations: Sequence[str],
    geocoder: Geocoder,
    style: TravelStyle = TravelStyle.COMFORT,
    duration_days: Optional[int] = None,
    start_location: Optional[str] = None
) -> RoutePlan:
    """
    One-shot route planning with the configured catalog.

    Args:
        destinations: Destination names
        geocoder: Resolves destination names to locations
        style: Travel style
        duration_days: Trip length in days (7 if omitted)
        start_location: Accepted for compatibility; has no effect

    Returns:
        RoutePlan
    """
    return RoutePlanner(geocoder).plan_route(
        destinations, style, duration_days, start_location
    )

"""
Routing package for the Contract Route Toolkit.

Provides great-circle geometry, the city catalog, the route planner and
itinerary rendering.
"""

from contract_route_toolkit.routing.catalog import CityCatalog
from contract_route_toolkit.routing.geo import (
    haversine_distance,
    location_distance,
    nearest_neighbor_order,
    path_distance,
)
from contract_route_toolkit.routing.itinerary import build_route_summary, render_itinerary
from contract_route_toolkit.routing.planner import (
    NoValidDestinationsError,
    RoutePlanner,
    estimate_daily_cost,
    estimate_overall_budget,
    generate_travel_tips,
    plan_route,
    segment_transportation,
    style_transportation,
)

__all__ = [
    "CityCatalog",
    "haversine_distance",
    "location_distance",
    "nearest_neighbor_order",
    "path_distance",
    "build_route_summary",
    "render_itinerary",
    "NoValidDestinationsError",
    "RoutePlanner",
    "estimate_daily_cost",
    "estimate_overall_budget",
    "generate_travel_tips",
    "plan_route",
    "segment_transportation",
    "style_transportation",
]

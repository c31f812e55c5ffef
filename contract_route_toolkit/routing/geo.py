"""
Great-circle geometry for route planning.

Distances use the haversine formula on a sphere of radius 6371 km, and
stop ordering is a greedy nearest-neighbor pass.
"""

import math
from typing import Callable, Sequence, TypeVar

from contract_route_toolkit.models.schemas import Location

T = TypeVar("T")

EARTH_RADIUS_KM = 6371.0


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_KM
) -> float:
    """
    Great-circle distance between two points.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees
        radius: Sphere radius in kilometres

    Returns:
        Distance in kilometres
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c


def location_distance(a: Location, b: Location) -> float:
    """Haversine distance between two locations in kilometres."""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def nearest_neighbor_order(
    items: Sequence[T],
    distance: Callable[[T, T], float]
) -> list[T]:
    """
    Order items greedily by nearest neighbor, starting at the first item.

    Ties keep the earlier item. Two items or fewer are returned as given.

    Args:
        items: Items to order
        distance: Distance between two items

    Returns:
        New list with the same items in visiting order
    """
    if len(items) <= 2:
        return list(items)

    ordered = [items[0]]
    remaining = list(items[1:])

    while remaining:
        current = ordered[-1]
        nearest = 0
        min_distance = math.inf

        for index, candidate in enumerate(remaining):
            d = distance(current, candidate)
            if d < min_distance:
                min_distance = d
                nearest = index

        ordered.append(remaining.pop(nearest))

    return ordered


def path_distance(items: Sequence[T], distance: Callable[[T, T], float]) -> float:
    """Sum of the distances between consecutive items."""
    return sum(distance(a, b) for a, b in zip(items, items[1:]))

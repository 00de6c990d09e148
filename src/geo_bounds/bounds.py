"""Rectangular latitude/longitude bounds.

A bounds is stored as its southwest and northeast corners. It starts from
one or more points and can only grow through ``extend``/``extend_bounds``.
Longitudes are compared as plain numbers, so boxes crossing the antimeridian
are not handled.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from geo_bounds.latlng import LatLng

logger = logging.getLogger(__name__)


class LatLngBounds:
    """An axis-aligned bounding box defined by its southwest and northeast corners."""

    __slots__ = ("_sw", "_ne")

    def __init__(self, corner1: LatLng, corner2: LatLng) -> None:
        """Create bounds spanning two opposite corners, given in any order."""
        self._sw, self._ne = _extent([corner1, corner2])

    @classmethod
    def from_points(cls, points: Iterable[LatLng]) -> "LatLngBounds":
        """Create the smallest bounds containing every point.

        Raises:
            ValueError: If no points are given.
        """
        points = list(points)
        if not points:
            logger.debug("Rejected bounds construction from an empty point list")
            raise ValueError("LatLngBounds cannot be created with an empty list of LatLng")

        bounds = cls.__new__(cls)
        bounds._sw, bounds._ne = _extent(points)
        logger.debug(
            "Built bounds from %d points: sw=%s ne=%s",
            len(points),
            bounds._sw.to_tuple(),
            bounds._ne.to_tuple(),
        )
        return bounds

    @classmethod
    def from_corners(cls, a: LatLng, b: LatLng) -> "LatLngBounds":
        """Create bounds from two opposite corners, given in any order."""
        return cls(a, b)

    @classmethod
    def from_bbox(cls, bbox: Sequence[float]) -> "LatLngBounds":
        """Create bounds from a GeoJSON bbox ``[west, south, east, north]``."""
        if len(bbox) != 4:
            raise ValueError(f"bbox must have 4 values, got {len(bbox)}")
        west, south, east, north = bbox
        return cls(LatLng(south, west), LatLng(north, east))

    def extend(self, point: LatLng) -> None:
        """Grow the bounds in place so that it contains ``point``."""
        self._extend(point, point)

    def extend_bounds(self, other: "LatLngBounds") -> None:
        """Grow the bounds in place so that it contains ``other``.

        A smaller ``other`` never shrinks this bounds.
        """
        self._extend(other._sw, other._ne)

    def _extend(self, sw: LatLng, ne: LatLng) -> None:
        self._sw = LatLng(min(sw.lat, self._sw.lat), min(sw.lon, self._sw.lon))
        self._ne = LatLng(max(ne.lat, self._ne.lat), max(ne.lon, self._ne.lon))

    @property
    def west(self) -> float:
        return self._sw.lon

    @property
    def south(self) -> float:
        return self._sw.lat

    @property
    def east(self) -> float:
        return self._ne.lon

    @property
    def north(self) -> float:
        return self._ne.lat

    @property
    def southwest(self) -> LatLng:
        return self._sw

    @property
    def northeast(self) -> LatLng:
        return self._ne

    @property
    def northwest(self) -> LatLng:
        return LatLng(self.north, self.west)

    @property
    def southeast(self) -> LatLng:
        return LatLng(self.south, self.east)

    @property
    def center(self) -> LatLng:
        """Great-circle midpoint between the southwest and northeast corners.

        This is not the arithmetic midpoint of the box. For very large boxes
        the result can fall outside the bounds.
        See http://www.movable-type.co.uk/scripts/latlong.html
        """
        phi1 = math.radians(self._sw.lat)
        lambda1 = math.radians(self._sw.lon)
        phi2 = math.radians(self._ne.lat)
        d_lambda = math.radians(self._ne.lon - self._sw.lon)

        bx = math.cos(phi2) * math.cos(d_lambda)
        by = math.cos(phi2) * math.sin(d_lambda)
        phi3 = math.atan2(
            math.sin(phi1) + math.sin(phi2),
            math.sqrt((math.cos(phi1) + bx) ** 2 + by**2),
        )
        lambda3 = lambda1 + math.atan2(by, math.cos(phi1) + bx)

        return LatLng(math.degrees(phi3), math.degrees(lambda3))

    def contains(self, point: LatLng) -> bool:
        """Check whether ``point`` lies inside or on the edge of the bounds."""
        return self.contains_bounds(LatLngBounds(point, point))

    def contains_bounds(self, other: "LatLngBounds") -> bool:
        """Check whether ``other`` lies entirely inside the bounds."""
        return (
            other._sw.lat >= self._sw.lat
            and other._ne.lat <= self._ne.lat
            and other._sw.lon >= self._sw.lon
            and other._ne.lon <= self._ne.lon
        )

    def is_overlapping(self, other: "LatLngBounds") -> bool:
        """Check whether the two bounds share any area. Touching edges count."""
        # Disjoint along either axis means no overlap
        if (
            self._sw.lat > other._ne.lat
            or self._ne.lat < other._sw.lat
            or self._ne.lon < other._sw.lon
            or self._sw.lon > other._ne.lon
        ):
            return False
        return True

    def copy(self) -> "LatLngBounds":
        """Return an independent bounds with the same corners."""
        return LatLngBounds(self._sw, self._ne)

    def to_bbox(self) -> list[float]:
        """Return the bounds as a GeoJSON bbox ``[west, south, east, north]``."""
        return [self.west, self.south, self.east, self.north]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON storage."""
        return {
            "southwest": self._sw.model_dump(),
            "northeast": self._ne.model_dump(),
        }

    def __contains__(self, item: object) -> bool:
        if isinstance(item, LatLngBounds):
            return self.contains_bounds(item)
        if isinstance(item, LatLng):
            return self.contains(item)
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatLngBounds):
            return NotImplemented
        return self._sw == other._sw and self._ne == other._ne

    def __hash__(self) -> int:
        return hash((self._sw, self._ne))

    def __repr__(self) -> str:
        return f"LatLngBounds(southwest={self._sw!r}, northeast={self._ne!r})"


def _extent(points: list[LatLng]) -> tuple[LatLng, LatLng]:
    """Fold points into their (southwest, northeast) corners."""
    first = points[0]
    min_lat = max_lat = first.lat
    min_lon = max_lon = first.lon

    for point in points[1:]:
        min_lat = min(min_lat, point.lat)
        min_lon = min(min_lon, point.lon)
        max_lat = max(max_lat, point.lat)
        max_lon = max(max_lon, point.lon)

    return LatLng(min_lat, min_lon), LatLng(max_lat, max_lon)

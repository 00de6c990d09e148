"""Latitude/longitude bounding boxes for mapping applications."""

from geo_bounds.bounds import LatLngBounds
from geo_bounds.latlng import LatLng

__version__ = "0.1.0"
__all__ = ["LatLng", "LatLngBounds"]

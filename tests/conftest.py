"""Pytest configuration and fixtures for geo_bounds tests."""

import pytest

from geo_bounds import LatLng, LatLngBounds


@pytest.fixture
def unit_box():
    """Bounds from (0, 0) to (10, 10)."""
    return LatLngBounds(LatLng(0, 0), LatLng(10, 10))


@pytest.fixture
def scattered_points():
    """Points spread over both hemispheres."""
    return [
        LatLng(12.5, -3.0),
        LatLng(-45.0, 100.25),
        LatLng(60.0, 7.5),
        LatLng(0.0, -120.0),
    ]

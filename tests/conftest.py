"""
Pytest configuration and fixtures for geojson-validators tests.

This module provides:
- Test environment configuration
- Sample GeoJSON data fixtures
- Invalid data fixtures for error testing
"""

import os

import pytest

# Set test environment variables before the package configures its loggers
os.environ.setdefault("GEOJSON_LOG_LEVEL", "DEBUG")

from geojson_validators.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Sample GeoJSON Data Fixtures
# ============================================================================

@pytest.fixture
def sample_point():
    """Sample Point geometry."""
    return {
        "type": "Point",
        "coordinates": [12.123456, 13.134578]
    }


@pytest.fixture
def sample_linestring():
    """Sample LineString geometry."""
    return {
        "type": "LineString",
        "coordinates": [
            [12.123456, 13.1345678],
            [179.999999, -1.345],
            [12.0002, -45.4663]
        ]
    }


@pytest.fixture
def sample_polygon():
    """Sample Polygon geometry (closed ring)."""
    return {
        "type": "Polygon",
        "coordinates": [[
            [139.7, 35.7],
            [139.8, 35.7],
            [139.8, 35.8],
            [139.7, 35.8],
            [139.7, 35.7]  # Closed
        ]]
    }


@pytest.fixture
def sample_polygon_with_hole():
    """Sample Polygon with a hole."""
    return {
        "type": "Polygon",
        "coordinates": [
            # Exterior ring
            [
                [139.7, 35.7],
                [139.9, 35.7],
                [139.9, 35.9],
                [139.7, 35.9],
                [139.7, 35.7]
            ],
            # Hole
            [
                [139.75, 35.75],
                [139.85, 35.75],
                [139.85, 35.85],
                [139.75, 35.85],
                [139.75, 35.75]
            ]
        ]
    }


@pytest.fixture
def sample_multipoint():
    """Sample MultiPoint geometry."""
    return {
        "type": "MultiPoint",
        "coordinates": [
            [12.123456, 13.1345678],
            [179.999999, -1.345]
        ]
    }


@pytest.fixture
def sample_multilinestring():
    """Sample MultiLineString geometry."""
    return {
        "type": "MultiLineString",
        "coordinates": [
            [
                [12.123456, 13.1345678],
                [179.999999, -1.345],
                [12.0002, -45.4663]
            ],
            [
                [11.516862326077, 44.404681927713],
                [-22.655581167273, 60.740525317723],
                [79.68631037962, -44.541454554788]
            ]
        ]
    }


@pytest.fixture
def sample_multipolygon():
    """Sample MultiPolygon geometry."""
    return {
        "type": "MultiPolygon",
        "coordinates": [
            [
                [
                    [12.123456, 13.1345678],
                    [179.999999, -1.345],
                    [12.0002, -45.4663],
                    [12.123456, 13.1345678]
                ],
                [
                    [11.516862326077, 44.404681927713],
                    [-22.655581167273, 60.740525317723],
                    [79.68631037962, -44.541454554788],
                    [11.516862326077, 44.404681927713]
                ]
            ],
            [
                [
                    [27.915305121762, -38.36709506268],
                    [34.937754378159, -77.592500824291],
                    [60.951818176988, 8.8275726972276],
                    [27.915305121762, -38.36709506268]
                ]
            ]
        ]
    }


@pytest.fixture
def sample_geometry_collection(sample_point, sample_linestring, sample_polygon):
    """Sample GeometryCollection."""
    return {
        "type": "GeometryCollection",
        "geometries": [sample_point, sample_linestring, sample_polygon]
    }


@pytest.fixture
def sample_feature(sample_point):
    """Sample GeoJSON Feature."""
    return {
        "type": "Feature",
        "geometry": sample_point,
        "properties": {
            "name": "Dinagat Islands",
            "population": 127152
        }
    }


@pytest.fixture
def sample_feature_collection(sample_point, sample_polygon):
    """Sample GeoJSON FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": sample_point,
                "properties": {"name": "Point 1"}
            },
            {
                "type": "Feature",
                "id": 7,
                "geometry": sample_polygon,
                "properties": {"name": "Polygon 1"}
            }
        ]
    }


# ============================================================================
# CRS Fixtures
# ============================================================================

@pytest.fixture
def named_crs():
    """CRS specified by name (Web Mercator)."""
    return {
        "type": "name",
        "properties": {"name": "urn:ogc:def:crs:EPSG::3857"}
    }


@pytest.fixture
def linked_crs():
    """CRS specified by link."""
    return {
        "type": "link",
        "properties": {
            "href": "http://example.com/crs/42",
            "type": "proj4"
        }
    }


@pytest.fixture
def projected_point(named_crs):
    """Point in projected metres, far outside degree bounds."""
    return {
        "type": "Point",
        "coordinates": [1349350.5, 5012320.25],
        "crs": named_crs
    }


# ============================================================================
# Invalid Data Fixtures (for error testing)
# ============================================================================

@pytest.fixture
def invalid_geometry_no_type():
    """Invalid geometry missing type."""
    return {"coordinates": [139.7, 35.7]}


@pytest.fixture
def invalid_geometry_bad_type():
    """Invalid geometry with unknown type."""
    return {"type": "InvalidType", "coordinates": [139.7, 35.7]}


@pytest.fixture
def invalid_point_out_of_range():
    """Point with coordinates out of valid range."""
    return {"type": "Point", "coordinates": [200, 100]}


@pytest.fixture
def invalid_polygon_not_closed():
    """Polygon that is not closed."""
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [4, 0], [4, 4], [1, 1]]]
    }

"""
geojson-validators

Structural and numeric validation of GeoJSON values.
"""

__version__ = "0.1.0"

from geojson_validators.cast import cast, cast_geojson
from geojson_validators.config import Settings, get_settings
from geojson_validators.errors import (
    ErrorCode,
    ErrorKind,
    GeoJSONError,
    GeoJSONValidationError,
)
from geojson_validators.validators import (
    GEOJSON_TYPES,
    GEOMETRY_TYPES,
    VALIDATORS,
    ValidationResult,
    is_valid_geojson,
    is_valid_geometry,
    is_valid_position,
    validate_any,
    validate_crs,
    validate_feature,
    validate_feature_collection,
    validate_geojson,
    validate_geometry,
    validate_geometry_collection,
    validate_line_string,
    validate_multi_line_string,
    validate_multi_point,
    validate_multi_polygon,
    validate_point,
    validate_polygon,
    validate_position,
)

__all__ = [
    "cast",
    "cast_geojson",
    "Settings",
    "get_settings",
    "ErrorCode",
    "ErrorKind",
    "GeoJSONError",
    "GeoJSONValidationError",
    "GEOJSON_TYPES",
    "GEOMETRY_TYPES",
    "VALIDATORS",
    "ValidationResult",
    "is_valid_geojson",
    "is_valid_geometry",
    "is_valid_position",
    "validate_any",
    "validate_crs",
    "validate_feature",
    "validate_feature_collection",
    "validate_geojson",
    "validate_geometry",
    "validate_geometry_collection",
    "validate_line_string",
    "validate_multi_line_string",
    "validate_multi_point",
    "validate_multi_polygon",
    "validate_point",
    "validate_polygon",
    "validate_position",
]

"""
Cast functions for GeoJSON values.

Each cast_* function validates a value as one GeoJSON kind and returns it
unchanged, raising GeoJSONValidationError when it does not conform. They are
the hook point for document mappers and schema libraries that expect an
identity transform which raises on bad input.

Usage:
    from geojson_validators.cast import cast_polygon

    document["area"] = cast_polygon(payload)
"""

from typing import Any

from geojson_validators.errors import ErrorKind, GeoJSONValidationError
from geojson_validators.logger import get_logger
from geojson_validators.validators import (
    VALIDATORS,
    ValidationResult,
    validate_any,
    validate_feature,
    validate_feature_collection,
    validate_geometry,
    validate_geometry_collection,
    validate_line_string,
    validate_multi_line_string,
    validate_multi_point,
    validate_multi_polygon,
    validate_point,
    validate_polygon,
)

logger = get_logger(__name__)


def _unwrap(result: ValidationResult) -> Any:
    if not result.valid:
        logger.debug(
            f"Cast failed: {result.error}",
            extra={
                "kind": result.kind.value,
                "path": result.path,
                "geojson_type": result.type_name,
            },
        )
    return result.raise_for_error()


def cast_point(value: Any) -> Any:
    return _unwrap(validate_point(value))


def cast_multi_point(value: Any) -> Any:
    return _unwrap(validate_multi_point(value))


def cast_line_string(value: Any) -> Any:
    return _unwrap(validate_line_string(value))


def cast_multi_line_string(value: Any) -> Any:
    return _unwrap(validate_multi_line_string(value))


def cast_polygon(value: Any) -> Any:
    return _unwrap(validate_polygon(value))


def cast_multi_polygon(value: Any) -> Any:
    return _unwrap(validate_multi_polygon(value))


def cast_geometry(value: Any) -> Any:
    return _unwrap(validate_geometry(value))


def cast_geometry_collection(value: Any) -> Any:
    return _unwrap(validate_geometry_collection(value))


def cast_feature(value: Any) -> Any:
    return _unwrap(validate_feature(value))


def cast_feature_collection(value: Any) -> Any:
    return _unwrap(validate_feature_collection(value))


def cast_geojson(value: Any) -> Any:
    """Cast any GeoJSON value, dispatched on its 'type' member."""
    return _unwrap(validate_any(value))


def cast(type_name: str, value: Any) -> Any:
    """
    Cast value as the GeoJSON kind named by type_name.

    type_name is one of the registered kinds (e.g. "Polygon", "Feature") or
    "GeoJSON" for dispatch on the value's own 'type'.

    Raises:
        GeoJSONValidationError: If type_name is unknown or value does not conform
    """
    if type_name == "GeoJSON":
        return cast_geojson(value)

    validator = VALIDATORS.get(type_name) if isinstance(type_name, str) else None
    if validator is None:
        raise GeoJSONValidationError(
            f"{type_name!r} is not a valid GeoJSON type",
            kind=ErrorKind.UNKNOWN_TYPE,
            value=type_name,
        )
    return _unwrap(validator(value))

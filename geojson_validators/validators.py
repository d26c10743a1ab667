"""
GeoJSON validation engine.

Provides validation functions for every GeoJSON object kind:
- Positions (coordinate arity, numeric type and WGS84 ranges)
- Coordinate reference system (CRS) objects
- Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon
- Geometry, GeometryCollection, Feature and FeatureCollection
- Any GeoJSON value, dispatched on its 'type' member

All validators return a ValidationResult with success status and error
details; they never raise for malformed input. The active CRS is passed
explicitly through the ``crs`` keyword: a value's own 'crs' member replaces
the inherited one for everything nested inside it, and an explicit null
clears it. Range checks on positions only apply when no CRS is active.
"""

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from geojson_validators.config import get_settings
from geojson_validators.errors import (
    ErrorKind,
    GeoJSONValidationError,
    create_error_response,
    render_value,
)
from geojson_validators.logger import ValidationCallLogger, get_logger

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool
    error: str | None = None
    kind: ErrorKind | None = None
    path: str | None = None
    value: Any = None  # Input on success, offending member on failure
    type_name: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        result: dict[str, Any] = {"valid": self.valid}
        if self.error:
            result["error"] = self.error
        if self.kind:
            result["kind"] = self.kind.value
        if self.path:
            result["path"] = self.path
        if self.type_name:
            result["type"] = self.type_name
        if not self.valid:
            result["value"] = render_value(self.value, get_settings().max_value_repr)
        return result

    def to_error_response(self, **kwargs) -> dict:
        """Convert to error response dictionary."""
        if self.valid:
            return {}
        fields: dict[str, Any] = {"kind": self.kind.value}
        if self.path:
            fields["path"] = self.path
        if self.type_name:
            fields["type"] = self.type_name
        fields.update(kwargs)
        return create_error_response(self.error, self.kind.code, **fields)

    def raise_for_error(self) -> Any:
        """Return the validated value, or raise GeoJSONValidationError."""
        if self.valid:
            return self.value
        raise GeoJSONValidationError(
            self.error,
            kind=self.kind,
            path=self.path,
            type_name=self.type_name,
            value=self.value,
        )


Validator = Callable[..., ValidationResult]


# ============================================================
# Constants
# ============================================================

GEOMETRY_TYPES = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
)

GEOJSON_TYPES = GEOMETRY_TYPES + (
    "Geometry",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
)

CRS_TYPES = ("name", "link")


# ============================================================
# Helpers
# ============================================================

def _ok(value: Any = None, type_name: str | None = None) -> ValidationResult:
    return ValidationResult(valid=True, value=value, type_name=type_name)


def _fail(
    kind: ErrorKind,
    error: str,
    path: str,
    value: Any,
    type_name: str | None = None,
) -> ValidationResult:
    return ValidationResult(
        valid=False,
        error=error,
        kind=kind,
        path=path or None,
        value=value,
        type_name=type_name,
    )


def _tag(result: ValidationResult, type_name: str) -> ValidationResult:
    """Attach the GeoJSON kind to a failure raised by an anonymous check."""
    if result.type_name is None:
        result.type_name = type_name
    return result


def _join(path: str, part: str) -> str:
    if not path:
        return part
    if part.startswith("["):
        return f"{path}{part}"
    return f"{path}.{part}"


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _check_object(value: Any, type_name: str, path: str) -> ValidationResult | None:
    """Fail unless value is a mapping with a 'type' member equal to type_name."""
    if not isinstance(value, Mapping):
        return _fail(
            ErrorKind.NOT_AN_OBJECT,
            f"{type_name} must be an object, got {type(value).__name__}",
            path,
            value,
            type_name,
        )

    actual = value.get("type")
    if not actual:
        return _fail(
            ErrorKind.MISSING_TYPE,
            f"{type_name} must have a type",
            _join(path, "type"),
            value,
            type_name,
        )

    if actual != type_name:
        return _fail(
            ErrorKind.TYPE_MISMATCH,
            f"{actual} is not a valid {type_name} type",
            _join(path, "type"),
            actual,
            type_name,
        )

    return None


def _resolve_crs(
    value: Mapping,
    crs: Mapping | None,
    path: str,
) -> tuple[ValidationResult | None, Mapping | None]:
    """
    Work out the CRS active inside a GeoJSON object.

    Returns:
        (failure, active_crs). failure is None when the object's own 'crs'
        member is absent or valid.
    """
    if "crs" not in value:
        return None, crs

    own = value["crs"]
    result = validate_crs(own, _join(path, "crs"))
    if not result.valid:
        return result, None
    return None, own


# ============================================================
# Position Validation
# ============================================================

def validate_position(
    value: Any,
    crs: Mapping | None = None,
    path: str = "",
) -> ValidationResult:
    """
    Validate a position [longitude, latitude] or [longitude, latitude, altitude].

    Longitude and latitude must be finite numbers. Their ranges are only
    checked when no CRS is active, since coordinates in another CRS are not
    expressed in degrees.

    Args:
        value: Position to validate
        crs: Active CRS object, or None for WGS84 degrees
        path: Location of the position for error messages

    Returns:
        ValidationResult with the position if valid
    """
    if not _is_array(value):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            f"Position must be an array [longitude, latitude], got {type(value).__name__}",
            path,
            value,
        )

    if not 2 <= len(value) <= 3:
        return _fail(
            ErrorKind.WRONG_ARITY,
            f"Position must contain two or three coordinates, got {len(value)}",
            path,
            value,
        )

    for index, label in ((0, "longitude"), (1, "latitude")):
        if not _is_finite_number(value[index]):
            return _fail(
                ErrorKind.NOT_A_NUMBER,
                f"Position {label} must be a finite number, got {value[index]!r}",
                path,
                value,
            )

    if crs is None:
        settings = get_settings()
        lng, lat = value[0], value[1]

        if not settings.longitude_min <= lng <= settings.longitude_max:
            return _fail(
                ErrorKind.LONGITUDE_OUT_OF_RANGE,
                f"Longitude {lng} must be between {settings.longitude_min} "
                f"and {settings.longitude_max}",
                path,
                value,
            )

        if not settings.latitude_min <= lat <= settings.latitude_max:
            return _fail(
                ErrorKind.LATITUDE_OUT_OF_RANGE,
                f"Latitude {lat} must be between {settings.latitude_min} "
                f"and {settings.latitude_max}",
                path,
                value,
            )

    return _ok(value)


# ============================================================
# CRS Validation
# ============================================================

def validate_crs(value: Any, path: str = "crs") -> ValidationResult:
    """
    Validate a coordinate reference system object.

    null is valid and means "no CRS". Otherwise the CRS is either named
    ({"type": "name", "properties": {"name": ...}}) or linked
    ({"type": "link", "properties": {"href": ..., "type": ...}}).
    """
    if value is None:
        return _ok(None)

    if not isinstance(value, Mapping):
        return _fail(
            ErrorKind.INVALID_CRS_SHAPE,
            f"Crs must be an object or null, got {type(value).__name__}",
            path,
            value,
        )

    crs_type = value.get("type")
    if not crs_type:
        return _fail(ErrorKind.MISSING_CRS_TYPE, "Crs must have a type", path, value)

    if crs_type not in CRS_TYPES:
        return _fail(
            ErrorKind.INVALID_CRS_TYPE,
            f"Crs must be either a name or link, got {crs_type!r}",
            path,
            value,
        )

    properties = value.get("properties")
    if not isinstance(properties, Mapping):
        return _fail(
            ErrorKind.MISSING_CRS_PROPERTIES,
            "Crs must contain a properties object",
            path,
            value,
        )

    if crs_type == "name" and not _is_non_empty_string(properties.get("name")):
        return _fail(
            ErrorKind.MISSING_CRS_NAME,
            "Crs specified by name must have a name property",
            path,
            value,
        )

    if crs_type == "link" and not (
        _is_non_empty_string(properties.get("href"))
        and _is_non_empty_string(properties.get("type"))
    ):
        return _fail(
            ErrorKind.MISSING_CRS_LINK_FIELDS,
            "Crs specified by link must have an href and type property",
            path,
            value,
        )

    return _ok(value)


# ============================================================
# Coordinate Structure Checks
# ============================================================

def _check_position_list(
    coords: Any,
    crs: Mapping | None,
    path: str,
    type_name: str,
    min_positions: int,
) -> ValidationResult:
    """Validate [[lng, lat], ...] with at least min_positions entries."""
    if not _is_array(coords):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            f"{type_name} coordinates must be an array of positions",
            path,
            coords,
        )

    if len(coords) < min_positions:
        return _fail(
            ErrorKind.TOO_FEW_POINTS,
            f"{type_name} must have at least {min_positions} position(s), got {len(coords)}",
            path,
            coords,
        )

    for i, position in enumerate(coords):
        result = validate_position(position, crs, _join(path, f"[{i}]"))
        if not result.valid:
            return result

    return _ok(coords)


def _check_point_coords(coords: Any, crs: Mapping | None, path: str) -> ValidationResult:
    return validate_position(coords, crs, path)


def _check_multi_point_coords(coords: Any, crs: Mapping | None, path: str) -> ValidationResult:
    return _check_position_list(coords, crs, path, "MultiPoint", 1)


def _check_line_string_coords(coords: Any, crs: Mapping | None, path: str) -> ValidationResult:
    return _check_position_list(coords, crs, path, "LineString", 2)


def _check_multi_line_string_coords(
    coords: Any,
    crs: Mapping | None,
    path: str,
) -> ValidationResult:
    """Validate [[[lng, lat], ...], ...]; every line needs two positions."""
    if not _is_array(coords):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            "MultiLineString coordinates must be an array of LineString coordinate arrays",
            path,
            coords,
        )

    for i, line in enumerate(coords):
        result = _check_line_string_coords(line, crs, _join(path, f"[{i}]"))
        if not result.valid:
            return result

    return _ok(coords)


def _is_comparable_position(value: Any) -> bool:
    return _is_array(value) and all(_is_finite_number(v) for v in value)


def _positions_equal(first: Any, last: Any) -> bool:
    return list(first) == list(last)


def _check_linear_ring(ring: Any, crs: Mapping | None, path: str) -> ValidationResult:
    """Validate a closed ring of at least four positions."""
    if not _is_array(ring):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            "Each Polygon LinearRing must be an array of positions",
            path,
            ring,
        )

    if len(ring) < 4:
        return _fail(
            ErrorKind.TOO_FEW_RING_POINTS,
            f"Each Polygon LinearRing must have at least four positions, got {len(ring)}",
            path,
            ring,
        )

    first, last = ring[0], ring[-1]
    # Malformed end positions are reported by the position checks below
    if (
        _is_comparable_position(first)
        and _is_comparable_position(last)
        and not _positions_equal(first, last)
    ):
        return _fail(
            ErrorKind.RING_NOT_CLOSED,
            f"Each Polygon LinearRing must have an identical first and last position "
            f"({list(first)} != {list(last)})",
            path,
            ring,
        )

    for j, position in enumerate(ring):
        result = validate_position(position, crs, _join(path, f"[{j}]"))
        if not result.valid:
            return result

    return _ok(ring)


def _check_polygon_coords(coords: Any, crs: Mapping | None, path: str) -> ValidationResult:
    """Validate [[[lng, lat], ...], ...] (exterior ring followed by holes)."""
    if not _is_array(coords):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            "Polygon coordinates must be an array of linear rings",
            path,
            coords,
        )

    if len(coords) < 1:
        return _fail(
            ErrorKind.TOO_FEW_RING_POINTS,
            "Polygon must have at least one linear ring",
            path,
            coords,
        )

    for i, ring in enumerate(coords):
        result = _check_linear_ring(ring, crs, _join(path, f"[{i}]"))
        if not result.valid:
            return result

    return _ok(coords)


def _check_multi_polygon_coords(
    coords: Any,
    crs: Mapping | None,
    path: str,
) -> ValidationResult:
    """Validate [[[[lng, lat], ...], ...], ...]."""
    if not _is_array(coords):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            "MultiPolygon coordinates must be an array of Polygon coordinate arrays",
            path,
            coords,
        )

    for i, polygon in enumerate(coords):
        result = _check_polygon_coords(polygon, crs, _join(path, f"[{i}]"))
        if not result.valid:
            return result

    return _ok(coords)


# ============================================================
# Geometry Validation
# ============================================================

def _validate_geometry_object(
    value: Any,
    type_name: str,
    check_coordinates: Callable[[Any, Mapping | None, str], ValidationResult],
    crs: Mapping | None,
    path: str,
) -> ValidationResult:
    failure = _check_object(value, type_name, path)
    if failure:
        return failure

    failure, active_crs = _resolve_crs(value, crs, path)
    if failure:
        return _tag(failure, type_name)

    result = check_coordinates(value.get("coordinates"), active_crs, _join(path, "coordinates"))
    if not result.valid:
        return _tag(result, type_name)

    return _ok(value, type_name)


def validate_point(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """Validate a Point: {"type": "Point", "coordinates": [lng, lat]}."""
    return _validate_geometry_object(value, "Point", _check_point_coords, crs, path)


def validate_multi_point(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """Validate a MultiPoint with one or more positions."""
    return _validate_geometry_object(value, "MultiPoint", _check_multi_point_coords, crs, path)


def validate_line_string(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """Validate a LineString with two or more positions."""
    return _validate_geometry_object(value, "LineString", _check_line_string_coords, crs, path)


def validate_multi_line_string(
    value: Any,
    crs: Mapping | None = None,
    path: str = "",
) -> ValidationResult:
    """Validate a MultiLineString whose every line has two or more positions."""
    return _validate_geometry_object(
        value, "MultiLineString", _check_multi_line_string_coords, crs, path
    )


def validate_polygon(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """
    Validate a Polygon.

    Every linear ring needs at least four positions and must end where it
    starts, compared element-wise.
    """
    return _validate_geometry_object(value, "Polygon", _check_polygon_coords, crs, path)


def validate_multi_polygon(
    value: Any,
    crs: Mapping | None = None,
    path: str = "",
) -> ValidationResult:
    """Validate a MultiPolygon; each member follows the Polygon rules."""
    return _validate_geometry_object(
        value, "MultiPolygon", _check_multi_polygon_coords, crs, path
    )


_GEOMETRY_VALIDATORS: dict[str, Validator] = {
    "Point": validate_point,
    "MultiPoint": validate_multi_point,
    "LineString": validate_line_string,
    "MultiLineString": validate_multi_line_string,
    "Polygon": validate_polygon,
    "MultiPolygon": validate_multi_polygon,
}


def validate_geometry(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """
    Validate any of the six coordinate geometries, dispatched on 'type'.

    GeometryCollection is not accepted here; use
    validate_geometry_collection or validate_any for collections.

    Args:
        value: GeoJSON geometry object
        crs: Inherited CRS object, or None
        path: Location of the geometry for error messages

    Returns:
        ValidationResult with the geometry dict if valid
    """
    if not isinstance(value, Mapping):
        return _fail(
            ErrorKind.NOT_AN_OBJECT,
            f"Geometry must be a GeoJSON geometry object, got {type(value).__name__}",
            path,
            value,
            "Geometry",
        )

    geom_type = value.get("type")
    if not geom_type:
        return _fail(
            ErrorKind.MISSING_TYPE,
            "Geometry must have a type",
            _join(path, "type"),
            value,
            "Geometry",
        )

    validator = _GEOMETRY_VALIDATORS.get(geom_type) if isinstance(geom_type, str) else None
    if validator is None:
        return _fail(
            ErrorKind.UNKNOWN_GEOMETRY_TYPE,
            f"Invalid geometry type '{geom_type}'. Must be one of: {', '.join(GEOMETRY_TYPES)}",
            _join(path, "type"),
            geom_type,
            "Geometry",
        )

    return validator(value, crs=crs, path=path)


def validate_geometry_collection(
    value: Any,
    crs: Mapping | None = None,
    path: str = "",
) -> ValidationResult:
    """
    Validate a GeometryCollection.

    The 'type' member may be omitted when a collection is validated on its
    own, but if present it must be "GeometryCollection". Members are checked
    in order and the first failure is returned.
    """
    if not isinstance(value, Mapping):
        return _fail(
            ErrorKind.NOT_AN_OBJECT,
            f"GeometryCollection must be an object, got {type(value).__name__}",
            path,
            value,
            "GeometryCollection",
        )

    actual = value.get("type")
    if actual is not None and actual != "GeometryCollection":
        return _fail(
            ErrorKind.TYPE_MISMATCH,
            f"{actual} is not a valid GeometryCollection type",
            _join(path, "type"),
            actual,
            "GeometryCollection",
        )

    geometries = value.get("geometries")
    if not _is_array(geometries):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            "GeometryCollection must have a 'geometries' array",
            _join(path, "geometries"),
            geometries,
            "GeometryCollection",
        )

    failure, active_crs = _resolve_crs(value, crs, path)
    if failure:
        return _tag(failure, "GeometryCollection")

    for i, geometry in enumerate(geometries):
        result = validate_geometry(geometry, active_crs, _join(path, f"geometries[{i}]"))
        if not result.valid:
            return result

    return _ok(value, "GeometryCollection")


# ============================================================
# Feature Validation
# ============================================================

def validate_feature(value: Any, crs: Mapping | None = None, path: str = "") -> ValidationResult:
    """
    Validate a GeoJSON Feature.

    Requires a non-null geometry and a properties object (which may be
    empty). The 'id' member is not constrained.
    """
    failure = _check_object(value, "Feature", path)
    if failure:
        return failure

    geometry = value.get("geometry")
    if geometry is None:
        return _fail(
            ErrorKind.MISSING_GEOMETRY,
            "Feature must have a geometry",
            _join(path, "geometry"),
            value,
            "Feature",
        )

    properties = value.get("properties")
    if properties is None:
        return _fail(
            ErrorKind.MISSING_PROPERTIES,
            "Feature must have a properties object",
            _join(path, "properties"),
            value,
            "Feature",
        )

    if not isinstance(properties, Mapping):
        return _fail(
            ErrorKind.INVALID_PROPERTIES,
            f"Feature properties must be an object, got {type(properties).__name__}",
            _join(path, "properties"),
            properties,
            "Feature",
        )

    failure, active_crs = _resolve_crs(value, crs, path)
    if failure:
        return _tag(failure, "Feature")

    result = validate_geometry(geometry, active_crs, _join(path, "geometry"))
    if not result.valid:
        return result

    return _ok(value, "Feature")


def validate_feature_collection(
    value: Any,
    crs: Mapping | None = None,
    path: str = "",
) -> ValidationResult:
    """Validate a FeatureCollection; the first invalid feature is reported."""
    failure = _check_object(value, "FeatureCollection", path)
    if failure:
        return failure

    features = value.get("features")
    if features is None:
        return _fail(
            ErrorKind.MISSING_FEATURES,
            "FeatureCollection must have a features array",
            _join(path, "features"),
            value,
            "FeatureCollection",
        )

    if not _is_array(features):
        return _fail(
            ErrorKind.NOT_AN_ARRAY,
            f"FeatureCollection features must be an array, got {type(features).__name__}",
            _join(path, "features"),
            features,
            "FeatureCollection",
        )

    failure, active_crs = _resolve_crs(value, crs, path)
    if failure:
        return _tag(failure, "FeatureCollection")

    for i, feature in enumerate(features):
        result = validate_feature(feature, active_crs, _join(path, f"features[{i}]"))
        if not result.valid:
            return result

    return _ok(value, "FeatureCollection")


# ============================================================
# Top-Level Dispatch
# ============================================================

VALIDATORS: Mapping[str, Validator] = MappingProxyType({
    **_GEOMETRY_VALIDATORS,
    "Geometry": validate_geometry,
    "GeometryCollection": validate_geometry_collection,
    "Feature": validate_feature,
    "FeatureCollection": validate_feature_collection,
})


def validate_any(value: Any) -> ValidationResult:
    """
    Validate any GeoJSON value, dispatched on its 'type' member.

    This is the public entry point for adapters. The matched validator's
    result is returned unchanged.

    Args:
        value: Candidate GeoJSON object

    Returns:
        ValidationResult with the value if valid
    """
    if not isinstance(value, Mapping):
        return _fail(
            ErrorKind.NOT_AN_OBJECT,
            f"GeoJSON value must be an object, got {type(value).__name__}",
            "",
            value,
        )

    type_name = value.get("type")
    if not type_name:
        return _fail(
            ErrorKind.MISSING_TYPE,
            "GeoJSON objects must have a type",
            "type",
            value,
        )

    validator = VALIDATORS.get(type_name) if isinstance(type_name, str) else None
    if validator is None:
        return _fail(
            ErrorKind.UNKNOWN_TYPE,
            f"{type_name} is not a valid GeoJSON type",
            "type",
            type_name,
        )

    with ValidationCallLogger(logger, type_name) as log:
        result = validator(value)
        log.set_result(result)
    return result


validate_geojson = validate_any


# ============================================================
# Convenience Functions
# ============================================================

def is_valid_position(value: Any, crs: Mapping | None = None) -> bool:
    """Quick check if a position is valid."""
    return validate_position(value, crs).valid


def is_valid_geometry(value: Any) -> bool:
    """Quick check if a value is one of the six coordinate geometries."""
    return validate_geometry(value).valid


def is_valid_geojson(value: Any) -> bool:
    """Quick check if a value is any valid GeoJSON object."""
    return validate_any(value).valid

"""
Pydantic field types for GeoJSON members.

Use these as annotations on BaseModel fields to validate GeoJSON values on
assignment:

    class Place(BaseModel):
        name: str
        location: PointField
        area: PolygonField | None = None

Invalid values raise pydantic.ValidationError; the error message carries the
GeoJSON error kind and the failing path.
"""

from typing import Annotated, Any, Callable

from pydantic import AfterValidator

from geojson_validators.validators import (
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


def _field_validator(
    validator: Callable[[Any], ValidationResult],
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    def check(value: dict[str, Any]) -> dict[str, Any]:
        result = validator(value)
        if not result.valid:
            location = f" at {result.path}" if result.path else ""
            # pydantic only converts ValueError into a ValidationError
            raise ValueError(f"{result.kind.value}{location}: {result.error}")
        return value

    return check


PointField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_point))]
MultiPointField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_multi_point))]
LineStringField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_line_string))]
MultiLineStringField = Annotated[
    dict[str, Any], AfterValidator(_field_validator(validate_multi_line_string))
]
PolygonField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_polygon))]
MultiPolygonField = Annotated[
    dict[str, Any], AfterValidator(_field_validator(validate_multi_polygon))
]
GeometryField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_geometry))]
GeometryCollectionField = Annotated[
    dict[str, Any], AfterValidator(_field_validator(validate_geometry_collection))
]
FeatureField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_feature))]
FeatureCollectionField = Annotated[
    dict[str, Any], AfterValidator(_field_validator(validate_feature_collection))
]
GeoJSONField = Annotated[dict[str, Any], AfterValidator(_field_validator(validate_any))]

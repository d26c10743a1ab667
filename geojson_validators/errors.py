"""
Error taxonomy and exceptions for geojson-validators.

This module provides:
- ErrorKind, the fine-grained reason a value failed validation
- ErrorCode, coarse codes for programmatic handling by callers
- Exception classes raised by the cast layer
- Standardized error response formatting

Usage:
    from geojson_validators.errors import (
        ErrorKind,
        GeoJSONValidationError,
        create_error_response,
    )

    try:
        cast_point(value)
    except GeoJSONValidationError as e:
        if e.kind is ErrorKind.RING_NOT_CLOSED:
            ...
        return e.to_dict()
"""

import reprlib
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Reason a value failed GeoJSON validation."""

    # Discriminator errors
    MISSING_TYPE = "MissingType"
    TYPE_MISMATCH = "TypeMismatch"
    UNKNOWN_GEOMETRY_TYPE = "UnknownGeometryType"
    UNKNOWN_TYPE = "UnknownType"

    # Shape errors
    NOT_AN_OBJECT = "NotAnObject"
    NOT_AN_ARRAY = "NotAnArray"

    # Position errors
    WRONG_ARITY = "WrongArity"
    NOT_A_NUMBER = "NotANumber"
    LONGITUDE_OUT_OF_RANGE = "LongitudeOutOfRange"
    LATITUDE_OUT_OF_RANGE = "LatitudeOutOfRange"

    # Line and ring errors
    TOO_FEW_POINTS = "TooFewPoints"
    TOO_FEW_RING_POINTS = "TooFewRingPoints"
    RING_NOT_CLOSED = "RingNotClosed"

    # Feature errors
    MISSING_GEOMETRY = "MissingGeometry"
    MISSING_PROPERTIES = "MissingProperties"
    INVALID_PROPERTIES = "InvalidProperties"
    MISSING_FEATURES = "MissingFeatures"

    # CRS errors
    INVALID_CRS_SHAPE = "InvalidCrsShape"
    MISSING_CRS_TYPE = "MissingCrsType"
    INVALID_CRS_TYPE = "InvalidCrsType"
    MISSING_CRS_PROPERTIES = "MissingCrsProperties"
    MISSING_CRS_NAME = "MissingCrsName"
    MISSING_CRS_LINK_FIELDS = "MissingCrsLinkFields"

    @property
    def code(self) -> "ErrorCode":
        """Coarse error code for this kind."""
        if self is ErrorKind.UNKNOWN_TYPE:
            return ErrorCode.UNKNOWN_TYPE
        if self.value.startswith(("InvalidCrs", "MissingCrs")):
            return ErrorCode.INVALID_CRS
        return ErrorCode.VALIDATION_ERROR


class ErrorCode(str, Enum):
    """Standardized error codes for error responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    INVALID_CRS = "INVALID_CRS"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


_value_repr = reprlib.Repr()
_value_repr.maxlist = 6
_value_repr.maxdict = 6
_value_repr.maxlevel = 4
_value_repr.maxstring = 60
_value_repr.maxother = 60


def render_value(value: Any, max_length: int = 200) -> str:
    """Render an offending value for diagnostics, truncated to max_length."""
    text = _value_repr.repr(value)
    if len(text) > max_length:
        return text[: max_length - 3] + "..."
    return text


class GeoJSONError(Exception):
    """Base exception for geojson-validators errors.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        code: ErrorCode for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a standardized error response dict."""
        result = {
            "error": self.message,
            "code": self.code.value,
        }
        if self.details:
            result["details"] = self.details
        return result


class GeoJSONValidationError(GeoJSONError):
    """Raised when a value is cast to a GeoJSON kind it does not conform to.

    Attributes:
        kind: ErrorKind describing the failure
        path: Location of the failing member (e.g. "coordinates[0][3]")
        type_name: GeoJSON kind being validated (e.g. "Polygon")
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        path: str | None = None,
        type_name: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        details["kind"] = kind.value
        if path:
            details["path"] = path
        if type_name:
            details["type"] = type_name
        super().__init__(message=message, code=kind.code, details=details)
        self.kind = kind
        self.path = path
        self.type_name = type_name
        self.value = value

    def __str__(self) -> str:
        if self.path:
            return f"{self.kind.value} at {self.path}: {self.message}"
        return f"{self.kind.value}: {self.message}"


def create_error_response(
    message: str,
    code: ErrorCode | str = ErrorCode.UNKNOWN_ERROR,
    **kwargs: Any,
) -> dict[str, Any]:
    """Create a standardized error response dict.

    A convenience function for creating error responses without
    raising exceptions.

    Args:
        message: Human-readable error message
        code: Error code (ErrorCode enum or string)
        **kwargs: Additional fields to include in the response

    Returns:
        Standardized error response dict

    Examples:
        return create_error_response(
            "Feature must have a geometry",
            ErrorCode.VALIDATION_ERROR,
            kind=ErrorKind.MISSING_GEOMETRY.value,
        )
    """
    result: dict[str, Any] = {
        "error": message,
        "code": code.value if isinstance(code, ErrorCode) else code,
    }
    result.update(kwargs)
    return result

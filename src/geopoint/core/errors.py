"""
Exception hierarchy for the geopoint toolkit.

Every failure the parser, renderer and codecs can report is a subclass of
GeoPointException, so callers (and the API error handlers) can catch one
type and still get a machine-readable error code and diagnostic details.
"""

from typing import Any, Dict, List, Optional


class GeoPointException(Exception):
    """
    Base exception for all geopoint errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code used by the API layer
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class ParseError(GeoPointException):
    """
    Raised when coordinate text cannot be turned into a Point.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        error_code: str = "PARSE_ERROR",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ParseError.

        Args:
            message: User-friendly error message
            text: The input text that failed to parse
            error_code: Specific parse error code
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if text is not None:
            error_details["input"] = text

        default_suggestions = [
            "Write latitude first, then longitude",
            "Use one notation for both axes, e.g. '45.6997, -69.7337' "
            "or 'N 45 41.985, W 69 44.023'",
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
        self.text = text


class MalformedCoordinateError(ParseError):
    """Raised when the text matches none of the supported notations."""

    def __init__(self, text: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Unable to parse value: {text}",
            text=text,
            error_code="MALFORMED_COORDINATE",
            details=details,
        )


class NumericConversionError(ParseError):
    """Raised when a matched numeric token cannot be converted to a float."""

    def __init__(self, token: str, text: Optional[str] = None):
        super().__init__(
            message=f"Unable to convert '{token}' to a number",
            text=text,
            error_code="NUMERIC_CONVERSION",
            details={"token": token},
            suggestions=["Use plain ASCII digits with an optional decimal point"],
        )
        self.token = token


class FormatError(GeoPointException):
    """
    Raised when a Point cannot be rendered as text.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "FORMAT_ERROR",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=400,
            details=details,
            suggestions=suggestions,
        )


class UnsupportedFormatError(FormatError):
    """Raised when an unknown notation is requested from the renderer."""

    def __init__(self, requested: Any, supported: Optional[List[str]] = None):
        supported = supported or []
        super().__init__(
            message=f"Invalid format: {requested}",
            error_code="UNSUPPORTED_FORMAT",
            details={"format": str(requested), "supported": supported},
            suggestions=[f"Use one of: {', '.join(supported)}"] if supported else None,
        )
        self.requested = requested


class DecodeError(GeoPointException):
    """
    Raised when an encoded Point cannot be decoded.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "DECODE_ERROR",
        encoding: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if encoding:
            error_details["encoding"] = encoding

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=422,
            details=error_details,
            suggestions=suggestions,
        )


class TruncatedInputError(DecodeError):
    """Raised when a binary payload is shorter than two doubles."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            message=f"Binary point needs {expected} bytes, got {received}",
            error_code="TRUNCATED_INPUT",
            encoding="binary",
            details={"expected_bytes": expected, "received_bytes": received},
            suggestions=["Send latitude and longitude as two little-endian doubles"],
        )


class InvalidPayloadError(DecodeError):
    """Raised when a JSON payload is not an object with numeric lat/lng."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            message=message,
            error_code="INVALID_PAYLOAD",
            encoding="json",
            details={"errors": errors or []},
            suggestions=['Send an object such as {"lat": 40.7486, "lng": -73.9864}'],
        )


class ConfigurationError(GeoPointException):
    """
    Raised when settings are invalid.

    Maps to HTTP 500 Internal Server Error.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=error_details,
            suggestions=["Check GEOPOINT_* environment variables"],
        )

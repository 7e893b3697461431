"""
Pydantic models for API error responses.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ErrorDetail(BaseModel):
    """A single field-level validation problem."""

    field: Optional[str] = Field(None, description="Field name that caused the error")
    message: str = Field(..., description="Error message for this field")
    code: Optional[str] = Field(None, description="Error code for this specific issue")


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing endpoint.

    Attributes:
        error_code: Machine-readable error identifier (e.g. 'MALFORMED_COORDINATE')
        message: Human-readable error message
        details: Optional technical details
        timestamp: When the error occurred (UTC)
        request_id: Request correlation ID
        suggestions: Optional list of actionable suggestions
        errors: Optional field-level errors (request validation only)
    """

    error_code: str = Field(..., examples=["MALFORMED_COORDINATE", "UNSUPPORTED_FORMAT"])
    message: str = Field(..., examples=["Unable to parse value: 95 N, 10 E"])
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: Optional[str] = None
    suggestions: Optional[List[str]] = None
    errors: Optional[List[ErrorDetail]] = None

    @field_serializer("timestamp")
    def serialize_timestamp(self, timestamp: datetime, _info) -> str:
        """Serialize timestamp to ISO format string."""
        return timestamp.isoformat()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "MALFORMED_COORDINATE",
                "message": "Unable to parse value: hello",
                "details": {"input": "hello"},
                "timestamp": "2026-01-10T15:30:00+00:00",
                "request_id": "550e8400-e29b-41d4-a716-446655440000",
                "suggestions": ["Write latitude first, then longitude"],
            }
        }
    )

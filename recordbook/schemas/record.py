"""
Recordbook: Pydantic Response Schemas
========================================

What:  Pydantic models defining what the API returns.
How:   FastAPI serializes route return values through these models and
       builds the OpenAPI document from them. Request input is form-encoded
       and parsed in the route layer, so there are no request models here.

Schemas are kept separate from the SQLAlchemy model: a row is only exposed
after it has been decoded into RecordResponse, and decoding is where a
malformed row is caught.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RecordResponse(BaseModel):
    """
    What:  Full representation of a person record.
    Who:   Returned by every /users route except DELETE.

    Serialized as {"id": int, "name": str, "age": int}.
    """
    id: int = Field(description="Store-assigned record identifier")
    name: str = Field(description="Person name (1-99 characters)")
    age: int = Field(description="Person age (0-199)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description taken from the underlying failure
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "name is empty",
            "details": {"field": "name"},
            "request_id": "3f9c2a1b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

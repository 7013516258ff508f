"""Common schemas shared across API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str = Field(..., description="Human-readable outcome")


class ErrorBody(CamelModel):
    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Error message")
    previous_result: Any | None = Field(
        default=None,
        description="Stored result of the original call (duplicate operations only)",
    )


class ErrorResponse(CamelModel):
    """Standard error envelope."""

    status: bool = False
    status_code: int
    correlation_id: str
    timestamp: str
    path: str
    error: ErrorBody

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": False,
                "statusCode": 404,
                "correlationId": "3f1c0b9e-6f0e-4b8e-9a44-2f6f3b1d2c55",
                "timestamp": "2026-01-01T00:00:00+00:00",
                "path": "/auth/login",
                "error": {"code": "AUTH_NOT_FOUND", "message": "Credential not found"},
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    checks: dict[str, str] = Field(default_factory=dict)

"""JSON payload models produced by the content providers and the router."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GreetingPayload(BaseModel):
    """Body of GET /api/hello."""
    message: str = Field(..., description="Greeting text")
    timestamp: str = Field(..., description="UTC ISO-8601 timestamp")
    environment: str = Field(..., description="Runtime environment designator")
    region: str = Field(..., description="Deployment region")


class HealthPayload(BaseModel):
    """Body of GET /api/health."""
    status: str = Field(default="ok", description="Health status")
    timestamp: str = Field(..., description="UTC ISO-8601 timestamp")
    uptime: float = Field(..., ge=0, description="Process uptime in seconds")
    memory: dict[str, int] = Field(default_factory=dict, description="Memory usage in bytes")
    environment: str = Field(..., description="Runtime environment designator")


class ExamplePayload(BaseModel):
    """Body of GET /api/example/{id}."""
    id: str = Field(..., description="Echoed path parameter")
    message: str = Field(..., description="Echo message")
    timestamp: str = Field(..., description="UTC ISO-8601 timestamp")


class ErrorPayload(BaseModel):
    """Body of a 500 response. ``stack`` is only set in development."""
    error: str = "Internal Server Error"
    message: str = Field(..., description="Error message")
    stack: Optional[str] = Field(None, description="Formatted traceback")


class NotFoundPayload(BaseModel):
    """Body of a 404 response."""
    model_config = ConfigDict(populate_by_name=True)

    error: str = "Not Found"
    message: str = Field(..., description="Which path was not found")
    available_endpoints: list[str] = Field(
        default_factory=list,
        alias="availableEndpoints",
        description="Registered path patterns in registration order",
    )

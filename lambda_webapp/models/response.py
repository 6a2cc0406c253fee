"""Response model - the normalized envelope returned to the host."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    """HTTP response with an already-serialized body."""
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: str = Field(default="", description="Serialized body")

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def to_event(self) -> dict[str, Any]:
        """Render in the shape the Lambda host expects."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }

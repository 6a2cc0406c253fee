"""Request model - the normalized view of an inbound host event."""

from typing import Any, Iterable, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_str_mapping(value: Any) -> dict[str, str]:
    """Keep string keys, stringify values, drop nulls."""
    return {
        str(key): str(item)
        for key, item in _as_dict(value).items()
        if item is not None
    }


class Request(BaseModel):
    """Normalized HTTP request handed to route handlers."""
    model_config = ConfigDict(frozen=True)

    method: str = Field(default="GET", description="HTTP verb, uppercase")
    path: str = Field(default="/", description="Request path, always starting with '/'")
    path_parameters: dict[str, str] = Field(default_factory=dict, description="Bound path parameters")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    domain_name: Optional[str] = Field(None, description="Host domain from the request context")
    raw_context: dict[str, Any] = Field(default_factory=dict, description="Opaque platform metadata")

    @field_validator("method")
    @classmethod
    def normalize_method(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_event(cls, event: Any) -> "Request":
        """
        Build a request from an HTTP API event.

        Missing or malformed fields fall back to GET and "/" instead of raising.
        Payload format 2.0 is preferred; the 1.0 ``httpMethod``/``path`` keys are
        accepted when the 2.0 ones are absent.
        """
        event = _as_dict(event)
        request_context = _as_dict(event.get("requestContext"))
        http = _as_dict(request_context.get("http"))

        method = http.get("method") or event.get("httpMethod") or "GET"
        path = event.get("rawPath") or event.get("path") or "/"
        if not isinstance(path, str):
            path = "/"
        if not path.startswith("/"):
            path = f"/{path}"

        domain_name = request_context.get("domainName")

        return cls(
            method=str(method).upper(),
            path=path,
            path_parameters=_as_str_mapping(event.get("pathParameters")),
            headers=_as_str_mapping(event.get("headers")),
            domain_name=str(domain_name) if domain_name else None,
            raw_context=request_context,
        )

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def with_path_parameters(
        self,
        parameters: Mapping[str, str],
        drop: Iterable[str] = ()
    ) -> "Request":
        """Return a copy with ``parameters`` bound on top of the existing ones and ``drop`` removed."""
        dropped = set(drop)
        merged = {
            name: value
            for name, value in self.path_parameters.items()
            if name not in dropped
        }
        merged.update(parameters)
        return self.model_copy(update={"path_parameters": merged})

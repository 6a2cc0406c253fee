"""Test helper functions."""

import json
from typing import Any, Dict, Optional


def create_http_event(
    method: str = "GET",
    path: str = "/",
    path_parameters: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    domain_name: Optional[str] = None
) -> Dict[str, Any]:
    """Create an HTTP API (payload v2) event for testing."""
    request_context: Dict[str, Any] = {"http": {"method": method}}
    if domain_name:
        request_context["domainName"] = domain_name

    event: Dict[str, Any] = {
        "rawPath": path,
        "requestContext": request_context,
        "headers": headers or {},
    }
    if path_parameters is not None:
        event["pathParameters"] = path_parameters
    return event


def parse_body(response: Any) -> Any:
    """Decode the JSON body of a Response model or a host response dict."""
    body = response["body"] if isinstance(response, dict) else response.body
    return json.loads(body)


def strip_timestamps(payload: Any) -> Any:
    """Drop ``timestamp`` keys so payloads can be compared across calls."""
    if isinstance(payload, dict):
        return {k: strip_timestamps(v) for k, v in payload.items() if k != "timestamp"}
    if isinstance(payload, list):
        return [strip_timestamps(item) for item in payload]
    return payload

"""Build response envelopes with the default JSON and CORS headers."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel
from pydantic_core import to_json

from lambda_webapp.models.response import Response

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def serialize_body(body: Any) -> str:
    """
    Strings pass through verbatim; everything else becomes indented JSON.

    Dates and times become ISO-8601 strings; values JSON has no form for fall
    back to ``str()``.
    """
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return to_json(body, indent=2, fallback=str).decode()


def merge_headers(*layers: Optional[Mapping[str, str]]) -> dict[str, str]:
    """
    Merge header mappings left to right.

    Names compare case-insensitively; a later layer replaces the earlier entry
    and its spelling of the name.
    """
    merged: dict[str, str] = {}
    names: dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            previous = names.get(name.lower())
            if previous is not None:
                del merged[previous]
            names[name.lower()] = name
            merged[name] = value
    return merged


def build_response(
    status_code: int,
    body: Any,
    headers: Optional[Mapping[str, str]] = None
) -> Response:
    """Wrap ``body`` in a response carrying the default headers plus ``headers``."""
    return Response(
        status_code=status_code,
        headers=merge_headers(DEFAULT_HEADERS, headers),
        body=serialize_body(body),
    )

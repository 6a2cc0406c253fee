"""CORS preflight short-circuit."""

from typing import Optional

from lambda_webapp.models.request import Request
from lambda_webapp.models.response import Response
from lambda_webapp.services.response_builder import build_response


def filter_cors(request: Request) -> Optional[Response]:
    """
    Answer OPTIONS requests before routing.

    Returns an empty 200 JSON response for preflight requests on any path,
    registered or not, and None for everything else.
    """
    if request.method == "OPTIONS":
        return build_response(200, {})
    return None

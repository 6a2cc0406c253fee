"""The application's registered routes."""

from typing import Optional

from lambda_webapp.models.request import Request
from lambda_webapp.models.response import Response
from lambda_webapp.models.route import RouteEntry
from lambda_webapp.services.content import (
    example_payload,
    greeting_payload,
    health_payload,
    render_homepage,
)
from lambda_webapp.services.metrics import ProcessMetrics
from lambda_webapp.services.response_builder import build_response
from lambda_webapp.services.route_table import RouteTable
from lambda_webapp.utils.config import Settings


def build_route_table(
    settings: Settings,
    metrics: Optional[ProcessMetrics] = None
) -> RouteTable:
    """
    Build the route table served by the Lambda entry point.

    Registration order is the order listed in 404 responses.
    """
    metrics = metrics or ProcessMetrics()

    async def homepage(request: Request) -> Response:
        return build_response(
            200,
            render_homepage(request, settings),
            {"Content-Type": "text/html"},
        )

    async def hello(request: Request) -> Response:
        return build_response(200, greeting_payload(settings))

    async def health(request: Request) -> Response:
        return build_response(200, health_payload(settings, metrics))

    async def example(request: Request) -> Response:
        return build_response(200, example_payload(request))

    return RouteTable(
        [
            RouteEntry.parse("GET", "/", homepage),
            RouteEntry.parse("GET", "/api/hello", hello),
            RouteEntry.parse("GET", "/api/health", health),
            RouteEntry.parse("GET", "/api/example/{id}", example),
        ],
        api_prefix=settings.api_prefix,
    )

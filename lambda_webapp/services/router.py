"""Dispatch requests to route handlers and normalize their outcomes."""

import traceback
from typing import Optional

from lambda_webapp.models.payloads import ErrorPayload, NotFoundPayload
from lambda_webapp.models.request import Request
from lambda_webapp.models.response import Response
from lambda_webapp.models.result import Err, HandlerResult, Ok
from lambda_webapp.models.route import Handler
from lambda_webapp.services.cors import filter_cors
from lambda_webapp.services.response_builder import build_response
from lambda_webapp.services.route_table import RouteTable
from lambda_webapp.utils.config import Settings
from lambda_webapp.utils.errors import HandlerFailure, RouteNotFound
from lambda_webapp.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


def format_stack(error: BaseException) -> str:
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


async def invoke_handler(handler: Handler, request: Request) -> HandlerResult:
    """Run ``handler`` and fold whatever it does into an Ok or Err."""
    try:
        outcome = await handler(request)
    except Exception as e:
        return Err(e)

    if isinstance(outcome, (Ok, Err)):
        return outcome
    if isinstance(outcome, Response):
        return Ok(outcome)
    return Err(TypeError(f"Handler returned {type(outcome).__name__}, expected Response"))


class Router:
    """Resolve a request against a route table and produce a response.

    Holds no per-request state: the same instance serves every invocation.
    """

    def __init__(self, route_table: RouteTable, settings: Optional[Settings] = None):
        self.route_table = route_table
        self.settings = settings or Settings()

    async def dispatch(self, request: Request) -> Response:
        """Route ``request``; never raises for handler failures or unknown paths."""
        preflight = filter_cors(request)
        if preflight is not None:
            return preflight

        try:
            match = self.route_table.require(request.method, request.path)
        except RouteNotFound as e:
            logger.info("Route not found", method=e.method, path=e.path)
            return self.not_found(e)

        if match.path_params or match.unbound:
            request = request.with_path_parameters(match.path_params, drop=match.unbound)

        route = f"{match.entry.method} {match.entry.pattern}"
        result = await invoke_handler(match.entry.handler, request)
        if isinstance(result, Ok):
            return result.response

        failure = HandlerFailure(route, result.error, stack=format_stack(result.error))
        logger.error(
            "Error handling request",
            exc_info=(type(result.error), result.error, result.error.__traceback__),
            route=route,
            path=request.path,
        )
        return self.internal_error(failure)

    def not_found(self, error: RouteNotFound) -> Response:
        payload = NotFoundPayload(
            message=str(error),
            available_endpoints=self.route_table.available_endpoints(),
        )
        return build_response(404, payload)

    def internal_error(self, failure: HandlerFailure) -> Response:
        payload = ErrorPayload(
            message=str(failure),
            stack=failure.stack if self.settings.is_development else None,
        )
        return build_response(500, payload)

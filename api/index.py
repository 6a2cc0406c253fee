"""HTTP API entry point for AWS Lambda."""

import asyncio
from typing import Any

from lambda_webapp.models.request import Request
from lambda_webapp.services.response_builder import build_response
from lambda_webapp.services.router import Router
from lambda_webapp.services.routes import build_route_table
from lambda_webapp.utils.config import Settings
from lambda_webapp.utils.logging import (
    correlation_context,
    get_structured_logger,
    log_timing,
    sanitize_event,
)
from lambda_webapp.utils.logging_config import LoggingConfig

LoggingConfig.setup_logging()
logger = get_structured_logger(__name__)

settings = Settings.from_env()
router = Router(build_route_table(settings), settings)


def _correlation_id(request: Request, context: Any) -> str | None:
    header_value = request.header(LoggingConfig.LOG_CORRELATION_ID_HEADER)
    if header_value:
        return header_value
    return getattr(context, "aws_request_id", None) or request.raw_context.get("requestId")


def handler(event: dict, context: Any = None) -> dict:
    """
    Lambda handler.

    Always returns a response dict; failures are converted to a 500 rather
    than raised to the runtime.
    """
    try:
        request = Request.from_event(event)
        with correlation_context(_correlation_id(request, context)):
            logger.info("Received event", event=sanitize_event(event))
            with log_timing("dispatch", logger=logger, method=request.method, path=request.path):
                response = asyncio.run(router.dispatch(request))
            return response.to_event()
    except Exception as e:
        logger.error(f"Unhandled error processing event: {e}", exc_info=True)
        return build_response(500, {
            "error": "Internal Server Error",
            "message": str(e),
        }).to_event()

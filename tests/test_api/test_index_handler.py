"""Tests for the Lambda entry point."""

import json
import logging
import pytest
from unittest.mock import patch
from api.index import handler
from tests.utils.assertions import assert_valid_response
from tests.utils.factories import create_domain_name, create_unknown_path
from tests.utils.helpers import create_http_event, strip_timestamps


@pytest.mark.unit
def test_handler_hello(sample_http_event, lambda_context):
    """Test a full round trip through the entry point."""
    response = handler(sample_http_event, lambda_context)

    assert_valid_response(response, 200)
    body = json.loads(response["body"])
    assert body["message"] == "Hello from AWS Lambda!"
    assert body["environment"] == "test"


@pytest.mark.unit
def test_handler_homepage_html(lambda_context):
    """Test the homepage is served as HTML for the request domain."""
    domain = create_domain_name()
    response = handler(create_http_event(path="/", domain_name=domain), lambda_context)

    assert_valid_response(response, 200)
    assert response["headers"]["Content-Type"] == "text/html"
    assert f"https://{domain}" in response["body"]


@pytest.mark.unit
def test_handler_health(lambda_context):
    """Test the health endpoint through the entry point."""
    response = handler(create_http_event(path="/api/health"), lambda_context)

    assert_valid_response(response, 200)
    body = json.loads(response["body"])
    assert body["status"] == "ok"
    assert body["uptime"] >= 0
    assert body["memory"]["maxRss"] > 0


@pytest.mark.unit
def test_handler_example(lambda_context):
    """Test the parameterized route through the entry point."""
    response = handler(create_http_event(path="/api/example/42"), lambda_context)

    assert_valid_response(response, 200)
    assert json.loads(response["body"])["id"] == "42"


@pytest.mark.unit
def test_handler_preflight(lambda_context):
    """Test OPTIONS on an unregistered path."""
    response = handler(create_http_event(method="OPTIONS", path=create_unknown_path()), lambda_context)

    assert_valid_response(response, 200)
    assert response["body"] == "{}"


@pytest.mark.unit
def test_handler_not_found(lambda_context):
    """Test the 404 listing."""
    response = handler(create_http_event(path="/nonexistent"), lambda_context)

    assert_valid_response(response, 404)
    body = json.loads(response["body"])
    assert body["availableEndpoints"] == ["/", "/api/hello", "/api/health", "/api/example/{id}"]


@pytest.mark.unit
@pytest.mark.parametrize("event", [{}, None, {"requestContext": None}])
def test_handler_malformed_event_serves_homepage(event):
    """Test that malformed events fall back to GET /."""
    response = handler(event)

    assert_valid_response(response, 200)
    assert response["headers"]["Content-Type"] == "text/html"


@pytest.mark.unit
def test_handler_is_idempotent(lambda_context):
    """Test that the same event twice gives the same response."""
    event = create_http_event(path="/api/example/7")

    first = handler(event, lambda_context)
    second = handler(event, lambda_context)

    assert first["statusCode"] == second["statusCode"]
    assert first["headers"] == second["headers"]
    assert strip_timestamps(json.loads(first["body"])) == strip_timestamps(json.loads(second["body"]))
    assert "pathParameters" not in event


@pytest.mark.unit
def test_handler_never_raises(lambda_context):
    """Test the last-resort boundary when dispatch itself blows up."""
    with patch("api.index.router.dispatch", side_effect=RuntimeError("router exploded")):
        response = handler(create_http_event(path="/api/hello"), lambda_context)

    assert_valid_response(response, 500)
    body = json.loads(response["body"])
    assert body == {"error": "Internal Server Error", "message": "router exploded"}


@pytest.mark.unit
def test_handler_logs_correlation_id(lambda_context, caplog):
    """Test the Lambda request id is used as correlation id."""
    with caplog.at_level(logging.INFO, logger="api.index"):
        handler(create_http_event(path="/api/hello"), lambda_context)

    received = next(r for r in caplog.records if r.message == "Received event")
    assert received.correlation_id == lambda_context.aws_request_id


@pytest.mark.unit
def test_handler_prefers_correlation_header(lambda_context, caplog):
    """Test the correlation header overrides the Lambda request id."""
    event = create_http_event(path="/api/hello", headers={"x-correlation-id": "req_from_client"})

    with caplog.at_level(logging.INFO, logger="api.index"):
        handler(event, lambda_context)

    received = next(r for r in caplog.records if r.message == "Received event")
    assert received.correlation_id == "req_from_client"


@pytest.mark.unit
def test_handler_redacts_logged_headers(lambda_context, caplog):
    """Test credentials are not written to the log."""
    event = create_http_event(path="/api/hello", headers={"authorization": "Bearer secret-token"})

    with caplog.at_level(logging.INFO, logger="api.index"):
        handler(event, lambda_context)

    received = next(r for r in caplog.records if r.message == "Received event")
    assert received.event["headers"]["authorization"] == "[REDACTED]"


@pytest.mark.unit
def test_handler_ignores_stale_host_id(lambda_context):
    """Test that an id supplied by the host is dropped when the path has none."""
    event = create_http_event(path="/api/example/", path_parameters={"id": "stale"})

    response = handler(event, lambda_context)

    assert_valid_response(response, 200)
    assert json.loads(response["body"])["id"] == "unknown"

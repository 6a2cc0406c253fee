"""Shared pytest fixtures and configuration."""

import os
import pytest
from unittest.mock import Mock

# Set test environment variables before the entry point is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AWS_REGION", "eu-west-1")
os.environ.setdefault("LOG_FORMAT", "text")

from lambda_webapp.services.router import Router
from lambda_webapp.services.routes import build_route_table
from lambda_webapp.utils.config import Settings


class StubMetrics:
    """Fixed process metrics so health payloads are deterministic."""

    def uptime(self) -> float:
        return 12.5

    def memory_usage(self) -> dict[str, int]:
        return {"rss": 52428800, "maxRss": 62914560}


@pytest.fixture
def dev_settings():
    """Settings for a development deployment (stack traces exposed)."""
    return Settings(environment="development", region="eu-west-1")


@pytest.fixture
def prod_settings():
    """Settings for a production deployment."""
    return Settings(environment="production", region="us-east-1")


@pytest.fixture
def stub_metrics():
    return StubMetrics()


@pytest.fixture
def route_table(dev_settings, stub_metrics):
    """The application route table with stubbed metrics."""
    return build_route_table(dev_settings, stub_metrics)


@pytest.fixture
def router(route_table, dev_settings):
    """Router over the application routes in development mode."""
    return Router(route_table, dev_settings)


@pytest.fixture
def lambda_context():
    """Mock Lambda context object."""
    context = Mock()
    context.aws_request_id = "c6af9ac6-7b61-11e6-9a41-93e812345678"
    context.function_name = "lambda-webapp"
    return context


@pytest.fixture
def sample_http_event():
    """Sample HTTP API (payload v2) event."""
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/api/hello",
        "rawQueryString": "",
        "headers": {
            "accept": "application/json",
            "host": "abc123.execute-api.eu-west-1.amazonaws.com",
        },
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "abc123",
            "domainName": "abc123.execute-api.eu-west-1.amazonaws.com",
            "http": {
                "method": "GET",
                "path": "/api/hello",
                "protocol": "HTTP/1.1",
                "sourceIp": "203.0.113.10",
            },
            "requestId": "JKJaXmPLvHcESHA=",
            "stage": "$default",
        },
        "isBase64Encoded": False,
    }

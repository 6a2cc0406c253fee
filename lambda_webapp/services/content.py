"""Content providers: the payloads behind each registered route."""

import html
from datetime import datetime, timezone
from string import Template
from typing import Optional

from lambda_webapp.models.payloads import ExamplePayload, GreetingPayload, HealthPayload
from lambda_webapp.models.request import Request
from lambda_webapp.services.metrics import ProcessMetrics
from lambda_webapp.utils.config import Settings

DEFAULT_DOMAIN = "your-api-endpoint"
UNKNOWN_ID = "unknown"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2024-12-09T12:00:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


HOMEPAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Welcome to AWS Lambda Web App</title>
    <style>
        :root {
            --primary: #2b6cb0;
            --secondary: #4299e1;
            --background: #f7fafc;
            --text: #2d3748;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            line-height: 1.6;
            color: var(--text);
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f0f4f8;
        }
        .container {
            margin: 2rem auto;
            padding: 2rem;
            border-radius: 12px;
            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
            background: white;
            text-align: center;
        }
        h1 { color: var(--primary); margin-bottom: 1.5rem; font-size: 2.2rem; }
        .subtitle { color: var(--secondary); font-size: 1.2rem; margin-bottom: 1.5rem; }
        .info-box {
            background: var(--background);
            padding: 1.5rem;
            border-radius: 8px;
            margin: 1.5rem 0;
            text-align: left;
        }
        .endpoint {
            background: #e6fffa;
            padding: 0.75rem 1rem;
            border-radius: 6px;
            font-family: monospace;
            word-break: break-all;
            margin: 0.5rem 0;
            display: block;
            border-left: 4px solid #38b2ac;
        }
        .time { font-size: 0.9rem; color: #718096; margin-top: 2rem; font-style: italic; }
        .emoji { font-size: 2.5rem; display: block; margin-bottom: 1rem; }
        .code {
            background: #f0f0f0;
            padding: 0.2rem 0.4rem;
            border-radius: 3px;
            font-family: monospace;
            font-size: 0.9em;
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="emoji" role="img" aria-label="rocket">&#128640;</div>
        <h1>Welcome to Your AWS Lambda Web App</h1>
        <p class="subtitle">A serverless application deployed with Terraform</p>

        <div class="info-box">
            <p>This application is running on AWS Lambda with API Gateway in the <strong>$region</strong> region.</p>
            <p>Base URL: <span class="code">$base_url</span></p>
            <p>Try these endpoints:</p>

            <div class="endpoint">
                <strong>GET</strong> <a href="/api/hello" target="_blank">/api/hello</a><br>
                <small>A simple greeting from the API</small>
            </div>

            <div class="endpoint">
                <strong>GET</strong> <a href="/api/health" target="_blank">/api/health</a><br>
                <small>Check the health status of the API</small>
            </div>

            <div class="endpoint">
                <strong>GET</strong> /api/example/{id}<br>
                <small>Example endpoint with path parameter</small>
            </div>
        </div>

        <div class="time">
            Server time: $server_time<br>
            Environment: <span class="code">$environment</span>
        </div>
    </div>
</body>
</html>
""")


def render_homepage(request: Request, settings: Settings) -> str:
    """Render the landing page for the host domain the request arrived on."""
    base_url = f"https://{request.domain_name or DEFAULT_DOMAIN}"
    return HOMEPAGE_TEMPLATE.substitute(
        base_url=html.escape(base_url),
        region=html.escape(settings.region),
        server_time=utc_timestamp(),
        environment=html.escape(settings.environment),
    )


def greeting_payload(settings: Settings) -> GreetingPayload:
    return GreetingPayload(
        message="Hello from AWS Lambda!",
        timestamp=utc_timestamp(),
        environment=settings.environment,
        region=settings.region,
    )


def health_payload(settings: Settings, metrics: ProcessMetrics) -> HealthPayload:
    return HealthPayload(
        status="ok",
        timestamp=utc_timestamp(),
        uptime=metrics.uptime(),
        memory=metrics.memory_usage(),
        environment=settings.environment,
    )


def example_payload(request: Request) -> ExamplePayload:
    """Echo the ``id`` path parameter, or ``unknown`` when it is missing."""
    example_id = request.path_parameters.get("id") or UNKNOWN_ID
    return ExamplePayload(
        id=example_id,
        message=f"You requested example with ID: {example_id}",
        timestamp=utc_timestamp(),
    )

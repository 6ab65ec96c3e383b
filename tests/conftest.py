"""Shared pytest fixtures."""

# Clear settings cache before any imports to prevent stale values from the environment
from lambda_middlewares.config import get_settings

get_settings.cache_clear()

import pytest
from types import SimpleNamespace


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_event():
    """Create a minimal API Gateway proxy event."""
    return {
        "httpMethod": "GET",
        "path": "/users/me",
        "headers": {"Authorization": "Bearer token"},
        "queryStringParameters": None,
        "body": None,
    }


@pytest.fixture
def lambda_context():
    """Create an attribute-style context resembling the Lambda runtime's."""
    return SimpleNamespace(
        function_name="users-api",
        aws_request_id="c6af9ac6-7b61-11e6-9a41-93e812345678",
        memory_limit_in_mb=128,
    )


@pytest.fixture
def recorder():
    """Collect ordered execution markers from middleware and handlers."""
    return []


@pytest.fixture
def make_recording_middleware(recorder):
    """Build middleware that records its pre/post delegation steps."""

    def factory(name):
        async def middleware(event, context, next):
            recorder.append(f"{name}:before")
            result = await next(event, context)
            recorder.append(f"{name}:after")
            return result

        middleware.__name__ = name
        return middleware

    return factory


@pytest.fixture
def recording_handler(recorder):
    """Terminal handler that records its execution."""

    async def handler(event, context):
        recorder.append("handler")
        return {"statusCode": 200, "body": "ok"}

    return handler

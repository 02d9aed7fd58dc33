"""
Pytest configuration and shared fixtures.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from async_custom_resource.resource.models import HandlerResult

RESPONSE_URL = "https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/signed"
STACK_ID = "arn:aws:cloudformation:us-east-1:123456789012:stack/test-stack/guid"


class RecordingTransport:
    """CallbackTransport that records uploads instead of sending them."""

    def __init__(self, accepted: bool = True) -> None:
        self.accepted = accepted
        self.calls: list[tuple[str, bytes, dict[str, str]]] = []
        self.closed = False

    async def put(self, url, body, headers):
        self.calls.append((url, body, dict(headers)))
        return self.accepted

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True


@pytest.fixture
def mock_lambda_context() -> Any:
    """Create a mock Lambda context object."""
    context = MagicMock()
    context.function_name = "test-function"
    context.aws_request_id = "test-request-id"
    context.log_stream_name = "2024/01/01/[$LATEST]test-stream"
    return context


def make_event(request_type: str, physical_resource_id: str | None = None, **extra: Any) -> dict[str, Any]:
    event = {
        "RequestType": request_type,
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:test-function",
        "ResponseURL": RESPONSE_URL,
        "StackId": STACK_ID,
        "RequestId": "req-0001",
        "LogicalResourceId": "MyResource",
        "ResourceType": "Custom::Test",
        "ResourceProperties": {"name": "x"},
    }
    if physical_resource_id is not None:
        event["PhysicalResourceId"] = physical_resource_id
    event.update(extra)
    return event


@pytest.fixture
def create_event() -> dict[str, Any]:
    return make_event("Create")


@pytest.fixture
def update_event() -> dict[str, Any]:
    return make_event("Update", "r-1", OldResourceProperties={"name": "old"})


@pytest.fixture
def delete_event() -> dict[str, Any]:
    return make_event("Delete", "r-1")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mock_resource() -> MagicMock:
    """Resource whose operations are AsyncMocks returning a HandlerResult."""
    resource = MagicMock()
    resource.create = AsyncMock(return_value=HandlerResult("r-1", {"arn": "arn:test"}))
    resource.update = AsyncMock(return_value=HandlerResult("r-1", {"arn": "arn:test"}))
    resource.delete = AsyncMock(return_value=HandlerResult("r-1"))
    return resource


@pytest.fixture(autouse=True)
def reset_cleanup_handlers():
    """Reset cleanup handlers before and after tests."""
    import async_custom_resource.handlers.lifecycle as lifecycle_module

    with lifecycle_module._cleanup_lock:
        lifecycle_module._cleanup_handlers.clear()

    yield

    with lifecycle_module._cleanup_lock:
        lifecycle_module._cleanup_handlers.clear()


@pytest.fixture(autouse=True)
def reset_settings_cache():
    from async_custom_resource.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

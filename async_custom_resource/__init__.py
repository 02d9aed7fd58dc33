"""
Async Custom Resource - async CloudFormation custom resource handlers for AWS Lambda.

This library routes custom resource lifecycle requests (Create/Update/Delete)
to your async operations, normalizes any failure into a well-formed FAILED
response, and uploads the response to the pre-signed ResponseURL.

Core Features:
- @custom_resource_handler decorator producing a Lambda entrypoint
- dispatch() core function with injectable transport and codec
- Typed ResourceProperties via pydantic models or dataclasses
- Bounded failure diagnostics that fit the orchestrator's size limit

Example:
    from async_custom_resource import HandlerResult, custom_resource_handler

    @custom_resource_handler
    class QueueResource:
        async def create(self, properties):
            url = await create_queue(properties["QueueName"])
            return HandlerResult(url, {"QueueUrl": url})

        async def update(self, properties, physical_resource_id):
            return HandlerResult(physical_resource_id)

        async def delete(self, properties, physical_resource_id):
            await delete_queue(physical_resource_id)
            return HandlerResult(physical_resource_id)

    handler = QueueResource
"""

__version__ = "0.1.0"

from .config import Settings, get_settings
from .errors import (
    CallbackDeliveryError,
    CustomResourceError,
    ErrorHandler,
    InputDecodingError,
    InvalidRequestError,
    MalformedEventError,
)
from .handlers import CallbackTransport, CustomResource, register_cleanup_handler
from .handlers.decorators import custom_resource_handler
from .resource import (
    CustomResourceRequest,
    CustomResourceResponse,
    HandlerResult,
    HttpxCallbackTransport,
    RequestType,
    ResponseStatus,
    build_failure,
    build_success,
    dispatch,
)

__all__ = [
    "CallbackDeliveryError",
    "CallbackTransport",
    "CustomResource",
    "CustomResourceError",
    "CustomResourceRequest",
    "CustomResourceResponse",
    "ErrorHandler",
    "HandlerResult",
    "HttpxCallbackTransport",
    "InputDecodingError",
    "InvalidRequestError",
    "MalformedEventError",
    "RequestType",
    "ResponseStatus",
    "Settings",
    "build_failure",
    "build_success",
    "custom_resource_handler",
    "dispatch",
    "get_settings",
    "register_cleanup_handler",
]

"""
Lambda entrypoint for custom resources.

``custom_resource_handler`` turns a ``CustomResource`` implementation into a
synchronous Lambda handler that parses the event, dispatches it and uploads
the response before returning.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

from ..config.settings import Settings, get_settings
from ..errors.handlers import ErrorHandler
from ..errors.models import MalformedEventError
from ..resource.callback import HttpxCallbackTransport
from ..resource.codec import JsonCodec, default_codec
from ..resource.dispatcher import dispatch
from ..resource.models import CustomResourceRequest
from .lifecycle import invocation_lifecycle
from .protocols import CustomResource

logger = logging.getLogger(__name__)

LambdaEntrypoint = Callable[[dict[str, Any], Any], None]
# Returns an async context manager yielding a CallbackTransport
TransportFactory = Callable[[Settings], Any]

_OPERATIONS = ("create", "update", "delete")


def _default_transport(settings: Settings) -> HttpxCallbackTransport:
    return HttpxCallbackTransport(timeout=settings.CALLBACK_TIMEOUT_SECONDS)


def _validate_resource(resource: Any) -> CustomResource:
    if inspect.isclass(resource):
        resource = resource()

    name = type(resource).__name__
    if not isinstance(resource, CustomResource):
        raise TypeError(
            f"@custom_resource_handler requires create, update and delete operations. "
            f"{name} does not implement CustomResource."
        )
    for operation in _OPERATIONS:
        if not inspect.iscoroutinefunction(getattr(resource, operation)):
            raise TypeError(
                f"@custom_resource_handler can only be applied to async operations. "
                f"{name}.{operation} is not async."
            )
    return resource


def custom_resource_handler(
    resource: Any = None,
    *,
    input_type: Any = None,
    settings: Settings | None = None,
    transport_factory: TransportFactory | None = None,
    codec: JsonCodec = default_codec,
) -> LambdaEntrypoint | Callable[[Any], LambdaEntrypoint]:
    """
    Build a Lambda handler for a custom resource.

    This decorator:
    - Accepts a ``CustomResource`` instance or a class with a no-arg constructor
    - Runs each invocation in its own event loop with lifecycle cleanup
    - Decodes ResourceProperties into ``input_type``
    - Always uploads exactly one response to the ResponseURL

    Args:
        resource: Resource implementation (if used as @custom_resource_handler)
        input_type: Type to decode ResourceProperties into (default: dict)
        settings: Settings instance (default: cached ``Settings``)
        transport_factory: Builds the callback transport for an invocation
        codec: Codec for payloads and the wire document

    Returns:
        Synchronous Lambda handler, or a decorator when called with options only

    Example:
        @custom_resource_handler(input_type=BucketProperties)
        class BucketResource:
            async def create(self, properties):
                ...

        handler = BucketResource  # module-level Lambda entrypoint
    """

    def decorator(target: Any) -> LambdaEntrypoint:
        """Inner decorator function."""
        implementation = _validate_resource(target)
        name = getattr(target, "__name__", type(implementation).__name__)

        def handler(event: dict[str, Any], context: Any) -> None:
            """Synchronous Lambda handler for the custom resource."""
            resolved = settings or get_settings(Settings)
            factory = transport_factory or _default_transport
            try:
                request = CustomResourceRequest.from_event(event)
            except MalformedEventError as e:
                # No ResponseURL to answer; fail the invocation instead
                logger.error(f"Custom resource handler {name} received a malformed event: {e}")
                raise

            async def run() -> None:
                async with invocation_lifecycle(name):
                    async with factory(resolved) as transport:
                        await dispatch(
                            request,
                            implementation,
                            transport,
                            codec=codec,
                            input_type=input_type,
                            error_handler=ErrorHandler(resolved.MAX_REASON_LENGTH),
                            max_response_bytes=resolved.MAX_RESPONSE_BYTES,
                        )

            asyncio.run(run())

        handler.__name__ = name
        handler.__doc__ = getattr(target, "__doc__", None)
        return handler

    # Support both @custom_resource_handler and @custom_resource_handler(...) syntax
    if resource is None:
        return decorator
    else:
        return decorator(resource)

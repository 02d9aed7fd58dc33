"""
Custom resource dispatcher.

Runs one lifecycle request end to end:
route → execute → build response → emit callback.

Any failure up to and including the operation is reported to the
orchestrator as a FAILED response. Only a failure of the callback itself
propagates to the caller.
"""

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any, TypeVar

from ..errors.handlers import ErrorHandler
from ..handlers.protocols import CallbackTransport, CustomResource
from .callback import emit_response
from .codec import JsonCodec, default_codec
from .models import CustomResourceRequest, CustomResourceResponse, HandlerResult
from .responses import DEFAULT_MAX_RESPONSE_BYTES, build_failure, build_success
from .router import route

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class OperationOutcome:
    """Either the operation's result or the error it raised, never both."""

    result: HandlerResult[Any] | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("an outcome holds exactly one of result or error")

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def fold(
        self,
        on_failure: Callable[[Exception], R],
        on_success: Callable[[HandlerResult[Any]], R],
    ) -> R:
        if self.error is not None:
            return on_failure(self.error)
        return on_success(self.result)  # type: ignore[arg-type]


async def execute(
    request: CustomResourceRequest,
    resource: CustomResource,
    *,
    codec: JsonCodec = default_codec,
    input_type: Any = None,
) -> OperationOutcome:
    """
    Route the request and run the selected operation inside an error boundary.

    Routing errors, input decoding errors and operation errors are all
    captured in the returned outcome. No operation runs if routing or
    decoding fails.
    """
    try:
        operation = route(resource, request.request_type, request.physical_resource_id)
        logger.debug(f"Routed {request.request_type} request {request.request_id}")

        properties = codec.decode_input(request.resource_properties, input_type)

        def load_old_properties() -> Any:
            # Only decoded for an update that asks for old_input
            if request.old_resource_properties is None:
                return None
            return codec.decode_input(request.old_resource_properties, input_type)

        result = await operation(properties, load_old_properties)
        if not isinstance(result, HandlerResult):
            raise TypeError(
                f"custom resource operation must return HandlerResult, "
                f"got {type(result).__name__}"
            )
    except Exception as e:
        return OperationOutcome(error=e)

    return OperationOutcome(result=result)


def build_response(
    request: CustomResourceRequest,
    outcome: OperationOutcome,
    *,
    codec: JsonCodec = default_codec,
    error_handler: ErrorHandler | None = None,
    max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
) -> CustomResourceResponse:
    """Fold an outcome into exactly one response."""

    def on_failure(error: Exception) -> CustomResourceResponse:
        return build_failure(
            request,
            error,
            error_handler=error_handler,
            max_response_bytes=max_response_bytes,
            codec=codec,
        )

    def on_success(result: HandlerResult[Any]) -> CustomResourceResponse:
        try:
            return build_success(request, result, codec)
        except Exception as e:
            # Unencodable output is the operation's fault
            return on_failure(e)

    return outcome.fold(on_failure, on_success)


async def dispatch(
    request: CustomResourceRequest,
    resource: CustomResource,
    transport: CallbackTransport,
    *,
    codec: JsonCodec = default_codec,
    input_type: Any = None,
    error_handler: ErrorHandler | None = None,
    max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
) -> CustomResourceResponse:
    """
    Handle one custom resource request and report the outcome.

    Args:
        request: Parsed lifecycle request
        resource: Implementation of create/update/delete
        transport: Transport used to PUT the response to the ResponseURL
        codec: Codec for input decoding and response serialization
        input_type: Type the ResourceProperties are decoded into
        error_handler: Handler used to summarize failures
        max_response_bytes: Size budget for FAILED responses

    Returns:
        The response that was sent

    Raises:
        CallbackDeliveryError: If the response could not be uploaded
    """
    logger.info(
        f"Received {request.request_type} request {request.request_id} "
        f"for {request.logical_resource_id} ({request.resource_type})"
    )

    outcome = await execute(request, resource, codec=codec, input_type=input_type)
    response = build_response(
        request,
        outcome,
        codec=codec,
        error_handler=error_handler,
        max_response_bytes=max_response_bytes,
    )
    await emit_response(request, response, transport, codec)
    return response

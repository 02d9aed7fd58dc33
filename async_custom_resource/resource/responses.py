"""
Builds custom resource responses from operation outcomes.

Both builders are pure: they copy the correlation fields from the request
and never perform I/O.
"""

from typing import Any

from ..errors.handlers import ELLIPSIS, ErrorHandler
from .codec import JsonCodec, default_codec
from .models import (
    CustomResourceRequest,
    CustomResourceResponse,
    HandlerResult,
    ResponseStatus,
)

STACK_TRACE_KEY = "StackTrace"
DEFAULT_MAX_RESPONSE_BYTES = 4096


def build_success(
    request: CustomResourceRequest,
    result: HandlerResult[Any],
    codec: JsonCodec = default_codec,
) -> CustomResourceResponse:
    """
    Build a SUCCESS response.

    Args:
        request: The originating request
        result: Value returned by the operation
        codec: Codec used to encode the result's data

    Returns:
        Response with the result's physical id and encoded data, and no reason

    Raises:
        TypeError: If the result's data does not encode to a JSON object
    """
    return CustomResourceResponse(
        status=ResponseStatus.SUCCESS,
        reason=None,
        physical_resource_id=result.physical_resource_id,
        stack_id=request.stack_id,
        request_id=request.request_id,
        logical_resource_id=request.logical_resource_id,
        data=codec.encode_output(result.data),
        no_echo=result.no_echo,
    )


def _failure(
    request: CustomResourceRequest, reason: str, trace: list[str]
) -> CustomResourceResponse:
    return CustomResourceResponse(
        status=ResponseStatus.FAILED,
        reason=reason,
        # Keep the id so a failed update/delete does not orphan the resource
        physical_resource_id=request.physical_resource_id,
        stack_id=request.stack_id,
        request_id=request.request_id,
        logical_resource_id=request.logical_resource_id,
        data={STACK_TRACE_KEY: trace},
    )


def _shorten(text: str, excess: int) -> str:
    """Drop at least ``excess`` UTF-8 bytes from the end of text, marking the cut."""
    encoded = text.encode("utf-8")
    keep = len(encoded) - excess - len(ELLIPSIS)
    if keep <= 0:
        return ELLIPSIS
    return encoded[:keep].decode("utf-8", errors="ignore") + ELLIPSIS


def build_failure(
    request: CustomResourceRequest,
    error: BaseException,
    *,
    error_handler: ErrorHandler | None = None,
    max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
    codec: JsonCodec = default_codec,
) -> CustomResourceResponse:
    """
    Build a FAILED response for a captured error.

    The reason is a single bounded line. ``Data.StackTrace`` always holds the
    exception summary; traceback frames (innermost first) are appended only
    while the serialized response fits in ``max_response_bytes``. If the
    summary and reason alone overflow the budget, the summary is shortened
    first and then the reason, measured in serialized bytes.

    Args:
        request: The originating request
        error: The captured exception
        error_handler: Handler used to classify and summarize the error
        max_response_bytes: Size budget for the serialized response
        codec: Codec used to measure the serialized size

    Returns:
        Response with status FAILED and a reason
    """
    handler = error_handler or ErrorHandler()
    report = handler.handle_error(error)

    def size(response: CustomResourceResponse) -> int:
        return len(codec.dumps(response.to_wire()))

    reason, summary, frames = report.reason, report.trace[0], report.trace[1:]
    response = _failure(request, reason, [summary])
    excess = size(response) - max_response_bytes
    while excess > 0:
        if summary != ELLIPSIS:
            summary = _shorten(summary, excess)
        elif reason != ELLIPSIS:
            reason = _shorten(reason, excess)
        else:
            # Correlation fields alone exceed the budget
            break
        response = _failure(request, reason, [summary])
        excess = size(response) - max_response_bytes

    for frame in frames:
        candidate = _failure(request, reason, [*response.data[STACK_TRACE_KEY], frame])
        if size(candidate) > max_response_bytes:
            break
        response = candidate

    return response

"""
Custom resource protocol: request/response records, routing, response
building and callback delivery.
"""

from .models import (
    CustomResourceRequest,
    CustomResourceResponse,
    HandlerResult,
    RequestType,
    ResponseStatus,
)
from .codec import JsonCodec, default_codec
from .router import route
from .responses import build_failure, build_success
from .callback import HttpxCallbackTransport, emit_response, serialize_response
from .dispatcher import OperationOutcome, build_response, dispatch, execute

__all__ = [
    "CustomResourceRequest",
    "CustomResourceResponse",
    "HandlerResult",
    "HttpxCallbackTransport",
    "JsonCodec",
    "OperationOutcome",
    "RequestType",
    "ResponseStatus",
    "build_failure",
    "build_response",
    "build_success",
    "default_codec",
    "dispatch",
    "emit_response",
    "execute",
    "route",
    "serialize_response",
]

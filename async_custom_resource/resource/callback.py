"""
Delivers custom resource responses to the orchestrator's pre-signed URL.
"""

import logging
from collections.abc import Mapping
from types import TracebackType

import httpx

from ..errors.models import CallbackDeliveryError
from ..handlers.protocols import CallbackTransport
from .codec import JsonCodec, default_codec
from .models import CustomResourceRequest, CustomResourceResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpxCallbackTransport:
    """
    ``CallbackTransport`` backed by ``httpx.AsyncClient``.

    Use as an async context manager so the client is closed before the
    event loop of the invocation shuts down.

    Example:
        async with HttpxCallbackTransport(timeout=10.0) as transport:
            await emit_response(request, response, transport)
    """

    def __init__(
        self,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (ignored if ``client`` is given)
            client: Optional preconfigured client; the caller keeps ownership
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def put(self, url: str, body: bytes, headers: Mapping[str, str]) -> bool:
        try:
            response = await self._client.put(url, content=body, headers=dict(headers))
        except httpx.HTTPError as e:
            raise CallbackDeliveryError(url, f"failed to PUT custom resource response: {e}") from e
        return response.is_success

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxCallbackTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def serialize_response(
    response: CustomResourceResponse, codec: JsonCodec = default_codec
) -> bytes:
    """Serialize a response to its wire form with null fields omitted."""
    return codec.dumps(response.to_wire())


async def emit_response(
    request: CustomResourceRequest,
    response: CustomResourceResponse,
    transport: CallbackTransport,
    codec: JsonCodec = default_codec,
) -> bool:
    """
    Upload the response to the request's ResponseURL, exactly once.

    Args:
        request: The originating request (provides the ResponseURL)
        response: Response to send
        transport: HTTP transport used for the PUT
        codec: Codec used for serialization

    Returns:
        Whether the transport accepted the upload

    Raises:
        CallbackDeliveryError: If the upload could not be sent
    """
    body = serialize_response(response, codec)
    logger.info(
        f"Sending {response.status.value} response for {request.logical_resource_id} "
        f"(request {request.request_id}, {len(body)} bytes)"
    )

    accepted = await transport.put(request.response_url, body, JSON_HEADERS)
    if not accepted:
        logger.error(
            f"ResponseURL rejected the {response.status.value} response "
            f"for request {request.request_id}"
        )
    return accepted

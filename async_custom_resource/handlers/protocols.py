"""
Custom resource protocols and type definitions.

This module defines the contracts that custom resource implementations and
callback transports must satisfy.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..resource.models import HandlerResult


@runtime_checkable
class CustomResource(Protocol):
    """
    Protocol defining the lifecycle operations of a custom resource.

    Each operation returns a ``HandlerResult`` on success and raises on
    failure; the dispatcher turns either outcome into a response.

    Example:
        class TopicResource:
            async def create(self, properties):
                arn = await sns.create_topic(properties["Name"])
                return HandlerResult(arn, {"Arn": arn})

            async def update(self, properties, physical_resource_id):
                return HandlerResult(physical_resource_id)

            async def delete(self, properties, physical_resource_id):
                await sns.delete_topic(physical_resource_id)
                return HandlerResult(physical_resource_id)
    """

    async def create(self, properties: Any) -> "HandlerResult[Any]":
        """
        Create a new resource instance.

        Args:
            properties: Decoded ResourceProperties

        Returns:
            Result carrying the newly minted physical resource id
        """
        ...

    async def update(self, properties: Any, physical_resource_id: str) -> "HandlerResult[Any]":
        """
        Update an existing resource instance.

        Implementations may declare an extra ``old_input`` keyword parameter
        to receive the decoded OldResourceProperties.
        """
        ...

    async def delete(self, properties: Any, physical_resource_id: str) -> "HandlerResult[Any]":
        """Delete an existing resource instance."""
        ...


@runtime_checkable
class CallbackTransport(Protocol):
    """
    Protocol for the HTTP client that uploads the response.

    Allows swapping the HTTP backend in tests or custom runtimes.
    """

    async def put(self, url: str, body: bytes, headers: Mapping[str, str]) -> bool:
        """
        Upload ``body`` to ``url``.

        Returns:
            True if the transport accepted the request (2xx), False otherwise

        Raises:
            CallbackDeliveryError: If the request could not be sent at all
        """
        ...

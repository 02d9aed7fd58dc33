"""
Request and response records for the custom resource protocol.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from ..errors.models import MalformedEventError

OutputT = TypeVar("OutputT")


class RequestType(Enum):
    """Lifecycle verb sent by the orchestrator."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"

    @classmethod
    def parse(cls, value: str) -> "RequestType | str":
        """Return the matching member, or the raw string if unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return value

    def __str__(self) -> str:
        return self.value


class ResponseStatus(Enum):
    """Outcome reported back to the orchestrator."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


# An empty RequestType is unroutable but still answerable, so only presence
# is required for it
_REQUIRED_EVENT_KEYS = (
    "ResponseURL",
    "StackId",
    "RequestId",
    "LogicalResourceId",
)


@dataclass(frozen=True)
class CustomResourceRequest:
    """
    Inbound lifecycle event.

    ``resource_properties`` holds the raw mapping from the event; it is
    decoded into the handler's input type at dispatch time.
    """

    request_type: RequestType | str
    response_url: str
    stack_id: str
    request_id: str
    logical_resource_id: str
    resource_type: str | None = None
    physical_resource_id: str | None = None
    resource_properties: Mapping[str, Any] | None = None
    old_resource_properties: Mapping[str, Any] | None = None
    service_token: str | None = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "CustomResourceRequest":
        """
        Parse a Lambda event into a request.

        Args:
            event: The raw event delivered by the Lambda runtime

        Returns:
            Parsed request

        Raises:
            MalformedEventError: If a field needed to send any response is missing
        """
        if not isinstance(event, Mapping):
            raise MalformedEventError(
                f"custom resource event must be an object, got {type(event).__name__}"
            )

        missing = [key for key in _REQUIRED_EVENT_KEYS if not event.get(key)]
        if event.get("RequestType") is None:
            missing.insert(0, "RequestType")
        if missing:
            raise MalformedEventError(
                f"custom resource event is missing required fields: {', '.join(missing)}"
            )

        resource_properties = event.get("ResourceProperties")
        if resource_properties is None:
            resource_properties = {}

        return cls(
            request_type=RequestType.parse(str(event["RequestType"])),
            response_url=event["ResponseURL"],
            stack_id=event["StackId"],
            request_id=event["RequestId"],
            logical_resource_id=event["LogicalResourceId"],
            resource_type=event.get("ResourceType"),
            # An empty id is treated as absent
            physical_resource_id=event.get("PhysicalResourceId") or None,
            resource_properties=resource_properties,
            old_resource_properties=event.get("OldResourceProperties"),
            service_token=event.get("ServiceToken"),
        )


@dataclass(frozen=True)
class HandlerResult(Generic[OutputT]):
    """
    Value returned by a successful create/update/delete operation.

    Create must mint a physical resource id; update and delete echo the
    existing id or return a new one (which makes the orchestrator treat the
    update as a replacement).
    """

    physical_resource_id: str
    data: OutputT | None = None
    no_echo: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.physical_resource_id, str) or not self.physical_resource_id:
            raise ValueError("physical_resource_id must be a non-empty string")


@dataclass(frozen=True)
class CustomResourceResponse:
    """Canonical response record sent to the ResponseURL."""

    status: ResponseStatus
    stack_id: str
    request_id: str
    logical_resource_id: str
    reason: str | None = None
    physical_resource_id: str | None = None
    data: dict[str, Any] | None = None
    no_echo: bool | None = None

    def __post_init__(self) -> None:
        if self.status == ResponseStatus.FAILED and not self.reason:
            raise ValueError("a FAILED response requires a reason")
        if self.status == ResponseStatus.SUCCESS and self.reason is not None:
            raise ValueError("a SUCCESS response must not carry a reason")

    def to_wire(self) -> dict[str, Any]:
        """Wire-format dict; fields without a value are omitted."""
        wire = {
            "Status": self.status.value,
            "Reason": self.reason,
            "PhysicalResourceId": self.physical_resource_id,
            "StackId": self.stack_id,
            "RequestId": self.request_id,
            "LogicalResourceId": self.logical_resource_id,
            "NoEcho": self.no_echo,
            "Data": self.data,
        }
        return {key: value for key, value in wire.items() if value is not None}

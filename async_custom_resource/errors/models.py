"""
Error models and exception types for custom resource dispatch.
"""

from dataclasses import dataclass, field
import datetime
from enum import Enum


class ErrorCategory(Enum):
    """Categories of failures that are reported back to the orchestrator."""

    ROUTING = "routing"
    INPUT = "input"
    OPERATION = "operation"


class CustomResourceError(Exception):
    """Base class for errors raised by this library."""


class InvalidRequestError(CustomResourceError, ValueError):
    """The request type / physical resource id combination is not routable."""

    def __init__(self, request_type: str) -> None:
        super().__init__(f"unexpected CloudFormation request type `{request_type}`")
        self.request_type = request_type


class InputDecodingError(CustomResourceError, ValueError):
    """ResourceProperties could not be decoded into the handler's input type."""


class MalformedEventError(CustomResourceError, ValueError):
    """The inbound event is missing fields required to send any response."""


class CallbackDeliveryError(CustomResourceError):
    """The response could not be delivered to the ResponseURL."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


@dataclass
class FailureReport:
    """Structured summary of a captured failure."""

    category: ErrorCategory
    reason: str
    trace: list[str] = field(default_factory=list)
    timestamp: datetime.datetime | None = None

    def __post_init__(self) -> None:
        """Set default timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.datetime.now(datetime.UTC)

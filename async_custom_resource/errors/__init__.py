"""
Error handling for custom resource handlers.

This module provides the exception hierarchy and the error handler that
normalizes captured failures into bounded diagnostics.
"""

from .models import (
    CallbackDeliveryError,
    CustomResourceError,
    ErrorCategory,
    FailureReport,
    InputDecodingError,
    InvalidRequestError,
    MalformedEventError,
)
from .handlers import ErrorHandler

__all__ = [
    "CallbackDeliveryError",
    "CustomResourceError",
    "ErrorCategory",
    "ErrorHandler",
    "FailureReport",
    "InputDecodingError",
    "InvalidRequestError",
    "MalformedEventError",
]

"""
Custom resource handler protocols and lifecycle utilities.

The Lambda entrypoint decorator lives in ``handlers.decorators``.
"""

from .lifecycle import invocation_lifecycle, register_cleanup_handler
from .protocols import CallbackTransport, CustomResource

__all__ = [
    "CallbackTransport",
    "CustomResource",
    "invocation_lifecycle",
    "register_cleanup_handler",
]

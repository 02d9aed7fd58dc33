"""
Error handler that classifies captured failures and condenses them into
bounded, single-line diagnostics suitable for a custom resource response.
"""

import logging
import traceback

from .models import (
    ErrorCategory,
    FailureReport,
    InputDecodingError,
    InvalidRequestError,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def single_line(text: str, max_length: int) -> str:
    """
    Collapse all whitespace runs (newlines included) and cap the length.

    Args:
        text: Text to condense
        max_length: Maximum length of the result, including the ellipsis

    Returns:
        Single-line text no longer than ``max_length``
    """
    condensed = " ".join(text.split())
    if len(condensed) <= max_length:
        return condensed
    if max_length <= len(ELLIPSIS):
        return condensed[:max_length]
    return condensed[: max_length - len(ELLIPSIS)] + ELLIPSIS


class ErrorHandler:
    """Turns exceptions captured during dispatch into failure reports."""

    def __init__(self, max_reason_length: int = 1024) -> None:
        """
        Initialize error handler.

        Args:
            max_reason_length: Maximum length of the Reason and of each trace line
        """
        self.max_reason_length = max_reason_length

    def classify_error(self, error: BaseException) -> ErrorCategory:
        """Determine which stage of dispatch produced the error."""
        if isinstance(error, InvalidRequestError):
            return ErrorCategory.ROUTING
        if isinstance(error, InputDecodingError):
            return ErrorCategory.INPUT
        return ErrorCategory.OPERATION

    def reason(self, error: BaseException) -> str:
        """Single-line human-readable reason; never empty."""
        message = single_line(str(error), self.max_reason_length)
        return message or type(error).__name__

    def summary_line(self, error: BaseException) -> str:
        message = " ".join(str(error).split())
        name = type(error).__name__
        return single_line(f"{name}: {message}" if message else name, self.max_reason_length)

    def trace_lines(self, error: BaseException) -> list[str]:
        """
        Diagnostic lines for the error.

        The first line is always the exception summary; the remaining lines
        are traceback frames, innermost first, so that truncating the list
        keeps the frames closest to the failure.
        """
        lines = [self.summary_line(error)]
        for frame in reversed(traceback.extract_tb(error.__traceback__)):
            lines.append(
                single_line(
                    f'File "{frame.filename}", line {frame.lineno}, in {frame.name}',
                    self.max_reason_length,
                )
            )
        return lines

    def handle_error(self, error: BaseException) -> FailureReport:
        """
        Classify, log and summarize an error.

        Args:
            error: The exception captured at the dispatch boundary

        Returns:
            FailureReport with reason and full (unbounded) trace lines
        """
        category = self.classify_error(error)
        report = FailureReport(
            category=category,
            reason=self.reason(error),
            trace=self.trace_lines(error),
        )

        if category == ErrorCategory.OPERATION:
            logger.error(f"Custom resource operation failed: {report.reason}", exc_info=error)
        else:
            logger.warning(f"Rejected custom resource request ({category.value}): {report.reason}")

        return report

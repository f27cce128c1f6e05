"""
Error taxonomy for the review flow.

Each ReviewError carries the HTTP status and the public message that the API
boundary returns. Internal details stay in the logs.
"""

from code_reviewer.constants import (
    EMPTY_REVIEW_MESSAGE,
    INVALID_CODE_MESSAGE,
    REVIEW_FAILED_MESSAGE,
)


class ConfigurationError(Exception):
    """Raised at startup when the service cannot be configured."""


class ReviewError(Exception):
    status_code = 500
    message = REVIEW_FAILED_MESSAGE

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCodeError(ReviewError):
    """The submitted code is missing, not a string, or blank."""

    status_code = 400
    message = INVALID_CODE_MESSAGE


class EmptyReviewError(ReviewError):
    """The model adapter produced no usable review."""

    message = EMPTY_REVIEW_MESSAGE


class ReviewFailedError(ReviewError):
    """An unexpected failure while producing the review."""

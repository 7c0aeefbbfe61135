"""Errors collections that CLI may raise (user-facing ones)."""

from .error_handler import cli_argscan_error_handler
from .response_file_expansion_failed import ResponseFileExpansionFailedError
from .response_file_limit_exceeded import ResponseFileLimitExceededError
from .response_file_not_found import ResponseFileNotFoundError
from .response_file_unreadable import ResponseFileUnreadableError

__all__ = [
    "ResponseFileExpansionFailedError",
    "ResponseFileLimitExceededError",
    "ResponseFileNotFoundError",
    "ResponseFileUnreadableError",
    "cli_argscan_error_handler",
]

"""Uniform error text for tool results.

Tool calls never fail at the protocol level: every backend rejection or
transport failure comes back as ordinary text content.
"""

import json
import logging

from freetable_mcp.clients.errors import BackendHTTPError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


def format_json(data: object) -> str:
    """Pretty-print a decoded backend response (2-space indent)."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def http_error_message(
    action: str, error: BackendHTTPError, include_details: bool = False
) -> str:
    """Describe a non-2xx backend response.

    Args:
        action: What was being attempted, e.g. ``"creating booking"``.
        error: The classified backend error.
        include_details: Append the raw response body on a ``Details:`` line.

    Returns:
        ``"Error <action>: <status> <reason>"`` plus details when requested.
    """
    message = f"Error {action}: {error.status_line}"
    if include_details:
        message += f"\nDetails: {error.detail}"
    return message


def exception_message(action: str, error: BaseException) -> str:
    """Describe a transport or unexpected failure, falling back to ``Unknown error``."""
    return f"Error {action}: {str(error) or UNKNOWN_ERROR}"


def tool_error_message(
    action: str, error: Exception, include_details: bool = False
) -> str:
    """Map any exception raised inside a tool to the text returned to the caller."""
    if isinstance(error, BackendHTTPError):
        return http_error_message(action, error, include_details=include_details)
    logger.exception("Unexpected error %s", action, exc_info=error)
    return exception_message(action, error)

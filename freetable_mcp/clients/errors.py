"""Backend error hierarchy and HTTP status classification."""

import logging

import httpx

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for all FreeTable API errors."""


class BackendHTTPError(APIError):
    """The backend answered with a non-2xx status.

    Args:
        status_code: HTTP status code of the response.
        reason: Status text, e.g. ``"Not Found"``.
        detail: Raw response body text (may be empty).
    """

    def __init__(self, status_code: int, reason: str, detail: str = "") -> None:
        super().__init__(f"HTTP {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason
        self.detail = detail

    @property
    def status_line(self) -> str:
        """``"<code> <reason>"`` as reported to tool callers."""
        return f"{self.status_code} {self.reason}"


def classify_response(response: httpx.Response) -> None:
    """Raise ``BackendHTTPError`` unless *response* has a 2xx status.

    Args:
        response: A received ``httpx.Response``; its body is read as text
            so error details survive after the client is closed.

    Raises:
        BackendHTTPError: On any status outside 200-299.
    """
    if response.is_success:
        return

    logger.warning(
        "FreeTable %s %s failed: HTTP %d",
        response.request.method,
        response.request.url.path,
        response.status_code,
    )
    raise BackendHTTPError(
        status_code=response.status_code,
        reason=response.reason_phrase,
        detail=response.text,
    )

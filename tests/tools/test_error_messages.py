"""Tests for freetable_mcp.tools.error_messages."""

import httpx

from freetable_mcp.clients.errors import BackendHTTPError
from freetable_mcp.tools.error_messages import (
    exception_message,
    format_json,
    http_error_message,
    tool_error_message,
)


class TestFormatJson:
    def test_two_space_indent(self):
        assert format_json({"id": 42}) == '{\n  "id": 42\n}'

    def test_list(self):
        assert format_json([{"id": 1, "name": "Cafe"}]) == (
            '[\n  {\n    "id": 1,\n    "name": "Cafe"\n  }\n]'
        )

    def test_non_ascii_kept(self):
        assert "Café" in format_json({"name": "Café"})


class TestHttpErrorMessage:
    def test_status_and_reason(self):
        err = BackendHTTPError(404, "Not Found", "missing")
        assert http_error_message("fetching booking", err) == (
            "Error fetching booking: 404 Not Found"
        )

    def test_with_details(self):
        err = BackendHTTPError(400, "Bad Request", '{"error":"bad date"}')
        assert http_error_message("creating booking", err, include_details=True) == (
            'Error creating booking: 400 Bad Request\nDetails: {"error":"bad date"}'
        )


class TestExceptionMessage:
    def test_uses_exception_text(self):
        msg = exception_message("fetching restaurants", RuntimeError("boom"))
        assert msg == "Error fetching restaurants: boom"

    def test_empty_message_is_unknown_error(self):
        msg = exception_message("fetching restaurants", RuntimeError())
        assert msg == "Error fetching restaurants: Unknown error"


class TestToolErrorMessage:
    def test_backend_error(self):
        err = BackendHTTPError(500, "Internal Server Error", "oops")
        assert tool_error_message("updating booking", err, include_details=True) == (
            "Error updating booking: 500 Internal Server Error\nDetails: oops"
        )

    def test_transport_error(self):
        err = httpx.ConnectError("connection refused")
        assert tool_error_message("updating booking", err) == (
            "Error updating booking: connection refused"
        )

    def test_details_ignored_for_exceptions(self):
        msg = tool_error_message("creating booking", ValueError("bad json"), include_details=True)
        assert msg == "Error creating booking: bad json"

"""Unit test fixtures for mocked HTTP responses."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import Response

# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error") -> Response:
    """Create a mock error response."""
    return Response(
        status_code=status_code,
        text=message,
        headers={"Content-Type": "text/plain"},
    )


def mock_html_response() -> Response:
    """Create a 200 response whose body is not JSON."""
    return Response(
        status_code=200,
        text="<html><body>Service Unavailable</body></html>",
        headers={"Content-Type": "text/html"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "error": mock_error_response,
        "html": mock_html_response,
    }

"""
Shared fixtures for unit tests
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from square_connect import SquareClient


def make_response(
    status_code: int = 200,
    body: Any = None,
    reason: str = "OK",
    content: Optional[bytes] = None,
    url: str = "https://connect.squareup.com/",
) -> MagicMock:
    """Build a stand-in for requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    if body is None:
        response.text = ""
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    response.content = content if content is not None else response.text.encode()
    return response


@pytest.fixture
def respond():
    """Factory for fake responses"""
    return make_response


@pytest.fixture
def client() -> SquareClient:
    return SquareClient("LOC123", "test-token")


@pytest.fixture
def debug_client() -> SquareClient:
    return SquareClient("LOC123", "test-token", extended_debug_info=True)


@pytest.fixture
def transport(client: SquareClient, monkeypatch) -> MagicMock:
    """Replace the client's session.request; set return_value/side_effect per test"""
    mock = MagicMock(return_value=make_response(200, {}))
    monkeypatch.setattr(client.http._session, "request", mock)
    return mock


@pytest.fixture
def debug_transport(debug_client: SquareClient, monkeypatch) -> MagicMock:
    mock = MagicMock(return_value=make_response(200, {}))
    monkeypatch.setattr(debug_client.http._session, "request", mock)
    return mock

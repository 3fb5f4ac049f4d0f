"""
Shared pytest fixtures for tmdb-auth tests.

This module provides common fixtures including:
- TransportMocker: Fake transport with canned responses per endpoint path
- Canned TMDb response bodies
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import pytest

from tmdb_auth.exceptions import RemoteApiError


# =============================================================================
# Transport Mocking Infrastructure
# =============================================================================

@dataclass
class TransportCall:
    """Record of a GET issued through the fake transport."""
    path: str
    params: Dict[str, Any] = field(default_factory=dict)


class TransportMocker:
    """
    Fake Transport returning canned bodies keyed by request path.

    Usage:
        def test_guest(transport_mocker):
            transport_mocker.register("authentication/guest_session/new", {...})
            client = AuthenticationClient(transport_mocker)
            client.create_guest_session()
            assert transport_mocker.paths == ["authentication/guest_session/new"]
    """

    def __init__(self):
        self._responses: Dict[str, Union[Dict[str, Any], Exception]] = {}
        self.calls: List[TransportCall] = []
        self.closed = False

    def register(self, path: str, response: Union[Dict[str, Any], Exception]) -> None:
        """Register the body (or exception) returned for path."""
        self._responses[path] = response

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.calls.append(TransportCall(path=path, params=dict(params or {})))
        if path not in self._responses:
            raise RemoteApiError(f"mock not configured for {path}", http_status=404)

        response = self._responses[path]
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def paths(self) -> List[str]:
        return [call.path for call in self.calls]


@pytest.fixture
def transport_mocker():
    """Provide a fresh TransportMocker."""
    return TransportMocker()


# =============================================================================
# Canned TMDb responses
# =============================================================================

TOKEN_NEW = "authentication/token/new"
TOKEN_VALIDATE = "authentication/token/validate_with_login"
SESSION_NEW = "authentication/session/new"
GUEST_SESSION_NEW = "authentication/guest_session/new"


@pytest.fixture
def token_body():
    return {
        "success": True,
        "expires_at": "2016-08-26 17:04:39 UTC",
        "request_token": "ff5c7eeb5a8870efe3cd7fc5c282cffd26800ecd",
    }


@pytest.fixture
def session_body():
    return {"success": True, "session_id": "79191836ddaa0da3df76a5ffef6f07ad6ab0c641"}


@pytest.fixture
def guest_session_body():
    return {
        "success": True,
        "guest_session_id": "1ce82ec1223641636ad4a60b07de3581",
        "expires_at": "2016-08-27 16:26:40 UTC",
    }


@pytest.fixture
def logged_in_transport(transport_mocker, token_body, session_body):
    """Transport answering every step of the login flow successfully."""
    transport_mocker.register(TOKEN_NEW, token_body)
    transport_mocker.register(TOKEN_VALIDATE, token_body)
    transport_mocker.register(SESSION_NEW, session_body)
    return transport_mocker

"""Exceptions raised by the TMDb authentication client."""

from typing import Optional

from .modules.api.models import ResponseStatus


class TMDbError(Exception):
    """Base exception for all tmdb-auth errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RemoteApiError(TMDbError):
    """Transport or HTTP level failure talking to the TMDb API.

    Attributes:
        http_status: HTTP status of the response, None if no response arrived
        response_status: TMDb status body returned with the error, if any
    """

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        response_status: Optional[ResponseStatus] = None,
    ):
        super().__init__(message)
        self.http_status = http_status
        self.response_status = response_status

    @property
    def status_code(self) -> Optional[int]:
        """TMDb status code (e.g. 7 for an invalid API key)."""
        return self.response_status.status_code if self.response_status else None

    @property
    def status_message(self) -> Optional[str]:
        return self.response_status.status_message if self.response_status else None


class AuthenticationError(TMDbError):
    """Base for authentication failures detected from a response body."""


class InvalidTokenError(AuthenticationError):
    """A request token did not report success."""


class LoginFailedError(AuthenticationError):
    """The server did not validate the supplied username and password."""

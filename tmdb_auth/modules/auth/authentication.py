"""
Authentication client for the TMDb API.

Implements the request token / session flow described at
https://developer.themoviedb.org/reference/authentication-how-do-i-generate-a-session-id
and guest sessions. The HTTP transport is injected.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...exceptions import InvalidTokenError, LoginFailedError, RemoteApiError
from ..api.models import Credentials, RequestToken, Session
from .interfaces import Transport

logger = logging.getLogger(__name__)

TMDB_METHOD_AUTH = "authentication"
PARAM_REQUEST_TOKEN = "request_token"

ModelT = TypeVar("ModelT", bound=BaseModel)


class AuthenticationClient:
    """
    Client for the TMDb authentication endpoints.

    Holds no state besides the transport, so one instance can be shared
    between callers.
    """

    def __init__(self, transport: Transport):
        """
        Initialize authentication client.

        Args:
            transport: Transport used for every request
        """
        self.transport = transport

    def _map_json(
        self, path: str, model: Type[ModelT], params: Optional[Dict[str, Any]] = None
    ) -> ModelT:
        """GET an authentication endpoint and map the response to model."""
        data = self.transport.get(f"{TMDB_METHOD_AUTH}/{path}", params=params)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RemoteApiError(
                f"Unexpected response from {TMDB_METHOD_AUTH}/{path}: {e.error_count()} invalid field(s)"
            ) from e

    def request_token(self) -> RequestToken:
        """
        Generate a request token for user based authentication.

        Any number of tokens can be generated; each expires after 60 minutes
        and is destroyed once a session has been created from it.

        Returns:
            New RequestToken

        Raises:
            RemoteApiError: If the request fails
        """
        token = self._map_json("token/new", RequestToken)
        if token.success:
            logger.debug(f"Request token issued, expires at {token.expires_at.isoformat()}")
        return token

    def create_session(self, token: RequestToken) -> Session:
        """
        Exchange a successful request token for a session id.

        A session id is required to use any of the write methods of the API.

        Args:
            token: Token that reports success

        Returns:
            New Session

        Raises:
            InvalidTokenError: If the token does not report success; nothing is sent
            RemoteApiError: If the request fails
        """
        if not token.success:
            logger.warning("Authorisation token was not successful!")
            raise InvalidTokenError("Authorisation token was not successful!")

        session = self._map_json(
            "session/new", Session, {PARAM_REQUEST_TOKEN: token.request_token}
        )
        logger.info("Session created")
        return session

    def validate_login(self, token: RequestToken, username: str, password: str) -> RequestToken:
        """
        Validate a request token with a username and password.

        Args:
            token: Token previously returned by request_token()
            username: TMDb account username
            password: TMDb account password

        Returns:
            The validated token; the same token with success confirmed
        """
        logger.info(f"Validating login for user {username!r}")
        return self._map_json(
            "token/validate_with_login",
            RequestToken,
            {
                PARAM_REQUEST_TOKEN: token.request_token,
                "username": username,
                "password": password,
            },
        )

    def login_and_create_session(self, username: str, password: str) -> Session:
        """
        Do the whole username/password authentication in one go.

        Generates a request token, validates it with the credentials and
        exchanges the validated token for a session.

        Args:
            username: TMDb account username
            password: TMDb account password

        Returns:
            Session of the authenticated user

        Raises:
            InvalidTokenError: If the new request token is not successful
            LoginFailedError: If the credentials were not validated
            RemoteApiError: If any request fails
        """
        auth_token = self.request_token()
        if not auth_token.success:
            raise InvalidTokenError("Authorisation token was not successful!")

        login_token = self.validate_login(auth_token, username, password)
        if not login_token.success:
            message = f"User authentication failed for {username!r}"
            if login_token.status_message:
                message = f"{message}: {login_token.status_message}"
            logger.warning(message)
            raise LoginFailedError(message)

        return self.create_session(login_token)

    def login(self, credentials: Credentials) -> Session:
        """Same as login_and_create_session, taking a Credentials value."""
        return self.login_and_create_session(credentials.username, credentials.password)

    def create_guest_session(self) -> Session:
        """
        Generate a guest session.

        A guest session can rate movies without a registered TMDb account.
        Only one should be generated per user or device. TMDb discards it
        if it is not used within 24 hours.

        Returns:
            Guest Session

        Raises:
            RemoteApiError: If the request fails
        """
        session = self._map_json("guest_session/new", Session)
        logger.info("Guest session created")
        return session

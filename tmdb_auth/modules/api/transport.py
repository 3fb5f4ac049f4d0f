"""
HTTP transport for the TMDb API.

Performs GET requests relative to the configured base URL and returns
decoded JSON objects. Every failure is reported as RemoteApiError.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ...config.provider import TMDbConfig
from ...exceptions import RemoteApiError
from .models import ResponseStatus

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Transport backed by an httpx.Client.

    A v3 API key is sent as the api_key query parameter on every request,
    a v4 access token as a Bearer Authorization header.
    """

    def __init__(self, config: TMDbConfig, client: Optional[httpx.Client] = None):
        """
        Initialize transport.

        Args:
            config: TMDb API configuration
            client: Optional pre-built httpx client; the transport does not close it
        """
        self.config = config
        self._owns_client = client is None
        self.client = client or self._build_client(config)

    @staticmethod
    def _build_client(config: TMDbConfig) -> httpx.Client:
        params = {}
        headers = {"Accept": "application/json"}
        if config.api_key:
            params["api_key"] = config.api_key
        if config.access_token:
            headers["Authorization"] = f"Bearer {config.access_token}"

        return httpx.Client(
            base_url=config.base_url,
            params=params,
            headers=headers,
            timeout=config.timeout,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Issue a GET request and decode the JSON object in the response.

        Args:
            path: Path relative to the base URL (e.g. "authentication/token/new")
            params: Query parameters

        Returns:
            Decoded JSON object

        Raises:
            RemoteApiError: On network failure, non-2xx status or a non-object body
        """
        logger.debug(f"GET {path}")
        try:
            response = self.client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f"Request to {path} failed: {e.__class__.__name__}")
            raise RemoteApiError(f"Request to {path} failed: {e.__class__.__name__}") from e

        if response.is_error:
            response_status = self._parse_status(response)
            detail = response_status.status_message if response_status else response.reason_phrase
            logger.warning(f"TMDb returned HTTP {response.status_code} for {path}: {detail}")
            raise RemoteApiError(
                f"TMDb returned HTTP {response.status_code} for {path}: {detail}",
                http_status=response.status_code,
                response_status=response_status,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteApiError(
                f"Invalid JSON in response from {path}", http_status=response.status_code
            ) from e

        if not isinstance(data, dict):
            raise RemoteApiError(
                f"Expected a JSON object from {path}, got {type(data).__name__}",
                http_status=response.status_code,
            )
        return data

    @staticmethod
    def _parse_status(response: httpx.Response) -> Optional[ResponseStatus]:
        """Extract TMDb's status body from an error response, if present."""
        try:
            return ResponseStatus.model_validate(response.json())
        except (ValueError, ValidationError):
            return None

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

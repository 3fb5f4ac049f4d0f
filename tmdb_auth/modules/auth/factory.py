"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the transport from configuration
- Wires it into the authentication client
"""

import logging
from typing import Optional

import httpx

from ...config.provider import ConfigProvider
from ..api.transport import HttpxTransport
from .authentication import AuthenticationClient
from .interfaces import Transport

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication client.

    This is the composition root that creates the transport and injects
    it into the client.
    """

    @staticmethod
    def build(
        config_provider: ConfigProvider,
        http_client: Optional[httpx.Client] = None
    ) -> AuthenticationClient:
        """
        Build an authentication client.

        Args:
            config_provider: Configuration provider
            http_client: Optional httpx client to send requests through

        Returns:
            AuthenticationClient backed by an HttpxTransport
        """
        api_config = config_provider.get_api_config()

        if api_config.access_token:
            logger.info("Building TMDb client with access token authentication")
        else:
            logger.info("Building TMDb client with API key authentication")

        transport = HttpxTransport(api_config, client=http_client)
        return AuthenticationClient(transport)

    @staticmethod
    def build_for_testing(transport: Transport) -> AuthenticationClient:
        """
        Build a client around a mock transport.

        Args:
            transport: Any object implementing the Transport protocol

        Returns:
            AuthenticationClient for testing
        """
        return AuthenticationClient(transport)

"""
Authentication Module - Black Box Interface

Purpose: Obtain TMDb request tokens, user sessions and guest sessions
Interface: request_token(), create_session(), validate_login(),
           login_and_create_session(), create_guest_session()
Hidden: Endpoint paths, response mapping

The transport is injected, so this module can be driven by any HTTP
implementation satisfying the Transport protocol.
"""

from .authentication import AuthenticationClient
from .factory import AuthFactory
from .interfaces import Transport

__all__ = ["AuthenticationClient", "AuthFactory", "Transport"]

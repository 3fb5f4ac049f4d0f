"""
tmdb-auth - TMDb Authentication Client

A client for the authentication endpoints of The Movie Database (TMDb) API.

Architecture:
- Each module is self-contained with clear interfaces
- The HTTP transport is injected, never inherited
- Responses are mapped to immutable value objects

Modules:
- auth: Request tokens, login validation, user and guest sessions
- api: Response models and the HTTP transport
- config: Environment based configuration
"""

__version__ = "1.0.0"

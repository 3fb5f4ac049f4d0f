"""
API Module - Black Box Interface

Purpose: TMDb response models and HTTP transport
Interface: RequestToken, Session, Credentials, ResponseStatus, transport.HttpxTransport
Hidden: Timestamp parsing, HTTP error mapping
"""

from .models import Credentials, RequestToken, ResponseStatus, Session

__all__ = ["Credentials", "RequestToken", "ResponseStatus", "Session"]

"""Authentication interfaces following Black Box Design principles."""
from typing import Any, Dict, Optional, Protocol


class Transport(Protocol):
    """Protocol for the HTTP transport - allows swappable implementations."""

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Perform a GET request against the TMDb API.

        Args:
            path: Path relative to the API base URL
            params: Query parameters

        Returns:
            Decoded JSON object

        Raises:
            RemoteApiError: On any transport or HTTP failure
        """
        ...

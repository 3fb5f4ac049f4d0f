"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_BASE_URL = "https://api.themoviedb.org/3/"
DEFAULT_TIMEOUT = 10.0


@dataclass
class TMDbConfig:
    """TMDb API configuration."""
    api_key: Optional[str]
    access_token: Optional[str]
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_configured(self) -> bool:
        """Check if either a v3 API key or a v4 access token is set."""
        return bool(self.api_key or self.access_token)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> TMDbConfig:
        """Get TMDb API configuration."""
        ...

    def get_log_config(self) -> LogConfig:
        """Get logging configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_api_config(self) -> TMDbConfig:
        """Get TMDb API configuration from environment variables."""
        api_key = os.getenv("TMDB_API_KEY") or None
        access_token = os.getenv("TMDB_ACCESS_TOKEN") or None

        if not (api_key or access_token):
            raise ValueError(
                "TMDB_API_KEY or TMDB_ACCESS_TOKEN environment variable is required. "
                "Both are available from the API section of your TMDb account settings."
            )

        timeout_env = os.getenv("TMDB_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_env)
        except ValueError:
            raise ValueError(f"TMDB_TIMEOUT must be a number of seconds, got {timeout_env!r}")

        return TMDbConfig(
            api_key=api_key,
            access_token=access_token,
            base_url=os.getenv("TMDB_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )

    def get_log_config(self) -> LogConfig:
        """Get logging configuration from environment variables."""
        return LogConfig(level=os.getenv("TMDB_LOG_LEVEL", "INFO").upper())

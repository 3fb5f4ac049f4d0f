"""
Config Module - Black Box Interface

Purpose: TMDb client configuration
Interface: ConfigProvider.get_api_config(), ConfigProvider.get_log_config()
Hidden: Config sources, environment parsing
"""

from .provider import (
    ConfigProvider,
    EnvConfigProvider,
    LogConfig,
    TMDbConfig,
)

__all__ = [
    "ConfigProvider",
    "EnvConfigProvider",
    "LogConfig",
    "TMDbConfig",
]

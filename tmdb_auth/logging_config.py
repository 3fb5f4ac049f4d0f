"""
Custom logging configuration that keeps credentials out of the logs
"""

import logging
import re
from typing import Any, Dict

SENSITIVE_PARAMS = ("password", "api_key", "request_token", "session_id", "guest_session_id")

_QUERY_PATTERN = re.compile(r"\b(" + "|".join(SENSITIVE_PARAMS) + r")=[^&\s\"']+")
_BEARER_PATTERN = re.compile(r"Bearer\s+[A-Za-z0-9._~+/=-]+")


def redact(message: str) -> str:
    """Mask sensitive query parameter values and Bearer tokens."""
    message = _QUERY_PATTERN.sub(r"\1=***", message)
    return _BEARER_PATTERN.sub("Bearer ***", message)


class SensitiveQueryFilter(logging.Filter):
    """Filter to redact credentials from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with secrets masked."""
        # httpx logs the full request URL, query string included
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True  # Never drop records


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "sensitive_query_filter": {
                "()": SensitiveQueryFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["sensitive_query_filter"]
            }
        },
        "loggers": {
            "tmdb_auth": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING" if level == "INFO" else level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }

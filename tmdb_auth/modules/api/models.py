"""
TMDb authentication data models.

These models map the JSON bodies returned by the TMDb authentication
endpoints field-for-field. All of them are immutable.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)

# TMDb returns timestamps as "2016-08-26 17:04:39 UTC"
TMDB_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def parse_tmdb_timestamp(value: Any) -> Any:
    """
    Parse a TMDb timestamp into an aware UTC datetime.

    Values that are not in TMDb's own format are returned unchanged so
    pydantic can still accept ISO-8601 strings and datetime objects.
    """
    if isinstance(value, str) and value.endswith(" UTC"):
        try:
            return datetime.strptime(value, TMDB_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
        except ValueError:
            return value
    return value


def ensure_utc(value: datetime) -> datetime:
    """Naive timestamps are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UTCDateTime = Annotated[
    datetime, BeforeValidator(parse_tmdb_timestamp), AfterValidator(ensure_utc)
]


class TMDbModel(BaseModel):
    """Base for response models: frozen, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class RequestToken(TMDbModel):
    """
    Short-lived token used to obtain a session. Expires after 60 minutes.

    Failed calls answer with a status body instead of a token, so the
    token fields are only required when success is true.
    """

    success: bool = False
    expires_at: Optional[UTCDateTime] = None
    request_token: Optional[str] = None
    status_code: Optional[int] = None
    status_message: Optional[str] = None

    @model_validator(mode="after")
    def require_token_on_success(self) -> "RequestToken":
        if self.success and (not self.request_token or self.expires_at is None):
            raise ValueError("a successful token needs request_token and expires_at")
        return self


class Session(TMDbModel):
    """
    Authenticated or guest session.

    User sessions carry session_id. Guest sessions carry guest_session_id
    and an expiry instead; TMDb discards them if unused for 24 hours.
    """

    success: bool = False
    session_id: Optional[str] = None
    guest_session_id: Optional[str] = None
    expires_at: Optional[UTCDateTime] = None

    @property
    def is_guest(self) -> bool:
        return self.guest_session_id is not None and self.session_id is None


class Credentials(TMDbModel):
    """Username and password of a TMDb account. Never persisted."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)


class ResponseStatus(TMDbModel):
    """Status body TMDb sends along with errors."""

    success: Optional[bool] = None
    status_code: int
    status_message: str = ""

"""
Unit tests for tmdb-auth data models.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tmdb_auth.modules.api.models import (
    Credentials,
    RequestToken,
    ResponseStatus,
    Session,
    parse_tmdb_timestamp,
)


class TestRequestToken:
    """Test request token model."""

    def test_from_tmdb_body(self):
        token = RequestToken.model_validate(
            {"success": True, "expires_at": "2016-08-26 17:04:39 UTC", "request_token": "abc"}
        )
        assert token.success is True
        assert token.request_token == "abc"
        assert token.expires_at == datetime(2016, 8, 26, 17, 4, 39, tzinfo=timezone.utc)

    def test_iso_timestamp_accepted(self):
        token = RequestToken.model_validate(
            {"success": True, "expires_at": "2016-08-26T17:04:39Z", "request_token": "abc"}
        )
        assert token.expires_at == datetime(2016, 8, 26, 17, 4, 39, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self):
        token = RequestToken(
            success=True, expires_at=datetime(2016, 8, 26, 17, 4, 39), request_token="abc"
        )
        assert token.expires_at.tzinfo == timezone.utc

    def test_unknown_fields_ignored(self):
        token = RequestToken.model_validate(
            {
                "success": True,
                "expires_at": "2016-08-26 17:04:39 UTC",
                "request_token": "abc",
                "vote_weight": 1,
            }
        )
        assert not hasattr(token, "vote_weight")

    def test_immutable(self):
        token = RequestToken.model_validate(
            {"success": False, "expires_at": "2016-08-26 17:04:39 UTC", "request_token": "abc"}
        )
        with pytest.raises(ValidationError):
            token.success = True

    def test_missing_token_rejected(self):
        with pytest.raises(ValidationError):
            RequestToken.model_validate({"success": True, "expires_at": "2016-08-26 17:04:39 UTC"})

    def test_status_body_without_token_fields(self):
        token = RequestToken.model_validate(
            {"success": False, "status_code": 30, "status_message": "Invalid username and/or password"}
        )
        assert token.success is False
        assert token.request_token is None
        assert token.expires_at is None
        assert token.status_code == 30

    def test_successful_token_requires_expiry(self):
        with pytest.raises(ValidationError):
            RequestToken.model_validate({"success": True, "request_token": "abc"})

    def test_success_defaults_to_false(self):
        token = RequestToken.model_validate(
            {"expires_at": "2016-08-26 17:04:39 UTC", "request_token": "abc"}
        )
        assert token.success is False


class TestSession:
    """Test session model."""

    def test_user_session(self):
        session = Session.model_validate({"success": True, "session_id": "s1"})
        assert session.session_id == "s1"
        assert session.guest_session_id is None
        assert session.is_guest is False

    def test_guest_session(self):
        session = Session.model_validate(
            {
                "success": True,
                "guest_session_id": "g1",
                "expires_at": "2016-08-27 16:26:40 UTC",
            }
        )
        assert session.is_guest is True
        assert session.expires_at == datetime(2016, 8, 27, 16, 26, 40, tzinfo=timezone.utc)

    def test_naive_expiry_is_utc(self):
        session = Session.model_validate(
            {"success": True, "guest_session_id": "g", "expires_at": "2016-08-27T16:26:40"}
        )
        assert session.expires_at == datetime(2016, 8, 27, 16, 26, 40, tzinfo=timezone.utc)


class TestCredentials:
    """Test credentials model."""

    def test_password_hidden_from_repr(self):
        credentials = Credentials(username="jdoe", password="hunter2")
        assert "hunter2" not in repr(credentials)
        assert "jdoe" in repr(credentials)

    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            Credentials(username="", password="x")
        with pytest.raises(ValidationError):
            Credentials(username="x", password="")


class TestResponseStatus:
    """Test TMDb status body model."""

    def test_error_body(self):
        status = ResponseStatus.model_validate(
            {"success": False, "status_code": 7, "status_message": "Invalid API key: You must be granted a valid key."}
        )
        assert status.status_code == 7
        assert status.success is False
        assert status.status_message.startswith("Invalid API key")


def test_parse_tmdb_timestamp_passthrough():
    """Values not in TMDb's format are left to pydantic."""
    assert parse_tmdb_timestamp("2016-08-26T17:04:39Z") == "2016-08-26T17:04:39Z"
    assert parse_tmdb_timestamp("garbage UTC") == "garbage UTC"
    assert parse_tmdb_timestamp(None) is None

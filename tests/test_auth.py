"""Tests for the authentication service."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from catalog.exceptions import InvalidTokenError, ValidationError
from catalog.models.user import User
from catalog.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_password_hash,
    verify_access_token,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing helpers."""

    def test_hash_is_salted(self):
        """Hashing the same password twice gives different hashes."""
        first = get_password_hash("hunter22")
        second = get_password_hash("hunter22")
        assert first != second
        assert verify_password("hunter22", first)
        assert verify_password("hunter22", second)

    def test_wrong_password_returns_false(self):
        """A mismatch is reported as False, not raised."""
        hashed = get_password_hash("hunter22")
        assert verify_password("hunter23", hashed) is False

    def test_uses_ten_rounds(self):
        """The bcrypt cost factor is fixed at 10."""
        assert get_password_hash("hunter22").split("$")[2] == "10"


class TestAccessTokens:
    """Tests for token issuance and verification."""

    def test_round_trip(self, settings):
        """A token verifies back to the identity it was issued for."""
        token = create_access_token(7, "seven@example.com", settings)

        identity = verify_access_token(token, settings)
        assert identity.user_id == 7
        assert identity.email == "seven@example.com"

    def test_expires_after_configured_window(self, settings):
        """The exp claim is 24 hours after issue by default."""
        token = create_access_token(1, "one@example.com", settings)
        claims = jwt.get_unverified_claims(token)

        expected = datetime.now(UTC) + timedelta(hours=24)
        assert abs(claims["exp"] - expected.timestamp()) < 60

    def test_expired_token_is_rejected(self, settings):
        """An expired token raises InvalidTokenError."""
        expired_settings = settings.model_copy(update={"jwt_expiration_minutes": -1})
        token = create_access_token(1, "one@example.com", expired_settings)

        with pytest.raises(InvalidTokenError):
            verify_access_token(token, settings)

    def test_wrong_secret_is_rejected(self, settings):
        """A token signed with a different secret is rejected."""
        other = settings.model_copy(update={"jwt_secret": "not-the-server-secret"})
        token = create_access_token(1, "one@example.com", other)

        with pytest.raises(InvalidTokenError):
            verify_access_token(token, settings)

    def test_malformed_token_is_rejected(self, settings):
        """Garbage input is rejected."""
        with pytest.raises(InvalidTokenError):
            verify_access_token("definitely.not.ajwt", settings)

    def test_missing_email_claim_is_rejected(self, settings):
        """A validly signed token without identity claims is rejected."""
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(InvalidTokenError):
            verify_access_token(token, settings)

    def test_token_without_expiry_is_rejected(self, settings):
        """Tokens must carry an expiry."""
        token = jwt.encode(
            {"sub": "1", "email": "one@example.com"},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(InvalidTokenError):
            verify_access_token(token, settings)

    def test_invalid_token_maps_to_forbidden(self):
        """Invalid tokens are reported as 403."""
        assert InvalidTokenError("Invalid token").status_code == 403


class TestUsers:
    """Tests for user creation and authentication."""

    def test_create_and_authenticate(self, db):
        """A created user can authenticate with the right password only."""
        user = create_user(db, "alice@example.com", "wonderland")

        assert authenticate_user(db, "alice@example.com", "wonderland").id == user.id
        assert authenticate_user(db, "alice@example.com", "looking-glass") is None

    def test_unknown_email(self, db):
        """Unknown emails authenticate as None."""
        assert authenticate_user(db, "ghost@example.com", "boo") is None

    def test_duplicate_email_raises_validation_error(self, db):
        """The unique email index surfaces as a ValidationError."""
        create_user(db, "bob@example.com", "builder")

        with pytest.raises(ValidationError) as exc_info:
            create_user(db, "bob@example.com", "another")

        assert exc_info.value.message == "Email already exists"
        assert db.query(User).count() == 1

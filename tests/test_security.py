"""
Test password hashing and bearer tokens.
"""

import pytest
from jose import jwt

from myhealth.core.config import Settings
from myhealth.core.exceptions import InvalidTokenError
from myhealth.core.security import hash_password, verify_password
from myhealth.services.token_service import TokenService


def test_hash_password_is_salted_and_verifiable():
    """Test bcrypt hashing round trip."""
    first = hash_password("pw1", rounds=4)
    second = hash_password("pw1", rounds=4)
    assert first != second
    assert "pw1" not in first
    assert verify_password("pw1", first)
    assert not verify_password("pw2", first)


def test_verify_password_rejects_non_bcrypt_value():
    assert verify_password("pw1", "pw1") is False


def test_token_round_trip(settings):
    """Test that an issued token verifies with the same claims."""
    tokens = TokenService(settings)
    claims = tokens.verify(tokens.issue(7, "a@x.com"))
    assert claims.id == 7
    assert claims.email == "a@x.com"


def test_token_has_no_expiry_by_default(settings):
    token = TokenService(settings).issue(1, "a@x.com")
    assert "exp" not in jwt.get_unverified_claims(token)


def test_tampered_token_is_rejected(settings):
    """Test that any change to the token fails verification."""
    tokens = TokenService(settings)
    token = tokens.issue(1, "a@x.com")
    header, payload, signature = token.split(".")
    flipped = signature[:-2] + ("A" if signature[-2] != "A" else "B") + signature[-1]
    for corrupted in (
        f"{header}.{payload}.{flipped}",
        f"{header}.{payload}",
        token + "x",
        "not-a-token",
    ):
        with pytest.raises(InvalidTokenError):
            tokens.verify(corrupted)


def test_forged_claims_are_rejected(settings):
    """Test a token re-signed with another secret."""
    forged = jwt.encode({"id": 1, "email": "a@x.com"}, "other-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(settings).verify(forged)


def test_token_without_required_claims_is_rejected(settings):
    token = jwt.encode({"email": "a@x.com"}, settings.jwt_secret, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(settings).verify(token)


def test_empty_token_is_rejected(settings):
    with pytest.raises(InvalidTokenError):
        TokenService(settings).verify("")


def test_expired_token_is_rejected():
    """Test expiry when it is switched on."""
    tokens = TokenService(
        Settings(jwt_secret="test-secret", access_token_expire_minutes=-1)
    )
    with pytest.raises(InvalidTokenError):
        tokens.verify(tokens.issue(1, "a@x.com"))


def test_token_with_expiry_verifies_before_it_lapses():
    tokens = TokenService(
        Settings(jwt_secret="test-secret", access_token_expire_minutes=30)
    )
    token = tokens.issue(3, "c@x.com")
    assert "exp" in jwt.get_unverified_claims(token)
    assert tokens.verify(token).id == 3

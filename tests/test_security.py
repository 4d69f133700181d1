"""Tests for password hashing, bearer tokens and OTP generation."""
import jwt
import pytest

from venuebook.core.config import settings
from venuebook.core.security import (
    create_access_token,
    decode_access_token,
    generate_otp_code,
    hash_password,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_rejects_garbage_hash():
    assert not verify_password("secret123", "")
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_access_token_carries_user_and_role():
    token, expires_at = create_access_token(42, "owner")

    payload = decode_access_token(token)
    assert payload["sub"] == "42"
    assert payload["role"] == "owner"
    assert payload["exp"] == int(expires_at.timestamp())


def test_expired_token_is_rejected():
    token, _ = create_access_token(1, "user", expires_minutes=-1)

    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "1", "exp": 9999999999}, "another-key", algorithm=settings.JWT_ALGORITHM)

    with pytest.raises(jwt.InvalidSignatureError):
        decode_access_token(token)


def test_otp_code_has_six_digits():
    codes = {generate_otp_code() for _ in range(200)}

    assert all(100000 <= code <= 999999 for code in codes)
    assert len(codes) > 1

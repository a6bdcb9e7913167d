"""Unit tests for password hashing and tokens."""

import pytest
from jose import jwt

from crmdesk.core.security import (
    SESSION_TOKEN_LENGTH,
    create_jwt_token,
    decode_jwt_token,
    get_password_hash,
    session_token_for,
    verify_password,
)


@pytest.mark.unit
def test_password_hash_roundtrip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


@pytest.mark.unit
def test_verify_password_rejects_non_bcrypt_hash():
    assert not verify_password("s3cret", "plain-text")
    assert not verify_password("s3cret", "")


@pytest.mark.unit
def test_token_carries_subject():
    token = create_jwt_token("alice")
    payload = decode_jwt_token(token)
    assert payload["sub"] == "alice"
    assert "exp" in payload and "jti" in payload


@pytest.mark.unit
def test_token_signed_with_other_key_is_rejected():
    token = create_jwt_token("alice", secret_key="another-key")
    with pytest.raises(jwt.JWTError):
        decode_jwt_token(token)


@pytest.mark.unit
def test_session_token_differs_between_tokens():
    first, second = create_jwt_token("alice"), create_jwt_token("alice")
    assert first[:SESSION_TOKEN_LENGTH] == second[:SESSION_TOKEN_LENGTH]
    assert session_token_for(first) != session_token_for(second)
    assert len(session_token_for(first)) == SESSION_TOKEN_LENGTH

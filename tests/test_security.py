# File: tests/test_security.py

from datetime import timedelta

import jwt
import pytest

from review_api.core.security import (
    InvalidSignature,
    MalformedToken,
    TokenExpired,
    create_access_token,
    decode_access_token,
    generate_placeholder_password,
    hash_password,
    verify_password,
)


def test_hash_and_verify_password():
    digest = hash_password("pw123456")
    assert digest != "pw123456"
    assert verify_password("pw123456", digest) is True
    assert verify_password("pw1234567", digest) is False


def test_hash_is_salted():
    assert hash_password("pw123456") != hash_password("pw123456")


def test_hash_uses_work_factor_10():
    assert hash_password("pw123456").startswith("$2b$10$")


def test_verify_malformed_digest_is_false():
    assert verify_password("pw123456", "not-a-hash") is False
    assert verify_password("pw123456", "") is False
    assert verify_password("pw123456", None) is False


def test_long_passwords_are_truncated_consistently():
    base = "x" * 72
    digest = hash_password(base + "tail")
    assert verify_password(base + "other-tail", digest) is True


def test_placeholder_passwords_are_random():
    assert generate_placeholder_password() != generate_placeholder_password()


def test_token_round_trip():
    token = create_access_token("user-1")
    assert decode_access_token(token) == "user-1"


def test_expired_token():
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-1))
    with pytest.raises(TokenExpired):
        decode_access_token(token)


def test_token_with_wrong_signature():
    token = create_access_token("user-1", secret_key="other-secret")
    with pytest.raises(InvalidSignature):
        decode_access_token(token)


def test_malformed_token():
    with pytest.raises(MalformedToken):
        decode_access_token("garbage")


def test_token_without_subject():
    token = jwt.encode({"exp": 9999999999}, "test-secret", algorithm="HS256")
    with pytest.raises(MalformedToken):
        decode_access_token(token, secret_key="test-secret")

"""
Unit tests for user_api.core.security
"""
import time

import jwt
import pytest
from user_api.core.security import (
    TokenClaims,
    TokenManager,
    TokenValidationError,
    hash_password,
    verify_password,
)


TEST_SECRET = "test-signing-secret-for-unit-tests-only-0123456789abcdef0123456789abcdef"


def _encode(payload, algorithm="HS256", secret=TEST_SECRET):
    return jwt.encode(payload, secret, algorithm=algorithm)


def _valid_payload(**overrides):
    payload = {
        "sub": "u1",
        "username": "alice",
        "role": "admin",
        "iat": int(time.time()),
        "exp": int(time.time()) + 300,
    }
    payload.update(overrides)
    return payload


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestTokenManager:
    """Tests for TokenManager.issue and TokenManager.verify"""

    def test_issue_then_verify(self, token_manager):
        token = token_manager.issue(sub="u1", username="alice", role="admin")
        claims = token_manager.verify(token)
        assert claims == TokenClaims(sub="u1", username="alice", role="admin")

    def test_issued_token_carries_expiry(self, token_manager):
        token = token_manager.issue(sub="u1", username="alice", role="admin")
        decoded = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])
        assert decoded["exp"] - decoded["iat"] == 60 * 60

    def test_rejects_unexpected_algorithm(self, token_manager):
        token = _encode(_valid_payload(), algorithm="HS512")
        with pytest.raises(TokenValidationError, match="Invalid token"):
            token_manager.verify(token)

    def test_rejects_unsigned_token(self, token_manager):
        token = jwt.encode(_valid_payload(), None, algorithm="none")
        with pytest.raises(TokenValidationError):
            token_manager.verify(token)

    def test_rejects_wrong_secret(self, token_manager):
        token = _encode(_valid_payload(), secret=TEST_SECRET[::-1])
        with pytest.raises(TokenValidationError):
            token_manager.verify(token)

    def test_rejects_expired_token(self, token_manager):
        token = _encode(_valid_payload(exp=int(time.time()) - 10))
        with pytest.raises(TokenValidationError, match="expired"):
            token_manager.verify(token)

    def test_rejects_token_without_expiry(self, token_manager):
        payload = _valid_payload()
        del payload["exp"]
        with pytest.raises(TokenValidationError):
            token_manager.verify(_encode(payload))

    def test_rejects_tampered_token(self, token_manager):
        token = token_manager.issue(sub="u1", username="alice", role="admin")
        tampered = token[:-5] + ("xxxxx" if not token.endswith("xxxxx") else "yyyyy")
        with pytest.raises(TokenValidationError):
            token_manager.verify(tampered)

    def test_missing_claim_fails_cleanly(self, token_manager):
        payload = _valid_payload()
        del payload["role"]
        with pytest.raises(TokenValidationError, match="role"):
            token_manager.verify(_encode(payload))

    def test_non_string_claim_fails_cleanly(self, token_manager):
        with pytest.raises(TokenValidationError, match="username"):
            token_manager.verify(_encode(_valid_payload(username=42)))

    def test_garbage_token(self, token_manager):
        with pytest.raises(TokenValidationError):
            token_manager.verify("invalid.jwt.token")

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            TokenManager(secret_key="")

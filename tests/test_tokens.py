"""Tests for JWT issuance and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from blog_api.errors import InvalidToken, WrongTokenType
from blog_api.services.tokens import TokenClaims, TokenService, TokenType

SECRET = "test-secret"


@pytest.fixture
def tokens():
    return TokenService(secret=SECRET)


class TestIssueAndVerify:
    """Round trips through issue_* and verify."""

    def test_access_token_claims(self, tokens):
        claims = tokens.verify(tokens.issue_access(7, "a@example.com"))
        assert claims == TokenClaims(user_id=7, email="a@example.com", type=TokenType.ACCESS)

    def test_refresh_token_claims(self, tokens):
        claims = tokens.verify(tokens.issue_refresh(7, "a@example.com"))
        assert claims.type is TokenType.REFRESH

    def test_refresh_outlives_access(self, tokens):
        access = jwt.get_unverified_claims(tokens.issue_access(1, "a@example.com"))
        refresh = jwt.get_unverified_claims(tokens.issue_refresh(1, "a@example.com"))
        assert refresh["exp"] > access["exp"]

    def test_verify_refresh_accepts_refresh(self, tokens):
        claims = tokens.verify_refresh(tokens.issue_refresh(3, "r@example.com"))
        assert claims.user_id == 3


class TestRejection:
    """Tokens that must not verify."""

    def test_verify_refresh_rejects_access(self, tokens):
        with pytest.raises(WrongTokenType):
            tokens.verify_refresh(tokens.issue_access(3, "r@example.com"))

    def test_expired_token(self):
        expired = TokenService(secret=SECRET, access_ttl=timedelta(seconds=-5))
        with pytest.raises(InvalidToken):
            expired.verify(expired.issue_access(1, "a@example.com"))

    def test_wrong_secret(self, tokens):
        other = TokenService(secret="another-secret")
        with pytest.raises(InvalidToken):
            tokens.verify(other.issue_access(1, "a@example.com"))

    def test_tampered_token(self, tokens):
        token = tokens.issue_access(1, "a@example.com")
        header, payload, signature = token.split(".")
        forged = jwt.encode(
            {"sub": "2", "email": "b@example.com", "type": "access"}, "guess"
        ).split(".")[1]
        with pytest.raises(InvalidToken):
            tokens.verify(f"{header}.{forged}.{signature}")

    def test_malformed_token(self, tokens):
        with pytest.raises(InvalidToken):
            tokens.verify("definitely-not-a-jwt")

    def test_missing_type_claim(self, tokens):
        token = jwt.encode({"sub": "1", "email": "a@example.com"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_unknown_type_claim(self, tokens):
        token = jwt.encode(
            {"sub": "1", "email": "a@example.com", "type": "admin"}, SECRET, algorithm="HS256"
        )
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_non_numeric_subject(self, tokens):
        token = jwt.encode(
            {"sub": "abc", "email": "a@example.com", "type": "access"}, SECRET, algorithm="HS256"
        )
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_wrong_type_is_unauthenticated(self, tokens):
        """Both failures map to a 401."""
        assert InvalidToken().status_code == 401
        assert WrongTokenType().status_code == 401

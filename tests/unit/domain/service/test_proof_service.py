"""Unit tests for ProofService and SessionTokenService."""

from datetime import datetime, timedelta, timezone
import re

import jwt
import pytest

from microblog.config import AuthSettings
from microblog.domain.model import Session
from microblog.domain.service import ProofService, SessionTokenService
from microblog.domain.value import UserId


class TestProofService:
    """Tests for proof derivation."""

    def test_derive_is_deterministic(self):
        """The same subject always gives the same proof."""
        service = ProofService(AuthSettings(identity_secret="secret"))

        assert service.derive("google-123") == service.derive("google-123")

    def test_different_subjects_differ(self):
        """Distinct subjects give distinct proofs."""
        service = ProofService(AuthSettings(identity_secret="secret"))

        assert service.derive("google-123") != service.derive("google-124")

    def test_proof_depends_on_key(self):
        """Proofs are keyed, so another secret gives another proof."""
        first = ProofService(AuthSettings(identity_secret="one"))
        second = ProofService(AuthSettings(identity_secret="two"))

        assert first.derive("google-123") != second.derive("google-123")

    def test_proof_is_hex_digest(self):
        """Proofs are 64 lowercase hex characters."""
        proof = ProofService(AuthSettings(identity_secret="secret")).derive("google-1")

        assert re.fullmatch(r"[0-9a-f]{64}", proof.root)


class TestSessionTokenService:
    """Tests for session token encoding."""

    @pytest.fixture
    def service(self) -> SessionTokenService:
        return SessionTokenService(AuthSettings(session_secret="test-secret"))

    def test_logged_in_session_survives_encoding(self, service):
        """user_id and logged_in are carried by the token."""
        token = service.encode(Session(user_id=UserId(7), logged_in=True))

        session = service.decode(token)

        assert session.user_id == 7
        assert session.logged_in is True

    def test_pending_session_survives_encoding(self, service):
        """A session pointing at an unclaimed user stays not logged in."""
        token = service.encode(Session(user_id=UserId(7), logged_in=False))

        session = service.decode(token)

        assert session.user_id == 7
        assert session.logged_in is False

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, service, token):
        """Unreadable tokens start a fresh anonymous session."""
        session = service.decode(token)

        assert session.user_id is None
        assert session.logged_in is False

    def test_token_signed_with_other_secret_is_anonymous(self, service):
        """Tokens with a bad signature are ignored."""
        other = SessionTokenService(AuthSettings(session_secret="other-secret"))
        token = other.encode(Session(user_id=UserId(7), logged_in=True))

        session = service.decode(token)

        assert session.user_id is None
        assert session.logged_in is False

    def test_expired_token_is_anonymous(self, service):
        """Expired tokens are ignored."""
        token = jwt.encode(
            {
                "user_id": 7,
                "logged_in": True,
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        session = service.decode(token)

        assert session.user_id is None

"""Session token domain service."""

import logfire

from microblog.config import AuthSettings
from microblog.domain.model.session import Session
from microblog.domain.value import UserId
from microblog.util.jwt import JWTError, create_token, verify_token

from .base import Service


class SessionTokenService(Service):
    """Converts session state to and from its signed token form."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def encode(self, session: Session) -> str:
        """Encode session state into a signed token.

        Args:
            session: Session to encode

        Returns:
            JWT token string
        """
        return create_token(session.user_id, session.logged_in, self.auth_settings)

    def decode(self, token: str | None) -> Session:
        """Decode a session token without raising.

        A missing, invalid or expired token yields a fresh anonymous session.

        Args:
            token: JWT token string (optional)

        Returns:
            Session state
        """
        if not token:
            return Session()

        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.debug("Session token rejected, starting new session", error=str(e))
            return Session()

        user_id = UserId(payload.user_id) if payload.user_id is not None else None
        return Session(user_id=user_id, logged_in=payload.logged_in)

"""Session identity resolution domain service.

Bridges the two ways a client can authenticate: a local handle login and an
external identity provider. Both converge on a single ``User`` record.
"""

import logfire
import pydantic

from microblog.domain.error import (
    ConflictError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from microblog.domain.model.session import Session
from microblog.domain.model.user import NewUser, User
from microblog.domain.repository import UserRepository
from microblog.domain.value import Handle

from .base import Service
from .proof_service import ProofService


class IdentityService(Service):
    """Domain service resolving and establishing session identities."""

    def __init__(
        self, user_repository: UserRepository, proof_service: ProofService
    ) -> None:
        """Initialize identity service.

        Args:
            user_repository: User repository
            proof_service: Derives provider identity proofs
        """
        self.user_repository = user_repository
        self.proof_service = proof_service

    async def resolve_current_user(self, session: Session) -> User | None:
        """Resolve the session to a user.

        Unauthenticated sessions, dangling user ids and unclaimed accounts all
        resolve to None. This never raises for the unauthenticated case.

        Args:
            session: Client session state

        Returns:
            The authenticated user, or None
        """
        if session.user_id is None or not session.logged_in:
            return None

        with logfire.span(
            "identity_service.resolve_current_user", user_id=session.user_id
        ):
            user = await self.user_repository.find_by_id(session.user_id)
            if not user:
                logfire.warn("Session refers to missing user", user_id=session.user_id)
                return None
            if not user.is_claimed:
                return None
            return user

    async def require_authenticated(self, session: Session) -> User:
        """Resolve the session to a user, failing if there is none.

        Args:
            session: Client session state

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the session has no resolved identity
        """
        user = await self.resolve_current_user(session)
        if user is None:
            raise UnauthenticatedError()
        return user

    async def login_local(self, session: Session, handle: str) -> User:
        """Log in by exact handle.

        Args:
            session: Client session state (updated on success)
            handle: Handle to log in as

        Returns:
            The logged-in user

        Raises:
            ValidationError: If the handle is blank
            NotFoundError: If no user has the handle
        """
        if not handle or not handle.strip():
            raise ValidationError("Username is required")

        with logfire.span("identity_service.login_local", handle=handle):
            user = None
            try:
                user = await self.user_repository.find_by_handle(Handle(handle))
            except pydantic.ValidationError:
                # Longer than any stored handle
                pass
            if not user:
                logfire.info("Local login for unknown handle", handle=handle)
                raise NotFoundError("User", handle)

            session.user_id = user.id
            session.logged_in = True
            logfire.info("User logged in", user_id=user.id, handle=handle)
            return user

    async def login_or_register_via_provider(
        self, session: Session, subject_id: str, email: str | None = None
    ) -> User:
        """Resolve a provider identity to a user, creating one if needed.

        A known identity with a handle is logged in. A new identity gets an
        unclaimed user and the session points at it without being logged in,
        so the client must claim a handle through ``register_local_handle``.

        Args:
            session: Client session state (updated)
            subject_id: Provider-issued subject identifier
            email: Email reported by the provider (optional)

        Returns:
            The existing or newly created user

        Raises:
            ConflictError: If a concurrent creation won and cannot be re-read
        """
        proof = self.proof_service.derive(subject_id)

        with logfire.span("identity_service.login_or_register_via_provider"):
            user = await self.user_repository.find_by_external_proof(proof)

            if user is None:
                try:
                    user = await self.user_repository.insert(
                        NewUser(external_proof=proof, email=email)
                    )
                    logfire.info("Unclaimed provider user created", user_id=user.id)
                except ConflictError:
                    # Another request created the account first
                    user = await self.user_repository.find_by_external_proof(proof)
                    if user is None:
                        raise
                    logfire.info("Provider user created concurrently", user_id=user.id)
            else:
                logfire.info(
                    "Provider user found", user_id=user.id, claimed=user.is_claimed
                )

            session.user_id = user.id
            session.logged_in = user.is_claimed
            return user

    async def register_local_handle(self, session: Session, handle: str) -> User:
        """Register a handle and log the session in.

        Claims the handle for the session's unclaimed provider user if there
        is one, otherwise creates a new local user.

        Args:
            session: Client session state (updated on success)
            handle: Handle to register

        Returns:
            The registered user

        Raises:
            ValidationError: If the handle is blank or too long
            ConflictError: If the handle is already taken
        """
        if not handle or not handle.strip():
            raise ValidationError("Username is required")

        with logfire.span("identity_service.register_local_handle", handle=handle):
            try:
                value = Handle(handle)
            except pydantic.ValidationError as e:
                raise ValidationError(str(e.errors()[0]["msg"])) from e

            if await self.user_repository.find_by_handle(value):
                logfire.info("Handle already taken", handle=handle)
                raise ConflictError("User already exists")

            pending = await self._pending_provider_user(session)
            if pending is not None:
                if not await self.user_repository.update_handle(pending.id, value):
                    raise ConflictError("Account already has a handle")
                user = pending.model_copy(update={"handle": value})
                logfire.info("Provider user claimed handle", user_id=user.id)
            else:
                user = await self.user_repository.insert(NewUser(handle=value))
                logfire.info("Local user registered", user_id=user.id)

            session.user_id = user.id
            session.logged_in = True
            return user

    async def _pending_provider_user(self, session: Session) -> User | None:
        """Return the unclaimed user the session points at, if any."""
        if session.user_id is None:
            return None
        user = await self.user_repository.find_by_id(session.user_id)
        if user is None or user.is_claimed:
            return None
        return user

    def logout(self, session: Session) -> None:
        """Clear authentication and destroy the session.

        Args:
            session: Client session state
        """
        logfire.info("User logged out", user_id=session.user_id)
        session.destroy()

"""SQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from microblog.domain.error import ConflictError
from microblog.domain.model import NewUser, User
from microblog.domain.repository.user import UserRepository
from microblog.domain.value import ExternalProof, Handle, UserId
from microblog.persistence.database import translate_store_errors
from microblog.persistence.mappers import new_user_to_dict, row_to_user
from microblog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Handle and proof uniqueness are enforced by unique constraints. Writes
    that can hit them run in a savepoint so a conflict leaves the request
    transaction usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with logfire.span("user_repository.find_by_id", user_id=user_id), (
            translate_store_errors()
        ):
            return await self._find_one(users_table.c.id == user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by exact handle."""
        with logfire.span("user_repository.find_by_handle", handle=handle.root), (
            translate_store_errors()
        ):
            return await self._find_one(users_table.c.handle == handle.root)

    async def find_by_external_proof(self, proof: ExternalProof) -> Optional[User]:
        """Find a provider-linked user by identity proof (indexed lookup)."""
        with logfire.span("user_repository.find_by_external_proof"), (
            translate_store_errors()
        ):
            return await self._find_one(users_table.c.external_proof == proof.root)

    async def find_all(self) -> List[User]:
        """List all users ordered by id."""
        with logfire.span("user_repository.find_all"), translate_store_errors():
            result = await self.session.execute(
                select(users_table).order_by(users_table.c.id)
            )
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def insert(self, user: NewUser) -> User:
        """Insert a new user with a fresh id."""
        with logfire.span(
            "user_repository.insert",
            handle=user.handle.root if user.handle else None,
            provider_linked=user.external_proof is not None,
        ), translate_store_errors():
            stmt = (
                insert(users_table)
                .values(**new_user_to_dict(user))
                .returning(*users_table.c)
            )
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.one()
            except IntegrityError as e:
                logfire.warn("User insert conflict", error=str(e.orig))
                raise ConflictError("User already exists") from e

            logfire.info("User inserted", user_id=row.id)
            return row_to_user(row._asdict())

    async def update_handle(self, user_id: UserId, handle: Handle) -> bool:
        """Assign a handle to an unclaimed user."""
        with logfire.span(
            "user_repository.update_handle", user_id=user_id, handle=handle.root
        ), translate_store_errors():
            stmt = (
                update(users_table)
                .where(users_table.c.id == user_id, users_table.c.handle.is_(None))
                .values(handle=handle.root)
            )
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
            except IntegrityError as e:
                logfire.warn("Handle claim conflict", error=str(e.orig))
                raise ConflictError("User already exists") from e

            return result.rowcount > 0

    async def update_avatar_ref(self, user_id: UserId, avatar_ref: str) -> bool:
        """Set the user's avatar reference."""
        with logfire.span("user_repository.update_avatar_ref", user_id=user_id), (
            translate_store_errors()
        ):
            result = await self.session.execute(
                update(users_table)
                .where(users_table.c.id == user_id)
                .values(avatar_ref=avatar_ref)
            )
            await self.session.flush()
            return result.rowcount > 0

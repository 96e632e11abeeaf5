"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from microblog.domain.error import ConflictError
from microblog.domain.model.user import NewUser, User
from microblog.domain.repository.user import UserRepository
from microblog.domain.value import ExternalProof, Handle, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Mirrors the unique constraints on handle and external proof.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    def _handle_taken(self, handle: Handle) -> bool:
        return any(u.handle == handle for u in self._users.values())

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by exact handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def find_by_external_proof(self, proof: ExternalProof) -> Optional[User]:
        """Find a provider-linked user by identity proof."""
        for user in self._users.values():
            if user.external_proof == proof:
                return user
        return None

    async def find_all(self) -> list[User]:
        """List all users ordered by id."""
        return sorted(self._users.values(), key=lambda u: u.id)

    async def insert(self, user: NewUser) -> User:
        """Insert a new user with a fresh id."""
        if user.handle is not None and self._handle_taken(user.handle):
            raise ConflictError("User already exists")
        if user.external_proof is not None and any(
            u.external_proof == user.external_proof for u in self._users.values()
        ):
            raise ConflictError("User already exists")

        stored = User(id=UserId(next(self._ids)), **dict(user))
        self._users[stored.id] = stored
        return stored

    async def update_handle(self, user_id: UserId, handle: Handle) -> bool:
        """Assign a handle to an unclaimed user."""
        user = self._users.get(user_id)
        if user is None or user.handle is not None:
            return False
        if self._handle_taken(handle):
            raise ConflictError("User already exists")

        self._users[user_id] = user.model_copy(update={"handle": handle})
        return True

    async def update_avatar_ref(self, user_id: UserId, avatar_ref: str) -> bool:
        """Set the user's avatar reference."""
        user = self._users.get(user_id)
        if user is None:
            return False

        self._users[user_id] = user.model_copy(update={"avatar_ref": avatar_ref})
        return True

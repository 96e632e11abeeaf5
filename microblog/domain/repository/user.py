"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from microblog.domain.model.user import NewUser, User
from microblog.domain.value import ExternalProof, Handle, UserId


class UserRepository(ABC):
    """Repository for User aggregate (the identity store).

    Implementations must enforce handle and external proof uniqueness.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by exact handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_proof(self, proof: ExternalProof) -> Optional[User]:
        """Find a provider-linked user by identity proof.

        Args:
            proof: Proof derived from the provider subject id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List all users ordered by id.

        Returns:
            All users
        """
        pass

    @abstractmethod
    async def insert(self, user: NewUser) -> User:
        """Insert a new user with a fresh id.

        Args:
            user: The user to insert

        Returns:
            The stored user

        Raises:
            ConflictError: If the handle or external proof is already taken
        """
        pass

    @abstractmethod
    async def update_handle(self, user_id: UserId, handle: Handle) -> bool:
        """Assign a handle to an unclaimed user.

        Args:
            user_id: The user to update
            handle: The handle to claim

        Returns:
            True if updated, False if the user does not exist or already
            has a handle

        Raises:
            ConflictError: If another user already has the handle
        """
        pass

    @abstractmethod
    async def update_avatar_ref(self, user_id: UserId, avatar_ref: str) -> bool:
        """Set the user's avatar reference.

        Args:
            user_id: The user to update
            avatar_ref: Reference to the generated avatar

        Returns:
            True if the user exists
        """
        pass

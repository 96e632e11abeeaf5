"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]

"""SQL repository implementations."""

from microblog.persistence.repository.post import PostgresPostRepository
from microblog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresUserRepository",
]

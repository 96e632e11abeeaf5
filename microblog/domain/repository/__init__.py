"""Repository interfaces for microblog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from microblog.domain.repository.post import PostRepository, PostSortOrder
from microblog.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "PostSortOrder",
    "UserRepository",
]

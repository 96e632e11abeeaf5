"""Domain model entities for microblog."""

from microblog.domain.model.post import NewPost, Post
from microblog.domain.model.session import Session
from microblog.domain.model.user import NewUser, User

__all__ = [
    "NewPost",
    "NewUser",
    "Post",
    "Session",
    "User",
]

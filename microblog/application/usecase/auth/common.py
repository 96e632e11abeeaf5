"""User representation shared by the auth and user use cases."""

from datetime import datetime

from pydantic import BaseModel

from microblog.domain.model import User


class UserInfo(BaseModel):
    """User as handed to the presentation layer.

    The external proof never leaves the core.
    """

    user_id: int
    handle: str | None
    email: str | None
    avatar_ref: str | None
    member_since: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            user_id=user.id,
            handle=user.handle.root if user.handle else None,
            email=user.email,
            avatar_ref=user.avatar_ref,
            member_since=user.member_since,
        )

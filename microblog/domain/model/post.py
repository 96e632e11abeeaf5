"""Post aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from microblog.domain.model.common import DomainModel
from microblog.domain.value import Handle, PostId, TagName


class NewPost(DomainModel):
    """Post fields known before the store assigns an id.

    ``author_handle`` is a copy of the author's handle taken at creation
    time, not a live reference to the user.
    """

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    author_handle: Handle
    tags: frozenset[TagName] = frozenset()
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Post(NewPost):
    """Stored post."""

    id: PostId
    like_count: int = Field(default=0, ge=0)

    @property
    def tag_names(self) -> list[str]:
        """Tags as sorted plain strings."""
        return sorted(tag.root for tag in self.tags)

    def is_owned_by(self, handle: Handle | None) -> bool:
        """Whether ``handle`` is exactly this post's author handle."""
        return handle is not None and self.author_handle == handle

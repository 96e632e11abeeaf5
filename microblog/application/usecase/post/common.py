"""Post representations shared by the post use cases."""

from datetime import datetime

from pydantic import BaseModel

from microblog.domain.model import Post


class PostItem(BaseModel):
    """Post as handed to the presentation layer."""

    post_id: int
    title: str
    body: str
    author_handle: str
    tags: list[str]
    like_count: int
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            post_id=post.id,
            title=post.title,
            body=post.body,
            author_handle=post.author_handle.root,
            tags=post.tag_names,
            like_count=post.like_count,
            created_at=post.created_at,
        )

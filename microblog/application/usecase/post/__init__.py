"""Post use cases."""

from .common import PostItem
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
]

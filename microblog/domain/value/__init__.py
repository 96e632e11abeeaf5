"""Domain value objects for microblog."""

from microblog.domain.value.identifiers import PostId, UserId
from microblog.domain.value.types import (
    AuthProvider,
    ExternalProof,
    Handle,
    OAuthProviderInfo,
    TagName,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "AuthProvider",
    "ExternalProof",
    "Handle",
    "OAuthProviderInfo",
    "TagName",
]

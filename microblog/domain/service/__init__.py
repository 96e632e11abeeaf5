"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .avatar_service import AvatarRenderer, AvatarService
from .base import Service
from .identity_service import IdentityService
from .post_service import PostService
from .proof_service import ProofService
from .session_token_service import SessionTokenService

__all__ = [
    "AuthService",
    "AvatarRenderer",
    "AvatarService",
    "IdentityService",
    "OAuthClient",
    "PostService",
    "ProofService",
    "Service",
    "SessionTokenService",
]

"""User use cases."""

from .get_avatar import GetAvatarRequest, GetAvatarResponse, GetAvatarUseCase
from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase

__all__ = [
    "GetAvatarRequest",
    "GetAvatarResponse",
    "GetAvatarUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
]

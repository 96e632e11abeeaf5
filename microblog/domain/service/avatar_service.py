"""Avatar domain service."""

from abc import ABC, abstractmethod

import logfire
import pydantic

from microblog.domain.error import NotFoundError, ValidationError
from microblog.domain.repository import UserRepository
from microblog.domain.value import Handle

from .base import Service

AVATAR_PALETTE: dict[str, str] = {
    "A": "#FF0000",
    "B": "#00FF00",
    "C": "#0000FF",
    "D": "#FFFF00",
    "E": "#00FFFF",
    "F": "#FF00FF",
    "G": "#FFA500",
    "H": "#800080",
    "I": "#FFC0CB",
    "J": "#A52A2A",
    "K": "#00FF00",
    "L": "#808080",
    "M": "#808000",
    "N": "#800000",
    "O": "#000080",
    "P": "#008080",
    "Q": "#00FFFF",
    "R": "#C0C0C0",
    "S": "#FFD700",
    "T": "#FF7F50",
    "U": "#FA8072",
    "V": "#40E0D0",
    "W": "#E6E6FA",
    "X": "#4B0082",
    "Y": "#F5F5DC",
    "Z": "#98FF98",
}


def normalize_avatar_letter(letter: str) -> str:
    """Normalize input to a single uppercase ASCII letter.

    Args:
        letter: Raw input

    Returns:
        Uppercase letter A-Z

    Raises:
        ValidationError: If the input is not a single ASCII letter
    """
    normalized = (letter or "").strip().upper()
    if len(normalized) != 1 or normalized not in AVATAR_PALETTE:
        raise ValidationError(f"Avatar letter must be A-Z, got {letter!r}")
    return normalized


def avatar_ref_for(handle: Handle) -> str:
    """Reference recorded on a user once their avatar has been served."""
    return f"/avatar/{handle}"


class AvatarRenderer(ABC):
    """Rasterizes a letter on a solid background."""

    @abstractmethod
    def render(self, letter: str, background: str) -> bytes:
        """Render the avatar image.

        Args:
            letter: Uppercase letter to draw
            background: Background color as ``#RRGGBB``

        Returns:
            PNG bytes, identical for identical inputs
        """
        pass


class AvatarService(Service):
    """Domain service for generated letter avatars."""

    def __init__(
        self, renderer: AvatarRenderer, user_repository: UserRepository
    ) -> None:
        """Initialize avatar service.

        Args:
            renderer: Image renderer
            user_repository: User repository
        """
        self.renderer = renderer
        self.user_repository = user_repository

    def generate_avatar(self, letter: str) -> bytes:
        """Generate the avatar for a letter.

        Case is ignored, so ``a`` and ``A`` give byte-identical images.

        Args:
            letter: Single letter A-Z (any case)

        Returns:
            PNG bytes

        Raises:
            ValidationError: If the letter is not A-Z
        """
        normalized = normalize_avatar_letter(letter)
        return self.renderer.render(normalized, AVATAR_PALETTE[normalized])

    async def get_avatar_for_handle(self, handle: str) -> bytes:
        """Generate the avatar for a user from the first letter of their handle.

        Records the user's avatar reference the first time it is served.

        Args:
            handle: User handle

        Returns:
            PNG bytes

        Raises:
            NotFoundError: If no user has the handle
            ValidationError: If the handle does not start with a letter A-Z
        """
        with logfire.span("avatar_service.get_avatar_for_handle", handle=handle):
            user = None
            if handle.strip():
                try:
                    user = await self.user_repository.find_by_handle(Handle(handle))
                except pydantic.ValidationError:
                    # Longer than any stored handle
                    pass
            if not user or user.handle is None:
                raise NotFoundError("User", handle)

            image = self.generate_avatar(user.handle.root[0])

            if user.avatar_ref is None:
                await self.user_repository.update_avatar_ref(
                    user.id, avatar_ref_for(user.handle)
                )
                logfire.info("Avatar reference recorded", user_id=user.id)

            return image

"""Avatar rendering provider."""

from dishka import Scope, provide

from microblog.adapter.avatar.pillow import PillowAvatarRenderer
from microblog.config import AvatarSettings
from microblog.domain.service import AvatarRenderer
from microblog.util.di.base import ProviderBase


class AvatarProvider(ProviderBase):
    """Avatar renderer provider - concrete, rendering is pure."""

    @provide(scope=Scope.APP)
    def get_avatar_renderer(self, avatar_settings: AvatarSettings) -> AvatarRenderer:
        """Provide the Pillow avatar renderer."""
        return PillowAvatarRenderer(
            size=avatar_settings.size, font_size=avatar_settings.font_size
        )

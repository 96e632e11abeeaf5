"""Pillow avatar renderer."""

import io

from PIL import Image, ImageColor, ImageDraw, ImageFont

from microblog.domain.service.avatar_service import AvatarRenderer


class PillowAvatarRenderer(AvatarRenderer):
    """Draws a centered letter on a square of solid color as PNG.

    PNG output carries no timestamps, so equal inputs give equal bytes.
    """

    def __init__(self, size: int = 100, font_size: int = 50) -> None:
        """Initialize renderer.

        Args:
            size: Width and height in pixels
            font_size: Letter size in pixels
        """
        self.size = size
        self.font = ImageFont.load_default(size=font_size)

    @staticmethod
    def _text_color(background: tuple[int, int, int]) -> tuple[int, int, int]:
        """Black on light backgrounds, white on dark ones."""
        r, g, b = background
        luminance = 0.299 * r + 0.587 * g + 0.114 * b
        return (0, 0, 0) if luminance > 160 else (255, 255, 255)

    def render(self, letter: str, background: str) -> bytes:
        """Render the avatar image.

        Args:
            letter: Uppercase letter to draw
            background: Background color as ``#RRGGBB``

        Returns:
            PNG bytes
        """
        fill = ImageColor.getrgb(background)
        image = Image.new("RGB", (self.size, self.size), fill)
        draw = ImageDraw.Draw(image)

        left, top, right, bottom = draw.textbbox((0, 0), letter, font=self.font)
        x = (self.size - (right - left)) / 2 - left
        y = (self.size - (bottom - top)) / 2 - top
        draw.text((x, y), letter, font=self.font, fill=self._text_color(fill))

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

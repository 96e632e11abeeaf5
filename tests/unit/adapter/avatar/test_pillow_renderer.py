"""Unit tests for PillowAvatarRenderer."""

import io

from PIL import Image

from microblog.adapter.avatar.pillow import PillowAvatarRenderer


class TestPillowAvatarRenderer:
    """Tests for rendering letter avatars."""

    def test_renders_square_png_of_configured_size(self):
        """The image is a size x size PNG."""
        renderer = PillowAvatarRenderer(size=64, font_size=32)

        image = Image.open(io.BytesIO(renderer.render("A", "#FF0000")))

        assert image.format == "PNG"
        assert image.size == (64, 64)

    def test_background_fills_corners(self):
        """The background color fills the image outside the letter."""
        renderer = PillowAvatarRenderer()

        image = Image.open(io.BytesIO(renderer.render("B", "#00FF00"))).convert("RGB")

        assert image.getpixel((0, 0)) == (0, 255, 0)
        assert image.getpixel((99, 99)) == (0, 255, 0)

    def test_letter_is_drawn(self):
        """Some pixels differ from the background."""
        renderer = PillowAvatarRenderer()

        image = Image.open(io.BytesIO(renderer.render("W", "#000080"))).convert("RGB")

        colors = {color for _, color in image.getcolors(maxcolors=100 * 100)}
        assert len(colors) > 1

    def test_same_input_same_bytes(self):
        """Rendering is deterministic."""
        renderer = PillowAvatarRenderer()

        assert renderer.render("K", "#00FF00") == renderer.render("K", "#00FF00")

    def test_text_color_contrasts_with_background(self):
        """Light backgrounds get black text, dark ones white."""
        assert PillowAvatarRenderer._text_color((255, 255, 0)) == (0, 0, 0)
        assert PillowAvatarRenderer._text_color((0, 0, 128)) == (255, 255, 255)

"""Image widgets: a direct-colour pixmap and a 2-bit gradient icon."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .theme import BIT15, interpolate_color
from .widget import Widget


class Pixmap(Widget):
    """Draws 16-bit pixels; pixels without the opaque bit are skipped."""

    def __init__(self, x, y, width, height, image: Sequence[int], vram=None, visible=True):
        super().__init__(x, y, width, height, vram, visible)
        self.on_push: Callable[[], None] | None = None
        self.image = image

    def register_push_callback(self, on_push: Callable[[], None] | None) -> None:
        self.on_push = on_push

    def pen_down(self, x: int, y: int) -> None:
        if self.on_push:
            self.on_push()

    def please_draw(self) -> None:
        for j in range(self.height):
            for i in range(self.width):
                pixel = self.image[self.width * j + i]
                if pixel & BIT15:
                    self.vram.set_pixel(self.x + i, self.y + j, pixel)


class GradientIcon(Widget):
    """Draws a 2-bit-per-pixel icon: 1 is a vertical gradient, 2 and 3 outline."""

    def __init__(self, x, y, width, height, image: Sequence[int], vram=None, visible=True):
        super().__init__(x, y, width, height, vram, visible)
        self.on_push: Callable[[], None] | None = None
        self.image = image

    def register_push_callback(self, on_push: Callable[[], None] | None) -> None:
        self.on_push = on_push

    def pen_down(self, x: int, y: int) -> None:
        if self.on_push:
            self.on_push()

    def please_draw(self) -> None:
        t = self.theme
        step = (1 << 12) // self.height
        pos = 0
        pixel = 0
        for j in range(self.height):
            fg = interpolate_color(t.col_light_ctrl, t.col_dark_ctrl, step * j)
            for i in range(self.width):
                if pos & 0x0F == 0:
                    pixel = self.image[pos >> 4]
                else:
                    pixel >>= 2
                if pixel & 3:
                    col = t.col_outline if pixel & 2 else fg
                    self.vram.set_pixel(self.x + i, self.y + j, col)
                pos += 1
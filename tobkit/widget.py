"""Widget base class, its drawing primitives, fonts and framebuffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Sequence

from .theme import interpolate_color

SCREEN_WIDTH = 256
SCREEN_HEIGHT = 192


@dataclass
class Font:
    """A bitmap font: one byte per glyph row, bit 0 is the leftmost pixel."""

    height: int
    char_index: Sequence[int]
    char_widths: Sequence[int]
    data: Sequence[int]

    @classmethod
    def block(cls, width: int = 5, height: int = 11) -> "Font":
        """A simple font of solid blocks; space is blank."""
        row = (1 << width) - 1
        solid = [0] + [row] * (height - 2) + [0]
        data = [0] * height + solid
        index = [0 if c == 0x20 else 1 for c in range(256)]
        return cls(height=height, char_index=index, char_widths=[width, width], data=data)


@dataclass
class Framebuffer:
    """A 16-bit pixel surface; writes outside it are dropped."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self.width * y + x]

    def set_pixel(self, x: int, y: int, col: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[self.width * y + x] = col

    def fill_span(self, x: int, y: int, length: int, col: int) -> None:
        for i in range(length):
            self.set_pixel(x + i, y, col)


class Widget:
    """Base of all widgets: geometry, visibility state and drawing helpers."""

    def __init__(self, x, y, width, height, vram=None, visible=True, occluded=False, font=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.enabled = True
        self.vram = vram if vram is not None else Framebuffer()
        self.visible = visible
        self.occluded = occluded
        self.font = font if font is not None else Font.block()
        self.theme = None
        self.bgcolor = 0

    def get_pos(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def show(self) -> None:
        if not self.visible:
            self.visible = True
            if not self.occluded:
                self.please_draw()

    def hide(self) -> None:
        if self.is_exposed():
            self._overdraw()
        self.visible = False

    def occlude(self) -> None:
        if self.is_exposed():
            self._overdraw()
        self.occluded = True

    def reveal(self) -> None:
        if self.occluded:
            self.occluded = False
            if self.visible:
                self.please_draw()

    def resize(self, w: int, h: int) -> None:
        self._overdraw()
        self.width = w
        self.height = h
        self.please_draw()

    def enable(self) -> None:
        if not self.enabled:
            self.enabled = True
            self.please_draw()

    def disable(self) -> None:
        if self.enabled:
            self.enabled = False
            self.please_draw()

    def set_visible(self, value: bool) -> bool:
        changed = value != self.visible
        self.show() if value else self.hide()
        return changed

    def set_occluded(self, value: bool) -> bool:
        changed = value != self.occluded
        self.occlude() if value else self.reveal()
        return changed

    def set_enabled(self, value: bool) -> bool:
        changed = value != self.enabled
        self.enable() if value else self.disable()
        return changed

    def is_exposed(self) -> bool:
        return self.visible and not self.occluded

    def set_theme(self, theme, bgcolor: int) -> None:
        self.theme = theme
        self.bgcolor = bgcolor

    # Overridden by concrete widgets.
    def please_draw(self) -> None:
        pass

    def pen_down(self, x: int, y: int) -> None:
        pass

    def pen_up(self, x: int, y: int) -> None:
        pass

    def pen_move(self, x: int, y: int) -> None:
        pass

    def button_press(self, buttons: int) -> None:
        pass

    def button_release(self, buttons: int) -> None:
        pass

    # Drawing helpers, coordinates relative to the widget.
    def draw_pixel(self, tx: int, ty: int, col: int) -> None:
        self.vram.set_pixel(self.x + tx, self.y + ty, col)

    def draw_string(self, text, tx, ty, color, maxwidth=255, maxheight=255) -> None:
        if not text:
            return
        font = self.font
        height = min(font.height, maxheight)
        drawpos = 0
        for ch in text:
            charidx = font.char_index[ord(ch) & 0xFF]
            width = font.char_widths[charidx]
            if drawpos + width > maxwidth:
                break
            for j in range(height):
                row = font.data[font.height * charidx + j]
                for i in range(8):
                    if row >> i & 1:
                        self.draw_pixel(i + tx + drawpos, j + ty, color)
            drawpos += width + 1

    def draw_box(self, tx, ty, tw, th, col) -> None:
        for i in range(tw):
            self.draw_pixel(i + tx, ty, col)
            self.draw_pixel(i + tx, ty + th - 1, col)
        for j in range(1, th - 1):
            self.draw_pixel(tx, ty + j, col)
            self.draw_pixel(tx + tw - 1, ty + j, col)

    def draw_full_box(self, tx, ty, tw, th, col) -> None:
        if tw <= 0:
            return
        for j in range(th):
            self.vram.fill_span(self.x + tx, self.y + ty + j, tw, col)

    def draw_border(self, col) -> None:
        self.draw_box(0, 0, self.width, self.height, col)

    def draw_hline(self, tx, ty, length, col) -> None:
        for i in range(length):
            self.draw_pixel(i + tx, ty, col)

    def draw_vline(self, tx, ty, length, col) -> None:
        for i in range(length):
            self.draw_pixel(tx, i + ty, col)

    def draw_bres_line(self, tx1, ty1, tx2, ty2, col) -> None:
        x1, x2 = tx1 + self.x, tx2 + self.x
        y1, y2 = ty1 + self.y, ty2 + self.y
        if x2 < x1:
            x1, x2, y1, y2 = x2, x1, y2, y1
        dy, dx = y2 - y1, x2 - x1
        steep = not abs(dy) < dx
        if steep:
            x1, y1, x2, y2 = y1, x1, y2, x2
            if x2 < x1:
                x1, x2, y1, y2 = x2, x1, y2, y1
            dy, dx = y2 - y1, x2 - x1
        add = 1
        if dy < 0:
            dy, add = -dy, -1
        d = 2 * dy - dx
        yp = y1
        for xp in range(x1, x2 + 1):
            if d > 0:
                yp += add
                d -= 2 * dx
            if steep:
                self.vram.set_pixel(yp, xp, col)
            else:
                self.vram.set_pixel(xp, yp, col)
            d += 2 * dy

    def draw_gradient(self, col1, col2, tx, ty, tw, th) -> None:
        if col1 == col2:
            self.draw_full_box(tx, ty, tw, th, col1)
            return
        if tw <= 0 or th <= 0:
            return
        step = (1 << 12) // th
        for j in range(th):
            col = interpolate_color(col1, col2, step * j)
            self.vram.fill_span(self.x + tx, self.y + ty + j, tw, col)

    def get_string_width(self, text, limit=None) -> int:
        """Width in pixels of ``text`` (at most ``limit`` characters) when drawn."""
        if not text:
            return 0
        part = text if limit is None else text[:limit]
        font = self.font
        res = sum(font.char_widths[font.char_index[ord(c) & 0xFF]] + 1 for c in part)
        return res - 1 if res else 0

    def draw_monochrome_icon(self, tx, ty, tw, th, icon, color) -> None:
        pixelidx = 0
        for j in range(th):
            for i in range(tw):
                if icon[pixelidx // 8] & (1 << (pixelidx % 8)):
                    self.draw_pixel(tx + i, ty + j, color)
                pixelidx += 1

    def draw_monochrome_icon_offset(self, tx, ty, tw, th, ix, iy, iw, ih, icon, color) -> None:
        for j in range(th):
            pixelidx = (iy + j) * iw + ix
            for i in range(tw):
                if icon[pixelidx // 8] & (1 << (pixelidx % 8)):
                    self.draw_pixel(tx + i, ty + j, color)
                pixelidx += 1

    @staticmethod
    def is_in_rect(x, y, x1, y1, x2, y2) -> bool:
        return x1 <= x <= x2 and y1 <= y <= y2

    def _overdraw(self) -> None:
        self.draw_full_box(0, 0, self.width, self.height, self.bgcolor)
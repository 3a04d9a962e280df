"""Text labels and titled group boxes."""

from __future__ import annotations

from collections.abc import Callable

from .widget import Widget


class Label(Widget):
    """A line of text, optionally bordered and right-aligned."""

    def __init__(self, x, y, width, height, vram=None, has_border=False, albino=False,
                 no_bg=False, right_aligned=False, font=None):
        super().__init__(x, y, width, height, vram, font=font)
        self.on_push: Callable[[], None] | None = None
        self.caption: str | None = None
        self.has_border = has_border
        self.is_albino = albino
        self.no_bg = no_bg
        self.right_aligned = right_aligned

    def register_push_callback(self, on_push: Callable[[], None] | None) -> None:
        self.on_push = on_push

    def please_draw(self) -> None:
        if self.is_exposed():
            self._draw()

    def pen_down(self, x: int, y: int) -> None:
        if self.on_push is not None:
            self.on_push()

    def set_caption(self, caption: str) -> None:
        self.caption = caption
        self._draw()

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        if self.is_albino:
            col_bg, col_text = t.col_bg, t.col_text_light
        else:
            col_bg, col_text = t.col_light_bg, t.col_text
        offset = 0
        if self.has_border:
            if not self.no_bg:
                self.draw_full_box(1, 1, self.width - 2, self.height - 2, t.col_lighter_bg)
                col_text = t.col_text_value
            self.draw_border(t.col_outline)
            offset = 2
        elif not self.no_bg:
            self.draw_full_box(0, 0, self.width, self.height, col_bg)

        if self.caption:
            caption_width = self.width - offset * 2
            text = self.caption
            if self.right_aligned:
                while text and self.get_string_width(text) > caption_width:
                    text = text[1:]
            self.draw_string(text, offset, offset, col_text, caption_width)


class GroupBox(Widget):
    """A frame with an optional title drawn over its top edge."""

    def __init__(self, x, y, width, height, vram=None, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.text: str | None = None

    def please_draw(self) -> None:
        if self.is_exposed():
            self._draw()

    def set_text(self, text: str) -> None:
        self.text = text
        self.please_draw()

    def _draw(self) -> None:
        t = self.theme
        self.draw_box(0, 4, self.width, self.height, t.col_lighter_bg)
        if self.text is None:
            return
        strwidth = self.get_string_width(self.text)
        tx = 10
        if tx + 4 + strwidth > self.width:
            tx = max(0, self.width - strwidth - 4)
        self.draw_full_box(tx, 0, strwidth + 2, 10, t.col_light_bg)
        self.draw_string(self.text, tx + 1, 0, t.col_text, self.width - tx - 2)
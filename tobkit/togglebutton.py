"""A button that stays on or off."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .widget import Widget


class ToggleButton(Widget):
    """A button with an on/off state, showing a caption and/or a bitmap."""

    def __init__(self, x, y, width, height, vram=None, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.pen_is_down = False
        self.on = False
        self.has_bitmap = False
        self.bitmap: Sequence[int] | None = None
        self.bmpwidth = 0
        self.bmpheight = 0
        self.caption: str | None = None
        self.on_toggle: Callable[[bool], None] | None = None

    def register_toggle_callback(self, on_toggle: Callable[[bool], None] | None) -> None:
        self.on_toggle = on_toggle

    def set_caption(self, caption: str) -> None:
        self.caption = caption

    def set_bitmap(self, bitmap: Sequence[int], width: int, height: int) -> None:
        self.has_bitmap = True
        self.bitmap = bitmap
        self.bmpwidth = width
        self.bmpheight = height

    def set_state(self, on: bool) -> None:
        if self.on != on:
            self.on = on
            self._draw()
            if self.on_toggle:
                self.on_toggle(self.on)

    def please_draw(self) -> None:
        self._draw()

    def _toggle(self) -> None:
        self.on = not self.on
        self._draw()
        if self.on_toggle:
            self.on_toggle(self.on)

    def pen_down(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.pen_is_down = True
        self._toggle()

    def pen_up(self, x: int, y: int) -> None:
        self.pen_is_down = False
        self._draw()

    def button_press(self, buttons: int) -> None:
        self._toggle()

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        bg = t.col_tb_bg if self.enabled else t.col_dark_ctrl_disabled
        self.draw_full_box(1, 1, self.width - 2, self.height - 2, bg)
        self.draw_border(t.col_outline)
        if self.pen_is_down:
            col = bg if self.on else t.col_tb_fg_on
        elif self.on:
            col = t.col_tb_fg_on
        else:
            col = t.col_signal_off if self.has_bitmap else t.col_tb_fg_off
        if self.has_bitmap:
            self.draw_monochrome_icon(2, 2, self.bmpwidth, self.bmpheight, self.bitmap, col)
        if self.caption is not None:
            tx = max(2, (self.width - self.get_string_width(self.caption)) // 2)
            self.draw_string(self.caption, tx, self.height // 2 - 5, col)
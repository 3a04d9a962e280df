"""Push buttons: a text button and a button showing a monochrome bitmap."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .widget import Widget


class Button(Widget):
    """A push button with a text caption."""

    def __init__(self, x, y, width, height, vram=None, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.pen_is_down = False
        self.caption: str | None = None
        self.on_push: Callable[[], None] | None = None

    def register_push_callback(self, on_push: Callable[[], None] | None) -> None:
        self.on_push = on_push

    def set_caption(self, caption: str) -> None:
        self.caption = caption

    def please_draw(self) -> None:
        self._draw(self.pen_is_down)

    def pen_down(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.pen_is_down = True
        self._draw(True)

    def pen_up(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.pen_is_down = False
        self._draw(False)
        if self.on_push:
            self.on_push()

    def button_press(self, buttons: int) -> None:
        if self.on_push:
            self.on_push()

    def _draw_face(self, down: bool) -> None:
        t = self.theme
        if self.enabled:
            if down:
                cols = (t.col_light_ctrl, t.col_dark_ctrl)
            else:
                cols = (t.col_dark_ctrl, t.col_light_ctrl)
        else:
            cols = (t.col_light_ctrl_disabled, t.col_dark_ctrl_disabled)
        self.draw_gradient(cols[0], cols[1], 1, 1, self.width - 2, self.height - 2)
        self.draw_border(t.col_outline)

    def _draw(self, down: bool) -> None:
        if not self.is_exposed():
            return
        self._draw_face(down)
        tx = (self.width - self.get_string_width(self.caption)) // 2
        self.draw_string(self.caption, tx, self.height // 2 - 5, self.theme.col_text_bt)


class BitButton(Button):
    """A push button that shows a 1-bit bitmap instead of a caption."""

    def __init__(self, x, y, width, height, vram, bitmap: Sequence[int], bmpwidth, bmpheight,
                 bmpx, bmpy, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font)
        self.bitmap = bitmap
        self.bmpwidth = bmpwidth
        self.bmpheight = bmpheight
        self.bmpx = bmpx
        self.bmpy = bmpy

    def register_push_callback(self, on_push: Callable[[], None] | None) -> None:
        self.on_push = on_push

    def please_draw(self) -> None:
        self._draw(self.pen_is_down)

    def pen_down(self, x: int, y: int) -> None:
        super().pen_down(x, y)

    def pen_up(self, x: int, y: int) -> None:
        super().pen_up(x, y)

    def button_press(self, buttons: int) -> None:
        super().button_press(buttons)

    def _draw(self, down: bool) -> None:
        if not self.is_exposed():
            return
        self._draw_face(down)
        self.draw_monochrome_icon(self.bmpx, self.bmpy, self.bmpwidth, self.bmpheight,
                                  self.bitmap, self.theme.col_icon_bt)
"""Numeric input widgets: a stepper box and a drag slider."""

from __future__ import annotations

from collections.abc import Callable

from .widget import Widget


def _draw_up_arrow(widget: Widget, col: int) -> None:
    for j in range(3):
        for i in range(-j, j + 1):
            widget.draw_pixel(4 + i, j + 3, col)


def _draw_down_arrow(widget: Widget, col: int) -> None:
    for j in range(2, -1, -1):
        for i in range(-j, j + 1):
            widget.draw_pixel(4 + i, -j + 13, col)


class NumberBox(Widget):
    """An unsigned value changed by up and down arrow buttons."""

    def __init__(self, x, y, width, height, vram=None, value=0, minimum=0, maximum=255,
                 digits=3, font=None):
        super().__init__(x, y, width, height, vram, font=font)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.digits = digits
        self.btnstate = 0
        self.on_change: Callable[[int], None] | None = None

    def please_draw(self) -> None:
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        oldvalue = self.value
        inside_x = self.x < x < self.x + self.width
        if inside_x and self.y < y < self.y + 9:
            self.btnstate = 1
            if self.value < self.maximum:
                self.value += 1
        elif inside_x and self.y + 9 < y < self.y + 18:
            self.btnstate = 2
            if self.value > self.minimum:
                self.value -= 1
        if self.value != oldvalue:
            if self.on_change is not None:
                self.on_change(self.value)
            self._draw()

    def pen_up(self, x: int, y: int) -> None:
        self.btnstate = 0
        self._draw()

    def set_value(self, value: int) -> None:
        """Set the value, clamped to the range; the callback gets the requested value."""
        oldval = self.value
        self.value = max(self.minimum, min(self.maximum, value))
        if oldval != self.value:
            if self.on_change is not None:
                self.on_change(value)
            if self.is_exposed():
                self._draw()

    def register_change_callback(self, on_change: Callable[[int], None] | None) -> None:
        self.on_change = on_change

    def _number_text(self) -> str:
        return f"{self.value:{self.digits}d}"[:11]

    def _draw(self) -> None:
        t = self.theme
        if self.btnstate == 1:
            self.draw_gradient(t.col_dark_ctrl, t.col_light_ctrl, 1, 1, 8, 8)
        else:
            self.draw_gradient(t.col_light_ctrl, t.col_dark_ctrl, 1, 1, 8, 8)
        _draw_up_arrow(self, t.col_text_bt)
        self.draw_box(0, 0, 9, 9, t.col_outline)

        if self.btnstate == 2:
            self.draw_gradient(t.col_dark_ctrl, t.col_light_ctrl, 1, 8, 8, 8)
        else:
            self.draw_gradient(t.col_light_ctrl, t.col_dark_ctrl, 1, 8, 8, 8)
        _draw_down_arrow(self, t.col_text_bt)
        self.draw_box(0, 8, 9, 9, t.col_outline)

        self.draw_full_box(9, 1, self.width - 9, self.height - 1, t.col_lighter_bg)
        self.draw_string(self._number_text(), 10, 5, t.col_text_value)
        self.draw_border(t.col_outline)


class NumberSlider(Widget):
    """A signed value changed by arrow taps or by dragging the pen vertically."""

    def __init__(self, x, y, width, height, vram=None, value=0, minimum=0, maximum=100,
                 hex_display=False, is_8bit=False, font=None):
        super().__init__(x, y, width, height, vram, font=font)
        self.value = value
        self.btnstate = False
        self.minimum = minimum
        self.maximum = maximum
        self.hex = hex_display
        self.is_8bit = is_8bit
        self.lasty = 0
        self.on_change: Callable[[int], None] | None = None
        self.on_post_change: Callable[[int], None] | None = None

    def please_draw(self) -> None:
        self._draw()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.value)

    def pen_down(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        if self.x < x < self.x + 32 and self.y < y < self.y + 17:
            self.btnstate = True
            self.lasty = y
        on_arrows = self.x < x < self.x + 9
        if on_arrows and self.y < y < self.y + 9:
            if self.value < self.maximum:
                self.value += 1
                self._notify()
        elif on_arrows and self.y + 9 < y < self.y + 18:
            if self.value > self.minimum:
                self.value -= 1
                self._notify()
        self._draw()

    def pen_up(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.btnstate = False
        if self.on_post_change is not None:
            self.on_post_change(self.value)
        self._draw()

    def pen_move(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        dy = self.lasty - y
        chg = 25 if self.maximum > 500 else 1
        if abs(dy) <= 1:
            return
        inc = (dy * dy // 8) * chg
        if inc == 0:
            inc = chg
        if dy < 0:
            inc = -inc
        self.value = max(self.minimum, min(self.maximum, self.value + inc))
        self._draw()
        self._notify()
        self.lasty = y

    def set_value(self, value: int) -> None:
        """Set the value, clamped to the range; the callback gets the requested value."""
        oldval = self.value
        self.value = max(self.minimum, min(self.maximum, value))
        if oldval != self.value:
            if self.on_change is not None:
                self.on_change(value)
            self._draw()

    def register_change_callback(self, on_change: Callable[[int], None] | None) -> None:
        self.on_change = on_change

    def register_post_change_callback(self, on_post_change: Callable[[int], None] | None) -> None:
        self.on_post_change = on_post_change

    def _number_text(self) -> str:
        if self.is_8bit:
            if self.hex:
                text = format(self.value & 0xFF, "2x")
            else:
                text = format(((self.value + 128) & 0xFF) - 128, "3d")
        elif self.hex:
            text = format(self.value & 0xFFFFFFFF, "2x")
        else:
            text = format(self.value, "3d")
        return text[:7]

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        light = t.col_light_ctrl if self.enabled else t.col_light_ctrl_disabled
        dark = t.col_dark_ctrl if self.enabled else t.col_dark_ctrl_disabled
        self.draw_gradient(light, dark, 2, 2, 7, 7)
        if self.btnstate:
            self.draw_gradient(dark, light, 1, 1, 8, 15)
        else:
            self.draw_gradient(light, dark, 1, 1, 8, 15)
        _draw_up_arrow(self, t.col_text_bt)
        self.draw_vline(4, 6, 5, t.col_text_bt)
        _draw_down_arrow(self, t.col_text_bt)
        self.draw_box(0, 0, 9, 17, t.col_outline)

        self.draw_full_box(9, 1, self.width - 10, self.height - 2, t.col_lighter_bg)
        self.draw_string(self._number_text(), 10, 5, t.col_text_value)
        self.draw_border(t.col_outline)
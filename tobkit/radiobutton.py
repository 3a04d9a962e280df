"""Radio buttons and the group that keeps one of them active."""

from __future__ import annotations

from collections.abc import Callable

from .widget import Widget


class RadioButtonGroup:
    """A set of radio buttons of which exactly one is active after a push."""

    def __init__(self) -> None:
        self.buttons: list[RadioButton] = []
        self.on_change: Callable[[int], None] | None = None

    def add(self, rb: "RadioButton") -> None:
        self.buttons.append(rb)

    def pushed(self, rb: "RadioButton") -> None:
        pos = 0
        for counter, other in enumerate(self.buttons):
            if other is rb:
                other.set_active(True)
                pos = counter
            else:
                other.set_active(False)
        if self.on_change:
            self.on_change(pos)

    def set_active(self, idx: int) -> None:
        if not 0 <= idx < len(self.buttons):
            raise IndexError(f"no radio button at index {idx}")
        self.pushed(self.buttons[idx])

    def register_change_callback(self, on_change: Callable[[int], None] | None) -> None:
        self.on_change = on_change


class RadioButton(Widget):
    """A round option button belonging to a RadioButtonGroup."""

    def __init__(self, x, y, width, height, vram, group: RadioButtonGroup, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.group = group
        self.active = False
        self.label: str | None = None
        group.add(self)

    def please_draw(self) -> None:
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.group.pushed(self)

    def set_caption(self, caption: str) -> None:
        self.label = caption
        if self.is_exposed():
            self._draw()

    def set_active(self, active: bool) -> None:
        self.active = active
        if self.is_exposed():
            self._draw()

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        light = t.col_light_ctrl if self.enabled else t.col_light_ctrl_disabled
        dark = t.col_dark_ctrl if self.enabled else t.col_dark_ctrl_disabled
        self.draw_gradient(light, dark, 2, 2, 7, 7)
        self.draw_hline(3, 1, 5, t.col_outline)
        self.draw_hline(3, 9, 5, t.col_outline)
        self.draw_vline(1, 3, 5, t.col_outline)
        self.draw_vline(9, 3, 5, t.col_outline)
        for px, py in ((2, 2), (8, 2), (2, 8), (8, 8)):
            self.draw_pixel(px, py, t.col_outline)
        if self.active:
            self.draw_full_box(4, 4, 3, 3, t.col_checkmark)
        self.draw_string(self.label, 13, 0, t.col_text)
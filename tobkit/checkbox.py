"""A check box with a text label."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .widget import Widget


class CheckBox(Widget):
    """A toggleable box; ``checkmark`` is the 1-bit 10x10 tick bitmap."""

    def __init__(self, x, y, width, height, vram=None, visible=True, checked=False,
                 albino=False, checkmark: Sequence[int] | None = None, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.label: str | None = None
        self.checked = checked
        self.albino = albino
        self.checkmark = checkmark
        self.on_toggle: Callable[[bool], None] | None = None

    def set_caption(self, label: str) -> None:
        self.label = label

    def set_checked(self, checked: bool) -> None:
        self.checked = checked
        self._draw()

    def register_toggle_callback(self, on_toggle: Callable[[bool], None] | None) -> None:
        self.on_toggle = on_toggle

    def please_draw(self) -> None:
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        self.checked = not self.checked
        if self.on_toggle is not None:
            self.on_toggle(self.checked)
        self._draw()

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        if self.enabled:
            self.draw_gradient(t.col_light_ctrl, t.col_dark_ctrl, 2, 4, 7, 7)
        else:
            self.draw_gradient(t.col_light_ctrl_disabled, t.col_dark_ctrl_disabled, 2, 4, 7, 7)
        self.draw_box(1, 3, 9, 9, t.col_outline)
        self.draw_full_box(0, 0, 11, 3, t.col_bg if self.albino else t.col_light_bg)
        if self.checked and self.checkmark is not None:
            self.draw_monochrome_icon(1, 0, 10, 10, self.checkmark, t.col_checkmark)
        self.draw_string(self.label, 13, 2, t.col_text_light if self.albino else t.col_text)
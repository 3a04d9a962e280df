"""A centred message box with a row of push buttons."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .button import Button
from .gui import GUI
from .widget import SCREEN_HEIGHT, SCREEN_WIDTH, Widget

MB_MIN_WIDTH = 150
MB_HEIGHT = 46


class MessageBox(Widget):
    """Shows a message and one button for each (caption, callback) pair."""

    def __init__(self, vram, message: str,
                 buttons: Sequence[tuple[str, Callable[[], None] | None]] = (), font=None):
        super().__init__((SCREEN_WIDTH - MB_MIN_WIDTH) // 2, (SCREEN_HEIGHT - MB_HEIGHT) // 2,
                         MB_MIN_WIDTH, MB_HEIGHT, vram, font=font)
        self.msg = message
        self.gui = GUI()
        self.buttons: list[Button] = []
        n_buttons = len(buttons)

        width = 10 + sum(self.get_string_width(caption) + 14 for caption, _ in buttons)
        minwidth = max(self.get_string_width(message) + 8, MB_MIN_WIDTH)
        fixedbuttonwidth = 0
        if width < minwidth:
            width = minwidth
            if n_buttons > 0:
                fixedbuttonwidth = (width - 10) // n_buttons - 10
        elif width > SCREEN_WIDTH:
            width = SCREEN_WIDTH
        self.width = width
        self.x = (SCREEN_WIDTH - width) // 2

        xpos = self.x + 10
        for caption, on_push in buttons:
            buttonwidth = fixedbuttonwidth or self.get_string_width(caption) + 4
            button = Button(xpos, self.y + 24, buttonwidth, 14, self.vram, True, font=self.font)
            self.gui.register_widget(button, 0)
            button.set_caption(caption)
            button.register_push_callback(on_push)
            self.buttons.append(button)
            xpos += buttonwidth + 10

    def please_draw(self) -> None:
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        self.gui.pen_down(x, y)

    def pen_up(self, x: int, y: int) -> None:
        self.gui.pen_up(x, y)

    def show(self) -> None:
        self.gui.show_all()
        if not self.is_exposed():
            super().show()
            self.please_draw()

    def reveal(self) -> None:
        super().reveal()
        self.gui.reveal_all()

    def set_theme(self, theme, bgcolor: int) -> None:
        self.theme = theme
        self.bgcolor = bgcolor
        self.gui.set_theme(theme, theme.col_light_bg)

    def _draw(self) -> None:
        t = self.theme
        self.draw_gradient(t.col_list_highlight1, t.col_list_highlight2, 0, 1, self.width, 15)
        self.draw_hline(0, 16, self.width, t.col_outline)
        self.draw_full_box(0, 17, self.width, MB_HEIGHT - 17, t.col_light_bg)
        self.draw_border(t.col_outline)
        labelx = (self.width - self.get_string_width(self.msg)) // 2
        self.draw_string(self.msg, labelx, 3, t.col_text, self.width)
        self.gui.draw()
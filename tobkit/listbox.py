"""A scrollable list of text rows with an optional row-number column."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .widget import Widget

ROW_HEIGHT = 10
SCROLLBAR_WIDTH = 9
SCROLLBUTTON_HEIGHT = 9
COUNTER_WIDTH = 16
MIN_SCROLLTHINGYHEIGHT = 6
TICKER_PERIOD = 128


class ScrollState(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    THINGY = 3


class ListBox(Widget):
    """A list of strings with a scroll bar; one element is always active."""

    def __init__(self, x, y, width, height, vram=None, n_items=0, show_numbers=False,
                 visible=True, zero_offset=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.elements: list[str] = [""] * n_items
        self.tickerframe = 0
        self.rev = False
        self.buttonstate = ScrollState.NONE
        self.active_element = 0
        self.highlighted_element = -1
        self.scrollpos = 0
        self.scrollthingypos = 0
        self.scrollthingyheight = 0
        self.pen_y_on_scrollthingy = 0
        self.show_numbers = show_numbers
        self.zero_offset = zero_offset
        self.on_change: Callable[[int], None] | None = None

    # Geometry helpers

    def _rows_full(self) -> int:
        return self.height // ROW_HEIGHT

    def _rows_displayed(self) -> int:
        return (self.height - 1) // ROW_HEIGHT

    def _max_scrollpos(self) -> int:
        return max(0, len(self.elements) - self._rows_full())

    def _track_height(self) -> int:
        return self.height - 2 * SCROLLBUTTON_HEIGHT + 2

    # Public interface

    def please_draw(self) -> None:
        self._calc_scroll_thingy()
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        relx = x - self.x
        rely = y - self.y
        if relx < self.width - SCROLLBAR_WIDTH:
            self.tickerframe = 0
            self.rev = False
            new_active = rely // ROW_HEIGHT + self.scrollpos
            if new_active != self.active_element and new_active < len(self.elements):
                self.active_element = new_active
                if self.on_change is not None:
                    self.on_change(self.active_element)
                self._draw()
            return

        top = self.y + SCROLLBUTTON_HEIGHT
        thingy_top = top + self.scrollthingypos
        thingy_bottom = thingy_top + self.scrollthingyheight
        bottom = self.y + self.height - SCROLLBUTTON_HEIGHT
        if y < top:
            self.buttonstate = ScrollState.UP
            if self.scrollpos > 0:
                self.scrollpos -= 1
                self._calc_scroll_thingy()
                self._draw()
        elif y > bottom:
            self.buttonstate = ScrollState.DOWN
            if self.scrollpos < self._max_scrollpos():
                self.scrollpos += 1
                self._calc_scroll_thingy()
                self._draw()
        elif thingy_top < y < thingy_bottom:
            self.buttonstate = ScrollState.THINGY
            self.pen_y_on_scrollthingy = y - thingy_top
            self._draw()
        elif top < y < thingy_top:
            page = self._rows_displayed()
            self.scrollpos = self.scrollpos - page if self.scrollpos > page else 0
            self._calc_scroll_thingy()
            self._draw()
        elif thingy_bottom < y < bottom:
            page = self._rows_displayed()
            max_scrollpos = len(self.elements) - self._rows_full()
            if self.scrollpos + page < max_scrollpos:
                self.scrollpos += page
            else:
                self.scrollpos = max(0, max_scrollpos)
            self._calc_scroll_thingy()
            self._draw()

    def pen_up(self, x: int, y: int) -> None:
        previous = self.buttonstate
        self.buttonstate = ScrollState.NONE
        if previous != ScrollState.NONE:
            self._draw()

    def pen_move(self, x: int, y: int) -> None:
        if self.buttonstate != ScrollState.THINGY:
            return
        old_scrollpos = self.scrollpos
        top = self.y + SCROLLBUTTON_HEIGHT
        new_pen_y = y - (top + self.scrollthingypos)
        new_pos = max(0, self.scrollthingypos + new_pen_y - self.pen_y_on_scrollthingy)
        max_thingypos = max(0, self._track_height() - self.scrollthingyheight)
        self.scrollthingypos = min(new_pos, max_thingypos)

        max_scrollpos = self._max_scrollpos()
        if max_thingypos == 0:
            self.scrollpos = 0
        else:
            self.scrollpos = self.scrollthingypos * max_scrollpos // max_thingypos

        if self.scrollpos != old_scrollpos:
            if max_scrollpos:
                self.scrollthingypos = self.scrollpos * max_thingypos // max_scrollpos
            else:
                self.scrollthingypos = 0
            self._draw()

    def register_change_callback(self, on_change: Callable[[int], None] | None) -> None:
        self.on_change = on_change

    def add(self, name: str) -> None:
        self.elements.append(name)
        if len(self.elements) <= self._rows_displayed():
            self._draw()

    def delete(self) -> None:
        """Remove the active element."""
        if not self.elements:
            return
        del self.elements[self.active_element]
        if self.elements and self.active_element > len(self.elements) - 1:
            self.active_element = len(self.elements) - 1
        rows = self._rows_full()
        if len(self.elements) >= rows and self.scrollpos > len(self.elements) - rows:
            self.scrollpos = len(self.elements) - rows
        if self.active_element >= self.scrollpos:
            self._draw()

    def insert(self, idx: int, name: str) -> None:
        if not 0 <= idx <= len(self.elements):
            raise IndexError(f"cannot insert at index {idx}")
        self.elements.insert(idx, name)
        self._draw()

    def set(self, idx: int, name: str) -> None:
        self._check_index(idx)
        self.elements[idx] = name
        if self.scrollpos <= idx < self.scrollpos + self._rows_displayed():
            self._draw()

    def get(self, idx: int) -> str:
        self._check_index(idx)
        return self.elements[idx]

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self.elements):
            raise IndexError(f"no element at index {idx}")

    def clear(self) -> None:
        self.active_element = 0
        self.highlighted_element = -1
        self.scrollpos = 0
        self.elements.clear()

    def scroll_to(self, idx: int) -> None:
        old_scrollpos = self.scrollpos
        rows = self._rows_full()
        if self.scrollpos + rows - 1 < idx:
            self.scrollpos = idx - rows + 1
        if self.scrollpos > idx:
            self.scrollpos = idx
        if old_scrollpos != self.scrollpos:
            self._calc_scroll_thingy()

    def highlight(self, idx: int, scroll: bool = False) -> None:
        self.highlighted_element = idx
        if idx >= 0 and scroll:
            self.scroll_to(idx)
        self._draw()

    def select(self, idx: int, scroll: bool = False) -> None:
        self.active_element = idx
        if scroll:
            self.scroll_to(idx)
        self._calc_scroll_thingy()
        self._draw()

    def tick_frame(self) -> None:
        if self.tickerframe == TICKER_PERIOD:
            self.tickerframe = 0
        self.tickerframe += 1

    # Drawing

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        w, h = self.width, self.height
        rows_displayed = self._rows_displayed()
        content_width = w - SCROLLBAR_WIDTH - 1

        for i in range(max(0, rows_displayed - 1)):
            self.draw_hline(1, ROW_HEIGHT * (i + 1), content_width, t.col_sepline)

        for i in range(rows_displayed):
            row = self.scrollpos + i
            if row == self.active_element:
                bottom, top = t.col_list_highlight1, t.col_list_highlight2
            elif row == self.highlighted_element:
                bottom, top = t.col_light_bg, t.col_lighter_bg
            else:
                bottom, top = t.col_list_1, t.col_list_2
            self.draw_gradient(bottom, top, 1, ROW_HEIGHT * i + 1, content_width, ROW_HEIGHT - 1)

        if self.show_numbers:
            self.draw_vline(COUNTER_WIDTH, 1, h - 2, t.col_list_sep_vertical)

        bar_x = w - SCROLLBAR_WIDTH
        pressed = (t.col_scrollbar_arr_bg1, t.col_scrollbar_arr_bg2)
        released = (t.col_scrollbar_arr_bg2, t.col_scrollbar_arr_bg1)

        cols = pressed if self.buttonstate == ScrollState.UP else released
        self.draw_gradient(cols[0], cols[1], bar_x + 1, 1, 8, 8)
        for j in range(3):
            for p in range(-j, j + 1):
                self.draw_pixel(bar_x + 4 + p, j + 3, t.col_outline)
        self.draw_box(bar_x, 0, 9, 9, t.col_outline)

        cols = pressed if self.buttonstate == ScrollState.DOWN else released
        self.draw_gradient(cols[0], cols[1], bar_x + 1, h - 9, 8, 8)
        for j in range(2, -1, -1):
            for p in range(-j, j + 1):
                self.draw_pixel(bar_x + 4 + p, -j + h - 4, t.col_outline)
        self.draw_box(bar_x, h - 9, 9, 9, t.col_outline)

        self.draw_box(bar_x, 0, SCROLLBAR_WIDTH, h, t.col_outline)
        self.draw_gradient(t.col_scrollbar_bg1, t.col_scrollbar_bg2, bar_x + 1, SCROLLBUTTON_HEIGHT,
                           SCROLLBAR_WIDTH - 2, h - 2 * SCROLLBUTTON_HEIGHT)

        if h >= 2 * SCROLLBUTTON_HEIGHT + self.scrollthingyheight:
            col = (t.col_scrollbar_active if self.buttonstate == ScrollState.THINGY
                   else t.col_scrollbar_inactive)
            ty = SCROLLBUTTON_HEIGHT - 1 + self.scrollthingypos
            self.draw_full_box(bar_x + 1, ty, SCROLLBAR_WIDTH - 2, self.scrollthingyheight, col)
            self.draw_box(bar_x, ty, SCROLLBAR_WIDTH, self.scrollthingyheight, t.col_outline)

        visible_rows = range(min(self._rows_full(), max(0, len(self.elements) - self.scrollpos)))

        contentoffset = 0
        if self.show_numbers:
            offset = 0 if self.zero_offset else 1
            for i in visible_rows:
                row = self.scrollpos + i
                number = format(row + offset, "2x")[:4]
                col = t.col_text_lb_highlight if row == self.active_element else t.col_text_lb
                self.draw_string(number, 2, ROW_HEIGHT * i + 2, col)
            contentoffset = COUNTER_WIDTH

        maxwidth = w - contentoffset - 2 - SCROLLBAR_WIDTH - 2
        for i in visible_rows:
            row = self.scrollpos + i
            text = self.elements[row]
            col = t.col_text_lb_highlight if row == self.active_element else t.col_text_lb
            if row == self.active_element and self.get_string_width(text) > w:
                if not text:
                    continue
                text = text[self._ticker_start(len(text)):]
            self.draw_string(text, contentoffset + 2, ROW_HEIGHT * i + 2, col,
                             maxwidth, h - (ROW_HEIGHT * i + 4))

        self.draw_border(t.col_outline)

    def _ticker_start(self, length: int) -> int:
        """First character shown of an over-long active element."""
        phase = self.tickerframe % length
        if not self.rev:
            start = min(length - 1, phase)
            start = max(start, 0)
            start = min(start, length // 2)
            if start + 1 >= length // 2:
                self.rev = True
        else:
            start = min(length - 1, length - phase - 1)
            if length - phase - 1 <= 0:
                self.rev = False
        return start

    def _calc_scroll_thingy(self) -> None:
        track = self._track_height()
        rows = self._rows_full()
        count = len(self.elements)
        if count < rows:
            height = track
        else:
            height = track * rows // count
        height = min(height, track)
        height = max(height, MIN_SCROLLTHINGYHEIGHT)
        self.scrollthingyheight = height

        max_scrollpos = self._max_scrollpos()
        max_thingypos = track - height
        if max_scrollpos == 0:
            self.scrollthingypos = 0
        else:
            self.scrollthingypos = max_thingypos * self.scrollpos // max_scrollpos
"""An on-screen keyboard for entering a line of text."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from .button import Button
from .gui import GUI, Screen
from .label import Label
from .widget import SCREEN_HEIGHT, SCREEN_WIDTH, Widget

MAX_TEXT_LEN = 256

TW_TILE_WIDTH = 26
TW_TILE_HEIGHT = 12
TW_TILE_X = 4
TW_TILE_Y = 16
TW_WIDTH = TW_TILE_WIDTH * 8 + TW_TILE_X * 2
TW_HEIGHT = TW_TILE_HEIGHT * 8 + TW_TILE_Y * 2 - 1
MAP_STRIDE = 32

PRESSED_PALETTE = 4
RELEASED_PALETTE = 3

KEY_RIGHT = 1 << 4
KEY_LEFT = 1 << 5

BACKSPACE = "\b"
CAPS = "\x02"
RETURN = "\n"
SHIFT = "\x04"
SPACE = " "
NO_KEY = "\0"


class TypewriterMode(Enum):
    NORMAL = 0
    CAPS = 1
    SHIFT = 2


def _doubled(chars: str) -> str:
    return "".join(ch * 2 for ch in chars)


def _layout(digits: str, top: str, home: str, bottom: str, left: str, brackets: str) -> list[str]:
    blank = NO_KEY * TW_TILE_WIDTH
    number_row = NO_KEY + _doubled(digits) + NO_KEY
    top_row = NO_KEY * 2 + _doubled(top) + BACKSPACE * 3 + NO_KEY
    home_row = NO_KEY + CAPS * 2 + _doubled(home) + RETURN * 4 + NO_KEY
    bottom_row = NO_KEY + SHIFT * 3 + _doubled(bottom) + NO_KEY * 2
    space_row = NO_KEY * 5 + _doubled(left) + SPACE * 10 + _doubled(brackets) + NO_KEY * 3
    rows = [blank, number_row, number_row, top_row, top_row, home_row, home_row,
            bottom_row, bottom_row, space_row, space_row, blank]
    assert all(len(row) == TW_TILE_WIDTH for row in rows)
    return rows


_HIT = _layout("1234567890-=", "qwertyuiop", "asdfghjkl", "zxcvbnm,./", ";'", "[]")
_HIT_SHIFT = _layout("!@#$%^&*()_+", "QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM<>?", ":~", "{}")


def key_at(tilex: int, tiley: int, shifted: bool = False) -> str:
    """The key under keyboard tile (tilex, tiley); NO_KEY outside the keyboard."""
    if not (0 <= tilex < TW_TILE_WIDTH and 0 <= tiley < TW_TILE_HEIGHT):
        return NO_KEY
    return (_HIT_SHIFT if shifted else _HIT)[tiley][tilex]


class Typewriter(Widget):
    """A keyboard drawn as a tile map, with a text field and ok/clear/cancel buttons.

    ``map_base`` is the tile map the keyboard occupies (32 entries per row);
    ``tile_map`` holds the keyboard tiles for normal and shifted layout.
    """

    def __init__(self, msg: str, vram=None, map_base: list[int] | None = None,
                 palette_offset: int = 3, tile_map: Sequence[int] | None = None,
                 base_palette: Sequence[int] | None = None, font=None):
        super().__init__((SCREEN_WIDTH - TW_WIDTH) // 2, (SCREEN_HEIGHT - TW_HEIGHT) // 2 - 15,
                         TW_WIDTH, TW_HEIGHT, vram, font=font)
        self.map_base = map_base if map_base is not None else [0] * (MAP_STRIDE * TW_TILE_HEIGHT)
        self.palette_offset = palette_offset
        self.tile_map = tile_map
        self.palette = [0] * 32
        if base_palette is not None:
            self.palette[:16] = list(base_palette)[:16]
        self.kx = self.x + TW_TILE_X
        self.ky = self.y + TW_TILE_Y
        self.bg_offset = (-self.kx, -self.ky)
        self.mode = TypewriterMode.NORMAL
        self.text = ""
        self.cursorpos = 0
        self.tilex = 0
        self.tiley = 0
        self.on_ok: Callable[[], None] | None = None
        self.on_cancel: Callable[[], None] | None = None
        self.on_clear: Callable[[], None] | None = None
        self.gui = GUI()

        msglength = self.get_string_width(msg) & 0xFF
        self.msglabel = Label(self.x + 4, self.y + 6, msglength + 4, 12, self.vram, False,
                              font=self.font)
        self.msglabel.caption = msg
        self.gui.register_widget(self.msglabel, 0, Screen.SUB)

        self.label = Label(self.x + msglength + 8, self.y + 4, TW_WIDTH - msglength - 12, 15,
                           self.vram, True, False, False, True, font=self.font)
        self.gui.register_widget(self.label, 0, Screen.SUB)

        button_y = self.y + TW_HEIGHT - 12 - 4
        centre = self.x + TW_WIDTH // 2
        self.buttonok = self._make_button(centre - 50 - 2 - 29, button_y, "ok")
        self.buttoncancel = self._make_button(centre + 2 + 25, button_y, "cancel")
        self.buttonclear = self._make_button(centre - 50 - 2 + 25, button_y, "clear")

    def _make_button(self, x: int, y: int, caption: str) -> Button:
        button = Button(x, y, 50, 12, self.vram, True, font=self.font)
        button.set_caption(caption)
        self.gui.register_widget(button, 0, Screen.SUB)
        return button

    @property
    def shifted(self) -> bool:
        return self.mode in (TypewriterMode.CAPS, TypewriterMode.SHIFT)

    def please_draw(self) -> None:
        self._draw()

    def pen_down(self, x: int, y: int) -> None:
        kb_right = self.kx + TW_TILE_WIDTH * 8
        kb_bottom = self.ky + TW_TILE_HEIGHT * 8
        if self.kx <= x <= kb_right and self.ky <= y <= kb_bottom:
            self.tilex = (x - self.kx) // 8
            self.tiley = (y - self.ky) // 8
            self._set_tile(self.tilex, self.tiley, PRESSED_PALETTE)
            if 1 <= self.tilex < TW_TILE_WIDTH - 1 and self.tiley < TW_TILE_HEIGHT:
                self._press_key(key_at(self.tilex, self.tiley, self.shifted))
        elif self.x < x < self.x + TW_WIDTH and kb_bottom < y < self.y + TW_HEIGHT:
            self.gui.pen_down(x, y)

    def _press_key(self, c: str) -> None:
        if c == CAPS:
            self.mode = TypewriterMode.NORMAL if self.shifted else TypewriterMode.CAPS
            self._redraw()
        elif c == SHIFT:
            self.mode = TypewriterMode.NORMAL if self.shifted else TypewriterMode.SHIFT
            self._redraw()
        elif c == BACKSPACE:
            if self.cursorpos > 0:
                self.text = self.text[:self.cursorpos - 1] + self.text[self.cursorpos:]
                self.cursorpos -= 1
                self.label.set_caption(self.text)
                self._draw_cursor()
        elif c == RETURN:
            if self.on_ok is not None:
                self.on_ok()
        elif c != NO_KEY:
            if self.mode == TypewriterMode.SHIFT:
                self.mode = TypewriterMode.NORMAL
                self._redraw()
            if len(self.text) < MAX_TEXT_LEN:
                self.text = self.text[:self.cursorpos] + c + self.text[self.cursorpos:]
                self.cursorpos += 1
                self.label.set_caption(self.text)
                self._draw_cursor()

    def pen_up(self, x: int, y: int) -> None:
        self._set_tile(self.tilex, self.tiley, RELEASED_PALETTE)
        self.gui.pen_up(x, y)

    def button_press(self, buttons: int) -> None:
        if buttons == KEY_LEFT and self.cursorpos > 0:
            self.cursorpos -= 1
            self._redraw()
        elif buttons == KEY_RIGHT and self.cursorpos < len(self.text):
            self.cursorpos += 1
            self._redraw()

    def register_ok_callback(self, on_ok: Callable[[], None] | None) -> None:
        self.on_ok = on_ok
        self.buttonok.register_push_callback(on_ok)

    def register_cancel_callback(self, on_cancel: Callable[[], None] | None) -> None:
        self.on_cancel = on_cancel
        self.buttoncancel.register_push_callback(on_cancel)

    def register_clear_callback(self, on_clear: Callable[[], None] | None) -> None:
        self.on_clear = on_clear
        self.buttonclear.register_push_callback(on_clear)

    def set_text(self, text: str) -> None:
        """Replace the text (truncated to the maximum length) and put the cursor at its end."""
        self.text = text[:MAX_TEXT_LEN]
        self.cursorpos = len(self.text)
        self.label.set_caption(self.text)
        self._redraw()

    def show(self) -> None:
        super().show()
        self.gui.show_all()
        self._redraw()

    def reveal(self) -> None:
        super().reveal()
        self.gui.reveal_all()
        self._redraw()

    def set_theme(self, theme, bgcolor: int) -> None:
        self.theme = theme
        self.bgcolor = bgcolor
        for child in (self.label, self.msglabel, self.buttonok, self.buttoncancel,
                      self.buttonclear):
            child.set_theme(theme, theme.col_light_bg)
        self.palette[1:7] = [
            theme.col_typewriter_mod_key, theme.col_typewriter_key,
            theme.col_typewriter_key_label, theme.col_typewriter_bg,
            theme.col_outline, theme.col_typewriter_mod_key_label,
        ]
        for i in range(16):
            self.palette[16 + i] = (theme.col_typewriter_pressed_key if i in (1, 2)
                                    else theme.col_typewriter_bg)

    def _draw(self) -> None:
        t = self.theme
        self.draw_full_box(1, 1, TW_WIDTH - 2, TW_HEIGHT - 2, t.col_light_bg)
        self.draw_border(t.col_outline)
        self.gui.draw()
        self._redraw()

    def _redraw(self) -> None:
        """Redraw text, cursor and keyboard tiles without repainting the box."""
        if not self.is_exposed():
            return
        self.label.please_draw()
        self.msglabel.please_draw()
        self._draw_cursor()

        tile_attr = self.palette_offset << 12
        map_offset = TW_TILE_WIDTH * TW_TILE_HEIGHT if self.shifted else 0
        for py in range(TW_TILE_HEIGHT):
            for px in range(TW_TILE_WIDTH):
                idx = MAP_STRIDE * py + px
                if self.tile_map is not None:
                    self.map_base[idx] = self.tile_map[map_offset + TW_TILE_WIDTH * py + px] | tile_attr
                else:
                    self.map_base[idx] = (self.map_base[idx] & 0x8FFF) | tile_attr

    def _draw_cursor(self) -> None:
        lx, ly, lw, lh = self.label.get_pos()
        cursorx = lx - self.x + self.get_string_width(self.text, self.cursorpos) + 1
        cursory = ly - self.y + 1
        if cursorx < lx - self.x + lw:
            self.draw_vline(cursorx, cursory, lh - 2, self.theme.col_typewriter_cursor)

    def _paint(self, tx: int, ty: int, pal: int) -> None:
        idx = ty * MAP_STRIDE + tx
        self.map_base[idx] = (self.map_base[idx] & 0x8FFF) | (pal << 12)

    def _paint_span(self, tx: int, ty: int, c: str, pal: int) -> None:
        for step in (1, -1):
            x2 = tx
            while key_at(x2, ty) == c:
                self._paint(x2, ty, pal)
                x2 += step

    def _set_tile(self, tx: int, ty: int, pal: int) -> None:
        """Set the palette of every tile belonging to the key at (tx, ty)."""
        c = key_at(tx, ty)
        if c == NO_KEY:
            return
        for step in (1, -1):
            y2 = ty
            while key_at(tx, y2) == c:
                self._paint_span(tx, y2, c, pal)
                y2 += step
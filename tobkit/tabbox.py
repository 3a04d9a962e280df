"""A box with icon tabs, each holding its own set of widgets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum

from .gui import GUI, Screen
from .widget import Widget


class Orientation(IntEnum):
    TOP = 0
    LEFT = 1


class TabBox(Widget):
    """Tabs along the top or left edge; only the current tab's widgets are shown."""

    def __init__(self, x, y, width, height, vram=None, orientation=Orientation.TOP,
                 icon_size=10, visible=True, font=None):
        super().__init__(x, y, width, height, vram, visible, font=font)
        self.orientation = Orientation(orientation)
        self.icon_size = icon_size
        self.currentgui = 0
        self.guis: list[GUI] = []
        self.icons: list[Sequence[int]] = []
        self.tab_idx_map: list[int] = []
        self.highlighted_tabs: list[bool] = []
        self.on_tab_change: Callable[[int], None] | None = None

    def _find_gui_idx(self, tabidx: int) -> int | None:
        try:
            return self.tab_idx_map.index(tabidx)
        except ValueError:
            return None

    def add_tab(self, icon: Sequence[int], tabidx: int) -> None:
        self.tab_idx_map.append(tabidx)
        self.icons.append(icon)
        gui = GUI()
        gui.set_theme(self.theme, self.theme.col_light_bg if self.theme is not None else 0)
        self.guis.append(gui)
        self.highlighted_tabs.append(False)

    def register_widget(self, w: Widget, listening_buttons: int = 0, tabidx: int = 0,
                        screen: Screen = Screen.SUB) -> None:
        """Add ``w`` to the tab with id ``tabidx``; unknown tabs are ignored."""
        guiidx = self._find_gui_idx(tabidx)
        if guiidx is None:
            return
        self.guis[guiidx].register_widget(w, listening_buttons, screen)
        if guiidx != self.currentgui:
            w.occlude()
        elif self.is_exposed():
            w.reveal()

    def _tab_hit(self, along: int) -> int | None:
        size_full = self.icon_size + 2
        offset = along - 3
        if offset < 0 and -offset >= size_full:
            return None
        hit = offset // size_full if offset >= 0 else 0
        return hit if hit < len(self.guis) else None

    def pen_down(self, x: int, y: int) -> None:
        size_full = self.icon_size + 2
        on_tab = False
        gui_hit = None
        if self.orientation == Orientation.TOP:
            on_tab = (y - self.y) < size_full
            gui_hit = self._tab_hit(x - self.x)
        elif self.orientation == Orientation.LEFT:
            on_tab = (x - self.x) < size_full
            gui_hit = self._tab_hit(y - self.y)

        if on_tab:
            if gui_hit is not None:
                self.currentgui = gui_hit
                self._draw()
                self._update_visibilities()
                if self.on_tab_change is not None:
                    self.on_tab_change(self.tab_idx_map[gui_hit])
        else:
            self.guis[self.currentgui].pen_down(x, y)

    def pen_up(self, x: int, y: int) -> None:
        self.guis[self.currentgui].pen_up(x, y)

    def pen_move(self, x: int, y: int) -> None:
        self.guis[self.currentgui].pen_move(x, y)

    def button_press(self, buttons: int) -> None:
        self.guis[self.currentgui].button_press(buttons)

    def register_tab_change_callback(self, on_tab_change: Callable[[int], None] | None) -> None:
        self.on_tab_change = on_tab_change

    def please_draw(self) -> None:
        self._draw()
        self._update_visibilities()

    def show(self) -> None:
        super().show()
        self.guis[self.currentgui].show_all()

    def hide(self) -> None:
        super().hide()
        self.guis[self.currentgui].hide_all()

    def occlude(self) -> None:
        super().occlude()
        self.guis[self.currentgui].occlude_all()

    def reveal(self) -> None:
        super().reveal()
        self.guis[self.currentgui].reveal_all()

    def set_theme(self, theme, bgcolor: int) -> None:
        self.theme = theme
        self.bgcolor = bgcolor
        for gui in self.guis:
            gui.set_theme(theme, theme.col_light_bg)

    def set_icon(self, guiidx: int, icon: Sequence[int]) -> None:
        self.icons[guiidx] = icon
        self._draw_icon(guiidx)

    def _draw_icon(self, guiidx: int) -> None:
        t = self.theme
        size_border = self.icon_size + 2
        size_full = size_border
        col = t.col_tab_outline
        selected = guiidx == self.currentgui
        offset = 0 if selected else 3
        fill = t.col_selected_tab if selected else t.col_unselected_tab
        icon = self.icons[guiidx]
        base = size_full * guiidx

        if self.orientation == Orientation.TOP:
            self.draw_full_box(3 + base, 1 + offset, size_border, size_border - offset, fill)
            self.draw_vline(2 + base, 1 + offset, size_border - offset, col)
            self.draw_hline(3 + base, offset, size_border - 1, col)
            self.draw_vline(2 + size_full * (guiidx + 1), 1 + offset, size_border - offset, col)
            if not selected:
                self.draw_pixel(3 + base + size_border - 1, offset, t.col_bg)
            self.draw_monochrome_icon(4 + base, 2 + offset, self.icon_size,
                                      self.icon_size - offset, icon, t.col_icon)
        else:
            self.draw_full_box(1 + offset, 2 + base, size_border - offset, size_border, fill)
            self.draw_hline(1 + offset, 2 + base, size_border - offset, col)
            self.draw_vline(offset, 3 + base, size_border - 1, col)
            self.draw_hline(1 + offset, 2 + size_full * (guiidx + 1), size_border - offset - 1, col)
            if not selected:
                self.draw_pixel(offset, 2 + base + size_border, t.col_light_bg)
            self.draw_monochrome_icon_offset(2 + offset, 4 + base, self.icon_size - offset,
                                             self.icon_size, 0, 0, self.icon_size,
                                             self.icon_size, icon, t.col_icon)

    def _draw(self) -> None:
        t = self.theme
        size_border = self.icon_size + 2
        size_full = size_border
        n = len(self.guis)
        if self.orientation == Orientation.TOP:
            self.draw_full_box(1, size_full + 1, self.width - 2,
                               self.height - (size_border + 2), t.col_light_bg)
            self.draw_box(0, size_border, self.width, self.height - size_border, t.col_tab_outline)
            self.draw_full_box(0, 0, 3 + size_full * n, 3, t.col_bg)
        else:
            self.draw_full_box(14, 1, self.width - 15, self.height - 2, t.col_light_bg)
            self.draw_box(13, 0, self.width - 13, self.height, t.col_tab_outline)
            self.draw_full_box(0, 0, 3, 3 + 13 * n, t.col_light_bg)
        for guiidx in range(n):
            self._draw_icon(guiidx)
        self.guis[self.currentgui].draw()

    def _update_visibilities(self) -> None:
        for gui_id, gui in enumerate(self.guis):
            if gui_id != self.currentgui:
                gui.occlude_all()
        self.guis[self.currentgui].reveal_all()
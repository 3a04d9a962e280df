"""Container that routes pen and button events to registered widgets."""

from __future__ import annotations

from enum import IntEnum

from .widget import Widget

NUM_BUTTONS = 14


class Screen(IntEnum):
    SUB = 0
    MAIN = 1


class GUI:
    """Holds widgets for both screens, shortcut buttons and overlay widgets."""

    def __init__(self) -> None:
        self.widgets_main: list[Widget] = []
        self.widgets_sub: list[Widget] = []
        self.shortcuts: list[Widget | None] = [None] * NUM_BUTTONS
        self.active_widget: Widget | None = None
        self.active_screen = Screen.SUB
        self.overlay_widget_main: Widget | None = None
        self.overlay_widget_sub: Widget | None = None
        self.overlay_shortcuts = 0
        self.theme = None
        self.bgcolor = 0

    def _all_widgets(self):
        yield from reversed(self.widgets_main)
        yield from reversed(self.widgets_sub)

    def set_theme(self, theme, bgcolor: int) -> None:
        self.theme = theme
        self.bgcolor = bgcolor
        for w in self.widgets_sub + self.widgets_main:
            w.set_theme(theme, bgcolor)

    def register_widget(self, w: Widget, listening_buttons: int = 0, screen: Screen = Screen.SUB) -> None:
        (self.widgets_main if screen == Screen.MAIN else self.widgets_sub).append(w)
        for i in range(NUM_BUTTONS):
            if listening_buttons & (1 << i):
                self.shortcuts[i] = w
        w.set_theme(self.theme, self.bgcolor)

    def unregister_widget(self, w: Widget) -> None:
        if self.active_widget is w:
            self.active_widget = None
        for widgets in (self.widgets_main, self.widgets_sub):
            if w in widgets:
                widgets.remove(w)
        # Only the first shortcut bound to the widget is dropped.
        if w in self.shortcuts:
            self.shortcuts[self.shortcuts.index(w)] = None

    def register_overlay_widget(self, w: Widget, listening_buttons: int = 0, screen: Screen = Screen.SUB) -> None:
        if screen == Screen.SUB:
            self.overlay_widget_sub = w
        else:
            self.overlay_widget_main = w
        self.overlay_shortcuts = listening_buttons
        w.set_theme(self.theme, self.bgcolor)

    def unregister_overlay_widget(self, screen: Screen = Screen.SUB) -> None:
        if screen == Screen.SUB:
            if self.active_widget is not None and self.active_widget is self.overlay_widget_sub:
                self.active_widget = None
            self.overlay_widget_sub = None
        else:
            if self.active_widget is not None and self.active_widget is self.overlay_widget_main:
                self.active_widget = None
            self.overlay_widget_main = None
        self.overlay_shortcuts = 0

    def pen_down(self, x: int, y: int) -> None:
        w = self.widget_at(x, y)
        if w is not None:
            self.active_widget = w
            w.pen_down(x, y)

    def pen_up(self, x: int, y: int) -> None:
        if self.active_widget is not None and self.active_widget.visible:
            self.active_widget.pen_up(x, y)
            self.active_widget = None

    def pen_move(self, x: int, y: int) -> None:
        if self.active_widget is not None:
            self.active_widget.pen_move(x, y)

    def button_press(self, buttons: int) -> None:
        w = self.widget_for_buttons(buttons)
        if w is not None and w.visible:
            w.button_press(buttons)

    def button_release(self, buttons: int) -> None:
        w = self.widget_for_buttons(buttons)
        if w is not None and w.visible:
            w.button_release(buttons)

    def draw(self) -> None:
        self.draw_main_screen()
        self.draw_sub_screen()

    @staticmethod
    def _draw_list(widgets: list[Widget], overlay: Widget | None) -> None:
        for w in reversed(widgets):
            if w.visible and not w.occluded:
                w.please_draw()
        if overlay is not None:
            overlay.please_draw()

    def draw_main_screen(self) -> None:
        self._draw_list(self.widgets_main, self.overlay_widget_main)

    def draw_sub_screen(self) -> None:
        self._draw_list(self.widgets_sub, self.overlay_widget_sub)

    def switch_screens(self) -> None:
        self.active_screen = Screen(1 - self.active_screen)

    def show_all(self) -> None:
        for w in self._all_widgets():
            w.show()

    def hide_all(self) -> None:
        for w in self._all_widgets():
            w.hide()

    def occlude_all(self) -> None:
        for w in self._all_widgets():
            w.occlude()

    def reveal_all(self) -> None:
        for w in self._all_widgets():
            w.reveal()

    def widget_at(self, x: int, y: int) -> Widget | None:
        """The overlay of the active screen, else the first visible widget hit."""
        if self.active_screen == Screen.MAIN:
            overlay, widgets = self.overlay_widget_main, self.widgets_main
        else:
            overlay, widgets = self.overlay_widget_sub, self.widgets_sub
        if overlay is not None:
            return overlay
        for w in widgets:
            wx, wy, ww, wh = w.get_pos()
            if wx < x < wx + ww and wy < y < wy + wh and w.visible:
                return w
        return None

    def widget_for_buttons(self, buttons: int) -> Widget | None:
        if self.overlay_widget_main is not None and self.overlay_shortcuts & buttons:
            return self.overlay_widget_main
        if self.overlay_widget_sub is not None and self.overlay_shortcuts & buttons:
            return self.overlay_widget_sub
        found = None
        for i in range(NUM_BUTTONS):
            if buttons & (1 << i):
                found = self.shortcuts[i]
        return found
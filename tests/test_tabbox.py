import pytest

from tobkit.tabbox import Orientation, TabBox
from tobkit.theme import Theme
from tobkit.widget import Framebuffer, Widget

ICON = bytes([0xFF] * 16)


class Recorder(Widget):
    def __init__(self, x, y, w, h, vram):
        super().__init__(x, y, w, h, vram)
        self.events = []

    def pen_down(self, x, y):
        self.events.append(("down", x, y))

    def pen_up(self, x, y):
        self.events.append(("up", x, y))

    def pen_move(self, x, y):
        self.events.append(("move", x, y))

    def button_press(self, buttons):
        self.events.append(("button", buttons))


def make(orientation=Orientation.TOP, tabs=(7, 9)):
    vram = Framebuffer()
    tb = TabBox(0, 0, 200, 100, vram, orientation, 10)
    tb.set_theme(Theme(), 0)
    for tabidx in tabs:
        tb.add_tab(ICON, tabidx)
    return tb


def test_widgets_of_other_tabs_are_occluded():
    tb = make()
    first = Recorder(50, 50, 20, 20, tb.vram)
    second = Recorder(50, 50, 20, 20, tb.vram)
    tb.register_widget(first, 0, 7)
    tb.register_widget(second, 0, 9)
    assert first.occluded is False
    assert second.occluded is True


def test_unknown_tab_is_ignored():
    tb = make()
    w = Recorder(50, 50, 20, 20, tb.vram)
    tb.register_widget(w, 0, 42)
    assert all(w not in gui.widgets_sub for gui in tb.guis)


def test_tapping_tab_switches_and_reports_tab_id():
    tb = make()
    changes = []
    tb.register_tab_change_callback(changes.append)
    first = Recorder(50, 50, 20, 20, tb.vram)
    second = Recorder(50, 50, 20, 20, tb.vram)
    tb.register_widget(first, 0, 7)
    tb.register_widget(second, 0, 9)
    tb.pen_down(20, 5)
    assert tb.currentgui == 1
    assert changes == [9]
    assert first.occluded is True
    assert second.occluded is False


def test_tap_past_last_tab_does_nothing():
    tb = make()
    changes = []
    tb.register_tab_change_callback(changes.append)
    tb.pen_down(150, 5)
    assert tb.currentgui == 0
    assert changes == []


def test_pen_in_box_goes_to_current_tab_widgets():
    tb = make()
    w = Recorder(50, 50, 20, 20, tb.vram)
    other = Recorder(50, 50, 20, 20, tb.vram)
    tb.register_widget(w, 0, 7)
    tb.register_widget(other, 0, 9)
    tb.pen_down(55, 55)
    tb.pen_move(56, 56)
    tb.pen_up(56, 56)
    assert w.events == [("down", 55, 55), ("move", 56, 56), ("up", 56, 56)]
    assert other.events == []


def test_button_press_routes_to_current_tab():
    tb = make()
    w = Recorder(50, 50, 20, 20, tb.vram)
    tb.register_widget(w, 1, 7)
    tb.button_press(1)
    assert w.events == [("button", 1)]


def test_left_tabs_switch_on_vertical_position():
    tb = make(Orientation.LEFT)
    changes = []
    tb.register_tab_change_callback(changes.append)
    tb.pen_down(5, 20)
    assert changes == [9]


def test_set_icon_replaces_icon():
    tb = make()
    new_icon = bytes(16)
    tb.set_icon(1, new_icon)
    assert tb.icons[1] == new_icon


def test_theme_propagates_to_tab_guis():
    tb = make()
    theme = Theme()
    tb.set_theme(theme, 0)
    assert all(gui.theme is theme for gui in tb.guis)
    assert all(gui.bgcolor == theme.col_light_bg for gui in tb.guis)


def test_draw_frames_box():
    tb = make()
    tb.please_draw()
    assert tb.vram.get_pixel(0, tb.icon_size + 2) == tb.theme.col_tab_outline


def test_no_tabs_raises_on_pen_up():
    tb = make(tabs=())
    with pytest.raises(IndexError):
        tb.pen_up(50, 50)
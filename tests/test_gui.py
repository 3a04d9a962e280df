from tobkit.gui import GUI, Screen
from tobkit.widget import Framebuffer, Widget


class Recorder(Widget):
    def __init__(self, x, y, w, h, log, name, **kw):
        super().__init__(x, y, w, h, Framebuffer(), **kw)
        self.log = log
        self.name = name

    def please_draw(self):
        self.log.append(("draw", self.name))

    def pen_down(self, x, y):
        self.log.append(("down", self.name))

    def pen_up(self, x, y):
        self.log.append(("up", self.name))

    def pen_move(self, x, y):
        self.log.append(("move", self.name))

    def button_press(self, buttons):
        self.log.append(("press", self.name))


def test_pen_routing_to_hit_widget():
    log = []
    gui = GUI()
    a = Recorder(0, 0, 10, 10, log, "a")
    b = Recorder(20, 0, 10, 10, log, "b")
    gui.register_widget(a)
    gui.register_widget(b)
    gui.pen_down(25, 5)
    gui.pen_move(26, 5)
    gui.pen_up(26, 5)
    assert log == [("down", "b"), ("move", "b"), ("up", "b")]
    assert gui.active_widget is None


def test_edges_do_not_hit():
    gui = GUI()
    a = Recorder(0, 0, 10, 10, [], "a")
    gui.register_widget(a)
    assert gui.widget_at(0, 5) is None
    assert gui.widget_at(5, 5) is a


def test_invisible_widget_not_hit():
    gui = GUI()
    gui.register_widget(Recorder(0, 0, 10, 10, [], "a", visible=False))
    assert gui.widget_at(5, 5) is None


def test_overlay_takes_priority_on_active_screen():
    gui = GUI()
    a = Recorder(0, 0, 10, 10, [], "a")
    o = Recorder(100, 100, 10, 10, [], "o")
    gui.register_widget(a)
    gui.register_overlay_widget(o, 0, Screen.SUB)
    assert gui.widget_at(5, 5) is o
    gui.unregister_overlay_widget(Screen.SUB)
    assert gui.widget_at(5, 5) is a


def test_screen_switch_selects_list():
    gui = GUI()
    m = Recorder(0, 0, 10, 10, [], "m")
    gui.register_widget(m, 0, Screen.MAIN)
    assert gui.widget_at(5, 5) is None
    gui.switch_screens()
    assert gui.active_screen == Screen.MAIN
    assert gui.widget_at(5, 5) is m


def test_button_shortcuts_last_bit_wins():
    log = []
    gui = GUI()
    a = Recorder(0, 0, 5, 5, log, "a")
    b = Recorder(0, 0, 5, 5, log, "b")
    gui.register_widget(a, 0b01)
    gui.register_widget(b, 0b10)
    assert gui.widget_for_buttons(0b11) is b
    gui.button_press(0b01)
    assert log == [("press", "a")]


def test_unregister_removes_widget_and_shortcut():
    gui = GUI()
    a = Recorder(0, 0, 10, 10, [], "a")
    gui.register_widget(a, 0b1)
    gui.pen_down(5, 5)
    gui.unregister_widget(a)
    assert gui.active_widget is None
    assert gui.widget_at(5, 5) is None
    assert gui.widget_for_buttons(0b1) is None


def test_draw_in_reverse_order_skipping_occluded():
    log = []
    gui = GUI()
    gui.register_widget(Recorder(0, 0, 5, 5, log, "a"))
    gui.register_widget(Recorder(0, 0, 5, 5, log, "b"))
    gui.register_widget(Recorder(0, 0, 5, 5, log, "c", occluded=True))
    gui.draw()
    assert log == [("draw", "b"), ("draw", "a")]


def test_set_theme_propagates():
    gui = GUI()
    a = Recorder(0, 0, 5, 5, [], "a")
    gui.register_widget(a)
    gui.set_theme("t", 3)
    assert (a.theme, a.bgcolor) == ("t", 3)


def test_occlude_and_reveal_all():
    log = []
    gui = GUI()
    a = Recorder(0, 0, 5, 5, log, "a")
    gui.register_widget(a)
    gui.occlude_all()
    assert a.occluded
    gui.reveal_all()
    assert not a.occluded and log == [("draw", "a")]
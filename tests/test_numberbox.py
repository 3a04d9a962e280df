import pytest

from tobkit.numberbox import NumberBox, NumberSlider
from tobkit.theme import Theme
from tobkit.widget import Framebuffer


def make_box(value=5, minimum=0, maximum=10):
    nb = NumberBox(20, 30, 40, 18, Framebuffer(), value, minimum, maximum, 2)
    nb.set_theme(Theme(), 0)
    return nb


def make_slider(value=5, minimum=0, maximum=100, **kwargs):
    ns = NumberSlider(20, 30, 40, 18, Framebuffer(), value, minimum, maximum, **kwargs)
    ns.set_theme(Theme(), 0)
    return ns


def test_box_up_button_increments_and_notifies():
    nb = make_box(value=5)
    seen = []
    nb.register_change_callback(seen.append)
    nb.pen_down(nb.x + 3, nb.y + 3)
    assert nb.value == 5 + 1
    assert seen == [nb.value]
    assert nb.btnstate == 1


def test_box_down_button_decrements():
    nb = make_box(value=5)
    nb.pen_down(nb.x + 3, nb.y + 12)
    assert nb.value == 5 - 1
    assert nb.btnstate == 2


def test_box_stays_at_maximum_without_callback():
    nb = make_box(value=10, maximum=10)
    seen = []
    nb.register_change_callback(seen.append)
    nb.pen_down(nb.x + 3, nb.y + 3)
    assert nb.value == 10
    assert seen == []


def test_box_stays_at_minimum():
    nb = make_box(value=0, minimum=0)
    nb.pen_down(nb.x + 3, nb.y + 12)
    assert nb.value == 0


def test_box_pen_up_resets_button_state():
    nb = make_box()
    nb.pen_down(nb.x + 3, nb.y + 3)
    nb.pen_up(nb.x + 3, nb.y + 3)
    assert nb.btnstate == 0


@pytest.mark.parametrize("requested,expected", [(200, 10), (7, 7)])
def test_box_set_value_clamps_and_reports_request(requested, expected):
    nb = make_box(value=3, minimum=2, maximum=10)
    seen = []
    nb.register_change_callback(seen.append)
    nb.set_value(requested)
    assert nb.value == expected
    assert seen == [requested]


def test_box_draw_outlines_widget():
    nb = make_box()
    nb.please_draw()
    assert nb.vram.get_pixel(nb.x, nb.y) == nb.theme.col_outline
    assert nb.vram.get_pixel(nb.x + nb.width - 1, nb.y + nb.height - 1) == nb.theme.col_outline


def test_slider_arrow_taps():
    ns = make_slider(value=5)
    seen = []
    ns.register_change_callback(seen.append)
    ns.pen_down(ns.x + 3, ns.y + 3)
    assert ns.value == 5 + 1
    ns.pen_down(ns.x + 3, ns.y + 12)
    assert ns.value == 5
    assert seen == [6, 5]
    assert ns.btnstate is True


def test_slider_small_move_does_nothing():
    ns = make_slider(value=5)
    ns.pen_down(ns.x + 20, ns.y + 5)
    ns.pen_move(ns.x + 20, ns.y + 4)
    assert ns.value == 5


def test_slider_drag_up_increases_and_down_decreases():
    ns = make_slider(value=50)
    ns.pen_down(ns.x + 20, ns.y + 10)
    ns.pen_move(ns.x + 20, ns.y + 2)
    after_up = ns.value
    assert after_up > 50
    ns.pen_move(ns.x + 20, ns.y + 10)
    assert ns.value < after_up


def test_slider_large_range_steps_by_25():
    ns = make_slider(value=100, maximum=1000)
    ns.pen_down(ns.x + 20, ns.y + 10)
    ns.pen_move(ns.x + 20, ns.y + 8)
    assert ns.value == 100 + 25


def test_slider_drag_clamps_to_maximum():
    ns = make_slider(value=95, maximum=100)
    ns.pen_down(ns.x + 20, ns.y + 15)
    ns.pen_move(ns.x + 20, ns.y + 1)
    assert ns.value == 100


def test_slider_post_change_on_pen_up():
    ns = make_slider(value=7)
    posted = []
    ns.register_post_change_callback(posted.append)
    ns.pen_up(0, 0)
    assert posted == [7]
    assert ns.btnstate is False


def test_slider_disabled_ignores_input():
    ns = make_slider(value=7)
    ns.disable()
    ns.pen_down(ns.x + 3, ns.y + 3)
    assert ns.value == 7


def test_slider_set_value_clamps():
    ns = make_slider(value=5, minimum=-10, maximum=10)
    seen = []
    ns.register_change_callback(seen.append)
    ns.set_value(-50)
    assert ns.value == -10
    assert seen == [-50]
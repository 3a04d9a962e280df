import pytest

from tobkit.pixmap import GradientIcon, Pixmap
from tobkit.theme import Theme, interpolate_color
from tobkit.widget import Framebuffer


@pytest.fixture
def theme():
    return Theme()


@pytest.fixture
def fb():
    return Framebuffer()


def test_pixmap_draws_only_opaque_pixels(fb):
    pm = Pixmap(5, 6, 2, 1, [0x8000 | 5, 7], fb)
    pm.please_draw()
    assert fb.get_pixel(5, 6) == 0x8000 | 5
    assert fb.get_pixel(6, 6) == 0


def test_pixmap_push(fb):
    pm = Pixmap(5, 6, 1, 1, [0], fb)
    calls = []
    pm.register_push_callback(lambda: calls.append(1))
    pm.pen_down(5, 6)
    assert calls == [1]


def test_gradient_icon_pixel_kinds(fb, theme):
    word = 1 | (2 << 2) | (3 << 6) | (1 << 8)
    icon = GradientIcon(10, 10, 4, 2, [word], fb)
    icon.set_theme(theme, theme.col_bg)
    icon.please_draw()
    assert fb.get_pixel(10, 10) == theme.col_light_ctrl
    assert fb.get_pixel(11, 10) == theme.col_outline
    assert fb.get_pixel(12, 10) == 0
    assert fb.get_pixel(13, 10) == theme.col_outline
    expected = interpolate_color(theme.col_light_ctrl, theme.col_dark_ctrl, 4096 // 2)
    assert fb.get_pixel(10, 11) == expected


def test_gradient_icon_reads_next_word_after_16_pixels(fb, theme):
    icon = GradientIcon(0, 0, 17, 1, [0, 1], fb)
    icon.set_theme(theme, theme.col_bg)
    icon.please_draw()
    assert fb.get_pixel(15, 0) == 0
    assert fb.get_pixel(16, 0) == theme.col_light_ctrl


def test_gradient_icon_push(fb):
    icon = GradientIcon(0, 0, 1, 1, [0], fb)
    calls = []
    icon.register_push_callback(lambda: calls.append(1))
    icon.pen_down(0, 0)
    assert calls == [1]
from tobkit.widget import Font, Framebuffer, Widget


class Counting(Widget):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.draws = 0

    def please_draw(self):
        self.draws += 1


def make(**kw):
    return Counting(10, 20, 30, 15, Framebuffer(), **kw)


def test_framebuffer_clips_writes():
    fb = Framebuffer(4, 4)
    fb.set_pixel(10, 10, 7)
    fb.set_pixel(1, 2, 7)
    assert fb.get_pixel(1, 2) == 7
    assert sum(fb.pixels) == 7


def test_draw_box_outline_only():
    w = make()
    w.draw_box(0, 0, 5, 4, 9)
    fb = w.vram
    assert fb.get_pixel(10, 20) == 9
    assert fb.get_pixel(14, 23) == 9
    assert fb.get_pixel(12, 21) == 0


def test_full_box_fills():
    w = make()
    w.draw_full_box(1, 1, 3, 2, 5)
    cells = [w.vram.get_pixel(11 + i, 21 + j) for i in range(3) for j in range(2)]
    assert cells == [5] * 6
    assert w.vram.get_pixel(14, 21) == 0


def test_gradient_equal_colours_is_box():
    w = make()
    w.draw_gradient(3, 3, 0, 0, 2, 2)
    assert w.vram.get_pixel(11, 21) == 3


def test_show_hide_and_draw_requests():
    w = make(visible=False)
    w.bgcolor = 4
    w.show()
    assert w.draws == 1 and w.is_exposed()
    w.hide()
    assert not w.visible
    assert w.vram.get_pixel(10, 20) == 4


def test_reveal_redraws_only_when_visible():
    w = make(occluded=True)
    assert w.set_occluded(False) is True
    assert w.draws == 1
    w.occlude()
    w.visible = False
    w.reveal()
    assert w.draws == 1


def test_enable_disable_changes():
    w = make()
    assert w.set_enabled(False) is True
    assert w.set_enabled(False) is False
    assert w.draws == 1


def test_string_width_invariants():
    w = make()
    one = w.get_string_width("a")
    assert w.get_string_width("ab") == 2 * one + 1
    assert w.get_string_width("") == 0
    assert w.get_string_width("abc", 1) == one


def test_draw_string_respects_maxwidth():
    w = make()
    w.draw_string("aaaa", 0, 0, 1, maxwidth=w.get_string_width("a"))
    xs = {i % 256 for i, p in enumerate(w.vram.pixels) if p}
    assert xs and max(xs) - min(xs) < Font.block().char_widths[1]


def test_bres_line_endpoints():
    w = make()
    w.draw_bres_line(0, 0, 5, 2, 8)
    w.draw_bres_line(0, 0, 1, 6, 8)
    assert w.vram.get_pixel(10, 20) == 8
    assert w.vram.get_pixel(15, 22) == 8
    assert w.vram.get_pixel(11, 26) == 8


def test_monochrome_icon():
    w = make()
    w.draw_monochrome_icon(0, 0, 4, 2, bytes([0b00100001]), 6)
    assert w.vram.get_pixel(10, 20) == 6
    assert w.vram.get_pixel(11, 21) == 6
    assert w.vram.get_pixel(11, 20) == 0


def test_is_in_rect_inclusive():
    assert Widget.is_in_rect(5, 5, 5, 5, 6, 6)
    assert not Widget.is_in_rect(7, 5, 5, 5, 6, 6)


def test_get_and_set_pos():
    w = make()
    w.set_pos(1, 2)
    assert w.get_pos() == (1, 2, 30, 15)
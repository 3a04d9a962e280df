from tobkit.memoryindicator import MemoryIndicator
from tobkit.theme import Theme
from tobkit.widget import Framebuffer


class FakeMemory:
    def __init__(self, free):
        self.free = free

    def __call__(self):
        return self.free


def make(total=1000):
    mem = FakeMemory(total)
    mi = MemoryIndicator(10, 10, 50, 8, Framebuffer(), free_memory=mem)
    mi.set_theme(Theme(), 0)
    return mi, mem


def test_total_taken_at_construction():
    mi, mem = make(1000)
    assert mi.total_ram == 1000


def test_nothing_used_is_zero_percent():
    mi, mem = make(1000)
    assert mi.usage_percent() == 0


def test_all_used_is_hundred_percent():
    mi, mem = make(1000)
    mem.free = 0
    assert mi.usage_percent() == 100


def test_half_used():
    mi, mem = make(1000)
    mem.free = 500
    assert mi.usage_percent() == 50


def test_more_free_than_at_start_clamps_to_zero():
    mi, mem = make(1000)
    mem.free = 5000
    assert mi.usage_percent() == 0


def test_percent_grows_as_memory_is_used():
    mi, mem = make(1000)
    readings = []
    for free in (900, 600, 300, 100):
        mem.free = free
        readings.append(mi.usage_percent())
    assert readings == sorted(readings)


def test_draw_empty_bar_shows_background():
    mi, mem = make(1000)
    mi.please_draw()
    t = mi.theme
    assert mi.vram.get_pixel(mi.x, mi.y) == t.col_outline
    assert mi.vram.get_pixel(mi.x + 1, mi.y + 1) == t.col_light_bg


def test_draw_full_bar_uses_alert_colour():
    mi, mem = make(1000)
    mem.free = 0
    mi.please_draw()
    t = mi.theme
    assert mi.vram.get_pixel(mi.x + mi.width - 2, mi.y + 1) == t.col_mem_alert


def test_draw_low_usage_uses_ok_colour():
    mi, mem = make(1000)
    mem.free = 800
    mi.please_draw()
    assert mi.vram.get_pixel(mi.x + 1, mi.y + 1) == mi.theme.col_mem_ok
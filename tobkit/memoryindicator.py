"""A bar showing how much of the memory available at start-up is in use."""

from __future__ import annotations

import os
from collections.abc import Callable

from .theme import interpolate_color
from .widget import Widget


def _system_free_memory() -> int:
    """Free physical memory in bytes, or 0 where the system does not tell."""
    try:
        return os.sysconf("SC_AVPHYS_PAGES") * os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError):
        return 0


class MemoryIndicator(Widget):
    """A bar filled in proportion to memory used since construction."""

    def __init__(self, x, y, width, height, vram=None, visible=True,
                 free_memory: Callable[[], int] | None = None):
        super().__init__(x, y, width, height, vram, visible)
        self.free_memory = free_memory if free_memory is not None else _system_free_memory
        self.total_ram = self.free_memory()

    def _used(self) -> int:
        return max(0, self.total_ram - self.free_memory())

    def usage_percent(self) -> int:
        """Percentage of the initial free memory now in use, 0 to 100."""
        if self.total_ram <= 0:
            return 0
        return max(0, min(100, 100 * self._used() // self.total_ram))

    def please_draw(self) -> None:
        if self.is_exposed():
            self._draw()

    def _draw(self) -> None:
        if not self.is_exposed():
            return
        t = self.theme
        inner = self.width - 2
        used = self._used()
        boxwidth = 0 if self.total_ram <= 0 else max(0, min(inner, inner * used // self.total_ram))
        percent = self.usage_percent()

        if percent < 62:
            col = t.col_mem_ok
        elif percent < 78:
            col = interpolate_color(t.col_mem_warn, t.col_mem_ok, (percent - 62) << 8)
        elif percent < 94:
            col = interpolate_color(t.col_mem_alert, t.col_mem_warn, (percent - 78) << 8)
        else:
            col = t.col_mem_alert

        self.draw_border(t.col_outline)
        self.draw_full_box(1, 1, inner, self.height - 2, t.col_light_bg)
        self.draw_full_box(1, 1, boxwidth, self.height - 2, col)
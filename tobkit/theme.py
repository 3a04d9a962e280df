"""Colour handling and themes: 15-bit colours, default scheme and theme files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from os import PathLike

logger = logging.getLogger(__name__)

BIT15 = 0x8000


def rgb15(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, green and blue channels into a 15-bit colour."""
    return (r & 0x1F) | ((g & 0x1F) << 5) | ((b & 0x1F) << 10)


def interpolate_color(col1: int, col2: int, pos: int) -> int:
    """Blend two colours; ``pos`` runs from 0 (col1) to 4096 (col2)."""
    result = 0
    for shift in (0, 5, 10):
        a = (col1 >> shift) & 0x1F
        b = (col2 >> shift) & 0x1F
        value = a + (((b - a) * pos) >> 12)
        result |= (max(0, min(31, value)) & 0x1F) << shift
    return result | (col1 & BIT15)


def string_to_rgb15(text: str) -> int:
    """Convert an ``rrggbb`` hex string to an opaque 15-bit colour."""
    if text is None:
        raise ValueError("no colour given")
    match = re.match(r"([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})", text)
    if not match:
        raise ValueError(f"not a colour: {text!r}")
    r, g, b = (int(part, 16) for part in match.groups())
    return rgb15(r >> 3, g >> 3, b >> 3) | BIT15


def rgb15_to_string(col: int) -> str:
    """Convert a 15-bit colour to an ``rrggbb`` hex string."""
    return "%02x%02x%02x" % (
        (col & 0x1F) << 3,
        ((col >> 5) & 0x1F) << 3,
        ((col >> 10) & 0x1F) << 3,
    )


def _default_colors() -> dict[str, int]:
    o = BIT15
    c: dict[str, int] = {}
    c["col_bg"] = rgb15(4, 6, 15) | o
    c["col_env_bg"] = c["col_bg"]
    c["col_medium_bg"] = rgb15(9, 11, 17) | o
    c["col_light_bg"] = rgb15(16, 18, 24) | o
    c["col_lighter_bg"] = rgb15(23, 25, 31) | o
    c["col_light_ctrl"] = rgb15(31, 31, 0) | o
    c["col_dark_ctrl"] = rgb15(31, 18, 0) | o
    c["col_light_ctrl_disabled"] = c["col_light_bg"]
    c["col_dark_ctrl_disabled"] = c["col_medium_bg"]
    c["col_selected_tab"] = c["col_light_bg"]
    c["col_unselected_tab"] = c["col_medium_bg"]
    c["col_list_1"] = c["col_medium_bg"]
    c["col_list_2"] = c["col_light_bg"]
    c["col_list_highlight1"] = rgb15(28, 15, 0) | o
    c["col_list_highlight2"] = rgb15(28, 28, 0) | o
    c["col_scrollbar_bg1"] = c["col_medium_bg"]
    c["col_scrollbar_bg2"] = c["col_light_bg"]
    c["col_scrollbar_inactive"] = c["col_dark_ctrl"]
    c["col_scrollbar_active"] = c["col_light_ctrl"]
    c["col_scrollbar_arr_bg1"] = c["col_dark_ctrl"]
    c["col_scrollbar_arr_bg2"] = c["col_light_ctrl"]
    c["col_outline"] = rgb15(0, 0, 0) | o
    c["col_tab_outline"] = c["col_outline"]
    c["col_sepline"] = rgb15(31, 31, 0) | o
    c["col_icon"] = rgb15(0, 0, 0) | o
    c["col_icon_bt"] = c["col_icon"]
    c["col_checkmark"] = c["col_icon"]
    c["col_text"] = rgb15(0, 0, 0) | o
    c["col_text_light"] = c["col_light_bg"]
    c["col_text_bt"] = c["col_text"]
    c["col_text_value"] = c["col_text"]
    c["col_text_lb"] = c["col_text"]
    c["col_text_lb_highlight"] = c["col_text"]
    c["col_signal"] = rgb15(31, 0, 0) | o
    c["col_signal_off"] = rgb15(18, 0, 0) | o
    c["col_piano_label"] = rgb15(0, 0, 0)
    c["col_piano_label_inv"] = rgb15(31, 31, 31)
    c["col_loop"] = rgb15(7, 25, 5) | o
    c["col_env_sustain"] = rgb15(0, 31, 0) | o
    c["col_env_line"] = c["col_dark_ctrl"]
    c["col_env_pt"] = c["col_light_ctrl"]
    c["col_env_pt_border"] = c["col_outline"]
    c["col_env_pt_border_active"] = c["col_signal"]
    c["col_mem_ok"] = rgb15(17, 24, 16) | o
    c["col_mem_warn"] = rgb15(31, 31, 0) | o
    c["col_mem_alert"] = rgb15(31, 0, 0) | o
    c["col_typewriter_cursor"] = rgb15(0, 0, 0) | o
    c["col_smp_bg"] = c["col_bg"]
    c["col_smp_bg_sel"] = c["col_light_ctrl"]
    c["col_smp_waveform"] = rgb15(31, 19, 0) | o
    c["col_smp_waveform_sel"] = rgb15(0, 0, 0) | o
    c["col_pv_bg"] = c["col_bg"]
    c["col_pv_chn"] = c["col_light_bg"]
    c["col_pv_lines"] = c["col_light_bg"]
    c["col_pv_sublines"] = rgb15(7, 9, 17) | o
    c["col_pv_lines_record"] = c["col_dark_ctrl"]
    c["col_pv_cb_col1"] = c["col_medium_bg"]
    c["col_pv_cb_col2"] = c["col_light_bg"]
    c["col_pv_cb_col1_highlight"] = c["col_list_highlight1"]
    c["col_pv_cb_col2_highlight"] = c["col_list_highlight2"]
    c["col_pv_left_numbers"] = c["col_list_highlight1"]
    c["col_pv_notes"] = rgb15(9, 15, 31) | o
    c["col_pv_notes_dark"] = rgb15(0, 6, 26) | o
    c["col_pv_instr"] = rgb15(31, 11, 0) | o
    c["col_pv_instr_dark"] = rgb15(20, 6, 0) | o
    c["col_pv_volume"] = rgb15(0, 27, 0) | o
    c["col_pv_volume_dark"] = rgb15(0, 16, 0) | o
    c["col_pv_effect"] = rgb15(31, 12, 29) | o
    c["col_pv_effect_dark"] = rgb15(12, 6, 18) | o
    c["col_pv_effect_param"] = rgb15(30, 26, 8) | o
    c["col_pv_effect_param_dark"] = rgb15(9, 8, 5) | o
    c["col_pv_cb_sel_highlight"] = rgb15(31, 24, 0) | o
    c["col_pv_pb"] = c["col_outline"]
    c["col_pv_pb_cell"] = c["col_outline"]
    c["col_pv_mutesolo_text"] = c["col_text"]
    c["col_pv_mutesolo_col1"] = c["col_pv_cb_col1"]
    c["col_pv_mutesolo_col2"] = c["col_pv_cb_col2"]
    c["col_pv_mutesolo_col1_highlight"] = c["col_pv_cb_col1_highlight"]
    c["col_pv_mutesolo_col2_highlight"] = c["col_pv_cb_col2_highlight"]
    c["col_pv_left_numbers_highlight"] = c["col_pv_left_numbers"]
    c["col_list_sep_vertical"] = c["col_sepline"]
    c["col_tb_bg"] = c["col_dark_ctrl"]
    c["col_tb_fg_off"] = c["col_text_bt"]
    c["col_tb_fg_on"] = c["col_light_ctrl"]
    c["col_piano_full_col1"] = rgb15(31, 31, 31) | o
    c["col_piano_full_col2"] = rgb15(25, 25, 25) | o
    c["col_piano_half_col1"] = rgb15(0, 0, 0) | o
    c["col_piano_half_col2"] = rgb15(8, 8, 8) | o
    c["col_piano_full_highlight_col1"] = rgb15(24, 24, 30) | o
    c["col_piano_full_highlight_col2"] = rgb15(20, 20, 26) | o
    c["col_piano_half_highlight_col1"] = rgb15(20, 8, 8) | o
    c["col_piano_half_highlight_col2"] = rgb15(13, 0, 0) | o
    c["col_piano_outline"] = rgb15(0, 0, 0) | o
    c["col_typewriter_bg"] = rgb15(31, 31, 31) | o
    c["col_typewriter_key"] = rgb15(22, 22, 28) | o
    c["col_typewriter_key_label"] = rgb15(0, 0, 0) | o
    c["col_typewriter_mod_key"] = rgb15(17, 17, 26) | o
    c["col_typewriter_pressed_key"] = c["col_typewriter_bg"]
    c["col_typewriter_mod_key_label"] = c["col_typewriter_key_label"]
    return c


COLOR_NAMES: tuple[str, ...] = tuple(_default_colors())
NUM_COLORS = len(COLOR_NAMES)


class ThemeParseError(ValueError):
    """Raised when a theme file cannot be parsed."""


class ColorScheme:
    """The full set of named colours, indexable by theme-file key."""

    def __init__(self) -> None:
        for name, value in _default_colors().items():
            setattr(self, name, value)

    def __getitem__(self, index: int) -> int:
        return getattr(self, COLOR_NAMES[index])

    def __setitem__(self, index: int, value: int) -> None:
        setattr(self, COLOR_NAMES[index], value)

    def __len__(self) -> int:
        return NUM_COLORS

    def as_list(self) -> list[int]:
        return [getattr(self, name) for name in COLOR_NAMES]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorScheme):
            return NotImplemented
        return self.as_list() == other.as_list()


_LINE_RE = re.compile(
    r"\s*([+-]?\d+)=([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})"
)


def parse_theme(lines: Iterable[str]) -> dict[int, int]:
    """Parse ``key=rrggbb`` lines into a mapping of colour index to colour."""
    result: dict[int, int] = {}
    meaningful = (line for line in lines if line.strip())
    for lineno, line in enumerate(meaningful, start=1):
        if lineno > NUM_COLORS:
            break
        match = _LINE_RE.match(line)
        if not match or int(match.group(1)) < 0:
            raise ThemeParseError(f"theme parse error on line {lineno}")
        key = int(match.group(1))
        if key > NUM_COLORS - 1:
            raise ThemeParseError(
                f"theme parse error on line {lineno} "
                f"(key out of bounds, max {NUM_COLORS - 1})"
            )
        r, g, b = (int(match.group(i), 16) for i in (2, 3, 4))
        result[key] = rgb15(r >> 3, g >> 3, b >> 3) | BIT15
    if not result:
        raise ThemeParseError("ignoring empty theme")
    if len(result) < NUM_COLORS - 1:
        logger.debug(
            "theme only specifies %d colors, using defaults for remaining %d",
            len(result),
            NUM_COLORS - len(result),
        )
    return result


class Theme(ColorScheme):
    """A colour scheme that can be loaded from a theme file."""

    def __init__(self, themepath: str | PathLike | None = None, use_fat: bool = True):
        super().__init__()
        if use_fat and themepath is not None:
            self.load_theme(themepath)

    def _apply(self, scheme: ColorScheme) -> None:
        for name in COLOR_NAMES:
            setattr(self, name, getattr(scheme, name))
        self.col_piano_label &= ~BIT15
        self.col_piano_label_inv &= ~BIT15

    def load_theme(self, themefile: str | PathLike) -> bool:
        """Load colours from a file; return False and keep colours on failure."""
        try:
            with open(themefile, encoding="ascii", errors="replace") as fh:
                colors = parse_theme(fh)
        except OSError:
            logger.debug("no theme found at '%s', using builtin", themefile)
            return False
        except ThemeParseError as exc:
            logger.debug("failed to parse theme at '%s' (%s), using builtin", themefile, exc)
            return False
        scheme = ColorScheme()
        for key, value in colors.items():
            scheme[key] = value
        self._apply(scheme)
        logger.debug("loaded theme '%s'", themefile)
        return True

    def load_default(self) -> None:
        """Reset every colour to the built-in scheme."""
        self._apply(ColorScheme())
import pytest

from tobkit.theme import (
    BIT15,
    NUM_COLORS,
    ColorScheme,
    Theme,
    ThemeParseError,
    interpolate_color,
    parse_theme,
    rgb15,
    rgb15_to_string,
    string_to_rgb15,
)


def test_rgb15_packs_channels():
    assert rgb15(31, 0, 0) == 0x1F
    assert rgb15(0, 31, 0) == 0x1F << 5
    assert rgb15(0, 0, 31) == 0x1F << 10


def test_string_roundtrip():
    col = string_to_rgb15("f80000")
    assert col == rgb15(31, 0, 0) | BIT15
    assert rgb15_to_string(col) == "f80000"


def test_string_to_rgb15_rejects_garbage():
    with pytest.raises(ValueError):
        string_to_rgb15("zz")


def test_interpolate_endpoints():
    a, b = rgb15(0, 10, 20), rgb15(31, 0, 4)
    assert interpolate_color(a, b, 0) == a
    assert interpolate_color(a, b, 4096) == b


def test_parse_theme_reads_entries():
    result = parse_theme(["0=ff0000 comment\n", "\n", "3=00ff00\n"])
    assert result == {0: rgb15(31, 0, 0) | BIT15, 3: rgb15(0, 31, 0) | BIT15}


@pytest.mark.parametrize(
    "lines",
    [["nonsense\n"], [f"{NUM_COLORS}=ffffff\n"], [], ["-1=ffffff\n"]],
)
def test_parse_theme_errors(lines):
    with pytest.raises(ThemeParseError):
        parse_theme(lines)


def test_scheme_indexing_matches_attributes():
    scheme = ColorScheme()
    assert len(scheme) == NUM_COLORS
    assert scheme[0] == scheme.col_bg
    scheme[0] = 5
    assert scheme.col_bg == 5


def test_load_theme_file(tmp_path):
    path = tmp_path / "x.nttheme"
    path.write_text("0=ff0000\n")
    theme = Theme(path)
    assert theme.col_bg == rgb15(31, 0, 0) | BIT15
    assert theme.col_medium_bg == ColorScheme().col_medium_bg


def test_load_theme_failures_keep_colors(tmp_path):
    theme = Theme()
    bad = tmp_path / "bad.nttheme"
    bad.write_text("oops\n")
    assert theme.load_theme(bad) is False
    assert theme.load_theme(tmp_path / "missing") is False
    assert theme == ColorScheme()


def test_load_default_clears_label_bits():
    theme = Theme()
    theme.col_piano_label = 0xFFFF
    theme.load_default()
    assert theme.col_piano_label & BIT15 == 0
    assert theme.col_bg == ColorScheme().col_bg
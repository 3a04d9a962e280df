# tobkit

A compact widget toolkit that draws into a 256×192 framebuffer of 15-bit
colours (RGB15 with bit 15 as the opaque flag). It is built for stylus and
button driven interfaces: widgets receive `pen_down`, `pen_move`, `pen_up`,
`button_press` and `button_release` events and paint themselves with the
colours of a `Theme`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is in it

- `tobkit.theme` – `ColorScheme`, `Theme`, `rgb15`, `interpolate_color`,
  `string_to_rgb15`, `rgb15_to_string`, and a loader for theme files of
  `index=rrggbb` lines (`parse_theme`, raising `ThemeParseError` on
  malformed input; `Theme.load_theme` returns `False` and keeps the current
  colours when the file is missing or malformed; `Theme.load_default` resets
  to the built-in scheme).
- `tobkit.widget` – `Framebuffer` (a list of pixels; writes outside it are
  dropped), `Font` and the `Widget` base class with drawing helpers
  (`draw_string`, `draw_box`, `draw_full_box`, `draw_gradient`,
  `draw_bres_line`, `draw_monochrome_icon`, …) and visibility handling
  (`show`, `hide`, `occlude`, `reveal`, `enable`, `disable`).
- `tobkit.gui` – `GUI`, which holds the widgets of the two screens
  (`Screen.MAIN`, `Screen.SUB`), routes touches and button shortcuts, and
  supports an overlay widget such as a popup.
- Widgets:
  - `tobkit.button` – `Button`, `BitButton`
  - `tobkit.checkbox` – `CheckBox`
  - `tobkit.label` – `Label`, `GroupBox`
  - `tobkit.pixmap` – `Pixmap`, `GradientIcon`
  - `tobkit.togglebutton` – `ToggleButton`
  - `tobkit.radiobutton` – `RadioButton`, `RadioButtonGroup`
  - `tobkit.listbox` – `ListBox`
  - `tobkit.fileselector` – `FileSelector` and its `File` entries; it lists a
    directory with the operating system's directory functions, filters files
    by extension (`add_filter`, `select_filter`) and enters directories when
    tapped
  - `tobkit.numberbox` – `NumberBox`, `NumberSlider`
  - `tobkit.memoryindicator` – `MemoryIndicator`
  - `tobkit.messagebox` – `MessageBox`, built from a message and a sequence
    of `(caption, callback)` pairs
  - `tobkit.tabbox` – `TabBox` with `Orientation.TOP` or `Orientation.LEFT`
  - `tobkit.typewriter` – `Typewriter`, an on-screen keyboard, and `key_at`
    for looking up the key under a keyboard tile

## Example

```python
from tobkit.theme import Theme
from tobkit.widget import Framebuffer
from tobkit.gui import GUI, Screen
from tobkit.button import Button

fb = Framebuffer()
theme = Theme()
theme.load_default()

gui = GUI()
gui.set_theme(theme, theme.col_bg)

ok = Button(10, 10, 50, 14, fb)
ok.set_caption("ok")
ok.register_push_callback(lambda: print("pushed"))
gui.register_widget(ok, 0, Screen.SUB)

gui.draw()
gui.pen_down(20, 15)
gui.pen_up(20, 15)   # prints "pushed"
```

Themes can be read from disk:

```python
theme = Theme()
if not theme.load_theme("dark.nttheme"):
    theme.load_default()
```

## What it does not do

- It does not put anything on a display or read a touch screen. Widgets paint
  into a `Framebuffer`, and the caller feeds pen and button events in; showing
  the pixels and producing the events is up to the application.
- No glyph font is included. The default `Font.block()` draws every
  non-space character as a solid block; supply your own `Font` for readable
  text.
- No bitmaps are included: the tick of a `CheckBox`, tab icons and button
  bitmaps are passed in by the caller. `Typewriter` keeps its keyboard as a
  tile map (`map_base`) and only fills in tile numbers when given a
  `tile_map`; it does not draw key graphics itself.
- There is no piano keyboard widget and no ready-made theme selection dialog;
  a theme picker can be assembled from `FileSelector`, `Button` and
  `Theme.load_theme`.
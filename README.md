# termframe

A small layout toolkit for true-colour terminals. You build a tree of
elements (frames, text, images). Each element has a size, a position, a
border, padding and colours. Frames place their children side by side or
stack them. Rendering produces ANSI escape sequences that draw the whole
tree at absolute cursor positions.

## Installing

```
pip install termframe
```

Image support uses Pillow. Pillow is installed with the package.

## Building blocks

- `termframe.style` holds plain frozen value types: `Position`, `Size`,
  `Border`, `Padding`, `Alignment`, `Color` and `Cell`. It also holds the
  constants `DIRECTION_H` / `DIRECTION_V`, `EXPANDABLE` / `NOT_EXPANDABLE`,
  the alignment codes `LEFT`, `CENTER`, `RIGHT`, `TOP` and `BOTTOM`, the
  named colours (`BLACK`, `WHITE`, `RED`, ...) and the text attribute
  sequences (`NORMAL`, `BOLD`, ...). `Color` raises `ValueError` for a
  channel outside 0–255. `Color.foreground()` and `Color.background()` return
  the 24-bit escape sequences for a colour.
- `termframe.element.Element` is the base class. It has the attributes
  `color`, `background_color`, `expandable`, `border` and `padding`. Its
  `size`, `width`, `height` and `position` properties include the border and
  padding. `render()` returns the escape sequence text. `show(out)` writes
  that text to a stream, and to standard output by default. `clone()` returns
  a deep copy.
- `termframe.frame.Frame` is a container. Its `direction` is `DIRECTION_H`
  for a row and `DIRECTION_V` for a column. `add(element)` stores a copy of
  the element and grows the frame to fit it. When a row frame is resized, the
  width left over after its fixed-size children is shared out among its
  expandable children. In a column, every child takes the frame's width. A
  frame supports `len()` and indexing. An index outside its range raises
  `IndexError`.
- `termframe.frame.Button` is a frame and is drawn the same way.
- `termframe.frame.Window` is the top-level frame. `fit_terminal()` sizes it
  to the current terminal. `show(out)` runs the `clear` command and then
  draws the tree. If `clear` cannot be started, it writes a clear-screen
  escape sequence instead.
- `termframe.text.Text` shows one line of text. Setting `text` sets the
  width to the length of the text. The line is placed inside its box by
  `alignment` and cut short with `...` when the box is too narrow.
- `termframe.image.Image` shows a picture loaded from `path`. Each terminal
  cell shows two pixel rows by means of the upper half-block character.
  `set_dimensions((width, height))` samples the picture down to `width`
  columns and `height` pixel rows. It raises `ValueError` in these cases:
  - either dimension is not positive;
  - the height is odd;
  - the picture is smaller than the requested size.

  The sampled cells are available as `cells`.
- `termframe.functions` holds the helpers `spaces(count)`,
  `truncate(text, size)` and `read_field(stream, separator)`. `read_field`
  returns `None` when the stream ends before the separator.

## Example

```python
import sys

from termframe.frame import Frame, Window
from termframe.style import Border, Color
from termframe.text import Text

title = Text()
title.text = "hello"
title.border = Border(True, True, True, True)

status = Text()
status.text = "ready"
status.color = Color(0, 255, 0)

row = Frame()
row.add(title)
row.add(status)

window = Window()
window.add(row)
window.fit_terminal()
window.show(sys.stdout)
```

## What it does not do

The package only draws. It does not read keyboard or mouse input, so a
`Button` does not react to anything. It has no event loop and no
command-line program. It cannot load a layout from a file: you build the
element tree in Python code.

## Running the tests

```
pip install termframe[test]
pytest
```
# textart

A terminal program for drawing text art (ASCII art) on a canvas of 22 rows
by 80 columns. You can edit the canvas with the cursor or use the drawing
tools: flood fill, lines, boxes, nested boxes and fractal trees. Changes can
be undone and redone. You can collect snapshots of the canvas as clips and
play them back as an animation.

The package needs nothing beyond the Python standard library, Python 3.10 or
later.

## Installing

```
pip install .
```

## Running

```
textart
textart --saved-dir path/to/folder
```

`--saved-dir` names the folder that holds saved canvases and animations.
The default is `SavedFiles` in the current directory. The folder must already
exist, because the program does not create it.

The screen shows the canvas with a border on its right and bottom edges. Below
it are a status line (animation flag, undo, redo and clip counts) and a menu.
At the menu you type a letter and press Enter. Case does not matter.

Main menu:

- `E` edit: the arrow keys move the cursor, printable characters are placed
  on the canvas, and `Esc` stops editing
- `M` move: shift the picture by a number of columns and then of rows.
  Anything moved past an edge is lost.
- `R` replace every occurrence of one character with another
- `D` open the drawing menu (see below)
- `C` clear the canvas
- `L` load, or `S` save. Each asks `C` for a canvas or `A` for an animation,
  and then for a name given without `.txt`.
- `Q` quit

Drawing menu:

- `F` fill: move to a cell and type the fill character. The connected area
  of the character under the cursor is filled.
- `L` line: pick a start point and an end point by moving and typing any
  letter
- `B` box: enter a size, then pick the center, or type `C` for the screen
  center
- `N` nested boxes: like `B`, with boxes shrinking by two down to size 2
- `T` tree: enter a height and a branch angle, then pick the base of the
  trunk, or type `C` for the bottom center
- `M` return to the main menu

Both menus also accept:

- `A` turn animated drawing on or off. When it is on, each character is shown
  as it is drawn.
- `U` undo, `O` redo
- `I` add a copy of the current canvas as an animation clip
- `P` play the clips over and over until `Esc` is pressed. This needs at
  least two clips.

`Esc` cancels picking a point.

## Files

A canvas is stored as a plain text file with one line per row, in Latin-1
encoding. When a file is loaded, lines longer than 80 characters and rows
past the 22nd are cut off. An animation named `walk` is stored as
`walk-1.txt`, `walk-2.txt`, … in playing order. Loading reads files until the
next number is missing.

## Using the library

```python
from textart.canvas import Canvas
from textart.drawing import Point, draw_box, fill

canvas = Canvas()
draw_box(canvas, Point(11, 40), 8, None)
fill(canvas, 11, 40, " ", "#", None)
print(canvas.render())
canvas.save("box.txt")
```

The modules:

- `textart.canvas`: `Canvas`, indexed as `canvas[row, col]`, with `copy`,
  `clear`, `replace`, `shift`, `lines`, `render`, `Canvas.load` and `save`.
  The last two raise `OSError` when a file cannot be read or written.
- `textart.drawing`: `Point`, `DrawPoint`, `find_end_point`, `draw_char`,
  `draw_line`, `draw_box`, `draw_nested_boxes`, `draw_tree` and `fill`. Each
  drawing function takes an optional `on_draw(point, ch)` callback that is
  called for every cell drawn.
- `textart.history`: `History` keeps the current canvas. Its `checkpoint()`,
  `undo()` and `redo()` methods raise `HistoryError` when there is nothing to
  undo or redo. `load_clips(base)` and `save_clips(clips, base)` read and
  write numbered clip files.
- `textart.terminal`: `Terminal` handles console output with ANSI cursor
  codes and reads keys. It can take a scripted sequence of keys instead of
  the keyboard.
- `textart.app`: `App` holds the menus, and `main` starts the editor.

## Limitations

- The screen is drawn with ANSI escape codes, so the program needs a terminal
  that understands them.
- Key reading uses the console on Windows and raw terminal input elsewhere.
  There is no mouse support.
- The canvas size is fixed at 22 × 80.
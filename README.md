# pixelkit

Pieces for building a small, keyboard-driven pixel editor. Each module stands on
its own:

- `pixelkit.color`: `Rgba8` (8-bit channels), `Rgb8` and normalised `Rgba`
  colors. Hex parsing with `Rgba8.from_hex`, formatting with `str()`, plus
  `align` and `to_bytes` to convert between flat RGBA byte buffers and lists
  of `Rgba8`.
- `pixelkit.algebra`: `Vector2`, `Vector3`, `Vector4`, `Point2`, a
  column-major `Matrix4` (identity, translation, scale, orthographic
  projection, multiplication with matrices, vectors and points) and `Ortho`.
- `pixelkit.rect`: `Rect`, with width, height, area, center, containment,
  intersection, expansion, flipping and translation by a `Vector2`.
- `pixelkit.pixels`: `Pixels`, a read-only view on a row-major buffer, and
  `scale` for nearest-neighbour enlargement by an integer factor.
- `pixelkit.shape2d`: lines, rectangles and circles (`Shape`) with stroke,
  fill, depth and rotation, triangulated into `Vertex` lists; `Batch`
  collects shapes.
- `pixelkit.sprite2d`: `Sprite` and a `Batch` of sprites sharing one texture,
  turned into textured vertices.
- `pixelkit.palette`: `Palette`, up to 256 colors with gradients and the color
  under the cursor in `hover`.
- `pixelkit.image`: `ImagePath` for `.png` paths, and `read`, `load`, `write`,
  `save_as` and `load_image` for 8-bit RGBA PNG files (through Pillow).
- `pixelkit.history`: `History`, a bounded command history with prefix search,
  saved to and loaded from a text file.
- `pixelkit.parser`: small parser combinators (`Parser`, `ParseError`) and
  parsers for editor commands: `identifier`, `word`, `token`, `whitespace`,
  `comment`, `scale`, `path`, `paths`, `key`, `input_state`, `color`,
  `quoted`, `setting` and `pair`.
- `pixelkit.platform`: `Key`, `ModifiersState`, `KeyboardInput`,
  `MouseButton`, `InputState`, `WindowEvent`, logical and physical positions
  and sizes, and `pixel_ratio`.
- `pixelkit.logger`: `init(level)` installs a console handler on the root
  logger that prefixes each line with an RFC 3339 timestamp; errors go to
  stderr, everything else to stdout.

## Installation

```
pip install pixelkit
```

## Examples

Colors:

```python
from pixelkit.color import Rgba8

c = Rgba8.from_hex("#ff000a")
print(c)               # #ff000a
print(c.alpha(0x88))   # #ff000a88
```

Rectangles:

```python
from pixelkit.rect import Rect

r = Rect(1, 1, 6, 6)
print(r.intersection(Rect(0, 0, 3, 3)))   # Rect(x1=1, y1=1, x2=3, y2=3)
```

Command history with prefix search:

```python
from pixelkit.history import History

h = History("history.txt", 16)
h.add("first")
h.add("second")
print(h.prev("se"))    # second
h.save()               # writes history.txt, oldest entry first
```

Parsing commands:

```python
from pixelkit import parser

value, rest = parser.color().parse("#ffaa44/0.5")
print(value)           # #ffaa447f
```

Parsers raise `pixelkit.parser.ParseError` when the input does not match.

Writing a PNG scaled up by 4 and reading it back:

```python
from pixelkit import image
from pixelkit.color import Rgba8

pixels = [Rgba8(255, 0, 0, 255)] * 4
image.save_as("out.png", 2, 2, 4, pixels)
width, height, loaded = image.load_image("out.png")   # 8, 8, 64 pixels
```

Only 8-bit RGBA PNG files can be read; anything else raises `ValueError`.

Shapes into vertices:

```python
from pixelkit.color import Rgba8
from pixelkit.shape2d import Batch, Fill, Shape

batch = Batch()
batch.add(Shape.rect((0, 0), (8, 8)).fill(Fill.solid(Rgba8.RED)))
vertices = batch.vertices()   # three vertices per triangle
```

Logging:

```python
import logging
from pixelkit import logger

logger.init("debug")          # also accepts "error", "warn", "info", "trace" or an int
logging.getLogger(__name__).info("ready")
```

Calling `logger.init` a second time raises `RuntimeError`.

## What this package does not do

pixelkit has no window, no GPU renderer, no editing session and no
command-line program. Shapes and sprites are turned into vertex lists, but
nothing here draws them; window events and keys are plain data types with no
platform backend that produces them.

## Running the tests

```
pip install "pixelkit[test]"
pytest
```
# retro-image

A small library for 2D game development. It provides an RGBA colour type
with saturating arithmetic, a table of named colours, and an in-memory
RGBA bitmap that loads and saves PNG, JPEG and BMP files through Pillow.

## Installation

    pip install retro-image

## Colours

`retro_image.color.Color` is a frozen dataclass with four integer channels,
`red`, `green`, `blue` and `alpha`, each in the range 0..255. Alpha
defaults to opaque (255). A channel that is not an integer raises
`TypeError`. A channel that is out of range raises `ValueError`.

```python
from retro_image.color import Color, ALPHA_OPAQUE, ALPHA_TRANSPARENT

c = Color(10, 20, 30)
packed = c.to_integer()            # 0x0A141EFF
same = Color.from_integer(packed)  # Color(10, 20, 30, 255)

Color(10, 20, 30, 40) + Color(250, 250, 250, 250)  # each channel clamps at 255
Color(10, 20, 30, 40) - Color(5, 25, 15, 50)       # Color(5, 0, 15, 0)
Color(255, 128, 64, 32) * Color(255, 128, 64, 32)  # Color(255, 64, 16, 4)

c.is_opaque()       # True
c.is_transparent()  # False
print(c)            # color(10, 20, 30, 255)
```

`Color.from_integer` takes a 32-bit `0xRRGGBBAA` value. It raises
`ValueError` for values outside 0..0xFFFFFFFF. Multiplication scales each
channel as `a * b // 255`. Colours are immutable, so `c += other` binds a
new colour to `c`.

The module also defines named colours as constants, for example `BLACK`,
`WHITE`, `RED`, `CORN_FLOWER_BLUE`, `REBECCA_PURPLE` and `TRANSPARENT`:

```python
from retro_image.color import TRANSPARENT, WHITE

WHITE.to_integer()          # 0xFFFFFFFF
TRANSPARENT.is_transparent()  # True
```

## Bitmaps

`retro_image.bitmap.Bitmap` stores its pixels row by row, four bytes per
pixel, in RGBA order. A new bitmap is empty.

```python
from retro_image.bitmap import Bitmap
from retro_image.color import Color

bmp = Bitmap()
bmp.load_from_file("sprite.png")
print(bmp.width, bmp.height, bmp.size, bmp.size_bytes, bmp.empty)

bmp.mask_from_color(Color(255, 0, 255), 0)  # make magenta pixels transparent
bmp.flip_horizontal()
bmp.flip_vertical()

first_pixel = bmp.data[0]    # a Color

bmp.save_to_file("out.png")  # out.png must already exist
```

Read-only properties:

- `width` and `height` are the dimensions in pixels.
- `size` is the number of pixels. `size_bytes` is the number of bytes of
  pixel data.
- `empty` is true when the bitmap holds no pixel data.
- `data` is a tuple of `Color` values, one per pixel, row by row.

Methods:

- `create(width, height)` sets the dimensions and fills new bytes with 0,
  which is transparent black. If either dimension is zero it does
  nothing. Negative dimensions raise `ValueError`.
- `load_from_file(path)` replaces the contents with the image at `path`,
  converted to RGBA. It raises `ValueError` when the path does not exist
  or is not a regular file. It raises `RuntimeError` when the image cannot
  be read.
- `save_to_file(path)` writes nothing when the bitmap is empty. Otherwise
  `path` must name an existing regular file, or it raises `ValueError`.
  The format comes from the extension: `.png`, `.jpg` / `.jpeg` (written
  at quality 100 without the alpha channel) or `.bmp`. For any other
  extension nothing is written. A failed write raises `RuntimeError`.
- `mask_from_color(color, alpha=0)` sets the alpha of every pixel whose
  red, green and blue match `color`. An `alpha` outside 0..255 raises
  `ValueError`.
- `flip_vertical()` mirrors the rows top to bottom. `flip_horizontal()`
  mirrors each row left to right.
- `clear()` resets the bitmap to empty.

## Running the tests

    pip install -e ".[test]"
    pytest
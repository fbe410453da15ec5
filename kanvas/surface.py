#
# PROJECT: kanvas
# MODULE: kanvas/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
from typing import Dict, Optional

from .context import Context2D

logger = logging.getLogger(__name__)


class Surface:
    """
    Pixel surface drawn as 2x4 braille cells.

    Each cell keeps an 8-bit pixel mask, the colour of the last pixel
    written into it, and optionally a text character that overrides the
    mask.  Resizing clears everything and resets the 2D context, the way
    assigning width/height does on an HTML canvas.
    """
    __slots__ = ('_width', '_height', 'grid', 'c_grid', 'text',
                 'background', '_context')

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, width: int, height: int, background: str = "#000"):
        self._width = int(width)
        self._height = int(height)
        self.background = background
        self._context = None
        self._reset()

    def _reset(self):
        cols, rows = self.cell_size
        self.grid = [[0] * cols for _ in range(rows)]
        self.c_grid = [[None] * cols for _ in range(rows)]
        self.text = {}
        if self._context is not None:
            self._context.reset()

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int):
        self._width = int(value)
        self._reset()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int):
        self._height = int(value)
        self._reset()

    @property
    def cell_size(self):
        """(columns, rows) of character cells."""
        return (self._width + 1) // 2, (self._height + 3) // 4

    def get_context(self, kind: str) -> Optional[Context2D]:
        if kind != "2d":
            return None
        if self._context is None:
            self._context = Context2D(self)
        return self._context

    def set_pixel(self, x: int, y: int, color=None):
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return
        cx, cy = x >> 1, y >> 2
        # (y & 3) is the row inside the cell, (x & 1) the column
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def get_pixel(self, x: int, y: int) -> bool:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    def put_text(self, col: int, row: int, text: str, color=None):
        """Write characters into the text layer, clipped to the cell grid."""
        cols, rows = self.cell_size
        if row < 0 or row >= rows:
            return
        for i, ch in enumerate(text):
            c = col + i
            if 0 <= c < cols:
                self.text[(row, c)] = (ch, color)

    def cells(self):
        """Yield (row, col, mask, color, char) for every non-empty cell."""
        for y, row in enumerate(self.grid):
            for x, mask in enumerate(row):
                entry = self.text.get((y, x))
                if entry is not None:
                    yield y, x, mask, entry[1], entry[0]
                elif mask:
                    yield y, x, mask, self.c_grid[y][x], None

    def to_lines(self, braille: bool = True):
        render = render_cell_braille if braille else render_cell_ascii
        lines = []
        for y, row in enumerate(self.grid):
            chars = []
            for x, mask in enumerate(row):
                entry = self.text.get((y, x))
                chars.append(entry[0] if entry is not None else render(mask))
            lines.append("".join(chars))
        return lines

    def __repr__(self):
        return f"Surface({self._width}x{self._height})"


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    chars = " .:-=+*#%@"
    density = bin(mask).count('1')
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Surface.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


# Surfaces looked up by identifier, like elements in a document.
_registry: Dict[str, Surface] = {}


def register_surface(surface_id: str, surface: Surface) -> Surface:
    if surface_id in _registry:
        logger.debug("Replacing surface %r", surface_id)
    _registry[surface_id] = surface
    return surface


def get_surface(surface_id: str) -> Optional[Surface]:
    return _registry.get(surface_id)


def unregister_surface(surface_id: str) -> Optional[Surface]:
    return _registry.pop(surface_id, None)

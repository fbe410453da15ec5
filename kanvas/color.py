#
# PROJECT: kanvas
# MODULE: kanvas/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

logger = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RGB', '#RRGGBB', with or without '#' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) == 3:
        val = ''.join(ch * 2 for ch in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 color cube occupies xterm indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp: indices 232-255, values 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


class Palette:
    """
    Lazily maps style strings ('#fff', '#d0dd14', ...) to curses color pairs.

    Call setup() once after curses has started.  Unknown or unparsable
    styles, and every style when color is off, map to pair 0.
    """

    def __init__(self, use_color: bool = True):
        self.use_color = use_color
        self.num_colors = 0
        self.default_bg = curses.COLOR_BLACK
        self._pairs = {}
        self._next_pair = 1

    def setup(self):
        if not self.use_color:
            return
        try:
            if not curses.has_colors():
                self.use_color = False
                return
            curses.start_color()
            try:
                curses.use_default_colors()
                self.default_bg = -1
            except curses.error:
                pass
            self.num_colors = curses.COLORS
        except curses.error as e:
            logger.warning("Color setup failed, using monochrome: %s", e)
            self.use_color = False

    def _slot(self, rgb):
        if self.num_colors >= 256:
            return rgb_to_nearest_xterm(*rgb)
        return rgb_to_nearest_ansi8(*rgb)

    def pair_for(self, fg, bg=None) -> int:
        """Return the color pair number for foreground/background styles."""
        if not self.use_color or fg is None:
            return 0
        key = (fg, bg)
        if key in self._pairs:
            return self._pairs[key]

        fg_rgb = parse_hex_color(fg)
        if fg_rgb is None:
            logger.debug("Unsupported color style %r", fg)
            self._pairs[key] = 0
            return 0
        bg_rgb = parse_hex_color(bg)
        bg_slot = self.default_bg if bg_rgb is None else self._slot(bg_rgb)

        pair_id = self._next_pair
        try:
            curses.init_pair(pair_id, self._slot(fg_rgb), bg_slot)
            self._next_pair += 1
        except curses.error:
            pair_id = 0
        self._pairs[key] = pair_id
        return pair_id

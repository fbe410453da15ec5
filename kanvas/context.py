#
# PROJECT: kanvas
# MODULE: kanvas/context.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from dataclasses import dataclass, field, replace

from .mat3 import Mat3
from .raster import draw_line_dda, fill_polygons

TWO_PI = 2 * math.pi


@dataclass
class DrawState:
    """Style and transform state saved and restored as one unit."""
    fill_style: str = "#000"
    stroke_style: str = "#000"
    line_width: float = 1.0
    line_dash: tuple = ()
    line_dash_offset: float = 0.0
    text_align: str = "start"
    text_baseline: str = "alphabetic"
    font: str = "10px sans-serif"
    global_alpha: float = 1.0
    transform: Mat3 = field(default_factory=Mat3.identity)

    def copy(self) -> 'DrawState':
        return replace(self, transform=self.transform.copy())


def _state_attr(name):
    return property(lambda self: getattr(self._state, name),
                    lambda self, value: setattr(self._state, name, value))


class Context2D:
    """
    Minimal 2D drawing context over a Surface.

    Mirrors the browser canvas API: a current path in device coordinates,
    a current transform applied as paths are built, and style state kept on
    a save/restore stack.  Calls with non-finite coordinates are ignored.
    """

    fill_style = _state_attr('fill_style')
    stroke_style = _state_attr('stroke_style')
    line_width = _state_attr('line_width')
    line_dash_offset = _state_attr('line_dash_offset')
    text_align = _state_attr('text_align')
    text_baseline = _state_attr('text_baseline')
    font = _state_attr('font')
    global_alpha = _state_attr('global_alpha')

    def __init__(self, surface):
        self.surface = surface
        self.reset()

    def reset(self):
        self._state = DrawState()
        self._stack = []
        self._subpaths = []

    # -- state -------------------------------------------------------------

    def save(self):
        self._stack.append(self._state.copy())

    def restore(self):
        if self._stack:
            self._state = self._stack.pop()

    @property
    def depth(self) -> int:
        """Number of saved states on the stack."""
        return len(self._stack)

    def set_line_dash(self, segments):
        segments = [float(s) for s in segments]
        if any(s < 0 or not math.isfinite(s) for s in segments):
            return
        if len(segments) % 2:
            segments = segments * 2
        self._state.line_dash = tuple(segments)

    def get_line_dash(self) -> list:
        return list(self._state.line_dash)

    def get_transform(self) -> Mat3:
        return self._state.transform.copy()

    def reset_transform(self):
        self._state.transform = Mat3.identity()

    def _compose(self, m: Mat3):
        # new operations apply in local space, before the current transform
        self._state.transform = m.multiply(self._state.transform)

    def translate(self, x: float, y: float):
        if math.isfinite(x) and math.isfinite(y):
            self._compose(Mat3.translation(x, y))

    def rotate(self, angle: float):
        if math.isfinite(angle):
            self._compose(Mat3.rotation(angle))

    def scale(self, x: float, y: float):
        if math.isfinite(x) and math.isfinite(y):
            self._compose(Mat3.scale(x, y))

    def _device(self, x, y):
        dx, dy, _ = self._state.transform.transform_row((x, y, 1.0))
        return dx, dy

    # -- paths -------------------------------------------------------------

    def begin_path(self):
        self._subpaths = []

    def close_path(self):
        if self._subpaths and self._subpaths[-1]:
            first = self._subpaths[-1][0]
            self._subpaths[-1].append(first)
            self._subpaths.append([first])

    def move_to(self, x: float, y: float):
        if math.isfinite(x) and math.isfinite(y):
            self._subpaths.append([self._device(x, y)])

    def line_to(self, x: float, y: float):
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        if not self._subpaths:
            self._subpaths.append([])
        self._subpaths[-1].append(self._device(x, y))

    def rect(self, x: float, y: float, w: float, h: float):
        if not all(math.isfinite(v) for v in (x, y, w, h)):
            return
        corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h), (x, y)]
        self._subpaths.append([self._device(cx, cy) for cx, cy in corners])
        self._subpaths.append([self._device(x, y)])

    def arc(self, x: float, y: float, radius: float, start: float, end: float,
            counterclockwise: bool = False):
        if not all(math.isfinite(v) for v in (x, y, radius, start, end)):
            return
        if radius < 0:
            raise ValueError(f"negative arc radius {radius}")

        sweep = end - start
        if not counterclockwise:
            if sweep >= TWO_PI:
                sweep = TWO_PI
            elif sweep < 0:
                sweep = sweep % TWO_PI
        else:
            if sweep <= -TWO_PI:
                sweep = -TWO_PI
            elif sweep > 0:
                sweep = sweep % TWO_PI - TWO_PI

        segments = min(256, max(8, int(abs(sweep) * max(radius, 1.0) / 2)))
        for i in range(segments + 1):
            a = start + sweep * i / segments
            self.line_to(x + radius * math.cos(a), y + radius * math.sin(a))

    # -- painting ----------------------------------------------------------

    def stroke(self):
        state = self._state
        if state.global_alpha <= 0:
            return
        for path in self._subpaths:
            travelled = 0.0
            for a, b in zip(path, path[1:]):
                travelled = draw_line_dda(self.surface, a, b, state.stroke_style,
                                          width=state.line_width,
                                          dash=state.line_dash,
                                          dash_offset=state.line_dash_offset,
                                          travelled=travelled)

    def fill(self):
        if self._state.global_alpha <= 0:
            return
        fill_polygons(self.surface, self._subpaths, self._state.fill_style)

    def _put_text(self, text: str, x: float, y: float, color):
        if self._state.global_alpha <= 0:
            return
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        dx, dy = self._device(x, y)
        if not (math.isfinite(dx) and math.isfinite(dy)):
            return
        col = int(dx) // 2
        row = int(dy) // 4
        align = self._state.text_align
        if align == "center":
            col -= len(text) // 2
        elif align in ("end", "right"):
            col -= len(text)
        self.surface.put_text(col, row, text, color)

    def fill_text(self, text: str, x: float, y: float):
        self._put_text(str(text), x, y, self._state.fill_style)

    def stroke_text(self, text: str, x: float, y: float):
        self._put_text(str(text), x, y, self._state.stroke_style)

    def _visible_image_range(self, x, y, width, height):
        """
        The (u0, u1, v0, v1) destination-pixel ranges of an image placed at
        (x, y) that can land on the surface, found by mapping the surface
        rectangle back into user space.  None when nothing is visible.
        """
        t = self._state.transform
        a, b = t[0, 0], t[0, 1]
        c, d = t[1, 0], t[1, 1]
        e, f = t[2, 0], t[2, 1]
        det = a * d - b * c
        if det == 0 or not math.isfinite(det):
            return None
        us, vs = [], []
        for sx, sy in ((0, 0), (self.surface.width, 0),
                       (0, self.surface.height), (self.surface.width, self.surface.height)):
            px, py = sx - e, sy - f
            us.append((px * d - py * c) / det - x)
            vs.append((py * a - px * b) / det - y)
        u0 = max(0, int(math.floor(min(us))) - 1)
        u1 = min(int(math.ceil(width)), int(math.ceil(max(us))) + 1)
        v0 = max(0, int(math.floor(min(vs))) - 1)
        v1 = min(int(math.ceil(height)), int(math.ceil(max(vs))) + 1)
        if u0 >= u1 or v0 >= v1:
            return None
        return u0, u1, v0, v1

    def draw_image(self, image, x: float, y: float, width=None, height=None):
        """
        Blit a 2D mask (rows of truthy/falsy values) with nearest-neighbour
        scaling; set entries are painted in the current fill style.
        """
        rows = [list(r) for r in image]
        if not rows or not rows[0]:
            return
        ih, iw = len(rows), len(rows[0])
        width = iw if width is None else width
        height = ih if height is None else height
        if not all(math.isfinite(v) for v in (x, y, width, height)):
            return
        if width <= 0 or height <= 0 or self._state.global_alpha <= 0:
            return

        visible = self._visible_image_range(x, y, width, height)
        if visible is None:
            return
        u0, u1, v0, v1 = visible

        color = self._state.fill_style
        for v in range(v0, v1):
            iy = min(ih - 1, int(v * ih / height))
            for u in range(u0, u1):
                ix = min(iw - 1, int(u * iw / width))
                if rows[iy][ix]:
                    dx, dy = self._device(x + u, y + v)
                    if not (math.isfinite(dx) and math.isfinite(dy)):
                        return
                    self.surface.set_pixel(int(math.floor(dx)), int(math.floor(dy)), color)

#
# PROJECT: kanvas
# MODULE: kanvas/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import math
from contextlib import contextmanager
from typing import Iterable, Optional

from .context import Context2D
from .matrix import fdiv
from .surface import Surface, get_surface
from .vec2d import Point2d, Vec2d

logger = logging.getLogger(__name__)


class ContextUnavailableError(RuntimeError):
    """Raised when a Kanvas has no 2D context to draw on."""


# Facade style attributes and their defaults, applied to the context.
_STYLE_DEFAULTS = {
    'fill_style': "#fff",
    'stroke_style': "#fff",
    'line_width': 1.0,
    'line_dash': (),
    'line_dash_offset': 0.0,
    'text_align': "start",
    'text_baseline': "alphabetic",
    'font': "10px sans-serif",
    'global_alpha': 1.0,
}


def _style_attr(name):
    def fget(self):
        return self._style[name]

    def fset(self, value):
        self._style[name] = value
        self._apply(name, value)
    return property(fget, fset)


class Kanvas:
    """
    Drawing facade over a registered Surface.

    Looks the surface up by id and keeps its own copy of the style state so
    the getters answer even while a save()/restore() pair is open.  Every
    drawing method returns self for chaining.

    A missing surface does not stop construction; the first call that needs
    the context raises ContextUnavailableError.
    """

    fill_style = _style_attr('fill_style')
    stroke_style = _style_attr('stroke_style')
    line_width = _style_attr('line_width')
    line_dash = _style_attr('line_dash')
    line_dash_offset = _style_attr('line_dash_offset')
    text_align = _style_attr('text_align')
    text_baseline = _style_attr('text_baseline')
    font = _style_attr('font')
    global_alpha = _style_attr('global_alpha')

    def __init__(self, surface_id: str, width: int, height: int):
        self._id = surface_id
        self._surface: Optional[Surface] = get_surface(surface_id)
        self._context: Optional[Context2D] = None
        if self._surface is None:
            logger.warning("No surface registered as %r", surface_id)
        else:
            self._context = self._surface.get_context("2d")
        self._width = int(width)
        self._height = int(height)
        self._aspect_ratio = 1.0
        self._center = Vec2d(0, 0)
        self._style = dict(_STYLE_DEFAULTS)
        self.resize(width, height)

    def _apply(self, name, value):
        if self._context is None:
            return
        if name == 'line_dash':
            self._context.set_line_dash(value)
        else:
            setattr(self._context, name, value)

    def _apply_all(self):
        for name, value in self._style.items():
            self._apply(name, value)

    # -- geometry ----------------------------------------------------------

    def resize(self, width: int, height: int) -> 'Kanvas':
        self._width = int(width)
        self._height = int(height)
        if self._surface is not None:
            self._surface.width = self._width
            self._surface.height = self._height
        self._aspect_ratio = fdiv(self._width, self._height)
        self._center = Vec2d(round(self._width / 2, 4), round(self._height / 2, 4))
        # resizing resets the context, so push the facade state back in
        self._apply_all()
        logger.debug("Kanvas %r resized to %dx%d", self._id, self._width, self._height)
        return self

    @property
    def id(self) -> str:
        return self._id

    @property
    def surface(self) -> Optional[Surface]:
        return self._surface

    @property
    def context(self) -> Context2D:
        if self._context is None:
            raise ContextUnavailableError(
                f"2D context for surface {self._id!r} is not available")
        return self._context

    @property
    def width(self) -> int:
        return self._surface.width if self._surface is not None else self._width

    @property
    def height(self) -> int:
        return self._surface.height if self._surface is not None else self._height

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def center(self) -> Vec2d:
        return self._center

    # -- shapes ------------------------------------------------------------

    def draw_image(self, image, point: Point2d, width: float, height: float) -> 'Kanvas':
        self.context.draw_image(image, point.x, point.y, width, height)
        return self

    def rotate_and_draw_image(self, image, point: Point2d, width: float,
                              height: float, angle: float) -> 'Kanvas':
        """Draw image centred on point, turned by angle (counter-clockwise on screen)."""
        with self.style():
            self.translate(point).rotate(-angle)
            self.draw_image(image, Vec2d(-width / 2, -height / 2), width, height)
        return self

    def circle(self, point: Point2d, radius: float) -> 'Kanvas':
        self.context.arc(point.x, point.y, radius, 0, 2 * math.pi)
        return self

    def rect(self, point: Point2d, width: float, height: float) -> 'Kanvas':
        self.context.rect(point.x, point.y, width, height)
        return self

    def line(self, begin: Point2d, end: Point2d) -> 'Kanvas':
        self.context.move_to(begin.x, begin.y)
        self.context.line_to(end.x, end.y)
        return self

    def move_to(self, point: Point2d) -> 'Kanvas':
        self.context.move_to(point.x, point.y)
        return self

    def line_to(self, point: Point2d) -> 'Kanvas':
        self.context.line_to(point.x, point.y)
        return self

    def polyline(self, points: Iterable[Point2d], close: bool = False) -> 'Kanvas':
        """move_to the first point, line_to the rest, optionally close."""
        points = iter(points)
        first = next(points, None)
        if first is None:
            return self
        self.move_to(first)
        for p in points:
            self.line_to(p)
        if close:
            self.close_path()
        return self

    def text(self, text: str, at: Point2d, text_align: str = "center",
             text_baseline: str = "middle", fill_style=None, stroke_style=None,
             size: int = 16, font: str = "Arial") -> 'Kanvas':
        with self.style():
            ctx = self.context
            ctx.text_align = text_align
            ctx.text_baseline = text_baseline
            ctx.fill_style = self._style['fill_style'] if fill_style is None else fill_style
            ctx.stroke_style = (self._style['stroke_style']
                                if stroke_style is None else stroke_style)
            ctx.font = f"{size}px {font}"
            ctx.fill_text(text, at.x, at.y)
            ctx.stroke_text(text, at.x, at.y)
        return self

    # -- paths -------------------------------------------------------------

    def begin_path(self) -> 'Kanvas':
        self.context.begin_path()
        return self

    def close_path(self) -> 'Kanvas':
        self.context.close_path()
        return self

    def stroke(self, color=None, width: Optional[float] = None,
               dash: Optional[Iterable[float]] = None) -> 'Kanvas':
        with self.style():
            ctx = self.context
            ctx.stroke_style = self._style['stroke_style'] if color is None else color
            ctx.line_width = self._style['line_width'] if width is None else width
            ctx.set_line_dash(self._style['line_dash'] if dash is None else list(dash))
            ctx.stroke()
        return self

    def fill(self, color=None) -> 'Kanvas':
        with self.style():
            ctx = self.context
            ctx.fill_style = self._style['fill_style'] if color is None else color
            ctx.fill()
        return self

    # -- surface state -----------------------------------------------------

    def background(self, color: str = "#000") -> 'Kanvas':
        if self._surface is None:
            raise ContextUnavailableError(f"surface {self._id!r} is not available")
        self._surface.background = color
        return self

    def clear(self) -> 'Kanvas':
        """Wipe the surface.  The facade's style state survives the wipe."""
        if self._surface is None:
            raise ContextUnavailableError(f"surface {self._id!r} is not available")
        self._surface.width = self.width
        self._surface.height = self.height
        self._apply_all()
        return self

    def translate(self, point: Point2d) -> 'Kanvas':
        self.context.translate(point.x, point.y)
        return self

    def rotate(self, angle: float) -> 'Kanvas':
        self.context.rotate(angle)
        return self

    def save(self) -> 'Kanvas':
        self.context.save()
        return self

    def restore(self) -> 'Kanvas':
        self.context.restore()
        return self

    @contextmanager
    def style(self, **overrides):
        """
        Scoped context state: save on entry, apply any style overrides
        (fill_style=..., line_width=..., ...), restore on exit even when
        the body raises.  Overrides touch the context only, not the
        facade's remembered defaults.
        """
        unknown = set(overrides) - set(_STYLE_DEFAULTS)
        if unknown:
            raise TypeError(f"unknown style attribute(s): {', '.join(sorted(unknown))}")
        ctx = self.context
        ctx.save()
        try:
            for name, value in overrides.items():
                self._apply(name, value)
            yield self
        finally:
            ctx.restore()

    def __repr__(self):
        return f"Kanvas({self._id!r}, {self.width}x{self.height})"

#
# PROJECT: kanvas
# MODULE: kanvas/vec2d.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import functools
import math
import numbers
from typing import Optional, Protocol, runtime_checkable

from .mat3 import Mat3
from .matrix import fdiv


@runtime_checkable
class Point2d(Protocol):
    """Anything with numeric x and y: a Vec2d, a namedtuple, a small record."""
    x: float
    y: float


class copying:
    """
    Method decorator for vector operations.

    On an instance the wrapped method mutates that instance as usual.  On the
    class, the first argument may be any point; it is copied into a fresh
    vector first, so ``Vec2d.add(a, b)`` leaves ``a`` untouched.
    """

    def __init__(self, func):
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance, owner):
        if instance is not None:
            return self.func.__get__(instance, owner)
        func = self.func

        @functools.wraps(func)
        def on_copy(point, *args, **kwargs):
            return func(owner.of(point), *args, **kwargs)
        return on_copy


class Vec2d:
    """
    Mutable 2D vector with synchronised Cartesian and polar fields.

    All four fields live in private slots and every setter recomputes the
    other pair straight away: setting x or y derives theta and magnitude,
    setting theta or magnitude derives x and y.  Mutators return self.
    """
    __slots__ = ('_x', '_y', '_theta', '_magnitude')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._assign(float(x), float(y))

    def _assign(self, x, y):
        self._x = x
        self._y = y
        self._theta = math.atan2(y, x)
        self._magnitude = math.hypot(x, y)

    def _assign_polar(self, theta, magnitude):
        self._theta = theta
        self._magnitude = magnitude
        self._x = magnitude * math.cos(theta)
        self._y = magnitude * math.sin(theta)

    @classmethod
    def of(cls, point: Point2d) -> 'Vec2d':
        return cls(point.x, point.y)

    @classmethod
    def from_polar(cls, theta: float, magnitude: float) -> 'Vec2d':
        return cls(magnitude * math.cos(theta), magnitude * math.sin(theta))

    # -- fields ------------------------------------------------------------

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, x: float):
        self._assign(float(x), self._y)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, y: float):
        self._assign(self._x, float(y))

    @property
    def theta(self) -> float:
        return self._theta

    @theta.setter
    def theta(self, theta: float):
        self._assign_polar(float(theta), self._magnitude)

    @property
    def magnitude(self) -> float:
        return self._magnitude

    @magnitude.setter
    def magnitude(self, magnitude: float):
        self._assign_polar(self._theta, float(magnitude))

    r = magnitude

    # -- construction ------------------------------------------------------

    def set(self, point: Point2d) -> 'Vec2d':
        self._assign(float(point.x), float(point.y))
        return self

    def copy(self, x: Optional[float] = None, y: Optional[float] = None) -> 'Vec2d':
        return Vec2d(self._x if x is None else x, self._y if y is None else y)

    # -- arithmetic (in place on instances, on a copy via the class) -------

    @copying
    def add(self, point: Point2d) -> 'Vec2d':
        self._assign(self._x + point.x, self._y + point.y)
        return self

    @copying
    def subtract(self, point: Point2d) -> 'Vec2d':
        self._assign(self._x - point.x, self._y - point.y)
        return self

    @copying
    def multiply(self, scalar: float) -> 'Vec2d':
        self._assign(self._x * scalar, self._y * scalar)
        return self

    @copying
    def divide(self, scalar: float) -> 'Vec2d':
        self._assign(fdiv(self._x, scalar), fdiv(self._y, scalar))
        return self

    @copying
    def dot(self, point: Point2d) -> float:
        return self._x * point.x + self._y * point.y

    @copying
    def cross(self, point: Point2d) -> float:
        """z component of the 3D cross product of (x, y, 0) and (px, py, 0)."""
        return self._x * point.y - self._y * point.x

    @copying
    def normalize(self) -> 'Vec2d':
        # a zero vector stays zero
        magnitude = self._magnitude
        if magnitude != 0:
            self.divide(magnitude)
        return self

    # -- transforms --------------------------------------------------------

    @copying
    def transform(self, m: Mat3) -> 'Vec2d':
        """Apply m to the homogeneous row vector (x, y, 1)."""
        x, y, _ = m.transform_row((self._x, self._y, 1.0))
        self._assign(x, y)
        return self

    @copying
    def translate(self, point: Point2d) -> 'Vec2d':
        return self.transform(Mat3.translation(point.x, point.y))

    @copying
    def rotate(self, theta: float) -> 'Vec2d':
        return self.transform(Mat3.rotation(theta))

    @copying
    def scale(self, point: Point2d) -> 'Vec2d':
        return self.transform(Mat3.scale(point.x, point.y))

    # -- helpers -----------------------------------------------------------

    def distance(self, point: Point2d) -> float:
        return math.hypot(point.x - self._x, point.y - self._y)

    def angle_to(self, point: Point2d) -> float:
        """Direction (radians) from this point towards another."""
        return math.atan2(point.y - self._y, point.x - self._x)

    def __add__(self, other):
        if isinstance(other, Point2d):
            return self.copy().add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point2d):
            return self.copy().subtract(other)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self.copy().multiply(scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return self.copy().divide(scalar)
        return NotImplemented

    def __neg__(self):
        return Vec2d(-self._x, -self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if isinstance(other, Vec2d):
            return self._x == other._x and self._y == other._y
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Vec2d({self._x:.2f}, {self._y:.2f})"

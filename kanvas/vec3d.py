#
# PROJECT: kanvas
# MODULE: kanvas/vec3d.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import numbers
from typing import Optional, Protocol, runtime_checkable

from .mat4 import Mat4
from .matrix import fdiv
from .vec2d import Vec2d, copying


@runtime_checkable
class Point3d(Protocol):
    x: float
    y: float
    z: float


class Vec3d:
    """Mutable 3D point.  Mutators return self; class-level calls work on a copy."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def of(cls, point: Point3d) -> 'Vec3d':
        return cls(point.x, point.y, point.z)

    def set(self, point: Point3d) -> 'Vec3d':
        self.x, self.y, self.z = float(point.x), float(point.y), float(point.z)
        return self

    def copy(self, x: Optional[float] = None, y: Optional[float] = None,
             z: Optional[float] = None) -> 'Vec3d':
        return Vec3d(self.x if x is None else x,
                     self.y if y is None else y,
                     self.z if z is None else z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @copying
    def add(self, point: Point3d) -> 'Vec3d':
        self.x += point.x
        self.y += point.y
        self.z += point.z
        return self

    @copying
    def subtract(self, point: Point3d) -> 'Vec3d':
        self.x -= point.x
        self.y -= point.y
        self.z -= point.z
        return self

    @copying
    def multiply(self, scalar: float) -> 'Vec3d':
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    @copying
    def divide(self, scalar: float) -> 'Vec3d':
        self.x = fdiv(self.x, scalar)
        self.y = fdiv(self.y, scalar)
        self.z = fdiv(self.z, scalar)
        return self

    @copying
    def dot(self, point: Point3d) -> float:
        return self.x * point.x + self.y * point.y + self.z * point.z

    @copying
    def cross(self, point: Point3d) -> 'Vec3d':
        """Replace self with self x point."""
        x, y, z = self.x, self.y, self.z
        self.x = y * point.z - z * point.y
        self.y = z * point.x - x * point.z
        self.z = x * point.y - y * point.x
        return self

    @copying
    def normalize(self) -> 'Vec3d':
        m = self.magnitude
        if m != 0:
            self.divide(m)
        return self

    @copying
    def transform(self, m: Mat4) -> 'Vec3d':
        """Apply the affine part of m to (x, y, z, 1); the resulting w is dropped."""
        self.x, self.y, self.z, _ = m.transform_row((self.x, self.y, self.z, 1.0))
        return self

    @copying
    def translate(self, point: Point3d) -> 'Vec3d':
        return self.transform(Mat4.translation(point.x, point.y, point.z))

    @copying
    def scale(self, point: Point3d) -> 'Vec3d':
        return self.transform(Mat4.scale(point.x, point.y, point.z))

    @copying
    def rotate_x(self, theta: float) -> 'Vec3d':
        return self.transform(Mat4.rotation_x(theta))

    @copying
    def rotate_y(self, theta: float) -> 'Vec3d':
        return self.transform(Mat4.rotation_y(theta))

    @copying
    def rotate_z(self, theta: float) -> 'Vec3d':
        return self.transform(Mat4.rotation_z(theta))

    def to_ndc(self, m: Mat4) -> 'Vec3d':
        """
        Full homogeneous transform followed by the perspective divide.
        Returns a new point; z keeps the remapped depth.  w' == 0 is not
        special-cased and yields inf/nan.
        """
        x, y, z, w = m.transform_row((self.x, self.y, self.z, 1.0))
        return Vec3d(fdiv(x, w), fdiv(y, w), fdiv(z, w))

    def project(self, field_of_view: float, aspect: float, near: float, far: float,
                viewport_width: float, viewport_height: float) -> Vec2d:
        """
        Project onto the viewport and return a new Vec2d in pixel space.

        Normalised device coordinates [-1, 1] map to [0, width] x [0, height]
        with y pointing down, so +y in the scene is up on screen.
        """
        ndc = self.to_ndc(Mat4.perspective(field_of_view, aspect, near, far))
        half_w = viewport_width * 0.5
        half_h = viewport_height * 0.5
        return Vec2d(ndc.x * half_w + half_w, (1.0 - ndc.y) * half_h)

    def __add__(self, other):
        if isinstance(other, Point3d):
            return self.copy().add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3d):
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
        return Vec3d(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3d index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3d):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Vec3d({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

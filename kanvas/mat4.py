#
# PROJECT: kanvas
# MODULE: kanvas/mat4.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .matrix import SquareMatrix, fdiv


class Mat4(SquareMatrix):
    """4x4 matrix for 3D affine transforms and perspective projection.

    Same convention as Mat3: row-major storage, row vectors on the left
    (p' = p * M), translation in the last row.
    """
    __slots__ = ()
    SIZE = 4

    def __init__(self, *values):
        super().__init__(values if values else None)

    def set(self, *values) -> 'Mat4':
        self._data = self._checked(values)
        return self

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        return cls(1, 0, 0, 0,
                   0, 1, 0, 0,
                   0, 0, 1, 0,
                   x, y, z, 1)

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        return cls(sx, 0, 0, 0,
                   0, sy, 0, 0,
                   0, 0, sz, 0,
                   0, 0, 0, 1)

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(1, 0, 0, 0,
                   0, c, s, 0,
                   0, -s, c, 0,
                   0, 0, 0, 1)

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(c, 0, -s, 0,
                   0, 1, 0, 0,
                   s, 0, c, 0,
                   0, 0, 0, 1)

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(c, s, 0, 0,
                   -s, c, 0, 0,
                   0, 0, 1, 0,
                   0, 0, 0, 1)

    @classmethod
    def perspective(cls, field_of_view: float, aspect: float,
                    near: float, far: float) -> 'Mat4':
        """
        Perspective projection for row vectors.

        field_of_view is the vertical angle in degrees.  After the divide
        by w' (which equals the input z), x and y land in [-1, 1] and z in
        [0, 1] for points between the near and far planes.  far == near is
        not guarded: q becomes inf/nan and propagates.
        """
        f = fdiv(1.0, math.tan(math.radians(field_of_view) / 2.0))
        q = fdiv(far, far - near)
        return cls(fdiv(1.0, aspect) * f, 0, 0, 0,
                   0, f, 0, 0,
                   0, 0, q, 1,
                   0, 0, -q * near, 0)

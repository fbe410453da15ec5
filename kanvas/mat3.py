#
# PROJECT: kanvas
# MODULE: kanvas/mat3.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .matrix import SquareMatrix


class Mat3(SquareMatrix):
    """3x3 matrix for 2D affine transforms on homogeneous row vectors (x, y, 1)."""
    __slots__ = ()
    SIZE = 3

    def __init__(self, data=None):
        super().__init__(data)

    def set(self, data) -> 'Mat3':
        """Replace the content with a copy of the 9 given values."""
        self._data = self._checked(data)
        return self

    @classmethod
    def translation(cls, x: float, y: float) -> 'Mat3':
        return cls([1, 0, 0,
                    0, 1, 0,
                    x, y, 1])

    @classmethod
    def rotation(cls, theta: float) -> 'Mat3':
        """Counter-clockwise rotation by theta radians (y axis up)."""
        c = math.cos(theta)
        s = math.sin(theta)
        return cls([c, s, 0,
                    -s, c, 0,
                    0, 0, 1])

    @classmethod
    def scale(cls, x: float, y: float) -> 'Mat3':
        return cls([x, 0, 0,
                    0, y, 0,
                    0, 0, 1])

#
# PROJECT: kanvas
# MODULE: kanvas/matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


def fdiv(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics: x/0 gives +-inf, 0/0 gives nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


class SquareMatrix:
    """
    Fixed-size square matrix stored as a flat row-major list.

    Points are row vectors multiplied on the left (p' = p * M), so the
    translation part lives in the last row.  Subclasses set SIZE.
    """
    __slots__ = ('_data',)
    SIZE = 0

    def __init__(self, data=None):
        n = self.SIZE
        if data is None:
            data = [1.0 if r == c else 0.0 for r in range(n) for c in range(n)]
        self._data = self._checked(data)

    @classmethod
    def _checked(cls, values) -> list:
        values = [float(v) for v in values]
        if len(values) != cls.SIZE * cls.SIZE:
            raise ValueError(
                f"{cls.__name__} needs {cls.SIZE * cls.SIZE} values, got {len(values)}")
        return values

    @classmethod
    def identity(cls):
        return cls._from_list(None)

    @classmethod
    def _from_list(cls, data):
        res = cls.__new__(cls)
        SquareMatrix.__init__(res, data)
        return res

    @property
    def data(self) -> list:
        """The live row-major value list."""
        return self._data

    def copy(self):
        return self._from_list(list(self._data))

    def multiply(self, other) -> 'SquareMatrix':
        """In-place product: self = self x other."""
        n = self.SIZE
        a = self._data
        b = other._data
        c = [0.0] * (n * n)
        for r in range(n):
            for col in range(n):
                val = 0.0
                for k in range(n):
                    val += a[r * n + k] * b[k * n + col]
                c[r * n + col] = val
        self._data = c
        return self

    def __matmul__(self, other):
        if isinstance(other, type(self)):
            return self.copy().multiply(other)
        return NotImplemented

    def transform_row(self, values) -> tuple:
        """Row vector times matrix.  len(values) must equal SIZE."""
        n = self.SIZE
        m = self._data
        return tuple(
            sum(values[k] * m[k * n + col] for k in range(n))
            for col in range(n)
        )

    def row(self, i: int) -> tuple:
        n = self.SIZE
        return tuple(self._data[i * n:(i + 1) * n])

    def transpose(self):
        n = self.SIZE
        m = self._data
        return self._from_list([m[c * n + r] for r in range(n) for c in range(n)])

    def isclose(self, other, abs_tol: float = 1e-9) -> bool:
        return all(math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)
                   for a, b in zip(self._data, other._data))

    def __getitem__(self, index):
        r, c = index
        if not (0 <= r < self.SIZE and 0 <= c < self.SIZE):
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._data[r * self.SIZE + c]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return self._data == other._data
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        rows = ", ".join(
            "[" + ", ".join(f"{v:.3f}" for v in self.row(i)) + "]"
            for i in range(self.SIZE))
        return f"{type(self).__name__}({rows})"

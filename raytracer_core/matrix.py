#
# PROJECT: raytracer-core
# MODULE: raytracer_core/matrix.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4
# LOG_REF: 2026-10-17
#

import math

from .scalar import divide, float_eq
from .tuples import Point, Vector

SIZE = 4


def _submatrix(rows, row, col):
    """Copy of `rows` with one row and one column deleted (4x4 -> 3x3, 3x3 -> 2x2)."""
    return [[v for c, v in enumerate(r) if c != col]
            for i, r in enumerate(rows) if i != row]


def _determinant(rows) -> float:
    """Laplace expansion along row 0, closed form at 2x2."""
    if len(rows) == 2:
        (a, b), (c, d) = rows
        return a * d - b * c
    return sum(rows[0][col] * _cofactor(rows, 0, col) for col in range(len(rows)))


def _minor(rows, row, col) -> float:
    return _determinant(_submatrix(rows, row, col))


def _cofactor(rows, row, col) -> float:
    minor = _minor(rows, row, col)
    return -minor if (row + col) % 2 else minor


class Matrix:
    """4x4 Matrix of floats, stored flat in row-major order.

    Equality is epsilon-tolerant per element. Apply with `@`:
    Matrix @ Matrix composes, Matrix @ Point is affine (uses the translation
    column), Matrix @ Vector is linear (ignores it).
    """
    __slots__ = ('m',)

    def __init__(self, elements=None):
        if elements is None:
            self.m = [0.0] * (SIZE * SIZE)
            return
        values = [float(v) for v in elements]
        if len(values) != SIZE * SIZE:
            raise ValueError(f"Matrix needs {SIZE * SIZE} elements, got {len(values)}")
        self.m = values

    @classmethod
    def from_rows(cls, rows) -> 'Matrix':
        return cls([v for row in rows for v in row])

    @classmethod
    def identity(cls) -> 'Matrix':
        res = cls()
        for i in range(SIZE):
            res.m[i * SIZE + i] = 1.0
        return res

    @classmethod
    def translation(cls, x, y, z) -> 'Matrix':
        mat = cls.identity()
        mat.set(0, 3, x)
        mat.set(1, 3, y)
        mat.set(2, 3, z)
        return mat

    @classmethod
    def scaling(cls, sx, sy, sz) -> 'Matrix':
        mat = cls.identity()
        mat.set(0, 0, sx)
        mat.set(1, 1, sy)
        mat.set(2, 2, sz)
        return mat

    @classmethod
    def rotation_x(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.set(1, 1, c)
        mat.set(1, 2, -s)
        mat.set(2, 1, s)
        mat.set(2, 2, c)
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.set(0, 0, c)
        mat.set(0, 2, s)
        mat.set(2, 0, -s)
        mat.set(2, 2, c)
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.set(0, 0, c)
        mat.set(0, 1, -s)
        mat.set(1, 0, s)
        mat.set(1, 1, c)
        return mat

    @classmethod
    def shearing(cls, xy, xz, yx, yz, zx, zy) -> 'Matrix':
        """Each component moves in proportion to another, e.g. xy: x by y."""
        mat = cls.identity()
        mat.set(0, 1, xy)
        mat.set(0, 2, xz)
        mat.set(1, 0, yx)
        mat.set(1, 2, yz)
        mat.set(2, 0, zx)
        mat.set(2, 1, zy)
        return mat

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]"
                         for row in self.rows())
        return f"Matrix([{rows}])"

    def __iter__(self):
        return iter(self.m)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(float_eq(a, b) for a, b in zip(self.m, other.m))

    __hash__ = None

    def get(self, row: int, col: int) -> float:
        assert 0 <= row < SIZE, f"row {row} out of range"
        assert 0 <= col < SIZE, f"col {col} out of range"
        return self.m[row * SIZE + col]

    def set(self, row: int, col: int, value: float):
        assert 0 <= row < SIZE, f"row {row} out of range"
        assert 0 <= col < SIZE, f"col {col} out of range"
        self.m[row * SIZE + col] = float(value)

    def rows(self):
        """Return the elements as a list of 4 row lists (a copy)."""
        return [self.m[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def transpose(self) -> 'Matrix':
        return Matrix([self.m[c * SIZE + r] for r in range(SIZE) for c in range(SIZE)])

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, (Point, Vector)):
            return self.apply(other)
        return NotImplemented

    def multiply(self, other: 'Matrix') -> 'Matrix':
        res = Matrix()
        a, b = self.m, other.m
        for r in range(SIZE):
            for c in range(SIZE):
                val = 0.0
                for k in range(SIZE):
                    val += a[r * SIZE + k] * b[k * SIZE + c]
                res.m[r * SIZE + c] = val
        return res

    def apply(self, target):
        """Transform a Point (w=1, translated) or a Vector (w=0, not translated)."""
        if not isinstance(target, (Point, Vector)):
            raise TypeError(f"Cannot apply Matrix to {type(target).__name__}")
        m = self.m
        x, y, z = target.x, target.y, target.z
        rx = m[0]*x + m[1]*y + m[2]*z
        ry = m[4]*x + m[5]*y + m[6]*z
        rz = m[8]*x + m[9]*y + m[10]*z
        if isinstance(target, Point):
            return Point(rx + m[3], ry + m[7], rz + m[11])
        return Vector(rx, ry, rz)

    def submatrix(self, row: int, col: int):
        """3x3 rows left after deleting `row` and `col`."""
        assert 0 <= row < SIZE and 0 <= col < SIZE
        return _submatrix(self.rows(), row, col)

    def minor(self, row: int, col: int) -> float:
        return _determinant(self.submatrix(row, col))

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        return _determinant(self.rows())

    def is_invertible(self) -> bool:
        # Exact comparison: a tiny non-zero determinant still counts.
        return self.determinant() != 0

    def inverse(self) -> 'Matrix':
        """
        Inverse by the adjugate method.

        A singular matrix is not rejected; its entries come out as inf/nan.
        Check is_invertible() first when that matters.
        """
        rows = self.rows()
        det = _determinant(rows)
        res = Matrix()
        for r in range(SIZE):
            for c in range(SIZE):
                # Transposed store turns the cofactor matrix into the adjugate.
                res.m[c * SIZE + r] = divide(_cofactor(rows, r, c), det)
        return res

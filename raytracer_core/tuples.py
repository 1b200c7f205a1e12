#
# PROJECT: raytracer-core
# MODULE: raytracer_core/tuples.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-17
#

import math
import numbers

from .scalar import divide, float_eq


class Point:
    """
    Location in 3-D affine space.

    Transforms treat the implicit homogeneous coordinate as 1, so the
    translation column of a Matrix moves a Point.

        Point - Point  -> Vector
        Point +- Vector -> Point
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Point({self.x}, {self.y}, {self.z})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Point index out of range")

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (float_eq(self.x, other.x) and float_eq(self.y, other.y)
                and float_eq(self.z, other.z))

    # Epsilon-tolerant equality cannot be made consistent with hashing.
    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def add(self, vector: 'Vector') -> 'Point':
        return self + vector

    def sub(self, other):
        """Point - Point gives the Vector between them, Point - Vector a Point."""
        return self - other


class Vector:
    """
    Free displacement with direction and magnitude.

    Transforms treat the implicit homogeneous coordinate as 0, so only the
    linear 3x3 block of a Matrix acts on a Vector.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vector({self.x}, {self.y}, {self.z})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vector index out of range")

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (float_eq(self.x, other.x) and float_eq(self.y, other.y)
                and float_eq(self.z, other.z))

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(divide(self.x, scalar), divide(self.y, scalar),
                      divide(self.z, scalar))

    def add(self, other: 'Vector') -> 'Vector':
        return self + other

    def sub(self, other: 'Vector') -> 'Vector':
        return self - other

    def scale(self, scalar: float) -> 'Vector':
        return self * scalar

    def negate(self) -> 'Vector':
        return -self

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector') -> 'Vector':
        """Right-handed cross product: x.cross(y) == z."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> 'Vector':
        """
        Unit vector with the same direction.

        No zero-length guard: a zero vector yields nan components.
        """
        return self / self.length()

    def normalize(self):
        """In-place variant of normalized()."""
        unit = self.normalized()
        self.x, self.y, self.z = unit.x, unit.y, unit.z

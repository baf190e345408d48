from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from geodome.errors import DegenerateVector
from geodome.model._util import full_digits


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector.

    Every operation returns a new instance.  Arithmetic is available
    both as operators (``a + b``, ``a - b``, ``a * 2``, ``a / 2``) and
    as named methods.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> Vector3:
        """Build a vector from any length-3 sequence or array.

        Raises:
            ValueError: If *values* does not hold exactly three numbers.
        """
        arr = np.asarray(values, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> np.ndarray:
        """Return the components as a float array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def plus(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def minus(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def times(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def divided_by(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, scalar: float) -> Vector3:
        if isinstance(scalar, Vector3):
            return NotImplemented
        return self.times(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if isinstance(scalar, Vector3):
            return NotImplemented
        return self.divided_by(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def distance_to(self, other: Vector3) -> float:
        """Return the Euclidean distance between two points."""
        return self.minus(other).magnitude

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_to(self, other: Vector3) -> float:
        """Return the angle between two vectors in radians.

        Raises:
            DegenerateVector: If either vector has zero magnitude.
        """
        denom = self.magnitude * other.magnitude
        if denom == 0:
            raise DegenerateVector(
                "angle is undefined for a zero-magnitude vector",
                self if self.magnitude == 0 else other,
            )
        # Rounding can push the cosine just outside [-1, 1].
        cos_angle = max(-1.0, min(1.0, self.dot(other) / denom))
        return math.acos(cos_angle)

    def normalised(self) -> Vector3:
        """Return the unit vector in the same direction.

        Raises:
            DegenerateVector: If the vector has zero magnitude.
        """
        mag = self.magnitude
        if mag == 0:
            raise DegenerateVector("cannot normalise a zero-magnitude vector", self)
        return self.divided_by(mag)

    def is_equal_to(self, other: Vector3, tolerance: float = 0.0) -> bool:
        """Component-wise equality within ``abs(tolerance)``."""
        tol = abs(tolerance)
        return (
            abs(self.x - other.x) <= tol
            and abs(self.y - other.y) <= tol
            and abs(self.z - other.z) <= tol
        )

    def copy(
        self,
        x: float | None = None,
        y: float | None = None,
        z: float | None = None,
    ) -> Vector3:
        """Return a new vector with any supplied components replaced.

        ``None`` means "keep the original component"; any number,
        including ``0.0``, is an override.
        """
        return Vector3(
            self.x if x is None else x,
            self.y if y is None else y,
            self.z if z is None else z,
        )

    def __str__(self) -> str:
        return f"({full_digits(self.x)}, {full_digits(self.y)}, {full_digits(self.z)})"

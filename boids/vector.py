"""Immutable 2D vector value type."""

import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Vector2:
    """
    A 2D floating-point vector with value semantics.

    Every operation returns a new vector. NaN and Inf are not guarded
    against; normalizing a zero-length vector is the caller's concern
    (see ``rescaled``).
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def divide(self, divisor: float) -> "Vector2":
        return Vector2(self.x / divisor, self.y / divisor)

    def map(self, f: Callable[[float], float]) -> "Vector2":
        """Apply ``f`` to each component."""
        return Vector2(f(self.x), f(self.y))

    @property
    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def equals(self, other: "Vector2") -> bool:
        """Exact component-wise float equality."""
        return self.x == other.x and self.y == other.y

    def rescaled(self, magnitude: float) -> "Vector2":
        """
        Return this vector stretched to ``magnitude``.

        A zero-length vector has no direction and is returned unchanged.
        """
        length = self.length
        if length > 0:
            return self.map(lambda v: v / length * magnitude)
        return self

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector2":
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector2":
        return self.divide(divisor)

"""Small mutable vectors used for movement and distance calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _origin() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass
class Vector3D:
    """A vector with x, y and z components."""

    vec: list[float] = field(default_factory=_origin)

    def __post_init__(self) -> None:
        self.vec = [float(c) for c in self.vec]

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        x, y, z = self.vec[:3]
        return math.sqrt(x * x + y * y + z * z)

    def normalize(self) -> None:
        """Scale the vector to unit length in place; a zero vector is left alone."""
        mag = self.magnitude()
        if mag == 0:
            return
        self.vec[0] /= mag
        self.vec[1] /= mag
        self.vec[2] /= mag


@dataclass
class Vector2D:
    """A vector in the ground plane: the y component is ignored."""

    vec: list[float] = field(default_factory=_origin)

    def __post_init__(self) -> None:
        self.vec = [float(c) for c in self.vec]

    def magnitude(self) -> float:
        """Return the length of the (x, z) projection."""
        x, z = self.vec[0], self.vec[2]
        return math.sqrt(x * x + z * z)

    def normalize(self) -> None:
        """Scale (x, z) to unit length and zero y, in place; a zero vector is left alone."""
        mag = self.magnitude()
        if mag == 0:
            return
        self.vec[0] /= mag
        self.vec[1] = 0.0
        self.vec[2] /= mag
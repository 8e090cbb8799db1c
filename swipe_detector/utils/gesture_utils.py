"""
Shared geometry for swipe recognition.

Positions and displacements are both expressed as an Offset, so the
displacement of a gesture is simply ``latest - start``.
"""

import math
from typing import Iterator


class Offset:
    """Immutable 2D vector used for pointer positions and displacements."""

    __slots__ = ('dx', 'dy')

    def __init__(self, dx: float, dy: float):
        object.__setattr__(self, 'dx', float(dx))
        object.__setattr__(self, 'dy', float(dy))

    def __setattr__(self, name, value):
        raise AttributeError("Offset is immutable")

    def __repr__(self):
        return f"Offset({self.dx:.1f}, {self.dy:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Offset):
            return NotImplemented
        return self.dx == other.dx and self.dy == other.dy

    def __hash__(self):
        return hash((self.dx, self.dy))

    def __iter__(self) -> Iterator[float]:
        yield self.dx
        yield self.dy

    def __sub__(self, other: 'Offset') -> 'Offset':
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def __add__(self, other: 'Offset') -> 'Offset':
        return Offset(self.dx + other.dx, self.dy + other.dy)

    @property
    def distance(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.dx ** 2 + self.dy ** 2)

    def distance_to(self, other: 'Offset') -> float:
        """Calculate Euclidean distance to another position."""
        return (self - other).distance

    @classmethod
    def from_tuple(cls, pos) -> 'Offset':
        """Build an Offset from an ``(x, y)`` pair such as a pygame position."""
        x, y = pos
        return cls(x, y)

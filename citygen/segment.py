"""Road segments and the links between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from citygen.geometry import Point


@dataclass(eq=False)
class Segment:
    """A straight piece of road from ``start`` to ``end``.

    ``length`` is measured when the segment is created and is not updated
    if the end point is moved afterwards.
    """

    start: Point
    end: Point
    highway: bool = False
    id: int = 0
    length: float = field(init=False)
    connections: list[Segment] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.length = math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    def add_connection(self, other: Segment) -> None:
        """Link ``other`` as a successor of this segment."""
        self.connections.append(other)

    def describe(self) -> str:
        """One-line human-readable summary."""
        return (
            f"Segment {self.id}: ({self.start.x:.1f}, {self.start.y:.1f}) -> "
            f"({self.end.x:.1f}, {self.end.y:.1f}), highway={int(self.highway)}, "
            f"links={len(self.connections)}"
        )
"""A region quadtree of axis-aligned boxes for spatial lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple

MAX_OBJECTS = 10
MAX_LEVELS = 5


@dataclass(frozen=True)
class AABB:
    """Axis-aligned box with its corner at ``(x, y)``."""

    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: AABB) -> bool:
        """True if the interiors of the two boxes intersect."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class _Entry(NamedTuple):
    bounds: AABB
    obj: Any


def _quadrant(parent: AABB, box: AABB) -> int | None:
    """Index of the child quadrant wholly holding ``box``, or None."""
    vertical_mid = parent.x + parent.width / 2.0
    horizontal_mid = parent.y + parent.height / 2.0

    top = box.y + box.height < horizontal_mid
    bottom = box.y > horizontal_mid
    left = box.x + box.width < vertical_mid
    right = box.x > vertical_mid

    if top and right:
        return 0
    if top and left:
        return 1
    if bottom and left:
        return 2
    if bottom and right:
        return 3
    return None


class Quadtree:
    """Quadtree node holding up to ``MAX_OBJECTS`` entries before it splits.

    Nodes at ``MAX_LEVELS`` never split; once full they drop further entries.
    """

    def __init__(self, bounds: AABB, level: int = 0) -> None:
        self.level = level
        self.bounds = bounds
        self.entries: list[_Entry] = []
        self.children: list[Quadtree] = []

    def _split(self) -> None:
        hw = self.bounds.width / 2.0
        hh = self.bounds.height / 2.0
        x, y = self.bounds.x, self.bounds.y
        level = self.level + 1
        self.children = [
            Quadtree(AABB(x + hw, y, hw, hh), level),
            Quadtree(AABB(x, y, hw, hh), level),
            Quadtree(AABB(x, y + hh, hw, hh), level),
            Quadtree(AABB(x + hw, y + hh, hw, hh), level),
        ]

    def _insert_entry(self, entry: _Entry) -> bool:
        if self.children:
            idx = _quadrant(self.bounds, entry.bounds)
            if idx is not None:
                return self.children[idx]._insert_entry(entry)

        stored = len(self.entries) < MAX_OBJECTS
        if stored:
            self.entries.append(entry)

        if len(self.entries) >= MAX_OBJECTS and self.level < MAX_LEVELS:
            if not self.children:
                self._split()
            i = 0
            while i < len(self.entries):
                current = self.entries[i]
                idx = _quadrant(self.bounds, current.bounds)
                if idx is None:
                    i += 1
                    continue
                self.children[idx]._insert_entry(current)
                last = self.entries.pop()
                if i < len(self.entries):
                    self.entries[i] = last
        return stored

    def insert(self, bounds: AABB, obj: Any) -> bool:
        """Store ``obj`` under ``bounds``; False if a full leaf dropped it."""
        return self._insert_entry(_Entry(bounds, obj))

    def _collect(self, area: AABB, found: list[Any], limit: int | None) -> None:
        for entry in self.entries:
            if limit is not None and len(found) >= limit:
                break
            if area.overlaps(entry.bounds):
                found.append(entry.obj)
        for child in self.children:
            child._collect(area, found, limit)

    def retrieve(self, area: AABB, max_count: int | None = None) -> list[Any]:
        """Objects whose boxes overlap ``area``, at most ``max_count`` of them."""
        found: list[Any] = []
        self._collect(area, found, max_count)
        return found

    def clear(self) -> None:
        """Remove every entry and collapse all child nodes."""
        self.entries.clear()
        for child in self.children:
            child.clear()
        self.children = []

    def __iter__(self) -> Iterator[Any]:
        for entry in self.entries:
            yield entry.obj
        for child in self.children:
            yield from child

    def __len__(self) -> int:
        return len(self.entries) + sum(len(child) for child in self.children)
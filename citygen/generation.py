"""Procedural road-network generation driven by population noise."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from citygen.geometry import Point
from citygen.noise import population_noise
from citygen.segment import Segment

SEGMENT_LENGTH = 100.0
HIGHWAY_SEGMENT_LENGTH = 200.0
HIGHWAY_SEGMENT_WIDTH = 20.0
DEFAULT_SEGMENT_WIDTH = 10.0
HIGHWAY_CAPACITY = 12
DEFAULT_CAPACITY = 6
HIGHWAY_SPEED = 1200.0
DEFAULT_SPEED = 800.0
SEGMENT_COUNT_LIMIT = 1000
SNAP_DISTANCE = 15.0
MIN_INTERSECTION_DEVIATION = 15.0

HIGHWAY_BRANCH_PROBABILITY = 0.3
DEFAULT_BRANCH_PROBABILITY = 0.3

MAX_SEGMENTS = 4096
MAX_QUEUE = 2048
SEGMENT_LIMIT = 2048
DEFAULT_SEED = 1

_DEVIATION = 0.15
_NOISE_SCALE = 1000.0
_HIGHWAY_BRANCH_POPULATION = 0.6
_STREET_BRANCH_POPULATION = 0.4


def generate_city() -> list[Segment]:
    """Build and print a fixed two-segment sample network."""
    print("Generating city...")
    a = Point(0.0, 0.0)
    b = Point(200.0, 0.0)
    root = Segment(a, b, True, 0)
    print(root.describe())

    c = Point(b.x, b.y)
    d = Point(c.x + 100.0, c.y + 50.0)
    branch = Segment(c, d, False, 1)
    print(branch.describe())
    return [root, branch]


def _population_at(p: Point) -> float:
    return population_noise(p.x / _NOISE_SCALE, p.y / _NOISE_SCALE)


def _too_close(a: Point, b: Point) -> bool:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy < SNAP_DISTANCE * SNAP_DISTANCE


def _ray(origin: Point, angle: float, length: float, highway: bool, ident: int) -> Segment:
    end = Point(origin.x + length * math.cos(angle), origin.y + length * math.sin(angle))
    return Segment(origin, end, highway, ident)


@dataclass
class CityGenerator:
    """Grows a road network from a single highway segment.

    Candidate segments wait in a queue ordered by priority; each accepted
    segment proposes a continuation and, in populated areas, side streets.
    """

    segment_limit: int = SEGMENT_LIMIT
    seed: int | None = DEFAULT_SEED
    segments: list[Segment] = field(default_factory=list, init=False, repr=False)
    _queue: list[tuple[Segment, float]] = field(default_factory=list, init=False, repr=False)
    _rng: random.Random = field(default_factory=random.Random, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.segment_limit <= 0:
            raise ValueError("segment limit must be > 0")

    def _enqueue(self, segment: Segment, priority: float) -> None:
        if len(self._queue) < MAX_QUEUE:
            self._queue.append((segment, priority))

    def _dequeue(self) -> Segment:
        index, (segment, _) = min(enumerate(self._queue), key=lambda item: item[1][1])
        last = self._queue.pop()
        if index < len(self._queue):
            self._queue[index] = last
        return segment

    def _add_segment(self, segment: Segment) -> None:
        if len(self.segments) < MAX_SEGMENTS:
            self.segments.append(segment)

    def _apply_local_constraints(self, segment: Segment) -> bool:
        """Snap the segment's end onto a nearby existing end; always accepts."""
        for other in self.segments:
            if _too_close(segment.end, other.end):
                segment.end = other.end
                break
        return True

    def _side_streets(
        self, origin: Point, direction: float, length: float, probability: float, out: list[Segment]
    ) -> None:
        threshold = probability * 100
        for angle in (
            direction - math.pi / 2.0 + _DEVIATION,
            direction + math.pi / 2.0 - _DEVIATION,
        ):
            if self._rng.randrange(100) < threshold:
                out.append(_ray(origin, angle, length, False, len(self.segments) + len(out)))

    def _global_goals(self, segment: Segment) -> list[Segment]:
        out: list[Segment] = []
        direction = math.atan2(segment.end.y - segment.start.y, segment.end.x - segment.start.x)
        origin = segment.end
        base_pop = _population_at(origin)
        length = HIGHWAY_SEGMENT_LENGTH if segment.highway else SEGMENT_LENGTH
        ident = len(self.segments)

        straight = _ray(origin, direction, length, segment.highway, ident)
        offset = (self._rng.randrange(200) - 100) / 100.0
        wandering = _ray(origin, direction + offset * _DEVIATION, length, segment.highway, ident)

        chosen = wandering if _population_at(wandering.end) > _population_at(straight.end) else straight
        out.append(chosen)
        chosen_pop = _population_at(chosen.end)

        if segment.highway and chosen_pop > _HIGHWAY_BRANCH_POPULATION:
            self._side_streets(origin, direction, length, HIGHWAY_BRANCH_PROBABILITY, out)
        elif not segment.highway and base_pop > _STREET_BRANCH_POPULATION:
            self._side_streets(origin, direction, length, DEFAULT_BRANCH_PROBABILITY, out)
        return out

    def generate(self) -> list[Segment]:
        """Run the generation from scratch and return the accepted segments."""
        self._rng = random.Random(self.seed)
        self.segments = []
        self._queue = []

        root = Segment(Point(0.0, 0.0), Point(HIGHWAY_SEGMENT_LENGTH, 0.0), True, 0)
        self._enqueue(root, 0)
        limit = min(self.segment_limit, MAX_SEGMENTS)

        while self._queue and len(self.segments) < limit:
            current = self._dequeue()
            if not self._apply_local_constraints(current):
                continue
            self._add_segment(current)

            branches = self._global_goals(current)
            for branch in branches:
                current.add_connection(branch)
            priority = current.id + 1
            for branch in branches:
                if branch.highway:
                    self._enqueue(branch, priority)
            for branch in branches:
                if not branch.highway:
                    self._enqueue(branch, priority)

        return list(self.segments)


def full_generate_city(segment_limit: int = SEGMENT_LIMIT, seed: int | None = DEFAULT_SEED) -> list[Segment]:
    """Generate a full network, print every segment and a summary, return it."""
    print("Starting full city generation")
    segments = CityGenerator(segment_limit, seed).generate()
    for segment in segments:
        print(segment.describe())
    print(f"Generated {len(segments)} segments.")
    return segments
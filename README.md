# citygen

Procedural city road-network generation. A highway grows outward from the
origin along the x axis. Each new segment is steered by a fractal Perlin
"population" noise field. In dense areas it branches into side streets. A
segment whose end lands within 15 units of an existing segment's end is
snapped onto that end.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
citygen            # generate with the default segment limit (2048)
citygen 500        # stop after 500 segments
```

The command prints `Starting full city generation`, then one line per
generated segment, for example:

```
Segment 0: (0.0, 0.0) -> (200.0, 0.0), highway=1, links=1
```

A final line gives the count: `Generated N segments.` The segment limit
is read from the leading digits of the first argument. If it is not greater
than zero, the command prints `Invalid segment limit. Must be > 0` and
exits with status 1. The command always uses the default random seed (1),
so repeated runs print the same network.

## Library use

```python
from citygen.generation import CityGenerator, full_generate_city, generate_city
from citygen.noise import population_noise
from citygen.quadtree import AABB, Quadtree
from citygen.geometry import Point, angle_between

segments = full_generate_city(200, 42)    # segment limit, random seed; prints and returns

generator = CityGenerator(segment_limit=100, seed=7)
roads = generator.generate()               # same result for the same seed
highways = [s for s in roads if s.highway]

density = population_noise(0.5, 0.25)
print(angle_between(Point(0, 0), Point(1, 1)))   # 45.0

tree = Quadtree(AABB(0, 0, 1000, 1000))
tree.insert(AABB(10, 10, 5, 5), "a")
tree.retrieve(AABB(0, 0, 50, 50))          # ["a"]
```

The modules:

- `citygen.geometry`: the frozen `Point` dataclass and `angle_between`, which gives a direction in degrees.
- `citygen.noise`: `perlin_noise3`, `fbm_noise3` and `population_noise`. `population_noise` is a 6-octave fractal sum held to single precision.
- `citygen.segment`: `Segment`, a road piece with `start`, `end`, `highway`, `id`, `length` and `connections`. `add_connection()` links a successor. `describe()` gives the one-line summary shown above.
- `citygen.quadtree`: `AABB`, whose `overlaps()` tests two boxes, and `Quadtree`. A `Quadtree` has `insert()`, `retrieve()` (with an optional `max_count`), `clear()`, iteration and `len()`. Nodes split after 10 entries, down to 5 levels. A full node at the deepest level drops new entries, and `insert()` then returns `False`.
- `citygen.generation`: `CityGenerator`, `full_generate_city`, and `generate_city`, which prints and returns a fixed two-segment sample. It also holds the tuning constants such as `SEGMENT_LENGTH`, `HIGHWAY_SEGMENT_LENGTH`, `SNAP_DISTANCE` and the branch probabilities.
- `citygen.cli`: `main()`, behind the `citygen` command.

`CityGenerator` raises `ValueError` for a segment limit that is not greater
than zero. At most 4096 segments are kept, whatever the limit. A seed of
`None` gives a different network on each run.

## What it does not do

- The generator does not test road intersections. Apart from snapping end points, segments may cross each other freely.
- The quadtree is a standalone utility. The generator does not use it.
- There is no rendering or file export. Output is the printed text and the returned `Segment` objects.
- The width, capacity and speed constants in `citygen.generation` are defined but play no part in generation.
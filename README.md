# gridbot

Small building blocks for a differential-drive robot that explores a room
on a coarse occupancy grid.

## Modules

- `gridbot.gridmap`: a fixed 9 × 19 occupancy grid of 10 cm cells.
  - `Cell` is an `IntEnum` with `UNKNOWN` (-1), `FREE` (0) and `OCCUPIED` (1).
  - `Point` is a frozen dataclass holding `row` and `col`.
  - `GridMap` starts with every cell `UNKNOWN`. `reset()` sets them all back
    to `UNKNOWN`. `world_to_grid(x, y)` divides centimetre coordinates by the
    cell size, truncates them to integers and clamps the result onto the grid,
    returning a `Point` (`x` selects the column, `y` the row).
    `mark_free(x, y)` and `mark_occupied(x, y)` set the cell under a world
    point. `get_cell(row, col)` returns a cell's state and raises `IndexError`
    outside the grid; `in_bounds(row, col)` tells whether a cell exists.
- `gridbot.explorer`: `Explorer(grid_map)`.
  - `find_nearest_frontier_cell(start)` returns the free cell next to an
    unknown cell that is nearest to `start` by Manhattan distance; ties go to
    the first such cell in row-major order. Without a frontier it returns
    `start`.
  - `plan_path_to(start, goal)` runs a breadth-first search over free cells
    (up, down, left, right) and returns the shortest path as a list of
    `Point`s from `start` to `goal` inclusive, `[start]` when they are equal,
    or `[]` when the goal cannot be reached.
- `gridbot.pid`: `PIDController(kp, ki, kd, min_output, max_output, clamp_i,
  clock)`. `update(value, target_value)` returns the sum of the proportional,
  integral and derivative terms, clamped to `[min_output, max_output]`. The
  time step is measured in milliseconds from `clock`, which defaults to a
  monotonic millisecond clock. The accumulated error (error × dt) is clamped
  to `[-clamp_i, clamp_i]`. Two updates with no time between them give an
  infinite or NaN derivative term.
- `gridbot.odometry`: `Odometry(dia_left, dia_right, wheel_base, counts_left,
  counts_right, gear_ratio, gyro)` turns cumulative wheel encoder counts into
  a `Pose` (`x`, `y`, `theta`). `update(left_counts, right_counts)` integrates
  the change since the previous call and returns the new pose; `pose` gives
  the current one. Wheel travel per count is `PI * diameter / (counts *
  gear_ratio)` with `PI = 3.14159`. Without a gyro, heading comes from the
  difference of the wheel travels over `wheel_base`. With `gyro`, a callable
  returning a raw z-axis rate, its bias is averaged from 100 readings at
  construction and each update adds one bias-corrected reading to `theta`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from gridbot.gridmap import GridMap, Point
from gridbot.explorer import Explorer

grid = GridMap()
for x in range(0, 50, 10):
    grid.mark_free(x, 5)          # a free corridor along row 0
grid.mark_occupied(25, 15)

explorer = Explorer(grid)
start = Point(0, 0)
target = explorer.find_nearest_frontier_cell(start)
path = explorer.plan_path_to(start, target)
print(target, path)
```

A PID loop with a controlled clock:

```python
from gridbot.pid import PIDController

now = [0]
pid = PIDController(1.0, 0.01, 0.1, -100, 100, 500, clock=lambda: now[0])
now[0] += 20
command = pid.update(value=3.0, target_value=10.0)
```

Odometry from encoder counts:

```python
from gridbot.odometry import Odometry

odom = Odometry(3.2, 3.2, 9.6, 12, 12, 75, gyro=None)
pose = odom.update(left_counts=900, right_counts=900)
print(pose.x, pose.y, pose.theta)
```

## What it does not do

gridbot is a library of pure computations. It does not talk to a robot: it
reads no sensors (range finders, encoders or gyros must be read by your own
code and passed in), drives no motors and writes to no display. It has no
command-line program and keeps no map or pose on disk.
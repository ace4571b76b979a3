# yuletide

Solvers for a set of seasonal programming puzzles: calorie counting,
rock-paper-scissors scoring, circular list mixing, calibration values,
pipe mazes, cosmic expansion, damaged spring records, mirror patterns,
tilting rock platforms, lens hashing, light beams, crucible paths and
lagoon digging.

Each puzzle lives in its own module and can be used from Python or run
as a command.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Every command takes the path of a puzzle input file as its one optional
argument; without it, or given `-`, it reads standard input. It prints
the answer to each part on its own line.

```
yuletide-calories  < input.txt
yuletide-rps       < input.txt
yuletide-mixing    < input.txt
yuletide-trebuchet < input.txt
yuletide-pipes     < input.txt
yuletide-galaxies  < input.txt
yuletide-springs   < input.txt
yuletide-mirrors   < input.txt
yuletide-rocks     < input.txt
yuletide-lenses    < input.txt
yuletide-beams     < input.txt
yuletide-crucible  < input.txt
yuletide-lagoon    < input.txt
```

`yuletide-rps`, `yuletide-mixing` and `yuletide-pipes` print a single
answer; the others print two.

## Library use

Most modules offer `part_one(text)` and `part_two(text)`, taking the
whole puzzle input as a string:

```python
from yuletide import calories, lenses, crucible

text = open("input.txt").read()
print(calories.part_one(text), calories.part_two(text))
print(lenses.holiday_hash("HASH"))
print(crucible.part_two(text))
```

Lower-level pieces are available too, for example:

- `yuletide.rps.total_score(text)` – score of a strategy guide, with
  `Shape` for the hand shapes.
- `yuletide.mixing.grove_sum(numbers)` – sum of the grove coordinates
  after mixing a list of integers.
- `yuletide.pipes.farthest_distance(text)` – steps to the point of the
  pipe loop farthest from the start.
- `yuletide.galaxies.distance_sum(lines, expansion)` – sum of pairwise
  distances with empty rows and columns grown by `expansion`.
- `yuletide.springs.count_arrangements(pattern, groups)` – number of ways
  a damaged record can match its group sizes.
- `yuletide.rocks.part_two(text, cycles)` – load on the north beams after
  a number of spin cycles.
- `yuletide.beams.energized(grid, row, col, direction)` – tiles lit by a
  beam entering at a given place, with `Direction` giving the heading.
- `yuletide.crucible.min_heat_loss(grid, min_run, max_run)` – least heat
  loss with the given limits on straight runs.
- `yuletide.lagoon.lagoon_area(instructions)` – area dug out by a list
  of `Instruction` values.
- `yuletide.lenses.LensBoxes` – the lens boxes, with `put`, `remove`,
  `apply` and `focusing_power`.

Malformed input raises `ValueError`.

## What is not included

There is no solver for pulse-propagation networks of flip-flop,
conjunction and broadcaster modules; no module or command of this
package simulates button presses or counts the pulses sent.
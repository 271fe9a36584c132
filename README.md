# adventsolve

Solvers for Advent of Code puzzles: days 1–4 of 2015 and, for 2024, days
1–7, 9, 11, 13 and 15–21.

Each day lives in its own module, `adventsolve.y<year>_d<day>`, and offers a
`solve(text)` function that takes the puzzle input as a string. For most days
it returns a tuple with the answers to both parts; for 2024 day 21
(`adventsolve.y2024_d21.solve`) it returns a single number, the summed
complexity of the codes. A few `solve` functions take extra settings:

- `adventsolve.y2024_d18.solve(text, size=71, fallen=1024)` — grid size and
  the number of bytes that have fallen before the first path is measured.
- `adventsolve.y2024_d20.solve(text, threshold=100)` — the least time a cheat
  must save to be counted.

Some days expose their building blocks as well, for example:

- `adventsolve.y2015_d01.final_floor(text)` and `basement_position(text)`.
- `adventsolve.y2015_d02.wrapping_paper(text)` and `ribbon(text)`.
- `adventsolve.y2015_d04.find_suffix(secret, zeros)` — the smallest positive
  number that, appended to the secret, gives an MD5 digest starting with the
  given number of zero hex digits.
- `adventsolve.y2024_d02.first_violation(levels)` — the index of the first
  level that breaks a safe decrease, or `None`.
- `adventsolve.y2024_d07.can_make(target, numbers, allow_concat)` — whether the
  numbers can be combined left to right into the target.
- `adventsolve.y2024_d11.blink(counts)` — one step of the stone rules on a
  mapping from stone value to count.
- `adventsolve.y2024_d13.prize_cost(a, b, prize)` — the token cost of a claw
  machine, or 0 when the prize cannot be reached exactly.
- `adventsolve.y2024_d17.run_program(registers, program)` and
  `find_quine(program)` — the three-register machine and its self-output search.
- `adventsolve.y2024_d18.shortest_path(blocked, size)` — fewest steps across
  the grid, or `None` when there is no way through.
- `adventsolve.y2024_d19.count_arrangements(design, towels)` — the number of
  ways a design splits into the available towels.
- `adventsolve.y2024_d21.keypad_paths(pad, code, start)` — button sequences
  that type a code on the numeric (`NUMERIC`) or directional (`DIRECTIONAL`)
  keypad.

Malformed input raises `ValueError`.

## Installation

```
pip install .
```

## Usage from Python

```python
from adventsolve import y2015_d01

print(y2015_d01.solve("(()))("))
```

## Command line

Every covered day has a command named after it. It reads the puzzle input
from the path given as its only argument, or from `input/<year>/<day>` under
the current directory when no path is given, and prints the answers:

```
adventsolve-2015-01
adventsolve-2024-07 path/to/input.txt
adventsolve-2024-17
```

The full set is `adventsolve-2015-01` to `adventsolve-2015-04` and, for 2024,
`adventsolve-2024-01` to `-07`, `-09`, `-11`, `-13` and `-15` to `-21`.
The command for 2024 day 16 also prints the maze with the tiles on the best
routes marked `O`.

## What is not covered

There are no solvers for 2024 days 8, 10, 12 and 14, and no commands for
them. Days 5–25 of 2015 and days 22–25 of 2024 are not covered either.

## Running the tests

```
pip install .[test]
pytest
```
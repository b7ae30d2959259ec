# puzzledays

Solvers for eleven days of small programming puzzles: paired lists, sensor
reports, corrupted memory, word searches, page ordering, a patrolling guard,
calibration equations, antenna antinodes, disk compaction, hiking trails and
splitting stones.

The package has no dependencies beyond the Python standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running a day

Each day has its own command, `puzzledays-day01` through `puzzledays-day11`.
Every command takes the puzzle part (`1` or `2`) and, optionally, the path of
the input file, which defaults to `input.txt` in the current directory:

    puzzledays-day01 1 input.txt
    puzzledays-day01 2 input.txt
    puzzledays-day11 2

The answer is printed on standard output. A few parts also print how long
they took:

- `puzzledays-day06 1` prints `got result <count> in <seconds>s`.
- `puzzledays-day07 2` prints `got <total> in <seconds>s`.
- `puzzledays-day09 2` prints `got <checksum> in <seconds>s`, and when no path
  is given it reads `evil-input.txt` instead of `input.txt`.

## Using the solvers from Python

Every day lives in its own module, `puzzledays.day01` to `puzzledays.day11`.
Each module can parse puzzle text directly as well as read it from a file:

    from puzzledays import day01, day02, day11

    left, right = day01.parse_lists("3   4\n4   3\n2   5\n")
    print(day01.total_distance(left, right))
    print(day01.similarity(left, right))

    reports = day02.parse_reports("7 6 4 2 1\n1 2 7 8 9\n")
    print(sum(day02.is_safe(r) for r in reports))

    stones = day11.parse_stones("125 17")
    for _ in range(25):
        stones.blink()
    print(stones.count())

What each module offers:

- `day01`: `parse_lists`, `read_lists`, `total_distance`, `appearances`,
  `similarity`. Lines must hold two unsigned numbers separated by exactly
  three spaces.
- `day02`: `parse_reports`, `read_reports`, `is_safe`, `is_safe_dampened`.
- `day03`: `read_memory`, `find_muls`, `do_indices`, `dont_indices`,
  `switch_indices`, `enabled_muls`.
- `day04`: `parse_grid`, `read_word_search`, `find_char`, `check_xmas`,
  `num_xmas`, `check_x_mas`, `num_x_mas`. `check_x_mas` raises `IndexError`
  for a position without all four diagonal neighbours.
- `day05`: the `Rule` dataclass, `parse_rule`, `parse_input`, `read_input`,
  `relevant_pages`, `valid_revision`, `correct_revision`.
- `day06`: `Direction`, `MoveResult`, `Cell` and `Map` (with `copy`, `step`,
  `run_route`, `loop_obstacles`, `count_visited`), plus `parse_map` and
  `read_map`. The map's size is taken from its input.
- `day07`: `Operator` (with `apply`), `Equation` (with `evaluate`,
  `find_operators`, `find_operators_concat`), `parse_equations`,
  `read_input`. Operands are whole numbers.
- `day08`: `Vector` (with `in_bounds`), `parse_map`, `read_input`,
  `find_nodes`, `find_nodes_harmonic`. Antinodes are kept only inside a fixed
  50 by 50 map, whatever the size of the input.
- `day09`: the `Disk` dataclass, `parse_disk`, `read_input`, `refrag`,
  `refrag_checksum`, `defrag`, `checksum`. `refrag` and `defrag` change the
  disk in place.
- `day10`: `TopoMap` (with `trailheads`, `trail_scores`, `trail_ratings`),
  `parse_map`, `read_input`.
- `day11`: `apply_rules`, `Stones` (with `count` and `blink`),
  `parse_stones`, `read_stones`.

Malformed input raises `ValueError`.

## What it does not do

The package does not fetch puzzle inputs or submit answers; it only reads
input files you already have and prints the results.
# algolab

A collection of small, self-contained programs and libraries:

- textbook algorithms: cycle detection (Floyd and Brent), heap sort and a
  bounded max priority queue, and median-of-medians selection;
- a Gale–Shapley stable matching of students and teachers;
- Wordle tools: a console game, a dictionary merger, a dictionary encoder
  and an interactive solver;
- solutions to Advent of Code 2021 puzzles (days 1–16 and 18).

Everything uses the standard library only and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Algorithms

```
algolab-find-cycle -f numbers.txt            # Floyd's algorithm
algolab-find-cycle -f numbers.txt -a brent   # Brent's algorithm
algolab-find-cycle -f numbers.txt -l3        # join the tail back to index 3
```

The input file holds whitespace-separated integers. Reading stops at the
first value already seen, which closes the loop onto that earlier element.
`-l` with an index (written without a space) adds a loop from the tail to
that element; without an index, or with an index past the end, the tail
loops onto itself. The command prints where the loop starts and how long
it is.

```
algolab-heapsort           # both demonstrations
algolab-heapsort sort      # heap sort of a sample array
algolab-heapsort queue     # build, insert into and extract from a priority queue
algolab-select             # element of rank 0 in a sample array
algolab-select 5           # element of rank 5
```

From Python:

- `algolab.cycle`: `Node`, `build_list`, `read_list`, `iter_nodes`,
  `find_node`, `add_tail_loop`, and `floyd` / `brent`, which return a
  `CycleInfo(start, length)` and raise `ValueError` if the list does not loop;
- `algolab.heap`: `heap_sort` (in place), `max_heapify`, `build_max_heap`,
  and `MaxPriorityQueue` with `insert`, `increase_key`, `maximum` and
  `extract_max`, raising `HeapError` on underflow, a full queue or a key
  that does not increase;
- `algolab.select`: `partition`, `insertion_sort`, and `select(values, rank)`,
  which returns the element of 0-based rank and rearranges `values`.

## Stable matching

```
algolab-gale-shapley -s students.txt -t teachers.txt
```

Each file holds ten lines of the form `name id pref pref ...`, listing the
IDs of the opposite group from most to least preferred. Student IDs run
from 0 to 9 and teacher IDs from 10 to 19. The command prints each match
with both sides' ranking of it, then how many of the ten matches are
stable. The pieces are in `algolab.matching.pool` (`Role`, `Participant`,
`Pool`) and `algolab.matching.galeshapley` (`generate_pool`,
`read_pool_file`, `run_gale_shapley`).

## Wordle

```
algolab-wordle                               # guess the hidden word (GUESS by default)
algolab-wordle crane                         # choose the hidden word
algolab-wordle-zip first.txt second.txt      # merge two word lists into dict/zippedWords.txt
algolab-wordle-encode words.txt              # write encode/encodingKey.txt and encode/encodedWords.txt
algolab-wordle-solver encode/encodedWords.txt encode/encodingKey.txt
```

The game reads guesses from standard input and shows the letters in the
right place and those present elsewhere. The `dict` and `encode`
directories must already exist for the zip and encode commands to write
their output.

The encoder ranks letters by how often they occur in the dictionary and
packs each word into one integer that stores both the letters it contains
and their order. Words come out sorted by that integer, largest first. The
solver shows up to five suggestions from that list and narrows it after
each round. For each round you enter the guess, the letters that were in
the right place (with `*` for the other positions), and the letters that
were in the word but in the wrong place.

## Advent of Code 2021

Each day takes the puzzle input file as its argument and prints both
parts' answers; `--part 1` or `--part 2` prints only one.

```
aoc2021-day01 input.txt
aoc2021-day06 input.txt --days 18   # any number of days
aoc2021-day11 input.txt --steps 10  # flash count after 10 steps
aoc2021-day14 input.txt 40          # number of insertion steps (default 1)
```

Days 1 to 16 and day 18 are available as `aoc2021-day01` … `aoc2021-day16`
and `aoc2021-day18`. Their functions live in `algolab.aoc.day01` …
`algolab.aoc.day18`, for example `count_increases`, `navigate`,
`power_rates`, `simulate`, `decode_entry`, `count_paths`, `lowest_risk`,
`parse_packet`, `evaluate` and `add_all`.

## What is not included

- There is no merge sort and no maximum-subarray routine.
- There is no solution for Advent of Code 2021 day 17, and day 18 adds and
  reduces snailfish numbers but does not compute magnitudes.
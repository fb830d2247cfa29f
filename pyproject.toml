[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms, a stable-matching solver, Wordle tools and Advent of Code 2021 solutions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "heap sort",
    "priority queue",
    "selection",
    "cycle detection",
    "stable matching",
    "gale-shapley",
    "wordle",
    "advent of code",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-find-cycle = "algolab.cycle:main"
algolab-heapsort = "algolab.heap:main"
algolab-select = "algolab.select:main"
algolab-gale-shapley = "algolab.matching.galeshapley:main"
algolab-wordle = "algolab.wordle.game:main"
algolab-wordle-zip = "algolab.wordle.zipwords:main"
algolab-wordle-encode = "algolab.wordle.encode:main"
algolab-wordle-solver = "algolab.wordle.solver:main"
aoc2021-day01 = "algolab.aoc.day01:main"
aoc2021-day02 = "algolab.aoc.day02:main"
aoc2021-day03 = "algolab.aoc.day03:main"
aoc2021-day04 = "algolab.aoc.day04:main"
aoc2021-day05 = "algolab.aoc.day05:main"
aoc2021-day06 = "algolab.aoc.day06:main"
aoc2021-day07 = "algolab.aoc.day07:main"
aoc2021-day08 = "algolab.aoc.day08:main"
aoc2021-day09 = "algolab.aoc.day09:main"
aoc2021-day10 = "algolab.aoc.day10:main"
aoc2021-day11 = "algolab.aoc.day11:main"
aoc2021-day12 = "algolab.aoc.day12:main"
aoc2021-day13 = "algolab.aoc.day13:main"
aoc2021-day14 = "algolab.aoc.day14:main"
aoc2021-day15 = "algolab.aoc.day15:main"
aoc2021-day16 = "algolab.aoc.day16:main"
aoc2021-day18 = "algolab.aoc.day18:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.hatch.build.targets.sdist]
include = ["algolab", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

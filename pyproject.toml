[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2020"
version = "1.0.0"
description = "Solutions to the 2020 Advent of Code puzzles, usable as a library and from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2020", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2020-day01 = "advent2020.day01:main"
advent2020-day02 = "advent2020.day02:main"
advent2020-day03 = "advent2020.day03:main"
advent2020-day04 = "advent2020.day04:main"
advent2020-day05 = "advent2020.day05:main"
advent2020-day06 = "advent2020.day06:main"
advent2020-day07 = "advent2020.day07:main"
advent2020-day08 = "advent2020.day08:main"
advent2020-day09 = "advent2020.day09:main"
advent2020-day10 = "advent2020.day10:main"
advent2020-day11 = "advent2020.day11:main"
advent2020-day12 = "advent2020.day12:main"
advent2020-day13 = "advent2020.day13:main"
advent2020-day14 = "advent2020.day14:main"
advent2020-day15 = "advent2020.day15:main"
advent2020-day16 = "advent2020.day16:main"
advent2020-day17 = "advent2020.day17:main"
advent2020-day18 = "advent2020.day18:main"
advent2020-day19 = "advent2020.day19:main"
advent2020-day20 = "advent2020.day20:main"
advent2020-day21 = "advent2020.day21:main"
advent2020-day22 = "advent2020.day22:main"
advent2020-day23 = "advent2020.day23:main"
advent2020-day24 = "advent2020.day24:main"
advent2020-day25 = "advent2020.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2020"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzledays"
version = "0.1.0"
description = "Solvers for eleven days of grid, list and number puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
puzzledays-day01 = "puzzledays.day01:main"
puzzledays-day02 = "puzzledays.day02:main"
puzzledays-day03 = "puzzledays.day03:main"
puzzledays-day04 = "puzzledays.day04:main"
puzzledays-day05 = "puzzledays.day05:main"
puzzledays-day06 = "puzzledays.day06:main"
puzzledays-day07 = "puzzledays.day07:main"
puzzledays-day08 = "puzzledays.day08:main"
puzzledays-day09 = "puzzledays.day09:main"
puzzledays-day10 = "puzzledays.day10:main"
puzzledays-day11 = "puzzledays.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzledays"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from 2015 and 2024"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solver", "aoc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
adventsolve-2015-01 = "adventsolve.y2015_d01:main"
adventsolve-2015-02 = "adventsolve.y2015_d02:main"
adventsolve-2015-03 = "adventsolve.y2015_d03:main"
adventsolve-2015-04 = "adventsolve.y2015_d04:main"
adventsolve-2024-01 = "adventsolve.y2024_d01:main"
adventsolve-2024-02 = "adventsolve.y2024_d02:main"
adventsolve-2024-03 = "adventsolve.y2024_d03:main"
adventsolve-2024-04 = "adventsolve.y2024_d04:main"
adventsolve-2024-05 = "adventsolve.y2024_d05:main"
adventsolve-2024-06 = "adventsolve.y2024_d06:main"
adventsolve-2024-07 = "adventsolve.y2024_d07:main"
adventsolve-2024-09 = "adventsolve.y2024_d09:main"
adventsolve-2024-11 = "adventsolve.y2024_d11:main"
adventsolve-2024-13 = "adventsolve.y2024_d13:main"
adventsolve-2024-15 = "adventsolve.y2024_d15:main"
adventsolve-2024-16 = "adventsolve.y2024_d16:main"
adventsolve-2024-17 = "adventsolve.y2024_d17:main"
adventsolve-2024-18 = "adventsolve.y2024_d18:main"
adventsolve-2024-19 = "adventsolve.y2024_d19:main"
adventsolve-2024-20 = "adventsolve.y2024_d20:main"
adventsolve-2024-21 = "adventsolve.y2024_d21:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

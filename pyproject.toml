[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solvers for fifteen days of grid, parsing and simulation puzzles"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "grid", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocdays = "aocdays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

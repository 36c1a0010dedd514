[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrofill"
version = "0.1.0"
description = "Pack tetrominoes into the smallest square and print the result"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "packing", "backtracking", "tetris"]
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
tetrofill = "tetrofill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrofill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

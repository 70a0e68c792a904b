[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapuzzles"
version = "1.0.0"
description = "Solutions to classic data-structure exercises and coding puzzle events"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "puzzles", "codyssi", "everybody-codes"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsapuzzles = "dsapuzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsapuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

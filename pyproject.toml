[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marvin"
version = "0.1.0"
description = "Weighted A* route finder for digit-cost grid maps, with small string, buffer and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "a-star", "grid", "heuristic search", "printf", "linked list"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
marvin = "marvin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marvin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

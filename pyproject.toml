[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmpartition"
version = "0.1.0"
description = "Fiduccia-Mattheyses min-cut partitioning of circuit netlists in Bookshelf-style benchmark files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "eda",
    "vlsi",
    "partitioning",
    "fiduccia-mattheyses",
    "min-cut",
    "placement",
    "netlist",
    "bookshelf",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fmpartition = "fmpartition.cli:main"
fmpartition-graphgen = "fmpartition.graphgen:main"

[tool.hatch.build.targets.wheel]
packages = ["fmpartition"]

[tool.hatch.build.targets.sdist]
include = ["fmpartition", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

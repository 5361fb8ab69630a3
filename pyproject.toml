[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocraft"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting, searching, number theory, dynamic programming, string matching and backtracking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "number-theory",
    "dynamic-programming",
    "string-matching",
    "backtracking",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocraft = "algocraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algocraft"]

[tool.hatch.build.targets.sdist]
include = ["algocraft", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

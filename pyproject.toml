[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cseskit"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems: dynamic programming, combinatorics and number theory."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "dynamic-programming",
    "combinatorics",
    "number-theory",
    "modular-arithmetic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cseskit = "cseskit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cseskit"]

[tool.pytest.ini_options]
addopts = "-ra"

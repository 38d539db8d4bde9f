[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melp-runtime"
version = "0.1.0"
description = "Runtime support library for the MELP language: strings, lists, maps, optionals, console and file I/O, and persistent state"
requires-python = ">=3.10"
dependencies = []
keywords = ["melp", "runtime", "interpreter", "standard-library", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["melp_runtime"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtkit"
version = "0.1.0"
description = "Building blocks for terminal emulators: color math, color pair caching, color mapping, mouse reporting and cooperative threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "emulator", "curses", "color", "mouse", "coroutine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

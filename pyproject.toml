[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glutkit"
version = "0.1.0"
description = "Small utilities for timing, trace profiling, ANSI colour parsing, text wrapping and window placement math"
requires-python = ">=3.10"
dependencies = []
keywords = ["profiling", "stopwatch", "trace", "ansi", "text-wrapping", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glutkit"]

[tool.pytest.ini_options]
addopts = "-ra"

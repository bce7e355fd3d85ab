[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlcells"
version = "0.1.0"
description = "Spreadsheet cell values, cell matrices, structured argument lists and length-prefixed string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["spreadsheet", "cells", "matrix", "argument-list", "pascal-string"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlcells"]

[tool.pytest.ini_options]
addopts = "-ra"

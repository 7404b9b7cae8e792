[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorio"
version = "0.1.0"
description = "Byte and text cursor offsets: line/column tracking over grapheme clusters, offset ranges and their string forms."
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["cursor", "offset", "line", "column", "grapheme", "parser", "position", "range"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cursorio-line-dump = "cursorio.line_dump:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorio"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

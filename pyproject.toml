[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzparse"
version = "0.1.0"
description = "Parse .puz crossword puzzle files into structured data"
requires-python = ">=3.10"
dependencies = []
keywords = ["crossword", "parser", "puz", "puzzle", "binary-format"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puz = "puzparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puzparse"]

[tool.pytest.ini_options]
addopts = "-ra"

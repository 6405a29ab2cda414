[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seeschlacht"
version = "1.0.0"
description = "Two-player Battleship (Schiffe versenken) for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "schiffe versenken", "game", "terminal", "board game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seeschlacht = "seeschlacht.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seeschlacht"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

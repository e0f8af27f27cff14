[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostman"
version = "0.1.0"
description = "A terminal client for composing, sending and saving HTTP requests"
requires-python = ">=3.10"
dependencies = [
    "urwid",
]
keywords = ["http", "rest", "api", "client", "terminal", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gostman = "gostman.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gostman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

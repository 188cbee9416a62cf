[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrowbeat"
version = "0.1.0"
description = "A small terminal rhythm game: hit the falling arrows in time with the tune."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rhythm", "arcade", "arrows", "terminal", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arrowbeat = "arrowbeat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arrowbeat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

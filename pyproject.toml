[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakestage"
version = "1.0.0"
description = "A terminal snake game with walled stages, items, gates and missions"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "curses", "terminal", "arcade"]
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
snakestage = "snakestage.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["snakestage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

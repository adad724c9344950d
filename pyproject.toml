[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakepilot"
version = "0.1.0"
description = "A self-playing snake game: an A*-guided pilot chases food, follows its tail and fills open space to survive."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "pathfinding", "a-star", "pygame", "ai"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snakepilot = "snakepilot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakepilot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

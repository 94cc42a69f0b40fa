[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "settlesim"
version = "0.1.0"
description = "A turn-based simulation of settlements building facilities under selectable planning policies"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "settlement", "planning", "game", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
settlesim = "settlesim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["settlesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heroential"
version = "0.1.0"
description = "A small tile-based top-down action role-playing game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "rpg", "tilemap", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
heroential = "heroential.game:main"

[tool.hatch.build.targets.wheel]
packages = ["heroential"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

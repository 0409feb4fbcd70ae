[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerstacker"
version = "0.1.0"
description = "A tower-stacking arcade game drawn on a 64x32 pixel panel, with a terminal front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "stacker", "led-matrix", "hub75"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
towerstacker = "towerstacker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["towerstacker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

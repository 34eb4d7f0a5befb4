[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartroad"
version = "0.1.0"
description = "Simulation of autonomous cars crossing an intersection without traffic lights"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["simulation", "traffic", "intersection", "autonomous vehicles", "pygame"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
smartroad = "smartroad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["smartroad"]

[tool.pytest.ini_options]
addopts = "-ra"

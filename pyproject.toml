[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pricel"
version = "0.1.0"
description = "Simulation of locomotive axles passing a line of track sensors, with a log of the recorded passes"
requires-python = ">=3.10"
keywords = ["railway", "axle counter", "track sensor", "simulation", "wheel formula"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pricel = "pricel.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pricel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citygen"
version = "0.1.0"
description = "Procedural road-network generation driven by Perlin population noise"
requires-python = ">=3.10"
dependencies = []
keywords = ["procedural generation", "city", "road network", "perlin noise", "quadtree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
citygen = "citygen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["citygen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

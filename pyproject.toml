[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doomview"
version = "0.0.7"
description = "Geometry, camera, collision, vertex and input core for a Doom I/II level viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["doom", "bsp", "collision", "camera", "matrix", "vector", "3d"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["doomview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

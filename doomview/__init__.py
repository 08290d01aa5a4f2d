"""Vectors, matrices, camera, collision, vertex builders, input and option parsing for a Doom level viewer."""

__version__ = "0.0.7"
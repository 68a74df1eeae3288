"""Engine core for a 2D space shooter: vectors, regions, flags, input, resources, sprite batching, screens and scoring."""

__version__ = "0.1.0"
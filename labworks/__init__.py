"""Computer-architecture exercises: lists, vectors, matrices, sums, threaded arithmetic, BMP and HTTP helpers."""

__version__ = "0.1.0"
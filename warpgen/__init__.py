"""Seekable, size-bounded synthetic object generators (random and CSV data) for storage benchmarks."""

__version__ = "0.1.0"
__all__ = ["circular", "scrambler", "objects", "options", "csv_source", "random_source", "generator"]
"""MVG connections for the way home."""

__version__ = "3.0.0"

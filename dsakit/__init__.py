"""Classic data structures and algorithms with small interactive commands."""

__version__ = "0.1.0"
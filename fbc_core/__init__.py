"""Core library for declarative catalog normalization."""

__version__ = "0.1.0"

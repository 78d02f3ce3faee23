"""Plugin identity and dependency version checks."""

__version__ = "1.0.0"

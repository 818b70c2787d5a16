"""Status line generator built from small system readings."""

__version__ = "0.1.0"
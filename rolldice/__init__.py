"""Command-line dice roller with wild-die support."""

__version__ = "0.3.0"

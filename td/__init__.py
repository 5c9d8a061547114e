"""td - a two-level todo list for the command line."""

__version__ = "0.3.0"

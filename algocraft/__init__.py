"""Classic algorithms and data structures, with a command-line front end."""

__version__ = "0.1.0"
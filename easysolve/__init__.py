"""Solutions to classic introductory puzzles, grouped in strings, numbers and arrays, with a cli front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]
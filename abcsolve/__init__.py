"""Solutions to beginner contest problems, grouped by difficulty, with a command-line front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]
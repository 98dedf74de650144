"""A tile menu of small game scenes with fade transitions, drawn with pygame."""

__version__ = "0.1.0"
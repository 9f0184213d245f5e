"""flowlist: a small personal task tracker with ambient animated chrome."""

__version__ = "0.1.0"

"""
Top-level package for the Book Store API.

The HTTP service lives in ``app``; ``client`` holds a small
``requests`` based client for it.
"""

__all__ = []

"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` (settings, logging, errors), ``schemas`` (pydantic models),
``services`` (the in-memory book store) and ``api`` (versioned
routers).
"""

from .main import app, create_app  # noqa: F401

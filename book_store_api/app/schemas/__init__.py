"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are kept separate
from the in-memory records held by the service layer.
"""

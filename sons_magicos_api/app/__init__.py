"""
Application package initializer.

The project is organised into a few logical pieces: ``core`` holds
settings, logging, security and database helpers, ``schemas`` the
Pydantic payloads, ``services`` the storage collaborator behind the
instrument endpoints and ``api`` the versioned routers.
"""

from .main import app  # noqa: F401

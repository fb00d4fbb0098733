"""
Application package initializer.

The backend is split into a few small pieces: ``core`` holds settings,
logging and the network helpers, ``schemas`` the pydantic record
models, ``services`` the in-memory stores and the per-entity services
built on top of them, and ``api`` the routers.  ``main`` wires them
together.
"""

from .main import app, create_app  # noqa: F401

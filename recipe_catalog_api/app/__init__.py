"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The project is organised in layers: ``schemas`` holds the
entities and their input payloads, ``repositories`` the in-memory
collections, ``services`` the business rules, and ``api`` the versioned
FastAPI routers.  ``core`` provides configuration, logging, security
and the error taxonomy shared by all layers.
"""

from .main import app  # noqa: F401

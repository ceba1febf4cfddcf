"""
Application package for the InsureConnect API.

``main`` assembles the FastAPI application; ``core`` holds
configuration, logging, errors and the database handle; ``services``
contains the provider store; ``api`` maps HTTP requests onto it.
"""

from .main import app, create_app  # noqa: F401

"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors, storage and
formatting), ``schemas``, ``services`` and the ``api`` routers.
"""

from .main import app, create_app  # noqa: F401

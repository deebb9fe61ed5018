"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging and the in‑memory book
store), ``schemas`` (request and response bodies), ``services``
(operations over the store) and ``api`` (versioned HTTP routes).
"""

from .main import app  # noqa: F401

"""
Application package initializer.

The service is organised in layers: ``schemas`` describe payloads,
``core`` holds settings, logging, the in‑memory store and error
handlers, ``services`` contains the person business logic and ``api``
exposes it over HTTP, grouped by version under ``api/<version>/``.
"""

from .main import app  # noqa: F401

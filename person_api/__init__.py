"""
Top‑level package for the Person API.

All functionality lives in submodules under ``app``; the application
object itself is importable as ``person_api.app.main.app``.
"""

__all__ = []

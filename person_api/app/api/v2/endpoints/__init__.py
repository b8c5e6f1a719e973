"""Endpoint modules for API v2."""

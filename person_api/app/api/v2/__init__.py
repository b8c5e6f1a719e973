"""
Version 2 of the API.

Serves the same person endpoints as version 1; only the ``Info``
banner differs.
"""

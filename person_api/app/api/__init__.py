"""
API package containing versioned routes.

Each version subpackage (``v1``, ``v2``) exposes a top‑level
``router``.  Versions share the person endpoints and the
``PersonService`` behind them; only the version specific endpoints
(such as ``Info``) live in the version's own package.
"""

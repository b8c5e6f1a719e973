"""
Version 1 of the API.

Bundles the person endpoints and the version 1 ``Info`` endpoint.
Version 1 is also the default version served without a version
segment under ``/api``.
"""

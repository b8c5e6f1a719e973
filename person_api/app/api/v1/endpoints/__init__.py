"""
Endpoint modules for API v1.

``persons`` holds the Person CRUD routes that later versions reuse;
``info`` holds the version banner.
"""

"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON exchanged with clients.  The same
``PersonRead`` model is also what the in‑memory store keeps.
"""

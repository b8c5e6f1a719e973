"""
Top‑level router for version 2 of the API.

Version 2 has its own ``Info`` banner and reuses the version 1 person
endpoints unchanged.
"""

from fastapi import APIRouter

from person_api.app.api.v1.endpoints import persons
from .endpoints import info

router = APIRouter()

router.include_router(info.router, prefix="/Person", tags=["info"])
router.include_router(persons.router, prefix="/Person", tags=["persons"])

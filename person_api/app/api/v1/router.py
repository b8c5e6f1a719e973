"""
Top‑level router for version 1 of the API.

Everything lives under the ``/Person`` prefix.  The ``info`` router is
included first so ``/Person/Info`` is not swallowed by
``/Person/{person_id}``.
"""

from fastapi import APIRouter

from .endpoints import info, persons

router = APIRouter()

router.include_router(info.router, prefix="/Person", tags=["info"])
router.include_router(persons.router, prefix="/Person", tags=["persons"])

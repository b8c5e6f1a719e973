"""
Dependencies shared by the person endpoints of every API version.

Each request gets its own ``PersonService`` over its own store
session, so staged changes never leak between requests.
"""

from fastapi import Depends

from person_api.app.core.store import RepositorySession, get_session
from person_api.app.services.person_service import PersonService


def get_person_service(session: RepositorySession = Depends(get_session)) -> PersonService:
    return PersonService(session)

"""
Business logic for people.

``PersonService`` wraps a store session and implements listing,
filtered listing, retrieval, creation, PUT‑as‑upsert and deletion.
Every rejection is raised as an exception: subclasses of
``PersonValidationError`` are client input errors, subclasses of
``PersonNotFoundError`` mean nothing matched.  Input checks always run
before the store is touched, and each successful mutation is followed
by exactly one commit.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from person_api.app.core.store import DuplicateKeyError, PersonSession
from person_api.app.schemas.filter import PersonFilter
from person_api.app.schemas.person import PersonCreate, PersonRead, PersonReplace
from person_api.app.services.validation import is_valid_name

logger = logging.getLogger(__name__)


class PersonValidationError(ValueError):
    """The request carried invalid input."""


class EmptyFilterError(PersonValidationError):
    """A filtered listing was requested without any criteria."""


class PersonNotFoundError(LookupError):
    """The requested person does not exist."""


class NoMatchingPersonsError(PersonNotFoundError):
    """A filtered listing matched nobody."""


class PersonService:
    """Service for managing people through one store session."""

    def __init__(self, store: PersonSession) -> None:
        self.store = store

    async def list_persons(self) -> List[PersonRead]:
        """Return every person in store order."""
        return self.store.get()

    async def list_chocolate_lovers(self) -> List[PersonRead]:
        """Return every person who likes chocolate, possibly none."""
        return self.store.get(lambda p: p.likes_chocolate)

    async def filter_persons(self, person_filter: PersonFilter) -> List[PersonRead]:
        """Return the people matching ``person_filter``.

        Each present criterion narrows the result of the previous one:
        exact name, then chocolate preference, and the result cap is
        applied last so it counts only people that passed the other
        criteria.  Raises ``EmptyFilterError`` before reading the store
        when no criterion is given and ``NoMatchingPersonsError`` when
        the final result is empty (``maxResults=0`` included).
        """
        if person_filter.is_empty():
            raise EmptyFilterError("No filter was provided.")

        persons = self.store.get()
        if person_filter.name is not None:
            persons = [p for p in persons if p.name == person_filter.name]
        if person_filter.likes_chocolate is not None:
            persons = [p for p in persons if p.likes_chocolate == person_filter.likes_chocolate]
        if person_filter.max_results is not None:
            # A negative cap takes nothing.
            persons = persons[: max(person_filter.max_results, 0)]

        if not persons:
            logger.debug("Filter %s matched nobody", person_filter.model_dump(exclude_none=True))
            raise NoMatchingPersonsError("No people matched the provided filter.")
        return persons

    async def get_person(self, person_id: int) -> PersonRead:
        person = self.store.get_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(f"Person with ID #{person_id} does not exist.")
        return person

    async def create_person(self, data: PersonCreate) -> PersonRead:
        """Validate and insert a new person.

        The id is taken from ``data`` when given, otherwise the store
        assigns the next free one.  An id that is already in use is a
        validation error.
        """
        self._check_name(data.name)

        person_id = data.id if data.id is not None else self.store.next_key()
        person = PersonRead(id=person_id, name=data.name, likes_chocolate=data.likes_chocolate)
        try:
            self.store.insert(person)
            self.store.commit()
        except DuplicateKeyError:
            raise PersonValidationError(f"Person with ID #{person_id} already exists.") from None
        logger.info("Created person %s", person_id)
        return person

    async def upsert_person(self, person_id: int, data: PersonReplace) -> Tuple[PersonRead, bool]:
        """Replace the person at ``person_id`` or create it if absent.

        Returns ``(person, created)``.  Name validity is checked before
        the path/body id consistency, so a request with both problems
        reports the invalid name.
        """
        self._check_name(data.name)
        if person_id != data.id:
            raise PersonValidationError(
                f"Person ID provided in URL (ID #{person_id}) does not match "
                f"Person ID provided in PUT body (ID #{data.id})."
            )

        if self.store.get_by_id(person_id) is None:
            created = await self.create_person(
                PersonCreate(id=data.id, name=data.name, likes_chocolate=data.likes_chocolate)
            )
            return created, True

        person = PersonRead(id=person_id, name=data.name, likes_chocolate=data.likes_chocolate)
        self.store.update(person)
        self.store.commit()
        logger.info("Updated person %s", person_id)
        return person, False

    async def delete_person(self, person_id: int) -> None:
        if self.store.get_by_id(person_id) is None:
            raise PersonNotFoundError(f"Person with ID #{person_id} does not exist.")
        self.store.delete(person_id)
        self.store.commit()
        logger.info("Deleted person %s", person_id)

    @staticmethod
    def _check_name(name: str) -> None:
        if not is_valid_name(name):
            logger.debug("Rejected invalid name %r", name)
            raise PersonValidationError(f"Name '{name}' is not valid.")

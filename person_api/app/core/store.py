"""
In‑memory entity store and the FastAPI dependencies that expose it.

``InMemoryRepository`` holds the committed entities, keyed by an
attribute of the stored entity, behind a re‑entrant lock.  Changes go
through a ``RepositorySession``: a per‑caller unit of work that stages
``insert``, ``update`` and ``delete`` calls in its own list.  A session
sees its own staged changes immediately, so a lookup followed by a
mutation in the same request observes its own writes; nobody else sees
them until the session commits, and ``rollback`` only discards that
session's work.  There is no version token on entities, so two
concurrent replacements of the same key are last‑commit‑wins.

The process‑wide repository is created by ``init_store`` during
application startup and handed to request handlers through
``get_store``; ``get_session`` opens one session per request.  Tests
override ``get_store`` with their own instance via
``app.dependency_overrides``.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from fastapi import Depends

from person_api.app.schemas.person import PersonRead

E = TypeVar("E")
K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)

_INSERT = "insert"
_UPDATE = "update"
_DELETE = "delete"


class DuplicateKeyError(KeyError):
    """Raised when inserting an entity whose key is already taken."""


class MissingKeyError(KeyError):
    """Raised when updating or deleting a key that does not exist."""


def _select(
    entities: Iterable[E],
    predicate: Optional[Callable[[E], bool]] = None,
    order_by: Optional[Callable[[E], object]] = None,
) -> List[E]:
    result = [copy.deepcopy(e) for e in entities]
    if predicate is not None:
        result = [e for e in result if predicate(e)]
    if order_by is not None:
        result.sort(key=order_by)
    return result


def _apply(
    rows: Dict[K, E], changes: Iterable[Tuple[str, K, Optional[E]]], strict: bool = True
) -> Dict[K, E]:
    """Return a copy of ``rows`` with ``changes`` applied in order.

    With ``strict`` a change that no longer fits ``rows`` raises instead
    of being applied loosely.
    """
    rows = dict(rows)
    for op, key, entity in changes:
        if strict and op == _INSERT and key in rows:
            raise DuplicateKeyError(key)
        if strict and op in (_UPDATE, _DELETE) and key not in rows:
            raise MissingKeyError(key)
        if op == _DELETE:
            rows.pop(key, None)
        else:
            rows[key] = entity
    return rows


class InMemoryRepository(Generic[E, K]):
    """Committed entities shared by every session.

    Parameters
    ----------
    key_attr : str
        Name of the entity attribute holding its key.
    entities : iterable, optional
        Initial, already committed contents.
    """

    def __init__(self, key_attr: str = "id", entities: Optional[List[E]] = None) -> None:
        self.key_attr = key_attr
        self._rows: Dict[K, E] = {}
        self._lock = threading.RLock()
        for entity in entities or []:
            self._rows[getattr(entity, key_attr)] = copy.deepcopy(entity)

    def session(self) -> "RepositorySession[E, K]":
        """Open a unit of work against this repository."""
        return RepositorySession(self)

    def snapshot(self) -> Dict[K, E]:
        with self._lock:
            return dict(self._rows)

    def get(
        self,
        predicate: Optional[Callable[[E], bool]] = None,
        order_by: Optional[Callable[[E], object]] = None,
    ) -> List[E]:
        """Committed entities in insertion order."""
        return _select(self.snapshot().values(), predicate, order_by)

    def get_by_id(self, key: K) -> Optional[E]:
        entity = self.snapshot().get(key)
        return copy.deepcopy(entity) if entity is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def _commit(self, changes: List[Tuple[str, K, Optional[E]]]) -> None:
        # All changes apply, or none do.
        with self._lock:
            self._rows = _apply(self._rows, changes)


class RepositorySession(Generic[E, K]):
    """Per‑caller unit of work with explicit commit."""

    def __init__(self, repository: InMemoryRepository[E, K]) -> None:
        self._repository = repository
        self._pending: List[Tuple[str, K, Optional[E]]] = []

    def _key_of(self, entity: E) -> K:
        return getattr(entity, self._repository.key_attr)

    def _view(self) -> Dict[K, E]:
        """Committed rows with this session's staged changes on top."""
        return _apply(self._repository.snapshot(), self._pending, strict=False)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(
        self,
        predicate: Optional[Callable[[E], bool]] = None,
        order_by: Optional[Callable[[E], object]] = None,
    ) -> List[E]:
        """Return entities in insertion order.

        ``predicate`` narrows the result, ``order_by`` is a sort key
        applied after filtering.
        """
        return _select(self._view().values(), predicate, order_by)

    def get_by_id(self, key: K) -> Optional[E]:
        entity = self._view().get(key)
        return copy.deepcopy(entity) if entity is not None else None

    def count(self) -> int:
        return len(self._view())

    def next_key(self) -> int:
        """Next free integer key: one past the largest key, starting at 1."""
        keys = [k for k in self._view() if isinstance(k, int)]
        return max(keys, default=0) + 1

    # ------------------------------------------------------------------
    # Staged mutations
    # ------------------------------------------------------------------
    def insert(self, entity: E) -> None:
        key = self._key_of(entity)
        if key in self._view():
            raise DuplicateKeyError(key)
        self._pending.append((_INSERT, key, copy.deepcopy(entity)))

    def update(self, entity: E) -> None:
        key = self._key_of(entity)
        if key not in self._view():
            raise MissingKeyError(key)
        self._pending.append((_UPDATE, key, copy.deepcopy(entity)))

    def delete(self, key: K) -> None:
        if key not in self._view():
            raise MissingKeyError(key)
        self._pending.append((_DELETE, key, None))

    def commit(self) -> int:
        """Apply this session's staged changes and return how many were applied.

        Raises ``DuplicateKeyError`` or ``MissingKeyError`` if another
        session committed a conflicting change first; nothing is applied
        and the staged changes are dropped.
        """
        changes, self._pending = self._pending, []
        self._repository._commit(changes)
        logger.debug("Committed %s change(s)", len(changes))
        return len(changes)

    def rollback(self) -> None:
        discarded = len(self._pending)
        self._pending = []
        if discarded:
            logger.debug("Discarded %s staged change(s)", discarded)


PersonStore = InMemoryRepository[PersonRead, int]
PersonSession = RepositorySession[PersonRead, int]

# The people used throughout the documentation and the test-suite.
SAMPLE_PERSONS: List[PersonRead] = [
    PersonRead(id=1, name="Margaret Thatcher", likes_chocolate=True),
    PersonRead(id=2, name="William Shakespeare", likes_chocolate=True),
    PersonRead(id=3, name="George Orwell", likes_chocolate=False),
    PersonRead(id=4, name="J.K. Rowling", likes_chocolate=False),
    PersonRead(id=5, name="Harper Lee", likes_chocolate=True),
]

_store: Optional[PersonStore] = None


def init_store(seed: bool = False) -> PersonStore:
    """Create the process‑wide store, optionally seeded with ``SAMPLE_PERSONS``."""
    global _store
    _store = InMemoryRepository(key_attr="id", entities=SAMPLE_PERSONS if seed else None)
    logger.info("Initialised person store with %s record(s)", _store.count())
    return _store


def get_store() -> PersonStore:
    """FastAPI dependency returning the process‑wide store."""
    if _store is None:
        return init_store()
    return _store


def get_session(store: InMemoryRepository = Depends(get_store)) -> PersonSession:
    """FastAPI dependency opening one unit of work per request."""
    return store.session()

"""In-memory identity registry guarded by a reader/writer lock.

Lookups share the lock; issuance takes it exclusively. Entries are never
removed, so the map grows for the lifetime of the process.
"""

import threading
from contextlib import contextmanager
from collections.abc import Iterator
from uuid import UUID, uuid4

from product_api.application.interfaces import IdentityRegistry


class ReadWriteLock:
    """Many concurrent readers or one writer.

    Waiting writers block new readers so issuance is not starved by a steady
    stream of lookups.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryIdentityRegistry(IdentityRegistry):
    """Implements the IdentityRegistry port with a dict held in process memory."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._users: dict[UUID, str] = {}

    def issue(self, username: str) -> UUID:
        identifier = uuid4()
        with self._lock.write():
            self._users[identifier] = username
        return identifier

    def lookup(self, identifier: UUID) -> str | None:
        with self._lock.read():
            return self._users.get(identifier)

"""Abstract identity registry interface (port)."""

from abc import ABC, abstractmethod
from uuid import UUID


class IdentityRegistry(ABC):
    """Port for identifier → username storage — implemented in the infrastructure layer."""

    @abstractmethod
    def issue(self, username: str) -> UUID:
        """Generate a fresh identifier, record it against ``username`` and return it."""
        ...

    @abstractmethod
    def lookup(self, identifier: UUID) -> str | None:
        """Return the username recorded for ``identifier``, or None."""
        ...

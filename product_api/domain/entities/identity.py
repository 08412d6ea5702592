"""Domain entity — an issued identifier and the username that claimed it."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Identity:
    """Immutable (identifier → username) pair.

    Created only when an identifier is issued; never updated or deleted.
    """

    id: UUID
    username: str

    @property
    def key(self) -> str:
        """Hyphenated identifier; also the owner key of the product store."""
        return str(self.id)


@dataclass(frozen=True)
class AuthenticatedOwner(Identity):
    """An identity whose identifier passed the ownership check for this request."""

"""Application service (use case) for identifier issuance and lookup."""

import logging
from uuid import UUID

from product_api.application.interfaces import IdentityRegistry
from product_api.domain.entities import Identity
from product_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class IdentityService:
    """Issues identifiers and reads identities back. Depends on the registry port (DI)."""

    def __init__(self, registry: IdentityRegistry):
        self._registry = registry

    def issue_identifier(self, username: str) -> Identity:
        identifier = self._registry.issue(username)
        logger.info("%s assigned to %s", username, identifier)
        return Identity(id=identifier, username=username)

    def get_identity(self, identifier: UUID) -> Identity:
        username = self._registry.lookup(identifier)
        if username is None:
            raise EntityNotFoundError("Identity", str(identifier))
        logger.info("Information provided about: %s", username)
        return Identity(id=identifier, username=username)

    def find_identity(self, raw_identifier: str) -> Identity:
        """Look an identity up from its string form.

        A malformed string is reported the same way as an unknown one.
        """
        try:
            identifier = UUID(raw_identifier)
        except ValueError:
            raise EntityNotFoundError("Identity", raw_identifier)
        return self.get_identity(identifier)

"""Ownership check run before every protected operation.

The caller passes the raw ``uuid`` header value. The guard either returns an
``AuthenticatedOwner`` or raises an ``OwnershipError`` subclass; it never
touches the product store.
"""

import logging
from uuid import UUID

from product_api.application.interfaces import IdentityRegistry
from product_api.domain.entities import AuthenticatedOwner
from product_api.domain.exceptions import InvalidIdentifierError, MissingIdentifierError

logger = logging.getLogger(__name__)


class OwnershipGuard:
    """Validates a claimed identifier against the identity registry."""

    def __init__(self, registry: IdentityRegistry):
        self._registry = registry

    def authenticate(self, raw_identifier: str | None) -> AuthenticatedOwner:
        if raw_identifier is None:
            logger.warning("Rejected request: no identifier header")
            raise MissingIdentifierError()

        try:
            identifier = UUID(raw_identifier)
        except ValueError:
            logger.warning("Rejected request: malformed identifier")
            raise InvalidIdentifierError()

        username = self._registry.lookup(identifier)
        if username is None:
            logger.warning("Rejected request: unknown identifier")
            raise InvalidIdentifierError()

        return AuthenticatedOwner(id=identifier, username=username)

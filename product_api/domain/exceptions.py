"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ProductNotFoundError(EntityNotFoundError):
    """Raised when an owner has no product record."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__("Product", owner)


class ProductAlreadyExistsError(DuplicateEntityError):
    """Raised when an owner tries to create a second product."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__("Product", "owner", owner)


class OwnershipError(Exception):
    """Base class for rejected identifier credentials.

    ``reason`` is the short client-facing message.
    """

    reason = "Invalid identifier"

    def __init__(self, reason: str | None = None):
        if reason is not None:
            self.reason = reason
        super().__init__(self.reason)


class MissingIdentifierError(OwnershipError):
    """Raised when a request carries no identifier header."""

    reason = "Please pass your identifier"


class InvalidIdentifierError(OwnershipError):
    """Raised when the identifier is malformed or was never issued."""

    reason = "Invalid identifier"


class InternalConsistencyError(Exception):
    """Raised when a write did not touch the number of rows it had to.

    Existence is checked before every update/delete, so a mismatch means a
    concurrent request changed the row in between.
    """

    def __init__(self, operation: str, owner: str, expected: int, actual: int):
        self.operation = operation
        self.owner = owner
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation} for owner '{owner}' affected {actual} row(s), expected {expected}"
        )

"""Domain-level exceptions.

Services and adapters raise these errors to express failures in domain terms.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule (missing field, malformed id or body)."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found for ID {entity_id}")


class StorageError(DomainError):
    """Document store failed (connectivity, write or decode)."""


class PublishError(DomainError):
    """Notification could not be published."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an identifier is absent from a store."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id

"""Domain errors raised by the service layer.

Every error carries an ``ErrorKind`` tag. The HTTP layer maps kinds to status
codes and never inspects message text.
"""
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel


class ErrorKind(StrEnum):
    """Closed set of business-rule failures."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class FieldIssue(BaseModel):
    """A single offending field and the reason it was rejected."""
    field: str
    message: str


class DomainError(Exception):
    """Base class for errors the service layer raises on purpose."""

    kind: ClassVar[ErrorKind]


class InvalidInput(DomainError):
    """Raised when input data fails validation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, details: list[FieldIssue], message: str = "Invalid input"):
        """
        Initialize the exception.

        Args:
            details: Every offending field with a human-readable reason
            message: Summary message
        """
        super().__init__(message)
        self.details = details

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "InvalidInput":
        """Collect every pydantic error into field-level details."""
        return cls(details=field_issues(error.errors()))

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInput":
        return cls(details=[FieldIssue(field=field, message=message)])


class EntityNotFound(DomainError):
    """Raised when an entity is not found in the database."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with id {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConflictingEntityFound(DomainError):
    """Raised when an entity with a conflicting field already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} {field_value} already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


def field_issues(errors: list[Any]) -> list[FieldIssue]:
    """
    Convert pydantic/FastAPI error dicts into FieldIssue entries.

    Request-location prefixes (``body``, ``query``, ``path``) are dropped and
    snake_case names are reported in their camelCase API spelling, whichever
    spelling the caller sent.
    """
    issues = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        loc = [to_camel(part) if "_" in part else part for part in loc]
        issues.append(FieldIssue(field=".".join(loc) or "request", message=error.get("msg", "Invalid value")))
    return issues

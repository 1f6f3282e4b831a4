"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    Attributes:
        fields: Names of the fields that failed validation
    """

    def __init__(self, message: str, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class EmptyNameError(ValidationError):
    """A client name was empty after trimming."""

    def __init__(self, message: str = "Client name cannot be empty"):
        super().__init__(message, fields=("name",))


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class NoDataError(NotFoundError):
    """Nothing matched the requested client and month."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateNameError(ConflictError):
    """A client with the same name (ignoring case) already exists."""


def invalid_fields(kind: str, fields: Iterable[str]) -> str:
    """Return message for a rejected order or expense save."""
    return f"Please fill in all required {kind} fields: {', '.join(fields)}"


def duplicate_client_name(name: str) -> str:
    """Return message for a client name that already exists."""
    return f"Client '{name}' already exists"


def client_not_found(client_id: str) -> str:
    """Return message for missing client by ID."""
    return f"Client {client_id} not found"


def record_not_found(kind: str, record_id: str) -> str:
    """Return message for a missing order or expense."""
    return f"{kind.capitalize()} {record_id} not found"


def selection_required() -> str:
    """Return message when an invoice is requested without client or month."""
    return "Please select a client and a month to generate the invoice"


def no_orders_for(client: str, month: str) -> str:
    """Return message when no orders match a client and month."""
    return f"No orders found for client '{client}' in {month}"

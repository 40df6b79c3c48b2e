"""Error taxonomy shared by every layer. PhonebookError is the single catch point for the CLI."""


class PhonebookError(Exception):
    """Base class for failures surfaced by the phonebook core."""


class DomainError(PhonebookError):
    """A request broke a domain rule. Never retried."""


class ValidationError(DomainError):
    """Input failed a format or range check."""


class BusinessRuleError(DomainError):
    """Input was well-formed but violates a business rule."""


class EntityNotFoundError(DomainError):
    """A referenced entity does not exist."""


class DuplicateEntityError(DomainError):
    """An entity with the same identity already exists."""

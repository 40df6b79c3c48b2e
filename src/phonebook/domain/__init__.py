"""Domain layer: entities, value objects and errors. No dependencies on outer layers."""

from phonebook.domain.entities import NAME_MAX_LENGTH, Contact
from phonebook.domain.errors import (
    BusinessRuleError,
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    PhonebookError,
    ValidationError,
)
from phonebook.domain.value_objects import (
    ContactId,
    Email,
    EmailError,
    EmptyEmail,
    EmptyPhoneNumber,
    InvalidContactId,
    InvalidEmailFormat,
    InvalidPhoneNumberFormat,
    PhoneNumber,
    PhoneNumberError,
)

__all__ = [
    "BusinessRuleError",
    "Contact",
    "ContactId",
    "DomainError",
    "DuplicateEntityError",
    "Email",
    "EmailError",
    "EmptyEmail",
    "EmptyPhoneNumber",
    "EntityNotFoundError",
    "InvalidContactId",
    "InvalidEmailFormat",
    "InvalidPhoneNumberFormat",
    "NAME_MAX_LENGTH",
    "PhoneNumber",
    "PhoneNumberError",
    "PhonebookError",
    "ValidationError",
]

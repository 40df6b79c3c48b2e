"""
Phonebook core: clean-architecture layout.

- domain: Contact entity, value objects (ContactId, Email, PhoneNumber), errors. No outer dependencies.
- application: use cases, ContactService, ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, FileContactRepository).
- cli: argparse front end.
"""

from phonebook.application import (
    AddContactRequest,
    ContactNotFound,
    ContactRepository,
    ContactService,
    DeleteContactRequest,
    FindContactRequest,
    ListContactsRequest,
    RepositoryError,
    SearchContactsRequest,
    SortBy,
    UpdateContactRequest,
)
from phonebook.domain import Contact, ContactId, Email, PhonebookError, PhoneNumber
from phonebook.infrastructure import FileContactRepository, InMemoryContactRepository

__all__ = [
    "AddContactRequest",
    "Contact",
    "ContactId",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "DeleteContactRequest",
    "Email",
    "FileContactRepository",
    "FindContactRequest",
    "InMemoryContactRepository",
    "ListContactsRequest",
    "PhoneNumber",
    "PhonebookError",
    "RepositoryError",
    "SearchContactsRequest",
    "SortBy",
    "UpdateContactRequest",
]

"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from phonebook.application.contact_service import ContactService
from phonebook.application.dto import (
    AddContactRequest,
    AddContactResponse,
    ContactStatsResponse,
    DeleteContactRequest,
    DeleteContactResponse,
    FindContactRequest,
    FindContactResponse,
    ListContactsRequest,
    ListContactsResponse,
    SearchContactsRequest,
    SearchContactsResponse,
    SortBy,
    UpdateContactRequest,
    UpdateContactResponse,
)
from phonebook.application.ports import (
    ContactAlreadyExists,
    ContactNotFound,
    ContactRepository,
    RepositoryError,
    RepositoryValidationError,
    SerializationError,
    StorageError,
    StorageIOError,
)

__all__ = [
    "AddContactRequest",
    "AddContactResponse",
    "ContactAlreadyExists",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "ContactStatsResponse",
    "DeleteContactRequest",
    "DeleteContactResponse",
    "FindContactRequest",
    "FindContactResponse",
    "ListContactsRequest",
    "ListContactsResponse",
    "RepositoryError",
    "RepositoryValidationError",
    "SearchContactsRequest",
    "SearchContactsResponse",
    "SerializationError",
    "SortBy",
    "StorageError",
    "StorageIOError",
    "UpdateContactRequest",
    "UpdateContactResponse",
]

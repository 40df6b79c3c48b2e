"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from phonebook.domain import (
    Contact,
    ContactId,
    DuplicateEntityError,
    EntityNotFoundError,
    PhonebookError,
)


class RepositoryError(PhonebookError):
    """Base class for repository failures. None of them are retried."""


class ContactNotFound(RepositoryError, EntityNotFoundError):
    def __init__(self, contact_id: ContactId | str) -> None:
        super().__init__(f"Contact not found with ID: {contact_id}")
        self.contact_id = str(contact_id)


class ContactAlreadyExists(RepositoryError, DuplicateEntityError):
    def __init__(self, contact_id: ContactId | str) -> None:
        super().__init__(f"Contact already exists with ID: {contact_id}")
        self.contact_id = str(contact_id)


class StorageError(RepositoryError):
    """Backing store is unusable."""


class SerializationError(StorageError):
    """Stored document could not be decoded or encoded. Fatal for the operation."""


class StorageIOError(StorageError):
    """Reading or writing the backing file failed."""


class RepositoryValidationError(RepositoryError):
    """The repository refused a contact it was handed."""


class ContactRepository(Protocol):
    """Persists and queries Contact aggregates.

    Implementations hand out copies, never live references to stored contacts.
    """

    def save(self, contact: Contact) -> None:
        """Insert a new contact. Raises ContactAlreadyExists if the id is taken."""
        ...

    def find_by_id(self, contact_id: ContactId) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def find_all(self) -> list[Contact]:
        """Return every contact in storage order."""
        ...

    def update(self, contact: Contact) -> None:
        """Replace a stored contact wholesale. Raises ContactNotFound if absent."""
        ...

    def modify(
        self, contact_id: ContactId, mutate: Callable[[Contact], None]
    ) -> Contact:
        """Load, mutate and store one contact as a single atomic step.

        Raises ContactNotFound if absent. If ``mutate`` raises, nothing is
        stored and the exception propagates. Returns the stored result.
        """
        ...

    def delete(self, contact_id: ContactId) -> None:
        """Remove a contact. Raises ContactNotFound if absent."""
        ...

    def search(self, query: str) -> list[Contact]:
        """Return contacts whose matches_search(query) holds. Callers reject blank queries."""
        ...

    def exists(self, contact_id: ContactId) -> bool:
        ...

    def count(self) -> int:
        ...

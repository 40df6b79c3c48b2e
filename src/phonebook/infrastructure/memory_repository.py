"""In-memory implementation of ContactRepository (no file)."""

import threading
from collections.abc import Callable

from phonebook.application.ports import (
    ContactAlreadyExists,
    ContactNotFound,
    RepositoryValidationError,
)
from phonebook.domain import Contact, ContactId


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    Every read returns copies so callers cannot mutate stored contacts.
    """

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[ContactId, Contact] = {}
        for contact in contacts or []:
            self.save(contact)

    def save(self, contact: Contact) -> None:
        with self._lock:
            if contact.id in self._by_id:
                raise ContactAlreadyExists(contact.id)
            self._by_id[contact.id] = contact.copy()

    def find_by_id(self, contact_id: ContactId) -> Contact | None:
        with self._lock:
            contact = self._by_id.get(contact_id)
            return contact.copy() if contact is not None else None

    def find_all(self) -> list[Contact]:
        with self._lock:
            return [c.copy() for c in self._by_id.values()]

    def update(self, contact: Contact) -> None:
        with self._lock:
            if contact.id not in self._by_id:
                raise ContactNotFound(contact.id)
            self._by_id[contact.id] = contact.copy()

    def modify(
        self, contact_id: ContactId, mutate: Callable[[Contact], None]
    ) -> Contact:
        with self._lock:
            stored = self._by_id.get(contact_id)
            if stored is None:
                raise ContactNotFound(contact_id)
            working = stored.copy()
            mutate(working)
            if working.id != contact_id:
                raise RepositoryValidationError("Contact id cannot change on update")
            self._by_id[contact_id] = working
            return working.copy()

    def delete(self, contact_id: ContactId) -> None:
        with self._lock:
            if self._by_id.pop(contact_id, None) is None:
                raise ContactNotFound(contact_id)

    def search(self, query: str) -> list[Contact]:
        with self._lock:
            return [c.copy() for c in self._by_id.values() if c.matches_search(query)]

    def exists(self, contact_id: ContactId) -> bool:
        with self._lock:
            return contact_id in self._by_id

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)

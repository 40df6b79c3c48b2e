"""File-backed implementation of ContactRepository.

The JSON file is loaded once, on first access, into an in-memory cache. Reads
are served from the cache; every mutation updates the cache and rewrites the
whole file while holding the cache lock. The cache is never refreshed from
disk unless reload() is called, and other processes writing the same file
are not coordinated with (last writer wins).
"""

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from phonebook.application.ports import (
    ContactAlreadyExists,
    ContactNotFound,
    RepositoryValidationError,
    StorageError,
)
from phonebook.domain import Contact, ContactId
from phonebook.infrastructure.persistence.file_storage import FileStorage

logger = logging.getLogger(__name__)


class FileContactRepository:
    """Write-through cache over a FileStorage, guarded by one lock."""

    def __init__(self, file_path: str | Path, *, atomic_writes: bool = True) -> None:
        self._storage = FileStorage(file_path, atomic_writes=atomic_writes)
        self._lock = threading.Lock()
        self._cache: dict[ContactId, Contact] | None = None

    @property
    def file_path(self) -> Path:
        return self._storage.file_path

    def reload(self) -> None:
        """Drop the cache; the next call re-reads the file."""
        with self._lock:
            self._cache = None

    def _contacts(self) -> dict[ContactId, Contact]:
        # caller holds self._lock
        if self._cache is None:
            self._cache = self._storage.load_contacts()
            logger.info(
                "Loaded %d contacts from %s", len(self._cache), self.file_path
            )
        return self._cache

    def _persist(
        self,
        contacts: dict[ContactId, Contact],
        contact_id: ContactId,
        previous: Contact | None,
    ) -> None:
        """Write the full map; on failure restore contact_id to previous and re-raise."""
        try:
            self._storage.save_contacts(contacts)
        except StorageError:
            logger.error("Failed to write %s; rolling back %s", self.file_path, contact_id)
            if previous is None:
                contacts.pop(contact_id, None)
            else:
                contacts[contact_id] = previous
            raise

    def save(self, contact: Contact) -> None:
        with self._lock:
            contacts = self._contacts()
            if contact.id in contacts:
                raise ContactAlreadyExists(contact.id)
            contacts[contact.id] = contact.copy()
            self._persist(contacts, contact.id, None)

    def find_by_id(self, contact_id: ContactId) -> Contact | None:
        with self._lock:
            contact = self._contacts().get(contact_id)
            return contact.copy() if contact is not None else None

    def find_all(self) -> list[Contact]:
        with self._lock:
            return [c.copy() for c in self._contacts().values()]

    def update(self, contact: Contact) -> None:
        with self._lock:
            contacts = self._contacts()
            previous = contacts.get(contact.id)
            if previous is None:
                raise ContactNotFound(contact.id)
            contacts[contact.id] = contact.copy()
            self._persist(contacts, contact.id, previous)

    def modify(
        self, contact_id: ContactId, mutate: Callable[[Contact], None]
    ) -> Contact:
        with self._lock:
            contacts = self._contacts()
            previous = contacts.get(contact_id)
            if previous is None:
                raise ContactNotFound(contact_id)
            working = previous.copy()
            mutate(working)
            if working.id != contact_id:
                raise RepositoryValidationError("Contact id cannot change on update")
            contacts[contact_id] = working
            self._persist(contacts, contact_id, previous)
            return working.copy()

    def delete(self, contact_id: ContactId) -> None:
        with self._lock:
            contacts = self._contacts()
            previous = contacts.pop(contact_id, None)
            if previous is None:
                raise ContactNotFound(contact_id)
            self._persist(contacts, contact_id, previous)

    def search(self, query: str) -> list[Contact]:
        with self._lock:
            return [
                c.copy() for c in self._contacts().values() if c.matches_search(query)
            ]

    def exists(self, contact_id: ContactId) -> bool:
        with self._lock:
            return contact_id in self._contacts()

    def count(self) -> int:
        with self._lock:
            return len(self._contacts())

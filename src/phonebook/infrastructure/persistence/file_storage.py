"""JSON file storage: the whole phonebook as one document.

Document shape:
{"contacts": {"<uuid>": {"id": ..., "first_name": ..., "last_name": ...,
 "phone_numbers": [...], "emails": [...], "notes": ..., "tags": [...], "metadata": {...}}}}
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from phonebook.application.ports import SerializationError, StorageIOError
from phonebook.domain import Contact, ContactId, InvalidContactId

logger = logging.getLogger(__name__)

CONTACTS_KEY = "contacts"


def _decode(text: str) -> dict[ContactId, Contact]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Failed to deserialize: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get(CONTACTS_KEY), dict):
        raise SerializationError(
            f"Failed to deserialize: expected an object with a '{CONTACTS_KEY}' object"
        )

    contacts: dict[ContactId, Contact] = {}
    for id_str, record in data[CONTACTS_KEY].items():
        try:
            contact_id = ContactId.parse(id_str)
        except InvalidContactId as e:
            raise SerializationError(f"Invalid UUID: {id_str!r}") from e
        if not isinstance(record, dict):
            raise SerializationError(f"Contact {id_str} is not an object")
        try:
            contact = Contact.from_dict({"id": id_str, **record})
        except (KeyError, TypeError, ValueError) as e:
            raise SerializationError(f"Invalid contact {id_str}: {e}") from e
        if contact.id != contact_id:
            raise SerializationError(
                f"Contact {id_str} carries a different id: {contact.id}"
            )
        contacts[contact_id] = contact
    return contacts


def _encode(contacts: dict[ContactId, Contact]) -> str:
    data = {CONTACTS_KEY: {str(cid): c.to_dict() for cid, c in contacts.items()}}
    try:
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize: {e}") from e


class FileStorage:
    """Loads and saves the full contact map. No caching; see FileContactRepository.

    With atomic_writes the document is written to a temp file next to the
    target and renamed over it, so an interrupted write leaves the old file.
    Without it the target is overwritten in place.
    """

    def __init__(self, file_path: str | Path, *, atomic_writes: bool = True) -> None:
        self._path = Path(file_path)
        self._atomic_writes = atomic_writes

    @property
    def file_path(self) -> Path:
        return self._path

    def load_contacts(self) -> dict[ContactId, Contact]:
        """Missing or blank file means an empty phonebook."""
        if not self._path.exists():
            logger.debug("No contacts file at %s; starting empty", self._path)
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageIOError(f"Failed to read file {self._path}: {e}") from e
        if not text.strip():
            return {}
        return _decode(text)

    def save_contacts(self, contacts: dict[ContactId, Contact]) -> None:
        payload = _encode(contacts)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageIOError(f"Failed to create directory: {e}") from e

        try:
            if self._atomic_writes:
                self._replace(payload)
            else:
                self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Failed to write file {self._path}: {e}") from e
        logger.debug("Wrote %d contacts to %s", len(contacts), self._path)

    def _replace(self, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

"""Domain entity: Contact."""

import copy
from dataclasses import dataclass, field
from typing import Any

from phonebook.domain.value_objects import ContactId, Email, PhoneNumber

NAME_MAX_LENGTH = 100


def _unique(items) -> list:
    out = []
    for item in items:
        if item not in out:
            out.append(item)
    return out


@dataclass
class Contact:
    """
    Represents one person in the phonebook.
    Phone numbers, emails and tags behave as ordered sets: adding an existing
    member or removing a missing one is a no-op.

    The entity does not require a contact method; the add and update
    workflows enforce "at least one phone or email".
    """

    first_name: str
    last_name: str
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
    id: ContactId = field(default_factory=ContactId.new)

    def __post_init__(self):
        self.phone_numbers = _unique(self.phone_numbers)
        self.emails = _unique(self.emails)
        self.tags = _unique(self.tags)
        self.metadata = dict(self.metadata)

    @classmethod
    def new(
        cls,
        first_name: str,
        last_name: str,
        phone_numbers: list[PhoneNumber] | None = None,
        emails: list[Email] | None = None,
    ) -> "Contact":
        """Create a contact with a fresh id and empty notes, tags and metadata."""
        return cls(
            first_name=first_name,
            last_name=last_name,
            phone_numbers=list(phone_numbers or []),
            emails=list(emails or []),
        )

    @classmethod
    def with_id(
        cls,
        contact_id: ContactId,
        first_name: str,
        last_name: str,
        phone_numbers: list[PhoneNumber] | None = None,
        emails: list[Email] | None = None,
    ) -> "Contact":
        """Reconstruct a contact with a known id (loading from storage)."""
        return cls(
            id=contact_id,
            first_name=first_name,
            last_name=last_name,
            phone_numbers=list(phone_numbers or []),
            emails=list(emails or []),
        )

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def has_contact_method(self) -> bool:
        return bool(self.phone_numbers or self.emails)

    def set_first_name(self, first_name: str) -> None:
        self.first_name = first_name

    def set_last_name(self, last_name: str) -> None:
        self.last_name = last_name

    def set_notes(self, notes: str | None) -> None:
        self.notes = notes

    def add_phone_number(self, phone: PhoneNumber) -> None:
        if phone not in self.phone_numbers:
            self.phone_numbers.append(phone)

    def remove_phone_number(self, phone: PhoneNumber) -> None:
        self.phone_numbers = [p for p in self.phone_numbers if p != phone]

    def add_email(self, email: Email) -> None:
        if email not in self.emails:
            self.emails.append(email)

    def remove_email(self, email: Email) -> None:
        self.emails = [e for e in self.emails if e != email]

    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        self.tags = [t for t in self.tags if t != tag]

    def set_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value

    def remove_metadata(self, key: str) -> None:
        self.metadata.pop(key, None)

    def matches_search(self, query: str) -> bool:
        """Case-insensitive substring match over names, phones, emails, notes and tags."""
        needle = query.lower()
        return (
            needle in self.first_name.lower()
            or needle in self.last_name.lower()
            or any(needle in p.value for p in self.phone_numbers)
            or any(needle in e.value for e in self.emails)
            or (self.notes is not None and needle in self.notes.lower())
            or any(needle in t.lower() for t in self.tags)
        )

    def copy(self) -> "Contact":
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Persisted record shape. Value objects are written in their canonical form."""
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone_numbers": [p.value for p in self.phone_numbers],
            "emails": [e.value for e in self.emails],
            "notes": self.notes,
            "tags": list(self.tags),
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        """Rebuild a contact from its record. Raises ValueError or KeyError on bad data.

        Field types are checked, never coerced.
        """
        notes = data.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise ValueError("notes must be a string or null")
        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError("metadata must be an object")
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in metadata.items()):
            raise ValueError("metadata keys and values must be strings")
        return cls(
            id=ContactId.parse(data["id"]),
            first_name=_string(data, "first_name"),
            last_name=_string(data, "last_name"),
            phone_numbers=[PhoneNumber(p) for p in _strings(data, "phone_numbers")],
            emails=[Email(e) for e in _strings(data, "emails")],
            notes=notes,
            tags=_strings(data, "tags"),
            metadata=dict(metadata),
        )


def _string(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _strings(data: dict[str, Any], key: str) -> list[str]:
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"{key} must be a list of strings")
    return list(values)

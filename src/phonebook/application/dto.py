"""Request and response types for the contact use cases."""

from dataclasses import dataclass, field
from enum import Enum

from phonebook.domain import Contact, ContactId, Email, PhoneNumber


class SortBy(str, Enum):
    FIRST_NAME = "first-name"
    LAST_NAME = "last-name"
    FULL_NAME = "full-name"

    @classmethod
    def parse(cls, raw: str) -> "SortBy":
        """Accept "first-name", "firstname", "FIRST_NAME" and similar spellings."""
        key = (raw or "").strip().lower().replace("_", "-")
        aliases = {
            "first-name": cls.FIRST_NAME,
            "firstname": cls.FIRST_NAME,
            "last-name": cls.LAST_NAME,
            "lastname": cls.LAST_NAME,
            "full-name": cls.FULL_NAME,
            "fullname": cls.FULL_NAME,
        }
        if key not in aliases:
            raise ValueError(f"Invalid sort field: {raw}")
        return aliases[key]


# --- add ---


@dataclass(frozen=True)
class AddContactRequest:
    """At least one phone number or email is required."""

    first_name: str
    last_name: str
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    notes: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AddContactResponse:
    contact_id: ContactId
    message: str = "Contact added successfully"


# --- find ---


@dataclass(frozen=True)
class FindContactRequest:
    contact_id: ContactId


@dataclass(frozen=True)
class FindContactResponse:
    """Not found is a normal outcome: found is False and contact is None."""

    contact: Contact | None
    found: bool


# --- update ---


@dataclass(frozen=True)
class UpdateContactRequest:
    """None leaves a field unchanged. Blank notes clears them."""

    contact_id: ContactId
    first_name: str | None = None
    last_name: str | None = None
    notes: str | None = None
    add_phone_numbers: list[PhoneNumber] = field(default_factory=list)
    remove_phone_numbers: list[PhoneNumber] = field(default_factory=list)
    add_emails: list[Email] = field(default_factory=list)
    remove_emails: list[Email] = field(default_factory=list)
    add_tags: list[str] = field(default_factory=list)
    remove_tags: list[str] = field(default_factory=list)
    set_metadata: dict[str, str] = field(default_factory=dict)
    remove_metadata: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateContactResponse:
    contact: Contact
    message: str = "Contact updated successfully"


# --- delete ---


@dataclass(frozen=True)
class DeleteContactRequest:
    contact_id: ContactId


@dataclass(frozen=True)
class DeleteContactResponse:
    contact_id: ContactId
    message: str = "Contact deleted successfully"


# --- list ---


@dataclass(frozen=True)
class ListContactsRequest:
    page: int = 0
    page_size: int = 10
    sort_by: SortBy = SortBy.LAST_NAME
    reverse: bool = False


@dataclass(frozen=True)
class ListContactsResponse:
    contacts: list[Contact]
    total_count: int
    page: int
    page_size: int
    has_more: bool


# --- search ---


@dataclass(frozen=True)
class SearchContactsRequest:
    query: str


@dataclass(frozen=True)
class SearchContactsResponse:
    contacts: list[Contact]
    query: str
    count: int


# --- stats ---


@dataclass(frozen=True)
class ContactStatsResponse:
    """Aggregate counts over the whole phonebook. Mappings are sorted by count, descending."""

    total_count: int
    with_phone: int
    with_email: int
    tags: dict[str, int]
    email_domains: dict[str, int]
    phone_regions: dict[str, int]

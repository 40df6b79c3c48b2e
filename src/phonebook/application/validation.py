"""Input validation for the application layer. Raises domain ValidationError / BusinessRuleError."""

import unicodedata
from collections.abc import Iterable

from phonebook.domain import (
    NAME_MAX_LENGTH,
    BusinessRuleError,
    Email,
    EmailError,
    PhoneNumber,
    PhoneNumberError,
    ValidationError,
)

SEARCH_QUERY_MAX_LENGTH = 200
PAGE_SIZE_MAX = 100


def validate_non_empty(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")


def validate_max_length(value: str, max_length: int, field_name: str) -> None:
    if len(value) > max_length:
        raise ValidationError(f"{field_name} cannot exceed {max_length} characters")


def validate_name_component(name: str, field_name: str) -> None:
    """Non-empty after trimming, at most NAME_MAX_LENGTH chars, no control chars except tab."""
    validate_non_empty(name, field_name)
    validate_max_length(name, NAME_MAX_LENGTH, field_name)
    if any(unicodedata.category(c) == "Cc" and c != "\t" for c in name):
        raise ValidationError(f"{field_name} contains invalid characters")


def validate_contact_methods(
    phone_numbers: list[PhoneNumber], emails: list[Email]
) -> None:
    if not phone_numbers and not emails:
        raise BusinessRuleError(
            "At least one phone number or email address is required"
        )


def validate_search_query(query: str) -> None:
    validate_non_empty(query, "Search query")
    validate_max_length(query, SEARCH_QUERY_MAX_LENGTH, "Search query")


def validate_pagination(page: int, page_size: int) -> None:
    if page < 0:
        raise ValidationError("Page cannot be negative")
    if page_size <= 0:
        raise ValidationError("Page size must be greater than 0")
    if page_size > PAGE_SIZE_MAX:
        raise ValidationError(f"Page size cannot exceed {PAGE_SIZE_MAX}")


def parse_phone_numbers(raw_values: Iterable[str]) -> list[PhoneNumber]:
    out = []
    for raw in raw_values:
        try:
            out.append(PhoneNumber(raw))
        except PhoneNumberError as e:
            raise ValidationError(f"Invalid phone number '{raw}': {e}") from e
    return out


def parse_emails(raw_values: Iterable[str]) -> list[Email]:
    out = []
    for raw in raw_values:
        try:
            out.append(Email(raw))
        except EmailError as e:
            raise ValidationError(f"Invalid email '{raw}': {e}") from e
    return out


def clean_tags(raw_values: Iterable[str]) -> list[str]:
    """Trim tags and drop blank ones."""
    return [t.strip() for t in raw_values if t and t.strip()]


def clean_notes(notes: str | None) -> str | None:
    """Blank notes mean no notes."""
    if notes is None or not notes.strip():
        return None
    return notes

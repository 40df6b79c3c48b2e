"""Value objects: ContactId, Email, PhoneNumber.

Each is immutable and self-validating. Every live instance satisfies its grammar;
construction either returns a value or raises a ValueError subclass.
"""

import re
import uuid
from dataclasses import dataclass, field

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

_PHONE_RE = re.compile(r"^(\+\d{1,3})?\d{10,15}$")


class InvalidContactId(ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid contact ID: {raw!r}")
        self.raw = raw


class EmailError(ValueError):
    """Email could not be constructed."""


class EmptyEmail(EmailError):
    def __init__(self) -> None:
        super().__init__("Email cannot be empty")


class InvalidEmailFormat(EmailError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid email format: {raw}")
        self.raw = raw


class PhoneNumberError(ValueError):
    """Phone number could not be constructed."""


class EmptyPhoneNumber(PhoneNumberError):
    def __init__(self) -> None:
        super().__init__("Phone number cannot be empty")


class InvalidPhoneNumberFormat(PhoneNumberError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid phone number format: {raw}")
        self.raw = raw


@dataclass(frozen=True)
class ContactId:
    """Opaque 128-bit contact identifier. Sole lookup and equality key for a Contact."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new(cls) -> "ContactId":
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, raw: str) -> "ContactId":
        """Parse the canonical string form. Raises InvalidContactId."""
        try:
            return cls(uuid.UUID(str(raw).strip()))
        except (ValueError, AttributeError, TypeError):
            raise InvalidContactId(raw) from None

    def short(self) -> str:
        return str(self.value)[:8]

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Email address, trimmed and lower-cased. Equality is on the canonical form."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidEmailFormat(repr(self.value))
        canonical = self.value.strip().lower()
        if not canonical:
            raise EmptyEmail()
        if not _EMAIL_RE.fullmatch(canonical):
            raise InvalidEmailFormat(self.value)
        object.__setattr__(self, "value", canonical)

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        parts = self.value.split("@", 1)
        return parts[1] if len(parts) > 1 else ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneNumber:
    """Phone number reduced to digits and an optional leading +.

    "555-123-4567" and "(555) 123 4567" are the same number.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidPhoneNumberFormat(repr(self.value))
        if not self.value.strip():
            raise EmptyPhoneNumber()
        cleaned = "".join(c for c in self.value if c in "0123456789+")
        if not _PHONE_RE.fullmatch(cleaned):
            raise InvalidPhoneNumberFormat(self.value)
        object.__setattr__(self, "value", cleaned)

    def formatted(self) -> str:
        """Display form: (AAA) BBB-CCCC for 10-digit numbers, else the cleaned value."""
        if self.value.startswith("+"):
            return self.value
        if len(self.value) == 10:
            return f"({self.value[0:3]}) {self.value[3:6]}-{self.value[6:10]}"
        return self.value

    def __str__(self) -> str:
        return self.formatted()

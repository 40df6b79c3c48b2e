"""Phone number region lookup via libphonenumber, used for phonebook statistics."""

import phonenumbers

from phonebook.domain import PhoneNumber


def region_for_number(
    phone: PhoneNumber, default_region: str | None = None
) -> str | None:
    """Return the ISO 3166 region ("US", "IT", ...) of a stored number, or None.

    Use default_region for numbers stored without a leading + (e.g.
    "2025551234" with default_region "US"). If the number already includes a
    country code, default_region is ignored.
    """
    raw = (phone.value or "").strip()
    if not raw:
        return None
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.region_code_for_number(parsed) or None

"""Plain-text rendering of contacts for the terminal."""

from phonebook.application import ContactStatsResponse
from phonebook.domain import Contact

SEPARATOR_WIDTH = 80


def format_contact(contact: Contact) -> str:
    """Detailed multi-line view of one contact."""
    lines = [f"ID: {contact.id}", f"Name: {contact.full_name()}"]
    if contact.phone_numbers:
        lines.append("Phone Numbers:")
        lines.extend(f"  - {phone}" for phone in contact.phone_numbers)
    if contact.emails:
        lines.append("Emails:")
        lines.extend(f"  - {email}" for email in contact.emails)
    if contact.notes is not None:
        lines.append(f"Notes: {contact.notes}")
    if contact.tags:
        lines.append(f"Tags: {', '.join(contact.tags)}")
    if contact.metadata:
        lines.append("Metadata:")
        lines.extend(f"  {k}: {v}" for k, v in sorted(contact.metadata.items()))
    return "\n".join(lines)


def format_contact_compact(contact: Contact) -> str:
    phone = str(contact.phone_numbers[0]) if contact.phone_numbers else "No phone"
    email = str(contact.emails[0]) if contact.emails else "No email"
    return f"{contact.id.short():<8} {contact.full_name():<25} {phone:<15} {email}"


def format_list_header() -> str:
    return f"{'ID':<8} {'Name':<25} {'Phone':<15} Email"


def format_separator() -> str:
    return "-" * SEPARATOR_WIDTH


def format_search_summary(query: str, count: int) -> str:
    return f"Found {count} contact(s) matching '{query}'"


def format_pagination_info(page: int, page_size: int, total: int, has_more: bool) -> str:
    start = page * page_size + 1
    end = min((page + 1) * page_size, total)
    info = f"Showing {start} - {end} of {total} contacts"
    if has_more:
        info += f" (Page {page + 1})"
    return info


def format_stats(stats: ContactStatsResponse) -> str:
    lines = [
        "Phonebook Statistics",
        format_separator(),
        f"Total contacts: {stats.total_count}",
        f"With phone number: {stats.with_phone}",
        f"With email: {stats.with_email}",
    ]
    for title, counts in (
        ("Tags", stats.tags),
        ("Email domains", stats.email_domains),
        ("Phone regions", stats.phone_regions),
    ):
        if counts:
            lines.append(f"{title}:")
            lines.extend(f"  {name}: {n}" for name, n in counts.items())
    return "\n".join(lines)

"""
Phonebook command-line interface.
Run: phonebook <command> [options]  (or python -m phonebook)

Exit status is 0 on success, 1 when a command fails, 2 on usage errors.
"""

import argparse
import functools
import logging
import sys

from phonebook.application import (
    AddContactRequest,
    ContactService,
    DeleteContactRequest,
    FindContactRequest,
    ListContactsRequest,
    SearchContactsRequest,
    SortBy,
    UpdateContactRequest,
)
from phonebook.application.validation import parse_emails, parse_phone_numbers
from phonebook.cli import formatters
from phonebook.cli.settings import Settings, load_env_file, load_settings
from phonebook.domain import ContactId, PhonebookError
from phonebook.infrastructure import FileContactRepository, region_for_number

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _sort_field(raw: str) -> SortBy:
    try:
        return SortBy.parse(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError("must be 0 or greater")
    return value


def _key_value(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key.strip(), value


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonebook", description="A CLI phonebook application"
    )
    parser.add_argument(
        "-f",
        "--file",
        default=settings.file_path,
        help=f"Path to the contacts file (default: {settings.file_path})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a new contact")
    add.add_argument("-f", "--first-name", required=True)
    add.add_argument("-l", "--last-name", required=True)
    add.add_argument("-p", "--phone", action="append", default=[], help="Repeatable")
    add.add_argument("-e", "--email", action="append", default=[], help="Repeatable")
    add.add_argument("-n", "--notes")
    add.add_argument("-t", "--tag", action="append", default=[], help="Repeatable")

    find = sub.add_parser("find", help="Find a contact by ID")
    find.add_argument("id")

    lst = sub.add_parser("list", help="List contacts")
    lst.add_argument("--page", type=_non_negative_int, default=0, help="0-based")
    lst.add_argument("--page-size", type=int, default=10)
    lst.add_argument(
        "--sort-by",
        type=_sort_field,
        default=SortBy.LAST_NAME,
        help="first-name, last-name or full-name (default: last-name)",
    )
    lst.add_argument("--reverse", action="store_true")

    search = sub.add_parser("search", help="Search contacts")
    search.add_argument("query")

    update = sub.add_parser("update", help="Update a contact")
    update.add_argument("id")
    update.add_argument("--first-name")
    update.add_argument("--last-name")
    update.add_argument("--add-phone", action="append", default=[])
    update.add_argument("--remove-phone", action="append", default=[])
    update.add_argument("--add-email", action="append", default=[])
    update.add_argument("--remove-email", action="append", default=[])
    update.add_argument("--notes", help="Set notes; an empty string clears them")
    update.add_argument("--add-tag", action="append", default=[])
    update.add_argument("--remove-tag", action="append", default=[])
    update.add_argument(
        "--set-meta", action="append", default=[], type=_key_value, metavar="KEY=VALUE"
    )
    update.add_argument("--remove-meta", action="append", default=[], metavar="KEY")

    delete = sub.add_parser("delete", help="Delete a contact")
    delete.add_argument("id")
    delete.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")

    sub.add_parser("stats", help="Show statistics")
    return parser


def build_service(file_path: str, settings: Settings) -> ContactService:
    repo = FileContactRepository(file_path, atomic_writes=settings.atomic_writes)
    resolve_region = functools.partial(
        region_for_number, default_region=settings.default_region
    )
    return ContactService(repo, resolve_region=resolve_region)


# --- handlers ---


def handle_add(service: ContactService, args: argparse.Namespace) -> int:
    request = AddContactRequest(
        first_name=args.first_name,
        last_name=args.last_name,
        phone_numbers=parse_phone_numbers(args.phone),
        emails=parse_emails(args.email),
        notes=args.notes,
        tags=args.tag,
    )
    response = service.add_contact(request)
    print(f"✓ {response.message}")
    print(f"Contact ID: {response.contact_id}")
    return EXIT_OK


def handle_find(service: ContactService, args: argparse.Namespace) -> int:
    response = service.find_contact(FindContactRequest(ContactId.parse(args.id)))
    if not response.found:
        print("Contact not found")
        return EXIT_FAILURE
    print(formatters.format_contact(response.contact))
    return EXIT_OK


def handle_list(service: ContactService, args: argparse.Namespace) -> int:
    response = service.list_contacts(
        ListContactsRequest(
            page=args.page,
            page_size=args.page_size,
            sort_by=args.sort_by,
            reverse=args.reverse,
        )
    )
    if not response.contacts:
        print("No contacts found")
        return EXIT_OK
    print(formatters.format_list_header())
    print(formatters.format_separator())
    for contact in response.contacts:
        print(formatters.format_contact_compact(contact))
    print(formatters.format_separator())
    print(
        formatters.format_pagination_info(
            response.page, response.page_size, response.total_count, response.has_more
        )
    )
    return EXIT_OK


def handle_search(service: ContactService, args: argparse.Namespace) -> int:
    response = service.search_contacts(SearchContactsRequest(args.query))
    print(formatters.format_search_summary(response.query, response.count))
    if response.contacts:
        print()
        print(formatters.format_list_header())
        print(formatters.format_separator())
        for contact in response.contacts:
            print(formatters.format_contact_compact(contact))
    return EXIT_OK


def handle_update(service: ContactService, args: argparse.Namespace) -> int:
    request = UpdateContactRequest(
        contact_id=ContactId.parse(args.id),
        first_name=args.first_name,
        last_name=args.last_name,
        notes=args.notes,
        add_phone_numbers=parse_phone_numbers(args.add_phone),
        remove_phone_numbers=parse_phone_numbers(args.remove_phone),
        add_emails=parse_emails(args.add_email),
        remove_emails=parse_emails(args.remove_email),
        add_tags=args.add_tag,
        remove_tags=args.remove_tag,
        set_metadata=dict(args.set_meta),
        remove_metadata=args.remove_meta,
    )
    response = service.update_contact(request)
    print(f"✓ {response.message}")
    return EXIT_OK


def _confirm(prompt: str) -> bool:
    try:
        answer = input(prompt)
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def handle_delete(service: ContactService, args: argparse.Namespace) -> int:
    contact_id = ContactId.parse(args.id)
    if not args.yes:
        found = service.find_contact(FindContactRequest(contact_id))
        if not found.found:
            print("Error: Contact not found", file=sys.stderr)
            return EXIT_FAILURE
        print("Contact to delete:")
        print(formatters.format_contact(found.contact))
        if not _confirm("Are you sure you want to delete this contact? (y/N): "):
            print("Deletion cancelled")
            return EXIT_OK
    response = service.delete_contact(DeleteContactRequest(contact_id))
    print(f"✓ {response.message}")
    return EXIT_OK


def handle_stats(service: ContactService, args: argparse.Namespace) -> int:
    print(formatters.format_stats(service.contact_stats()))
    return EXIT_OK


HANDLERS = {
    "add": handle_add,
    "find": handle_find,
    "list": handle_list,
    "search": handle_search,
    "update": handle_update,
    "delete": handle_delete,
    "stats": handle_stats,
}


def main(argv: list[str] | None = None) -> int:
    load_env_file()
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG
        if args.verbose
        else getattr(logging, settings.log_level, logging.WARNING),
    )

    service = build_service(args.file, settings)
    try:
        return HANDLERS[args.command](service, args)
    except (PhonebookError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

"""One class per contact operation: validate the request, call the repository, build the response."""

import logging
from collections import Counter
from collections.abc import Callable

from phonebook.application import validation
from phonebook.application.dto import (
    AddContactRequest,
    AddContactResponse,
    ContactStatsResponse,
    DeleteContactRequest,
    DeleteContactResponse,
    FindContactRequest,
    FindContactResponse,
    ListContactsRequest,
    ListContactsResponse,
    SearchContactsRequest,
    SearchContactsResponse,
    SortBy,
    UpdateContactRequest,
    UpdateContactResponse,
)
from phonebook.application.ports import ContactRepository
from phonebook.domain import Contact, PhoneNumber

logger = logging.getLogger(__name__)

UNKNOWN_REGION = "unknown"

_SORT_KEYS: dict[SortBy, Callable[[Contact], str]] = {
    SortBy.FIRST_NAME: lambda c: c.first_name,
    SortBy.LAST_NAME: lambda c: c.last_name,
    SortBy.FULL_NAME: lambda c: c.full_name(),
}


class AddContactUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: AddContactRequest) -> AddContactResponse:
        validation.validate_name_component(request.first_name, "First name")
        validation.validate_name_component(request.last_name, "Last name")
        validation.validate_contact_methods(request.phone_numbers, request.emails)

        contact = Contact.new(
            request.first_name,
            request.last_name,
            request.phone_numbers,
            request.emails,
        )
        contact.set_notes(validation.clean_notes(request.notes))
        for tag in validation.clean_tags(request.tags):
            contact.add_tag(tag)

        self._repo.save(contact)
        logger.info("Added contact %s", contact.id)
        return AddContactResponse(contact_id=contact.id)


class FindContactUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: FindContactRequest) -> FindContactResponse:
        contact = self._repo.find_by_id(request.contact_id)
        return FindContactResponse(contact=contact, found=contact is not None)


class UpdateContactUseCase:
    """Applies every requested change, then checks the contact still has a phone or email.

    The whole request runs inside one repository ``modify`` call, so a failed
    check leaves the stored contact untouched.
    """

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: UpdateContactRequest) -> UpdateContactResponse:
        def apply(contact: Contact) -> None:
            if request.first_name is not None:
                validation.validate_name_component(request.first_name, "First name")
                contact.set_first_name(request.first_name)
            if request.last_name is not None:
                validation.validate_name_component(request.last_name, "Last name")
                contact.set_last_name(request.last_name)
            if request.notes is not None:
                contact.set_notes(validation.clean_notes(request.notes))

            for phone in request.add_phone_numbers:
                contact.add_phone_number(phone)
            for phone in request.remove_phone_numbers:
                contact.remove_phone_number(phone)
            for email in request.add_emails:
                contact.add_email(email)
            for email in request.remove_emails:
                contact.remove_email(email)
            for tag in validation.clean_tags(request.add_tags):
                contact.add_tag(tag)
            for tag in validation.clean_tags(request.remove_tags):
                contact.remove_tag(tag)
            for key, value in request.set_metadata.items():
                validation.validate_non_empty(key, "Metadata key")
                contact.set_metadata(key.strip(), value)
            for key in request.remove_metadata:
                contact.remove_metadata(key.strip())

            validation.validate_contact_methods(contact.phone_numbers, contact.emails)

        updated = self._repo.modify(request.contact_id, apply)
        logger.info("Updated contact %s", updated.id)
        return UpdateContactResponse(contact=updated)


class DeleteContactUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: DeleteContactRequest) -> DeleteContactResponse:
        # delete checks existence and removes under one lock; raises ContactNotFound
        self._repo.delete(request.contact_id)
        logger.info("Deleted contact %s", request.contact_id)
        return DeleteContactResponse(contact_id=request.contact_id)


class ListContactsUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: ListContactsRequest) -> ListContactsResponse:
        validation.validate_pagination(request.page, request.page_size)
        contacts = self._repo.find_all()

        # sorted() is stable; reversing afterwards flips ties as well
        contacts = sorted(contacts, key=_SORT_KEYS[SortBy(request.sort_by)])
        if request.reverse:
            contacts.reverse()

        total_count = len(contacts)
        start_index = request.page * request.page_size
        end_index = min(start_index + request.page_size, total_count)
        page = contacts[start_index:end_index] if start_index < total_count else []

        return ListContactsResponse(
            contacts=page,
            total_count=total_count,
            page=request.page,
            page_size=request.page_size,
            has_more=end_index < total_count,
        )


class SearchContactsUseCase:
    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def execute(self, request: SearchContactsRequest) -> SearchContactsResponse:
        validation.validate_search_query(request.query)
        contacts = self._repo.search(request.query.strip())
        return SearchContactsResponse(
            contacts=contacts, query=request.query, count=len(contacts)
        )


class ContactStatsUseCase:
    """Counts over the whole phonebook. ``resolve_region`` maps a number to an ISO region code."""

    def __init__(
        self,
        repository: ContactRepository,
        *,
        resolve_region: Callable[[PhoneNumber], str | None] | None = None,
    ) -> None:
        self._repo = repository
        self._resolve_region = resolve_region

    def execute(self) -> ContactStatsResponse:
        contacts = self._repo.find_all()
        tags: Counter[str] = Counter()
        domains: Counter[str] = Counter()
        regions: Counter[str] = Counter()
        for contact in contacts:
            tags.update(contact.tags)
            domains.update(e.domain for e in contact.emails)
            for phone in contact.phone_numbers:
                region = self._resolve_region(phone) if self._resolve_region else None
                regions[region or UNKNOWN_REGION] += 1

        return ContactStatsResponse(
            total_count=len(contacts),
            with_phone=sum(1 for c in contacts if c.phone_numbers),
            with_email=sum(1 for c in contacts if c.emails),
            tags=dict(tags.most_common()),
            email_domains=dict(domains.most_common()),
            phone_regions=dict(regions.most_common()),
        )

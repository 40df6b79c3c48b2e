"""ContactService: one handle over every contact use case."""

from collections.abc import Callable

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
    UpdateContactRequest,
    UpdateContactResponse,
)
from phonebook.application.ports import ContactRepository
from phonebook.application.use_cases import (
    AddContactUseCase,
    ContactStatsUseCase,
    DeleteContactUseCase,
    FindContactUseCase,
    ListContactsUseCase,
    SearchContactsUseCase,
    UpdateContactUseCase,
)
from phonebook.domain import PhoneNumber


class ContactService:
    """Add, find, update, delete, list, search and stats over one shared repository."""

    def __init__(
        self,
        repository: ContactRepository,
        *,
        resolve_region: Callable[[PhoneNumber], str | None] | None = None,
    ) -> None:
        self._repo = repository
        self._add = AddContactUseCase(repository)
        self._find = FindContactUseCase(repository)
        self._update = UpdateContactUseCase(repository)
        self._delete = DeleteContactUseCase(repository)
        self._list = ListContactsUseCase(repository)
        self._search = SearchContactsUseCase(repository)
        self._stats = ContactStatsUseCase(repository, resolve_region=resolve_region)

    def add_contact(self, request: AddContactRequest) -> AddContactResponse:
        return self._add.execute(request)

    def find_contact(self, request: FindContactRequest) -> FindContactResponse:
        return self._find.execute(request)

    def update_contact(self, request: UpdateContactRequest) -> UpdateContactResponse:
        return self._update.execute(request)

    def delete_contact(self, request: DeleteContactRequest) -> DeleteContactResponse:
        return self._delete.execute(request)

    def list_contacts(self, request: ListContactsRequest) -> ListContactsResponse:
        return self._list.execute(request)

    def search_contacts(
        self, request: SearchContactsRequest
    ) -> SearchContactsResponse:
        return self._search.execute(request)

    def contact_stats(self) -> ContactStatsResponse:
        return self._stats.execute()

"""Unit tests for ContactService. In-memory repo and request DTOs only."""

import uuid

import pytest

from phonebook.application import (
    AddContactRequest,
    ContactNotFound,
    ContactService,
    DeleteContactRequest,
    FindContactRequest,
    ListContactsRequest,
    SearchContactsRequest,
    SortBy,
    UpdateContactRequest,
)
from phonebook.domain import (
    BusinessRuleError,
    ContactId,
    Email,
    EntityNotFoundError,
    PhoneNumber,
    ValidationError,
)
from phonebook.infrastructure import InMemoryContactRepository


def _service(repo: InMemoryContactRepository | None = None) -> ContactService:
    return ContactService(repository=repo or InMemoryContactRepository())


def _add(service: ContactService, first: str, last: str, phone: str = "5551234567") -> ContactId:
    response = service.add_contact(
        AddContactRequest(first_name=first, last_name=last, phone_numbers=[PhoneNumber(phone)])
    )
    return response.contact_id


# --- add / find ---


def test_add_then_find_ada() -> None:
    service = _service()
    response = service.add_contact(
        AddContactRequest(
            first_name="Ada",
            last_name="Lovelace",
            phone_numbers=[PhoneNumber("5551234567")],
            emails=[],
        )
    )
    assert response.message == "Contact added successfully"
    assert uuid.UUID(str(response.contact_id)).version == 4

    found = service.find_contact(FindContactRequest(response.contact_id))
    assert found.found is True
    assert found.contact.full_name() == "Ada Lovelace"
    assert found.contact.phone_numbers[0].formatted() == "(555) 123-4567"


def test_find_unknown_is_not_an_error() -> None:
    found = _service().find_contact(FindContactRequest(ContactId.new()))
    assert found.found is False
    assert found.contact is None


def test_add_with_notes_and_tags() -> None:
    service = _service()
    response = service.add_contact(
        AddContactRequest(
            first_name="Grace",
            last_name="Hopper",
            emails=[Email("grace@navy.mil")],
            notes="Compilers",
            tags=["navy", " navy ", "", "cobol"],
        )
    )
    contact = service.find_contact(FindContactRequest(response.contact_id)).contact
    assert contact.notes == "Compilers"
    assert contact.tags == ["navy", "cobol"]


def test_add_without_contact_method_is_business_rule_error() -> None:
    service = _service()
    with pytest.raises(BusinessRuleError, match="At least one phone number or email"):
        service.add_contact(AddContactRequest(first_name="Ada", last_name="Lovelace"))


@pytest.mark.parametrize(
    "first_name",
    ["", "   ", "x" * 101, "Ada\nLovelace", "Ada\x00"],
)
def test_add_invalid_first_name_is_validation_error(first_name: str) -> None:
    service = _service()
    with pytest.raises(ValidationError, match="First name"):
        service.add_contact(
            AddContactRequest(
                first_name=first_name,
                last_name="Lovelace",
                phone_numbers=[PhoneNumber("5551234567")],
            )
        )


def test_add_allows_tab_and_max_length_name() -> None:
    service = _service()
    _add(service, "Ada\tAugusta", "x" * 100)


# --- update ---


def test_update_fields_and_collections() -> None:
    service = _service()
    cid = _add(service, "Ada", "Lovelace")
    response = service.update_contact(
        UpdateContactRequest(
            contact_id=cid,
            first_name="Augusta",
            notes="Countess",
            add_emails=[Email("ada@example.com")],
            remove_phone_numbers=[PhoneNumber("555-123-4567")],
            add_tags=["math", "math"],
            set_metadata={"born": "1815"},
        )
    )
    assert response.message == "Contact updated successfully"
    stored = service.find_contact(FindContactRequest(cid)).contact
    assert stored == response.contact
    assert stored.first_name == "Augusta"
    assert stored.last_name == "Lovelace"
    assert stored.notes == "Countess"
    assert stored.phone_numbers == []
    assert stored.emails == [Email("ada@example.com")]
    assert stored.tags == ["math"]
    assert stored.metadata == {"born": "1815"}


def test_update_blank_notes_clears_them() -> None:
    service = _service()
    cid = _add(service, "Ada", "Lovelace")
    service.update_contact(UpdateContactRequest(contact_id=cid, notes="something"))
    service.update_contact(UpdateContactRequest(contact_id=cid, notes="   "))
    assert service.find_contact(FindContactRequest(cid)).contact.notes is None


def test_update_blank_last_name_rejected() -> None:
    service = _service()
    cid = _add(service, "Ada", "Lovelace")
    with pytest.raises(ValidationError, match="Last name cannot be empty"):
        service.update_contact(UpdateContactRequest(contact_id=cid, last_name=" "))


def test_update_unknown_contact_raises_not_found() -> None:
    with pytest.raises(ContactNotFound):
        _service().update_contact(UpdateContactRequest(contact_id=ContactId.new()))


def test_not_found_is_also_a_domain_error() -> None:
    with pytest.raises(EntityNotFoundError):
        _service().delete_contact(DeleteContactRequest(ContactId.new()))


def test_update_removing_last_contact_method_is_rejected_and_nothing_stored() -> None:
    service = _service()
    cid = _add(service, "Ada", "Lovelace")
    with pytest.raises(BusinessRuleError, match="At least one phone number or email"):
        service.update_contact(
            UpdateContactRequest(
                contact_id=cid,
                first_name="Changed",
                add_tags=["lost"],
                remove_phone_numbers=[PhoneNumber("5551234567")],
            )
        )
    stored = service.find_contact(FindContactRequest(cid)).contact
    assert stored.first_name == "Ada"
    assert stored.tags == []
    assert stored.phone_numbers == [PhoneNumber("5551234567")]


# --- delete ---


def test_delete_removes_contact() -> None:
    service = _service()
    cid = _add(service, "Ada", "Lovelace")
    response = service.delete_contact(DeleteContactRequest(cid))
    assert response.contact_id == cid
    assert service.find_contact(FindContactRequest(cid)).found is False


def test_delete_unknown_raises_and_count_unchanged() -> None:
    repo = InMemoryContactRepository()
    service = _service(repo)
    _add(service, "Ada", "Lovelace")
    before = repo.count()
    with pytest.raises(ContactNotFound):
        service.delete_contact(DeleteContactRequest(ContactId.new()))
    assert repo.count() == before


# --- list ---


def _populate(service: ContactService) -> None:
    for first, last in [
        ("Grace", "Hopper"),
        ("Ada", "Lovelace"),
        ("Alan", "Turing"),
        ("Barbara", "Liskov"),
        ("Edsger", "Dijkstra"),
    ]:
        _add(service, first, last)


def test_list_defaults_to_last_name_ascending() -> None:
    service = _service()
    _populate(service)
    response = service.list_contacts(ListContactsRequest())
    assert [c.last_name for c in response.contacts] == [
        "Dijkstra",
        "Hopper",
        "Liskov",
        "Lovelace",
        "Turing",
    ]
    assert response.total_count == 5
    assert response.has_more is False


def test_list_sort_by_first_name_reversed() -> None:
    service = _service()
    _populate(service)
    response = service.list_contacts(
        ListContactsRequest(sort_by=SortBy.FIRST_NAME, reverse=True)
    )
    assert [c.first_name for c in response.contacts] == [
        "Grace",
        "Edsger",
        "Barbara",
        "Alan",
        "Ada",
    ]


def test_list_reverse_flips_ties_after_stable_sort() -> None:
    service = _service()
    _add(service, "Anna", "Smith")
    _add(service, "Bob", "Smith")
    ascending = service.list_contacts(ListContactsRequest())
    descending = service.list_contacts(ListContactsRequest(reverse=True))
    assert [c.first_name for c in ascending.contacts] == ["Anna", "Bob"]
    assert [c.first_name for c in descending.contacts] == ["Bob", "Anna"]


def test_list_pagination() -> None:
    service = _service()
    _populate(service)
    first = service.list_contacts(ListContactsRequest(page=0, page_size=2, sort_by=SortBy.FULL_NAME))
    last = service.list_contacts(ListContactsRequest(page=2, page_size=2, sort_by=SortBy.FULL_NAME))
    assert [c.full_name() for c in first.contacts] == ["Ada Lovelace", "Alan Turing"]
    assert first.has_more is True
    assert [c.full_name() for c in last.contacts] == ["Grace Hopper"]
    assert last.has_more is False


def test_list_page_beyond_end_is_empty() -> None:
    service = _service()
    _populate(service)
    response = service.list_contacts(ListContactsRequest(page=10, page_size=2))
    assert response.contacts == []
    assert response.has_more is False
    assert response.total_count == 5


@pytest.mark.parametrize("page_size", [0, 101])
def test_list_rejects_bad_page_size(page_size: int) -> None:
    with pytest.raises(ValidationError):
        _service().list_contacts(ListContactsRequest(page_size=page_size))


# --- search ---


def test_search_case_insensitive() -> None:
    service = _service()
    _populate(service)
    response = service.search_contacts(SearchContactsRequest("LOVE"))
    assert response.count == 1
    assert response.contacts[0].first_name == "Ada"
    assert response.query == "LOVE"
    assert service.search_contacts(SearchContactsRequest("nonexistent")).count == 0


class _UntouchableRepository:
    def __getattr__(self, name):
        raise AssertionError(f"repository.{name} should not be called")


@pytest.mark.parametrize("query", ["", "   ", "\t"])
def test_search_blank_query_fails_without_repository_call(query: str) -> None:
    service = ContactService(repository=_UntouchableRepository())
    with pytest.raises(ValidationError, match="Search query cannot be empty"):
        service.search_contacts(SearchContactsRequest(query))


def test_search_rejects_overlong_query() -> None:
    with pytest.raises(ValidationError):
        _service().search_contacts(SearchContactsRequest("x" * 201))


# --- stats ---


def test_stats_counts() -> None:
    service = ContactService(
        InMemoryContactRepository(),
        resolve_region=lambda phone: "US" if phone.value.startswith("+1") else None,
    )
    service.add_contact(
        AddContactRequest(
            first_name="Ada",
            last_name="Lovelace",
            phone_numbers=[PhoneNumber("+12025551234")],
            emails=[Email("ada@example.com")],
            tags=["math"],
        )
    )
    service.add_contact(
        AddContactRequest(
            first_name="Grace",
            last_name="Hopper",
            phone_numbers=[PhoneNumber("5551234567")],
            tags=["math", "navy"],
        )
    )
    stats = service.contact_stats()
    assert stats.total_count == 2
    assert stats.with_phone == 2
    assert stats.with_email == 1
    assert stats.tags == {"math": 2, "navy": 1}
    assert stats.email_domains == {"example.com": 1}
    assert stats.phone_regions == {"US": 1, "unknown": 1}

"""Contract tests run against both repository implementations."""

import pytest

from phonebook.application import ContactAlreadyExists, ContactNotFound
from phonebook.domain import Contact, ContactId, DuplicateEntityError, Email, PhoneNumber
from phonebook.infrastructure import FileContactRepository, InMemoryContactRepository


@pytest.fixture(params=["memory", "file"])
def repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryContactRepository()
    return FileContactRepository(tmp_path / "contacts.json")


def _contact(first: str = "Ada", last: str = "Lovelace") -> Contact:
    return Contact.new(first, last, [PhoneNumber("5551234567")], [])


def test_save_then_find(repo) -> None:
    contact = _contact()
    repo.save(contact)
    found = repo.find_by_id(contact.id)
    assert found == contact
    assert repo.exists(contact.id)
    assert repo.count() == 1


def test_find_missing_returns_none(repo) -> None:
    assert repo.find_by_id(ContactId.new()) is None
    assert not repo.exists(ContactId.new())


def test_save_duplicate_id_raises(repo) -> None:
    contact = _contact()
    repo.save(contact)
    with pytest.raises(ContactAlreadyExists):
        repo.save(contact)
    with pytest.raises(DuplicateEntityError):
        repo.save(contact)
    assert repo.count() == 1


def test_update_replaces_wholesale(repo) -> None:
    contact = _contact()
    repo.save(contact)
    contact.set_first_name("Augusta")
    contact.add_email(Email("ada@example.com"))
    repo.update(contact)
    assert repo.find_by_id(contact.id) == contact


def test_update_missing_raises(repo) -> None:
    with pytest.raises(ContactNotFound):
        repo.update(_contact())


def test_delete_and_delete_missing(repo) -> None:
    contact = _contact()
    repo.save(contact)
    repo.delete(contact.id)
    assert repo.count() == 0
    with pytest.raises(ContactNotFound) as exc:
        repo.delete(contact.id)
    assert exc.value.contact_id == str(contact.id)
    assert repo.count() == 0


def test_find_all_and_search(repo) -> None:
    repo.save(_contact("Ada", "Lovelace"))
    repo.save(_contact("Grace", "Hopper"))
    assert {c.first_name for c in repo.find_all()} == {"Ada", "Grace"}
    assert [c.first_name for c in repo.search("hop")] == ["Grace"]
    assert repo.search("nobody") == []


def test_returned_contacts_are_copies(repo) -> None:
    contact = _contact()
    repo.save(contact)
    contact.add_tag("after-save")

    found = repo.find_by_id(contact.id)
    assert found.tags == []
    found.add_tag("local")
    repo.find_all()[0].add_tag("local")
    assert repo.find_by_id(contact.id).tags == []


def test_modify_applies_and_returns_result(repo) -> None:
    contact = _contact()
    repo.save(contact)
    updated = repo.modify(contact.id, lambda c: c.add_tag("friend"))
    assert updated.tags == ["friend"]
    assert repo.find_by_id(contact.id).tags == ["friend"]


def test_modify_missing_raises_without_calling_mutator(repo) -> None:
    calls = []
    with pytest.raises(ContactNotFound):
        repo.modify(ContactId.new(), calls.append)
    assert calls == []


def test_modify_failure_leaves_stored_contact_unchanged(repo) -> None:
    contact = _contact()
    repo.save(contact)

    def mutate(c: Contact) -> None:
        c.set_first_name("Changed")
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        repo.modify(contact.id, mutate)
    assert repo.find_by_id(contact.id).first_name == "Ada"

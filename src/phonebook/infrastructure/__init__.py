"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.memory_repository import InMemoryContactRepository
from phonebook.infrastructure.persistence.file_repository import FileContactRepository
from phonebook.infrastructure.persistence.file_storage import FileStorage
from phonebook.infrastructure.phone import region_for_number

__all__ = [
    "FileContactRepository",
    "FileStorage",
    "InMemoryContactRepository",
    "region_for_number",
]

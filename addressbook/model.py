"""In-memory address book with a filtered, displayed view."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from scheduling.models import ValidationError

from .person import Person


PersonPredicate = Callable[[Person], bool]


def PREDICATE_SHOW_ALL_PERSONS(person: Person) -> bool:
    return True


class PersonNotFoundError(LookupError):
    """Raised when replacing a contact that is not in the address book."""


@dataclass(frozen=True)
class Index:
    """A position in the displayed contact list.

    Users see 1-based positions; lists are indexed from 0.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValidationError("Index must be a positive integer")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        if one_based < 1:
            raise ValidationError(f"Index must be a positive integer, got {one_based}")
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


class AddressBook:
    """Holds contacts in insertion order and the currently displayed subset."""

    def __init__(self, persons: Optional[Iterable[Person]] = None) -> None:
        self._persons: list[Person] = list(persons or [])
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS

    def get_person_list(self) -> list[Person]:
        return list(self._persons)

    def get_filtered_person_list(self) -> list[Person]:
        """Contacts currently displayed, in address book order."""
        return [person for person in self._persons if self._predicate(person)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        """Append a contact.

        Raises:
            ValidationError: If a contact with the same name already exists.
        """
        if self.has_person(person):
            raise ValidationError(f"Contact '{person.name}' already exists")
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace a contact with its edited snapshot, keeping its position.

        Raises:
            PersonNotFoundError: If target is not in the address book.
        """
        for position, existing in enumerate(self._persons):
            if existing is target or existing == target:
                self._persons[position] = edited
                return
        raise PersonNotFoundError(f"Contact '{target.name}' is not in the address book")

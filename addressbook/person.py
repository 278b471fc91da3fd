"""Contact snapshots and the partial update used to edit them."""

from dataclasses import dataclass, field, replace
from typing import Optional

from scheduling.models import EMPTY_SCHEDULE, Schedule, ValidationError


@dataclass(frozen=True)
class Person:
    """An immutable contact; edits produce a new snapshot."""

    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    schedule: Schedule = EMPTY_SCHEDULE
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Contact name must not be blank")
        if self.schedule is None:
            object.__setattr__(self, "schedule", EMPTY_SCHEDULE)
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person") -> bool:
        """Contacts are the same person when their names match."""
        return other is self or (other is not None and other.name == self.name)


@dataclass
class EditPersonDescriptor:
    """Fields to change on a contact; None leaves the field untouched."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    schedule: Optional[Schedule] = None
    tags: Optional[frozenset[str]] = None

    def apply(self, person: Person) -> Person:
        """Return a copy of the person with the edited fields substituted.

        Args:
            person: The contact to edit. It is left unchanged.

        Returns:
            A new Person snapshot.
        """
        changes = {
            name: value
            for name, value in (
                ("name", self.name),
                ("phone", self.phone),
                ("email", self.email),
                ("address", self.address),
                ("schedule", self.schedule),
                ("tags", self.tags),
            )
            if value is not None
        }
        return replace(person, **changes)

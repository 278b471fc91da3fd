"""Read and write an address book as a plain JSON dump."""

import json
from pathlib import Path
from typing import Any, Union

from scheduling.models import DATE_FORMAT, TIME_FORMAT, Event, Schedule, ValidationError

from .model import AddressBook
from .person import Person


def event_to_dict(event: Event) -> dict[str, Any]:
    return {
        "description": event.description,
        "date": event.date.strftime(DATE_FORMAT),
        "time": event.time.strftime(TIME_FORMAT),
        "duration": event.duration_hours,
    }


def event_from_dict(data: Any) -> Event:
    if not isinstance(data, dict):
        raise ValidationError(f"Each event must be a JSON object, got {data!r}")
    try:
        return Event.from_strings(
            str(data["description"]),
            str(data["date"]),
            str(data["time"]),
            data["duration"],
        )
    except KeyError as e:
        raise ValidationError(f"Event is missing field {e}")


def person_to_dict(person: Person) -> dict[str, Any]:
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "tags": sorted(person.tags),
        "schedule": [event_to_dict(event) for event in person.schedule],
    }


def person_from_dict(data: dict[str, Any]) -> Person:
    if "name" not in data:
        raise ValidationError("Contact is missing field 'name'")
    events = data.get("schedule", [])
    if not isinstance(events, list):
        raise ValidationError(f"Schedule of '{data['name']}' must be a list of events")
    tags = data.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ValidationError(f"Tags of '{data['name']}' must be a list of strings")

    schedule = Schedule(tuple(event_from_dict(event) for event in events))
    return Person(
        name=str(data["name"]),
        phone=str(data.get("phone", "")),
        email=str(data.get("email", "")),
        address=str(data.get("address", "")),
        schedule=schedule,
        tags=frozenset(tags),
    )


def load_address_book(path: Union[str, Path]) -> AddressBook:
    """Load contacts from a JSON file.

    A missing file yields an empty address book.

    Raises:
        ValidationError: If the file content is not a valid contact list.
    """
    p = Path(path)
    if not p.exists():
        return AddressBook()

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Cannot parse {p}: {e}")

    persons = data.get("persons") if isinstance(data, dict) else None
    if not isinstance(persons, list):
        raise ValidationError(f"{p} must contain a 'persons' list")

    book = AddressBook()
    for entry in persons:
        if not isinstance(entry, dict):
            raise ValidationError("Each contact must be a JSON object")
        book.add_person(person_from_dict(entry))
    return book


def save_address_book(book: AddressBook, path: Union[str, Path]) -> None:
    """Write every contact (not only the displayed ones) to a JSON file."""
    payload = {"persons": [person_to_dict(person) for person in book.get_person_list()]}
    Path(path).write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

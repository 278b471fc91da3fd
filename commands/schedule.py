"""Commands that add events to and query contacts' schedules."""

from datetime import datetime
from typing import Optional

from addressbook.model import PREDICATE_SHOW_ALL_PERSONS, AddressBook, Index
from addressbook.person import EditPersonDescriptor
from scheduling.models import EMPTY_SCHEDULE_MESSAGE, Event
from scheduling.predicates import IsPersonFreePredicate

from .base import (
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    Command,
    CommandResult,
    resolve_displayed_person,
)


class AddEventCommand(Command):
    """Adds an event to the schedule of a displayed contact."""

    COMMAND_WORD = "addEvent"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds an event to the indexed person's schedule in the address book. "
        "Parameters: INDEX (must be a positive integer) "
        "--description EVENT_DESCRIPTION --date DATE --time TIME --duration DURATION\n"
        f"Example: {COMMAND_WORD} 3 --description CS2103T Tutorial "
        "--date 2022-12-28 --time 10:00 --duration 3"
    )
    MESSAGE_SUCCESS = "Added {} to {}'s schedule"

    def __init__(self, index: Index, event: Event) -> None:
        self.index = index
        self.event = event

    def execute(self, model: AddressBook) -> CommandResult:
        """Append the event and replace the contact with the edited snapshot.

        Raises:
            InvalidIndexError: If the index is outside the displayed list.
        """
        person = resolve_displayed_person(model, self.index)

        descriptor = EditPersonDescriptor(schedule=person.schedule.add_event(self.event))
        edited = descriptor.apply(person)

        model.set_person(person, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.event, person.name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddEventCommand):
            return NotImplemented
        return self.index == other.index and self.event == other.event


class FreeScheduleCommand(Command):
    """Lists every contact who is free at the given time and date.

    If no date is given, today's date is assumed. Contacts without a
    schedule are considered busy at all times.
    """

    COMMAND_WORD = "freeSchedule"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Retrieves information of friends who are free at the specified time or date\n"
        "Parameters: --time TIME [--date DATE]\n"
        f"Example: {COMMAND_WORD} --time 12:00 --date 2022-02-14"
    )

    def __init__(self, predicate: IsPersonFreePredicate) -> None:
        self.predicate = predicate

    def execute(self, model: AddressBook) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW % len(model.get_filtered_person_list()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreeScheduleCommand):
            return NotImplemented
        return self.predicate == other.predicate


class UpcomingScheduleCommand(Command):
    """Shows a displayed contact's events over the next few days."""

    COMMAND_WORD = "upcoming"
    DEFAULT_UPCOMING_DAYS = 7
    MESSAGE_HEADER = "Upcoming schedule for {} ({}):\n"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the indexed person's events over the next few days.\n"
        f"Parameters: INDEX (must be a positive integer) [--days DAYS (default: {DEFAULT_UPCOMING_DAYS})]\n"
        f"Example: {COMMAND_WORD} 3 --days 0"
    )
    MESSAGE_NOTHING_UPCOMING = "Nothing scheduled for {} in the next {} day(s)."

    def __init__(
        self,
        index: Index,
        days_forward: int = DEFAULT_UPCOMING_DAYS,
        now: Optional[datetime] = None
    ) -> None:
        self.index = index
        self.days_forward = days_forward
        self.now = now

    def execute(self, model: AddressBook) -> CommandResult:
        """Render the contact's projected events as a numbered list.

        Raises:
            InvalidIndexError: If the index is outside the displayed list.
        """
        person = resolve_displayed_person(model, self.index)

        if person.schedule.is_empty():
            return CommandResult(EMPTY_SCHEDULE_MESSAGE)

        upcoming = person.schedule.get_upcoming_schedule(self.days_forward, self.now)
        if upcoming.is_empty():
            return CommandResult(self.MESSAGE_NOTHING_UPCOMING.format(person.name, self.days_forward))

        if self.days_forward == 0:
            return CommandResult(
                self.MESSAGE_HEADER.format(person.name, "today") + upcoming.get_daily_schedule_format()
            )
        window = f"next {self.days_forward} day(s)"
        return CommandResult(self.MESSAGE_HEADER.format(person.name, window) + str(upcoming))

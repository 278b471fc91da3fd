"""Data models for weekly recurring events and schedules."""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional, Union


DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DAYS_PER_WEEK = 7
# One year of weekly slots
MAX_DURATION_HOURS = 24 * DAYS_PER_WEEK * 52

EMPTY_SCHEDULE_MESSAGE = "No schedule recorded yet."
MESSAGE_CONSTRAINTS = (
    "A Schedule's Events must have alphanumeric event descriptions, date formats YYYY-MM-DD, "
    "time formats HH:MM and duration format in hours"
)

_DESCRIPTION_PATTERN = re.compile(r"^[^\W_](?:[^\W_]| )*$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^\d{2}:\d{2}$")


class ValidationError(ValueError):
    """Raised when an event, schedule or contact field is malformed."""


def parse_date(value: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        ValidationError: If the string is not a real calendar date.
    """
    value = value.strip()
    if not _DATE_PATTERN.match(value):
        raise ValidationError(f"Invalid date format: '{value}'. Expected YYYY-MM-DD.")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date: '{value}'.")


def parse_time(value: str) -> time:
    """Parse a 24h time string in HH:MM format.

    Raises:
        ValidationError: If the string is not a valid time of day.
    """
    value = value.strip()
    if not _TIME_PATTERN.match(value):
        raise ValidationError(f"Invalid time format: '{value}'. Expected HH:MM.")
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time: '{value}'.")


def parse_duration(value: Union[str, int, float]) -> float:
    """Parse a duration in hours; must be a positive number."""
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid duration: '{value}'. Expected a number of hours.")
    if not _is_valid_duration(hours):
        raise ValidationError(
            f"Duration must be a positive number of hours up to {MAX_DURATION_HOURS}, got {value}"
        )
    return hours


def _is_valid_description(description: object) -> bool:
    return isinstance(description, str) and bool(_DESCRIPTION_PATTERN.match(description))


def _is_valid_duration(hours: object) -> bool:
    if isinstance(hours, bool) or not isinstance(hours, (int, float)):
        return False
    # NaN fails both comparisons
    return 0 < hours <= MAX_DURATION_HOURS


def _field_error(description: object, on: object, at: object, duration_hours: object) -> Optional[str]:
    """Describe the first malformed event field, or None if all are valid."""
    if not _is_valid_description(description):
        return f"Event description must be alphanumeric with spaces, got {description!r}"
    # datetime is a date subclass, but an event date carries no time part
    if not isinstance(on, date) or isinstance(on, datetime):
        return f"Event date must be a date, got {on!r}"
    if not isinstance(at, time):
        return f"Event time must be a time of day, got {at!r}"
    if at.second or at.microsecond or at.tzinfo is not None:
        return "Event time must be a naive HH:MM time"
    if not _is_valid_duration(duration_hours):
        return (
            f"Duration must be a positive number of hours up to {MAX_DURATION_HOURS}, "
            f"got {duration_hours!r}"
        )
    return None


def format_duration(hours: float) -> str:
    """Format hours without a trailing '.0' for whole numbers."""
    if float(hours).is_integer():
        hours = int(hours)
    unit = "hour" if hours == 1 else "hours"
    return f"{hours} {unit}"


@total_ordering
@dataclass(frozen=True)
class Event:
    """A calendar slot that repeats every week from its first date.

    Events sort chronologically: by date, then time of day, then
    description, then duration.
    """

    description: str
    date: date
    time: time
    duration_hours: float

    def __post_init__(self) -> None:
        error = _field_error(self.description, self.date, self.time, self.duration_hours)
        if error:
            raise ValidationError(error)
        object.__setattr__(self, "duration_hours", float(self.duration_hours))

    @classmethod
    def from_strings(
        cls,
        description: str,
        date_str: str,
        time_str: str,
        duration: Union[str, int, float]
    ) -> "Event":
        """Build an event from its textual form.

        Args:
            description: Alphanumeric description, spaces allowed.
            date_str: First occurrence in YYYY-MM-DD format.
            time_str: Start time in HH:MM format.
            duration: Length in hours; may be fractional.

        Returns:
            The validated event.

        Raises:
            ValidationError: If any of the pieces is malformed.
        """
        return cls(
            description=description.strip(),
            date=parse_date(date_str),
            time=parse_time(time_str),
            duration_hours=parse_duration(duration),
        )

    @staticmethod
    def is_valid_event(event: "Event") -> bool:
        """Returns True if every field of the event is well-formed."""
        return _field_error(event.description, event.date, event.time, event.duration_hours) is None

    def sort_key(self) -> tuple[date, time, str, float]:
        return self.date, self.time, self.description, self.duration_hours

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    @property
    def duration(self) -> timedelta:
        return timedelta(hours=self.duration_hours)

    def get_time(self) -> time:
        return self.time

    def will_date_collide(self, candidate: date) -> bool:
        """Check whether the weekly recurrence lands on the given date.

        The event occurs on its stored date and every 7 days after it,
        never before it.
        """
        if isinstance(candidate, datetime):
            candidate = candidate.date()
        delta = (candidate - self.date).days
        return delta >= 0 and delta % DAYS_PER_WEEK == 0

    def next_occurrence_date(self, today: date) -> Optional[date]:
        """First date on or after today the event lands on, or None past date.max."""
        if self.date >= today:
            return self.date
        days_ahead = -(today - self.date).days % DAYS_PER_WEEK
        if days_ahead > (date.max - today).days:
            return None
        return today + timedelta(days=days_ahead)

    def get_next_recurring_event(self, today: Optional[date] = None) -> "Event":
        """Project the event onto its first occurrence on or after today.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            A new event dated at the next occurrence, or this event itself
            if its stored date is not in the past.
        """
        if today is None:
            today = date.today()
        if self.date >= today:
            return self

        next_date = self.next_occurrence_date(today)
        if next_date is None:
            raise ValidationError(
                f"No occurrence of '{self.description}' on or after {today} fits the calendar"
            )

        return Event(
            date=next_date,
            time=self.time,
            description=self.description,
            duration_hours=self.duration_hours,
        )

    def occurrence_span(self, on: date) -> tuple[datetime, datetime]:
        """Return the [start, end) datetimes of an occurrence starting on a date."""
        start = datetime.combine(on, self.time)
        try:
            return start, start + self.duration
        except OverflowError:
            raise ValidationError(f"'{self.description}' on {on} ends past the last supported date")

    def get_daily_schedule_format(self) -> str:
        return (
            f"{self.description} at {self.time.strftime(TIME_FORMAT)} "
            f"for {format_duration(self.duration_hours)}"
        )

    def __str__(self) -> str:
        return (
            f"{self.description} on {self.date.strftime(DATE_FORMAT)} "
            f"at {self.time.strftime(TIME_FORMAT)} for {format_duration(self.duration_hours)}"
        )


@dataclass(frozen=True)
class Schedule:
    """An ordered, possibly empty, collection of recurring events.

    Insertion order is the storage order and duplicates are allowed.
    The schedule is a value: adding an event returns a new schedule.
    """

    events: tuple[Event, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(self.events))
        for event in self.events:
            if not isinstance(event, Event):
                raise ValidationError(MESSAGE_CONSTRAINTS)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def get_events(self) -> list[Event]:
        return list(self.events)

    def get_event(self, index: int) -> Event:
        return self.events[index]

    def is_empty(self) -> bool:
        return not self.events

    def add_event(self, event: Event) -> "Schedule":
        """Return a new schedule with the event appended.

        No uniqueness or overlap check is made.
        """
        return Schedule(self.events + (event,))

    def get_upcoming_schedule(
        self,
        days_forward: int,
        now: Optional[datetime] = None
    ) -> "Schedule":
        """Project events onto the window [today, today + days_forward].

        Args:
            days_forward: Size of the lookahead window in days. With 0 only
                events still to start later today are kept.
            now: Reference instant; defaults to the current local time.

        Returns:
            A new, chronologically sorted schedule of next occurrences.

        Raises:
            ValueError: If days_forward is negative or the window runs past
                the last supported date.
        """
        if days_forward < 0:
            raise ValueError(f"days_forward must not be negative, got {days_forward}")
        if now is None:
            now = datetime.now()

        today = now.date()
        if days_forward > (date.max - today).days:
            raise ValueError(f"A {days_forward}-day window from {today} runs past {date.max}")
        last_day = today + timedelta(days=days_forward)
        upcoming: list[Event] = []

        for event in self.events:
            next_date = event.next_occurrence_date(today)
            if next_date is None or next_date > last_day:
                continue
            if days_forward == 0 and event.time <= now.time():
                continue
            upcoming.append(event.get_next_recurring_event(today))

        return Schedule(tuple(sorted(upcoming)))

    @staticmethod
    def is_valid_schedule(schedule: "Schedule") -> bool:
        """Returns True if every event in the schedule is valid."""
        return all(Event.is_valid_event(event) for event in schedule.events)

    def get_daily_schedule_format(self) -> str:
        return "".join(
            f"{counter}. {event.get_daily_schedule_format()}\n"
            for counter, event in enumerate(self.events, start=1)
        )

    def __str__(self) -> str:
        return "".join(
            f"{counter}. {event}\n"
            for counter, event in enumerate(self.events, start=1)
        )


EMPTY_SCHEDULE = Schedule()

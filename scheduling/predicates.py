"""Free/busy predicate over contacts' weekly schedules."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Optional

from .models import Event, Schedule

if TYPE_CHECKING:
    from addressbook.person import Person


def is_busy_at(event: Event, instant: datetime) -> bool:
    """Check whether any occurrence of the event covers the instant.

    Occurrences that started on an earlier day and run past midnight
    are taken into account.
    """
    days_back = min(math.ceil(event.duration_hours / 24), (instant.date() - date.min).days)
    for offset in range(days_back + 1):
        start_day = instant.date() - timedelta(days=offset)
        if not event.will_date_collide(start_day):
            continue
        # compare elapsed time so spans ending after datetime.max still work
        elapsed = instant - datetime.combine(start_day, event.time)
        if timedelta(0) <= elapsed < event.duration:
            return True
    return False


def is_schedule_free_at(schedule: Optional[Schedule], instant: datetime) -> bool:
    """A missing or empty schedule counts as busy at all times."""
    if schedule is None or schedule.is_empty():
        return False
    return not any(is_busy_at(event, instant) for event in schedule)


@dataclass(frozen=True)
class IsPersonFreePredicate:
    """Tests that a person has no event running at the queried time.

    If no date is given, today's date is resolved once, when the
    predicate is built, so every contact is tested against the same day.
    """

    query_time: time
    query_date: Optional[date] = None
    today: Optional[date] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.query_date is None:
            object.__setattr__(self, "query_date", self.today or date.today())

    @property
    def instant(self) -> datetime:
        return datetime.combine(self.query_date, self.query_time)

    def __call__(self, person: "Person") -> bool:
        return is_schedule_free_at(person.schedule, self.instant)

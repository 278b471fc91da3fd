"""Commands that drive the scheduling engine from the address book."""

from .base import (
    Command,
    CommandError,
    CommandResult,
    InvalidIndexError,
    resolve_displayed_person,
)
from .schedule import AddEventCommand, FreeScheduleCommand, UpcomingScheduleCommand

__all__ = [
    "AddEventCommand",
    "Command",
    "CommandError",
    "CommandResult",
    "FreeScheduleCommand",
    "InvalidIndexError",
    "UpcomingScheduleCommand",
    "resolve_displayed_person",
]

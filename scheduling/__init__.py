"""Weekly recurring events, schedules and free/busy evaluation."""

from .models import (
    EMPTY_SCHEDULE,
    EMPTY_SCHEDULE_MESSAGE,
    MAX_DURATION_HOURS,
    MESSAGE_CONSTRAINTS,
    Event,
    Schedule,
    ValidationError,
    parse_date,
    parse_duration,
    parse_time,
)
from .predicates import IsPersonFreePredicate, is_busy_at, is_schedule_free_at

__all__ = [
    "EMPTY_SCHEDULE",
    "EMPTY_SCHEDULE_MESSAGE",
    "MAX_DURATION_HOURS",
    "MESSAGE_CONSTRAINTS",
    "Event",
    "IsPersonFreePredicate",
    "Schedule",
    "ValidationError",
    "is_busy_at",
    "is_schedule_free_at",
    "parse_date",
    "parse_duration",
    "parse_time",
]

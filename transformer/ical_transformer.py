"""iCalendar transformer for weekly recurring schedules."""

import hashlib
from datetime import date, datetime
from typing import Optional

from icalendar import Calendar, Event as ICalEvent, vRecur

from scheduling.models import Event, Schedule
from .base import BaseTransformer


class ICalTransformer(BaseTransformer):
    """Transformer that converts a contact's schedule to iCalendar format.

    Times are written as floating local times; no timezone is attached.
    """
    
    PRODID = "-//Contact Scheduler//contact-scheduler//EN"
    UID_DOMAIN = "contact-scheduler.local"
    
    def __init__(self, until: Optional[date] = None) -> None:
        """Initialize the iCalendar transformer.
        
        Args:
            until: Last date on which occurrences may start. Events recur
                indefinitely when omitted.
        """
        self._calendar: Optional[Calendar] = None
        self._until = until
    
    def _generate_uid(self, event: Event, owner: str, position: int) -> str:
        """Generate a stable unique identifier for an event.
        
        Args:
            event: The recurring event.
            owner: Name of the contact owning the schedule.
            position: Position of the event in the schedule; keeps
                duplicate events apart.
            
        Returns:
            Unique identifier string.
        """
        unique_string = (
            f"{owner}-{event.description}-{event.date}-"
            f"{event.time}-{event.duration_hours}-{position}"
        )
        return hashlib.md5(unique_string.encode()).hexdigest() + "@" + self.UID_DOMAIN
    
    def transform(self, schedule: Schedule, owner: str) -> Calendar:
        """Transform a schedule into iCalendar format.
        
        Args:
            schedule: Recurring events to export.
            owner: Display name used for the calendar name.
            
        Returns:
            iCalendar Calendar object with one weekly VEVENT per event.
        """
        self._calendar = Calendar()
        self._calendar.add("prodid", self.PRODID)
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")
        self._calendar.add("x-wr-calname", f"{owner}'s schedule")
        
        for position, schedule_event in enumerate(schedule):
            ical_event = ICalEvent()
            
            start_datetime, end_datetime = schedule_event.occurrence_span(schedule_event.date)
            
            ical_event.add("uid", self._generate_uid(schedule_event, owner, position))
            ical_event.add("dtstart", start_datetime)
            ical_event.add("dtend", end_datetime)
            ical_event.add("dtstamp", datetime.now())
            ical_event.add("summary", schedule_event.description)
            
            recur = {"freq": "WEEKLY", "interval": 1}
            if self._until is not None:
                recur["until"] = datetime.combine(self._until, schedule_event.time)
            ical_event.add("rrule", vRecur(recur))
            
            self._calendar.add_component(ical_event)
        
        return self._calendar
    
    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.
        
        Args:
            output_path: Path to the output file.
            
        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")
        
        with open(output_path, "wb") as f:
            f.write(self._calendar.to_ical())

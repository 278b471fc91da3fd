#!/usr/bin/env python3
"""Contact schedule manager.

Adds weekly recurring events to contacts, finds who is free at a given
time, shows upcoming events and exports a contact's schedule to an
iCalendar (.ics) file.
"""

import argparse
import sys
from datetime import date, time
from typing import Optional

from addressbook import AddressBook, Index, load_address_book, save_address_book
from commands import (
    AddEventCommand,
    CommandError,
    FreeScheduleCommand,
    UpcomingScheduleCommand,
    resolve_displayed_person,
)
from scheduling import Event, IsPersonFreePredicate, ValidationError
from scheduling import parse_date as _parse_date, parse_time as _parse_time
from transformer import ICalTransformer


DEFAULT_BOOK = "contacts.json"


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return _parse_date(date_str)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_time(time_str: str) -> time:
    """Parse time string in HH:MM format."""
    try:
        return _parse_time(time_str)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_index(index_str: str) -> Index:
    """Parse a 1-based contact index."""
    try:
        return Index.from_one_based(int(index_str))
    except (ValueError, ValidationError):
        raise argparse.ArgumentTypeError(
            f"Invalid index: '{index_str}'. Expected a positive integer."
        )


def parse_days(days_str: str) -> int:
    """Parse a non-negative number of days."""
    try:
        days = int(days_str)
    except ValueError:
        days = -1
    if days < 0:
        raise argparse.ArgumentTypeError(
            f"Invalid number of days: '{days_str}'. Expected 0 or more."
        )
    max_days = (date.max - date.today()).days
    if days > max_days:
        raise argparse.ArgumentTypeError(
            f"Invalid number of days: '{days_str}'. Expected at most {max_days}."
        )
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manage contacts' weekly schedules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 contactsched.py add-event 3 --description "CS2103T Tutorial" --date 2022-12-28 --time 10:00 --duration 3
  python3 contactsched.py free --time 12:00 --date 2022-12-28
  python3 contactsched.py upcoming 3 --days 7
  python3 contactsched.py export 3 --output tutorials.ics --until 2023-04-30
        """
    )

    parser.add_argument(
        "-b", "--book",
        default=DEFAULT_BOOK,
        help=f"Contacts file (default: {DEFAULT_BOOK})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all contacts")

    add_event = subparsers.add_parser(
        "add-event",
        help="Add a weekly event to a contact",
        description=AddEventCommand.MESSAGE_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    add_event.add_argument("index", type=parse_index, help="Contact index (starting at 1)")
    add_event.add_argument("--description", required=True, help="Alphanumeric event description")
    add_event.add_argument("--date", required=True, help="First occurrence (format: YYYY-MM-DD)")
    add_event.add_argument("--time", required=True, help="Start time (format: HH:MM)")
    add_event.add_argument("--duration", required=True, help="Duration in hours")

    free = subparsers.add_parser(
        "free",
        help="List contacts free at a time",
        description=FreeScheduleCommand.MESSAGE_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    free.add_argument("--time", type=parse_time, required=True, help="Time (format: HH:MM)")
    free.add_argument(
        "--date",
        type=parse_date,
        default=None,
        help="Date (format: YYYY-MM-DD). Default: today"
    )

    upcoming = subparsers.add_parser(
        "upcoming",
        help="Show a contact's upcoming events",
        description=UpcomingScheduleCommand.MESSAGE_USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    upcoming.add_argument("index", type=parse_index, help="Contact index (starting at 1)")
    upcoming.add_argument(
        "-d", "--days",
        type=parse_days,
        default=UpcomingScheduleCommand.DEFAULT_UPCOMING_DAYS,
        help="Days to look ahead; 0 shows the rest of today "
             f"(default: {UpcomingScheduleCommand.DEFAULT_UPCOMING_DAYS})"
    )

    export = subparsers.add_parser("export", help="Export a contact's schedule to iCalendar")
    export.add_argument("index", type=parse_index, help="Contact index (starting at 1)")
    export.add_argument(
        "-o", "--output",
        default="schedule.ics",
        help="Output file path (default: schedule.ics)"
    )
    export.add_argument(
        "--until",
        type=parse_date,
        default=None,
        help="Last date of the recurrence (format: YYYY-MM-DD). Default: no end"
    )

    return parser


def list_contacts(book: AddressBook) -> None:
    persons = book.get_filtered_person_list()
    if not persons:
        print("No contacts.")
    for position, person in enumerate(persons, start=1):
        events = len(person.schedule)
        print(f"{position}. {person.name} ({events} event{'s' if events != 1 else ''})")


def export_schedule(book: AddressBook, index: Index, output: str, until: Optional[date]) -> None:
    # Ensure output file has .ics extension
    output_path = output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    person = resolve_displayed_person(book, index)
    if person.schedule.is_empty():
        print(f"Warning: {person.name} has no events. The output file will be empty.")

    transformer = ICalTransformer(until=until)
    transformer.transform(person.schedule, person.name)
    transformer.save(output_path)

    print(f"Schedule saved to: {output_path}")


def run(args: argparse.Namespace) -> None:
    book = load_address_book(args.book)

    if args.command == "list":
        list_contacts(book)

    elif args.command == "add-event":
        event = Event.from_strings(args.description, args.date, args.time, args.duration)
        result = AddEventCommand(args.index, event).execute(book)
        save_address_book(book, args.book)
        print(result)

    elif args.command == "free":
        predicate = IsPersonFreePredicate(args.time, args.date)
        result = FreeScheduleCommand(predicate).execute(book)
        print(result)
        list_contacts(book)

    elif args.command == "upcoming":
        print(UpcomingScheduleCommand(args.index, args.days).execute(book))

    elif args.command == "export":
        export_schedule(book, args.index, args.output, args.until)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except (ValueError, CommandError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

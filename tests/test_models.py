"""Tests for Event and Schedule."""

from datetime import date, datetime, time, timedelta

import pytest

from scheduling import (
    EMPTY_SCHEDULE,
    MAX_DURATION_HOURS,
    Event,
    Schedule,
    ValidationError,
    parse_date,
    parse_duration,
    parse_time,
)


class TestParsing:
    """Tests for the textual field parsers."""

    def test_parse_valid_fields(self) -> None:
        assert parse_date("2022-12-28") == date(2022, 12, 28)
        assert parse_time("09:05") == time(9, 5)
        assert parse_duration("1.5") == 1.5
        assert parse_duration(3) == 3.0

    @pytest.mark.parametrize("value", ["28-12-2022", "2022-13-01", "2022-02-30", "2022/12/28", ""])
    def test_parse_date_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_date(value)

    @pytest.mark.parametrize("value", ["25:00", "10:60", "9:00", "10.00", "noon"])
    def test_parse_time_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_time(value)

    @pytest.mark.parametrize("value", ["0", "-2", "abc", "nan", "inf", ""])
    def test_parse_duration_rejects_non_positive(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_duration(value)


class TestEventConstruction:
    """Tests for Event validation."""

    def test_from_strings(self, tutorial: Event) -> None:
        event = Event.from_strings("CS2103T Tutorial", "2022-12-28", "10:00", "3")
        assert event == tutorial
        assert event.duration_hours == 3.0

    @pytest.mark.parametrize("description", ["", " ", " Tutorial", "Tutorial!", "Lunch_break"])
    def test_rejects_bad_description(self, description: str) -> None:
        with pytest.raises(ValidationError):
            Event(description, date(2022, 12, 28), time(10, 0), 1)

    def test_rejects_bad_duration(self) -> None:
        with pytest.raises(ValidationError):
            Event("Tutorial", date(2022, 12, 28), time(10, 0), 0)
        with pytest.raises(ValidationError):
            Event("Tutorial", date(2022, 12, 28), time(10, 0), -1)

    def test_rejects_wrong_types(self) -> None:
        with pytest.raises(ValidationError):
            Event("Tutorial", "2022-12-28", time(10, 0), 1)
        with pytest.raises(ValidationError):
            Event("Tutorial", datetime(2022, 12, 28, 10), time(10, 0), 1)
        with pytest.raises(ValidationError):
            Event("Tutorial", date(2022, 12, 28), "10:00", 1)

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Event.from_strings("Tutorial", "2022-12-28", "10:00", "-1")

    def test_events_are_immutable(self, tutorial: Event) -> None:
        with pytest.raises(AttributeError):
            tutorial.date = date(2023, 1, 4)

    def test_is_valid_event(self, tutorial: Event) -> None:
        assert Event.is_valid_event(tutorial)
        object.__setattr__(tutorial, "duration_hours", -1.0)
        assert not Event.is_valid_event(tutorial)

    def test_is_valid_event_checks_what_construction_checks(self, tutorial: Event) -> None:
        object.__setattr__(tutorial, "time", time(10, 0, 30))
        assert not Event.is_valid_event(tutorial)
        with pytest.raises(ValidationError):
            Event(tutorial.description, tutorial.date, tutorial.time, tutorial.duration_hours)

    @pytest.mark.parametrize("hours", [2e8, 1e12, MAX_DURATION_HOURS + 1])
    def test_rejects_duration_beyond_a_year(self, hours: float) -> None:
        with pytest.raises(ValidationError):
            Event("Sabbatical", date(2022, 12, 28), time(10, 0), hours)
        with pytest.raises(ValidationError):
            Event.from_strings("Sabbatical", "2022-12-28", "10:00", str(hours))

    def test_longest_duration_accepted(self) -> None:
        event = Event("Sabbatical", date(2022, 12, 28), time(10, 0), MAX_DURATION_HOURS)
        assert event.duration == timedelta(weeks=52)

    def test_fields_follow_textual_order(self) -> None:
        event = Event("CS2103T Tutorial", date(2022, 12, 28), time(10, 0), 3)
        assert event == Event.from_strings("CS2103T Tutorial", "2022-12-28", "10:00", "3")
        assert event.description == "CS2103T Tutorial"


class TestRecurrence:
    """Tests for weekly collision and projection."""

    def test_collides_on_stored_date_and_whole_weeks_after(self, tutorial: Event) -> None:
        assert tutorial.will_date_collide(date(2022, 12, 28))
        assert tutorial.will_date_collide(date(2023, 1, 4))
        assert tutorial.will_date_collide(date(2023, 3, 1))

    def test_does_not_collide_before_first_date_or_off_week(self, tutorial: Event) -> None:
        assert not tutorial.will_date_collide(date(2022, 12, 21))
        assert not tutorial.will_date_collide(date(2022, 12, 29))
        assert not tutorial.will_date_collide(date(2023, 1, 3))

    def test_collision_implies_whole_weeks(self, tutorial: Event) -> None:
        for offset in range(60):
            candidate = tutorial.date + timedelta(days=offset)
            if tutorial.will_date_collide(candidate):
                assert (candidate - tutorial.date).days % 7 == 0

    def test_next_occurrence_moves_forward(self, tutorial: Event) -> None:
        projected = tutorial.get_next_recurring_event(today=date(2023, 1, 2))
        assert projected.date == date(2023, 1, 4)
        assert projected.time == tutorial.time
        assert projected.description == tutorial.description
        assert projected.duration_hours == tutorial.duration_hours
        assert tutorial.date == date(2022, 12, 28)

    def test_next_occurrence_today_keeps_date(self, tutorial: Event) -> None:
        assert tutorial.get_next_recurring_event(today=date(2023, 1, 4)).date == date(2023, 1, 4)
        assert tutorial.get_next_recurring_event(today=date(2022, 12, 28)) == tutorial

    def test_future_event_is_not_moved(self, tutorial: Event) -> None:
        assert tutorial.get_next_recurring_event(today=date(2022, 12, 1)) == tutorial

    def test_no_next_occurrence_past_last_date(self) -> None:
        event = Event("Year End", date(9999, 12, 26), time(10, 0), 1)
        with pytest.raises(ValidationError):
            event.get_next_recurring_event(today=date(9999, 12, 31))

    def test_occurrence_span(self, gym: Event) -> None:
        start, end = gym.occurrence_span(date(2023, 1, 2))
        assert start == datetime(2023, 1, 2, 18, 0)
        assert end == datetime(2023, 1, 2, 19, 30)


class TestEventOrdering:
    """Tests for chronological ordering of events."""

    def test_same_day_sorts_by_time_then_description(self) -> None:
        day = date(2023, 1, 4)
        late = Event("Alpha", day, time(15, 0), 1)
        early_b = Event("Beta", day, time(9, 0), 1)
        early_a = Event("Alpha", day, time(9, 0), 2)
        assert sorted([late, early_b, early_a]) == [early_a, early_b, late]

    def test_earlier_date_sorts_first(self) -> None:
        monday = Event("Late", date(2023, 1, 2), time(23, 0), 1)
        tuesday = Event("Early", date(2023, 1, 3), time(1, 0), 1)
        assert sorted([tuesday, monday]) == [monday, tuesday]


class TestEventFormat:
    """Tests for textual renderings of an event."""

    def test_daily_schedule_format(self, tutorial: Event, gym: Event, lunch: Event) -> None:
        assert tutorial.get_daily_schedule_format() == "CS2103T Tutorial at 10:00 for 3 hours"
        assert gym.get_daily_schedule_format() == "Gym at 18:00 for 1.5 hours"
        assert lunch.get_daily_schedule_format() == "Lunch with Sam at 12:00 for 1 hour"

    def test_str_includes_date(self, tutorial: Event) -> None:
        assert str(tutorial) == "CS2103T Tutorial on 2022-12-28 at 10:00 for 3 hours"


class TestSchedule:
    """Tests for Schedule storage, equality and rendering."""

    def test_empty_schedule(self) -> None:
        assert EMPTY_SCHEDULE.is_empty()
        assert len(EMPTY_SCHEDULE) == 0
        assert EMPTY_SCHEDULE.get_daily_schedule_format() == ""
        assert Schedule() == EMPTY_SCHEDULE

    def test_add_event_returns_new_schedule(self, tutorial: Event) -> None:
        updated = EMPTY_SCHEDULE.add_event(tutorial)
        assert EMPTY_SCHEDULE.is_empty()
        assert updated.get_events() == [tutorial]

    def test_add_event_appends_and_keeps_duplicates(self, tutorial: Event, gym: Event) -> None:
        schedule = Schedule((tutorial,)).add_event(gym).add_event(tutorial)
        assert schedule.get_events() == [tutorial, gym, tutorial]
        assert schedule.get_event(1) == gym

    def test_equality_is_order_sensitive(self, tutorial: Event, gym: Event) -> None:
        assert Schedule((tutorial, gym)) == Schedule([tutorial, gym])
        assert Schedule((tutorial, gym)) != Schedule((gym, tutorial))

    def test_rejects_non_events(self) -> None:
        with pytest.raises(ValidationError):
            Schedule(("CS2103T Tutorial",))

    def test_is_valid_schedule(self, tutorial: Event, gym: Event) -> None:
        schedule = Schedule((tutorial, gym))
        assert Schedule.is_valid_schedule(schedule)
        assert Schedule.is_valid_schedule(EMPTY_SCHEDULE)
        object.__setattr__(gym, "description", "Gym!")
        assert not Schedule.is_valid_schedule(schedule)

    def test_daily_schedule_format(self, tutorial: Event, gym: Event) -> None:
        schedule = Schedule((tutorial, gym))
        assert schedule.get_daily_schedule_format() == (
            "1. CS2103T Tutorial at 10:00 for 3 hours\n"
            "2. Gym at 18:00 for 1.5 hours\n"
        )

    def test_str(self, tutorial: Event) -> None:
        assert str(Schedule((tutorial,))) == "1. CS2103T Tutorial on 2022-12-28 at 10:00 for 3 hours\n"


class TestUpcomingSchedule:
    """Tests for projecting a schedule onto a lookahead window."""

    def test_today_includes_only_later_events(self, tutorial: Event, gym: Event, lunch: Event) -> None:
        schedule = Schedule((gym, lunch, tutorial))
        upcoming = schedule.get_upcoming_schedule(0, now=datetime(2023, 1, 4, 9, 0))
        assert upcoming.get_events() == [tutorial.get_next_recurring_event(date(2023, 1, 4))]
        assert upcoming.get_event(0).date == date(2023, 1, 4)

    def test_today_excludes_event_starting_now_or_earlier(self, tutorial: Event) -> None:
        schedule = Schedule((tutorial,))
        assert schedule.get_upcoming_schedule(0, now=datetime(2023, 1, 4, 10, 0)).is_empty()
        assert schedule.get_upcoming_schedule(0, now=datetime(2023, 1, 4, 10, 1)).is_empty()
        assert not schedule.get_upcoming_schedule(0, now=datetime(2023, 1, 4, 9, 59)).is_empty()

    def test_window_ignores_time_of_day(self, tutorial: Event, gym: Event, lunch: Event) -> None:
        schedule = Schedule((gym, lunch, tutorial))
        upcoming = schedule.get_upcoming_schedule(2, now=datetime(2023, 1, 4, 23, 0))
        assert [event.description for event in upcoming] == ["CS2103T Tutorial", "Lunch with Sam"]
        assert [event.date for event in upcoming] == [date(2023, 1, 4), date(2023, 1, 6)]

    def test_week_window_is_sorted(self, tutorial: Event, gym: Event, lunch: Event) -> None:
        schedule = Schedule((gym, lunch, tutorial))
        upcoming = schedule.get_upcoming_schedule(7, now=datetime(2023, 1, 4, 12, 0))
        assert [event.date for event in upcoming] == [
            date(2023, 1, 4),
            date(2023, 1, 6),
            date(2023, 1, 9),
        ]

    def test_projected_dates_stay_in_window(self, tutorial: Event, gym: Event, lunch: Event) -> None:
        schedule = Schedule((gym, lunch, tutorial))
        now = datetime(2023, 1, 5, 8, 0)
        for days in range(10):
            for event in schedule.get_upcoming_schedule(days, now=now):
                assert now.date() <= event.date <= now.date() + timedelta(days=days)

    def test_future_first_date_outside_window(self) -> None:
        event = Event("Kickoff", date(2023, 2, 1), time(10, 0), 1)
        schedule = Schedule((event,))
        assert schedule.get_upcoming_schedule(7, now=datetime(2023, 1, 4, 8, 0)).is_empty()
        assert schedule.get_upcoming_schedule(28, now=datetime(2023, 1, 4, 8, 0)).get_events() == [event]

    def test_projection_does_not_mutate(self, tutorial: Event, gym: Event) -> None:
        schedule = Schedule((gym, tutorial))
        schedule.get_upcoming_schedule(7, now=datetime(2023, 1, 4, 8, 0))
        assert schedule.get_events() == [gym, tutorial]

    def test_negative_window_rejected(self, tutorial: Event) -> None:
        with pytest.raises(ValueError):
            Schedule((tutorial,)).get_upcoming_schedule(-1, now=datetime(2023, 1, 4))

    def test_window_past_last_date_rejected(self, tutorial: Event) -> None:
        schedule = Schedule((tutorial,))
        with pytest.raises(ValueError, match="runs past"):
            schedule.get_upcoming_schedule(10**7, now=datetime(2023, 1, 4))
        # 9999-12-31 is a Friday, so the next Wednesday does not exist
        assert schedule.get_upcoming_schedule(1, now=datetime(9999, 12, 30)).is_empty()
        last_week = schedule.get_upcoming_schedule(2, now=datetime(9999, 12, 29))
        assert last_week.get_events()[0].date == date(9999, 12, 29)

"""Shared fixtures for the scheduling tests."""

from datetime import date, time

import pytest

from addressbook import AddressBook, Person
from scheduling import Event, Schedule


@pytest.fixture
def tutorial() -> Event:
    """Wednesday 10:00-13:00, first held on 2022-12-28."""
    return Event("CS2103T Tutorial", date(2022, 12, 28), time(10, 0), 3)


@pytest.fixture
def gym() -> Event:
    """Monday 18:00-19:30, first held on 2022-12-26."""
    return Event("Gym", date(2022, 12, 26), time(18, 0), 1.5)


@pytest.fixture
def lunch() -> Event:
    """Friday 12:00-13:00, first held on 2022-12-30."""
    return Event("Lunch with Sam", date(2022, 12, 30), time(12, 0), 1)


@pytest.fixture
def book(tutorial: Event, lunch: Event) -> AddressBook:
    return AddressBook([
        Person("Alice Pauline", phone="94351253", schedule=Schedule((tutorial,))),
        Person("Benson Meier", phone="98765432", schedule=Schedule((lunch,))),
        Person("Carl Kurz", phone="95352563"),
    ])

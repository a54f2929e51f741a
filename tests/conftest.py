import pytest

from courses import Shift, Subject
from timeslots import ClockTime, TimeInterval, Weekday


def make_shift(name, day, start, end):
    """make_shift("T1", Weekday.MONDAY, (9, 0), (11, 0))"""
    return Shift(name, day, TimeInterval(ClockTime(*start), ClockTime(*end)))


@pytest.fixture
def shift():
    return make_shift


@pytest.fixture
def two_day_subjects():
    return [
        Subject("Math", [make_shift("A", Weekday.MONDAY, (9, 0), (11, 0))]),
        Subject("Physics", [make_shift("B", Weekday.TUESDAY, (9, 0), (11, 0))]),
    ]

import pytest

from loader import (MalformedDurationToken, MalformedShiftToken, MalformedTime, MalformedWeekday,
                    ScheduleError, SourceUnparseable, SourceUnreadable, load_schedule,
                    load_schedule_text, parse_clock, parse_interval, parse_shift, parse_weekday,
                    suggest_weekday)
from timeslots import ClockTime, TimeInterval, Weekday

SCHEDULE = """
[[Algebra]]
T1 = "Monday 9->11"
T2 = "Tuesday 9:30->11:30"

[[Algebra]]
P1 = "Friday 14->16"

[[History]]
T1 = "Wednesday 8->10:45"
"""


def test_parse_clock():
    assert parse_clock("9") == ClockTime(9, 0)
    assert parse_clock("14:05") == ClockTime(14, 5)


@pytest.mark.parametrize("text", ["", "nine", "9:", ":30", "9:30:00", "-1", "9.30"])
def test_parse_clock_rejects(text):
    with pytest.raises(MalformedTime):
        parse_clock(text)


def test_out_of_range_clock_is_not_validated():
    assert parse_clock("25:99") == ClockTime(25, 99)


def test_parse_interval():
    assert parse_interval("9->11:30") == TimeInterval(ClockTime(9), ClockTime(11, 30))


@pytest.mark.parametrize("text", ["9-11", "9->10->11", "9"])
def test_parse_interval_rejects(text):
    with pytest.raises(MalformedDurationToken):
        parse_interval(text)


def test_parse_weekday():
    assert parse_weekday("Thursday") is Weekday.THURSDAY
    with pytest.raises(MalformedWeekday):
        parse_weekday("Saturday")


def test_weekday_error_suggests_closest_day():
    with pytest.raises(MalformedWeekday) as exc:
        parse_weekday("Tuesdy", subject="Algebra", shift="T2")
    assert exc.value.suggestion == "Tuesday"
    assert "did you mean 'Tuesday'" in str(exc.value)
    assert "subject 'Algebra'" in str(exc.value)
    assert "shift 'T2'" in str(exc.value)


def test_suggest_weekday_gives_up_on_nonsense():
    assert suggest_weekday("xyz") is None


def test_parse_shift():
    shift = parse_shift("Algebra", "T1", "Monday 9->11")
    assert shift.name == "T1"
    assert shift.day is Weekday.MONDAY
    assert shift.duration() == 120


@pytest.mark.parametrize("token", ["Monday", "Monday 9 -> 11", 42])
def test_parse_shift_rejects_bad_structure(token):
    with pytest.raises(MalformedShiftToken) as exc:
        parse_shift("Algebra", "T1", token)
    assert exc.value.subject == "Algebra"
    assert exc.value.shift == "T1"


def test_load_schedule_text_keeps_document_order():
    subjects = load_schedule_text(SCHEDULE)
    assert [s.name for s in subjects] == ["Algebra", "Algebra", "History"]
    assert [sh.name for sh in subjects[0].shifts] == ["T1", "T2"]
    assert subjects[1].shifts[0].day is Weekday.FRIDAY
    assert subjects[2].shifts[0].interval.end == ClockTime(10, 45)


def test_first_bad_record_fails_whole_load():
    text = SCHEDULE + '\n[[Music]]\nT1 = "Monday 9->11"\nT2 = "Sunday 9->11"\n'
    with pytest.raises(MalformedWeekday) as exc:
        load_schedule_text(text)
    assert exc.value.subject == "Music"
    assert exc.value.shift == "T2"


def test_invalid_toml():
    with pytest.raises(SourceUnparseable):
        load_schedule_text("[[Algebra]\nT1 = ")


@pytest.mark.parametrize("text", ['Algebra = "Monday 9->11"', "Algebra = [1, 2]"])
def test_wrong_layout(text):
    with pytest.raises(SourceUnparseable):
        load_schedule_text(text)


def test_load_schedule_from_file(tmp_path):
    path = tmp_path / "schedule.toml"
    path.write_text(SCHEDULE, encoding="utf-8")
    assert len(load_schedule(path)) == 3


def test_missing_file(tmp_path):
    with pytest.raises(SourceUnreadable):
        load_schedule(tmp_path / "nope.toml")


def test_errors_share_a_base():
    for cls in (SourceUnreadable, SourceUnparseable, MalformedShiftToken, MalformedWeekday,
                MalformedTime, MalformedDurationToken):
        assert issubclass(cls, ScheduleError)


def test_bundled_example_schedule_loads():
    from pathlib import Path
    subjects = load_schedule(Path(__file__).resolve().parents[1] / "schedule.toml")
    assert [s.name for s in subjects][:2] == ["Software Engineering", "Software Engineering"]
    assert all(s.shifts for s in subjects)

import logging
import re
import tomllib
from pathlib import Path
from typing import Any, List, Optional, Union

from rapidfuzz import process

from courses import Shift, Subject
from timeslots import WEEKDAYS, ClockTime, TimeInterval, Weekday

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"(\d+)(?::(\d+))?")
WEEKDAY_NAMES = [day.value for day in WEEKDAYS]


# ==============================
# ---------- ERRORS ------------
# ==============================
class ScheduleError(Exception):
    """A schedule description could not be turned into subjects."""

    def __init__(self, message: str, subject: Optional[str] = None, shift: Optional[str] = None):
        self.message = message
        self.subject = subject
        self.shift = shift
        super().__init__(str(self))

    def __str__(self) -> str:
        where = []
        if self.subject is not None:
            where.append(f"subject {self.subject!r}")
        if self.shift is not None:
            where.append(f"shift {self.shift!r}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class SourceUnreadable(ScheduleError):
    pass


class SourceUnparseable(ScheduleError):
    pass


class MalformedShiftToken(ScheduleError):
    pass


class MalformedWeekday(ScheduleError):
    def __init__(self, text: str, subject: Optional[str] = None, shift: Optional[str] = None):
        self.text = text
        self.suggestion = suggest_weekday(text)
        message = f"Invalid day {text!r}"
        if self.suggestion:
            message += f", did you mean {self.suggestion!r}?"
        super().__init__(message, subject, shift)


class MalformedTime(ScheduleError):
    pass


class MalformedDurationToken(ScheduleError):
    pass


# ------------------------------
# Token parsers: "Monday 9:30->11"
def suggest_weekday(text: str, cutoff: int = 60) -> Optional[str]:
    found = process.extractOne(text, WEEKDAY_NAMES, score_cutoff=cutoff)
    if found is None:
        return None
    match, score, _ = found
    return match


def parse_weekday(text: str, subject: Optional[str] = None, shift: Optional[str] = None) -> Weekday:
    for day in WEEKDAYS:
        if day.value == text:
            return day
    raise MalformedWeekday(text, subject, shift)


def parse_clock(text: str, subject: Optional[str] = None, shift: Optional[str] = None) -> ClockTime:
    # "9" means 9:00; hours and minutes are not range-checked
    m = TIME_RE.fullmatch(text)
    if not m:
        raise MalformedTime(f"Invalid time {text!r}, expected H or H:MM", subject, shift)
    hour, minute = m.group(1), m.group(2)
    return ClockTime(int(hour), int(minute) if minute is not None else 0)


def parse_interval(text: str, subject: Optional[str] = None, shift: Optional[str] = None) -> TimeInterval:
    parts = text.split("->")
    if len(parts) != 2:
        raise MalformedDurationToken(
            f"Invalid duration {text!r}, expected <start>-><end>", subject, shift
        )
    start, end = parts
    return TimeInterval(parse_clock(start, subject, shift), parse_clock(end, subject, shift))


def parse_shift(subject: str, shift_name: str, token: Any) -> Shift:
    if not isinstance(token, str):
        raise MalformedShiftToken(
            f"Invalid shift data {token!r}, expected a string", subject, shift_name
        )
    parts = token.split()
    if len(parts) != 2:
        raise MalformedShiftToken(
            f"Invalid shift data format {token!r}. Expected: <day> <start>-><end>",
            subject, shift_name,
        )
    day, span = parts
    return Shift(
        name=shift_name,
        day=parse_weekday(day, subject, shift_name),
        interval=parse_interval(span, subject, shift_name),
    )


# ------------------------------
# Whole schedule documents
def build_subjects(data: Any) -> List[Subject]:
    """
    Turn the decoded document into subjects.

    Layout:
        [[Algebra]]            # one table per subject-requirement
        T1 = "Monday 9->11"
        T2 = "Tuesday 9:30->11:30"
    Order is document order. The first bad record aborts the whole load.
    """
    if not isinstance(data, dict):
        raise SourceUnparseable("Schedule must be a table of subjects")

    subjects = []
    for subject_name, requirements in data.items():
        if not isinstance(requirements, list):
            raise SourceUnparseable(
                "Each subject must be an array of tables ([[subject]])", subject_name
            )
        for requirement in requirements:
            if not isinstance(requirement, dict):
                raise SourceUnparseable(
                    "Each subject entry must be a table of shifts", subject_name
                )
            shifts = [
                parse_shift(subject_name, shift_name, token)
                for shift_name, token in requirement.items()
            ]
            subjects.append(Subject(subject_name, shifts))
            logger.debug("Loaded %s with %d shifts", subject_name, len(shifts))
    return subjects


def load_schedule_text(text: str, source: str = "<string>") -> List[Subject]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise SourceUnparseable(f"Invalid TOML in {source}: {e}") from e
    return build_subjects(data)


def load_schedule(path: Union[str, Path]) -> List[Subject]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(f"Cannot read schedule file {str(path)!r}: {e}") from e
    subjects = load_schedule_text(text, str(path))
    logger.info("Loaded %d subjects from %s", len(subjects), path)
    return subjects

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Tuple


class Weekday(Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"

    def __str__(self) -> str:
        return self.value


# fixed display / iteration order
WEEKDAYS: Tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)


@total_ordering
@dataclass(frozen=True)
class ClockTime:
    hour: int
    minute: int = 0

    def to_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __lt__(self, other: "ClockTime") -> bool:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return self.to_minutes() < other.to_minutes()

    def __str__(self) -> str:
        return format_clock(self)


@dataclass(frozen=True)
class TimeInterval:
    """Half-open [start, end) span of one day. Nothing is validated here."""
    start: ClockTime
    end: ClockTime

    def duration(self) -> int:
        return self.end.to_minutes() - self.start.to_minutes()

    def overlaps(self, other: "TimeInterval") -> bool:
        return (self.start.to_minutes() < other.end.to_minutes()
                and self.end.to_minutes() > other.start.to_minutes())

    def merge(self, other: "TimeInterval") -> "TimeInterval":
        # bounding span, a gap between the two is swallowed
        start = min(self.start, other.start, key=ClockTime.to_minutes)
        end = max(self.end, other.end, key=ClockTime.to_minutes)
        return TimeInterval(start, end)

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"


# ------------------------------
# Function forms, handy for map/reduce style callers
def to_minutes(time: ClockTime) -> int:
    return time.to_minutes()


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.overlaps(b)


def merge(a: TimeInterval, b: TimeInterval) -> TimeInterval:
    return a.merge(b)


def duration(interval: TimeInterval) -> int:
    return interval.duration()


def format_clock(time: ClockTime) -> str:
    return f"{time.hour:02d}:{time.minute:02d}"


def minutes_to_hours(minutes: int) -> int:
    # truncate toward zero, 90 min -> 1 h, -90 min -> -1 h
    if minutes < 0:
        return -(-minutes // 60)
    return minutes // 60

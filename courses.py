from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from timeslots import TimeInterval, Weekday


@dataclass(frozen=True)
class Shift:
    name: str
    day: Weekday
    interval: TimeInterval

    def is_overlapping(self, other: "Shift") -> bool:
        if self.day != other.day:
            return False
        return self.interval.overlaps(other.interval)

    def duration(self) -> int:
        return self.interval.duration()

    def __str__(self) -> str:
        return f"{self.name} ({self.day} {self.interval})"


@dataclass(frozen=True)
class Subject:
    """
    One subject-requirement: the student must pick exactly one of `shifts`.
    A course with a lecture and a lab is two Subjects with the same name.
    """
    name: str
    shifts: Sequence[Shift] = ()

    def __post_init__(self):
        # lists are accepted from callers, stored as a tuple
        object.__setattr__(self, "shifts", tuple(self.shifts))

    def choices(self) -> Iterator[Tuple["Subject", Shift]]:
        for shift in self.shifts:
            yield self, shift

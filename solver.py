import logging
from dataclasses import dataclass
from functools import reduce
from itertools import product
from typing import Iterator, List, Optional, Sequence, Tuple

from courses import Shift, Subject
from timeslots import WEEKDAYS, TimeInterval, Weekday, minutes_to_hours

logger = logging.getLogger(__name__)

Choice = Tuple[Subject, Shift]


@dataclass(frozen=True)
class ChosenTimetable:
    """
    One shift picked for every subject, in subject order.

    Only references the Subject/Shift objects it was built from; it never
    copies or changes them.
    """
    choices: Tuple[Choice, ...]

    def shifts(self) -> List[Shift]:
        return [shift for _, shift in self.choices]

    # ------------------------------
    # Clash detection
    def has_conflict(self) -> bool:
        # pairs by position, so two equal shifts taken by two subjects still clash
        shifts = self.shifts()
        for i in range(len(shifts)):
            for j in range(i + 1, len(shifts)):
                if shifts[i].is_overlapping(shifts[j]):
                    return True
        return False

    def is_valid(self) -> bool:
        return not self.has_conflict()

    # ------------------------------
    # Analytics
    def duration_at_day(self, day: Weekday) -> Optional[TimeInterval]:
        intervals = [shift.interval for shift in self.shifts() if shift.day == day]
        if not intervals:
            return None
        return reduce(TimeInterval.merge, intervals)

    def has_classes_at_day(self, day: Weekday) -> bool:
        return self.duration_at_day(day) is not None

    def total_duration(self) -> int:
        total = 0
        for day in WEEKDAYS:
            span = self.duration_at_day(day)
            if span is not None:
                total += span.duration()
        return total

    def minutes_in_classes(self) -> int:
        return sum(shift.duration() for shift in self.shifts())

    def wait_time(self) -> int:
        """Minutes inside each day's span that no chosen shift covers."""
        return self.total_duration() - self.minutes_in_classes()

    def count_days_with_classes(self) -> int:
        return sum(1 for day in WEEKDAYS if self.has_classes_at_day(day))

    def hours_at_day(self, day: Weekday) -> int:
        span = self.duration_at_day(day)
        if span is None:
            return 0
        return minutes_to_hours(span.duration())

    def label(self) -> str:
        return ", ".join(f"{subject.name} {shift.name}" for subject, shift in self.choices)

    def __str__(self) -> str:
        return self.label()


# ------------------------------
# Cartesian product: choose exactly 1 shift for each subject
def generate_candidates(subjects: Sequence[Subject]) -> Iterator[ChosenTimetable]:
    if not subjects:
        return
    for combo in product(*(subject.choices() for subject in subjects)):
        yield ChosenTimetable(combo)


def count_candidates(subjects: Sequence[Subject]) -> int:
    if not subjects:
        return 0
    return reduce(lambda acc, subject: acc * len(subject.shifts), subjects, 1)


def valid_timetables(subjects: Sequence[Subject]) -> Iterator[ChosenTimetable]:
    for candidate in generate_candidates(subjects):
        if candidate.is_valid():
            yield candidate


def solve(subjects: Sequence[Subject]) -> List[ChosenTimetable]:
    """
    Build every clash-free timetable.

    Candidates are produced lazily and filtered one at a time; only the
    clash-free ones are kept in memory.
    """
    logger.info(
        "Checking %d candidate timetables for %d subjects",
        count_candidates(subjects), len(subjects),
    )
    valid = list(valid_timetables(subjects))
    logger.info("Found %d clash-free timetables", len(valid))
    return valid

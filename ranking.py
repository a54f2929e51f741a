from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from solver import ChosenTimetable
from timeslots import WEEKDAYS, minutes_to_hours

T = TypeVar("T")

MAX_DAYS = len(WEEKDAYS)


@dataclass(frozen=True)
class RankedTimetable:
    rank: int
    label: str
    total_hours: int
    hours_per_day: Tuple[int, ...]
    wait_hours: Optional[int]
    timetable: ChosenTimetable = field(compare=False, repr=False)


@dataclass(frozen=True)
class DayBucket:
    days: int
    entries: Tuple[RankedTimetable, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class RankingReport:
    total_valid: int
    buckets: Tuple[DayBucket, ...]

    def bucket(self, days: int) -> DayBucket:
        return self.buckets[days - 1]


def min_set(items: Iterable[T], key: Callable[[T], int]) -> List[T]:
    """All items tied for the lowest key, in input order."""
    best: List[T] = []
    best_key = None
    for item in items:
        k = key(item)
        if best_key is None or k < best_key:
            best, best_key = [item], k
        elif k == best_key:
            best.append(item)
    return best


def to_ranked(rank: int, timetable: ChosenTimetable, with_wait_time: bool = False) -> RankedTimetable:
    return RankedTimetable(
        rank=rank,
        label=timetable.label(),
        total_hours=minutes_to_hours(timetable.total_duration()),
        hours_per_day=tuple(timetable.hours_at_day(day) for day in WEEKDAYS),
        wait_hours=minutes_to_hours(timetable.wait_time()) if with_wait_time else None,
        timetable=timetable,
    )


def best_for_days(timetables: Sequence[ChosenTimetable], days: int) -> List[ChosenTimetable]:
    with_days = (t for t in timetables if t.count_days_with_classes() == days)
    return min_set(with_days, key=ChosenTimetable.total_duration)


def rank_timetables(timetables: Sequence[ChosenTimetable], with_wait_time: bool = False) -> RankingReport:
    buckets = []
    for days in range(1, MAX_DAYS + 1):
        best = best_for_days(timetables, days)
        entries = tuple(
            to_ranked(rank, timetable, with_wait_time)
            for rank, timetable in enumerate(best, start=1)
        )
        buckets.append(DayBucket(days, entries))
    return RankingReport(total_valid=len(timetables), buckets=tuple(buckets))

from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Union

import pandas as pd
import plotly.express as px

from ranking import RankingReport
from solver import ChosenTimetable
from timeslots import WEEKDAYS, ClockTime, format_clock

DAY_NAMES = [day.value for day in WEEKDAYS]


# ------------------------------
# Console lines
def format_entry(entry) -> str:
    hours = "+".join(str(h) for h in entry.hours_per_day)
    line = f'{entry.rank}. "{entry.label}" - {entry.total_hours} hours ({hours})'
    if entry.wait_hours is not None:
        line += f", waiting {entry.wait_hours} hours"
    return line


def format_report(report: RankingReport) -> List[str]:
    lines = [f"Total possible timetables: {report.total_valid}"]
    for bucket in report.buckets:
        lines.append("")
        lines.append(f"Best timetables with {bucket.days} days with classes:")
        lines.extend(format_entry(entry) for entry in bucket.entries)
    return lines


# ------------------------------
# Tables
def report_to_frame(report: RankingReport) -> pd.DataFrame:
    rows = []
    for bucket in report.buckets:
        for entry in bucket.entries:
            row = dict(
                days=bucket.days,
                rank=entry.rank,
                label=entry.label,
                total_hours=entry.total_hours,
            )
            row.update(zip(DAY_NAMES, entry.hours_per_day))
            row["wait_hours"] = entry.wait_hours
            rows.append(row)
    columns = ["days", "rank", "label", "total_hours", *DAY_NAMES, "wait_hours"]
    return pd.DataFrame(rows, columns=columns)


def timetable_to_frame(timetable: ChosenTimetable) -> pd.DataFrame:
    ordered = sorted(
        timetable.choices,
        key=lambda c: (WEEKDAYS.index(c[1].day), c[1].interval.start.to_minutes()),
    )
    rows = [
        dict(
            subject=subject.name,
            shift=shift.name,
            day=shift.day.value,
            start=format_clock(shift.interval.start),
            end=format_clock(shift.interval.end),
            minutes=shift.duration(),
        )
        for subject, shift in ordered
    ]
    return pd.DataFrame(rows, columns=["subject", "shift", "day", "start", "end", "minutes"])


# ------------------------------
# Weekly chart
def _to_dt(t: ClockTime) -> datetime:
    # Anchor times to a dummy date so we can plot just times of day
    return datetime(2025, 1, 1) + timedelta(minutes=t.to_minutes())


def timeline_figure(timetable: ChosenTimetable, title: str = ""):
    df = pd.DataFrame([
        dict(
            subject=subject.name,
            shift=shift.name,
            day=shift.day.value,
            start_dt=_to_dt(shift.interval.start),
            end_dt=_to_dt(shift.interval.end),
        )
        for subject, shift in timetable.choices
    ])
    fig = px.timeline(
        df,
        x_start="start_dt",
        x_end="end_dt",
        y="day",
        color="subject",
        text="shift",
        hover_data=["subject", "shift"],
        title=title,
    )
    fig.update_yaxes(categoryorder="array", categoryarray=DAY_NAMES[::-1])
    fig.update_xaxes(tickformat="%H:%M", dtick=3600000)
    fig.update_layout(height=400, margin={"l": 0, "r": 0, "t": 40, "b": 0})
    return fig


def write_timeline_html(report: RankingReport, path: Union[str, Path]) -> int:
    """Write the top timetable of every non-empty bucket to one HTML page."""
    parts = []
    for bucket in report.buckets:
        if not bucket.entries:
            continue
        best = bucket.entries[0]
        title = f"{bucket.days} days - {best.total_hours} hours: {best.label}"
        fig = timeline_figure(best.timetable, title)
        parts.append(fig.to_html(full_html=False, include_plotlyjs="cdn" if not parts else False))

    html = "<html><head><meta charset='utf-8'></head><body>" + "\n".join(parts) + "</body></html>"
    Path(path).write_text(html, encoding="utf-8")
    return len(parts)


def write_csv(report: RankingReport, path: Union[str, Path]) -> None:
    report_to_frame(report).to_csv(path, index=False)

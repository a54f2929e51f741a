"""Command-line entry point: load a schedule, find and print the best timetables."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from loader import ScheduleError, load_schedule
from ranking import RankingReport, rank_timetables
from report import format_report, write_csv, write_timeline_html
from solver import solve

# ==============================
# --------- CONFIG -------------
# ==============================
DEFAULT_SCHEDULE_FILE = "schedule.toml"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def run(schedule_path: str, with_wait_time: bool = False) -> RankingReport:
    subjects = load_schedule(schedule_path)

    before = time.perf_counter()
    timetables = solve(subjects)
    report = rank_timetables(timetables, with_wait_time=with_wait_time)
    elapsed = time.perf_counter() - before

    for line in format_report(report):
        print(line)
    print(f"Elapsed time: {elapsed:.2f}s")
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pick one shift per subject and list the shortest clash-free weeks"
    )
    parser.add_argument("schedule", nargs="?", default=DEFAULT_SCHEDULE_FILE,
                        help=f"TOML schedule file (default: {DEFAULT_SCHEDULE_FILE})")
    parser.add_argument("--wait-time", action="store_true",
                        help="also report hours spent waiting between classes")
    parser.add_argument("--csv", metavar="PATH", help="write the ranked timetables as CSV")
    parser.add_argument("--html", metavar="PATH", help="write a weekly chart of each best timetable")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        report = run(args.schedule, with_wait_time=args.wait_time)
    except ScheduleError as e:
        print(f"Error parsing schedule file: {e}", file=sys.stderr)
        return 1

    if args.csv:
        write_csv(report, args.csv)
        logger.info("Wrote %s", args.csv)
    if args.html:
        charts = write_timeline_html(report, args.html)
        logger.info("Wrote %d charts to %s", charts, args.html)
    return 0


if __name__ == "__main__":
    sys.exit(main())

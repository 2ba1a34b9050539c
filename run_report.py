#!/usr/bin/env python3
"""
Lesson progress report.

Loads the CSV snapshot and prints planned vs. actual progress.

Usage:
    python run_report.py [--start YYYY-MM-DD] [--end YYYY-MM-DD] [--unit week]
                         [--student S001 --month 2024-04] [--save]

Examples:
    # Current month so far, weekly timeline
    python run_report.py

    # April 2024 with a daily timeline
    python run_report.py --start 2024-04-01 --end 2024-04-30 --unit day

    # Add the calendar roll-up of one student and save a JSON report
    python run_report.py --student S001 --month 2024-04 --save
"""

import sys
import argparse
from datetime import date, datetime

from lesson_progress.dashboard import Dashboard
from lesson_progress.loader import load_record_store
from lesson_progress.progress.dates import default_period, resolve_period
from lesson_progress.utils.config import config
from lesson_progress.utils.file_utils import generate_filename, save_json
from lesson_progress.utils.formatting import format_percent, format_sessions
from lesson_progress.utils.logger import setup_logger


def parse_arguments():
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Report planned vs. actual lesson progress",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--data-dir",
        default=str(config.data_dir),
        help=f"Directory containing the CSV files (default: {config.data_dir})"
    )

    parser.add_argument("--start", help="Period start, YYYY-MM-DD (default: first day of this month)")
    parser.add_argument("--end", help="Period end, YYYY-MM-DD (default: today)")

    parser.add_argument(
        "--unit",
        choices=["day", "week", "month"],
        default=config.timeline_unit,
        help=f"Timeline bucket (default: {config.timeline_unit})"
    )

    parser.add_argument("--student", help="Student id for the calendar roll-up")
    parser.add_argument("--month", help="Calendar month in YYYY-MM format (default: current month)")

    parser.add_argument(
        "--save",
        action="store_true",
        help="Save a JSON report to the output directory"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})"
    )

    return parser.parse_args()


def parse_target_month(month_str: str) -> tuple:
    """
    Parse month string to (year, month).

    Raises:
        ValueError: If format is invalid
    """
    try:
        parsed = datetime.strptime(month_str, "%Y-%m")
    except ValueError as e:
        raise ValueError(f"Invalid month format '{month_str}': {e}")
    return parsed.year, parsed.month


def print_section(title: str):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def main():
    """Main execution function."""
    args = parse_arguments()

    logger = setup_logger(
        "lesson_progress",
        level=args.log_level,
        log_file=config.log_file
    )

    try:
        config.validate()

        if args.start or args.end:
            period = resolve_period(args.start or args.end, args.end or args.start)
            if period.is_failure:
                print(f"ERROR: {period.message}")
                return 1
            start, end = period.value
        else:
            start, end = default_period()
        logger.info(f"Analysis period: {start} - {end}")

        store = load_record_store(args.data_dir)
        dashboard = Dashboard(store)

        summary = dashboard.summary()
        print_section("DASHBOARD")
        print(f"Active students:          {summary.active_students}")
        print(f"Sessions this month:      {format_sessions(summary.month_actual)}")
        print(f"Average achievement:      {format_percent(summary.average_achievement)}")

        students = dashboard.student_achievement(start, end)
        print_section(f"STUDENTS ({start} - {end})")
        if not students:
            print("No data to display.")
        for row in students:
            print(
                f"{row.student.get('student_id', ''):10s} | {row.student.get('grade', ''):6s} | "
                f"planned {format_sessions(row.planned):>6s} | "
                f"actual {format_sessions(row.actual):>6s} | {format_percent(row.rate):>5s}"
            )

        courses = dashboard.course_achievement(start, end)
        print_section(f"COURSES ({start} - {end})")
        if not courses:
            print("No data to display.")
        for row in courses:
            print(
                f"{row.course.get('course_id', ''):10s} | {row.course.get('course_name', ''):20s} | "
                f"{row.student_count:3d} students | planned {format_sessions(row.planned):>6s} | "
                f"actual {format_sessions(row.actual):>6s} | {format_percent(row.rate):>5s}"
            )

        timeline = dashboard.timeline(start, end, args.unit)
        print_section(f"TIMELINE (per {args.unit})")
        if not timeline:
            print("No actual lesson logs in this period.")
        for key, total in timeline:
            print(f"{key:10s} | {total:6.0f}")

        calendar = {}
        if args.student:
            if args.month:
                year, month = parse_target_month(args.month)
            else:
                today = date.today()
                year, month = today.year, today.month
            calendar = dashboard.calendar(args.student, year, month - 1)
            print_section(f"CALENDAR {args.student} {year}-{month:02d}")
            if not calendar:
                print("No lesson logs in this month.")
            for day, totals in sorted(calendar.items()):
                print(f"{day} | planned {totals.planned:4.0f} | actual {totals.actual:4.0f}")

        if args.save:
            config.create_output_directories()
            report = {
                "period": {"start": start.isoformat(), "end": end.isoformat()},
                "summary": summary.to_dict(),
                "students": [row.to_dict() for row in students],
                "courses": [row.to_dict() for row in courses],
                "timeline": {"unit": args.unit, "buckets": timeline},
                "calendar": {
                    day: {"planned": totals.planned, "actual": totals.actual}
                    for day, totals in calendar.items()
                }
            }
            path = config.output_dir / "reports" / generate_filename("progress_report", "json")
            if save_json(report, path):
                print(f"\nReport saved to: {path}")
            else:
                print("\nERROR: Failed to save report")
                return 1

        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        logger.info("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\nERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

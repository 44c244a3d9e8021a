"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in AttendanceAggregator.
Usage: python examples/example_usage.py <rollNumber>
"""

import importlib
import sys

from dotenv import load_dotenv

from school_portal.config import get_settings_module
from school_portal.container import build_container


def main():
    load_dotenv(override=False)
    roll_number = sys.argv[1] if len(sys.argv) > 1 else "R1"

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    summary = container.attendance_service.get_attendance_tracker(roll_number)
    print(f"{roll_number}: {summary.days_present}/{summary.total_days} days ({summary.attendance_percentage}%)")


if __name__ == "__main__":
    main()

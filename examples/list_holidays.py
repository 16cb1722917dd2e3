#!/usr/bin/env python3
"""
Example: List U.S. holidays for a year or build a calendar from a JSON spec.

Usage:
    python examples/list_holidays.py 2026 [--federal] [--verbose]
    python examples/list_holidays.py --spec examples/fiscal_2027.json
"""

import sys
from pathlib import Path
import argparse
import traceback

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from holidaycal.holidays import (
    AnnualHolidayCalendar,
    HolidayCatalog,
    build_calendar,
    load_calendar_spec,
    print_calendar_summary,
)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="List U.S. holidays for a year or a fiscal-year calendar spec"
    )
    parser.add_argument(
        "year",
        type=int,
        nargs="?",
        default=None,
        help="Calendar year to list"
    )
    parser.add_argument(
        "--spec",
        type=str,
        default=None,
        help="Path to JSON calendar spec"
    )
    parser.add_argument(
        "--federal", "-f",
        action="store_true",
        help="Only federal holidays"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args()

    try:
        if args.spec:
            cal = build_calendar(load_calendar_spec(args.spec))
        else:
            if args.year is None:
                parser.error("either a year or --spec is required")
            cal = AnnualHolidayCalendar(args.year)
            if args.federal:
                cal.with_federal_holidays()
            else:
                cal.with_all_holidays()

        print_calendar_summary(cal)

        if args.year is not None and not args.spec:
            missing = [
                name for name in HolidayCatalog.all_names()
                if not cal.holidays_by_name(name)
            ]
            if missing and not args.federal:
                print(f"Not observed in {args.year}: {', '.join(missing)}")

        return 0

    except FileNotFoundError as e:
        print(f"\nERROR: {e}")
        return 1

    except ValueError as e:
        print(f"\nERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

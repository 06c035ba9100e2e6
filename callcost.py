#!/usr/bin/env python3
"""Long-distance call cost calculator.

Interactive console tool that prices a call from the day it began, its
start time and its length in minutes.

Weekdays 8:00-18:59: $0.40/min. Weekdays before 8:00 or after 18:59:
$0.25/min. Saturday and Sunday: $0.15/min.
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from collector import CallInputCollector, CallRecord
from rating import BaseRateCalculator, FlatRateCalculator, format_cost

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

GREETING = "Hello. Let's calculate the cost of your long-distance call."
CONTINUE_PROMPT = "Would you like to calculate another call? (y or n): "


def wants_another(answer: str) -> bool:
    """Interpret the reply to the continue prompt.

    Only the first non-whitespace character counts. Anything other than
    ``n``/``N`` continues the session.
    """
    stripped = answer.strip()
    choice = stripped[0].lower() if stripped else ""

    if choice == "n":
        return False
    if choice != "y":
        print("I'll take that as a yes\n")
    return True


def run_session(
    collector: CallInputCollector,
    calculator: BaseRateCalculator,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """Price calls until the user declines to continue.

    Args:
        collector: Source of call details.
        calculator: Tariff used to price each call.
        read_line: Function used for the continue prompt. Defaults to the
            built-in input().

    Returns:
        Number of calls priced.
    """
    if read_line is None:
        read_line = input

    calls = 0
    running = True

    while running:
        print(GREETING)
        record = collector.collect(CallRecord())

        cost = calculator.cost(record)
        calls += 1
        logger.info(
            "Priced call %d: %s %s, %d min, $%s",
            calls, record.weekday.display_name, record.formatted_time(),
            record.duration_minutes, format_cost(cost)
        )
        print(f"The cost of your call is ${format_cost(cost)}\n\n")

        running = wants_another(read_line(CONTINUE_PROMPT))

    print()
    return calls


def main() -> None:
    """Main entry point for the calculator."""
    parser = argparse.ArgumentParser(
        description="Calculate the cost of a long-distance call.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Rates:
  Mon-Fri, 8:00 to 18:59               $0.40/min
  Mon-Fri, before 8:00 or after 18:59  $0.25/min
  Sat-Sun, any time                    $0.15/min
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic log level, written to stderr (default: WARNING)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        logger.info("Starting call cost session")
        calls = run_session(CallInputCollector(), FlatRateCalculator())
        logger.info("Session finished after %d call(s)", calls)

    except EOFError:
        logger.info("Input closed, ending session")
        print()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

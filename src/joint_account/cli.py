"""
Command line: joint-account FIRST_SALARY SECOND_SALARY DESIRED_TRANSFER

Prints one line per party, or the split_result JSON payload with --json.
Exit status 1 when the calculation fails.
"""

import argparse
import json
import logging
import sys
from typing import Sequence

from joint_account.calculator import CalculationError, ProportionalSplitCalculator
from joint_account.core.contracts import validate_split_result
from joint_account.core.domain import SplitRequest

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="joint-account",
        description="Split a shared transfer so both salaries keep the same remainder.",
    )
    parser.add_argument("first_salary", type=float, help="Salary of the first party")
    parser.add_argument("second_salary", type=float, help="Salary of the second party")
    parser.add_argument("desired_transfer", type=float, help="Total amount to transfer")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    request = SplitRequest(
        first_income=args.first_salary,
        second_income=args.second_salary,
        desired_total=args.desired_transfer,
    )

    try:
        result = ProportionalSplitCalculator().calculate(request)
    except CalculationError as e:
        logger.debug("Calculation failed for %s: %r", request, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = result.to_dict()
        validate_split_result(payload)
        print(json.dumps(payload))
        return 0

    first, second = result
    print(first)
    print(second)
    return 0


if __name__ == "__main__":
    sys.exit(main())

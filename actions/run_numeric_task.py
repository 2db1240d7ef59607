#!/usr/bin/env python3
"""
Run a single numeric operation from the command line.

**Purpose**: Exposes the functions in numtasks.utils.math to a shell so a value
can be checked without opening a Python prompt. Each operation declares how its
positional arguments are converted (float, int or raw string) before the call.

**Usage**:
    python actions/run_numeric_task.py <operation> <values...> [--mode MODE]
    python actions/run_numeric_task.py --list

**Examples**:
    $ python actions/run_numeric_task.py rectangle-area 5 10
    50
    $ python actions/run_numeric_task.py round-to-power-of-ten 1678 2
    1700
    $ python actions/run_numeric_task.py is-prime 17
    True

**Exit codes**:
  - 0: Success
  - 1: Invalid input (unknown operation, wrong argument count, bad value,
       division by zero, invalid configuration)
  - 2: Unexpected error
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

# Add project root to Python path so we can import numtasks without installing it
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from numtasks.config.settings import get_settings
from numtasks.utils.logging import get_logger, setup_logging
from numtasks.utils.math import (
    ROUNDING_MODES,
    get_angle_between_vectors,
    get_average,
    get_circle_circumference,
    get_distance_between_points,
    get_last_digit,
    get_linear_equation_root,
    get_parallelepiped_diagonal,
    get_rectangle_area,
    is_prime,
    parse_number_from_string,
    round_to_power_of_ten,
    to_number_or_default,
)

logger = get_logger("actions.run_numeric_task")


class NumericTask(NamedTuple):
    """A command-line operation: the function to call and how to convert its arguments."""
    func: Callable[..., Any]
    arg_types: Tuple[Callable[[str], Any], ...]
    arg_names: Tuple[str, ...]
    description: str


OPERATIONS: Dict[str, NumericTask] = {
    "rectangle-area": NumericTask(
        get_rectangle_area, (float, float), ("width", "height"),
        "Area of a rectangle",
    ),
    "circle-circumference": NumericTask(
        get_circle_circumference, (float,), ("radius",),
        "Circumference of a circle",
    ),
    "average": NumericTask(
        get_average, (float, float), ("value1", "value2"),
        "Arithmetic mean of two numbers",
    ),
    "distance-between-points": NumericTask(
        get_distance_between_points, (float,) * 4, ("x1", "y1", "x2", "y2"),
        "Euclidean distance between two points",
    ),
    "linear-equation-root": NumericTask(
        get_linear_equation_root, (float, float), ("a", "b"),
        "Root of a*x + b = 0, rounded to an integer",
    ),
    "angle-between-vectors": NumericTask(
        get_angle_between_vectors, (float,) * 4, ("x1", "y1", "x2", "y2"),
        "Angle in radians between two vectors",
    ),
    "last-digit": NumericTask(
        get_last_digit, (int,), ("value",),
        "Last decimal digit of an integer",
    ),
    "parse-number": NumericTask(
        parse_number_from_string, (str,), ("text",),
        "Parse a numeric literal (NaN if invalid)",
    ),
    "parallelepiped-diagonal": NumericTask(
        get_parallelepiped_diagonal, (float,) * 3, ("a", "b", "c"),
        "Space diagonal of a rectangular parallelepiped",
    ),
    "round-to-power-of-ten": NumericTask(
        round_to_power_of_ten, (float, int), ("n", "power"),
        "Round to the nearest multiple of 10**power",
    ),
    "is-prime": NumericTask(
        is_prime, (int,), ("n",),
        "Primality test",
    ),
    "to-number": NumericTask(
        to_number_or_default, (str, str), ("value", "default"),
        "Leading base-10 integer of value, or default",
    ),
}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: operation (str or None), values (list of str),
        mode (str or None), list (bool)
    """
    parser = argparse.ArgumentParser(
        description="Run a numtasks numeric operation",
        epilog="""
Examples:
  python actions/run_numeric_task.py distance-between-points -5 0 10 -10
  python actions/run_numeric_task.py round-to-power-of-ten 15 1 --mode half_up
  python actions/run_numeric_task.py to-number 12px 0
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation name (see --list)",
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Operation arguments",
    )

    parser.add_argument(
        "--mode",
        choices=ROUNDING_MODES,
        default=None,
        help="Rounding tie-break for round-to-power-of-ten (default: NUMTASKS_ROUNDING_MODE)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available operations and exit",
    )

    return parser.parse_args(argv)


def convert_arguments(name: str, values: Sequence[str]) -> List[Any]:
    """
    Convert raw command-line strings to the argument types an operation expects.

    Raises:
        ValueError: If the operation is unknown, the argument count is wrong,
                   or a value cannot be converted.
    """
    if name not in OPERATIONS:
        raise ValueError(f"Unknown operation: {name!r} (use --list to see operations)")

    task = OPERATIONS[name]
    if len(values) != len(task.arg_types):
        raise ValueError(
            f"{name} expects {len(task.arg_types)} argument(s) "
            f"({', '.join(task.arg_names)}), got {len(values)}"
        )

    converted = []
    for arg_name, convert, raw in zip(task.arg_names, task.arg_types, values):
        try:
            converted.append(convert(raw))
        except ValueError:
            raise ValueError(f"Invalid value for {arg_name}: {raw!r}")
    return converted


def run_task(name: str, values: Sequence[str], rounding_mode: str) -> Any:
    """
    Convert the arguments and call the named operation.

    Args:
        name: Operation name, a key of OPERATIONS.
        values: Raw argument strings.
        rounding_mode: Tie-break passed to round-to-power-of-ten.

    Returns:
        The operation's result.
    """
    args = convert_arguments(name, values)
    logger.debug("Running %s with arguments %r", name, args)

    if name == "round-to-power-of-ten":
        return round_to_power_of_ten(*args, mode=rounding_mode)
    return OPERATIONS[name].func(*args)


def format_result(result: Any, float_precision: int) -> str:
    """Render a result for stdout; floats use float_precision significant digits."""
    if isinstance(result, float):
        return f"{result:.{float_precision}g}"
    return str(result)


def main(argv: Optional[Sequence[str]] = None):
    """
    Main entry point for the script.

    Exits with 0 on success, 1 on invalid input or configuration and 2 on
    unexpected errors.
    """
    args = parse_args(argv)

    if args.list:
        width = max(len(name) for name in OPERATIONS)
        for name, task in OPERATIONS.items():
            print(f"{name:<{width}}  {' '.join(task.arg_names):<14}  {task.description}")
        sys.exit(0)

    if args.operation is None:
        print("Error: an operation is required (use --list to see operations)", file=sys.stderr)
        sys.exit(1)

    try:
        settings = get_settings()
        setup_logging(level=settings.log.level, log_file=settings.log.log_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    rounding_mode = args.mode or settings.numeric.rounding_mode

    try:
        result = run_task(args.operation, args.values, rounding_mode)
    except (ValueError, TypeError, ZeroDivisionError) as e:
        logger.debug("Operation %s failed", args.operation, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error in %s", args.operation)
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(2)

    print(format_result(result, settings.numeric.float_precision))
    sys.exit(0)


if __name__ == "__main__":
    main()

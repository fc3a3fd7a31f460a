"""
Built-in checks run by ``fibbuzz --test``.

Each group prints one line per case and returns how many cases failed; the
summary line reports the total. The expected values are fixed, so the suite
doubles as a smoke test of an installed build.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

import click

from .exceptions.errors import InputConversionError
from .operations.fibonacci import FibonacciWalk
from .operations.primes import is_prime
from .operations.validation import parse_count

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]

PARSE_COUNT_CASES: List[Tuple[str, Optional[int]]] = [
    ("-1", None),
    ("0", None),
    ("1", 1),
    ("100", 100),
    ("abc", None),
]

# walked as one sequence from 0 up to the largest index
FIBONACCI_CASES: Dict[int, int] = {
    2: 1,
    10: 55,
    20: 6765,
    40: 102334155,
    60: 1548008755920,
    100: 0,
}

PRIME_CASES: List[Tuple[int, bool]] = [
    (0, False),
    (3, True),
    (17, True),
    (40, False),
    (193, True),
]


def _report(echo: Echo, name: str, passed: bool, detail: str = "") -> int:
    if passed:
        echo(f"    {name:<16}: pass")
        return 0
    echo(f"    {name:<16}: fail **{detail}")
    return 1


def check_parse_count(echo: Echo) -> int:
    echo("")
    echo("testing parse_count ..")

    failed = 0
    for raw, expected in PARSE_COUNT_CASES:
        try:
            result = parse_count(raw)
        except InputConversionError:
            result = None
        detail = f" (returned {result})" if result != expected else ""
        failed += _report(echo, f"input {raw}", result == expected, detail)
    return failed


def check_fibonacci(echo: Echo) -> int:
    echo("")
    echo("testing fibonacci ..")

    walk = FibonacciWalk()
    values = {}
    for index in range(max(FIBONACCI_CASES) + 1):
        value = walk.calculate(index, reset=(index == 0))
        if index in FIBONACCI_CASES:
            values[index] = value

    failed = 0
    for index, expected in FIBONACCI_CASES.items():
        result = values[index]
        failed += _report(
            echo, f"fibonacci {index}", result == expected, f" (returned {result})"
        )
    return failed


def check_is_prime(echo: Echo) -> int:
    echo("")
    echo("testing is_prime ..")

    failed = 0
    for value, expected in PRIME_CASES:
        result = is_prime(value)
        failed += _report(
            echo, f"prime check {value}", result == expected, f" (returned {result})"
        )
    return failed


def run_self_tests(echo: Echo = click.echo) -> int:
    echo("")
    echo("running tests")

    failed = 0
    failed += check_parse_count(echo)
    failed += check_fibonacci(echo)
    failed += check_is_prime(echo)

    echo("")
    if failed == 0:
        echo("All tests passed")
    else:
        logger.warning(f"Self-test finished with {failed} failure(s)")
        echo(f"Failed {failed} test(s)")
    return failed

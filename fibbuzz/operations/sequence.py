import logging
from typing import List

from ..exceptions.errors import UpperLimitExceededError
from ..models import FibonacciLine
from .classifier import classify
from .fibonacci import UPPER_LIMIT, iter_fibonacci

logger = logging.getLogger(__name__)


def fibonacci_lines(count: int) -> List[FibonacciLine]:
    """Walk indices 0..count-1 and label every value.

    The whole list is built before returning, so callers print either all
    lines or none.
    """
    if count > UPPER_LIMIT:
        raise UpperLimitExceededError(count)

    lines = []
    for index, value in iter_fibonacci(count):
        lines.append(FibonacciLine(index=index, value=value, label=classify(value)))
    logger.debug(f"Walk completed: {len(lines)} values")
    return lines

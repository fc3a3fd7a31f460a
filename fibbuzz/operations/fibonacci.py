import logging
from typing import Iterator, Tuple

logger = logging.getLogger(__name__)

# highest index served by a walk, every value up to it fits in an unsigned 64-bit integer
UPPER_LIMIT = 92
UINT64_MAX = 2**64 - 1


class FibonacciWalk:
    """State of one walk over the Fibonacci sequence.

    Indices must be requested in increasing order starting at 0; the walk
    only keeps the two previous terms, so it is not random-access.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.first = 0
        self.second = 1
        self.value = 0
        self.last_index = -1

    def calculate(self, index: int, reset: bool = False) -> int:
        if reset:
            self.reset()

        if index > UPPER_LIMIT:
            logger.debug(f"Index {index} is above {UPPER_LIMIT}, returning 0")
            return 0

        if index < 0:
            raise ValueError("Fibonacci not defined for negative numbers")
        if index != self.last_index + 1:
            raise ValueError(
                f"Fibonacci walk expected index {self.last_index + 1}, got {index}"
            )

        if index <= 1:
            self.first, self.second = 0, 1
            self.value = index
        else:
            self.value = self.first + self.second
            self.first, self.second = self.second, self.value

        self.last_index = index
        return self.value


def iter_fibonacci(count: int) -> Iterator[Tuple[int, int]]:
    walk = FibonacciWalk()
    for index in range(count):
        yield index, walk.calculate(index, reset=(index == 0))

from typing import List

from ..operations.fibonacci import UPPER_LIMIT

PROG_NAME = "fibbuzz"


class FibBuzzError(Exception):
    """Base class for errors reported to the user before any computation."""

    exit_code = 0

    def __init__(self):
        super().__init__(" ".join(self.lines))

    @property
    def lines(self) -> List[str]:
        raise NotImplementedError


class ArgumentCountError(FibBuzzError):
    def __init__(self, received: int):
        self.received = received
        super().__init__()

    @property
    def lines(self) -> List[str]:
        return [
            "incorrect number of inputs",
            f"enter {PROG_NAME} --test to test the functions",
            f"enter {PROG_NAME} x to calculate the first x fibonacci numbers",
            f"for example: {PROG_NAME} 10 to calculate the first 10 numbers",
        ]


class InputConversionError(FibBuzzError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__()

    @property
    def lines(self) -> List[str]:
        return [
            "the input must be a whole number greater than 0",
            f"for example: {PROG_NAME} 10 to calculate the first 10 numbers",
        ]


class UpperLimitExceededError(FibBuzzError):
    exit_code = -1

    def __init__(self, count: int):
        self.count = count
        super().__init__()

    @property
    def lines(self) -> List[str]:
        return [
            f"the largest fibonacci number that can be calculated is {UPPER_LIMIT}"
        ]

from enum import Enum

from .primes import is_prime


class Label(str, Enum):
    ZERO = "0"
    FIZZBUZZ = "FizzBuzz"
    BUZZ = "Buzz"
    FIZZ = "Fizz"
    BUZZFIZZ = "BuzzFizz"


def classify(value: int) -> str:
    """
    Return the display label of a Fibonacci value.

    Checks run in a fixed order, so divisibility always wins over primality:
    - 0 -> "0"
    - divisible by 15 -> "FizzBuzz"
    - divisible by 3 -> "Buzz"
    - divisible by 5 -> "Fizz"
    - prime -> "BuzzFizz"
    - the decimal value otherwise
    """
    if value == 0:
        return Label.ZERO.value
    if value % 15 == 0:
        return Label.FIZZBUZZ.value
    if value % 3 == 0:
        return Label.BUZZ.value
    if value % 5 == 0:
        return Label.FIZZ.value
    if is_prime(value):
        return Label.BUZZFIZZ.value
    return str(value)

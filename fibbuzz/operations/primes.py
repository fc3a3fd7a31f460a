from math import isqrt


def is_prime(value: int) -> bool:
    """Return True if value is a prime number greater than 1."""
    if value <= 1:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False

    for divisor in range(3, isqrt(value) + 1, 2):
        if value % divisor == 0:
            return False
    return True

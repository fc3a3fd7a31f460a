import re

from pydantic import BaseModel, Field, field_validator

from .operations.fibonacci import UINT64_MAX, UPPER_LIMIT

# leading whitespace and a sign are allowed, anything after the digits is not
COUNT_PATTERN = re.compile(r"\s*([+-]?)0*([0-9]+)")

# more digits than UINT64_MAX has, the exact value no longer matters
MAX_COUNT_DIGITS = len(str(UINT64_MAX))


class CountInput(BaseModel):
    count: int = Field(..., gt=0, description="How many Fibonacci numbers to print")

    @field_validator("count", mode="before")
    @classmethod
    def parse_whole_number(cls, value):
        if isinstance(value, str):
            match = COUNT_PATTERN.fullmatch(value)
            if not match:
                raise ValueError("the input must be a whole number")
            sign, digits = match.groups()
            if len(digits) > MAX_COUNT_DIGITS:
                # saturate instead of converting thousands of digits
                return -(UINT64_MAX + 1) if sign == "-" else UINT64_MAX + 1
            return int(sign + digits)
        return value


class FibonacciLine(BaseModel):
    index: int = Field(..., ge=0, le=UPPER_LIMIT, description="Position in the sequence")
    value: int = Field(..., ge=0, le=UINT64_MAX)
    label: str

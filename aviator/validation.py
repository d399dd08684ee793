"""
Parsing and validation of raw multiplier input.

Turns the comma-separated text a user typed into an ordered list of
floats. Checks run in a fixed priority order and only the first failing
check is reported:

1. piece count must equal the required length (blank pieces are dropped)
2. every piece must start with a number
3. no value may be negative
4. no value may be zero

Pieces are read like a browser's parseFloat: the longest leading numeric
literal counts and any trailing text is ignored, so "1.03x" reads as 1.03.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import re

from aviator.exceptions import HistoryValidationError


class ValidationError(str, Enum):
    WRONG_COUNT = "WRONG_COUNT"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    ZERO_VALUE = "ZERO_VALUE"


_MESSAGES = {
    ValidationError.WRONG_COUNT: "Please enter exactly {n} results separated by commas.",
    ValidationError.NOT_A_NUMBER: "Invalid input. Please ensure all values are numbers (e.g., 1.03, 2.5).",
    ValidationError.NEGATIVE_VALUE: "Multiplier values cannot be negative.",
    ValidationError.ZERO_VALUE: "Multiplier values must be greater than 0 (typically >= 1.00).",
}

# Sign, then "Infinity" or a decimal with optional exponent.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def error_message(code: ValidationError, required_length: int) -> str:
    return _MESSAGES[code].format(n=required_length)


@dataclass(frozen=True)
class ValidationResult:
    values: Tuple[float, ...] = ()
    error: Optional[ValidationError] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[float]:
        """Return the parsed values or raise HistoryValidationError."""
        if self.error is not None:
            raise HistoryValidationError(self.error, self.message or "")
        return list(self.values)


def split_pieces(raw_input: Optional[str]) -> List[str]:
    """Split on commas, trim, and drop empty pieces."""
    return [piece.strip() for piece in (raw_input or "").split(",") if piece.strip()]


def parse_number(piece: str) -> Optional[float]:
    """Read the leading number of ``piece``; None when there is none."""
    match = _NUMBER_PREFIX.match(piece.strip())
    if match is None:
        return None
    return float(match.group(0))


def _fail(code: ValidationError, required_length: int) -> ValidationResult:
    return ValidationResult(error=code, message=error_message(code, required_length))


def validate(raw_input: Optional[str], required_length: int) -> ValidationResult:
    """Validate raw comma-separated multipliers against ``required_length``.

    Failures come back as a ValidationResult with ``error`` set; nothing is
    raised for bad user input.
    """
    if required_length < 1:
        raise ValueError(f"required_length must be >= 1, got {required_length}")

    pieces = split_pieces(raw_input)
    if len(pieces) != required_length:
        return _fail(ValidationError.WRONG_COUNT, required_length)

    numbers = [parse_number(piece) for piece in pieces]
    if any(number is None for number in numbers):
        return _fail(ValidationError.NOT_A_NUMBER, required_length)
    if any(number < 0 for number in numbers):
        return _fail(ValidationError.NEGATIVE_VALUE, required_length)
    if any(number == 0 for number in numbers):
        return _fail(ValidationError.ZERO_VALUE, required_length)

    return ValidationResult(values=tuple(numbers))

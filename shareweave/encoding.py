# ----- encoding.py -----
import config
from shareweave.errors import InvalidDigit, UnsupportedBase

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {char: value for value, char in enumerate(DIGITS)}


def _check_base(base):
    # bool is an int subclass but never a meaningful base
    if not isinstance(base, int) or isinstance(base, bool):
        raise UnsupportedBase(base)
    if not config.Config.MIN_BASE <= base <= config.Config.MAX_BASE:
        raise UnsupportedBase(base)


def decode(digits: str, base: int) -> int:
    """
    Decode a digit string in `base` (2..36) into a non-negative integer.
    Digits are case-insensitive; no sign, whitespace or separators allowed.
    """
    _check_base(base)
    if not digits:
        raise InvalidDigit(digits, 0, base)

    result = 0
    for position, char in enumerate(digits):
        value = _DIGIT_VALUES.get(char.lower())
        if value is None or value >= base:
            raise InvalidDigit(digits, position, base)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in `base`, most significant digit first."""
    _check_base(base)
    if value < 0:
        raise ValueError("only non-negative values can be encoded")
    if value == 0:
        return "0"

    chars = []
    while value:
        value, digit = divmod(value, base)
        chars.append(DIGITS[digit])
    return "".join(reversed(chars))

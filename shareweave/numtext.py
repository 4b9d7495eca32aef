# ----- numtext.py -----
"""
Decimal text for integers of any length.

From Python 3.11, int() and str() refuse decimal conversions past
sys.get_int_max_str_digits() digits (4300 by default). Secrets and moduli
here are unbounded, so conversions go through fixed-size chunks instead.
"""
import re

_CHUNK = 18
_CHUNK_POWER = 10 ** _CHUNK
_DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)


def to_decimal(value: int) -> str:
    if value < 0:
        return "-" + to_decimal(-value)
    if value < _CHUNK_POWER:
        return str(value)

    chunks = []
    while value >= _CHUNK_POWER:
        value, low = divmod(value, _CHUNK_POWER)
        chunks.append(str(low).zfill(_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def from_decimal(text: str) -> int:
    """Parse optionally signed ASCII decimal text; ValueError otherwise."""
    if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
        raise ValueError("not a decimal integer")
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")

    head = len(digits) % _CHUNK or _CHUNK
    result = int(digits[:head])
    for start in range(head, len(digits), _CHUNK):
        result = result * _CHUNK_POWER + int(digits[start:start + _CHUNK])
    return sign * result


def describe(value) -> str:
    """repr() for messages, safe for integers of any size."""
    if isinstance(value, int) and not isinstance(value, bool):
        return to_decimal(value)
    return repr(value)

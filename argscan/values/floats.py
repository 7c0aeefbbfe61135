"""Best-effort floating point conversion of an option values (C `strtold` alike)."""

import math
import re
import struct

_HEXADECIMAL_FLOAT_PREFIX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?",
)
_DECIMAL_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_float(text: str) -> float:
    """Parse longest float-like prefix of an text, or zero if there is none."""
    text = text.lstrip()

    if match := _HEXADECIMAL_FLOAT_PREFIX.match(text):
        try:
            return float.fromhex(match.group())
        except OverflowError:
            return math.copysign(math.inf, -1.0 if text.startswith("-") else 1.0)
    if match := _DECIMAL_FLOAT_PREFIX.match(text):
        return float(match.group())
    return 0.0


def to_float64(text: str) -> float:
    return parse_float(text)


def to_float32(text: str) -> float:
    """Parse float and round it through single precision, overflow becomes an infinity."""
    value = parse_float(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)

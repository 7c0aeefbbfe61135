"""Best-effort integer conversion of an option values.

Mirrors tolerant behaviour of C `strtoll`-like converters:
longest valid digits prefix is used and malformed text yields `0` instead of an error,
callers which requires strict validation must validate raw text by themselves.
"""

from dataclasses import dataclass

# Base selection prefixes, anything else is decimal (`010` is decimal, not octal)
INTEGER_BASE_PREFIXES: dict[str, int] = {
    "0x": 16,
    "0X": 16,
    "0b": 2,
    "0B": 2,
    "0o": 8,
    "0O": 8,
}

_DIGITS_ALPHABET = "0123456789abcdef"

# Digits converted per `int` call, interpreter limits length of an decimal text it converts at once
_DIGITS_CHUNK_LENGTH = 1000


def detect_integer_base(text: str) -> tuple[int, str]:
    """Detect base from prefix of an unsigned number text.

    :returns (base, digits): base and text with base prefix being stripped
    """
    base = INTEGER_BASE_PREFIXES.get(text[:2], 10)
    if base != 10:
        return base, text[2:]
    return base, text


def parse_integer(text: str) -> int:
    """Parse text into unbounded integer, sign is applied after prefix detection (`-0x10` is -16)."""
    text = text.lstrip()
    sign = (1, -1)[text.startswith("-")]
    if text.startswith(("-", "+")):
        text = text[1:]

    base, digits = detect_integer_base(text)
    return _parse_digits_prefix(digits, base) * sign


def wrap_integer(value: int, *, bits: int, signed: bool) -> int:
    """Truncate integer into given width as two's complement (like C integer cast)."""
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


@dataclass(frozen=True, slots=True)
class IntegerConversion:
    """Conversion of an text into integer of fixed width."""

    bits: int
    signed: bool

    def __call__(self, text: str) -> int:
        return wrap_integer(parse_integer(text), bits=self.bits, signed=self.signed)

    def __repr__(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"


to_int8 = IntegerConversion(bits=8, signed=True)
to_int16 = IntegerConversion(bits=16, signed=True)
to_int32 = IntegerConversion(bits=32, signed=True)
to_int64 = IntegerConversion(bits=64, signed=True)

to_uint8 = IntegerConversion(bits=8, signed=False)
to_uint16 = IntegerConversion(bits=16, signed=False)
to_uint32 = IntegerConversion(bits=32, signed=False)
to_uint64 = IntegerConversion(bits=64, signed=False)


def _parse_digits_prefix(text: str, base: int) -> int:
    """Parse longest prefix that consists only of digits of an given base or zero if there is none."""
    alphabet = _DIGITS_ALPHABET[:base]

    end = 0
    while end < len(text) and text[end].lower() in alphabet:
        end += 1

    value = 0
    for start in range(0, end, _DIGITS_CHUNK_LENGTH):
        chunk = text[start : min(start + _DIGITS_CHUNK_LENGTH, end)]
        value = value * base ** len(chunk) + int(chunk, base)
    return value

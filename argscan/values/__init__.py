"""Closed set of conversions from raw option text into typed values.

Conversion is selected by an caller (e.g `match_long_value(cursor, "-j", to_uint8)`),
there is no runtime inspection of an destination type.
"""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

from .floats import parse_float, to_float32, to_float64
from .integers import (
    IntegerConversion,
    parse_integer,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
    wrap_integer,
)
from .text import to_bool, to_char, to_text

T = TypeVar("T")

ValueConversion: TypeAlias = Callable[[str], T]

__all__ = [
    "IntegerConversion",
    "ValueConversion",
    "parse_float",
    "parse_integer",
    "to_bool",
    "to_char",
    "to_float32",
    "to_float64",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_text",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "wrap_integer",
]

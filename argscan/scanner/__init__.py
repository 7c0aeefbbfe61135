"""Argument scanner: cursor over argument vector and option matchers driven by it."""

from ._state import BundleState, ScanState
from .cursor import ArgCursor
from .matcher import (
    OptionValue,
    match_either,
    match_either_bool,
    match_either_value,
    match_long,
    match_long_any,
    match_long_bool,
    match_long_value,
    match_short,
    match_short_bool,
    match_short_value,
)

__all__ = [
    "ArgCursor",
    "BundleState",
    "OptionValue",
    "ScanState",
    "match_either",
    "match_either_bool",
    "match_either_value",
    "match_long",
    "match_long_any",
    "match_long_bool",
    "match_long_value",
    "match_short",
    "match_short_bool",
    "match_short_value",
]

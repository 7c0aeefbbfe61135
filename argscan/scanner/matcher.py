"""Option matchers that are tried by host against current token of an cursor.

Every matcher either succeeds and advances cursor, or fails and leaves cursor untouched,
so host may try several spellings in order of priority.
Option spellings are passed with their marker (e.g `--output`, `-Wall`), short options as single character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from argscan.scanner._state import end_short_bundle, match_short_option
from argscan.values import to_text

if TYPE_CHECKING:
    from argscan.scanner.cursor import ArgCursor
    from argscan.values import ValueConversion

LONG_OPTION_VALUE_SEPARATOR = "="
NEGATION_MARK = "-"

T = TypeVar("T")


@dataclass(frozen=True)
class OptionValue(Generic[T]):
    """Value of an matched option."""

    # Converted value
    value: T

    # Text value was converted from
    raw: str

    # Value was taken from next vector entry (e.g `-o file`)
    from_next_token: bool = False


def match_long(cursor: ArgCursor, name: str) -> bool:
    """Match long option flag without any value (`--name`, `--name=` is allowed also)."""
    suffix = _match_long_prefix(cursor, name)
    return suffix is not None and not suffix


def match_long_any(cursor: ArgCursor, *names: str) -> bool:
    """Match first of an given long option flag spellings."""
    return any(match_long(cursor, name) for name in names)


def match_long_bool(cursor: ArgCursor, name: str) -> bool | None:
    """Match long option with an negation convention.

    Anything after name (and optional `=`) that starts with `-` is false, anything else is true.
    As name is matched as prefix, `--colorful` matched as `--color` is true,
    and `--color=no` is also true: only leading `-` negates.

    :returns value: None if option does not match
    """
    suffix = _match_long_prefix(cursor, name)
    if suffix is None:
        return None
    return not suffix.startswith(NEGATION_MARK)


def match_long_value(
    cursor: ArgCursor,
    name: str,
    convert: ValueConversion[T] = to_text,
    *,
    next_token_fallback: bool = True,
) -> OptionValue[T] | None:
    """Match long option with value attached (`--name=value`, `-Ovalue`) or in next token (`--name value`).

    Without fallback `--name` alone matches with an empty value and next token is left as-is.
    """
    suffix = _match_long_prefix(cursor, name)
    if suffix is None:
        return None

    raw = cursor.take_value(suffix, next_token_fallback=next_token_fallback)
    return OptionValue(
        value=convert(raw),
        raw=raw,
        from_next_token=cursor.consumed_next_token,
    )


def match_short(cursor: ArgCursor, option: str) -> bool:
    """Match short option flag, with bundling (`-abc` is matched as `a`, `b` then `c`)."""
    assert cursor.config.enable_short_options, "Short options are disabled by scanner config"

    bundle = match_short_option(
        cursor.bundle,
        cursor.current_token,
        option,
        marker=cursor.config.option_marker,
        max_depth=cursor.config.max_bundle_depth,
    )
    if bundle is None:
        return False

    cursor.update_bundle(bundle)
    return True


def match_short_bool(cursor: ArgCursor, option: str) -> bool | None:
    """Match short option flag where directly following `-` negates it (`-v-`).

    :returns value: None if option does not match
    """
    if not match_short(cursor, option):
        return None
    return not cursor.consume_prefix_char(NEGATION_MARK)


def match_short_value(
    cursor: ArgCursor,
    option: str,
    convert: ValueConversion[T] = to_text,
    *,
    next_token_fallback: bool = True,
) -> OptionValue[T] | None:
    """Match short option with value as rest of an token (`-ofile`, `-o=file`) or next token (`-o file`).

    Value ends bundle, nothing after option is treated as another short option.
    """
    if not match_short(cursor, option):
        return None

    cursor.consume_prefix_char(LONG_OPTION_VALUE_SEPARATOR)
    attached = cursor.remaining
    cursor.update_bundle(end_short_bundle(cursor.current_token))

    raw = cursor.take_value(attached, next_token_fallback=next_token_fallback)
    return OptionValue(
        value=convert(raw),
        raw=raw,
        from_next_token=cursor.consumed_next_token,
    )


def match_either(
    cursor: ArgCursor,
    long_name: str,
    short_option: str,
    *,
    prefer_short: bool = True,
) -> bool:
    """Match option flag that has both long and short spellings (`--verbose` / `-v`)."""
    if prefer_short:
        return match_short(cursor, short_option) or match_long(cursor, long_name)
    return match_long(cursor, long_name) or match_short(cursor, short_option)


def match_either_bool(
    cursor: ArgCursor,
    long_name: str,
    short_option: str,
    *,
    prefer_short: bool = True,
) -> bool | None:
    """Match negatable option that has both long and short spellings."""
    if prefer_short:
        value = match_short_bool(cursor, short_option)
        return value if value is not None else match_long_bool(cursor, long_name)

    value = match_long_bool(cursor, long_name)
    return value if value is not None else match_short_bool(cursor, short_option)


def match_either_value(
    cursor: ArgCursor,
    long_name: str,
    short_option: str,
    convert: ValueConversion[T] = to_text,
    *,
    next_token_fallback: bool = True,
    prefer_short: bool = True,
) -> OptionValue[T] | None:
    """Match option with value that has both long and short spellings (`--output file` / `-o file`)."""
    if prefer_short:
        return match_short_value(
            cursor,
            short_option,
            convert,
            next_token_fallback=next_token_fallback,
        ) or match_long_value(
            cursor,
            long_name,
            convert,
            next_token_fallback=next_token_fallback,
        )
    return match_long_value(
        cursor,
        long_name,
        convert,
        next_token_fallback=next_token_fallback,
    ) or match_short_value(
        cursor,
        short_option,
        convert,
        next_token_fallback=next_token_fallback,
    )


def _match_long_prefix(cursor: ArgCursor, name: str) -> str | None:
    """Match name as prefix of an current token.

    Long options are never matched within short option bundle.

    :returns suffix: Rest of an token after name and optional `=` or None if not matched
    """
    if not name or cursor.bundle.bundle_depth:
        return None

    remaining = cursor.remaining
    if not remaining.startswith(name):
        return None
    return remaining[len(name) :].removeprefix(LONG_OPTION_VALUE_SEPARATOR)

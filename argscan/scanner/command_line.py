from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from argscan.response import expand_response, insert_response
from argscan.scanner import matcher
from argscan.scanner.cursor import ArgCursor
from argscan.values import to_text
from argscan.vector import ArgumentVector, allocate_backing_list

if TYPE_CHECKING:
    from collections.abc import Sequence

    from argscan.config import ScannerConfig
    from argscan.scanner._state import ScanState
    from argscan.scanner.matcher import OptionValue
    from argscan.values import ValueConversion
    from argscan.vector.argument_vector import BackingAllocator

T = TypeVar("T")


class CommandLineArgs:
    """Command line arguments scanner for an host loop.

    Bundles argument vector, cursor, option matchers and response file expansion:

        args = CommandLineArgs(sys.argv)
        while args.has_next():
            if args.prepare_next():
                if args.match_either("--help", "h"):
                    ...
                elif (output := args.match_either_value("--output", "o", to_text)) is not None:
                    ...
                elif args.match_long("--"):
                    args.disable_option_parsing()
            elif args.consume_prefix_char("@"):
                args.replace_with_response(Path(args.remaining).read_bytes())
            else:
                ...
    """

    vector: ArgumentVector
    cursor: ArgCursor

    def __init__(
        self,
        argv: Sequence[str],
        *,
        config: ScannerConfig | None = None,
        allocator: BackingAllocator = allocate_backing_list,
    ) -> None:
        self.vector = ArgumentVector(argv, allocator=allocator)
        self.cursor = ArgCursor(self.vector, config)

    @property
    def program_name(self) -> str | None:
        return self.vector.program_name

    @property
    def current_token(self) -> str:
        return self.cursor.current_token

    @property
    def remaining(self) -> str:
        return self.cursor.remaining

    @property
    def state(self) -> ScanState:
        return self.cursor.state

    def has_next(self) -> bool:
        return self.cursor.has_next()

    def prepare_next(self) -> bool:
        return self.cursor.prepare_next()

    def disable_option_parsing(self) -> None:
        self.cursor.disable_option_parsing()

    def reset(self) -> bool:
        return self.cursor.reset()

    def consume_prefix_char(self, char: str) -> bool:
        return self.cursor.consume_prefix_char(char)

    def match_long(self, name: str) -> bool:
        return matcher.match_long(self.cursor, name)

    def match_long_any(self, *names: str) -> bool:
        return matcher.match_long_any(self.cursor, *names)

    def match_long_bool(self, name: str) -> bool | None:
        return matcher.match_long_bool(self.cursor, name)

    def match_long_value(
        self,
        name: str,
        convert: ValueConversion[T] = to_text,
        *,
        next_token_fallback: bool = True,
    ) -> OptionValue[T] | None:
        return matcher.match_long_value(
            self.cursor,
            name,
            convert,
            next_token_fallback=next_token_fallback,
        )

    def match_short(self, option: str) -> bool:
        return matcher.match_short(self.cursor, option)

    def match_short_bool(self, option: str) -> bool | None:
        return matcher.match_short_bool(self.cursor, option)

    def match_short_value(
        self,
        option: str,
        convert: ValueConversion[T] = to_text,
        *,
        next_token_fallback: bool = True,
    ) -> OptionValue[T] | None:
        return matcher.match_short_value(
            self.cursor,
            option,
            convert,
            next_token_fallback=next_token_fallback,
        )

    def match_either(
        self,
        long_name: str,
        short_option: str,
        *,
        prefer_short: bool = True,
    ) -> bool:
        return matcher.match_either(
            self.cursor,
            long_name,
            short_option,
            prefer_short=prefer_short,
        )

    def match_either_bool(
        self,
        long_name: str,
        short_option: str,
        *,
        prefer_short: bool = True,
    ) -> bool | None:
        return matcher.match_either_bool(
            self.cursor,
            long_name,
            short_option,
            prefer_short=prefer_short,
        )

    def match_either_value(
        self,
        long_name: str,
        short_option: str,
        convert: ValueConversion[T] = to_text,
        *,
        next_token_fallback: bool = True,
        prefer_short: bool = True,
    ) -> OptionValue[T] | None:
        return matcher.match_either_value(
            self.cursor,
            long_name,
            short_option,
            convert,
            next_token_fallback=next_token_fallback,
            prefer_short=prefer_short,
        )

    def replace_with_response(self, buffer: str | bytes) -> bool:
        """Replace current token (e.g `@file`) with response text tokens and resume scanning at first of them.

        If last matched option took its value from next entry, that entry is left after inserted tokens
        and will be scanned again.

        :returns success: False if allocation failed, vector and cursor are untouched
        """
        index = self.cursor.current_index
        assert index is not None, "No current token to replace, call `prepare_next` first"

        if not expand_response(self.vector, index, buffer):
            return False
        self.cursor.rewind_to(index)
        return True

    def insert_response(self, buffer: str | bytes) -> bool:
        """Insert response text tokens at scan position, they are scanned right after current token.

        :returns success: False if allocation failed, vector is untouched
        """
        return insert_response(self.vector, self.cursor.next_index, buffer)

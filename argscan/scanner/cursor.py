from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from argscan.config import ScannerConfig
from argscan.scanner._state import BundleState, ScanState, continue_short_bundle

if TYPE_CHECKING:
    from argscan.vector import ArgumentVector

# Scanning starts after program name
FIRST_ARGUMENT_INDEX = 1


class ArgCursor:
    """Scan position within argument vector, current token and short option bundle state.

    Cursor is stateful only for single scan pass, `reset` rewinds it.
    """

    vector: ArgumentVector
    config: ScannerConfig

    # Index of an next vector entry to load
    _next_index: int

    # Index of an entry loaded by last `prepare_next`
    _current_index: int | None
    _token: str
    _bundle: BundleState

    _options_enabled: bool

    # Last value was taken from next vector entry
    _consumed_next_token: bool

    # Indices of an option tokens (and their values) consumed within pass
    # only tracked with `clear_consumed_options`
    _consumed_indices: set[int]

    def __init__(
        self,
        vector: ArgumentVector,
        config: ScannerConfig | None = None,
    ) -> None:
        self.vector = vector
        self.config = config or ScannerConfig()
        self._options_enabled = True
        self._consumed_indices = set()
        self._rewind(FIRST_ARGUMENT_INDEX)

    @property
    def current_token(self) -> str:
        """Whole token as it was loaded by `prepare_next`."""
        return self._token

    @property
    def remaining(self) -> str:
        """Unconsumed characters of an current token."""
        return self._token[self._bundle.token_offset :]

    @property
    def current_index(self) -> int | None:
        return self._current_index

    @property
    def next_index(self) -> int:
        return self._next_index

    @property
    def bundle(self) -> BundleState:
        return self._bundle

    @property
    def state(self) -> ScanState:
        return self._bundle.scan_state

    @property
    def consumed_next_token(self) -> bool:
        """Was an value of last matched option taken from next vector entry?."""
        return self._consumed_next_token

    @property
    def options_enabled(self) -> bool:
        return self._options_enabled

    def has_next(self) -> bool:
        """Is there any vector entry or bundled short option left to scan?."""
        if continue_short_bundle(self._bundle, self._token) is not None:
            return True
        return self._next_index < len(self.vector)

    def prepare_next(self) -> bool:
        """Advance to next logical token.

        Stays on current token if it is short option bundle which was advanced since last call,
        otherwise loads next vector entry.

        :returns is_option: Token looks like an option and must be tried by matchers.
        """
        if (bundle := continue_short_bundle(self._bundle, self._token)) is not None:
            self._bundle = bundle
            return True

        assert self._next_index < len(self.vector), (
            "`prepare_next` called with no arguments left, check `has_next` first"
        )

        self._consumed_next_token = False
        self._current_index = self._next_index
        self._token = self.vector[self._next_index]
        self._bundle = BundleState()
        self._next_index += 1

        is_option = self._options_enabled and self._token.startswith(
            self.config.option_marker,
        )
        if is_option and self.config.clear_consumed_options:
            self._consumed_indices.add(self._current_index)
        return is_option

    def disable_option_parsing(self) -> None:
        """Treat every next token as plain argument (e.g after `--` terminator)."""
        self._options_enabled = False

    def reset(self) -> bool:
        """Rewind cursor to first argument.

        With `clear_consumed_options` all consumed options are dropped from vector at first.

        :returns success: False if vector compaction failed (vector and cursor are untouched)
        """
        if self.config.clear_consumed_options:
            if not self.vector.remove_indices(self._consumed_indices):
                return False
            self._consumed_indices.clear()

        self._rewind(FIRST_ARGUMENT_INDEX)
        return True

    def update_bundle(self, bundle: BundleState) -> None:
        """Commit new bundle state of an current token (after successful match)."""
        assert bundle.token_offset <= len(self._token), "Bundle offset is out of token bounds"
        self._bundle = bundle

    def consume_prefix_char(self, char: str) -> bool:
        """Consume character if unconsumed part of an token starts with it (e.g `@` of response file)."""
        if not char or not self.remaining.startswith(char):
            return False
        self._bundle = replace(
            self._bundle,
            token_offset=self._bundle.token_offset + len(char),
        )
        return True

    def take_value(self, attached: str, *, next_token_fallback: bool) -> str:
        """Resolve option value, fall back to next vector entry if nothing is attached to option.

        Fallback happens only when both call-site and config allows it.
        """
        self._consumed_next_token = False
        fallback = next_token_fallback and self.config.next_token_fallback
        if attached or not fallback or self._next_index >= len(self.vector):
            return attached

        self._consumed_next_token = True
        if self.config.clear_consumed_options:
            self._consumed_indices.add(self._next_index)

        value = self.vector[self._next_index]
        self._next_index += 1
        return value

    def rewind_to(self, index: int) -> None:
        """Resume scanning at given vector index (e.g after current token was replaced by splice).

        Consumed entries at and after index are forgotten as they are about to be scanned again.
        """
        assert FIRST_ARGUMENT_INDEX <= index <= len(self.vector)
        self._consumed_indices = {i for i in self._consumed_indices if i < index}
        self._rewind(index)

    def _rewind(self, index: int) -> None:
        self._next_index = index
        self._current_index = None
        self._token = ""
        self._bundle = BundleState()
        self._consumed_next_token = False

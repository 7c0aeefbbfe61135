"""Tokenizer of an response file contents.

Rules (single left-to-right scan):
- any character <= 0x20 and DEL separates tokens outside of quotes, runs of separators collapse
- `"` toggles quoted mode, `""` within quotes is literal quote, separators are literal within quotes
- `#` where token may start (text start, after newline or any other separator) is comment until end of line
- NUL character ends text
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from argscan.response._state import ResponseScanState

if TYPE_CHECKING:
    from collections.abc import Generator

QUOTE = '"'
COMMENT_MARK = "#"
NEWLINE = "\n"
TERMINATOR = "\0"
DELETE = "\x7f"

# Characters up to (including) that code are separators (space and control characters)
MAX_SEPARATOR_CODE = 0x20


@dataclass(frozen=True, slots=True)
class ResponseTokensMeasure:
    """Sizing of an response text without collecting tokens."""

    count: int
    max_length: int


def decode_response_buffer(buffer: str | bytes) -> str:
    """Response files are read as raw bytes, undecodable bytes are preserved as surrogates."""
    if isinstance(buffer, str):
        return buffer
    return buffer.decode("utf-8", errors="surrogateescape")


def is_separator(symbol: str) -> bool:
    return ord(symbol) <= MAX_SEPARATOR_CODE or symbol == DELETE


def measure_response_tokens(text: str) -> ResponseTokensMeasure:
    """Count tokens and length of an longest one (first pass)."""
    state = ResponseScanState(collect=False)
    count = max_length = 0
    for _ in _scan_response_tokens(text, state):
        count += 1
        max_length = max(max_length, state.token_length)
    return ResponseTokensMeasure(count=count, max_length=max_length)


def tokenize_response(text: str) -> list[str]:
    """Split response text into tokens (second pass)."""
    state = ResponseScanState(collect=True)
    return [state.token_text() for _ in _scan_response_tokens(text, state)]


def _scan_response_tokens(text: str, state: ResponseScanState) -> Generator[None]:
    """Walk text and yield each time `state` holds complete token, token is cleared after resume.

    Empty quotes (`""`) alone never produce an token.
    """
    idx, idx_end = 0, len(text)
    while idx < idx_end:
        symbol = text[idx]
        idx += 1

        if symbol == TERMINATOR:
            break

        if state.quoted:
            if symbol == QUOTE:
                if not text.startswith(QUOTE, idx):
                    state.quoted = False
                    continue
                # Doubled quote is an literal one
                idx += len(QUOTE)
            state.push_symbol(symbol)
            continue

        if state.in_comment:
            if symbol == NEWLINE:
                state.in_comment = False
            continue

        if is_separator(symbol):
            if state.token_length:
                yield
            state.clear_token()
            continue

        if symbol == QUOTE:
            state.quoted = True
            state.token_started = True
            continue

        if symbol == COMMENT_MARK and not state.token_started:
            state.in_comment = True
            continue

        state.push_symbol(symbol)

    # Text may end without trailing separator (or within quotes)
    if state.token_length:
        yield
    state.clear_token()

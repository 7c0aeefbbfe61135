"""Splice tokens of an response text into argument vector.

Text is scanned twice: first pass only measures tokens, second one collects them,
then vector swaps its backing list once with all tokens, no partial splice is ever observable.
The core never touches filesystem, caller reads response file and decides whether missing one is fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from argscan.response.tokenizer import (
    decode_response_buffer,
    measure_response_tokens,
    tokenize_response,
)

if TYPE_CHECKING:
    from argscan.vector import ArgumentVector


def expand_response(vector: ArgumentVector, index: int, buffer: str | bytes) -> bool:
    """Replace vector entry at index (e.g `@file` reference) with tokens of an response text.

    Empty response removes entry.

    :returns success: False if allocation failed, vector is untouched
    """
    tokens = _collect_response_tokens(buffer)
    if tokens is None:
        return False
    return vector.splice_replace(index, tokens)


def insert_response(vector: ArgumentVector, index: int, buffer: str | bytes) -> bool:
    """Insert tokens of an response text before vector entry at index.

    :returns success: False if allocation failed, vector is untouched
    """
    tokens = _collect_response_tokens(buffer)
    if tokens is None:
        return False
    if not tokens:
        return True
    return vector.splice_insert(index, tokens)


def _collect_response_tokens(buffer: str | bytes) -> list[str] | None:
    """Tokenize response text in two passes or None if ran out of memory."""
    try:
        text = decode_response_buffer(buffer)
        measure = measure_response_tokens(text)
        if not measure.count:
            return []
        tokens = tokenize_response(text)
    except MemoryError:
        return None

    assert len(tokens) == measure.count, "Sizing and collecting passes disagree on tokens count"
    assert max(map(len, tokens)) == measure.max_length, "Sizing and collecting passes disagree on longest token"
    return tokens

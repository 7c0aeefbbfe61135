"""Response files expansion (tokenize text and splice tokens into argument vector)."""

from .expander import expand_response, insert_response
from .tokenizer import (
    ResponseTokensMeasure,
    decode_response_buffer,
    measure_response_tokens,
    tokenize_response,
)

__all__ = [
    "ResponseTokensMeasure",
    "decode_response_buffer",
    "expand_response",
    "insert_response",
    "measure_response_tokens",
    "tokenize_response",
]

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=False)
class ResponseScanState:
    """State for response text tokenization which only required for internal usages."""

    # Sizing pass only counts symbols of an token and does not collect them
    collect: bool

    quoted: bool = False
    in_comment: bool = False

    # Token symbol or quote was met since last separator
    # (`#` starts comment only when no token is started)
    token_started: bool = False

    token_length: int = 0
    token_symbols: list[str] = field(default_factory=list)

    def push_symbol(self, symbol: str) -> None:
        self.token_started = True
        self.token_length += 1
        if self.collect:
            self.token_symbols.append(symbol)

    def token_text(self) -> str:
        assert self.collect, "Token text is not collected within sizing pass"
        return "".join(self.token_symbols)

    def clear_token(self) -> None:
        self.token_started = False
        self.token_length = 0
        self.token_symbols.clear()

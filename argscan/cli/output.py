"""User-facing output of an CLI (messages are emitted to stderr, results to stdout)."""

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"


LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message to user, errors are always emitted while rest only if verbose."""
    if not verbose and level != "ERROR":
        return

    stream = sys.stderr
    if stream.isatty():
        color = LEVEL_COLORS[level]
        print(f"{color}[{level}]{CLIColor.RESET} {text}", file=stream)
        return
    print(f"[{level}] {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and exit abnormally (exit code 1)."""
    cli_message("ERROR", text)
    sys.exit(1)

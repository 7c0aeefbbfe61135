import sys
from collections.abc import Generator
from contextlib import contextmanager

from argscan.cli.output import cli_fatal_abort, cli_message
from argscan.exceptions import ArgscanError


@contextmanager
def cli_argscan_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None]:
    """Wrap function to properly emit argscan errors."""
    try:
        yield
    except ArgscanError as ae:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(ae))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from argscan.cli.arguments import parse_cli_arguments
from argscan.cli.errors import cli_argscan_error_handler
from argscan.cli.executable import (
    cli_get_executable_program,
    infer_default_response_file,
    warn_on_improper_installation,
)
from argscan.cli.goals import perform_desired_goal

from .output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence


def cli_entry_point(argv: Sequence[str] | None = None) -> None:
    """CLI main entry."""
    argv = sys.argv if argv is None else argv
    prog = cli_get_executable_program(override=argv[0] if argv else None)
    warn_on_improper_installation(prog)

    with cli_argscan_error_handler():
        default_response_file = infer_default_response_file(argv[0]) if argv else None
        args = parse_cli_arguments(argv, default_response_file=default_response_file)
        perform_desired_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: must perform at least one goal!")
    sys.exit(1)


if __name__ == "__main__":
    cli_entry_point()

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from argscan.cli.errors import (
    ResponseFileExpansionFailedError,
    ResponseFileLimitExceededError,
)
from argscan.cli.output import cli_message
from argscan.cli.response_files import read_response_file
from argscan.feature_flags import DEFAULT_MAX_RESPONSE_FILES, RESPONSE_FILE_MARKER
from argscan.scanner import ScanState
from argscan.scanner.command_line import CommandLineArgs
from argscan.values import to_uint32

if TYPE_CHECKING:
    from collections.abc import Sequence

OPTIONS_TERMINATOR = "--"


@dataclass(frozen=True)
class CLIArguments:
    """Arguments scanned from process command line provided for whole argscan process."""

    program: str

    # Goals
    help: bool = False
    version: bool = False

    verbose: bool = False

    # Output separated by NUL instead of newline (e.g for `xargs -0`)
    null_separated: bool = False

    # Output as `argv[N]=...` lines including program name
    print_args: bool = False

    max_response_files: int = DEFAULT_MAX_RESPONSE_FILES

    # Fully scanned arguments (response files are expanded) except own options
    arguments: list[str] = field(default_factory=list)

    # Response files in order of expansion
    response_files: list[Path] = field(default_factory=list)


@dataclass
class _ScanContext:
    """Mutable options collected while scanning, frozen into `CLIArguments` at the end."""

    help: bool = False
    version: bool = False
    verbose: bool = False
    null_separated: bool = False
    print_args: bool = False
    max_response_files: int = DEFAULT_MAX_RESPONSE_FILES
    arguments: list[str] = field(default_factory=list)
    response_files: list[Path] = field(default_factory=list)


def parse_cli_arguments(
    argv: Sequence[str],
    *,
    default_response_file: Path | None = None,
) -> CLIArguments:
    """Scan process arguments, expand response files and collect own options.

    Unknown options and operands are passed through as-is.
    """
    args = CommandLineArgs(argv)
    context = _ScanContext()

    if default_response_file is not None:
        _insert_default_response_file(args, context, default_response_file)

    while args.has_next():
        if args.prepare_next():
            _process_option(args, context)
            continue

        if args.consume_prefix_char(RESPONSE_FILE_MARKER):
            _expand_response_file(args, context, Path(args.remaining))
            continue

        context.arguments.append(args.current_token)

    return CLIArguments(
        program=args.program_name or "",
        help=context.help,
        version=context.version,
        verbose=context.verbose,
        null_separated=context.null_separated,
        print_args=context.print_args,
        max_response_files=context.max_response_files,
        arguments=context.arguments,
        response_files=context.response_files,
    )


def _process_option(args: CommandLineArgs, context: _ScanContext) -> None:
    """Try own options against current option-like token, pass it through if unknown."""
    if args.match_long(OPTIONS_TERMINATOR):
        args.disable_option_parsing()
    elif args.match_either("--help", "h"):
        context.help = True
    elif args.match_long("--version"):
        context.version = True
    elif args.match_either("--verbose", "v"):
        context.verbose = True
    elif args.match_either("--null", "0"):
        context.null_separated = True
    elif (print_args := args.match_long_bool("--print-args")) is not None:
        context.print_args = print_args
    elif (limit := args.match_long_value("--max-response-files", to_uint32)) is not None:
        context.max_response_files = limit.value
    elif args.state == ScanState.IN_SHORT_BUNDLE:
        # Unknown rest of an short options bundle (e.g `-vX` where `X` is unknown)
        context.arguments.append(args.cursor.config.option_marker + args.remaining)
    else:
        context.arguments.append(args.current_token)


def _expand_response_file(
    args: CommandLineArgs,
    context: _ScanContext,
    path: Path,
) -> None:
    """Splice response file referenced by current token into arguments in place of that token."""
    if len(context.response_files) >= context.max_response_files:
        raise ResponseFileLimitExceededError(path, limit=context.max_response_files)

    buffer = read_response_file(path)
    if not args.replace_with_response(buffer):
        raise ResponseFileExpansionFailedError(path)

    context.response_files.append(path)
    cli_message(
        level="INFO",
        text=f"Expanded response file '{path}' ({len(buffer)} bytes).",
        verbose=context.verbose,
    )


def _insert_default_response_file(
    args: CommandLineArgs,
    context: _ScanContext,
    path: Path,
) -> None:
    """Insert default response file tokens before any of an user arguments."""
    buffer = read_response_file(path)
    if not args.insert_response(buffer):
        raise ResponseFileExpansionFailedError(path)
    context.response_files.append(path)

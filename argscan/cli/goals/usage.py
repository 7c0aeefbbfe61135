import sys
from pathlib import Path
from typing import NoReturn

from argscan.cli.arguments import CLIArguments
from argscan.feature_flags import DEFAULT_MAX_RESPONSE_FILES, DEFAULT_RESPONSE_FILE_SUFFIX


def cli_perform_usage_goal(args: CLIArguments) -> NoReturn:
    """Display usage of an CLI."""
    prog = Path(args.program).name or "argscan"
    print(f"usage> {prog} [-options] [--] arguments... [@response-file...]")
    print(
        "      Expand response files and print scanned arguments, one per line.\n"
        "      Unknown options and operands are passed through as-is.\n"
        "  -h, --help                Show this help.\n"
        "  --version                 Show version info.\n"
        "  -v, --verbose             Report expanded response files.\n"
        "  -0, --null                Separate printed arguments with NUL.\n"
        "  --print-args[=-]          Print as `argv[N]=...` lines (trailing `-` disables).\n"
        f"  --max-response-files=N    Response files expansions limit ({DEFAULT_MAX_RESPONSE_FILES}).\n"
        "  --                        Treat rest of arguments as non-options.\n"
        "  @FILE                     Splice tokens of FILE in place of an argument.\n"
        f"      `{prog}{DEFAULT_RESPONSE_FILE_SUFFIX}` beside executable is loaded before arguments.",
    )
    return sys.exit(0)

import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from argscan import __version__
from argscan.cli.arguments import CLIArguments
from argscan.feature_flags import (
    DEFAULT_MAX_RESPONSE_FILES,
    DEFAULT_RESPONSE_FILE_SUFFIX,
    RESPONSE_FILE_MARKER,
)


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and argscan."""
    print(f"[argscan {__version__}]")
    print(f"\tProgram: {args.program}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print("Response files:")
    print(f"\tRESPONSE_FILE_MARKER = {RESPONSE_FILE_MARKER!r}")
    print(f"\tDEFAULT_RESPONSE_FILE_SUFFIX = {DEFAULT_RESPONSE_FILE_SUFFIX!r}")
    print(f"\tDEFAULT_MAX_RESPONSE_FILES = {DEFAULT_MAX_RESPONSE_FILES}")
    return sys.exit(0)

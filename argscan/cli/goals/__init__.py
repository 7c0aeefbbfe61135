"""Goals for CLI (e.g expand arguments, show version) as different goals that output different result."""

from typing import NoReturn

from argscan.cli.arguments import CLIArguments
from argscan.cli.goals.expand import cli_perform_expand_goal
from argscan.cli.goals.usage import cli_perform_usage_goal
from argscan.cli.goals.version import cli_perform_version_goal


def perform_desired_goal(args: CLIArguments) -> NoReturn:
    """Perform goal base on CLI arguments, by default fall into expand goal."""
    if args.help:
        return cli_perform_usage_goal(args)

    if args.version:
        return cli_perform_version_goal(args)

    return cli_perform_expand_goal(args)

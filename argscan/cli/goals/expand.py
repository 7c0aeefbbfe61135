import sys
from typing import NoReturn

from argscan.cli.arguments import CLIArguments
from argscan.cli.output import cli_message


def cli_perform_expand_goal(args: CLIArguments) -> NoReturn:
    """Print fully scanned arguments (with response files expanded) to stdout."""
    cli_message(
        level="INFO",
        text=f"Scanned {len(args.arguments)} argument(s), expanded {len(args.response_files)} response file(s).",
        verbose=args.verbose,
    )

    if args.print_args:
        arguments = [args.program, *args.arguments]
        _write_stdout("".join(f"argv[{i}]={a}\n" for i, a in enumerate(arguments)))
        return sys.exit(0)

    separator = "\0" if args.null_separated else "\n"
    _write_stdout("".join(argument + separator for argument in args.arguments))
    return sys.exit(0)


def _write_stdout(text: str) -> None:
    """Write raw text, bytes undecodable in response files are written back as-is."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", errors="surrogateescape"))
    sys.stdout.buffer.flush()

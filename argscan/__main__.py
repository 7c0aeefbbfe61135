"""Entry point for CLI.

Only for calling via `python -m argscan`, installed `argscan` script is preferred.
"""

from argscan.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()

from __future__ import annotations

import sys
from pathlib import Path
from shutil import which

from argscan.cli.output import cli_message
from argscan.feature_flags import DEFAULT_RESPONSE_FILE_SUFFIX


def cli_get_executable_program(*, override: str | None = None) -> str:
    """Get name of an executable which is first argument (e.g `argscan ...`).

    Override is an explicit first argument (e.g when entry point is called with own arguments).
    """
    return Path(override if override else sys.argv[0]).name


def warn_on_improper_installation(executable: str) -> None:
    """Warn if user is calling CLI as Python module, e.g __main__.py."""
    if not executable.endswith(".py"):
        return
    cli_message(
        level="WARNING",
        text=f"Running with prog == '{executable}', consider proper installation!",
        verbose=True,  # Treat as always verbose - as this cannot be inferred from arguments yet.
    )


def infer_default_response_file(executable: str) -> Path | None:
    """Find default response file that lives beside executable (e.g `/usr/bin/argscan.rsp`)."""
    if not executable:
        return None

    # Executable may be called by name via PATH lookup
    resolved = which(executable)
    path = Path(resolved) if resolved else Path(executable)

    if not path.name or path.name in (".", ".."):
        return None

    response_file = path.with_suffix(DEFAULT_RESPONSE_FILE_SUFFIX)
    if not response_file.is_file():
        return None
    return response_file

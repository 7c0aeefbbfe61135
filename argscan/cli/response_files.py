"""Loading of an response files, the only filesystem access of an scanning process."""

from pathlib import Path

from argscan.cli.errors import (
    ResponseFileNotFoundError,
    ResponseFileUnreadableError,
)


def read_response_file(path: Path) -> bytes:
    """Read raw response file contents, tokenizer decodes it by itself."""
    if not path.is_file():
        raise ResponseFileNotFoundError(path)

    try:
        return path.read_bytes()
    except OSError as e:
        raise ResponseFileUnreadableError(path, reason=e.strerror or str(e)) from e

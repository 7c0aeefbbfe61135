from pathlib import Path

from argscan.exceptions import ResponseFileError


class ResponseFileUnreadableError(ResponseFileError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to read response file '{self.path}'!

Reason: {self.reason}

{self.generic_error_name}"""

from pathlib import Path

from argscan.exceptions import ResponseFileError


class ResponseFileLimitExceededError(ResponseFileError):
    def __init__(self, path: Path, limit: int) -> None:
        super().__init__(path)
        self.limit = limit

    def __repr__(self) -> str:
        return f"""Too many response files expanded, limit of {self.limit} reached at '{self.path}'!

Does response file reference itself (directly or via other response files)?
Limit can be raised with `--max-response-files=N`

{self.generic_error_name}"""

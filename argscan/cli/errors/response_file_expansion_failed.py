from argscan.exceptions import ResponseFileError


class ResponseFileExpansionFailedError(ResponseFileError):
    def __repr__(self) -> str:
        return f"""Failed to splice response file '{self.path}' into arguments!

Ran out of memory while tokenizing response file, arguments are left as-is.
Is response file too large?

{self.generic_error_name}"""

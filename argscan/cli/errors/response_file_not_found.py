from argscan.exceptions import ResponseFileError


class ResponseFileNotFoundError(ResponseFileError):
    def __repr__(self) -> str:
        return f"""Response file '{self.path}' does not exist!

Response file is referenced by argument '@{self.path}' and its contents must be spliced into arguments.
Paths are resolved relative to current working directory.

{self.generic_error_name}"""

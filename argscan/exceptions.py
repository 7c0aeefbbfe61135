from __future__ import annotations

import re
from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class ArgscanError(Exception):
    """Parent for all user-facing argscan errors.

    Scanner core never raises them (it reports failures as results), only hosts do.
    Hosts report them via `repr`: multi-line explanation that ends with generic error name.
    """

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"


class ResponseFileError(ArgscanError):
    """Error caused by an specific response file (e.g `@args.rsp`)."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"{self.generic_error_name} {self.path}"

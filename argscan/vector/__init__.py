"""Argument vector that is being scanned and mutated by response file splices."""

from .argument_vector import ArgumentVector, allocate_backing_list

__all__ = [
    "ArgumentVector",
    "allocate_backing_list",
]

"""Argscan: command line arguments scanner with response files expansion.

Walks mutable argument vector, recognizes long and short (bundled) option spellings,
extracts typed values and splices response files contents into arguments mid-scan.
"""

from .config import ScannerConfig
from .response import expand_response, insert_response, tokenize_response
from .scanner.command_line import CommandLineArgs
from .scanner.cursor import ArgCursor
from .vector import ArgumentVector

__version__ = "0.1.0"

__all__ = [
    "ArgCursor",
    "ArgumentVector",
    "CommandLineArgs",
    "ScannerConfig",
    "expand_response",
    "insert_response",
    "tokenize_response",
]

from pathlib import Path

import pytest

from argscan.cli.arguments import parse_cli_arguments
from argscan.cli.errors import (
    ResponseFileLimitExceededError,
    ResponseFileNotFoundError,
)
from argscan.feature_flags import DEFAULT_MAX_RESPONSE_FILES


def test_cli_arguments_defaults() -> None:
    args = parse_cli_arguments(["argscan"])
    assert args.program == "argscan"
    assert not args.help
    assert not args.version
    assert not args.verbose
    assert args.max_response_files == DEFAULT_MAX_RESPONSE_FILES
    assert args.arguments == []
    assert args.response_files == []


def test_cli_arguments_own_options() -> None:
    args = parse_cli_arguments(
        ["argscan", "-hv0", "--version", "--print-args", "--max-response-files", "0x10"],
    )
    assert args.help
    assert args.version
    assert args.verbose
    assert args.null_separated
    assert args.print_args
    assert args.max_response_files == 16
    assert args.arguments == []


def test_cli_arguments_print_args_negated() -> None:
    assert not parse_cli_arguments(["argscan", "--print-args=-"]).print_args


def test_cli_arguments_unknown_options_are_passed_through() -> None:
    args = parse_cli_arguments(
        ["argscan", "a", "-x", "--unknown=1", "-vX", "-", "--", "-v"],
    )
    assert args.verbose
    assert args.arguments == ["a", "-x", "--unknown=1", "-X", "-", "-v"]


def test_cli_arguments_expand_response_file(tmp_path: Path) -> None:
    response_file = tmp_path / "args.rsp"
    response_file.write_text('a "b c" # comment\n-v\n')

    args = parse_cli_arguments(["argscan", f"@{response_file}", "d"])
    assert args.verbose
    assert args.arguments == ["a", "b c", "d"]
    assert args.response_files == [response_file]


def test_cli_arguments_nested_response_files(tmp_path: Path) -> None:
    inner = tmp_path / "inner.rsp"
    inner.write_text("nested")
    outer = tmp_path / "outer.rsp"
    outer.write_text(f'head "@{inner}" tail')

    args = parse_cli_arguments(["argscan", f"@{outer}"])
    assert args.arguments == ["head", "nested", "tail"]
    assert args.response_files == [outer, inner]


def test_cli_arguments_self_referencing_response_file(tmp_path: Path) -> None:
    response_file = tmp_path / "loop.rsp"
    response_file.write_text(f'x "@{response_file}"')

    with pytest.raises(ResponseFileLimitExceededError) as exc_info:
        parse_cli_arguments(["argscan", "--max-response-files=3", f"@{response_file}"])
    assert exc_info.value.limit == 3
    assert exc_info.value.path == response_file


def test_cli_arguments_missing_response_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.rsp"
    with pytest.raises(ResponseFileNotFoundError) as exc_info:
        parse_cli_arguments(["argscan", f"@{missing}"])
    assert exc_info.value.path == missing
    assert "[response-file-not-found-error]" in repr(exc_info.value)


def test_cli_arguments_default_response_file(tmp_path: Path) -> None:
    default = tmp_path / "argscan.rsp"
    default.write_text("--null first")

    args = parse_cli_arguments(["argscan", "second"], default_response_file=default)
    assert args.null_separated
    assert args.arguments == ["first", "second"]
    assert args.response_files == [default]


def test_cli_arguments_default_response_file_counts_toward_limit(tmp_path: Path) -> None:
    default = tmp_path / "argscan.rsp"
    default.write_text("--max-response-files=1")
    other = tmp_path / "other.rsp"
    other.write_text("x")

    with pytest.raises(ResponseFileLimitExceededError):
        parse_cli_arguments(["argscan", f"@{other}"], default_response_file=default)

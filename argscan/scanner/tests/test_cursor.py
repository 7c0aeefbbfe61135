import pytest

from argscan.config import ScannerConfig
from argscan.scanner import ArgCursor, ScanState, match_short, match_short_value
from argscan.values import to_text
from argscan.vector import ArgumentVector


def _cursor(*args: str, config: ScannerConfig | None = None) -> ArgCursor:
    return ArgCursor(ArgumentVector(["prog", *args]), config)


def test_cursor_program_name_only_has_no_next() -> None:
    assert not _cursor().has_next()


def test_cursor_empty_vector_has_no_next() -> None:
    assert not ArgCursor(ArgumentVector([])).has_next()


def test_cursor_classifies_tokens() -> None:
    cursor = _cursor("-a", "file", "-")

    assert cursor.prepare_next()
    assert cursor.current_token == "-a"
    assert cursor.current_index == 1

    assert not cursor.prepare_next()
    assert cursor.current_token == "file"

    assert cursor.prepare_next()
    assert cursor.current_token == "-"
    assert not cursor.has_next()


def test_cursor_prepare_next_past_end() -> None:
    cursor = _cursor()
    with pytest.raises(AssertionError):
        cursor.prepare_next()


def test_cursor_unmatched_token_is_left_on_next_prepare() -> None:
    cursor = _cursor("-xyz", "file")
    assert cursor.prepare_next()
    assert not match_short(cursor, "a")

    assert not cursor.prepare_next()
    assert cursor.current_token == "file"


def test_cursor_stays_on_bundle_after_match() -> None:
    cursor = _cursor("-ab")
    assert cursor.prepare_next()
    assert match_short(cursor, "a")
    assert cursor.state == ScanState.IN_SHORT_BUNDLE

    assert cursor.has_next()
    assert cursor.prepare_next()
    assert cursor.remaining == "b"
    assert match_short(cursor, "b")
    assert not cursor.has_next()


def test_cursor_disable_option_parsing() -> None:
    cursor = _cursor("--", "-a")
    assert cursor.prepare_next()
    cursor.disable_option_parsing()

    assert not cursor.options_enabled
    assert not cursor.prepare_next()
    assert cursor.current_token == "-a"


def test_cursor_consume_prefix_char() -> None:
    cursor = _cursor("@file")
    assert not cursor.prepare_next()

    assert not cursor.consume_prefix_char("-")
    assert cursor.consume_prefix_char("@")
    assert cursor.remaining == "file"
    assert cursor.current_token == "@file"


def test_cursor_reset_rewinds_to_first_argument() -> None:
    cursor = _cursor("a", "b")
    while cursor.has_next():
        cursor.prepare_next()

    assert cursor.reset()
    assert cursor.next_index == 1
    assert cursor.current_index is None
    assert cursor.prepare_next() is False
    assert cursor.current_token == "a"


def test_cursor_reset_keeps_option_parsing_disabled() -> None:
    cursor = _cursor("-a")
    cursor.disable_option_parsing()
    assert cursor.reset()
    assert not cursor.prepare_next()


def test_cursor_reset_clears_consumed_options() -> None:
    config = ScannerConfig(clear_consumed_options=True)
    cursor = _cursor("-o", "out", "file", "-v", config=config)

    assert cursor.prepare_next()
    value = match_short_value(cursor, "o", to_text)
    assert value is not None
    assert value.raw == "out"
    assert value.from_next_token

    assert not cursor.prepare_next()
    assert cursor.prepare_next()
    assert match_short(cursor, "v")
    assert not cursor.has_next()

    assert cursor.reset()
    assert cursor.vector.as_list() == ["prog", "file"]


def test_cursor_reset_compaction_failure_is_reported() -> None:
    def allocator(size: int) -> list[str]:
        raise MemoryError

    config = ScannerConfig(clear_consumed_options=True)
    cursor = ArgCursor(ArgumentVector(["prog", "-v"], allocator=allocator), config)
    assert cursor.prepare_next()

    assert not cursor.reset()
    assert cursor.vector.as_list() == ["prog", "-v"]
    assert cursor.next_index == 2


def test_cursor_take_value_without_next_entry() -> None:
    cursor = _cursor("-o")
    assert cursor.prepare_next()
    assert cursor.take_value("", next_token_fallback=True) == ""
    assert not cursor.consumed_next_token


def test_cursor_rewind_to_bounds() -> None:
    cursor = _cursor("a")
    with pytest.raises(AssertionError):
        cursor.rewind_to(0)
    with pytest.raises(AssertionError):
        cursor.rewind_to(3)

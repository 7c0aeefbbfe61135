import pytest

from argscan.scanner import BundleState, ScanState
from argscan.scanner._state import (
    continue_short_bundle,
    end_short_bundle,
    match_short_option,
)


def _match(state: BundleState, token: str, option: str, max_depth: int = 255) -> BundleState | None:
    return match_short_option(state, token, option, marker="-", max_depth=max_depth)


def test_bundle_state_fresh_token_requires_marker() -> None:
    assert _match(BundleState(), "abc", "a") is None
    assert _match(BundleState(), "--abc", "a") is None

    state = _match(BundleState(), "-abc", "a")
    assert state == BundleState(token_offset=2, bundle_depth=1, confirmed_depth=0)
    assert state.scan_state == ScanState.IN_SHORT_BUNDLE


def test_bundle_state_within_bundle_matches_next_character() -> None:
    state = BundleState(token_offset=2, bundle_depth=1, confirmed_depth=1)
    assert _match(state, "-abc", "c") is None
    assert _match(state, "-abc", "b") == BundleState(
        token_offset=3,
        bundle_depth=2,
        confirmed_depth=1,
    )


def test_bundle_state_depth_is_capped() -> None:
    state = BundleState(token_offset=2, bundle_depth=2, confirmed_depth=2)
    matched = _match(state, "-abc", "b", max_depth=2)
    assert matched is not None
    assert matched.bundle_depth == 2


def test_bundle_state_empty_option_never_matches() -> None:
    assert _match(BundleState(), "-abc", "") is None


def test_bundle_state_option_must_be_single_character() -> None:
    with pytest.raises(AssertionError):
        _match(BundleState(), "-abc", "ab")


def test_bundle_state_continue_after_match() -> None:
    state = BundleState(token_offset=2, bundle_depth=1, confirmed_depth=0)
    continued = continue_short_bundle(state, "-abc")
    assert continued == BundleState(token_offset=2, bundle_depth=1, confirmed_depth=1)

    # No match since last continuation
    assert continue_short_bundle(continued, "-abc") is None


def test_bundle_state_continue_at_boundary() -> None:
    assert continue_short_bundle(BundleState(), "-abc") is None
    assert continue_short_bundle(BundleState(token_offset=4, bundle_depth=3), "-abc") is None


def test_bundle_state_end_short_bundle() -> None:
    state = end_short_bundle("-ofile")
    assert state.token_offset == len("-ofile")
    assert state.scan_state == ScanState.AT_BOUNDARY

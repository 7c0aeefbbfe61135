from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class ScanState(Enum):
    """State of an cursor in respect to short option bundles."""

    # Next `prepare_next` loads new token from argument vector
    AT_BOUNDARY = auto()

    # Token contains several short options (e.g `-abc`) and some of them were matched
    IN_SHORT_BUNDLE = auto()


@dataclass(frozen=True, slots=True)
class BundleState:
    """Short option bundle state of an current token.

    Matching is an pure function of this state and token text, which returns new state.
    """

    # Index of an first unconsumed character within token
    token_offset: int = 0

    # Amount of an short options matched within token, zero means no bundle
    bundle_depth: int = 0

    # Depth that was already seen by `prepare_next`
    # bundle is continued only if depth advanced past that watermark
    confirmed_depth: int = 0

    @property
    def scan_state(self) -> ScanState:
        if self.bundle_depth:
            return ScanState.IN_SHORT_BUNDLE
        return ScanState.AT_BOUNDARY


def match_short_option(
    state: BundleState,
    token: str,
    option: str,
    *,
    marker: str,
    max_depth: int,
) -> BundleState | None:
    """Match single short option character against token.

    Fresh token must start with marker and option (`-a`), within bundle next character must be option.

    :returns state: New bundle state or None if option does not match (state must be left as-is)
    """
    assert len(option) <= 1, f"Short option must be an single character, got '{option}'"
    if not option:
        return None

    if state.bundle_depth:
        if not token.startswith(option, state.token_offset):
            return None
        return replace(
            state,
            token_offset=state.token_offset + len(option),
            bundle_depth=min(state.bundle_depth + 1, max_depth),
        )

    if not token.startswith(marker + option, state.token_offset):
        return None
    return replace(
        state,
        token_offset=state.token_offset + len(marker) + len(option),
        bundle_depth=1,
    )


def continue_short_bundle(state: BundleState, token: str) -> BundleState | None:
    """Decide whether cursor must stay on same token for next short option.

    :returns state: State with raised watermark or None if next token must be loaded
    """
    if not state.bundle_depth or state.token_offset >= len(token):
        return None
    if state.confirmed_depth >= state.bundle_depth:
        # Nothing was matched since last time, rest of an bundle is unknown to host
        return None
    return replace(state, confirmed_depth=state.bundle_depth)


def end_short_bundle(token: str) -> BundleState:
    """State for token which rest is consumed (e.g as short option value)."""
    return BundleState(token_offset=len(token))

from dataclasses import dataclass, field

# Bundle depth is tracked as an small counter, further combining is not tracked
MAX_SHORT_BUNDLE_DEPTH = 255


@dataclass
class ScannerConfig:
    """Configuration for argument scanner (cursor and option matchers).

    Does not affect how response files are tokenized, only how argument vector is walked
    """

    # Value matchers consume next vector entry as value when nothing is attached
    # e.g `-o file` is same as `-o=file` / `-ofile`
    next_token_fallback: bool = field(default=True)

    # Allow short options and their bundles (e.g `-abc`)
    # Short matchers are contract violation when disabled
    enable_short_options: bool = field(default=True)

    # Remember every consumed option (and consumed next-token value)
    # and drop them from argument vector on cursor reset, so only operands are left
    clear_consumed_options: bool = field(default=False)

    # Leading character of an option-like token
    option_marker: str = field(default="-")

    # Bundle depth cap, see `MAX_SHORT_BUNDLE_DEPTH`
    max_bundle_depth: int = field(default=MAX_SHORT_BUNDLE_DEPTH)

    def __post_init__(self) -> None:
        assert len(self.option_marker) == 1, "Option marker must be an single character"
        assert self.max_bundle_depth >= 1

"""Non-numeric conversions of an option values."""

# Spellings of an value that are treated as false, anything else is true (even empty value)
FALSE_SPELLINGS = ("0", "no", "false", "off", "-")


def to_text(text: str) -> str:
    return text


def to_char(text: str) -> str:
    """First character of an value or empty string if value is empty."""
    return text[:1]


def to_bool(text: str) -> bool:
    return text.strip().lower() not in FALSE_SPELLINGS

"""Locale-invariant formatting helpers shared by all three records."""

import datetime as dt
from collections.abc import Mapping
from typing import Final

SECTION_DELIMITER: Final[str] = "*"
HEADER_KEY_WIDTH: Final[int] = 11
MICROMETERS_PER_METER: Final[float] = 1e6

# reserved characters of the format, each mapped on a harmless substitute
_ESCAPE_TABLE: Final[dict[int, str]] = str.maketrans(
    {"=": ":", "<": "[", ">": "]", "\\": "|", "*": "#"}
)


def escape(text: str) -> str:
    """
    Replace characters that would be mistaken for format syntax.

    The substitution is one-to-one, so the length of `text` is preserved.

    :param text: Free text to be placed in a header or trailer line.
    :returns: The escaped text.
    """
    return text.translate(_ESCAPE_TABLE)


def format_date(value: dt.datetime) -> str:
    """Format a timestamp as `ddMMyyyyHHmm`."""
    return (
        f"{value.day:02d}{value.month:02d}{value.year:04d}"
        f"{value.hour:02d}{value.minute:02d}"
    )


def format_scale(value: float) -> str:
    """Format a spacing with 5 significant digits, e.g. `1E-06` or `0.00025`."""
    return format(value, ".5G")


def format_height(value: float, decimals: int) -> str:
    """Convert a height in meters to micrometers with a fixed number of decimals."""
    return f"{value * MICROMETERS_PER_METER:.{decimals}f}"


def header_line(key: str, value: object) -> str:
    return f"{key:<{HEADER_KEY_WIDTH}} = {value}"


def pad_keys(entries: Mapping[str, str]) -> dict[str, str]:
    """
    Trim all keys and values and pad the keys to the length of the longest key.

    Keys that are equal after trimming collapse into one entry, the last value wins.

    :param entries: The raw key/value pairs.
    :returns: The padded key/value pairs in their original order.
    """
    trimmed = {key.strip(): value.strip() for key, value in entries.items()}
    width = max(map(len, trimmed), default=0)
    return {key.ljust(width): value for key, value in trimmed.items()}


def render_section(lines: list[str]) -> str:
    """Join the lines of a record and terminate it with the section delimiter."""
    return "".join(f"{line}\n" for line in [*lines, SECTION_DELIMITER])

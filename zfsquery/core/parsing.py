"""
Helpers for turning zpool/zfs tab-separated output into typed values.
"""
import re
from datetime import datetime, timezone
from typing import List

from .exceptions.zfs_exceptions import LineFormatError, ParseError, UnexpectedOutputError

# Layout of the creation column printed by `zfs holds`, e.g. "Mon Jan  2 15:04 2006".
HOLD_TIMESTAMP_LAYOUT = "%a %b %d %H:%M %Y"

_DIGITS = re.compile(r"[0-9]+")


def split_lines(text: str) -> List[str]:
    """Split command output into lines, ignoring surrounding whitespace."""
    normalized = text.strip().replace("\r\n", "\n")
    if not normalized:
        return []
    return normalized.split("\n")


def split_columns(line: str, expected: int, entity: str) -> List[str]:
    cols = line.split("\t")
    if len(cols) != expected:
        raise LineFormatError(entity, expected, len(cols), line)
    return cols


def parse_uint(text: str, width: int, description: str) -> int:
    """Parse a base-10 unsigned integer that must fit in ``width`` bits."""
    if not _DIGITS.fullmatch(text):
        raise ParseError(description, text, f"unable to convert {text!r} to uint{width}: invalid syntax")

    value = int(text)
    if value >= 1 << width:
        raise ParseError(description, text, f"unable to convert {text!r} to uint{width}: value out of range")
    return value


def parse_uint64(text: str, description: str) -> int:
    return parse_uint(text, 64, description)


def parse_uint8(text: str, description: str) -> int:
    return parse_uint(text, 8, description)


def parse_epoch_seconds(text: str, description: str) -> datetime:
    """Parse seconds since the epoch into an aware datetime in the local zone."""
    seconds = parse_uint64(text, description)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise ParseError(description, text, f"unable to convert {text!r} to timestamp: {e}") from e


def parse_local_timestamp(text: str, layout: str, description: str) -> datetime:
    """Parse a human readable timestamp and attach the process's local zone."""
    try:
        naive = datetime.strptime(text, layout)
    except ValueError as e:
        raise ParseError(description, text, f"unable to convert {text!r} to timestamp: {e}") from e

    try:
        return naive.astimezone()
    except (OverflowError, OSError) as e:
        raise ParseError(description, text, f"failed to load local time location: {e}") from e


def parse_only_line(text: str, description: str) -> str:
    """Return the single line of ``text``."""
    lines = split_lines(text)
    if len(lines) != 1:
        raise UnexpectedOutputError(description, text, len(lines))
    return lines[0]


def require_non_empty(text: str, field: str, description: str) -> str:
    if not text:
        raise ParseError(description, text, f"invalid empty {field}: {text!r}")
    return text

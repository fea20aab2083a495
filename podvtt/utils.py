"""
Shared utility functions for podvtt.

Provides the checked natural-number arithmetic used to turn the digit groups
of a WebVTT timestamp into an exact number of milliseconds, and the reverse
conversion used when formatting timestamps back to text.
"""

from typing import Tuple

MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60


def check_natural(value: int, name: str = "value") -> int:
    """
    Ensure a value is a non-negative integer.

    Args:
        value: Value to check
        name: Name used in the error message

    Returns:
        The value unchanged

    Raises:
        ValueError: If the value is negative or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def seconds_to_milliseconds(seconds: int) -> int:
    """Convert whole seconds into milliseconds."""
    return check_natural(seconds, "seconds") * MILLISECONDS_PER_SECOND


def minutes_to_milliseconds(minutes: int) -> int:
    """Convert whole minutes into milliseconds."""
    return seconds_to_milliseconds(check_natural(minutes, "minutes") * SECONDS_PER_MINUTE)


def hours_to_milliseconds(hours: int) -> int:
    """Convert whole hours into milliseconds."""
    return minutes_to_milliseconds(check_natural(hours, "hours") * MINUTES_PER_HOUR)


def components_to_milliseconds(hours: int, minutes: int, seconds: int, milliseconds: int) -> int:
    """
    Combine timestamp fields into a single integral number of milliseconds.

    Integer arithmetic only, so no precision is lost. Fields are not range
    checked here; the parser enforces minutes and seconds below 60.

    Args:
        hours: Hours field
        minutes: Minutes field
        seconds: Seconds field
        milliseconds: Milliseconds field

    Returns:
        Total number of milliseconds

    Example:
        >>> components_to_milliseconds(0, 1, 30, 500)
        90500
    """
    return (
        hours_to_milliseconds(hours)
        + minutes_to_milliseconds(minutes)
        + seconds_to_milliseconds(seconds)
        + check_natural(milliseconds, "milliseconds")
    )


def milliseconds_to_components(total_milliseconds: int) -> Tuple[int, int, int, int]:
    """
    Split a number of milliseconds into (hours, minutes, seconds, milliseconds).

    Example:
        >>> milliseconds_to_components(90500)
        (0, 1, 30, 500)
    """
    total_seconds, milliseconds = divmod(
        check_natural(total_milliseconds, "total_milliseconds"), MILLISECONDS_PER_SECOND
    )
    total_minutes, seconds = divmod(total_seconds, SECONDS_PER_MINUTE)
    hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
    return hours, minutes, seconds, milliseconds


def format_timestamp(total_milliseconds: int) -> str:
    """
    Format milliseconds as HH:MM:SS.mmm.

    Hours are zero padded to two digits but not truncated, so values of
    100 hours or more produce a longer hours field.

    Example:
        >>> format_timestamp(90500)
        '00:01:30.500'
    """
    hours, minutes, seconds, milliseconds = milliseconds_to_components(total_milliseconds)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"


# CPython refuses str/int conversions above 4300 digits, so convert in chunks.
_DIGIT_CHUNK = 1000


def digits_to_natural(digits: str) -> int:
    """
    Convert a string of ASCII digits of any length into an integer.

    Example:
        >>> digits_to_natural("0042")
        42
    """
    value = 0
    for offset in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[offset:offset + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def natural_to_digits(value: int) -> str:
    """
    Format a non-negative integer of any size as decimal digits.

    Example:
        >>> natural_to_digits(42)
        '42'
    """
    check_natural(value)
    base = 10 ** _DIGIT_CHUNK
    chunks = []
    while value >= base:
        value, chunk = divmod(value, base)
        chunks.append(f"{chunk:0{_DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))

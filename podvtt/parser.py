"""
WebVTT parser for podvtt.

Parses the small subset of WebVTT that podcast caption files use: a bare
``WEBVTT`` header followed by numbered cues, each with a time range and one
or more lines of text. Cue settings, styling, regions and comments are not
supported, and only Unix line endings are accepted.

Parsing is all or nothing. A document either matches the grammar completely
and yields every caption, or it yields nothing at all. There is no error
position to report; caption files are added by hand, one at a time, so a
failure is easy to track down by eye.

Example:
    >>> captions = parse_vtt("WEBVTT\\n\\n1\\n00:00:00.000 --> 00:00:02.000\\nHello\\n")
    >>> captions[0].payload
    Payload(('Hello',))
"""

import logging
from typing import List, Optional

from .models import Caption, Payload, Timestamp
from .utils import digits_to_natural

logger = logging.getLogger(__name__)

HEADER = "WEBVTT\n\n"
TIMING_SEPARATOR = " --> "

_DIGITS = frozenset("0123456789")


class VTTParseError(ValueError):
    """Raised when a document does not match the supported WebVTT subset."""


class _Mismatch(Exception):
    """Raised internally when the input stops matching the grammar."""


class _Reader:
    """Cursor over the document text with the primitive matchers."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def fail(self, expected: str):
        raise _Mismatch(f"expected {expected} at offset {self.pos}")

    def literal(self, expected: str) -> None:
        if not self.text.startswith(expected, self.pos):
            self.fail(repr(expected))
        self.pos += len(expected)

    def digits(self, count: int) -> int:
        """Read exactly ``count`` ASCII digits."""
        chunk = self.text[self.pos:self.pos + count]
        if len(chunk) != count or not all(char in _DIGITS for char in chunk):
            self.fail(f"{count} digits")
        self.pos += count
        return int(chunk)

    def natural(self) -> int:
        """Read one or more ASCII digits, as many as there are."""
        end = self.pos
        while end < len(self.text) and self.text[end] in _DIGITS:
            end += 1
        if end == self.pos:
            self.fail("a number")
        value = digits_to_natural(self.text[self.pos:end])
        self.pos = end
        return value

    def line(self) -> str:
        """Read a non-empty line and its terminating newline."""
        end = self.text.find("\n", self.pos)
        if end == -1 or end == self.pos:
            self.fail("a line of text")
        value = self.text[self.pos:end]
        self.pos = end + 1
        return value


def _timestamp(reader: _Reader) -> Timestamp:
    # HH:MM:SS.TTT, every field zero padded
    hours = reader.digits(2)
    reader.literal(":")
    minutes = reader.digits(2)
    if minutes >= 60:
        reader.fail("minutes below 60")
    reader.literal(":")
    seconds = reader.digits(2)
    if seconds >= 60:
        reader.fail("seconds below 60")
    reader.literal(".")
    milliseconds = reader.digits(3)
    return Timestamp.from_components(hours, minutes, seconds, milliseconds)


def _caption(reader: _Reader) -> Caption:
    identifier = reader.natural()
    reader.literal("\n")
    start = _timestamp(reader)
    reader.literal(TIMING_SEPARATOR)
    end = _timestamp(reader)
    reader.literal("\n")
    if not start < end:
        reader.fail(f"a caption ending after it starts ({start} --> {end})")

    # Lines can't be empty, so the payload runs to the next blank line.
    lines = [reader.line()]
    while reader.peek() not in ("", "\n"):
        lines.append(reader.line())

    return Caption(identifier=identifier, start=start, end=end, payload=Payload(lines))


def _document(reader: _Reader) -> List[Caption]:
    reader.literal(HEADER)
    captions: List[Caption] = []
    if reader.at_end():
        return captions
    captions.append(_caption(reader))
    while not reader.at_end():
        reader.literal("\n")
        captions.append(_caption(reader))
    return captions


def parse_vtt(content: str) -> Optional[List[Caption]]:
    """
    Parse a WebVTT document into captions.

    The document must start with ``WEBVTT`` and a blank line, followed by
    zero or more captions separated by blank lines. Each caption is a
    numeric identifier line, a ``HH:MM:SS.TTT --> HH:MM:SS.TTT`` line and
    one or more lines of text, each ending in a newline. Every caption must
    end strictly after it starts.

    Args:
        content: Complete document text

    Returns:
        Captions in document order, or None if the document doesn't match
    """
    reader = _Reader(content)
    try:
        return _document(reader)
    except _Mismatch as e:
        logger.debug(f"VTT content did not parse: {e}")
        return None


def parse_vtt_or_raise(content: str) -> List[Caption]:
    """
    Parse a WebVTT document, raising instead of returning None.

    Raises:
        VTTParseError: If the document doesn't match the supported subset
    """
    captions = parse_vtt(content)
    if captions is None:
        raise VTTParseError("Failed to parse VTT content")
    return captions


def parse_timestamp(text: str) -> Optional[Timestamp]:
    """
    Parse a single HH:MM:SS.TTT timestamp.

    Example:
        >>> parse_timestamp("00:01:30.500").total_milliseconds
        90500
        >>> parse_timestamp("00:60:00.000") is None
        True
    """
    reader = _Reader(text)
    try:
        timestamp = _timestamp(reader)
    except _Mismatch:
        return None
    if not reader.at_end():
        return None
    return timestamp

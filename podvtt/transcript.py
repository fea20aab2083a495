"""
Transcript rendering for podvtt.

Turns parsed captions into a transcript with one line per speaker turn.
"""

import re
from typing import Iterable, List

from .models import Caption

SPEAKER_MARKER = ">>"

# Words break on ASCII whitespace and Unicode space separators (Zs) only,
# not on \x1c-\x1f, NEL, U+2028 or U+2029.
_WORD_PATTERN = re.compile(r"[\S\x1c-\x1f\x85\u2028\u2029]+")


def split_words(line: str) -> List[str]:
    """
    Split a line into words on whitespace.

    Example:
        >>> split_words("  >> Hello,\tworld! ")
        ['>>', 'Hello,', 'world!']
    """
    return _WORD_PATTERN.findall(line)


def _segment_words(words: Iterable[str]) -> List[List[str]]:
    segments: List[List[str]] = []
    current: List[str] = []
    for word in words:
        if word == SPEAKER_MARKER:
            segments.append(current)
            current = [word]
        else:
            current.append(word)
    segments.append(current)
    return segments


def render_transcript(captions: Iterable[Caption]) -> List[str]:
    """
    Render captions as a transcript.

    Everything except the text is thrown away. Caption files wrap lines
    wherever they like, so the text is split into words and rejoined, with
    a new line started only where the speaker changes. Input like this:

        >> We've been sent
        good weather.
        >> Praise be.

    comes out as:

        >> We've been sent good weather.
        >> Praise be.

    Args:
        captions: Captions in document order

    Returns:
        Transcript lines; each speaker turn starts with ">> "
    """
    words = [
        word
        for caption in captions
        for line in caption.payload
        for word in split_words(line)
    ]
    return [" ".join(segment) for segment in _segment_words(words) if segment]


def format_transcript(lines: Iterable[str]) -> str:
    """Join transcript lines into text, one per line, newline terminated."""
    text = "\n".join(lines)
    return f"{text}\n" if text else ""

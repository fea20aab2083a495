"""
WebVTT writer for podvtt.

Serializes captions back into the same WebVTT subset the parser reads.
"""

from typing import Iterable

from .models import Caption
from .parser import HEADER, TIMING_SEPARATOR
from .utils import natural_to_digits


def format_caption(caption: Caption) -> str:
    """Format a single caption block, newline terminated."""
    lines = [
        natural_to_digits(caption.identifier),
        f"{caption.start}{TIMING_SEPARATOR}{caption.end}",
        *caption.payload,
    ]
    return "".join(f"{line}\n" for line in lines)


def format_vtt(captions: Iterable[Caption]) -> str:
    """
    Format captions into valid VTT content.

    Blocks are separated by one blank line and the document ends right after
    the last payload line, so the output parses back to the same captions.

    Args:
        captions: Captions to write

    Returns:
        VTT content as string

    Example:
        >>> format_vtt([]).startswith('WEBVTT')
        True
    """
    return HEADER + "\n".join(format_caption(caption) for caption in captions)

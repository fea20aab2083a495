"""
podvtt - Podcast WebVTT captions to transcripts

A small library for parsing the subset of WebVTT used by podcast caption
files and rendering the captions as a speaker-segmented transcript.

Features:
- Strict, all-or-nothing parsing of numbered WebVTT cues
- Exact millisecond timestamps and validated time ranges
- Transcript rendering with one line per speaker turn (">> ")
- Writing captions back out as WebVTT
- Loading captions from local files or HTTP(S) URLs

Example usage:
    >>> from podvtt import parse_vtt, render_transcript
    >>>
    >>> captions = parse_vtt(
    ...     "WEBVTT\\n\\n1\\n00:00:00.000 --> 00:00:02.000\\n>>\\nHello, world!\\n"
    ... )
    >>> render_transcript(captions)
    ['>> Hello, world!']
"""

import logging

__version__ = "0.1.0"
__author__ = "podvtt Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core parsing functions
from .parser import parse_vtt, parse_vtt_or_raise, parse_timestamp, VTTParseError

# Transcript rendering
from .transcript import render_transcript, format_transcript, split_words, SPEAKER_MARKER

# VTT writing
from .writer import format_vtt, format_caption

# Loading and saving
from .loader import (
    TranscriptBuilder,
    transcript_from_config,
    read_vtt_file,
    read_vtt_url,
    download_vtt_content,
    save_transcript,
    is_url,
)

# Timestamp utilities
from .utils import (
    components_to_milliseconds,
    milliseconds_to_components,
    format_timestamp,
    digits_to_natural,
    natural_to_digits,
)

# Data models
from .models import Caption, Payload, Timestamp, TranscriptConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Core parsing functions
    "parse_vtt",
    "parse_vtt_or_raise",
    "parse_timestamp",
    "VTTParseError",

    # Transcript rendering
    "render_transcript",
    "format_transcript",
    "split_words",
    "SPEAKER_MARKER",

    # VTT writing
    "format_vtt",
    "format_caption",

    # Loading and saving
    "TranscriptBuilder",
    "transcript_from_config",
    "read_vtt_file",
    "read_vtt_url",
    "download_vtt_content",
    "save_transcript",
    "is_url",

    # Timestamp utilities
    "components_to_milliseconds",
    "milliseconds_to_components",
    "format_timestamp",
    "digits_to_natural",
    "natural_to_digits",

    # Models
    "Caption",
    "Payload",
    "Timestamp",
    "TranscriptConfig",
]

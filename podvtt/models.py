"""
Data models for podvtt.

Defines the immutable caption types produced by the parser and the
configuration object used by the loader.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional, Tuple

from .utils import (
    check_natural,
    components_to_milliseconds,
    format_timestamp,
    milliseconds_to_components,
    MILLISECONDS_PER_SECOND,
)


@dataclass(frozen=True, order=True)
class Timestamp:
    """Offset into a recording with millisecond resolution."""
    total_milliseconds: int

    def __post_init__(self):
        check_natural(self.total_milliseconds, "total_milliseconds")

    @classmethod
    def from_components(cls, hours: int, minutes: int, seconds: int, milliseconds: int) -> "Timestamp":
        return cls(components_to_milliseconds(hours, minutes, seconds, milliseconds))

    @property
    def hours(self) -> int:
        return milliseconds_to_components(self.total_milliseconds)[0]

    @property
    def minutes(self) -> int:
        return milliseconds_to_components(self.total_milliseconds)[1]

    @property
    def seconds(self) -> int:
        return milliseconds_to_components(self.total_milliseconds)[2]

    @property
    def milliseconds(self) -> int:
        return milliseconds_to_components(self.total_milliseconds)[3]

    def total_seconds(self) -> float:
        return self.total_milliseconds / MILLISECONDS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    def __str__(self) -> str:
        return format_timestamp(self.total_milliseconds)


class Payload(tuple):
    """
    Text lines of a caption. Always holds at least one line.

    Behaves like a plain tuple of strings, so it compares equal to a tuple
    with the same lines.
    """

    def __new__(cls, lines: Iterable[str]):
        lines = tuple(lines)
        if not lines:
            raise ValueError("Caption payload must contain at least one line")
        return super().__new__(cls, lines)

    @property
    def head(self) -> str:
        return self[0]

    @property
    def tail(self) -> Tuple[str, ...]:
        return tuple(self[1:])

    def __repr__(self) -> str:
        return f"Payload({tuple(self)!r})"


@dataclass(frozen=True)
class Caption:
    """A single WebVTT cue: identifier, time range and lines of text."""
    identifier: int
    start: Timestamp
    end: Timestamp
    payload: Payload

    def __post_init__(self):
        check_natural(self.identifier, "identifier")
        if not isinstance(self.payload, Payload):
            # frozen dataclass, so bypass __setattr__
            object.__setattr__(self, "payload", Payload(self.payload))
        if not self.start < self.end:
            raise ValueError(
                f"Caption {self.identifier} must end after it starts "
                f"({self.start} --> {self.end})"
            )

    @property
    def duration(self) -> timedelta:
        return self.end.to_timedelta() - self.start.to_timedelta()

    @property
    def text(self) -> str:
        return "\n".join(self.payload)


@dataclass
class TranscriptConfig:
    """Configuration for a single VTT to transcript conversion."""
    source: str  # local path or http(s) URL
    output_file: Optional[str] = None
    timeout: int = 30
    verify_ssl: bool = True
    encoding: str = "utf-8"

"""
Data models for vttformat.

Defines the in-memory subtitle representation shared by the parser and
the writer, plus the load result and source configuration.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


@dataclass(frozen=True, order=True)
class TimeCode:
    """
    A point in time in canonical hours/minutes/seconds/milliseconds form.

    Fields passed out of range are carried over on construction, so
    ``TimeCode(0, 0, 0, 1500) == TimeCode(0, 0, 1, 500)``. A negative total
    is clamped to zero.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self):
        total = (self.hours * MS_PER_HOUR + self.minutes * MS_PER_MINUTE
                 + self.seconds * MS_PER_SECOND + self.milliseconds)
        total = max(0, total)
        hours, rest = divmod(total, MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, MS_PER_SECOND)
        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "milliseconds", milliseconds)

    @classmethod
    def from_milliseconds(cls, total: int) -> "TimeCode":
        return cls(milliseconds=total)

    @property
    def total_milliseconds(self) -> int:
        return (self.hours * MS_PER_HOUR + self.minutes * MS_PER_MINUTE
                + self.seconds * MS_PER_SECOND + self.milliseconds)


@dataclass
class Cue:
    """
    One subtitle entry.

    ``text`` may span several ``\\n``-separated lines, start with an
    internal alignment marker such as ``{\\an8}`` and carry generic
    ``<font color="...">`` markup. ``extra`` holds an optional style/voice
    annotation written after the text. ``number`` is the display index
    assigned by :meth:`Subtitle.renumber`.
    """
    start_time: TimeCode
    end_time: TimeCode
    text: str = ""
    extra: Optional[str] = None
    number: int = 0


@dataclass
class Subtitle:
    """Ordered cues in file order plus the detected header."""
    header: str = ""
    cues: List[Cue] = field(default_factory=list)

    def renumber(self, start: int = 1) -> None:
        for number, cue in enumerate(self.cues, start=start):
            cue.number = number


class LoadStatus(str, Enum):
    """Outcome of a WebVTT load."""
    ACCEPTED = "accepted"
    DEFER_TO_VARIANT = "defer_to_variant"


@dataclass
class LoadResult:
    """
    Result of parsing WebVTT lines.

    On ``DEFER_TO_VARIANT`` the subtitle is the partial, untranslated parse
    and ``reason`` says why another handler should take the input.
    """
    subtitle: Subtitle
    status: LoadStatus = LoadStatus.ACCEPTED
    error_count: int = 0
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == LoadStatus.ACCEPTED


@dataclass
class ReadConfig:
    """Configuration for reading WebVTT from a file path or HTTP URL."""
    source: str
    encoding: str = "utf-8-sig"
    timeout: int = 30
    verify_ssl: bool = True

"""
WebVTT timecode parsing and formatting.

Timecode lines come in three shapes:
    hh:mm:ss.mmm --> hh:mm:ss.mmm
    mm:ss.mmm --> hh:mm:ss.mmm
    mm:ss.mmm --> mm:ss.mmm
Short shapes are normalized to the full one by prefixing the missing hours
with ``00:``. Any field may carry a leading minus sign; such values are
accepted and clamped by :class:`~vttformat.models.TimeCode`.
"""

import re
from typing import Optional, Tuple

from .models import TimeCode

_FULL = r"-?\d+:-?\d+:-?\d+\.-?\d+"
_SHORT = r"-?\d+:-?\d+\.-?\d+"

# Pre-compiled shape patterns; compiled regex objects are safe to share
_TIMECODE_FULL_PATTERN = re.compile(rf"^\s*{_FULL}\s*-->\s*{_FULL}")
_TIMECODE_MIDDLE_PATTERN = re.compile(rf"^\s*{_SHORT}\s*-->\s*{_FULL}")
_TIMECODE_SHORT_PATTERN = re.compile(rf"^\s*{_SHORT}\s*-->\s*{_SHORT}")
_ARROW_PATTERN = re.compile(r"-->\s*")
_FIELD_SEPARATORS = re.compile(r"[:. ]")

SHAPE_FULL = "full"
SHAPE_MIDDLE = "middle"
SHAPE_SHORT = "short"


class TimeCodeFormatError(ValueError):
    """Raised when a timecode token cannot be read."""


def match_timecode_shape(line: str) -> Optional[str]:
    """
    Return which timecode shape a line has, or None.

    Example:
        >>> match_timecode_shape("00:01.500 --> 00:00:02.000")
        'middle'
    """
    if "-->" not in line:
        return None
    if _TIMECODE_FULL_PATTERN.match(line):
        return SHAPE_FULL
    if _TIMECODE_MIDDLE_PATTERN.match(line):
        return SHAPE_MIDDLE
    if _TIMECODE_SHORT_PATTERN.match(line):
        return SHAPE_SHORT
    return None


def normalize_timecode_line(line: str) -> Optional[str]:
    """
    Rewrite a timecode line of any accepted shape into the full shape.

    Leading whitespace is dropped. Cue settings after the timecodes are
    kept as they are.

    Returns:
        The normalized line, or None if the line is not a timecode line.

    Example:
        >>> normalize_timecode_line("00:01.500 --> 00:02.000 line:10%")
        '00:00:01.500 --> 00:00:02.000 line:10%'
    """
    shape = match_timecode_shape(line)
    if shape is None:
        return None
    s = line.lstrip()
    if shape == SHAPE_MIDDLE:
        s = "00:" + s
    elif shape == SHAPE_SHORT:
        s = "00:" + _ARROW_PATTERN.sub(lambda m: m.group(0) + "00:", s, count=1)
    return s


def split_timecode_line(line: str) -> Tuple[str, str]:
    """
    Split a normalized timecode line at the arrow.

    The second part still carries any cue settings; :func:`parse_timecode`
    only reads the first four fields of it.
    """
    start, _, rest = line.strip().partition("-->")
    return start.strip(), rest.strip()


def parse_timecode(token: str) -> TimeCode:
    """
    Parse an ``h:m:s.ms`` token into a TimeCode.

    Fields are split on ``:``, ``.`` and space; only the first four are
    read and no range check is made.

    Raises:
        TimeCodeFormatError: If there are fewer than four fields or one of
            them is not an integer.

    Example:
        >>> parse_timecode("00:01:30.500")
        TimeCode(hours=0, minutes=1, seconds=30, milliseconds=500)
    """
    fields = _FIELD_SEPARATORS.split(token.strip())
    if len(fields) < 4:
        raise TimeCodeFormatError(f"Expected h:m:s.ms, got {token!r}")
    try:
        hours, minutes, seconds, milliseconds = (int(f) for f in fields[:4])
    except ValueError as e:
        raise TimeCodeFormatError(f"Non-numeric field in timecode {token!r}") from e
    return TimeCode(hours, minutes, seconds, milliseconds)


def format_timecode(tc: TimeCode) -> str:
    """
    Format a TimeCode as ``hh:mm:ss.mmm`` (hours grow past two digits).

    Example:
        >>> format_timecode(TimeCode(101, 2, 3, 4))
        '101:02:03.004'
    """
    return f"{tc.hours:02d}:{tc.minutes:02d}:{tc.seconds:02d}.{tc.milliseconds:03d}"
